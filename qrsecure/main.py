"""qrsecure - Main Entry Point."""

import argparse
import asyncio
import sys
from typing import Optional

from .config import (
    GEMINI_API_KEY,
    GEMINI_MODEL,
    HISTORY_CAPACITY,
    HISTORY_KEY,
    HISTORY_PATH,
    LOG_LEVEL,
    OUTPUT_DIR,
    OVERFLOW_THRESHOLD,
    QR_DARK_COLOR,
    QR_ERROR_CORRECTION,
    QR_LIGHT_COLOR,
    QR_MARGIN,
    QR_SIZE,
    SUMMARIZER_URL,
    TELEGRAM_CHAT_ID,
    TELEGRAM_TOKEN,
    VIEWER_ORIGIN,
)
from .adapters import (
    ConsoleAdapter,
    GeminiSummarizerAdapter,
    HTTPSummarizerAdapter,
    JsonFileHistoryAdapter,
    QRCodeAdapter,
    StdoutAdapter,
    TelegramNotifierAdapter,
)
from .adapters.qr_code_adapter import ERROR_CORRECTION_LEVELS
from .encoder import PayloadEncoder
from .handlers import COMMAND_HANDLERS, SubmissionState
from .overflow import OverflowResolver


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="qrsecure",
        description="Turn form data into a shareable QR code."
    )
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("templates", help="list form templates and fields")

    gen = sub.add_parser("generate", help="generate a QR code from form data")
    gen.add_argument("template", help="template id, e.g. contactForm")
    gen.add_argument("values", help="JSON file with field values, - for stdin")
    gen.add_argument(
        "--accept-summary", action="store_true",
        help=("pre-approve any suggested summary instead of asking; "
              "the summary is still printed")
    )

    hist = sub.add_parser("history", help="show generated QR codes")
    hist.add_argument("--clear", action="store_true", help="erase history")

    admin = sub.add_parser("admin", help="manage form templates")
    admin.add_argument("--password", help="admin password (prompted if omitted)")
    admin.add_argument(
        "--delete", nargs="*", default=[], metavar="ID",
        help="template ids to remove from this session's list"
    )
    return parser


def _config_errors() -> list[str]:
    """Settings that would only fail later, deep inside a command."""
    errors = []
    if QR_ERROR_CORRECTION not in ERROR_CORRECTION_LEVELS:
        levels = ", ".join(ERROR_CORRECTION_LEVELS)
        errors.append(
            f"QRSECURE_QR_ERROR_CORRECTION must be one of {levels}, "
            f"got {QR_ERROR_CORRECTION!r}"
        )
    if QR_SIZE <= 0:
        errors.append("QRSECURE_QR_SIZE must be a positive integer")
    if OVERFLOW_THRESHOLD <= 0:
        errors.append("QRSECURE_OVERFLOW_THRESHOLD must be a positive integer")
    if TELEGRAM_TOKEN and TELEGRAM_CHAT_ID:
        try:
            int(TELEGRAM_CHAT_ID)
        except ValueError:
            errors.append("TELEGRAM_CHAT_ID must be an integer chat id")
    return errors


def main(argv: Optional[list[str]] = None) -> None:
    """Main initialization."""
    args = build_parser().parse_args(argv)

    # Validate configuration
    errors = _config_errors()
    if errors:
        for error in errors:
            print(f"ERROR: {error}", file=sys.stderr)
        sys.exit(1)

    # Mount adapters
    logger = StdoutAdapter(min_level=LOG_LEVEL)
    console = ConsoleAdapter(
        output_dir=OUTPUT_DIR,
        accept_summary=getattr(args, "accept_summary", False)
    )
    notifier = console
    if TELEGRAM_TOKEN and TELEGRAM_CHAT_ID:
        notifier = TelegramNotifierAdapter(
            bot_token=TELEGRAM_TOKEN, chat_id=int(TELEGRAM_CHAT_ID)
        )
        logger.log("info", f"Delivering to Telegram chat {TELEGRAM_CHAT_ID}")

    history = JsonFileHistoryAdapter(
        path=HISTORY_PATH, key=HISTORY_KEY, capacity=HISTORY_CAPACITY
    )

    # Instantiate handler with dependencies
    handler_class = COMMAND_HANDLERS[args.command]
    if args.command == 'templates':
        handler = handler_class(logger)
    elif args.command == 'generate':
        if GEMINI_API_KEY:
            summarizer = GeminiSummarizerAdapter(
                api_key=GEMINI_API_KEY,
                model=GEMINI_MODEL,
                limit=OVERFLOW_THRESHOLD
            )
        else:
            summarizer = HTTPSummarizerAdapter(url=SUMMARIZER_URL)
        qr_generator = QRCodeAdapter(
            size=QR_SIZE,
            border=QR_MARGIN,
            fill_color=QR_DARK_COLOR,
            back_color=QR_LIGHT_COLOR,
            error_correction=QR_ERROR_CORRECTION
        )
        handler = handler_class(
            OverflowResolver(summarizer, logger, OVERFLOW_THRESHOLD),
            PayloadEncoder(qr_generator, logger, VIEWER_ORIGIN),
            history,
            notifier,
            console,
            logger
        )
    elif args.command == 'history':
        handler = handler_class(history, notifier, logger)
    else:
        handler = handler_class(notifier, logger)

    logger.log("debug", f"Running command: {args.command}")
    try:
        result = asyncio.run(handler.handle(args))
    except KeyboardInterrupt:
        sys.exit(130)
    except Exception as e:
        print(f"ERROR: {args.command} failed: {e}", file=sys.stderr)
        sys.exit(1)

    if args.command == "generate" and (
        result is None or result.state != SubmissionState.READY
    ):
        sys.exit(1)


if __name__ == "__main__":
    main()
