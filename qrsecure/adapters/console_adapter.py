"""Console notifier and confirmation adapter."""

import asyncio
import os
import sys
from ..interfaces import IConfirmationPrompt, INotifier

ICONS = {"info": "✅", "warn": "⚠️", "error": "❌"}


class ConsoleAdapter:
    """Adapter for terminal notifications, file output and prompts."""

    def __init__(self, output_dir: str = ".", accept_summary: bool = False):
        self.output_dir = output_dir
        self.accept_summary = accept_summary
        self.saved_paths: list[str] = []

    async def notify(self, level: str, title: str, description: str) -> None:
        """Print notification."""
        stream = sys.stderr if level == "error" else sys.stdout
        print(f"{ICONS.get(level, '')} {title}: {description}", file=stream)

    async def send_qr(self, png: bytes, filename: str) -> None:
        """Write QR PNG into the output directory."""
        os.makedirs(self.output_dir, exist_ok=True)
        path = os.path.join(self.output_dir, filename)
        with open(path, "wb") as f:
            f.write(png)
        self.saved_paths.append(path)
        print(f"QR code saved to {path}")

    async def confirm_summary(self, summary: str) -> bool:
        """Show summary and ask whether to encode it instead."""
        print("Your data is too long for a QR code. Suggested summary:\n")
        print(summary)
        print()
        if self.accept_summary:
            print("Summary pre-approved with --accept-summary.")
            return True

        try:
            answer = await asyncio.to_thread(
                input, "Use this summary for the QR code? [y/N] "
            )
        except EOFError:
            print("ERROR: no answer on stdin, summary rejected", file=sys.stderr)
            return False
        return answer.strip().lower() in ("y", "yes")
