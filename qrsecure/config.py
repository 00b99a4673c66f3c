"""Configuration management."""

import os
import sys


def _int_env(name: str, default: int) -> int:
    """Read an integer variable, falling back to default when unset."""
    raw = os.getenv(name, "")
    if not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        print(f"ERROR: {name} must be an integer, got {raw!r}", file=sys.stderr)
        sys.exit(1)


# Payload Configuration
VIEWER_ORIGIN = os.getenv(
    "QRSECURE_VIEWER_ORIGIN", "http://localhost:9002"
).rstrip("/")
OVERFLOW_THRESHOLD = _int_env("QRSECURE_OVERFLOW_THRESHOLD", 2000)

# QR Rendering Configuration
QR_ERROR_CORRECTION = os.getenv("QRSECURE_QR_ERROR_CORRECTION", "M").upper()
QR_SIZE = _int_env("QRSECURE_QR_SIZE", 300)
QR_MARGIN = 2
QR_DARK_COLOR = "#0A4D68"
QR_LIGHT_COLOR = "#F0F8FF"

# History Configuration
HISTORY_PATH = os.getenv("QRSECURE_HISTORY_PATH", "qr_history.json")
HISTORY_KEY = "qrCodeHistory"
HISTORY_CAPACITY = 50

# Summarizer Configuration
SUMMARIZER_URL = os.getenv(
    "QRSECURE_SUMMARIZER_URL", "http://localhost:3400/summarize"
)
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY", "")
GEMINI_MODEL = os.getenv("QRSECURE_GEMINI_MODEL", "gemini-flash-latest")

# Admin Configuration
ADMIN_PASSWORD = os.getenv("QRSECURE_ADMIN_PASSWORD", "1922K1396s*")

# Delivery Configuration
TELEGRAM_TOKEN = os.getenv("TELEGRAM_TOKEN", "")
TELEGRAM_CHAT_ID = os.getenv("TELEGRAM_CHAT_ID", "")
OUTPUT_DIR = os.getenv("QRSECURE_OUTPUT_DIR", ".")

# Logging Configuration
LOG_LEVEL = os.getenv("QRSECURE_LOG_LEVEL", "info").lower()
