"""Adapter implementations for qrsecure."""

from .qr_code_adapter import QRCodeAdapter
from .http_summarizer_adapter import HTTPSummarizerAdapter
from .gemini_summarizer_adapter import GeminiSummarizerAdapter
from .memory_history_adapter import InMemoryHistoryAdapter
from .json_history_adapter import JsonFileHistoryAdapter
from .telegram_notifier_adapter import TelegramNotifierAdapter
from .console_adapter import ConsoleAdapter
from .stdout_adapter import StdoutAdapter

__all__ = [
    'QRCodeAdapter',
    'HTTPSummarizerAdapter',
    'GeminiSummarizerAdapter',
    'InMemoryHistoryAdapter',
    'JsonFileHistoryAdapter',
    'TelegramNotifierAdapter',
    'ConsoleAdapter',
    'StdoutAdapter',
]
