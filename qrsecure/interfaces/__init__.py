"""Interface definitions for qrsecure collaborators."""

from .i_summarizer import ISummarizer, SummaryResult
from .i_qr_generator import IQRGenerator
from .i_history_repository import IHistoryRepository
from .i_notifier import INotifier
from .i_confirmation import IConfirmationPrompt
from .i_log_sink import ILogSink

__all__ = [
    'ISummarizer',
    'SummaryResult',
    'IQRGenerator',
    'IHistoryRepository',
    'INotifier',
    'IConfirmationPrompt',
    'ILogSink',
]
