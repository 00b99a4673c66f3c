"""Command handlers for qrsecure."""

from .templates_handler import TemplatesHandler
from .generate_handler import (
    GenerateHandler,
    SubmissionResult,
    SubmissionState,
)
from .history_handler import HistoryHandler
from .admin_handler import AdminHandler

# Table-driven dispatch
COMMAND_HANDLERS = {
    'templates': TemplatesHandler,
    'generate': GenerateHandler,
    'history': HistoryHandler,
    'admin': AdminHandler,
}

__all__ = [
    'COMMAND_HANDLERS',
    'TemplatesHandler',
    'GenerateHandler',
    'SubmissionResult',
    'SubmissionState',
    'HistoryHandler',
    'AdminHandler',
]
