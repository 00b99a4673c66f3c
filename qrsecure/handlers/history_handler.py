"""Handler for the history command."""

from ..errors import HistoryPersistenceError
from ..interfaces import IHistoryRepository, ILogSink, INotifier
from ..templates import template_label


class HistoryHandler:
    """Handler for history command - list or clear generated codes."""

    def __init__(
        self,
        history: IHistoryRepository,
        notifier: INotifier,
        logger: ILogSink
    ):
        self.history = history
        self.notifier = notifier
        self.logger = logger

    def format_entries(self, entries) -> str:
        """One line per entry, newest first."""
        if not entries:
            return "📊 No QR codes generated yet"

        lines = [f"📊 Recent QR codes ({len(entries)}/{self.history.capacity}):"]
        for idx, entry in enumerate(entries, 1):
            label = template_label(entry.form_type) or "Unknown"
            lines.append(f"{idx}. {entry.timestamp}  {label}  {entry.name or '-'}")
        return "\n".join(lines)

    async def handle(self, args) -> None:
        """Handle history command."""
        try:
            if getattr(args, "clear", False):
                self.history.clear()
                self.logger.log("info", "History cleared")
                await self.notifier.notify("info", "History Cleared", "")
                return

            print(self.format_entries(self.history.list()))

        except HistoryPersistenceError as e:
            self.logger.log("error", f"History access failed: {e}")
            await self.notifier.notify("error", "History Unavailable", str(e))
