"""User notification interface (adapter pattern)."""

from typing import Protocol


class INotifier(Protocol):
    """Interface for user-facing notifications."""

    async def notify(self, level: str, title: str, description: str) -> None:
        """Show a notification; level is "info", "warn" or "error"."""
        ...

    async def send_qr(self, png: bytes, filename: str) -> None:
        """Deliver the generated QR image."""
        ...
