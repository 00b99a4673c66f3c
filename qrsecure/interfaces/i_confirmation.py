"""Summary confirmation interface (adapter pattern)."""

from typing import Protocol


class IConfirmationPrompt(Protocol):
    """Interface for asking the user to accept a lossy summary."""

    async def confirm_summary(self, summary: str) -> bool:
        """Show the candidate summary; True means use it."""
        ...
