"""Summarization collaborator interface (adapter pattern)."""

from dataclasses import dataclass
from typing import Optional, Protocol


@dataclass(frozen=True)
class SummaryResult:
    """Envelope returned by the summarization service."""
    success: bool
    summary: str = ""
    error: Optional[str] = None


class ISummarizer(Protocol):
    """Interface for shortening oversized form text."""

    def summarize(self, text: str) -> SummaryResult:
        """Return a shorter semantic summary of text."""
        ...
