"""Size check for serialized text, with summarization fallback."""

import asyncio
from dataclasses import dataclass
from typing import ClassVar, Union

from .interfaces import ILogSink, ISummarizer

GENERIC_FAILURE = "Could not shorten the data. Please edit manually."


@dataclass(frozen=True)
class Direct:
    """Text fits; encode as-is."""
    text: str
    kind: ClassVar[str] = "direct"


@dataclass(frozen=True)
class NeedsSummary:
    """Text overflowed; the user must accept or reject the candidate."""
    candidate_summary: str
    original_text: str
    kind: ClassVar[str] = "needsSummary"


@dataclass(frozen=True)
class SummaryFailed:
    """Text overflowed and could not be shortened."""
    reason: str
    kind: ClassVar[str] = "summaryFailed"


Outcome = Union[Direct, NeedsSummary, SummaryFailed]


class OverflowResolver:
    """Routes oversized payloads through the summarizer."""

    def __init__(
        self, summarizer: ISummarizer, logger: ILogSink, threshold: int = 2000
    ):
        self.summarizer = summarizer
        self.logger = logger
        self.threshold = threshold

    def overflows(self, text: str) -> bool:
        return len(text) > self.threshold

    async def resolve(self, text: str) -> Outcome:
        """Classify text; only calls the summarizer above the threshold."""
        if not self.overflows(text):
            return Direct(text)

        self.logger.log(
            "info",
            f"Payload is {len(text)} chars (limit {self.threshold}), "
            "requesting summary"
        )

        try:
            result = await asyncio.to_thread(self.summarizer.summarize, text)
        except Exception as e:
            self.logger.log("error", f"Summarizer raised: {e}")
            return SummaryFailed(str(e) or GENERIC_FAILURE)

        if not result.success or not result.summary:
            self.logger.log("warn", f"Summarization failed: {result.error}")
            return SummaryFailed(result.error or GENERIC_FAILURE)

        return NeedsSummary(candidate_summary=result.summary, original_text=text)
