"""Summarization service adapter (HTTP JSON API)."""

import sys
import requests
from ..interfaces import ISummarizer, SummaryResult


class HTTPSummarizerAdapter:
    """Adapter for a summarization endpoint.

    The endpoint takes {"text": ...} and answers with
    {"success": true, "data": {"summary": ...}} or
    {"success": false, "error": ...}.
    """

    def __init__(self, url: str, timeout: int = 30):
        self.url = url
        self.timeout = timeout

    def _result_from_data(self, data: dict) -> SummaryResult:
        """Build SummaryResult from the response envelope."""
        if not data.get("success"):
            return SummaryResult(success=False, error=data.get("error"))

        summary = (data.get("data") or {}).get("summary", "")
        if not summary:
            return SummaryResult(success=False, error="empty summary")
        return SummaryResult(success=True, summary=summary)

    def summarize(self, text: str) -> SummaryResult:
        """Request a summary of text."""
        if not text:
            return SummaryResult(success=False, error="nothing to summarize")

        try:
            resp = requests.post(
                self.url,
                json={"text": text},
                timeout=self.timeout
            )

            if resp.status_code != 200:
                print(
                    f"ERROR: summarize failed: {resp.status_code}",
                    file=sys.stderr
                )
                return SummaryResult(
                    success=False,
                    error=f"summarizer returned {resp.status_code}"
                )

            return self._result_from_data(resp.json())

        except (requests.RequestException, ValueError) as e:
            print(f"ERROR: summarize request failed: {e}", file=sys.stderr)
            return SummaryResult(success=False, error=str(e))
