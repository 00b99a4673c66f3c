"""Summarization adapter backed by Gemini."""

from google import genai
from ..interfaces import ISummarizer, SummaryResult

PROMPT = """
You shorten form submissions so they fit inside a QR code.
Rewrite the form data below in at most {limit} characters.
Keep the "Password:" and "Form Type:" lines exactly as they are.
Keep one "Label: value" line per field and drop filler words.

Do NOT wrap the answer in markdown or code fences, or add explanations.
"""


def strip_fences(text: str) -> str:
    """Drop ``` fences (and a language tag) around model output."""
    text = text.strip()
    if not text.startswith("```"):
        return text
    text = text.strip("`")
    if "\n" in text:
        _, text = text.split("\n", 1)
    return text.strip()


class GeminiSummarizerAdapter:
    """Adapter for the Gemini generative API."""

    def __init__(self, api_key: str, model: str, limit: int = 2000):
        self.client = genai.Client(api_key=api_key)
        self.model = model
        self.limit = limit

    def summarize(self, text: str) -> SummaryResult:
        """Ask the model for a compressed version of text."""
        prompt = PROMPT.format(limit=self.limit) + f"\n\nForm data:\n{text}"
        try:
            response = self.client.models.generate_content(
                model=self.model, contents=prompt
            )
            summary = strip_fences(response.text or "")
        except Exception as e:
            return SummaryResult(success=False, error=f"Gemini error: {e}")

        if not summary:
            return SummaryResult(success=False, error="Gemini returned no text")
        return SummaryResult(success=True, summary=summary)
