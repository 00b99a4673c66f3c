"""Handler for the generate command - the submission pipeline."""

import json
import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Optional

from ..encoder import PayloadEncoder, QRArtifact
from ..errors import (
    EncodingError,
    HistoryPersistenceError,
    UnknownTemplateError,
)
from ..history import HistoryEntry, build_entry
from ..interfaces import (
    IConfirmationPrompt,
    IHistoryRepository,
    ILogSink,
    INotifier,
)
from ..overflow import Direct, OverflowResolver, SummaryFailed
from ..serializer import serialize
from ..templates import get_template, parse_template_id
from ..validator import validate


class SubmissionState(str, Enum):
    EDITING = "editing"
    VALIDATING = "validating"
    SERIALIZED = "serialized"
    AWAITING_USER_CHOICE = "awaitingUserChoice"
    READY = "ready"
    FAILED = "failed"


@dataclass
class SubmissionResult:
    """Where a submission ended up, plus what it produced."""
    state: SubmissionState
    artifact: Optional[QRArtifact] = None
    entry: Optional[HistoryEntry] = None
    errors: dict[str, str] = field(default_factory=dict)
    text: str = ""
    trace: list[SubmissionState] = field(default_factory=list)


class GenerateHandler:
    """Handler for generate command - form values to QR code."""

    def __init__(
        self,
        resolver: OverflowResolver,
        encoder: PayloadEncoder,
        history: IHistoryRepository,
        notifier: INotifier,
        prompt: IConfirmationPrompt,
        logger: ILogSink
    ):
        self.resolver = resolver
        self.encoder = encoder
        self.history = history
        self.notifier = notifier
        self.prompt = prompt
        self.logger = logger

    async def _choose_text(
        self, text: str, trace: list[SubmissionState]
    ) -> Optional[str]:
        """Run overflow resolution; None text means back to editing."""
        outcome = await self.resolver.resolve(text)

        if isinstance(outcome, Direct):
            return outcome.text

        if isinstance(outcome, SummaryFailed):
            await self.notifier.notify(
                "error", "Summarization Failed", outcome.reason
            )
            return None

        trace.append(SubmissionState.AWAITING_USER_CHOICE)
        self.logger.log("info", "Awaiting user choice on summary")
        try:
            accepted = await self.prompt.confirm_summary(
                outcome.candidate_summary
            )
        except Exception as e:
            self.logger.log("error", f"Summary confirmation failed: {e}")
            await self.notifier.notify(
                "error",
                "Summary Not Confirmed",
                "No answer was given for the suggested summary; "
                "please shorten the form and try again."
            )
            return None
        if not accepted:
            self.logger.log("info", "Summary rejected, back to editing")
            return None

        self.logger.log("info", "Summary accepted")
        return outcome.candidate_summary

    async def _save_history(self, entry: HistoryEntry) -> None:
        try:
            self.history.append(entry)
        except HistoryPersistenceError as e:
            self.logger.log("error", f"History save failed: {e}")
            await self.notifier.notify(
                "warn",
                "History Not Saved",
                f"The QR code was generated but history could not be saved: {e}"
            )

    async def submit(
        self, template_id, raw_input: Mapping[str, Any]
    ) -> SubmissionResult:
        """Validate, serialize, resolve overflow, encode and record."""
        template_id = parse_template_id(template_id)
        self.logger.log("info", f"Submission for {template_id.value}")

        trace = [SubmissionState.VALIDATING]
        result = validate(template_id, raw_input)
        if not result.ok:
            self.logger.log(
                "info", f"Validation failed: {', '.join(result.errors)}"
            )
            await self.notifier.notify(
                "error", "Incomplete Form", result.combined_message()
            )
            return SubmissionResult(
                SubmissionState.EDITING, errors=result.errors,
                trace=trace + [SubmissionState.EDITING]
            )

        text = serialize(result.values)
        trace.append(SubmissionState.SERIALIZED)
        chosen = await self._choose_text(text, trace)
        if chosen is None:
            return SubmissionResult(
                SubmissionState.EDITING, text=text,
                trace=trace + [SubmissionState.EDITING]
            )

        try:
            artifact = await self.encoder.encode(chosen)
        except EncodingError:
            await self.notifier.notify(
                "error", "Error", "Failed to generate QR code."
            )
            return SubmissionResult(
                SubmissionState.FAILED, text=chosen,
                trace=trace + [SubmissionState.FAILED]
            )

        entry = build_entry(result.values, artifact.image_data)
        await self._save_history(entry)

        try:
            await self.notifier.send_qr(
                artifact.png, f"{template_id.value}-QRCodeSecure.png"
            )
            await self.notifier.notify(
                "info",
                "QR Code Generated",
                f"Scan it to view the {get_template(template_id).label} data."
            )
        except Exception as e:
            self.logger.log("error", f"QR delivery failed: {e}")
            print(f"ERROR: QR delivery failed: {e}", file=sys.stderr)

        self.logger.log("info", f"QR code {entry.id} generated")
        return SubmissionResult(
            SubmissionState.READY, artifact=artifact, entry=entry, text=chosen,
            trace=trace + [SubmissionState.READY]
        )

    def _load_values(self, path: str) -> dict:
        """Read raw form values from a JSON file ("-" for stdin)."""
        if path == "-":
            data = json.load(sys.stdin)
        else:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError("form values must be a JSON object")
        return data

    async def handle(self, args) -> Optional[SubmissionResult]:
        """Handle generate command."""
        try:
            template_id = parse_template_id(args.template)
            raw_input = self._load_values(args.values)
        except (UnknownTemplateError, OSError, ValueError) as e:
            self.logger.log("error", f"Bad generate input: {e}")
            await self.notifier.notify("error", "Invalid Input", str(e))
            return None

        return await self.submit(template_id, raw_input)
