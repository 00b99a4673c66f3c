"""History entries and the capped insert-at-head rule."""

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Any, Optional

from .validator import FormValues

DEFAULT_CAPACITY = 50


def iso_timestamp(now: Optional[datetime] = None) -> str:
    """UTC ISO-8601 timestamp with milliseconds, e.g. 2024-04-05T10:00:00.000Z."""
    now = now or datetime.now(timezone.utc)
    now = now.astimezone(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _jsonable(value: Any) -> Any:
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return value


@dataclass
class HistoryEntry:
    """One completed QR generation."""
    id: str
    timestamp: str
    qr_code_url: str
    form_data: dict[str, Any] = field(default_factory=dict)

    @property
    def name(self) -> str:
        """Normalized display name (fullName or name)."""
        return self.form_data.get("fullName") or ""

    @property
    def form_type(self) -> str:
        return self.form_data.get("formType", "")

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "timestamp": self.timestamp,
            "qrCodeUrl": self.qr_code_url,
            "formData": self.form_data,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "HistoryEntry":
        return cls(
            id=data["id"],
            timestamp=data["timestamp"],
            qr_code_url=data["qrCodeUrl"],
            form_data=dict(data.get("formData") or {}),
        )


def build_entry(
    values: FormValues, qr_code_url: str, now: Optional[datetime] = None
) -> HistoryEntry:
    """Denormalize a submission into a history entry keyed by timestamp."""
    stamp = iso_timestamp(now)
    fields = {k: _jsonable(v) for k, v in values.fields.items()}
    form_data = {
        "formType": values.template_id.value,
        "fullName": fields.get("fullName") or fields.get("name"),
    }
    form_data.update(fields)
    return HistoryEntry(
        id=stamp, timestamp=stamp, qr_code_url=qr_code_url,
        form_data=form_data,
    )


def push_entry(
    history: list[HistoryEntry], entry: HistoryEntry,
    capacity: int = DEFAULT_CAPACITY
) -> list[HistoryEntry]:
    """New list with entry at the head, truncated to capacity."""
    return [entry, *history][:capacity]
