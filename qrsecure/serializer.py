"""Canonical text rendering of validated form values."""

import re
from datetime import date, datetime
from typing import Any

from .templates import template_label
from .validator import FormValues

_CAPITAL_RE = re.compile(r"([A-Z])")


def field_label(name: str) -> str:
    """camelCase field name -> "Camel Case" label."""
    spaced = _CAPITAL_RE.sub(r" \1", name)
    return spaced[:1].upper() + spaced[1:]


_SUFFIXES = {1: "st", 2: "nd", 3: "rd"}


def _ordinal(day: int) -> str:
    if 11 <= day % 100 <= 13:
        return f"{day}th"
    return f"{day}{_SUFFIXES.get(day % 10, 'th')}"


def long_date(value: date) -> str:
    """Long human date, e.g. "April 5th, 2024"."""
    return f"{value:%B} {_ordinal(value.day)}, {value.year}"


def format_value(value: Any) -> str:
    if isinstance(value, (date, datetime)):
        return long_date(value)
    if isinstance(value, bool):
        return "Yes" if value else "No"
    return str(value)


def serialize(values: FormValues) -> str:
    """Render values as "Label: value" lines.

    Password and form type lead, then a blank line, then every other
    non-empty field in declaration order. False booleans are kept.
    """
    lines = []
    if "password" in values.fields:
        lines.append(f"Password: {values.fields['password']}")
    label = template_label(values.template_id) or "Unknown"
    lines.append(f"Form Type: {label}")
    lines.append("")

    for name, value in values.fields.items():
        if name in ("password", "formType"):
            continue
        if value is None or value == "":
            continue
        lines.append(f"{field_label(name)}: {format_value(value)}")

    return "".join(f"{line}\n" for line in lines)
