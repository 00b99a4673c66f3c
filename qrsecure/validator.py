"""Per-field validation driven by the template schema.

Each template gets a pydantic model built from its FieldSpec table, so a
single model_validate call reports every invalid field at once.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from types import MappingProxyType
from typing import Any, Literal, Mapping, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    StrictBool,
    ValidationError,
    constr,
    create_model,
)

from .templates import (
    FieldKind,
    FieldSpec,
    FormTemplate,
    FormTemplateId,
    get_schema,
    list_templates,
    parse_template_id,
)

# Anchored with \Z: "$" would also accept a trailing newline
EMAIL_PATTERN = (
    r"(?i)^(?!\.)(?!.*\.\.)[A-Z0-9_'+\-.]*[A-Z0-9_+-]"
    r"@(?:[A-Z0-9][A-Z0-9\-]*\.)+[A-Z]{2,}\Z"
)
PHONE_PATTERN = r"^\+?[1-9][0-9]{9,14}\Z"

FALLBACK_MESSAGE = "Please fill out all required fields."


@dataclass(frozen=True)
class FormValues:
    """Validated submission, tagged with its template."""
    template_id: FormTemplateId
    fields: Mapping[str, Any]

    def __post_init__(self):
        object.__setattr__(
            self, "fields", MappingProxyType(dict(self.fields))
        )

    def get(self, name: str, default: Any = None) -> Any:
        return self.fields.get(name, default)


@dataclass
class ValidationResult:
    """Either validated values or per-field error messages."""
    values: Optional[FormValues] = None
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.values is not None and not self.errors

    def combined_message(self) -> str:
        """Single notification text for all errors."""
        messages = [m for m in self.errors.values() if m]
        return " ".join(messages) if messages else FALLBACK_MESSAGE


def _field_definition(spec: FieldSpec) -> tuple:
    """(annotation, default) pair for create_model."""
    if spec.kind == FieldKind.EMAIL:
        return constr(strict=True, pattern=EMAIL_PATTERN), ...
    if spec.kind == FieldKind.TEL:
        return constr(strict=True, pattern=PHONE_PATTERN), ...
    if spec.kind == FieldKind.DATE:
        return date, ...
    if spec.kind == FieldKind.RADIO:
        return Literal[spec.options], ...
    if spec.kind == FieldKind.CHECKBOX:
        return StrictBool, False
    if not spec.required:
        return constr(strict=True, min_length=spec.min_length), ""
    return constr(strict=True, min_length=max(spec.min_length, 1)), ...


def build_form_model(template: FormTemplate) -> type[BaseModel]:
    """Pydantic model mirroring the template's fields, in order."""
    return create_model(
        f"{template.id.value[:1].upper()}{template.id.value[1:]}Model",
        __config__=ConfigDict(extra="ignore", regex_engine="python-re"),
        **{spec.name: _field_definition(spec) for spec in template.fields},
    )


FORM_MODELS = {t.id: build_form_model(t) for t in list_templates()}


def _prepare(raw_input: Mapping[str, Any]) -> dict[str, Any]:
    """Treat None as absent so defaults apply; datetimes become dates."""
    data = {}
    for name, value in raw_input.items():
        if value is None:
            continue
        if isinstance(value, datetime):
            value = value.date()
        data[name] = value
    return data


def validate(template_id, raw_input: Mapping[str, Any]) -> ValidationResult:
    """Validate every field of the template; never stops at the first error."""
    template_id = parse_template_id(template_id)
    model = FORM_MODELS[template_id]

    try:
        instance = model.model_validate(_prepare(raw_input))
    except ValidationError as e:
        failed = {err["loc"][0] for err in e.errors() if err["loc"]}
        errors = {
            spec.name: spec.message
            for spec in get_schema(template_id)
            if spec.name in failed
        }
        return ValidationResult(errors=errors)

    return ValidationResult(
        values=FormValues(template_id, instance.model_dump())
    )
