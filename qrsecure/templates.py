"""Static catalog of form templates and their field schemas."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from .errors import UnknownTemplateError


class FormTemplateId(str, Enum):
    """Closed set of form kinds."""
    STUDENT_BIO = "studentBio"
    JOB_APPLICATION = "jobApplication"
    EVENT_REGISTRATION = "eventRegistration"
    CONTACT_FORM = "contactForm"
    COLLEGE_ADMISSION = "collegeAdmission"


class FieldKind(str, Enum):
    """Input kind of a form field."""
    TEXT = "text"
    EMAIL = "email"
    TEL = "tel"
    PASSWORD = "password"
    TEXTAREA = "textarea"
    DATE = "date"
    RADIO = "radio"
    CHECKBOX = "checkbox"


@dataclass(frozen=True)
class FieldSpec:
    """Schema of a single form field."""
    name: str
    label: str
    kind: FieldKind
    required: bool = True
    span: bool = False
    options: tuple[str, ...] = ()
    min_length: int = 0
    message: str = ""
    placeholder: str = ""


@dataclass(frozen=True)
class FormTemplate:
    """Named form schema with an ordered field list."""
    id: FormTemplateId
    label: str
    icon: str
    fields: tuple[FieldSpec, ...] = field(default_factory=tuple)


GENDERS = ("Male", "Female", "Other")
PAYMENT_METHODS = ("Online", "Offline")

_PHONE_MESSAGE = "Please enter a valid mobile number."
_EMAIL_MESSAGE = "Please enter a valid email address."


def _password() -> FieldSpec:
    return FieldSpec(
        "password", "Password", FieldKind.PASSWORD, span=True,
        min_length=6,
        message="Password must be at least 6 characters.",
        placeholder="Enter a secure password",
    )


def _text(name, label, min_length, message, placeholder="", span=False,
          kind=FieldKind.TEXT) -> FieldSpec:
    return FieldSpec(
        name, label, kind, span=span, min_length=min_length,
        message=message, placeholder=placeholder,
    )


def _email() -> FieldSpec:
    return FieldSpec(
        "email", "Email", FieldKind.EMAIL, message=_EMAIL_MESSAGE,
        placeholder="santhosh@example.com",
    )


def _phone() -> FieldSpec:
    return FieldSpec(
        "phone", "Phone Number", FieldKind.TEL, message=_PHONE_MESSAGE,
        placeholder="+91 9876543210",
    )


def _dob() -> FieldSpec:
    return FieldSpec(
        "dob", "Date of Birth", FieldKind.DATE,
        message="Date of birth is required.",
    )


def _gender() -> FieldSpec:
    return FieldSpec(
        "gender", "Gender", FieldKind.RADIO, options=GENDERS,
        message="Please select a gender.",
    )


def _full_name() -> FieldSpec:
    return _text("fullName", "Full Name", 3, "Full name is required",
                 "Santhosh A")


def _name() -> FieldSpec:
    return _text("name", "Name", 3, "Name is required", "Santhosh A")


def _address() -> FieldSpec:
    return _text("address", "Address", 5, "Address is required.",
                 "123 Main St, City, Country", span=True,
                 kind=FieldKind.TEXTAREA)


# Table-driven registry: declaration order is emission order
_TEMPLATES = (
    FormTemplate(
        FormTemplateId.STUDENT_BIO, "Student Bio", "graduation-cap", (
            _password(),
            _full_name(),
            _dob(),
            _gender(),
            _phone(),
            _email(),
            _text("enrollmentNumber", "Enrollment Number", 1,
                  "Enrollment number is required.", "URK21CS100"),
            _text("courseDepartment", "Course/Department", 2,
                  "Course/Department is required.",
                  "B.Sc Computer Science", span=True),
            _address(),
        ),
    ),
    FormTemplate(
        FormTemplateId.JOB_APPLICATION, "Job Application", "briefcase", (
            _password(),
            _full_name(),
            _email(),
            _phone(),
            _text("position", "Position Applied For", 2,
                  "Position is required.", "Software Engineer"),
            _text("experience", "Experience (Years)", 1,
                  "Experience is required", "5"),
            FieldSpec("resumeAttached", "Resume Attached",
                      FieldKind.CHECKBOX, required=False,
                      message="Resume Attached must be true or false."),
            _text("skills", "Skills", 5, "Skills are required.",
                  "React, Node.js, TypeScript", span=True,
                  kind=FieldKind.TEXTAREA),
            FieldSpec("coverLetter", "Cover Letter", FieldKind.TEXTAREA,
                      required=False, span=True,
                      message="Cover letter must be text.",
                      placeholder="Your cover letter..."),
        ),
    ),
    FormTemplate(
        FormTemplateId.EVENT_REGISTRATION, "Event Registration", "calendar", (
            _password(),
            _name(),
            _email(),
            _phone(),
            _text("eventName", "Event Name", 2, "Event name is required.",
                  "Tech Conference 2024"),
            _text("preferredSlot", "Preferred Slot", 2,
                  "Preferred slot is required.", "Morning Session"),
            FieldSpec("paymentMethod", "Payment Method", FieldKind.RADIO,
                      options=PAYMENT_METHODS,
                      message="Please select a payment method."),
        ),
    ),
    FormTemplate(
        FormTemplateId.CONTACT_FORM, "Contact Form", "message-square", (
            _password(),
            _name(),
            _email(),
            _phone(),
            _text("subject", "Subject", 2, "Subject is required.",
                  "Inquiry about your services", span=True),
            _text("message", "Message", 10,
                  "Message must be at least 10 characters.",
                  "Your message...", span=True, kind=FieldKind.TEXTAREA),
        ),
    ),
    FormTemplate(
        FormTemplateId.COLLEGE_ADMISSION, "College Admission", "building", (
            _password(),
            _full_name(),
            _dob(),
            _gender(),
            _text("fatherName", "Father's Name", 3,
                  "Father's name is required.", "Father's Name"),
            _text("motherName", "Mother's Name", 3,
                  "Mother's name is required.", "Mother's Name"),
            _phone(),
            _email(),
            _text("courseApplied", "Course Applied", 2,
                  "Course applied for is required.",
                  "B.Tech Computer Science"),
            _text("prevQualification", "Previous Qualification", 2,
                  "Previous qualification is required.",
                  "12th Grade / High School"),
            _text("marks", "Marks Obtained (%)", 1, "Marks are required.",
                  "95"),
            _address(),
        ),
    ),
)

_BY_ID = {template.id: template for template in _TEMPLATES}


def parse_template_id(value) -> FormTemplateId:
    """Coerce a string into a FormTemplateId."""
    if isinstance(value, FormTemplateId):
        return value
    try:
        return FormTemplateId(value)
    except ValueError:
        known = ", ".join(t.value for t in FormTemplateId)
        raise UnknownTemplateError(
            f"unknown template {value!r} (expected one of: {known})"
        ) from None


def list_templates() -> tuple[FormTemplate, ...]:
    """All templates in display order."""
    return _TEMPLATES


def get_template(template_id) -> FormTemplate:
    return _BY_ID[parse_template_id(template_id)]


def get_schema(template_id) -> tuple[FieldSpec, ...]:
    return get_template(template_id).fields


def template_label(template_id) -> Optional[str]:
    """Display label, or None for an unknown id."""
    try:
        return get_template(template_id).label
    except UnknownTemplateError:
        return None


def get_defaults(template_id) -> dict[str, Any]:
    """Empty value skeleton for a fresh form."""
    defaults: dict[str, Any] = {}
    for spec in get_schema(template_id):
        if spec.kind == FieldKind.CHECKBOX:
            defaults[spec.name] = False
        elif spec.kind in (FieldKind.DATE, FieldKind.RADIO):
            defaults[spec.name] = None
        else:
            defaults[spec.name] = ""
    return defaults
