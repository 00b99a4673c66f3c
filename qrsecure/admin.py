"""Admin gate and the editable template working copy.

The gate is a shared plaintext password: a convenience lock, not access
control.
"""

import hmac
from typing import Optional

from . import config
from .templates import FormTemplate, list_templates, parse_template_id


def check_admin_password(
    candidate: str, expected: Optional[str] = None
) -> bool:
    if expected is None:
        expected = config.ADMIN_PASSWORD
    if not expected or candidate is None:
        return False
    return hmac.compare_digest(candidate.encode(), expected.encode())


class TemplateWorkingCopy:
    """Session-local list of templates; deletions never reach the registry."""

    def __init__(self):
        self._templates: list[FormTemplate] = list(list_templates())

    @property
    def templates(self) -> tuple[FormTemplate, ...]:
        return tuple(self._templates)

    def delete(self, template_id) -> bool:
        """Remove a template from this copy; False if already gone."""
        template_id = parse_template_id(template_id)
        before = len(self._templates)
        self._templates = [t for t in self._templates if t.id != template_id]
        return len(self._templates) != before
