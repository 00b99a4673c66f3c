"""Handler for the templates command."""

from ..interfaces import ILogSink
from ..templates import FormTemplate, list_templates


def describe_template(template: FormTemplate) -> str:
    """Template name followed by its fields, required ones starred."""
    lines = [f"{template.label} ({template.id.value})"]
    for spec in template.fields:
        marker = " *" if spec.required else ""
        choices = f" [{'/'.join(spec.options)}]" if spec.options else ""
        lines.append(f"   {spec.name}: {spec.kind.value}{choices}{marker}")
    return "\n".join(lines)


class TemplatesHandler:
    """Handler for templates command."""

    def __init__(self, logger: ILogSink):
        self.logger = logger

    async def handle(self, args) -> None:
        """Handle templates command."""
        self.logger.log("debug", "Listing templates")
        print("\n\n".join(describe_template(t) for t in list_templates()))
