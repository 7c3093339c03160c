"""Render output records through the user template."""

from .config import OutputRecord


def render(record: OutputRecord, template: str) -> str:
    """Substitute the record's values into the template.

    Plain text replacement: values are not escaped, so a template producing
    JSON needs values that are valid inside a JSON string.
    """
    return (
        template
        .replace("{icon}", record.icon or "")
        .replace("{tooltip}", record.tooltip or "")
        .replace("{class}", record.class_label or "")
        .replace("{percentage}", str(record.percentage))
    )
