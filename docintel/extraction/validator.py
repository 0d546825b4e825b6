"""Coerces parsed model output into a template-shaped field mapping."""

import json
from typing import Any

from docintel.extraction.models import NOT_SPECIFIED
from docintel.extraction.templates import FieldTemplate


def build_fields(data: dict[str, Any], template: FieldTemplate) -> dict[str, str]:
    """Build a flat ``field -> string`` mapping in template order.

    Every template key is present; anything the model left out, nulled, or
    answered with blank text becomes the sentinel. Keys outside the template
    are dropped unless the template is open-ended, in which case they follow
    the baseline keys in the order the model gave them.
    """
    fields = {name: _coerce(data.get(name)) for name in template.field_names}
    if template.open_ended:
        for key, value in data.items():
            if key not in fields and isinstance(key, str) and key.strip():
                fields[key] = _coerce(value)
    return fields


def is_filled(value: str | None) -> bool:
    """True for a real value: neither missing, blank, nor the sentinel."""
    return value is not None and value.strip() != "" and value != NOT_SPECIFIED


def _coerce(value: Any) -> str:
    if value is None:
        return NOT_SPECIFIED
    if isinstance(value, bool):
        return "Yes" if value else "No"
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str):
        cleaned = value.strip()
        if not cleaned or cleaned.lower() == NOT_SPECIFIED.lower():
            return NOT_SPECIFIED
        return cleaned
    if isinstance(value, list):
        items = [_coerce(item) for item in value]
        joined = ", ".join(item for item in items if is_filled(item))
        return joined or NOT_SPECIFIED
    if isinstance(value, dict):
        return json.dumps(value, ensure_ascii=False) if value else NOT_SPECIFIED
    return str(value)
