from __future__ import annotations

from typing import Optional

from ..core.exceptions import ValidationError


def require_non_empty(value: Optional[str], field_name: str, label: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{label} no puede estar vacío", field=field_name)
    return value.strip()
