from __future__ import annotations

from typing import Sequence

from ..core.exceptions import ValidationError


def require_non_empty(value: str | None, message: str) -> str:
    if not value or not value.strip():
        raise ValidationError(message)
    return value.strip()


def pick_division(value: str | None, divisions: Sequence[str], default: str) -> str:
    """Return ``value`` if it is a known division, otherwise ``default``."""
    if value and value in divisions:
        return value
    return default
