"""유틸리티 모듈."""

from .validation import (
    require_fields,
    parse_month_key,
    month_key_of,
    previous_month_key,
    month_label,
)

__all__ = [
    "require_fields",
    "parse_month_key",
    "month_key_of",
    "previous_month_key",
    "month_label",
]
