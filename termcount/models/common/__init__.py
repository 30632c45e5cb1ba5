"""Common models - shared tables."""

from termcount.models.common.meta import (
    TERM_META_DDL,
    counted_types_key,
    object_count_key,
)

__all__ = [
    "TERM_META_DDL",
    "counted_types_key",
    "object_count_key",
]
