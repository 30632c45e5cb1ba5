"""Models package - DDL, entities and schemas."""

from termcount.models.common import (
    TERM_META_DDL,
    counted_types_key,
    object_count_key,
)
from termcount.models.taxonomy import (
    RELATIONSHIP_DDL,
    RELATIONSHIP_INDEXES,
    TERM_DDL,
    TERM_SEQUENCE_DDL,
    ObjectTypeSchema,
    TaxonomySchema,
    Term,
)

ALL_DDL = [
    # Taxonomy
    TERM_SEQUENCE_DDL,
    TERM_DDL,
    RELATIONSHIP_DDL,
    *RELATIONSHIP_INDEXES,
    # Common
    TERM_META_DDL,
]

__all__ = [
    # Common
    "TERM_META_DDL",
    "counted_types_key",
    "object_count_key",
    # Taxonomy
    "TERM_SEQUENCE_DDL",
    "TERM_DDL",
    "RELATIONSHIP_DDL",
    "RELATIONSHIP_INDEXES",
    "Term",
    "ObjectTypeSchema",
    "TaxonomySchema",
    # All DDL
    "ALL_DDL",
]
