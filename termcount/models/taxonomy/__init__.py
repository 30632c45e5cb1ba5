"""Taxonomy domain models - terms, relationships, registration schemas."""

from termcount.models.taxonomy.relationship import RELATIONSHIP_DDL, RELATIONSHIP_INDEXES
from termcount.models.taxonomy.schemas import ObjectTypeSchema, TaxonomySchema
from termcount.models.taxonomy.term import TERM_DDL, TERM_SEQUENCE_DDL, Term

__all__ = [
    "TERM_SEQUENCE_DDL",
    "TERM_DDL",
    "RELATIONSHIP_DDL",
    "RELATIONSHIP_INDEXES",
    "Term",
    "ObjectTypeSchema",
    "TaxonomySchema",
]
