"""Per-term, per-object-type relationship count cache."""

from termcount.errors import (
    InvalidTaxonomy,
    InvalidTerm,
    ObjectTypeNotInTaxonomy,
    TermCountError,
)

__all__ = [
    "TermCountError",
    "InvalidTaxonomy",
    "ObjectTypeNotInTaxonomy",
    "InvalidTerm",
]
