"""Taxonomy repositories - terms and object relationships."""

from termcount.repositories.taxonomy.relationship import RelationshipRepository
from termcount.repositories.taxonomy.term import TermRepository

__all__ = [
    "RelationshipRepository",
    "TermRepository",
]
