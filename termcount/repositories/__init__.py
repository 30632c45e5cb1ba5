"""Repositories package - data access layer for our database."""

from termcount.repositories.base import BaseRepository
from termcount.repositories.common import TermMetaRepository
from termcount.repositories.db import (
    close_db,
    connect,
    get_db,
    init_tables,
)
from termcount.repositories.protocols import (
    RelationshipStore,
    TaxonomyLookup,
    TermMetaStore,
    TermStore,
)
from termcount.repositories.taxonomy import RelationshipRepository, TermRepository

__all__ = [
    # DB
    "get_db",
    "close_db",
    "connect",
    "init_tables",
    # Base
    "BaseRepository",
    # Contracts
    "RelationshipStore",
    "TermMetaStore",
    "TermStore",
    "TaxonomyLookup",
    # Common
    "TermMetaRepository",
    # Taxonomy
    "TermRepository",
    "RelationshipRepository",
]
