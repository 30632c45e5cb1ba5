"""Shared fixtures - in-memory database and wired services."""

import pytest

from termcount.repositories import RelationshipRepository, TermMetaRepository, TermRepository, connect
from termcount.services import ObjectCountCache, RelationshipService, TaxonomyRegistry


@pytest.fixture
def conn():
    conn = connect(":memory:")
    yield conn
    conn.close()


@pytest.fixture
def registry():
    registry = TaxonomyRegistry()
    registry.register_object_type("post")
    registry.register_object_type("book")
    registry.register_object_type("attachment")
    registry.register_object_type("user", supports_counting=False)
    registry.register_taxonomy("category", ["post"])
    registry.register_taxonomy("genre", ["post", "book"])
    return registry


@pytest.fixture
def terms(conn):
    return TermRepository(conn)


@pytest.fixture
def meta(conn):
    return TermMetaRepository(conn)


@pytest.fixture
def relationships(conn):
    return RelationshipRepository(conn)


@pytest.fixture
def counts(registry, terms, meta, relationships):
    return ObjectCountCache(registry=registry, terms=terms, meta=meta, relationships=relationships)


@pytest.fixture
def service(registry, terms, relationships, counts):
    return RelationshipService(registry=registry, terms=terms, relationships=relationships, counts=counts)
