"""Tests for duckdb repositories."""

import pytest

from termcount.models import Term
from termcount.repositories import TermMetaRepository, TermRepository, close_db, get_db, init_tables


class TestTermRepository:
    def test_create(self, terms):
        term = terms.create("genre", "Fiction")
        assert term == Term(id=term.id, taxonomy="genre", name="Fiction", count=0)
        assert terms.get_count(term.id) == 0

    def test_ids_are_distinct(self, terms):
        assert terms.create("genre", "A").id != terms.create("genre", "B").id

    def test_exists_checks_taxonomy(self, terms):
        term = terms.create("genre", "Fiction")
        assert terms.exists(term.id, "genre")
        assert not terms.exists(term.id, "category")
        assert not terms.exists(0, "genre")

    def test_set_count(self, terms):
        term = terms.create("genre", "Fiction")
        terms.set_count(term.id, 5)
        assert terms.get_count(term.id) == 5

    def test_missing_term_count(self, terms):
        assert terms.get_count(12345) == 0

    def test_read_only(self, conn):
        with pytest.raises(RuntimeError):
            TermRepository(conn, read_only=True).create("genre", "Fiction")


class TestTermMetaRepository:
    def test_missing_is_none(self, meta):
        assert meta.get(1, "_object_count_post") is None

    def test_set_get_int(self, meta):
        meta.set(1, "_object_count_post", 3)
        assert meta.get(1, "_object_count_post") == 3

    def test_set_get_list(self, meta):
        meta.set(1, "_counted_object_types", ["post", "book"])
        assert meta.get(1, "_counted_object_types") == ["post", "book"]

    def test_overwrite(self, meta):
        meta.set(1, "_object_count_post", 3)
        meta.set(1, "_object_count_post", 4)
        assert meta.get(1, "_object_count_post") == 4

    def test_delete(self, meta):
        meta.set(1, "_object_count_post", 3)
        meta.delete(1, "_object_count_post")
        meta.delete(1, "_object_count_post")
        assert meta.get(1, "_object_count_post") is None

    def test_keys_are_per_term(self, meta):
        meta.set(1, "_object_count_post", 3)
        meta.set(2, "_object_count_book", 1)
        assert meta.keys(1) == ["_object_count_post"]

    def test_delete_leaves_other_keys(self, meta):
        meta.set(1, "_counted_object_types", ["post", "book"])
        meta.set(1, "_object_count_post", 3)
        meta.delete(1, "_object_count_post")
        assert meta.keys(1) == ["_counted_object_types"]

    def test_read_only(self, conn):
        with pytest.raises(RuntimeError):
            TermMetaRepository(conn, read_only=True).set(1, "_object_count_post", 1)


class TestRelationshipRepository:
    def test_count_by_type(self, relationships):
        relationships.add(1, "post", 10)
        relationships.add(2, "post", 10)
        relationships.add(1, "book", 10)
        relationships.add(3, "post", 11)
        assert relationships.count_objects_of_type_for_term(10, "post") == 2
        assert relationships.count_objects_of_type_for_term(10, "book") == 1
        assert relationships.count_objects_of_type_for_term(10, "attachment") == 0

    def test_add_twice(self, relationships):
        assert relationships.add(1, "post", 10)
        assert not relationships.add(1, "post", 10)
        assert relationships.count_objects_of_type_for_term(10, "post") == 1

    def test_remove(self, relationships):
        relationships.add(1, "post", 10)
        assert relationships.remove(1, "post", 10)
        assert not relationships.remove(1, "post", 10)
        assert relationships.count_objects_of_type_for_term(10, "post") == 0

    def test_terms_for_object(self, relationships):
        relationships.add(1, "post", 11)
        relationships.add(1, "post", 10)
        relationships.add(1, "book", 12)
        assert relationships.terms_for_object(1, "post") == [10, 11]


class TestDb:
    def test_init_tables_idempotent(self, conn, terms):
        term = terms.create("genre", "Fiction")
        init_tables(conn)
        assert terms.exists(term.id, "genre")

    def test_memory_connection_is_thread_local(self):
        first = get_db(path=":memory:")
        assert get_db(path=":memory:") is first
        close_db()
        assert get_db(path=":memory:") is not first
        close_db()
