"""Tests for relationship service."""

import pytest

from termcount.errors import InvalidTaxonomy, InvalidTerm, ObjectTypeNotInTaxonomy


class TestSetObjectTerms:
    def test_replaces_terms(self, service, terms):
        a = terms.create("genre", "A")
        b = terms.create("genre", "B")

        assert service.set_object_terms(1, "post", [a.id], "genre") == [a.id]
        assert service.set_object_terms(1, "post", [b.id], "genre") == [b.id]
        assert terms.get_count(a.id) == 0
        assert terms.get_count(b.id) == 1

    def test_append(self, service, terms):
        a = terms.create("genre", "A")
        b = terms.create("genre", "B")

        service.set_object_terms(1, "post", [a.id], "genre")
        assert service.add_object_terms(1, "post", [b.id], "genre") == sorted([a.id, b.id])

    def test_leaves_other_taxonomies(self, service, terms):
        news = terms.create("category", "News")
        fiction = terms.create("genre", "Fiction")

        service.set_object_terms(1, "post", [news.id], "category")
        service.set_object_terms(1, "post", [fiction.id], "genre")

        assert service.get_object_terms(1, "post", "category") == [news.id]
        assert terms.get_count(news.id) == 1

    def test_empty_list_clears(self, service, terms):
        a = terms.create("genre", "A")
        service.set_object_terms(1, "post", [a.id], "genre")

        assert service.set_object_terms(1, "post", [], "genre") == []
        assert terms.get_count(a.id) == 0

    def test_unchanged_terms_not_invalidated(self, service, terms, counts, monkeypatch):
        a = terms.create("genre", "A")
        service.set_object_terms(1, "post", [a.id], "genre")

        calls = []
        monkeypatch.setattr(counts, "invalidate", lambda *args: calls.append(args))
        service.set_object_terms(1, "post", [a.id, a.id], "genre")
        assert calls == []

    def test_invalid_taxonomy(self, service):
        with pytest.raises(InvalidTaxonomy):
            service.set_object_terms(1, "post", [], "missing")

    def test_object_type_not_in_taxonomy(self, service, terms):
        a = terms.create("category", "A")
        with pytest.raises(ObjectTypeNotInTaxonomy):
            service.set_object_terms(1, "book", [a.id], "category")

    def test_invalid_term_links_nothing(self, service, terms, relationships):
        a = terms.create("genre", "A")
        with pytest.raises(InvalidTerm):
            service.set_object_terms(1, "post", [a.id, 999], "genre")
        assert relationships.terms_for_object(1, "post") == []


class TestRemoveObjectTerms:
    def test_returns_removed(self, service, terms):
        a = terms.create("genre", "A")
        b = terms.create("genre", "B")
        service.set_object_terms(1, "post", [a.id], "genre")

        assert service.remove_object_terms(1, "post", [a.id, b.id], "genre") == 1
        assert service.get_object_terms(1, "post", "genre") == []

    def test_invalid_term(self, service):
        with pytest.raises(InvalidTerm):
            service.remove_object_terms(1, "post", [999], "genre")
