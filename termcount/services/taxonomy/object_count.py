"""Per-term, per-object-type count cache kept in term meta.

Taxonomies over a single object type rely on the term's own ``count`` field.
Taxonomies over several object types keep one meta entry per type plus a
marker listing the types that were counted; the term's ``count`` is the sum
of those entries.

A term whose marker is missing or lists a different set of types than the
taxonomy currently has is treated as never counted, and all its entries are
rebuilt from the relationship store on the next read or mutation.

Zero counts are never stored: the entry is deleted instead, so an absent
entry under a valid marker reads as zero.
"""

from collections.abc import Mapping

from loguru import logger

from termcount.errors import InvalidTaxonomy, InvalidTerm, ObjectTypeNotInTaxonomy
from termcount.models import counted_types_key, object_count_key
from termcount.repositories import RelationshipStore, TaxonomyLookup, TermMetaStore, TermStore


def sum_present_counts(entries: Mapping[str, int | None]) -> int:
    """Sum cached per-type counts, skipping absent entries."""
    return sum(int(value) for value in entries.values() if value is not None)


class ObjectCountCache:
    """Resolves and invalidates per-type object counts for terms."""

    def __init__(
        self,
        registry: TaxonomyLookup,
        terms: TermStore,
        meta: TermMetaStore,
        relationships: RelationshipStore,
    ):
        self._registry = registry
        self._terms = terms
        self._meta = meta
        self._relationships = relationships
        logger.debug("ObjectCountCache initialized")

    def get_object_count(self, term_id: int, taxonomy: str, object_type: str) -> int:
        """Number of objects of ``object_type`` holding the term."""
        object_types = self._validate(term_id, taxonomy, object_type)

        if len(object_types) == 1:
            return self._terms.get_count(term_id)

        if not self._registry.supports_counting(object_type):
            return 0

        if not self._has_valid_marker(term_id, object_types):
            logger.debug("No valid counted types for term {}, recounting", term_id)
            return self.recount(term_id, taxonomy).get(object_type, 0)

        cached = self._meta.get(term_id, object_count_key(object_type))
        return int(cached) if cached is not None else 0

    def invalidate(self, term_id: int, taxonomy: str, object_type: str) -> None:
        """Refresh the cached count after a link for ``object_type`` changed.

        A term without a valid counted-types marker is recounted in full, which
        writes the marker when the term has any objects.
        """
        object_types = self._validate(term_id, taxonomy, object_type)

        if len(object_types) == 1:
            self._update_single_type_count(term_id, object_type)
            return

        if not self._has_valid_marker(term_id, object_types):
            self.recount(term_id, taxonomy)
            return

        self._store_count(term_id, object_type, self._live_count(term_id, object_type))
        total = sum_present_counts(self._cached_counts(term_id, object_types))
        self._terms.set_count(term_id, total)
        logger.debug("Invalidated term {} ({}): total={}", term_id, object_type, total)

    def recount(self, term_id: int, taxonomy: str) -> dict[str, int]:
        """Rebuild every per-type entry, the marker and the term total."""
        object_types = self._registry.object_types_of(taxonomy)

        counts = {}
        for object_type in object_types:
            counts[object_type] = self._live_count(term_id, object_type)
            self._store_count(term_id, object_type, counts[object_type])

        total = sum(counts.values())
        if total:
            self._meta.set(term_id, counted_types_key(), object_types)
        self._terms.set_count(term_id, total)

        logger.info("Recounted term {} in {}: {}", term_id, taxonomy, counts)
        return counts

    def _validate(self, term_id: int, taxonomy: str, object_type: str) -> list[str]:
        if not self._registry.is_registered(taxonomy):
            logger.warning("Invalid taxonomy: {}", taxonomy)
            raise InvalidTaxonomy(taxonomy)

        object_types = self._registry.object_types_of(taxonomy)
        if object_type not in object_types:
            logger.warning("Object type {} not in taxonomy {}", object_type, taxonomy)
            raise ObjectTypeNotInTaxonomy(object_type, taxonomy)

        if not self._terms.exists(term_id, taxonomy):
            logger.warning("Invalid term {} for taxonomy {}", term_id, taxonomy)
            raise InvalidTerm(term_id, taxonomy)

        return object_types

    def _has_valid_marker(self, term_id: int, object_types: list[str]) -> bool:
        counted = self._meta.get(term_id, counted_types_key())
        return counted is not None and list(counted) == object_types

    def _live_count(self, term_id: int, object_type: str) -> int:
        if not self._registry.supports_counting(object_type):
            return 0
        return self._relationships.count_objects_of_type_for_term(term_id, object_type)

    def _store_count(self, term_id: int, object_type: str, count: int) -> None:
        key = object_count_key(object_type)
        if count:
            self._meta.set(term_id, key, count)
        else:
            self._meta.delete(term_id, key)

    def _cached_counts(self, term_id: int, object_types: list[str]) -> dict[str, int | None]:
        return {t: self._meta.get(term_id, object_count_key(t)) for t in object_types}

    def _update_single_type_count(self, term_id: int, object_type: str) -> None:
        count = self._live_count(term_id, object_type)
        self._terms.set_count(term_id, count)
        logger.debug("Updated count for term {}: {}", term_id, count)
