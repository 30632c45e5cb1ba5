"""Relationship service - links objects to terms and keeps counts in sync."""

from loguru import logger

from termcount.errors import InvalidTaxonomy, InvalidTerm, ObjectTypeNotInTaxonomy
from termcount.repositories import RelationshipRepository, TaxonomyLookup, TermStore
from termcount.services.taxonomy.object_count import ObjectCountCache


class RelationshipService:
    """Object-term link mutations with count invalidation."""

    def __init__(
        self,
        registry: TaxonomyLookup,
        terms: TermStore,
        relationships: RelationshipRepository,
        counts: ObjectCountCache,
    ):
        self._registry = registry
        self._terms = terms
        self._relationships = relationships
        self._counts = counts
        logger.debug("RelationshipService initialized")

    def get_object_terms(self, object_id: int, object_type: str, taxonomy: str) -> list[int]:
        """Term ids of ``taxonomy`` linked to an object."""
        self._validate_taxonomy(taxonomy, object_type)
        return [
            t for t in self._relationships.terms_for_object(object_id, object_type) if self._terms.exists(t, taxonomy)
        ]

    def set_object_terms(
        self,
        object_id: int,
        object_type: str,
        term_ids: list[int],
        taxonomy: str,
        append: bool = False,
    ) -> list[int]:
        """Link an object to terms, replacing its other terms of the taxonomy unless appending."""
        self._validate_taxonomy(taxonomy, object_type)
        self._validate_terms(term_ids, taxonomy)

        current = self.get_object_terms(object_id, object_type, taxonomy)
        wanted = list(dict.fromkeys(term_ids))
        changed = []

        if not append:
            for term_id in current:
                if term_id not in wanted and self._relationships.remove(object_id, object_type, term_id):
                    changed.append(term_id)

        for term_id in wanted:
            if self._relationships.add(object_id, object_type, term_id):
                changed.append(term_id)

        for term_id in changed:
            self._counts.invalidate(term_id, taxonomy, object_type)

        logger.info("Set {} {} terms in {}: {} changed", object_type, object_id, taxonomy, len(changed))
        return self.get_object_terms(object_id, object_type, taxonomy)

    def add_object_terms(self, object_id: int, object_type: str, term_ids: list[int], taxonomy: str) -> list[int]:
        """Link an object to additional terms."""
        return self.set_object_terms(object_id, object_type, term_ids, taxonomy, append=True)

    def remove_object_terms(self, object_id: int, object_type: str, term_ids: list[int], taxonomy: str) -> int:
        """Unlink an object from terms. Returns the number of links removed."""
        self._validate_taxonomy(taxonomy, object_type)
        self._validate_terms(term_ids, taxonomy)

        removed = 0
        for term_id in dict.fromkeys(term_ids):
            if self._relationships.remove(object_id, object_type, term_id):
                self._counts.invalidate(term_id, taxonomy, object_type)
                removed += 1

        logger.info("Removed {} {} from {} terms in {}", object_type, object_id, removed, taxonomy)
        return removed

    def _validate_taxonomy(self, taxonomy: str, object_type: str) -> None:
        if not self._registry.is_registered(taxonomy):
            raise InvalidTaxonomy(taxonomy)
        if object_type not in self._registry.object_types_of(taxonomy):
            raise ObjectTypeNotInTaxonomy(object_type, taxonomy)

    def _validate_terms(self, term_ids: list[int], taxonomy: str) -> None:
        for term_id in term_ids:
            if not self._terms.exists(term_id, taxonomy):
                raise InvalidTerm(term_id, taxonomy)
