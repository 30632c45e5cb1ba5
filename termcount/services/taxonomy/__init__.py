"""Taxonomy services - registry, count cache, relationship mutations."""

from termcount.services.taxonomy.object_count import ObjectCountCache, sum_present_counts
from termcount.services.taxonomy.registry import TaxonomyRegistry
from termcount.services.taxonomy.relationships import RelationshipService

__all__ = [
    "ObjectCountCache",
    "RelationshipService",
    "TaxonomyRegistry",
    "sum_present_counts",
]
