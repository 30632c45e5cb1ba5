"""Services package - service class exports."""

from termcount.services.taxonomy import (
    ObjectCountCache,
    RelationshipService,
    TaxonomyRegistry,
    sum_present_counts,
)

__all__ = [
    "ObjectCountCache",
    "RelationshipService",
    "TaxonomyRegistry",
    "sum_present_counts",
]
