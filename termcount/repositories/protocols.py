"""Store contracts consumed by the count cache."""

from typing import Any, Protocol


class RelationshipStore(Protocol):
    """Authoritative object-term links."""

    def count_objects_of_type_for_term(self, term_id: int, object_type: str) -> int:
        """Exact live number of objects of a type holding the term."""
        ...


class TermMetaStore(Protocol):
    """Durable per-term key/value storage."""

    def get(self, term_id: int, key: str) -> Any | None:
        """Return stored value or None when absent."""
        ...

    def set(self, term_id: int, key: str, value: Any) -> None: ...

    def delete(self, term_id: int, key: str) -> None: ...


class TermStore(Protocol):
    """Term lookup and aggregate count field."""

    def exists(self, term_id: int, taxonomy: str) -> bool: ...

    def get_count(self, term_id: int) -> int: ...

    def set_count(self, term_id: int, count: int) -> None: ...


class TaxonomyLookup(Protocol):
    """Taxonomy and object type registrations."""

    def is_registered(self, taxonomy: str) -> bool: ...

    def object_types_of(self, taxonomy: str) -> list[str]: ...

    def supports_counting(self, object_type: str) -> bool: ...
