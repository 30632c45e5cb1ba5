"""Dependency Injection container - initialized at app startup."""

from termcount.repositories import RelationshipRepository, TermMetaRepository, TermRepository
from termcount.services import ObjectCountCache, RelationshipService, TaxonomyRegistry
from termcount.settings import DEFAULT_OBJECT_TYPES, DEFAULT_TAXONOMIES


class Container:
    """Application DI container - holds all singleton instances."""

    _instance = None
    _initialized = False
    _INSTANCES = ("registry", "terms", "meta", "relationships", "object_counts", "relationship_service")

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def init(self, conn=None) -> None:
        """Initialize all dependencies. Call once at app startup."""
        if self._initialized:
            return

        # Registry
        self.registry = TaxonomyRegistry()
        for name, supports_counting in DEFAULT_OBJECT_TYPES.items():
            self.registry.register_object_type(name, supports_counting)
        for name, object_types in DEFAULT_TAXONOMIES.items():
            self.registry.register_taxonomy(name, object_types)

        # Repositories (singletons)
        self.terms = TermRepository(conn)
        self.meta = TermMetaRepository(conn)
        self.relationships = RelationshipRepository(conn)

        # Services (with injected repos)
        self.object_counts = ObjectCountCache(
            registry=self.registry,
            terms=self.terms,
            meta=self.meta,
            relationships=self.relationships,
        )

        self.relationship_service = RelationshipService(
            registry=self.registry,
            terms=self.terms,
            relationships=self.relationships,
            counts=self.object_counts,
        )

        self._initialized = True

    def reset(self) -> None:
        """Drop all instances so the next init() rebuilds them."""
        for name in self._INSTANCES:
            self.__dict__.pop(name, None)
        self._initialized = False


# Global container instance
container = Container()
