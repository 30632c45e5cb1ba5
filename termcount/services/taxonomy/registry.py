"""In-memory registry of object types and taxonomies."""

from loguru import logger

from termcount.models import ObjectTypeSchema, TaxonomySchema


class TaxonomyRegistry:
    """Taxonomy name -> ordered object types, object type -> counting support."""

    def __init__(self):
        self._object_types: dict[str, ObjectTypeSchema] = {}
        self._taxonomies: dict[str, TaxonomySchema] = {}

    def register_object_type(self, name: str, supports_counting: bool = True) -> ObjectTypeSchema:
        """Register (or re-register) an object type."""
        object_type = ObjectTypeSchema(name=name, supports_counting=supports_counting)
        self._object_types[object_type.name] = object_type
        logger.info("Registered object type {} (counting={})", name, supports_counting)
        return object_type

    def register_taxonomy(self, name: str, object_types: list[str]) -> TaxonomySchema:
        """Register a taxonomy, replacing any previous registration of the same name."""
        taxonomy = TaxonomySchema(name=name, object_types=object_types)
        self._taxonomies[taxonomy.name] = taxonomy
        logger.info("Registered taxonomy {} for {}", name, taxonomy.object_types)
        return taxonomy

    def unregister_taxonomy(self, name: str) -> None:
        if self._taxonomies.pop(name, None) is not None:
            logger.info("Unregistered taxonomy {}", name)

    def is_registered(self, taxonomy: str) -> bool:
        return taxonomy in self._taxonomies

    def object_types_of(self, taxonomy: str) -> list[str]:
        """Ordered object types of a taxonomy, empty if unregistered."""
        registered = self._taxonomies.get(taxonomy)
        return list(registered.object_types) if registered else []

    def supports_counting(self, object_type: str) -> bool:
        """Unregistered object types have no update-count behaviour."""
        registered = self._object_types.get(object_type)
        return registered is not None and registered.supports_counting
