"""Registration schemas for object types and taxonomies."""

from pydantic import BaseModel, Field, field_validator


class ObjectTypeSchema(BaseModel):
    """Object type (post, attachment, user, custom kind)."""

    name: str = Field(min_length=1)
    supports_counting: bool = True


class TaxonomySchema(BaseModel):
    """Taxonomy and the ordered object types it applies to."""

    name: str = Field(min_length=1)
    object_types: list[str] = Field(min_length=1)

    @field_validator("object_types")
    @classmethod
    def _ordered_unique(cls, value: list[str]) -> list[str]:
        if any(not t for t in value):
            raise ValueError("object type names must be non-empty")
        # first occurrence wins
        return list(dict.fromkeys(value))
