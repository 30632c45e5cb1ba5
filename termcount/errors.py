"""Errors raised by count lookups and relationship mutations."""


class TermCountError(Exception):
    """Base error with a stable machine-readable code."""

    code = "term_count_error"

    def __init__(self, message: str = "Term count error"):
        self.message = message
        super().__init__(self.message)


class InvalidTaxonomy(TermCountError):
    """Taxonomy is not registered."""

    code = "invalid_taxonomy"

    def __init__(self, taxonomy: str):
        self.taxonomy = taxonomy
        super().__init__(f"Invalid taxonomy: {taxonomy}")


class ObjectTypeNotInTaxonomy(TermCountError):
    """Object type is not one of the taxonomy's object types."""

    code = "object_type_not_in_taxonomy"

    def __init__(self, object_type: str, taxonomy: str):
        self.object_type = object_type
        self.taxonomy = taxonomy
        super().__init__(f"Object type {object_type!r} is not in taxonomy {taxonomy!r}")


class InvalidTerm(TermCountError):
    """Term does not exist or belongs to another taxonomy."""

    code = "invalid_term"

    def __init__(self, term_id: int, taxonomy: str):
        self.term_id = term_id
        self.taxonomy = taxonomy
        super().__init__(f"Invalid term: {term_id} in taxonomy {taxonomy!r}")
