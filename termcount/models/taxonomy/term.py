"""Term model."""

from dataclasses import dataclass

TERM_SEQUENCE_DDL = "CREATE SEQUENCE IF NOT EXISTS term_id_seq START 1"

TERM_DDL = """
CREATE TABLE IF NOT EXISTS term (
    id INTEGER PRIMARY KEY DEFAULT nextval('term_id_seq'),
    taxonomy VARCHAR NOT NULL,
    name VARCHAR NOT NULL,
    count INTEGER NOT NULL DEFAULT 0
)
"""


@dataclass
class Term:
    """A taxonomy term and its aggregate object count."""

    id: int
    taxonomy: str
    name: str
    count: int = 0
