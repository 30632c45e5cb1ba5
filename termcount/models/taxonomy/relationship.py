"""Object-term relationship model."""

RELATIONSHIP_DDL = """
CREATE TABLE IF NOT EXISTS term_relationship (
    object_id BIGINT NOT NULL,
    object_type VARCHAR NOT NULL,
    term_id INTEGER NOT NULL,
    PRIMARY KEY (object_id, object_type, term_id)
)
"""

RELATIONSHIP_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_term_relationship_term ON term_relationship(term_id, object_type)",
]
