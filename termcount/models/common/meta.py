"""Term meta table - per-term key/value storage used as the count cache."""

from termcount.settings import COUNTED_TYPES_META_KEY, OBJECT_COUNT_META_PREFIX

TERM_META_DDL = """
CREATE TABLE IF NOT EXISTS term_meta (
    term_id INTEGER NOT NULL,
    meta_key VARCHAR NOT NULL,
    meta_value JSON NOT NULL,
    updated_at TIMESTAMP NOT NULL,
    PRIMARY KEY (term_id, meta_key)
)
"""


def counted_types_key() -> str:
    """Meta key of the counted object types marker."""
    return COUNTED_TYPES_META_KEY


def object_count_key(object_type: str) -> str:
    """Meta key holding the cached count for one object type."""
    return f"{OBJECT_COUNT_META_PREFIX}{object_type}"
