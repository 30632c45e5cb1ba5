"""Term meta repository - per-term key/value storage."""

import json
from datetime import datetime
from typing import Any

from loguru import logger

from termcount.repositories.base import BaseRepository


class TermMetaRepository(BaseRepository):
    """Repository for term meta operations."""

    def get(self, term_id: int, key: str) -> Any | None:
        """Load a meta value, None when absent."""
        row = self.fetchone(
            "SELECT meta_value FROM term_meta WHERE term_id = ? AND meta_key = ?",
            [term_id, key],
        )
        if row:
            return json.loads(row[0])
        return None

    def set(self, term_id: int, key: str, value: Any) -> None:
        """Save a meta value, replacing any previous one."""
        self._check_writable("write term meta")

        self.execute(
            """
            INSERT OR REPLACE INTO term_meta (term_id, meta_key, meta_value, updated_at)
            VALUES (?, ?, ?, ?)
            """,
            [term_id, key, json.dumps(value), datetime.now()],
        )
        logger.debug("Meta saved: term={}, key={}, value={}", term_id, key, value)

    def delete(self, term_id: int, key: str) -> None:
        """Delete a meta value. Missing keys are ignored."""
        self._check_writable("delete term meta")

        self.execute("DELETE FROM term_meta WHERE term_id = ? AND meta_key = ?", [term_id, key])
        logger.debug("Meta deleted: term={}, key={}", term_id, key)

    def keys(self, term_id: int) -> list[str]:
        """List meta keys stored for a term."""
        rows = self.fetchall(
            "SELECT meta_key FROM term_meta WHERE term_id = ? ORDER BY meta_key",
            [term_id],
        )
        return [r[0] for r in rows]
