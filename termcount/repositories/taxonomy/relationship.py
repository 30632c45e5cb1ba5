"""Relationship repository - which objects hold which terms."""

from loguru import logger

from termcount.repositories.base import BaseRepository


class RelationshipRepository(BaseRepository):
    """Repository for object-term links."""

    def count_objects_of_type_for_term(self, term_id: int, object_type: str) -> int:
        """Exact live count of objects of a type linked to the term."""
        row = self.fetchone(
            "SELECT COUNT(*) FROM term_relationship WHERE term_id = ? AND object_type = ?",
            [term_id, object_type],
        )
        count = int(row[0])
        logger.debug("count_objects_of_type_for_term({}, {}): {}", term_id, object_type, count)
        return count

    def terms_for_object(self, object_id: int, object_type: str) -> list[int]:
        """Term ids linked to an object."""
        rows = self.fetchall(
            """
            SELECT term_id FROM term_relationship
            WHERE object_id = ? AND object_type = ?
            ORDER BY term_id
            """,
            [object_id, object_type],
        )
        return [r[0] for r in rows]

    def add(self, object_id: int, object_type: str, term_id: int) -> bool:
        """Link an object to a term. Returns False if already linked."""
        self._check_writable("add relationship")

        row = self.fetchone(
            """
            SELECT COUNT(*) FROM term_relationship
            WHERE object_id = ? AND object_type = ? AND term_id = ?
            """,
            [object_id, object_type, term_id],
        )
        if row[0]:
            return False

        self.execute(
            "INSERT INTO term_relationship (object_id, object_type, term_id) VALUES (?, ?, ?)",
            [object_id, object_type, term_id],
        )
        logger.debug("Linked {} {} to term {}", object_type, object_id, term_id)
        return True

    def remove(self, object_id: int, object_type: str, term_id: int) -> bool:
        """Unlink an object from a term. Returns False if it was not linked."""
        self._check_writable("remove relationship")

        row = self.fetchone(
            """
            DELETE FROM term_relationship
            WHERE object_id = ? AND object_type = ? AND term_id = ?
            RETURNING term_id
            """,
            [object_id, object_type, term_id],
        )
        if row is None:
            return False

        logger.debug("Unlinked {} {} from term {}", object_type, object_id, term_id)
        return True
