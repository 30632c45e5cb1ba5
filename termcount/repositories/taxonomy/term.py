"""Term repository - access to terms and their aggregate counts."""

from loguru import logger

from termcount.models import Term
from termcount.repositories.base import BaseRepository


class TermRepository(BaseRepository):
    """Repository for term data access."""

    def create(self, taxonomy: str, name: str) -> Term:
        """Insert a new term with a zero count."""
        self._check_writable("create term")

        row = self.fetchone(
            "INSERT INTO term (taxonomy, name) VALUES (?, ?) RETURNING id, taxonomy, name, count",
            [taxonomy, name],
        )
        term = Term(*row)
        logger.debug("Term created: {} ({}) in {}", term.id, name, taxonomy)
        return term

    def exists(self, term_id: int, taxonomy: str) -> bool:
        """Check the term exists in the taxonomy."""
        row = self.fetchone(
            "SELECT COUNT(*) FROM term WHERE id = ? AND taxonomy = ?",
            [term_id, taxonomy],
        )
        return row[0] > 0

    def get_count(self, term_id: int) -> int:
        """Aggregate object count stored on the term (0 for missing terms)."""
        row = self.fetchone("SELECT count FROM term WHERE id = ?", [term_id])
        return int(row[0]) if row else 0

    def set_count(self, term_id: int, count: int) -> None:
        """Persist the aggregate object count."""
        self._check_writable("update term count")

        self.execute("UPDATE term SET count = ? WHERE id = ?", [count, term_id])
        logger.debug("Term count updated: term={}, count={}", term_id, count)
