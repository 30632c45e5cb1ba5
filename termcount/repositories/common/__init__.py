"""Common repositories - shared term meta storage."""

from termcount.repositories.common.meta import TermMetaRepository

__all__ = ["TermMetaRepository"]
