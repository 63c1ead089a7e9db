"""Shared plumbing for the store classes."""

from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from careerpath.core.exceptions import StoreError
from careerpath.core.logging import get_logger

logger = get_logger(__name__)


class BaseStore:
    """A table-level CRUD boundary over an injected session.

    Stores flush but never commit; the request-scoped session owns the
    transaction.
    """

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    @contextmanager
    def translate_errors(self, operation: str) -> Iterator[None]:
        try:
            yield
        except SQLAlchemyError as exc:
            logger.error("Store operation failed", operation=operation, error=str(exc))
            raise StoreError(operation, str(exc)) from exc
