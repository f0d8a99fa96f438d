"""Translation of SQLAlchemy failures into domain DataAccessError."""

from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError

from leadscore.domain.exceptions import DataAccessError


@contextmanager
def translate_errors(operation: str) -> Iterator[None]:
    try:
        yield
    except SQLAlchemyError as exc:
        raise DataAccessError(operation, exc) from exc
