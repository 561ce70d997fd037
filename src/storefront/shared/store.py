"""Record store access helpers shared by commands and queries."""

from contextlib import contextmanager

import structlog
from protean.exceptions import DatabaseError, TransactionError
from protean.utils.globals import current_domain
from sqlalchemy.exc import SQLAlchemyError

from storefront.errors import StoreFailure

logger = structlog.get_logger(__name__)


@contextmanager
def store_errors():
    """Surface persistence failures from the database provider as ``StoreFailure``.

    Protean re-raises DAO failures as ``DatabaseError`` and unit-of-work
    commit failures as ``TransactionError``.
    """
    try:
        yield
    except (DatabaseError, TransactionError, SQLAlchemyError) as exc:
        logger.error("Record store failure", error=str(exc), error_type=type(exc).__name__)
        raise StoreFailure(str(exc)) from exc


def dispatch(command):
    """Process a command synchronously and return the handler's result."""
    with store_errors():
        return current_domain.process(command, asynchronous=False)
