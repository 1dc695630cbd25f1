from contextlib import contextmanager
from typing import Callable, Iterator, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session


@contextmanager
def smart_transaction(
    session: Session,
    translate: Optional[Callable[[SQLAlchemyError], Exception]] = None,
) -> Iterator[Session]:
    """
    Context manager that begins a transaction on the given Session.
    If a transaction is already active, start a nested SAVEPOINT (begin_nested).
    Otherwise start a normal transaction (begin), committed on exit.
    Any exception rolls the transaction back.

    When `translate` is given, SQLAlchemy errors raised inside the block (or
    by the commit itself) are re-raised as `translate(err)`, chained to the
    original.

    Usage:
        with smart_transaction(db, StorageError.from_db_error):
            ... DB work ...
    """
    if session.in_transaction():
        cm = session.begin_nested()
    else:
        cm = session.begin()
    try:
        with cm:
            yield session
    except SQLAlchemyError as exc:
        if translate is None:
            raise
        raise translate(exc) from exc
