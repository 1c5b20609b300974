"""FastAPI dependencies exposing read/write DB sessions.

`get_db_write` for endpoints that mutate rows, `get_db_read` for read-only
routes so they can be pointed at a replica.
"""

from .database import get_read_session, get_write_session


def get_db_write():
    """Yield a write-capable DB session for FastAPI dependency injection."""
    yield from get_write_session()


def get_db_read():
    """Yield a read-only DB session for FastAPI dependency injection."""
    yield from get_read_session()
