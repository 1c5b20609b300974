"""Database helpers: engines, session factories and DB initialization.

Provides read/write session factories and a simple `init_db` helper that
creates the schema on startup.
"""

from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker

from core.config import settings
from core.logger import get_logger
from .models import Base

logger = get_logger("database")

# Read/Write partitioning pattern
# In production, set WRITE_DATABASE_URL and READ_DATABASE_URL to different DB instances.
# For SQLite/demo this defaults to the same file but the interfaces are separated.
WRITE_DATABASE_URL = settings.write_database_url
READ_DATABASE_URL = settings.read_database_url


def _engine(url: str):
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    engine = create_engine(url, connect_args=connect_args)
    if url.startswith("sqlite"):
        # SQLite ignores ON DELETE CASCADE unless foreign keys are switched on per connection.
        @event.listens_for(engine, "connect")
        def _enable_foreign_keys(dbapi_conn, _record):
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()
    return engine


# Engines
write_engine = _engine(WRITE_DATABASE_URL)
read_engine = write_engine if READ_DATABASE_URL == WRITE_DATABASE_URL else _engine(READ_DATABASE_URL)

# Session factories
WriteSessionLocal = sessionmaker(bind=write_engine)
ReadSessionLocal = sessionmaker(bind=read_engine)


def init_db():
    """Create all tables that do not exist yet."""
    Base.metadata.create_all(bind=write_engine)
    logger.info("Database schema ready (%s)", write_engine.url.render_as_string(hide_password=True))


# Convenience generators for dependency injection
def get_write_session():
    """Yield a write-enabled SQLAlchemy session for the request scope."""
    db = WriteSessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_read_session():
    """Yield a read-only SQLAlchemy session for the request scope.

    Used for read endpoints where routing reads to a replica may be desired.
    """
    db = ReadSessionLocal()
    try:
        yield db
    finally:
        db.close()
