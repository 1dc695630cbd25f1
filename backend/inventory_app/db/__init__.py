import logging
import os

from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker, declarative_base
from inventory_app.config import settings

log = logging.getLogger(__name__)

# Bump when the products table changes shape. Upgrades are a no-op today.
SCHEMA_VERSION = 1

DATABASE_URL = settings.DATABASE_URL
connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}
engine = create_engine(DATABASE_URL, future=True, echo=False, connect_args=connect_args)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def _sync_schema_version(conn):
    """
    Record SCHEMA_VERSION in PRAGMA user_version.

    A database created by an older version is "upgraded" by bumping the
    number; nothing else changes. Non-SQLite engines are left alone.
    """
    if conn.dialect.name != "sqlite":
        return
    current = conn.execute(text("PRAGMA user_version")).scalar() or 0
    if current < SCHEMA_VERSION:
        log.info("init_db: schema version %s -> %s (no migration needed)", current, SCHEMA_VERSION)
        conn.execute(text(f"PRAGMA user_version = {int(SCHEMA_VERSION)}"))
    elif current > SCHEMA_VERSION:
        log.warning("init_db: database schema version %s is newer than %s", current, SCHEMA_VERSION)


def init_db(reset: bool = None):
    """
    Initialize DB schema.

    Behavior:
      - If reset is True, or reset is None and the RESET_DB env var is set to
        1/true/yes, drop & recreate tables.
      - Otherwise, leave existing tables and rows in place.
      - Always make sure the schema version is recorded.

    Model modules are imported here so metadata is populated.
    """
    from inventory_app.models import product  # noqa: F401

    if reset is None:
        reset = os.environ.get("RESET_DB", "false").lower() in ("1", "true", "yes")

    if reset:
        log.info("Resetting database (drop & recreate tables)...")
        Base.metadata.drop_all(bind=engine)

    Base.metadata.create_all(bind=engine)
    with engine.begin() as conn:
        _sync_schema_version(conn)
    log.info("Database initialized.")


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
