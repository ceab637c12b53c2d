import logging

from sqlalchemy import event
from sqlmodel import SQLModel, create_engine, Session
from portfolio.core.config import settings

logger = logging.getLogger(__name__)


def enable_sqlite_foreign_keys(engine):
    """SQLite ships with FK enforcement off; cascades need it per connection."""
    if engine.dialect.name != "sqlite":
        return

    @event.listens_for(engine, "connect")
    def _set_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


# check_same_thread is needed for SQLite, remove for PostgreSQL
connect_args = {"check_same_thread": False} if "sqlite" in settings.DATABASE_URL else {}
engine = create_engine(settings.DATABASE_URL, echo=settings.SQL_ECHO, connect_args=connect_args)
enable_sqlite_foreign_keys(engine)

def get_session():
    with Session(engine) as session:
        yield session

def create_db_and_tables(bind=None):
    # Import models to ensure they are registered with SQLModel metadata
    import portfolio.models  # noqa: F401

    bind = bind or engine
    logger.info("Creating tables on %s", bind.url.render_as_string(hide_password=True))
    SQLModel.metadata.create_all(bind)
