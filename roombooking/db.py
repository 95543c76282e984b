import logging
import os
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import declarative_base, sessionmaker
from roombooking.config import get_settings

logger = logging.getLogger(__name__)


def make_engine(url: str) -> Engine:
    """
    Create an engine for the given database URL.

    SQLite engines open every transaction with BEGIN IMMEDIATE, so the
    write lock is taken before the first read of a transaction and two
    check-then-insert sequences can never interleave.
    """
    if make_url(url).get_backend_name() != "sqlite":
        return create_engine(url, pool_pre_ping=True)

    engine = create_engine(url, connect_args={"check_same_thread": False, "timeout": 30})

    @event.listens_for(engine, "connect")
    def _disable_pysqlite_begin(dbapi_connection, _):
        # let SQLAlchemy emit BEGIN itself
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def _begin_immediate(conn):
        conn.exec_driver_sql("BEGIN IMMEDIATE")

    return engine


engine = make_engine(get_settings().database_url)
SessionLocal = sessionmaker(autoflush=False, expire_on_commit=False, bind=engine)
Base = declarative_base()


def init_database():
    database = make_url(get_settings().database_url).database
    if engine.dialect.name == "sqlite" and database and database != ":memory:":
        directory = os.path.dirname(database)
        if directory and not os.path.exists(directory):
            os.makedirs(directory)
    # register all tables on Base.metadata
    from roombooking.models import booking, room, user  # noqa: F401

    Base.metadata.create_all(bind=engine)
    logger.info(f"Database initialised: {engine.url.render_as_string(hide_password=True)}")


def get_db():
    """Provide a database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
