import logging
from typing import Generator, Optional
from sqlalchemy import create_engine, event, text, Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.engine import URL, make_url
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from sqlalchemy.pool import QueuePool, StaticPool

from .config import get_settings

logger = logging.getLogger(__name__)

settings = get_settings()


def build_database_url(
    database_url: str,
    username: Optional[str] = None,
    password: Optional[str] = None
) -> URL:
    """
    Parse the configured database URL, applying separately supplied credentials.

    Credentials already embedded in the URL are replaced when the
    corresponding argument is set.
    """
    url = make_url(database_url)
    if username:
        url = url.set(username=username)
    if password:
        url = url.set(password=password)
    return url


def create_db_engine(database_url, echo: bool = False) -> Engine:
    """
    Create a SQLAlchemy engine for the given URL.

    In-memory SQLite shares one connection across threads so every session
    sees the same database. Sessions are not isolated from each other there,
    so it only suits demos and tests. Everything else gets a pre-pinged pool.
    """
    url = make_url(database_url)

    if url.get_backend_name() == "sqlite":
        if url.database in (None, "", ":memory:"):
            db_engine = create_engine(
                url,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
                echo=echo
            )
        else:
            db_engine = create_engine(
                url,
                connect_args={"check_same_thread": False},
                echo=echo
            )
    else:
        db_engine = create_engine(
            url,
            poolclass=QueuePool,
            pool_size=10,
            max_overflow=20,
            pool_pre_ping=True,
            pool_recycle=300,
            echo=echo
        )

    # Database event listeners for monitoring
    @event.listens_for(db_engine, "connect")
    def receive_connect(dbapi_connection, connection_record):
        logger.info("Database connection established")

    @event.listens_for(db_engine, "checkout")
    def receive_checkout(dbapi_connection, connection_record, connection_proxy):
        logger.debug("Database connection checked out from pool")

    return db_engine


engine = create_db_engine(
    build_database_url(
        settings.database_url,
        settings.database_username,
        settings.database_password
    ),
    echo=settings.debug
)

# Session factory
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine
)

# Base class for models
Base = declarative_base()


def get_db() -> Generator[Session, None, None]:
    """
    Database dependency for FastAPI

    Yields:
        Session: Database session
    """
    db = SessionLocal()
    try:
        yield db
    except SQLAlchemyError as e:
        logger.error(f"Database session error: {e}")
        db.rollback()
        raise
    finally:
        db.close()


def init_db(bind: Optional[Engine] = None) -> bool:
    """
    Initialize database tables

    Returns:
        bool: True if successful, False otherwise
    """
    try:
        # Import all models here to ensure they are registered
        from ..models import task  # noqa: F401

        Base.metadata.create_all(bind=bind or engine)
        logger.info("Database tables created successfully")
        return True
    except Exception as e:
        logger.error(f"Failed to initialize database: {e}")
        return False


def check_db_connection(bind: Optional[Engine] = None) -> bool:
    """
    Check database connectivity

    Returns:
        bool: True if connected, False otherwise
    """
    try:
        with (bind or engine).connect() as connection:
            connection.execute(text("SELECT 1"))
        logger.debug("Database connection check successful")
        return True
    except Exception as e:
        logger.error(f"Database connection check failed: {e}")
        return False
