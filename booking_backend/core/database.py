from typing import Generator

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from .config import Settings

Base = declarative_base()


def make_engine(settings: Settings) -> Engine:
    """Create the SQLAlchemy engine for the configured database URL."""
    url = settings.DATABASE_URL

    if settings.is_sqlite:
        connect_args = {
            "check_same_thread": False,
            "timeout": settings.DB_CONNECT_TIMEOUT,
        }
        # In-memory databases live inside a single connection
        if url in ("sqlite://", "sqlite:///:memory:"):
            return create_engine(url, connect_args=connect_args, poolclass=StaticPool)
        return create_engine(url, connect_args=connect_args)

    # PostgreSQL with explicit connection pool settings
    return create_engine(
        url,
        connect_args={"connect_timeout": settings.DB_CONNECT_TIMEOUT},
        pool_size=5,
        max_overflow=10,
        pool_timeout=settings.DB_POOL_TIMEOUT,
        pool_recycle=1800,  # Recycle connections after 30 minutes
        pool_pre_ping=True,
    )


def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def check_connection(engine: Engine) -> None:
    """Open a connection and run a trivial query; raises if the database is unreachable."""
    with engine.connect() as connection:
        connection.execute(text("SELECT 1"))


def init_db(engine: Engine) -> None:
    """Initialize database tables."""
    from .. import models  # noqa: F401  registers the mapped classes

    Base.metadata.create_all(bind=engine)


# Database dependency
def get_db(request: Request) -> Generator[Session, None, None]:
    """Get a database session bound to the application's engine."""
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
