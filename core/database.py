from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool
from core.config import settings


def build_engine(database_url: str):
    """
    Create the SQLAlchemy engine for the given URL.

    SQLite connections are shared across FastAPI's threads, and an in-memory
    database has to live on a single connection or every session would see
    an empty schema.
    """
    if not database_url.startswith("sqlite"):
        return create_engine(database_url, pool_pre_ping=True)

    if database_url in ("sqlite://", "sqlite:///:memory:"):
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool
        )

    return create_engine(database_url, connect_args={"check_same_thread": False})


engine = build_engine(settings.DATABASE_URL)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def init_db():
    # Registers every table on Base.metadata
    import models  # noqa: F401

    Base.metadata.create_all(bind=engine)


def close_db():
    engine.dispose()
