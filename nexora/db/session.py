from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from nexora.db.base import Base


def build_engine(database_url: str) -> Engine:
    """Create the engine; SQLite gets thread sharing, in-memory SQLite a single shared connection."""
    if not database_url.startswith("sqlite"):
        return create_engine(database_url, pool_pre_ping=True)

    kwargs = {"connect_args": {"check_same_thread": False}}
    if database_url in ("sqlite://", "sqlite:///:memory:"):
        kwargs["poolclass"] = StaticPool
    return create_engine(database_url, **kwargs)


class Database:
    def __init__(self, database_url: str):
        self.engine = build_engine(database_url)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def create_all(self):
        # Importing the models registers their tables on Base.metadata.
        import nexora.models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)

    def dispose(self):
        self.engine.dispose()
