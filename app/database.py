from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from app.config import settings


def build_engine(database_url: str) -> Engine:
    """
    Create an engine with a connection pool for the given URL.

    SQLite connections are created with check_same_thread=False so a
    pooled connection can be handed to any worker thread.
    """
    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    return create_engine(database_url, connect_args=connect_args)


engine = build_engine(settings.DATABASE_URL)
# autocommit=False: every write is committed explicitly by the store
# autoflush=False: nothing reaches the database before commit
SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)


# All ORM models inherit from Base so Base.metadata tracks every table
class Base(DeclarativeBase):
    pass
