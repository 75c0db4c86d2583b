from sqlalchemy import create_engine, text
from sqlalchemy.orm import declarative_base, sessionmaker

from daybook.config import SETTINGS


def engine_options(url: str) -> dict:
    if url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}}
    return {"pool_pre_ping": True}


engine = create_engine(SETTINGS.database_url, **engine_options(SETTINGS.database_url))
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)
Base = declarative_base()


def init_db() -> None:
    """Fail fast when the configured database cannot be reached."""
    with engine.connect() as connection:
        connection.execute(text("SELECT 1"))


def create_schema(bind=None) -> None:
    from . import models  # noqa: F401  registers the tables on Base.metadata

    Base.metadata.create_all(bind=bind or engine)
