from sqlalchemy import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine

from translation_admin.core.config import settings


def create_db_engine(url: str | None = None) -> Engine:
    """Build an engine for the relational store.

    SQLite needs ``check_same_thread=False`` because FastAPI runs sync
    endpoints in a threadpool; in-memory SQLite also needs a single shared
    connection or every new connection would see an empty database.
    """
    database_url = url or settings.DATABASE_URL
    if database_url.startswith("sqlite"):
        kwargs: dict = {"connect_args": {"check_same_thread": False}}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(
            database_url,
            echo=settings.DEBUG and settings.ENVIRONMENT == "local",
            **kwargs,
        )
    return create_engine(
        database_url,
        pool_size=5,
        max_overflow=10,
        pool_pre_ping=True,
        pool_recycle=3600,
        echo=settings.DEBUG and settings.ENVIRONMENT == "local",
    )


def init_db(engine: Engine) -> None:
    """Create all tables that do not exist yet.

    Alembic owns the schema in deployed databases; this is for local SQLite
    files and tests.
    """
    # Table models must be imported so they register on the metadata
    from translation_admin.languages.models import Language  # noqa: F401
    from translation_admin.modules.models import Module  # noqa: F401
    from translation_admin.sections.models import Section  # noqa: F401
    from translation_admin.translations.models import Translation  # noqa: F401

    SQLModel.metadata.create_all(engine)
