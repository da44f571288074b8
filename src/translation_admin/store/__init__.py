from translation_admin.core.config import Settings, settings
from translation_admin.store.base import ContentStore
from translation_admin.store.memory import InMemoryStore
from translation_admin.store.sql import SqlStore


def build_store(config: Settings = settings) -> ContentStore:
    """Create the store selected by ``STORE_BACKEND``."""
    if config.STORE_BACKEND == "sql":
        from translation_admin.core.db import create_db_engine, init_db

        engine = create_db_engine(config.DATABASE_URL)
        if config.uses_sqlite:
            init_db(engine)
        return SqlStore(engine)
    return InMemoryStore()


__all__ = [
    "ContentStore",
    "InMemoryStore",
    "SqlStore",
    "build_store",
]
