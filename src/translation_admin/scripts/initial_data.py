"""Create the tables and load the sample content into an empty database."""

import logging

from translation_admin.core.db import create_db_engine, init_db
from translation_admin.sample_data import seed_store
from translation_admin.store import SqlStore

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def init(database_url: str | None = None) -> bool:
    engine = create_db_engine(database_url)
    init_db(engine)
    return seed_store(SqlStore(engine))


def main() -> None:
    logger.info("Creating initial data")
    if init():
        logger.info("Sample content loaded")
    else:
        logger.info("Database already has content, nothing to do")


if __name__ == "__main__":
    main()
