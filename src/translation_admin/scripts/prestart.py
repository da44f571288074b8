"""Wait until the configured database accepts connections."""

import logging

from sqlalchemy import Engine
from sqlmodel import Session, select
from tenacity import after_log, before_log, retry, stop_after_attempt, wait_fixed

from translation_admin.core.db import create_db_engine

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

max_tries = 60 * 5  # 5 minutes
wait_seconds = 1


@retry(
    stop=stop_after_attempt(max_tries),
    wait=wait_fixed(wait_seconds),
    before=before_log(logger, logging.INFO),
    after=after_log(logger, logging.WARN),
)
def wait_for_db(engine: Engine) -> None:
    try:
        with Session(engine) as session:
            session.exec(select(1))
    except Exception as e:
        logger.error(f"Database not ready: {e}")
        raise e


def main() -> None:
    logger.info("Waiting for database")
    wait_for_db(create_db_engine())
    logger.info("Database is ready")


if __name__ == "__main__":
    main()
