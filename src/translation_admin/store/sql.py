"""Relational implementation of the content store.

One ``transaction()`` block is one database transaction: commit on success,
rollback on any exception. Calls made outside a block run in a short
transaction of their own.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from sqlalchemy import Engine
from sqlmodel import Session, select

from translation_admin.core.logging import get_logger
from translation_admin.store.base import ContentStore, RecordT

logger = get_logger(__name__)


class SqlStore(ContentStore):
    def __init__(self, engine: Engine) -> None:
        super().__init__()
        self.engine = engine
        self._session: Session | None = None

    @contextmanager
    def transaction(self) -> Iterator[None]:
        with self._session_scope():
            yield

    @contextmanager
    def _session_scope(self) -> Iterator[Session]:
        # The lock is taken before looking at _session so only its owner sees it
        with self._lock:
            if self._session is not None:
                yield self._session
                return

            # expire_on_commit=False keeps returned records readable after commit
            with Session(self.engine, expire_on_commit=False) as session:
                self._session = session
                try:
                    yield session
                    session.commit()
                    logger.debug("store_committed")
                except Exception:
                    session.rollback()
                    logger.debug("store_rolled_back")
                    raise
                finally:
                    self._session = None

    def find(self, model: type[RecordT], **filters: Any) -> list[RecordT]:
        with self._session_scope() as session:
            statement = select(model)
            for key, value in filters.items():
                statement = statement.where(getattr(model, key) == value)
            return list(session.exec(statement).all())

    def get(self, model: type[RecordT], record_id: str) -> RecordT | None:
        with self._session_scope() as session:
            return session.get(model, record_id)

    def add(self, record: RecordT) -> RecordT:
        with self._session_scope() as session:
            session.add(record)
            session.flush()
            return record

    def save(self, record: RecordT) -> RecordT:
        with self._session_scope() as session:
            merged = session.merge(record)
            session.flush()
            return merged

    def delete(self, model: type[RecordT], record_id: str) -> None:
        with self._session_scope() as session:
            record = session.get(model, record_id)
            if record is not None:
                session.delete(record)
                session.flush()
