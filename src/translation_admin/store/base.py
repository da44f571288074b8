"""Repository interface over the content tables.

Every entity (Module, Section, Translation, Language) goes through the same
five capabilities: find, get, add, save and delete, keyed by the table model
class. The crud layer is written against this interface only, so the
in-memory store and the relational store are interchangeable and tests can
hand in either.

Mutations are serialized per store instance: ``transaction()`` holds one
re-entrant lock for the whole check-then-mutate sequence of an operation.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from contextlib import contextmanager
import threading
from typing import Any, TypeVar

from sqlmodel import SQLModel

RecordT = TypeVar("RecordT", bound=SQLModel)


class ContentStore(ABC):
    """Storage for content records."""

    def __init__(self) -> None:
        self._lock = threading.RLock()

    @contextmanager
    def transaction(self) -> Iterator[None]:
        """Run a block of store calls as one serialized unit.

        Nested calls from the same thread join the outer block.
        """
        with self._lock:
            yield

    @abstractmethod
    def find(self, model: type[RecordT], **filters: Any) -> list[RecordT]:
        """Return records of ``model`` whose attributes equal ``filters``."""

    @abstractmethod
    def get(self, model: type[RecordT], record_id: str) -> RecordT | None:
        """Return the record with this primary key, or None."""

    @abstractmethod
    def add(self, record: RecordT) -> RecordT:
        """Insert a new record and return the stored version."""

    @abstractmethod
    def save(self, record: RecordT) -> RecordT:
        """Persist changes to an existing record and return the stored version."""

    @abstractmethod
    def delete(self, model: type[RecordT], record_id: str) -> None:
        """Remove the record with this primary key if present."""

    def first(self, model: type[RecordT], **filters: Any) -> RecordT | None:
        records = self.find(model, **filters)
        return records[0] if records else None

    def exists(self, model: type[RecordT], **filters: Any) -> bool:
        return self.first(model, **filters) is not None

    def is_empty(self) -> bool:
        from translation_admin.languages.models import Language
        from translation_admin.modules.models import Module

        return not self.find(Module) and not self.find(Language)
