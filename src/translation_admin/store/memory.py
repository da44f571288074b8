from collections import defaultdict
from typing import Any

from sqlmodel import SQLModel

from translation_admin.store.base import ContentStore, RecordT


def _clone(record: RecordT) -> RecordT:
    # Fresh instance so callers never mutate the stored row in place
    return type(record).model_validate(record.model_dump())


class InMemoryStore(ContentStore):
    """Arena-style store: one ``{id: record}`` table per model class.

    Records are copied on the way in and on the way out, so a crud operation
    that fails half way through never leaves a partially edited row behind.
    """

    def __init__(self) -> None:
        super().__init__()
        self._tables: dict[type[SQLModel], dict[str, SQLModel]] = defaultdict(dict)

    def find(self, model: type[RecordT], **filters: Any) -> list[RecordT]:
        with self.transaction():
            rows = self._tables[model].values()
            return [
                _clone(row)  # type: ignore[misc]
                for row in rows
                if all(getattr(row, key) == value for key, value in filters.items())
            ]

    def get(self, model: type[RecordT], record_id: str) -> RecordT | None:
        with self.transaction():
            row = self._tables[model].get(record_id)
            return _clone(row) if row is not None else None  # type: ignore[return-value]

    def add(self, record: RecordT) -> RecordT:
        with self.transaction():
            table = self._tables[type(record)]
            record_id = record.id  # type: ignore[attr-defined]
            if record_id in table:
                raise KeyError(f"{type(record).__name__} {record_id} already stored")
            table[record_id] = _clone(record)
            return _clone(record)

    def save(self, record: RecordT) -> RecordT:
        with self.transaction():
            table = self._tables[type(record)]
            record_id = record.id  # type: ignore[attr-defined]
            if record_id not in table:
                raise KeyError(f"{type(record).__name__} {record_id} is not stored")
            table[record_id] = _clone(record)
            return _clone(record)

    def delete(self, model: type[RecordT], record_id: str) -> None:
        with self.transaction():
            self._tables[model].pop(record_id, None)
