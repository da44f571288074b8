from concurrent.futures import ThreadPoolExecutor

import pytest

from translation_admin.core.config import Settings
from translation_admin.languages import LanguageCreate, create_language, list_languages
from translation_admin.modules import Module
from translation_admin.sample_data import seed_store
from translation_admin.store import InMemoryStore, SqlStore, build_store


def test_records_are_copies(store):
    store.add(Module(id="hr", name="HR"))

    fetched = store.get(Module, "hr")
    fetched.name = "Changed"

    # Only save() writes back; the in-memory copy and the session row agree after it
    store.save(fetched)
    assert store.get(Module, "hr").name == "Changed"


def test_memory_store_does_not_leak_mutations():
    store = InMemoryStore()
    store.add(Module(id="hr", name="HR"))

    store.get(Module, "hr").name = "Changed"

    assert store.get(Module, "hr").name == "HR"


def test_find_filters(store):
    store.add(Module(id="a", name="A", active=False))
    store.add(Module(id="b", name="B"))

    assert [m.id for m in store.find(Module, active=True)] == ["b"]
    assert store.exists(Module, name="A")
    assert store.first(Module, name="Nope") is None


def test_transaction_rolls_back_sql_changes(store):
    if not isinstance(store, SqlStore):
        pytest.skip("rollback is a relational store property")

    with pytest.raises(RuntimeError):
        with store.transaction():
            store.add(Module(id="hr", name="HR"))
            raise RuntimeError("boom")

    assert store.get(Module, "hr") is None


def test_seed_only_into_empty_store(store):
    assert seed_store(store) is True
    assert seed_store(store) is False
    assert len(store.find(Module)) == 2


def test_concurrent_default_changes_keep_one_default(store):
    create_language(store=store, language_in=LanguageCreate(code="en", name="English"))

    codes = [f"l{i}" for i in range(12)]

    def add_default(code):
        create_language(
            store=store, language_in=LanguageCreate(code=code, name=code, is_default=True)
        )

    with ThreadPoolExecutor(max_workers=6) as pool:
        list(pool.map(add_default, codes))

    languages = list_languages(store=store)
    assert len(languages) == 13
    assert sum(lang.is_default for lang in languages) == 1


def test_build_store_selects_backend(tmp_path):
    assert isinstance(build_store(Settings(STORE_BACKEND="memory")), InMemoryStore)

    store = build_store(
        Settings(STORE_BACKEND="sql", DATABASE_URL=f"sqlite:///{tmp_path / 'test.db'}")
    )
    assert isinstance(store, SqlStore)
    assert store.is_empty()
