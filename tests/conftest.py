from collections.abc import Iterator

from fastapi.testclient import TestClient
import pytest

from translation_admin.core.db import create_db_engine, init_db
from translation_admin.main import create_app
from translation_admin.sample_data import seed_store
from translation_admin.store import ContentStore, InMemoryStore, SqlStore


def make_store(backend: str) -> ContentStore:
    if backend == "sql":
        engine = create_db_engine("sqlite://")
        init_db(engine)
        return SqlStore(engine)
    return InMemoryStore()


@pytest.fixture(params=["memory", "sql"])
def store(request) -> ContentStore:
    """Empty store, once per backend."""
    return make_store(request.param)


@pytest.fixture()
def seeded_store(store: ContentStore) -> ContentStore:
    seed_store(store)
    return store


@pytest.fixture()
def client(seeded_store: ContentStore) -> Iterator[TestClient]:
    with TestClient(create_app(store=seeded_store)) as test_client:
        yield test_client


@pytest.fixture()
def empty_client(store: ContentStore) -> Iterator[TestClient]:
    with TestClient(create_app(store=store)) as test_client:
        yield test_client


@pytest.fixture()
def anyio_backend() -> str:
    return "asyncio"
