import os

# Set testing environment variable
os.environ["TESTING"] = "1"

import mongomock
import pytest
from fastapi.testclient import TestClient

from app.core.database import get_db
from app.core.security import create_access_token
from app.main import app

class AsyncCursor:
    """Awaitable ``to_list`` over a mongomock cursor, shaped like motor's."""

    def __init__(self, cursor):
        self._cursor = cursor

    async def to_list(self, length=None):
        docs = list(self._cursor)
        return docs if length is None else docs[:length]

class AsyncCollection:
    """The subset of motor's collection API the services use, over mongomock."""

    def __init__(self, collection):
        self._collection = collection

    async def insert_one(self, document):
        return self._collection.insert_one(document)

    async def find_one(self, *args, **kwargs):
        return self._collection.find_one(*args, **kwargs)

    async def update_one(self, *args, **kwargs):
        return self._collection.update_one(*args, **kwargs)

    async def delete_one(self, *args, **kwargs):
        return self._collection.delete_one(*args, **kwargs)

    def find(self, *args, **kwargs):
        return AsyncCursor(self._collection.find(*args, **kwargs))

    def aggregate(self, pipeline):
        return AsyncCursor(self._collection.aggregate(pipeline))

class AsyncDatabase:
    def __init__(self, database):
        self._database = database

    def __getitem__(self, name):
        return AsyncCollection(self._database[name])

@pytest.fixture
def mongo_db():
    """Fresh in-memory database per test, wired in place of the real one."""
    database = mongomock.MongoClient()["easyDoc"]

    def override_get_db():
        return AsyncDatabase(database)

    app.dependency_overrides[get_db] = override_get_db
    yield database
    app.dependency_overrides.pop(get_db, None)

@pytest.fixture
def client():
    # Not used as a context manager, so the lifespan never opens a real client.
    return TestClient(app, base_url="http://testserver")

@pytest.fixture
def auth_headers():
    def make(claims):
        return {"Authorization": f"Bearer {create_access_token(claims)}"}
    return make
