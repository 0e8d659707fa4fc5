import asyncio
from datetime import date

import pytest
from mongomock_motor import AsyncMongoMockClient

from cwc_water.store.connection import MongoConnection
from cwc_water.store.seed import seed_database
from cwc_water.utils.config import Settings

TAG = "seed-water-test"
TODAY = date(2025, 11, 20)
DAYS = 3


@pytest.fixture
def config(tmp_path):
    return Settings(
        mongo={"uri": None, "database": "cwc", "source_tag": TAG},
        logging={"directory": str(tmp_path / "logs")},
    )


@pytest.fixture
def mongo_client():
    return AsyncMongoMockClient()


@pytest.fixture
def db(mongo_client):
    return mongo_client["cwc"]


@pytest.fixture
def connection(mongo_client):
    return MongoConnection(client=mongo_client, database="cwc")


@pytest.fixture
def seeded_db(db):
    asyncio.run(seed_database(db, TAG, days=DAYS, today=TODAY))
    return db


class StubConnection:
    """Connection double that hands out a fixed database or fails."""

    def __init__(self, db=None, error: Exception = None):
        self.db = db
        self.error = error
        self.database_name = "cwc"
        self.closed = False

    async def database(self):
        if self.error is not None:
            raise self.error
        return self.db

    async def close(self):
        self.closed = True
