import asyncio
from types import SimpleNamespace

import pytest

from cwc_water.store.seed import run_seed, seed_database
from cwc_water.utils.config import Settings
from cwc_water.utils.errors import ConfigurationError

from conftest import DAYS, TAG, TODAY, StubConnection

EXPECTED = {
    "reservoir_levels": 5 * DAYS,
    "basin_discharges": 4 * DAYS,
    "rainfall_daily": 5 * DAYS,
    "flood_alerts": 3,
    "water_projects": 4,
}


async def _tagged_counts(db, tag=TAG):
    return {name: await db[name].count_documents({"sourceTag": tag}) for name in EXPECTED}


def test_seed_inserts_builder_output(db):
    summary = asyncio.run(seed_database(db, TAG, days=DAYS, today=TODAY))
    assert {name: s["inserted"] for name, s in summary.items()} == EXPECTED
    assert asyncio.run(_tagged_counts(db)) == EXPECTED


def test_reseeding_does_not_duplicate(db):
    asyncio.run(seed_database(db, TAG, days=DAYS, today=TODAY))
    summary = asyncio.run(seed_database(db, TAG, days=DAYS, today=TODAY))
    assert summary["reservoir_levels"]["deleted"] == EXPECTED["reservoir_levels"]
    assert asyncio.run(_tagged_counts(db)) == EXPECTED


def test_seed_leaves_other_tags_alone(db):
    asyncio.run(db["reservoir_levels"].insert_one({"reservoirName": "Manual", "sourceTag": "hand-entered"}))
    asyncio.run(db["flood_alerts"].insert_one({"severity": "watch"}))

    asyncio.run(seed_database(db, TAG, days=DAYS, today=TODAY))

    assert asyncio.run(db["reservoir_levels"].count_documents({"sourceTag": "hand-entered"})) == 1
    assert asyncio.run(db["flood_alerts"].count_documents({})) == EXPECTED["flood_alerts"] + 1


class _FailingCollection:
    def __init__(self, name, calls, fail_on):
        self.name = name
        self.calls = calls
        self.fail_on = fail_on

    async def delete_many(self, query):
        self.calls.append(("delete", self.name))
        return SimpleNamespace(deleted_count=0)

    async def insert_many(self, docs):
        self.calls.append(("insert", self.name))
        if self.name == self.fail_on:
            raise RuntimeError("insert rejected")
        return SimpleNamespace(inserted_ids=list(range(len(docs))))


class _FailingDB:
    def __init__(self, fail_on):
        self.calls = []
        self.fail_on = fail_on

    def __getitem__(self, name):
        return _FailingCollection(name, self.calls, self.fail_on)


def test_collection_failure_aborts_remaining_collections():
    db = _FailingDB(fail_on="rainfall_daily")
    with pytest.raises(RuntimeError, match="insert rejected"):
        asyncio.run(seed_database(db, TAG, days=DAYS, today=TODAY))

    touched = {name for _, name in db.calls}
    assert "reservoir_levels" in touched
    assert "flood_alerts" not in touched
    assert "water_projects" not in touched


def test_run_seed_requires_connection_string():
    config = Settings(mongo={"uri": None})
    with pytest.raises(ConfigurationError):
        asyncio.run(run_seed(config))


def test_run_seed_closes_connection(db, config):
    conn = StubConnection(db)
    summary = asyncio.run(run_seed(config, connection=conn))
    assert conn.closed
    assert summary["flood_alerts"]["inserted"] == 3


def test_run_seed_closes_connection_on_failure(config):
    conn = StubConnection(error=ConnectionError("no route to host"))
    with pytest.raises(ConnectionError):
        asyncio.run(run_seed(config, connection=conn))
    assert conn.closed


def test_connection_requires_uri_without_client():
    from cwc_water.store.connection import MongoConnection

    with pytest.raises(ConfigurationError):
        MongoConnection(uri=None)
    with pytest.raises(ConfigurationError):
        MongoConnection.from_config(Settings(mongo={"uri": None}).mongo)


def test_injected_client_is_used_without_ping(mongo_client, connection):
    db = asyncio.run(connection.database())
    assert db.name == "cwc"


class _SlowPingClient:
    created = []

    def __init__(self, uri, **kwargs):
        self.uri = uri
        self.closed = False
        self.admin = self
        _SlowPingClient.created.append(self)

    async def command(self, name):
        await asyncio.sleep(0.01)
        return {"ok": 1}

    def __getitem__(self, name):
        return SimpleNamespace(name=name, client=self)

    def close(self):
        self.closed = True


def test_concurrent_first_use_shares_one_client(monkeypatch):
    from cwc_water.store.connection import MongoConnection

    _SlowPingClient.created = []
    monkeypatch.setattr("cwc_water.store.connection.AsyncIOMotorClient", _SlowPingClient)
    conn = MongoConnection(uri="mongodb://water.example:27017", database="cwc")

    async def scenario():
        dbs = await asyncio.gather(*(conn.database() for _ in range(6)))
        await conn.close()
        return dbs

    dbs = asyncio.run(scenario())
    assert len(_SlowPingClient.created) == 1
    client = _SlowPingClient.created[0]
    assert {db.client for db in dbs} == {client}
    assert client.closed
