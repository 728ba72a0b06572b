import os
import sys
import pytest
from fastapi.testclient import TestClient

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from gamecrm_web.crm import get_crm_client
from gamecrm_web.main import app


SAMPLE_RECORDS = [
    {
        "id": "1001",
        "properties": {
            "game_name": "Aetheria",
            "genre": "RPG",
            "release_date": "2024-05-01",
            "platform_availability": "PC;Switch",
            "esrb__pegi_rating": "T",
            "development_status": "Released",
            "base_price": "29.99",
            "global_sales__player_count": "120000",
            "lead_developer__studio": "Lumen Forge",
            "game_engine": "Godot",
            "store_url": "https://store.example.com/aetheria",
        },
        "createdAt": "2024-01-02T10:00:00Z",
        "updatedAt": "2024-05-02T10:00:00Z",
        "archived": False,
    },
    {
        "id": "1002",
        "properties": {
            "game_name": "Drift Kings",
            "genre": "Racing",
            "platform_availability": "PlayStation, Xbox | PC",
        },
    },
]


class FakeCrmClient:
    """
    Stands in for CrmClient; records every call and raises the configured
    error for an operation ("list", "create", "update", "delete").
    """

    def __init__(self, records=None, errors=None):
        self.records = records if records is not None else []
        self.errors = errors or {}
        self.calls = []

    def _call(self, op, *args):
        self.calls.append((op, *args))
        if op in self.errors:
            raise self.errors[op]

    def calls_for(self, op):
        return [c for c in self.calls if c[0] == op]

    async def list_records(self, properties, limit=100):
        self._call("list", tuple(properties), limit)
        return self.records

    async def create_record(self, properties):
        self._call("create", dict(properties))
        return {"id": "new-1", "properties": dict(properties)}

    async def update_record(self, record_id, properties):
        self._call("update", record_id, dict(properties))
        return {"id": record_id, "properties": dict(properties)}

    async def delete_record(self, record_id):
        self._call("delete", record_id)


@pytest.fixture
def crm():
    return FakeCrmClient(records=[dict(r) for r in SAMPLE_RECORDS])


@pytest.fixture
def client(crm):
    app.dependency_overrides[get_crm_client] = lambda: crm
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
