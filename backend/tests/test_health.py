from inventory_app.db import init_db
from inventory_app.main import app
from fastapi.testclient import TestClient

client = TestClient(app)


def setup_module(module):
    init_db(reset=True)


def test_health_ok():
    res = client.get("/api/health")
    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "ok"
    assert body["db"] is True
    assert body["products"] == 0
