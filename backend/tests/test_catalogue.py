import base64

from fastapi.testclient import TestClient

from inventory_app.db import init_db
from inventory_app.main import app

client = TestClient(app)

JPEG_BYTES = b"\xff\xd8\xff\xe0\x00\x10JFIF\x00fake-image\xff\xd9"


def setup_module(module):
    # Recreate DB fresh
    init_db(reset=True)


def _create(**payload):
    res = client.post("/api/products", json=payload)
    assert res.status_code == 201, res.text
    return res.json()["id"]


def test_create_and_list_products():
    pid = _create(name="Test Coffee", quantity=10, price=499)
    res = client.get("/api/products")
    assert res.status_code == 200
    body = res.json()
    assert "items" in body
    assert isinstance(body["items"], list)
    item = next(it for it in body["items"] if it["id"] == pid)
    assert item["name"] == "Test Coffee"
    assert item["price_display"] == "499 EUR"
    assert item["has_picture"] is False
    assert body["total"] == len(body["items"])


def test_get_product():
    pid = _create(name="Tea", quantity=3, price=250)
    res = client.get(f"/api/products/{pid}")
    assert res.status_code == 200
    assert res.json() == {
        "id": pid,
        "name": "Tea",
        "quantity": 3,
        "price": 250,
        "price_display": "250 EUR",
        "has_picture": False,
    }
    assert client.get("/api/products/99999").status_code == 404


def test_out_of_range_numbers_are_rejected():
    res = client.post("/api/products", json={"name": "Huge", "quantity": 2**70, "price": 1})
    assert res.status_code == 422
    assert "quantity" in res.json()["detail"]

    pid = _create(name="Small", quantity=1, price=1)
    res = client.patch(f"/api/products/{pid}", json={"price": 2**64})
    assert res.status_code == 422
    assert client.get(f"/api/products/{pid}").json()["price"] == 1


def test_create_requires_fields():
    res = client.post("/api/products", json={"name": "", "quantity": 1, "price": 1})
    assert res.status_code == 422
    assert "name" in res.json()["detail"]

    res = client.post("/api/products", json={"name": "No price", "quantity": 1})
    assert res.status_code == 422


def test_picture_upload_and_download():
    encoded = base64.b64encode(JPEG_BYTES).decode()
    pid = _create(name="Camera", quantity=1, price=9900, picture=encoded)
    assert client.get(f"/api/products/{pid}").json()["has_picture"] is True

    res = client.get(f"/api/products/{pid}/picture")
    assert res.status_code == 200
    assert res.headers["content-type"] == "image/jpeg"
    assert res.content == JPEG_BYTES


def test_picture_must_be_jpeg():
    png = base64.b64encode(b"\x89PNG\r\n\x1a\nnot-a-jpeg").decode()
    res = client.post(
        "/api/products", json={"name": "Bad", "quantity": 1, "price": 1, "picture": png}
    )
    assert res.status_code == 422


def test_missing_picture_is_404():
    pid = _create(name="Plain", quantity=1, price=1)
    assert client.get(f"/api/products/{pid}/picture").status_code == 404


def test_patch_updates_only_given_fields():
    pid = _create(name="Mug", quantity=4, price=800)
    res = client.patch(f"/api/products/{pid}", json={"price": 750})
    assert res.status_code == 200
    assert res.json() == {"updated": 1}

    body = client.get(f"/api/products/{pid}").json()
    assert (body["name"], body["quantity"], body["price"]) == ("Mug", 4, 750)

    assert client.patch(f"/api/products/{pid}", json={"name": None}).status_code == 422
    assert client.patch(f"/api/products/{pid}", json={"quantity": -2}).status_code == 422
    assert client.patch("/api/products/99999", json={"price": 1}).status_code == 404


def test_delete_product():
    pid = _create(name="Gone", quantity=1, price=1)
    res = client.delete(f"/api/products/{pid}")
    assert res.status_code == 200
    assert res.json() == {"deleted": 1}
    assert client.delete(f"/api/products/{pid}").status_code == 404
    assert client.get(f"/api/products/{pid}").status_code == 404


def test_order_link():
    pid = _create(name="Blue Widget", quantity=0, price=300)
    res = client.get(f"/api/orders/{pid}")
    assert res.status_code == 200
    assert res.json() == {
        "to": "supplier@example.com",
        "subject": "Blue Widget",
        "mailto": "mailto:supplier@example.com?subject=Blue%20Widget",
    }
    assert client.get("/api/orders/99999").status_code == 404


def test_admin_delete_all():
    _create(name="One", quantity=1, price=1)
    res = client.delete("/api/admin/products")
    assert res.status_code == 200
    assert res.json()["deleted"] >= 1
    assert client.get("/api/products").json() == {"items": [], "total": 0}
    assert client.delete("/api/admin/products").json() == {"deleted": 0}


def teardown_module(module):
    # no-op; test DB is ephemeral
    pass
