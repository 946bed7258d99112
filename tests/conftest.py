import hashlib
import hmac
import json
import os
import time
from types import SimpleNamespace

# Configure the app for tests before it is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENV"] = "test"
os.environ["STRIPE_API_SECRET_KEY"] = "sk_test_dummy"
os.environ["STRIPE_WEBHOOK_SECRET"] = "whsec_test_secret"

import pytest
import stripe
from fastapi.testclient import TestClient

from commerce_cms.database import Base, SessionLocal, engine
from commerce_cms.main import app

WEBHOOK_SECRET = "whsec_test_secret"
OWNER = {"X-User-Id": "user_owner"}
OTHER = {"X-User-Id": "user_other"}


@pytest.fixture(autouse=True)
def reset_db():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def lenient_client():
    """Client that returns 500 responses instead of re-raising server errors"""
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def sqlite_foreign_keys():
    """Turn on SQLite foreign key enforcement for the shared in-memory connection"""
    with engine.connect() as conn:
        conn.exec_driver_sql("PRAGMA foreign_keys=ON")
    yield
    with engine.connect() as conn:
        conn.exec_driver_sql("PRAGMA foreign_keys=OFF")


@pytest.fixture
def db_session():
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture
def store(client):
    res = client.post("/api/stores", json={"name": "Shoes"}, headers=OWNER)
    assert res.status_code == 201, res.text
    return res.json()["store"]


@pytest.fixture
def catalog(client, store):
    """A store with one billboard, category, size and color"""
    store_id = store["id"]
    billboard = client.post(
        f"/api/{store_id}/billboards",
        json={"label": "Spring Sale", "imagePublicId": "billboards/spring"},
        headers=OWNER,
    ).json()["billboard"]
    category = client.post(
        f"/api/{store_id}/categories",
        json={"name": "Sneakers", "billboardId": billboard["id"]},
        headers=OWNER,
    ).json()["category"]
    size = client.post(
        f"/api/{store_id}/sizes", json={"name": "Medium", "value": "M"}, headers=OWNER
    ).json()["size"]
    color = client.post(
        f"/api/{store_id}/colors", json={"name": "Black", "value": "#000000"}, headers=OWNER
    ).json()["color"]
    return {
        "store_id": store_id,
        "billboard_id": billboard["id"],
        "category_id": category["id"],
        "size_id": size["id"],
        "color_id": color["id"],
    }


@pytest.fixture
def create_product(client, catalog):
    def _create(name="Runner", price=49.99, **overrides):
        body = {
            "name": name,
            "price": price,
            "categoryId": catalog["category_id"],
            "sizeId": catalog["size_id"],
            "colorId": catalog["color_id"],
            "images": [f"products/{name.lower()}-1"],
        }
        body.update(overrides)
        res = client.post(f"/api/{catalog['store_id']}/products", json=body, headers=OWNER)
        assert res.status_code == 201, res.text
        return res.json()["product"]
    return _create


@pytest.fixture
def fake_stripe(monkeypatch):
    """Records Checkout Session requests instead of calling Stripe"""
    calls = []

    def fake_create(**kwargs):
        calls.append(kwargs)
        session_id = f"cs_test_{len(calls)}"
        return SimpleNamespace(id=session_id, url=f"https://checkout.stripe.com/c/pay/{session_id}")

    monkeypatch.setattr(stripe.checkout.Session, "create", fake_create)
    return calls


def sign_payload(payload: str, secret: str = WEBHOOK_SECRET, timestamp: int = None) -> str:
    timestamp = timestamp or int(time.time())
    signature = hmac.new(
        secret.encode("utf-8"),
        f"{timestamp}.{payload}".encode("utf-8"),
        hashlib.sha256,
    ).hexdigest()
    return f"t={timestamp},v1={signature}"


def completed_event(order_id: str, name: str = "Ada Lovelace") -> str:
    return json.dumps({
        "id": "evt_test_1",
        "type": "checkout.session.completed",
        "data": {
            "object": {
                "id": "cs_test_1",
                "metadata": {"orderId": order_id},
                "customer_details": {
                    "name": name,
                    "email": "ada@example.com",
                    "phone": "+15551234567",
                    "address": {
                        "line1": "1 Main St",
                        "line2": None,
                        "city": "Springfield",
                        "state": "IL",
                        "postal_code": "62701",
                        "country": "US",
                    },
                },
            }
        },
    })
