from datetime import datetime

from commerce_cms.database import SessionLocal
from commerce_cms.db.crud import order as order_crud
from commerce_cms.db.models.order import Order
from commerce_cms.db.models.product import Product
from commerce_cms.formatting import MONTHS, format_date
from conftest import OWNER, OTHER, completed_event, sign_payload


def _paid_checkout(client, store_id, product_ids):
    client.post(f"/api/{store_id}/checkout", json={"productIds": product_ids})
    with SessionLocal() as session:
        order = session.query(Order).order_by(Order.created_at.desc()).first()
        order_id = order.id
    payload = completed_event(order_id)
    res = client.post("/api/webhook", content=payload, headers={"Stripe-Signature": sign_payload(payload)})
    assert res.status_code == 200
    return order_id


def test_orders_table(client, catalog, create_product, fake_stripe):
    runner = create_product(name="Runner", price=49.99)
    trail = create_product(name="Trail", price=80)
    order_id = _paid_checkout(client, catalog["store_id"], [runner["id"], trail["id"]])

    res = client.get(f"/api/{catalog['store_id']}/orders", headers=OWNER)
    assert res.status_code == 201
    rows = res.json()["orders"]
    assert len(rows) == 1
    row = rows[0]
    assert row["id"] == order_id
    assert row["isPaid"] is True
    assert row["products"] == "Runner, Trail"
    assert row["totalPrice"] == "$129.99"
    assert row["phone"] == "+15551234567"
    assert row["createdAt"] == format_date(datetime.utcnow())


def test_orders_are_owner_only(client, store):
    assert client.get(f"/api/{store['id']}/orders").status_code == 401
    assert client.get(f"/api/{store['id']}/orders", headers=OTHER).status_code == 400
    assert client.get(f"/api/{store['id']}/dashboard", headers=OTHER).status_code == 400


def test_dashboard_figures(client, catalog, create_product, fake_stripe):
    store_id = catalog["store_id"]
    runner = create_product(name="Runner", price=49.99)
    create_product(name="Old", price=10, isArchived=True)

    _paid_checkout(client, store_id, [runner["id"], runner["id"]])
    # An abandoned checkout stays out of the figures
    client.post(f"/api/{store_id}/checkout", json={"productIds": [runner["id"]]})

    res = client.get(f"/api/{store_id}/dashboard", headers=OWNER)
    assert res.status_code == 201
    dashboard = res.json()["dashboard"]
    assert dashboard["totalRevenue"] == 99.98
    assert dashboard["salesCount"] == 1
    assert dashboard["stockCount"] == 1

    graph = dashboard["graphRevenue"]
    assert [point["name"] for point in graph] == MONTHS
    this_month = datetime.utcnow().month - 1
    assert graph[this_month]["total"] == 99.98
    assert sum(point["total"] for point in graph) == 99.98

    assert dashboard["recentTransactions"] == [{
        "name": "Ada Lovelace",
        "email": "ada@example.com",
        "price": "$99.98",
        "createdAt": format_date(datetime.utcnow()),
    }]


def test_empty_dashboard(client, store):
    res = client.get(f"/api/{store['id']}/dashboard", headers=OWNER)
    dashboard = res.json()["dashboard"]
    assert dashboard["totalRevenue"] == 0
    assert dashboard["salesCount"] == 0
    assert dashboard["recentTransactions"] == []


def test_recent_transactions_are_capped(client, catalog, create_product):
    store_id = catalog["store_id"]
    runner = create_product(name="Runner", price=10)
    with SessionLocal() as session:
        product = session.get(Product, runner["id"])
        for index in range(12):
            db_order = order_crud.create_order(session, store_id, [product])
            order_crud.mark_order_paid(session, db_order, name=f"Buyer {index}")

    dashboard = client.get(f"/api/{store_id}/dashboard", headers=OWNER).json()["dashboard"]
    assert dashboard["salesCount"] == 12
    assert dashboard["totalRevenue"] == 120
    assert len(dashboard["recentTransactions"]) == 10
