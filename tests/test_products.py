import pytest
from sqlalchemy.exc import IntegrityError

from commerce_cms.database import SessionLocal
from commerce_cms.db.crud import product as product_crud
from commerce_cms.db.schemas.product import ProductUpdate
from conftest import OWNER, OTHER


def test_end_to_end_catalog(client):
    store = client.post("/api/stores", json={"name": "Shoes"}, headers=OWNER).json()["store"]
    base = f"/api/{store['id']}"
    billboard = client.post(
        f"{base}/billboards", json={"label": "Spring Sale", "imagePublicId": "img/spring"}, headers=OWNER
    ).json()["billboard"]
    category = client.post(
        f"{base}/categories", json={"name": "Sneakers", "billboardId": billboard["id"]}, headers=OWNER
    ).json()["category"]
    size = client.post(f"{base}/sizes", json={"name": "Nine", "value": "9"}, headers=OWNER).json()["size"]
    color = client.post(f"{base}/colors", json={"name": "White", "value": "#ffffff"}, headers=OWNER).json()["color"]

    res = client.post(
        f"{base}/products",
        json={
            "name": "Runner",
            "price": 49.99,
            "categoryId": category["id"],
            "sizeId": size["id"],
            "colorId": color["id"],
            "images": ["img/runner"],
        },
        headers=OWNER,
    )
    assert res.status_code == 201

    listing = client.get(f"{base}/products")
    assert listing.status_code == 201
    products = listing.json()["products"]
    assert len(products) == 1
    assert products[0]["name"] == "Runner"
    assert products[0]["price"] == 49.99
    assert products[0]["category"]["name"] == "Sneakers"
    assert products[0]["size"]["value"] == "9"
    assert products[0]["color"]["value"] == "#ffffff"
    assert [i["imagePublicId"] for i in products[0]["images"]] == ["img/runner"]


@pytest.mark.parametrize("missing", ["name", "price", "categoryId", "sizeId", "colorId", "images"])
def test_create_product_requires_fields(client, catalog, missing):
    body = {
        "name": "Runner",
        "price": 49.99,
        "categoryId": catalog["category_id"],
        "sizeId": catalog["size_id"],
        "colorId": catalog["color_id"],
        "images": ["img/runner"],
    }
    del body[missing]
    res = client.post(f"/api/{catalog['store_id']}/products", json=body, headers=OWNER)
    assert res.status_code == 400
    assert client.get(f"/api/{catalog['store_id']}/products").json()["products"] == []


def test_create_product_rejects_empty_images_and_zero_price(client, catalog, create_product):
    base = f"/api/{catalog['store_id']}/products"
    body = {
        "name": "Runner",
        "price": 49.99,
        "categoryId": catalog["category_id"],
        "sizeId": catalog["size_id"],
        "colorId": catalog["color_id"],
        "images": [],
    }
    assert client.post(base, json=body, headers=OWNER).status_code == 400
    body.update(images=["img/runner"], price=0)
    assert client.post(base, json=body, headers=OWNER).status_code == 400


def test_create_product_requires_ownership(client, catalog):
    body = {
        "name": "Runner",
        "price": 49.99,
        "categoryId": catalog["category_id"],
        "sizeId": catalog["size_id"],
        "colorId": catalog["color_id"],
        "images": ["img/runner"],
    }
    base = f"/api/{catalog['store_id']}/products"
    assert client.post(base, json=body).status_code == 401
    assert client.post(base, json=body, headers=OTHER).status_code == 400
    assert client.get(base).json()["products"] == []


def test_list_filters(client, catalog, create_product):
    store_id = catalog["store_id"]
    red = client.post(
        f"/api/{store_id}/colors", json={"name": "Red", "value": "#ff0000"}, headers=OWNER
    ).json()["color"]
    create_product(name="Runner", isFeatured=True)
    create_product(name="Trail", colorId=red["id"])
    create_product(name="Old", isArchived=True)

    names = lambda res: sorted(p["name"] for p in res.json()["products"])

    assert names(client.get(f"/api/{store_id}/products")) == ["Runner", "Trail"]
    assert names(client.get(f"/api/{store_id}/products", params={"isFeatured": "true"})) == ["Runner"]
    assert names(client.get(f"/api/{store_id}/products", params={"isFeatured": "false"})) == ["Runner", "Trail"]
    assert names(client.get(f"/api/{store_id}/products", params={"colorId": red["id"]})) == ["Trail"]
    assert names(client.get(f"/api/{store_id}/products", params={"sizeId": catalog["size_id"]})) == ["Runner", "Trail"]
    assert names(client.get(f"/api/{store_id}/products", params={"categoryId": "other"})) == []


def test_archived_product_still_readable_by_id(client, catalog, create_product):
    product = create_product(name="Old", isArchived=True)
    res = client.get(f"/api/{catalog['store_id']}/products/{product['id']}")
    assert res.status_code == 201
    assert res.json()["product"]["isArchived"] is True


def test_update_product_fields(client, catalog, create_product):
    product = create_product()
    res = client.patch(
        f"/api/{catalog['store_id']}/products/{product['id']}",
        json={"price": 59.5, "isFeatured": True},
        headers=OWNER,
    )
    assert res.status_code == 201
    updated = res.json()["product"]
    assert updated["price"] == 59.5
    assert updated["isFeatured"] is True
    assert updated["name"] == "Runner"
    assert [i["imagePublicId"] for i in updated["images"]] == ["products/runner-1"]


def test_update_product_replaces_images(client, catalog, create_product):
    product = create_product()
    res = client.patch(
        f"/api/{catalog['store_id']}/products/{product['id']}",
        json={"images": ["products/runner-2", "products/runner-3"]},
        headers=OWNER,
    )
    assert res.status_code == 201
    fetched = client.get(f"/api/{catalog['store_id']}/products/{product['id']}").json()["product"]
    assert sorted(i["imagePublicId"] for i in fetched["images"]) == ["products/runner-2", "products/runner-3"]


def test_failed_image_replacement_keeps_old_images(catalog, create_product):
    product = create_product()

    session = SessionLocal()
    try:
        db_product = product_crud.get_product(session, catalog["store_id"], product["id"])
        # An image without a public id violates NOT NULL at flush time
        broken = ProductUpdate.model_construct(name="Renamed", images=["products/new", None])
        with pytest.raises(IntegrityError):
            product_crud.update_product(session, db_product, broken)
    finally:
        session.close()

    with SessionLocal() as check:
        db_product = product_crud.get_product(check, catalog["store_id"], product["id"])
        assert db_product.name == "Runner"
        assert [i.image_public_id for i in db_product.images] == ["products/runner-1"]


def test_delete_product(client, catalog, create_product):
    product = create_product()
    base = f"/api/{catalog['store_id']}/products/{product['id']}"

    assert client.delete(base).status_code == 401
    assert client.delete(base, headers=OTHER).status_code == 400

    res = client.delete(base, headers=OWNER)
    assert res.status_code == 201
    assert res.json()["message"] == "Product for the Shoes store deleted successfully."
    assert client.get(base).status_code == 404
