from decimal import Decimal

import pytest

from shopcart.exceptions import NotFound, ValidationError
from shopcart.services.catalog_service import CatalogService


def test_create_and_list_items(client):
    res = client.post(
        "/items", json={"name": "Tea 100g", "description": "Loose leaf", "price": "3.50"}
    )
    assert res.status_code == 201
    created = res.json()
    assert created["name"] == "Tea 100g"
    assert Decimal(str(created["price"])) == Decimal("3.50")

    res = client.get("/items")
    assert res.status_code == 200
    names = [it["name"] for it in res.json()]
    assert names == ["Tea 100g"]


def test_get_item_by_id(client, make_item):
    item = make_item("Coffee 200g", "6.00")
    res = client.get(f"/items/{item.id}")
    assert res.status_code == 200
    assert res.json()["name"] == "Coffee 200g"


def test_get_unknown_item_is_404(client):
    res = client.get("/items/999")
    assert res.status_code == 404
    assert res.json()["detail"] == "Item not found"


def test_negative_price_rejected(client):
    res = client.post("/items", json={"name": "Broken", "price": "-1.00"})
    assert res.status_code == 400
    assert client.get("/items").json() == []


def test_catalog_service_lookup(db, make_item):
    item = make_item("Mouse", "49.50")
    svc = CatalogService(db)
    assert svc.get_item(item.id).price == Decimal("49.50")
    assert svc.get_item(item.id).price_cents == 4950
    with pytest.raises(NotFound):
        svc.get_item(item.id + 100)


def test_catalog_service_rejects_blank_name(db):
    with pytest.raises(ValidationError):
        CatalogService(db).create_item("", Decimal("1.00"))


def test_item_price_is_a_json_number(client, make_item):
    item = make_item("Coffee 200g", "6.50")
    assert client.get(f"/items/{item.id}").json()["price"] == 6.5


@pytest.mark.parametrize("item_id", [0, 10**20])
def test_get_item_out_of_range_is_400(client, item_id):
    res = client.get(f"/items/{item_id}")
    assert res.status_code == 400
