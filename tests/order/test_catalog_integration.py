"""Order creation against the real catalog service app, over an in-process HTTP client."""

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from catalog_service.api.deps import get_db as get_catalog_db
from catalog_service.main import app as catalog_app
from order_service.catalog.client import HttpCatalogClient
from order_service.errors import ProductNotFound
from order_service.services.assembly import RequestedItem, create_order
from order_service.store.order_store import OrderStore


@pytest.fixture()
def catalog_http(catalog_sessionmaker):
    def _get_db():
        db = catalog_sessionmaker()
        try:
            yield db
        finally:
            db.close()

    catalog_app.dependency_overrides[get_catalog_db] = _get_db
    with TestClient(catalog_app) as http:
        yield http
    catalog_app.dependency_overrides.clear()


def _add_product(http, sku_code, price):
    resp = http.post("/catalog/v1/products/", json={
        "name": sku_code.title(), "price": price, "stock_quantity": 5, "sku_code": sku_code,
    })
    assert resp.status_code == 201
    return resp.json()["id"]


def test_order_snapshots_catalog_price_and_sku(catalog_http, order_db):
    pid = _add_product(catalog_http, "SKU-1", "9.99")
    catalog = HttpCatalogClient(catalog_http, base_url=str(catalog_http.base_url))

    order = create_order([RequestedItem(pid, 2)], catalog, OrderStore(order_db))

    li = order.order_line_items[0]
    assert (li.sku_code, li.price, li.quantity) == ("SKU-1", Decimal("9.99"), 2)

    # later catalog edits do not touch the order
    catalog_http.put(f"/catalog/v1/products/{pid}", json={
        "name": "Widget", "price": "50.00", "stock_quantity": 5, "sku_code": "SKU-1",
    })
    order_db.expire_all()
    assert OrderStore(order_db).find_by_id(order.id).order_line_items[0].price == Decimal("9.99")


def test_deleted_product_cannot_be_ordered(catalog_http, order_db):
    pid = _add_product(catalog_http, "SKU-1", "9.99")
    catalog_http.delete(f"/catalog/v1/products/{pid}")
    catalog = HttpCatalogClient(catalog_http, base_url=str(catalog_http.base_url))

    with pytest.raises(ProductNotFound) as exc_info:
        create_order([RequestedItem(pid, 1)], catalog, OrderStore(order_db))
    assert exc_info.value.product_id == pid
    assert OrderStore(order_db).find_all() == []


def test_id_outside_catalog_range_is_product_not_found(catalog_http, order_db):
    catalog = HttpCatalogClient(catalog_http, base_url=str(catalog_http.base_url))

    with pytest.raises(ProductNotFound) as exc_info:
        create_order([RequestedItem(2**70, 1)], catalog, OrderStore(order_db))
    assert exc_info.value.product_id == 2**70
    assert OrderStore(order_db).find_all() == []
