from decimal import Decimal

import pytest
from sqlalchemy.exc import OperationalError

from order_service.db.models import Order, OrderLineItem, OrderStatus
from order_service.errors import OrderNotFound, StorageFailure
from order_service.store.order_store import OrderStore


def _draft(*skus):
    return Order(order_line_items=[
        OrderLineItem(sku_code=sku, price=Decimal("1.00"), quantity=1) for sku in skus
    ])


def test_identity_is_absent_before_save_and_present_after(order_db):
    order = _draft("SKU-1")
    assert order.order_number is None
    assert order.created_at is None
    assert not order.is_persisted

    saved = OrderStore(order_db).save(order)

    assert saved.id is not None
    assert saved.order_number is not None
    assert saved.created_at is not None
    assert saved.is_persisted
    assert saved.status == OrderStatus.PENDING


def test_order_number_is_not_reassigned_on_later_save(order_db):
    store = OrderStore(order_db)
    order = store.save(_draft("SKU-1"))
    number, created_at = order.order_number, order.created_at

    order.status = OrderStatus.CONFIRMED
    store.save(order)

    assert order.order_number == number
    assert order.created_at == created_at


def test_order_numbers_do_not_collide(order_db):
    store = OrderStore(order_db)
    numbers = {store.save(_draft("SKU-1")).order_number for _ in range(500)}
    assert len(numbers) == 500


def test_line_items_are_saved_with_their_order(order_db):
    store = OrderStore(order_db)
    order = store.save(_draft("A", "B", "C"))
    order_db.expire_all()

    saved = store.find_by_id(order.id)
    assert [li.sku_code for li in saved.order_line_items] == ["A", "B", "C"]
    assert [li.position for li in saved.order_line_items] == [0, 1, 2]
    assert all(li.order_id == order.id for li in saved.order_line_items)


def test_find_by_id_is_repeatable(order_db):
    store = OrderStore(order_db)
    order = store.save(_draft("SKU-1", "SKU-2"))

    def snapshot(o):
        return (o.id, o.order_number, o.status, o.created_at,
                [(li.sku_code, li.price, li.quantity) for li in o.order_line_items])

    first = snapshot(store.find_by_id(order.id))
    order_db.expire_all()
    second = snapshot(store.find_by_id(order.id))
    assert first == second


def test_find_by_id_unknown(order_db):
    with pytest.raises(OrderNotFound) as exc_info:
        OrderStore(order_db).find_by_id(12345)
    assert exc_info.value.order_id == 12345


def test_find_all_returns_orders_by_id(order_db):
    store = OrderStore(order_db)
    ids = [store.save(_draft("SKU-1")).id for _ in range(3)]
    assert [o.id for o in store.find_all()] == ids


def test_commit_failure_raises_storage_failure(order_db, monkeypatch):
    def broken_commit():
        raise OperationalError("COMMIT", {}, Exception("database is gone"))

    monkeypatch.setattr(order_db, "commit", broken_commit)
    order = _draft("SKU-1")

    with pytest.raises(StorageFailure):
        OrderStore(order_db).save(order)

    assert order.order_number is None
    assert order.created_at is None
    monkeypatch.undo()
    assert OrderStore(order_db).find_all() == []
