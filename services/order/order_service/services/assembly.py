"""Order assembly: turn requested (product, quantity) pairs into a persisted order."""
from dataclasses import dataclass
from typing import Iterable, List

import structlog

from order_service.catalog.client import CatalogClient
from order_service.db.models import Order, OrderLineItem
from order_service.errors import EmptyOrder
from order_service.store.order_store import OrderStore

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class RequestedItem:
    product_id: int
    quantity: int


def assemble_line_items(items: Iterable[RequestedItem], catalog: CatalogClient) -> List[OrderLineItem]:
    """Resolve every requested item against the catalog, in order.

    The first ProductNotFound or CatalogUnavailable propagates immediately;
    products after the failing one are never looked up. Quantity is copied
    from the request unchanged.
    """
    line_items: List[OrderLineItem] = []
    for item in items:
        snapshot = catalog.resolve(item.product_id)
        line_items.append(
            OrderLineItem(
                sku_code=snapshot.sku_code,
                price=snapshot.price,
                quantity=item.quantity,
            )
        )
    return line_items


def create_order(items: Iterable[RequestedItem], catalog: CatalogClient, store: OrderStore) -> Order:
    items = list(items)
    if not items:
        raise EmptyOrder()

    line_items = assemble_line_items(items, catalog)
    order = store.save(Order(order_line_items=line_items))
    logger.info(
        "order.created",
        order_id=order.id,
        order_number=order.order_number,
        line_items=len(order.order_line_items),
    )
    return order
