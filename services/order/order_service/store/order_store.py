import uuid
from datetime import datetime, timezone
from typing import List

import structlog
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from order_service.db.models import Order
from order_service.errors import OrderNotFound, StorageFailure

logger = structlog.get_logger(__name__)

def new_order_number() -> str:
    return str(uuid.uuid4())

def now_utc() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)

class OrderStore:
    """Persists orders together with their line items."""

    def __init__(self, db: Session):
        self.db = db

    def save(self, order: Order) -> Order:
        # Identity is assigned here, at first persistence, and never reassigned.
        first_save = order.order_number is None
        if first_save:
            order.order_number = new_order_number()
            order.created_at = now_utc()
        try:
            self.db.add(order)
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.error("order.save_failed", order_number=order.order_number, error=str(exc))
            if first_save:
                order.order_number = None
                order.created_at = None
            raise StorageFailure("Storage failure") from exc
        self.db.refresh(order)
        return order

    def find_by_id(self, order_id: int) -> Order:
        order = self.db.get(Order, order_id)
        if order is None:
            raise OrderNotFound(order_id)
        return order

    def find_all(self) -> List[Order]:
        return list(self.db.execute(select(Order).order_by(Order.id)).scalars().all())
