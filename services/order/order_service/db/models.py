from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Integer, String, DateTime, ForeignKey, Numeric, Enum as SAEnum
from sqlalchemy.ext.orderinglist import ordering_list
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import List, Optional
from order_service.db.session import Base

class OrderStatus(str, Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"

class Order(Base):
    """An order aggregate.

    ``order_number`` and ``created_at`` stay ``None`` until the order store
    persists the order for the first time.
    """
    __tablename__ = "orders"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    order_number: Mapped[Optional[str]] = mapped_column(String(36), unique=True, nullable=False)
    status: Mapped[OrderStatus] = mapped_column(SAEnum(OrderStatus), default=OrderStatus.PENDING, nullable=False)
    created_at: Mapped[Optional[datetime]] = mapped_column(DateTime(), nullable=False)

    order_line_items: Mapped[List["OrderLineItem"]] = relationship(
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderLineItem.position",
        collection_class=ordering_list("position"),
        lazy="selectin",
    )

    def __init__(self, order_line_items=None, **kw):
        kw.setdefault("status", OrderStatus.PENDING)
        super().__init__(order_line_items=list(order_line_items or []), **kw)

    @property
    def is_persisted(self) -> bool:
        return self.order_number is not None and self.created_at is not None

class OrderLineItem(Base):
    __tablename__ = "order_line_items"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    order_id: Mapped[int] = mapped_column(ForeignKey("orders.id", ondelete="CASCADE"))
    position: Mapped[int] = mapped_column(Integer)
    sku_code: Mapped[str] = mapped_column(String(64))
    price: Mapped[Decimal] = mapped_column(Numeric(12, 2))
    quantity: Mapped[int] = mapped_column(Integer)

    order: Mapped["Order"] = relationship(back_populates="order_line_items")
