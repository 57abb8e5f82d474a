from datetime import datetime
from decimal import Decimal
from typing import List
from pydantic import BaseModel, ConfigDict, Field

from order_service.db.models import OrderStatus

# Integer column range
MAX_ID = 2**31 - 1

class OrderLineItemRequest(BaseModel):
    product_id: int = Field(ge=1, le=MAX_ID)
    quantity: int = Field(ge=1)

class OrderRequest(BaseModel):
    order_line_items: List[OrderLineItemRequest] = []

class OrderLineItemRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    sku_code: str
    price: Decimal
    quantity: int

class OrderRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    order_number: str
    status: OrderStatus
    created_at: datetime
    order_line_items: List[OrderLineItemRead] = []
