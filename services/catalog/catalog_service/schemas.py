from decimal import Decimal
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

class ProductBase(BaseModel):
    name: str = Field(min_length=1)
    description: Optional[str] = ''
    price: Decimal = Field(ge=0, max_digits=12, decimal_places=2)
    stock_quantity: int = Field(default=0, ge=0)
    sku_code: str = Field(min_length=1, max_length=64)

class ProductCreate(ProductBase): pass

# PUT replaces every field, so the update payload has the same shape as create.
class ProductUpdate(ProductBase): pass

class ProductRead(ProductBase):
    model_config = ConfigDict(from_attributes=True)
    id: int
