from fastapi import APIRouter, Depends, HTTPException, Path
from typing import Annotated, List

from order_service.api.deps import get_catalog, get_store
from order_service.catalog.client import CatalogClient
from order_service.errors import OrderNotFound
from order_service.schemas import MAX_ID, OrderRead, OrderRequest
from order_service.services.assembly import RequestedItem, create_order
from order_service.store.order_store import OrderStore

router = APIRouter()

@router.post("/v1/orders", response_model=OrderRead, status_code=201)
def place_order(payload: OrderRequest,
                catalog: CatalogClient = Depends(get_catalog),
                store: OrderStore = Depends(get_store)):
    items = [RequestedItem(product_id=it.product_id, quantity=it.quantity) for it in payload.order_line_items]
    return create_order(items, catalog, store)

@router.get("/v1/orders", response_model=List[OrderRead])
def list_orders(store: OrderStore = Depends(get_store)):
    return store.find_all()

@router.get("/v1/orders/{order_id}", response_model=OrderRead)
def get_order(order_id: Annotated[int, Path(ge=1, le=MAX_ID)], store: OrderStore = Depends(get_store)):
    try:
        return store.find_by_id(order_id)
    except OrderNotFound as exc:
        raise HTTPException(status_code=404, detail=str(exc))
