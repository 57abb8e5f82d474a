from fastapi import APIRouter, Depends, HTTPException, Path, Response
from typing import Annotated, List
from sqlalchemy.orm import Session
from sqlalchemy import select
import structlog

from catalog_service.api.deps import get_db
from catalog_service.db import models
from catalog_service.schemas import ProductCreate, ProductUpdate, ProductRead

router = APIRouter()
logger = structlog.get_logger(__name__)

# Integer column range
ProductId = Annotated[int, Path(ge=1, le=2**31 - 1)]

def _get_or_404(db: Session, product_id: int) -> models.Product:
    obj = db.get(models.Product, product_id)
    if not obj:
        raise HTTPException(status_code=404, detail='Product not found')
    return obj

def _sku_taken(db: Session, sku_code: str, exclude_id: int | None = None) -> bool:
    stmt = select(models.Product.id).where(models.Product.sku_code == sku_code)
    if exclude_id is not None:
        stmt = stmt.where(models.Product.id != exclude_id)
    return db.execute(stmt).first() is not None

@router.get('/', response_model=List[ProductRead])
def list_products(db: Session = Depends(get_db)):
    return db.execute(select(models.Product).order_by(models.Product.id)).scalars().all()

@router.get('/{product_id}', response_model=ProductRead)
def get_product(product_id: ProductId, db: Session = Depends(get_db)):
    return _get_or_404(db, product_id)

@router.post('/', response_model=ProductRead, status_code=201)
def create_product(payload: ProductCreate, db: Session = Depends(get_db)):
    if _sku_taken(db, payload.sku_code):
        raise HTTPException(status_code=409, detail='SKU already exists')
    obj = models.Product(**payload.model_dump())
    db.add(obj); db.commit(); db.refresh(obj)
    logger.info('product.created', product_id=obj.id, sku_code=obj.sku_code)
    return obj

@router.put('/{product_id}', response_model=ProductRead)
def update_product(product_id: ProductId, payload: ProductUpdate, db: Session = Depends(get_db)):
    obj = _get_or_404(db, product_id)
    if _sku_taken(db, payload.sku_code, exclude_id=product_id):
        raise HTTPException(status_code=409, detail='SKU already exists')
    for k, v in payload.model_dump().items(): setattr(obj, k, v)
    db.add(obj); db.commit(); db.refresh(obj)
    logger.info('product.updated', product_id=obj.id)
    return obj

@router.delete('/{product_id}', status_code=204)
def delete_product(product_id: ProductId, db: Session = Depends(get_db)):
    obj = _get_or_404(db, product_id)
    db.delete(obj); db.commit()
    logger.info('product.deleted', product_id=product_id)
    return Response(status_code=204)
