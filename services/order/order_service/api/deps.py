from typing import Iterator
from sqlalchemy.orm import Session
from order_service.catalog.client import CatalogClient, HttpCatalogClient, open_http_client
from order_service.db.session import SessionLocal
from order_service.store.order_store import OrderStore
from fastapi import Depends

def get_db():
    db = SessionLocal()
    try: yield db
    finally: db.close()

def get_store(db: Session = Depends(get_db)) -> OrderStore:
    return OrderStore(db)

def get_catalog() -> Iterator[CatalogClient]:
    with open_http_client() as client:
        yield HttpCatalogClient(client)
