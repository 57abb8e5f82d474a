import os

# Services build their engines at import time; keep them off Postgres in tests.
os.environ.setdefault("POSTGRES_DSN", "sqlite://")
os.environ.setdefault("CATALOG_BASE", "http://catalog.test")

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool


def _memory_engine():
    return create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )


@pytest.fixture()
def catalog_sessionmaker():
    from catalog_service.db.session import Base
    import catalog_service.db.models  # noqa

    engine = _memory_engine()
    Base.metadata.create_all(engine)
    yield sessionmaker(bind=engine, autoflush=False, autocommit=False)
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture()
def order_sessionmaker():
    from order_service.db.session import Base
    import order_service.db.models  # noqa

    engine = _memory_engine()
    Base.metadata.create_all(engine)
    yield sessionmaker(bind=engine, autoflush=False, autocommit=False)
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture()
def order_db(order_sessionmaker):
    db = order_sessionmaker()
    try:
        yield db
    finally:
        db.close()
