from fastapi import FastAPI
import structlog
from catalog_service.version import VERSION
from catalog_service.api import products
from catalog_service.core.logging import configure_logging
from prometheus_fastapi_instrumentator import Instrumentator

configure_logging()
logger = structlog.get_logger(__name__)

# Create instrumentator first
instrumentator = Instrumentator()

app = FastAPI(title='Catalog Service', version=VERSION)

# Instrument the app BEFORE adding routes or middleware
instrumentator.instrument(app).expose(
    app,
    include_in_schema=False,
    endpoint="/catalog/metrics",
    should_gzip=True,
)

@app.get('/health')
def health(): return {'status':'ok'}

@app.get('/catalog/health')
def catalog_health(): return {'status':'ok'}

@app.get('/v1/_info')
def info(): return {'service':'catalog','version':VERSION}

@app.on_event("startup")
async def startup_event():
    for route in app.routes:
        if hasattr(route, "methods") and hasattr(route, "path"):
            logger.debug("route.registered", methods=sorted(route.methods), path=route.path)
    logger.info("service.started", service="catalog", version=VERSION)

app.include_router(products.router, prefix='/catalog/v1/products', tags=['products'])
