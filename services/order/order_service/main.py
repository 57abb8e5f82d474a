from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
import structlog
from order_service.version import VERSION
from order_service.api import routes
from order_service.core.logging import configure_logging
from order_service.errors import CatalogUnavailable, EmptyOrder, ProductNotFound, StorageFailure
from prometheus_fastapi_instrumentator import Instrumentator

configure_logging()
logger = structlog.get_logger(__name__)

# Create instrumentator first
instrumentator = Instrumentator()

app = FastAPI(title="Order Service", version=VERSION)

# Instrument the app BEFORE adding routes or middleware
instrumentator.instrument(app).expose(
    app,
    include_in_schema=False,
    endpoint="/order/metrics",
    should_gzip=True,
)

# Health endpoints
@app.get("/health")
def health():
    return {"status": "ok"}

@app.get("/order/health")
def order_health():
    return {"status": "ok"}

@app.get("/v1/_info")
def info():
    return {"service": "order", "version": VERSION}

# Error mapping: client mistakes are 4xx, unavailable dependencies 5xx
@app.exception_handler(ProductNotFound)
async def product_not_found_handler(request: Request, exc: ProductNotFound):
    logger.info("order.rejected", reason="product_not_found", product_id=exc.product_id)
    return JSONResponse(status_code=404, content={"detail": str(exc), "product_id": exc.product_id})

@app.exception_handler(EmptyOrder)
async def empty_order_handler(request: Request, exc: EmptyOrder):
    logger.info("order.rejected", reason="empty_order")
    return JSONResponse(status_code=400, content={"detail": str(exc)})

@app.exception_handler(CatalogUnavailable)
async def catalog_unavailable_handler(request: Request, exc: CatalogUnavailable):
    logger.warning("order.failed", reason="catalog_unavailable", error=str(exc))
    return JSONResponse(status_code=503, content={"detail": "Catalog unavailable"})

@app.exception_handler(StorageFailure)
async def storage_failure_handler(request: Request, exc: StorageFailure):
    logger.error("order.failed", reason="storage_failure")
    return JSONResponse(status_code=500, content={"detail": "Storage failure"})

@app.on_event("startup")
async def startup_event():
    for route in app.routes:
        if hasattr(route, "methods") and hasattr(route, "path"):
            logger.debug("route.registered", methods=sorted(route.methods), path=route.path)
    logger.info("service.started", service="order", version=VERSION)

# Include routers
app.include_router(routes.router, prefix='/order', tags=["orders"])
