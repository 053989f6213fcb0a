"""Product Service — FastAPI application for the in-memory product catalog."""

from __future__ import annotations

from uuid import uuid4

import structlog
import uvicorn
from fastapi import APIRouter, Depends, FastAPI, Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from catalog.models import HealthResponse, Product
from catalog.service import ProductNotFoundError, ProductService
from catalog.store import ProductStore
from product_service.config import Settings, get_settings
from product_service.logging_setup import configure_logging

logger = structlog.get_logger()

PRODUCTS_PATH = "/api/products"

router = APIRouter()


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        structlog.contextvars.clear_contextvars()

        request_id = request.headers.get("X-Request-ID", str(uuid4()))
        structlog.contextvars.bind_contextvars(request_id=request_id)

        logger.info(
            "request_started",
            method=request.method,
            path=request.url.path,
            client_ip=request.client.host if request.client else None,
        )

        try:
            response = await call_next(request)
        except Exception as exc:
            logger.error("request_failed", error=str(exc))
            raise

        logger.info("request_completed", status_code=response.status_code)
        response.headers["X-Request-ID"] = request_id
        return response


def get_service(request: Request) -> ProductService:
    return request.app.state.product_service


@router.get("/health", response_model=HealthResponse)
def health(request: Request):
    return HealthResponse(status="ok", service=request.app.state.settings.service_name)


@router.get(PRODUCTS_PATH, response_model=list[Product])
def list_products(service: ProductService = Depends(get_service)):
    return service.list_all()


@router.get(
    PRODUCTS_PATH + "/{product_id}",
    response_model=Product,
    responses={404: {"description": "Product not found"}},
)
def get_product(product_id: int, service: ProductService = Depends(get_service)):
    # Only a missing product becomes a 404; other errors surface as 500.
    try:
        return service.get_or_fail(product_id)
    except ProductNotFoundError:
        return Response(status_code=404)


@router.post(PRODUCTS_PATH, response_model=Product, status_code=201)
def create_product(
    payload: Product,
    response: Response,
    service: ProductService = Depends(get_service),
):
    product = service.create(payload)
    response.headers["Location"] = f"{PRODUCTS_PATH}/{product.id}"
    return product


def create_app(settings: Settings | None = None, store: ProductStore | None = None) -> FastAPI:
    """Build an application with its own store and service.

    Route handlers are plain ``def`` functions, so FastAPI runs them on its
    threadpool and the store sees concurrent callers.
    """
    settings = settings or get_settings()
    configure_logging(settings)

    if store is None:
        store = ProductStore(seed=settings.seed_sample_data)

    app = FastAPI(title="Product Service", version="0.3.0")
    app.state.settings = settings
    app.state.product_service = ProductService(store)
    app.add_middleware(RequestLoggingMiddleware)
    app.include_router(router)
    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host=app.state.settings.host, port=app.state.settings.port)
