"""
Product Microservice API

REST API for the product catalog: products, SKU lookup and stock
"""

from contextlib import asynccontextmanager
from typing import List, Optional

import uvicorn
from fastapi import Depends, FastAPI, HTTPException, Query, Request, Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from core.config_manager import ConfigManager
from core.logger import setup_service_logger
from core.nats_client import get_event_bus

from .factory import create_product_service
from .product_service import ProductService
from .models import (
    AvailabilityResponse,
    DuplicateProductError,
    ProductCreateRequest,
    ProductNotFoundError,
    ProductResponse,
    ProductUpdateRequest,
    ProductValidationError,
    StockChangeRequest,
)
from .routes_registry import BASE_PATH, SERVICE_METADATA, get_categorized_routes

# Initialize configuration
config_manager = ConfigManager("product_service")
config = config_manager.get_service_config()

# Setup logger
logger = setup_service_logger("product_service", level=config.log_level.upper())

if config.debug:
    config_manager.print_config_summary(show_secrets=False)

# Globals
product_service: Optional[ProductService] = None
event_bus = None  # NATS event bus
SERVICE_PORT = config.service_port or 8215


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management"""
    global product_service, event_bus

    try:
        try:
            event_bus = await get_event_bus("product_service", config=config_manager)
        except Exception as e:
            logger.warning(f"Failed to initialize event bus: {e}. Continuing without event publishing.")
            event_bus = None

        product_service = await create_product_service(config=config_manager, event_bus=event_bus)

        logger.info(f"Product service started on port {SERVICE_PORT}")
        yield

    except Exception as e:
        logger.error(f"Failed to initialize product service: {e}")
        raise
    finally:
        if event_bus:
            try:
                await event_bus.close()
                logger.info("Product event bus closed")
            except Exception as e:
                logger.error(f"Error closing event bus: {e}")

        if product_service:
            await product_service.repository.close()

        product_service = None
        event_bus = None


app = FastAPI(
    title="Product Service",
    description="Product catalog, SKU lookup and stock management",
    version=SERVICE_METADATA["version"],
    lifespan=lifespan
)


# ====================
# Dependency injection
# ====================

async def get_product_service() -> ProductService:
    """Get the product service instance"""
    if not product_service:
        raise HTTPException(status_code=503, detail="Product service not initialized")
    return product_service


# ====================
# Health & info
# ====================

@app.get("/health")
async def health_check():
    return {
        "status": "healthy" if product_service else "starting",
        "service": SERVICE_METADATA["service_name"],
        "port": SERVICE_PORT,
        "version": SERVICE_METADATA["version"],
        "dependencies": {
            "event_bus": "connected" if event_bus else "disabled",
        },
    }


@app.get("/api/v1/product/info")
async def get_service_info():
    return {
        "service": SERVICE_METADATA["service_name"],
        "version": SERVICE_METADATA["version"],
        "capabilities": SERVICE_METADATA["capabilities"],
        "routes": get_categorized_routes(),
    }


# ====================
# Catalog API
# ====================

@app.post(BASE_PATH, response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
async def create_product(
    request: ProductCreateRequest,
    service: ProductService = Depends(get_product_service)
):
    product = await service.create(request)
    return product.to_dict()


@app.get(BASE_PATH, response_model=List[ProductResponse])
async def list_products(
    category: Optional[str] = Query(None, description="Filter by category"),
    service: ProductService = Depends(get_product_service)
):
    if category:
        products = await service.find_by_category(category)
    else:
        products = await service.find_all()
    return [p.to_dict() for p in products]


@app.get(f"{BASE_PATH}/sku/{{sku}}", response_model=ProductResponse)
async def get_product_by_sku(
    sku: str,
    service: ProductService = Depends(get_product_service)
):
    product = await service.find_by_sku(sku)
    return product.to_dict()


@app.get(f"{BASE_PATH}/{{product_id}}", response_model=ProductResponse)
async def get_product(
    product_id: str,
    service: ProductService = Depends(get_product_service)
):
    product = await service.find_one(product_id)
    return product.to_dict()


@app.patch(f"{BASE_PATH}/{{product_id}}", response_model=ProductResponse)
async def update_product(
    product_id: str,
    request: ProductUpdateRequest,
    service: ProductService = Depends(get_product_service)
):
    product = await service.update(product_id, request)
    return product.to_dict()


@app.delete(f"{BASE_PATH}/{{product_id}}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(
    product_id: str,
    service: ProductService = Depends(get_product_service)
):
    await service.remove(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ====================
# Stock API
# ====================

@app.post(f"{BASE_PATH}/{{product_id}}/stock/increase", response_model=ProductResponse)
async def increase_stock(
    product_id: str,
    request: StockChangeRequest,
    service: ProductService = Depends(get_product_service)
):
    product = await service.increase_stock(product_id, request.quantity)
    return product.to_dict()


@app.post(f"{BASE_PATH}/{{product_id}}/stock/decrease", response_model=ProductResponse)
async def decrease_stock(
    product_id: str,
    request: StockChangeRequest,
    service: ProductService = Depends(get_product_service)
):
    product = await service.decrease_stock(product_id, request.quantity)
    return product.to_dict()


@app.get(f"{BASE_PATH}/{{product_id}}/availability", response_model=AvailabilityResponse)
async def check_availability(
    product_id: str,
    quantity: int = Query(1, gt=0, description="Units the buyer wants"),
    service: ProductService = Depends(get_product_service)
):
    return await service.check_availability(product_id, quantity)


# ====================
# Error handlers
# ====================

@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())}
    )


@app.exception_handler(ProductValidationError)
async def validation_error_handler(request: Request, exc: ProductValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": str(exc)}
    )


@app.exception_handler(DuplicateProductError)
async def duplicate_error_handler(request: Request, exc: DuplicateProductError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": str(exc)}
    )


@app.exception_handler(ProductNotFoundError)
async def not_found_error_handler(request: Request, exc: ProductNotFoundError):
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": str(exc)}
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"}
    )


if __name__ == "__main__":
    uvicorn.run(
        "microservices.product_service.main:app",
        host=config.service_host,
        port=SERVICE_PORT,
        reload=config.debug,
        log_level=config.log_level.lower()
    )
