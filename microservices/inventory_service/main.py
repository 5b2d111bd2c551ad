"""
Inventory Microservice

Responsibilities:
- SKU registration per warehouse
- Stock receiving and removal
- Stock reservation and release
- Low stock reporting

Responses are wrapped in {"success": ..., "data" | "error": ...}.
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import uvicorn
from fastapi import Depends, FastAPI, HTTPException, Query, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.config_manager import ConfigManager
from core.logger import setup_service_logger
from core.nats_client import get_event_bus

from .factory import create_inventory_service
from .inventory_service import InventorySKUService
from .models import (
    CreateInventorySKURequest,
    DuplicateSKUError,
    InventoryValidationError,
    SKUListResponse,
    SKUNotFoundError,
    SKUResponse,
    StockQuantityRequest,
)
from .routes_registry import BASE_PATH, SERVICE_METADATA, get_route_summary

# Initialize configuration
config_manager = ConfigManager("inventory_service")
config = config_manager.get_service_config()

# Setup logger
logger = setup_service_logger("inventory_service", level=config.log_level.upper())

if config.debug:
    config_manager.print_config_summary(show_secrets=False)


class InventoryMicroservice:
    """Inventory microservice core class"""

    def __init__(self):
        self.inventory_service: Optional[InventorySKUService] = None
        self.event_bus = None

    async def initialize(self, event_bus=None):
        """Initialize the microservice"""
        try:
            self.event_bus = event_bus
            self.inventory_service = await create_inventory_service(
                config=config_manager, event_bus=event_bus
            )
            logger.info("Inventory microservice initialized successfully")
        except Exception as e:
            logger.error(f"Failed to initialize inventory microservice: {e}")
            raise

    async def shutdown(self):
        """Shutdown the microservice"""
        try:
            if self.inventory_service:
                await self.inventory_service.repository.close()
            if self.event_bus:
                await self.event_bus.close()
                logger.info("Event bus closed")
            logger.info("Inventory microservice shutdown completed")
        except Exception as e:
            logger.error(f"Error during shutdown: {e}")
        finally:
            self.inventory_service = None
            self.event_bus = None


# Global microservice instance
inventory_microservice = InventoryMicroservice()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management"""
    event_bus = None
    try:
        event_bus = await get_event_bus("inventory_service", config=config_manager)
        if event_bus:
            logger.info("Event bus initialized successfully")
    except Exception as e:
        logger.warning(f"Failed to initialize event bus: {e}. Continuing without event publishing.")
        event_bus = None

    await inventory_microservice.initialize(event_bus=event_bus)
    logger.info(f"Inventory service started on port {config.service_port}")

    yield

    await inventory_microservice.shutdown()


app = FastAPI(
    title="Inventory Service",
    description="SKU stock levels and reservations per warehouse",
    version=SERVICE_METADATA["version"],
    lifespan=lifespan,
)


# Dependency injection
def get_inventory_service() -> InventorySKUService:
    """Get inventory service instance"""
    if not inventory_microservice.inventory_service:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Inventory service not initialized",
        )
    return inventory_microservice.inventory_service


def _error(status_code: int, message: str, **extra: Any) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": {"message": message, **extra}},
    )


# ==================== Health & Info ====================

@app.get("/health")
@app.get(f"{BASE_PATH}/health")
async def health_check():
    return {
        "status": "healthy",
        "service": SERVICE_METADATA["service_name"],
        "version": SERVICE_METADATA["version"],
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@app.get(f"{BASE_PATH}/info")
async def get_service_info():
    """Get inventory service information"""
    return {
        "success": True,
        "data": {
            "service": SERVICE_METADATA["service_name"],
            "version": SERVICE_METADATA["version"],
            "port": config.service_port,
            "capabilities": SERVICE_METADATA["capabilities"],
            "events_enabled": inventory_microservice.event_bus is not None,
            **get_route_summary(),
        },
    }


# ==================== SKU Management ====================

@app.post(
    f"{BASE_PATH}/skus",
    response_model=SKUResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_sku(
    request: CreateInventorySKURequest,
    service: InventorySKUService = Depends(get_inventory_service),
):
    """Register a SKU in a warehouse"""
    sku = await service.create_sku(request)
    return {"success": True, "data": sku.to_dict()}


@app.get(f"{BASE_PATH}/skus", response_model=SKUListResponse)
async def list_skus(
    warehouse_id: Optional[str] = Query(None, description="Only SKUs in this warehouse"),
    product_id: Optional[str] = Query(None, description="Only SKUs for this product"),
    low_stock: bool = Query(False, description="Only SKUs below their min stock level"),
    service: InventorySKUService = Depends(get_inventory_service),
):
    skus = await service.list_skus(
        warehouse_id=warehouse_id,
        product_id=product_id,
        low_stock_only=low_stock,
    )
    return {"success": True, "data": [sku.to_dict() for sku in skus], "count": len(skus)}


@app.get(f"{BASE_PATH}/skus/code/{{sku_code}}", response_model=SKUResponse)
async def get_sku_by_code(
    sku_code: str,
    warehouse_id: Optional[str] = Query(None, description="Warehouse to search in"),
    service: InventorySKUService = Depends(get_inventory_service),
):
    sku = await service.get_sku_by_code(sku_code, warehouse_id=warehouse_id)
    return {"success": True, "data": sku.to_dict()}


@app.get(f"{BASE_PATH}/skus/{{sku_id}}", response_model=SKUResponse)
async def get_sku(
    sku_id: str,
    service: InventorySKUService = Depends(get_inventory_service),
):
    sku = await service.get_sku(sku_id)
    return {"success": True, "data": sku.to_dict()}


@app.delete(f"{BASE_PATH}/skus/{{sku_id}}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_sku(
    sku_id: str,
    service: InventorySKUService = Depends(get_inventory_service),
):
    await service.delete_sku(sku_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ==================== Stock Movements ====================

@app.post(f"{BASE_PATH}/skus/{{sku_id}}/receive", response_model=SKUResponse)
async def receive_stock(
    sku_id: str,
    request: StockQuantityRequest,
    service: InventorySKUService = Depends(get_inventory_service),
):
    sku = await service.receive_stock(sku_id, request.quantity)
    return {"success": True, "data": sku.to_dict()}


@app.post(f"{BASE_PATH}/skus/{{sku_id}}/remove", response_model=SKUResponse)
async def remove_stock(
    sku_id: str,
    request: StockQuantityRequest,
    service: InventorySKUService = Depends(get_inventory_service),
):
    sku = await service.remove_stock(sku_id, request.quantity)
    return {"success": True, "data": sku.to_dict()}


@app.post(f"{BASE_PATH}/skus/{{sku_id}}/reserve", response_model=SKUResponse)
async def reserve_stock(
    sku_id: str,
    request: StockQuantityRequest,
    service: InventorySKUService = Depends(get_inventory_service),
):
    sku = await service.reserve_stock(sku_id, request.quantity)
    return {"success": True, "data": sku.to_dict()}


@app.post(f"{BASE_PATH}/skus/{{sku_id}}/release", response_model=SKUResponse)
async def release_reservation(
    sku_id: str,
    request: StockQuantityRequest,
    service: InventorySKUService = Depends(get_inventory_service),
):
    sku = await service.release_reservation(sku_id, request.quantity)
    return {"success": True, "data": sku.to_dict()}


# ==================== Error handlers ====================

def _validation_errors(exc: RequestValidationError) -> List[Dict[str, str]]:
    errors = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part != "body"]
        errors.append({
            "field": ".".join(loc) or "body",
            "message": err.get("msg", "Invalid value"),
        })
    return errors


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    return _error(
        status.HTTP_400_BAD_REQUEST,
        "Validation failed",
        errors=_validation_errors(exc),
    )


@app.exception_handler(InventoryValidationError)
async def validation_error_handler(request: Request, exc: InventoryValidationError):
    return _error(status.HTTP_400_BAD_REQUEST, str(exc))


@app.exception_handler(DuplicateSKUError)
async def duplicate_error_handler(request: Request, exc: DuplicateSKUError):
    return _error(status.HTTP_409_CONFLICT, str(exc))


@app.exception_handler(SKUNotFoundError)
async def not_found_error_handler(request: Request, exc: SKUNotFoundError):
    return _error(status.HTTP_404_NOT_FOUND, str(exc))


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        return _error(exc.status_code, "Resource not found", path=request.url.path)
    return _error(exc.status_code, str(exc.detail))


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=True)
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


if __name__ == "__main__":
    uvicorn.run(
        "microservices.inventory_service.main:app",
        host=config.service_host,
        port=config.service_port,
        reload=config.debug,
        log_level=config.log_level.lower(),
    )
