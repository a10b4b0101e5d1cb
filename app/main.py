from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from app.core.config import settings
from app.core.config_loader import load_seed_rooms
from app.core.errors import (
    BookingConflictError,
    BookingServiceError,
    NoBookingsFoundError,
    RoomNotFoundError,
    ValidationError,
)
from app.api import bookings, customers, rooms
from app.core.logger import setup_logging, logger
from app.models.api_models import ErrorResponse, RoomCreateRequest
from app.services.booking_ledger import BookingLedger
from app.services.room_registry import RoomRegistry
from app.services.validation import describe_errors
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Optional

setup_logging(settings.LOG_LEVEL, settings.ERROR_LOG_PATH)

ERROR_STATUS_CODES = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    RoomNotFoundError: status.HTTP_404_NOT_FOUND,
    BookingConflictError: status.HTTP_409_CONFLICT,
    NoBookingsFoundError: status.HTTP_404_NOT_FOUND,
}

def seed_rooms(registry: RoomRegistry, path: str) -> int:
    count = 0
    for entry in load_seed_rooms(path):
        req = RoomCreateRequest.model_validate(entry)
        registry.create_room(**req.model_dump())
        count += 1
    return count

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info("🚀 Starting Room Booking Service")
    if app.state.rooms_seed_path:
        count = seed_rooms(app.state.registry, app.state.rooms_seed_path)
        logger.info(f"🏢 Registered {count} seed rooms")
    yield
    # Shutdown
    logger.info("🛑 Shutting down backend")

def create_app(
    registry: Optional[RoomRegistry] = None,
    ledger: Optional[BookingLedger] = None,
    rooms_seed_path: str = settings.ROOMS_SEED_PATH,
) -> FastAPI:
    """
    Builds the API around one RoomRegistry and one BookingLedger.
    Both are created here unless injected.
    """
    if registry is None:
        registry = RoomRegistry()
    if ledger is None:
        ledger = BookingLedger(registry)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        lifespan=lifespan
    )
    app.state.registry = registry
    app.state.ledger = ledger
    app.state.rooms_seed_path = rooms_seed_path

    @app.exception_handler(BookingServiceError)
    async def booking_error_handler(request: Request, exc: BookingServiceError):
        status_code = ERROR_STATUS_CODES.get(type(exc), status.HTTP_400_BAD_REQUEST)
        logger.warning(f"⚠️ {request.method} {request.url.path} rejected ({status_code}): {exc}")
        return JSONResponse(
            status_code=status_code,
            content=ErrorResponse(error=type(exc).__name__, message=str(exc)).model_dump()
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        message = describe_errors(exc.errors()) or "Invalid request body."
        logger.warning(f"⚠️ {request.method} {request.url.path} malformed request: {message}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=ErrorResponse(error="ValidationError", message=message).model_dump()
        )

    # Global Exception Handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.opt(exception=exc).error(f"🔥 UNHANDLED ERROR: {str(exc)}")
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(error="InternalServerError", message="An unexpected error occurred.").model_dump()
        )

    # Include routers
    app.include_router(rooms.router, tags=["Rooms"])
    app.include_router(bookings.router, tags=["Bookings"])
    app.include_router(customers.router, tags=["Customers"])

    @app.get("/")
    async def health_check():
        return {'status': 'active', 'time': datetime.now().isoformat()}

    @app.get("/health")
    async def health_check_std():
        return {"status": "ok", "environment": settings.ENVIRONMENT, "timestamp": datetime.now().isoformat()}

    return app

app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host="0.0.0.0", port=settings.PORT, reload=settings.ENVIRONMENT == "development")
