"""
app.py — FastAPI application factory and startup lifecycle.

This is the ASGI application object imported by uvicorn.
It builds the hotel context, registers routers, and logs the seeded inventory.

Usage (via launcher):
    python main.py

Usage (direct uvicorn):
    uvicorn app:app --reload
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from hotel_backend.controllers.auth_controller import router as auth_router
from hotel_backend.controllers.reservation_controller import router as reservation_router
from hotel_backend.services.auth_service import AuthService
from hotel_backend.services.hotel_service import HotelService
from hotel_backend.utils.config import Settings, get_settings
from hotel_backend.utils.logger import get_logger


logger = get_logger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build and wire the FastAPI application.

    The hotel context lives on app.state; every request resolves it through
    the dependency providers, so two apps never share reservations.
    """
    settings = settings or get_settings()

    hotel_service = HotelService(settings=settings)
    auth_service = AuthService(settings=settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Log the ready state before accepting requests."""
        _startup(app)
        yield

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        lifespan=lifespan,
    )

    # --- Routers ---
    app.include_router(auth_router)
    app.include_router(reservation_router)

    @app.get("/health", tags=["system"])
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    # --- Inject services into app.state for dependency resolution ---
    app.state.settings = settings
    app.state.hotel_service = hotel_service
    app.state.auth_service = auth_service

    return app


def _startup(app: FastAPI) -> None:
    hotel_service: HotelService = app.state.hotel_service
    auth_service: AuthService = app.state.auth_service

    rooms = hotel_service.list_rooms()
    logger.info(
        "Startup: room inventory loaded | rooms=%s | room_types=%s",
        len(rooms),
        ",".join(hotel_service.inventory.room_types()),
    )
    if not auth_service.auth_enabled:
        logger.warning("Startup: no staff accounts configured, authentication is disabled")
    logger.info("Startup complete — system ready")


# Module-level app object for uvicorn
app = create_app()
