"""
Фабрика FastAPI-приложения.
"""

from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .booking.api import accommodations_router
from .booking.api import router as booking_router
from .bootstrap import bootstrap_app
from .config import Settings
from .reviews.api import router as reviews_router
from .shared_kernel import ILogger


def create_app(settings: Optional[Settings] = None, logger: Optional[ILogger] = None) -> FastAPI:
    components = bootstrap_app(settings, logger)
    settings = components["settings"]

    app = FastAPI(title="Travel Booking API", version="1.0.0", debug=settings.debug)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    for name in (
        "logger",
        "event_bus",
        "booking_service",
        "accommodation_service",
        "review_service",
    ):
        setattr(app.state, name, components[name])

    app.include_router(booking_router, prefix="/api/booking")
    app.include_router(accommodations_router, prefix="/api/accommodations")
    app.include_router(reviews_router, prefix="/api/reviews")

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        # Клиент получает сообщение, а не трассировку
        components["logger"].error(
            "Unhandled error", path=request.url.path, error=str(exc)
        )
        return JSONResponse(status_code=500, content={"message": "Internal server error"})

    @app.get("/")
    def root():
        return {"name": "Travel Booking API", "status": "ok"}

    return app
