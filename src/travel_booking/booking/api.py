"""
HTTP API контекста бронирования.

Маршруты монтируются под префиксом ``/api/booking``:
    POST   /create            → создать бронирование (201)
    GET    /book              → все бронирования со связанными размещениями
    GET    /booking{id}       → бронирование по идентификатору
    PUT    /update{id}        → частичное обновление
    DELETE /delete{id}        → удаление

Маршруты по идентификатору исторически не содержат разделителя ``/`` перед
параметром (``/booking664f...``); эта форма сохранена, а рядом смонтированы
варианты с разделителем (``/booking/664f...``).
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Request, status
from fastapi.responses import JSONResponse

from ..shared_kernel import (
    BusinessRuleValidationException,
    EntityNotFoundException,
    ILogger,
)
from .application import AccommodationApplicationService, BookingApplicationService

router = APIRouter(tags=["booking"])
accommodations_router = APIRouter(tags=["accommodations"])


def get_booking_service(request: Request) -> BookingApplicationService:
    return request.app.state.booking_service


def get_accommodation_service(request: Request) -> AccommodationApplicationService:
    return request.app.state.accommodation_service


def get_logger(request: Request) -> ILogger:
    return request.app.state.logger


def _error(status_code: int, message: str, error: Optional[str] = None) -> JSONResponse:
    content: Dict[str, Any] = {"message": message}
    if error is not None:
        content["error"] = error
    return JSONResponse(status_code=status_code, content=content)


@router.post("/create", status_code=status.HTTP_201_CREATED)
def create_booking(
    payload: Dict[str, Any] = Body(...),
    service: BookingApplicationService = Depends(get_booking_service),
    logger: ILogger = Depends(get_logger),
):
    try:
        booking = service.create_booking(payload)
    except BusinessRuleValidationException as exc:
        return _error(status.HTTP_400_BAD_REQUEST, "Error creating booking", str(exc))
    except Exception as exc:
        logger.error("Error creating booking", error=str(exc))
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Error creating booking", str(exc))
    return JSONResponse(status_code=status.HTTP_201_CREATED, content=booking.to_response())


@router.get("/book")
def list_bookings(
    service: BookingApplicationService = Depends(get_booking_service),
    logger: ILogger = Depends(get_logger),
):
    try:
        bookings = service.list_bookings()
    except Exception as exc:
        logger.error("Error fetching bookings", error=str(exc))
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Error fetching bookings", str(exc))
    return [booking.to_response() for booking in bookings]


@router.get("/booking/{booking_id}")
@router.get("/booking{booking_id}")
def get_booking(
    booking_id: str,
    service: BookingApplicationService = Depends(get_booking_service),
    logger: ILogger = Depends(get_logger),
):
    try:
        booking = service.get_booking(booking_id)
    except EntityNotFoundException:
        return _error(status.HTTP_404_NOT_FOUND, "Booking not found")
    except Exception as exc:
        logger.error("Error fetching booking", booking_id=booking_id, error=str(exc))
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Error fetching booking", str(exc))
    return booking.to_response()


@router.put("/update/{booking_id}")
@router.put("/update{booking_id}")
def update_booking(
    booking_id: str,
    changes: Dict[str, Any] = Body(...),
    service: BookingApplicationService = Depends(get_booking_service),
    logger: ILogger = Depends(get_logger),
):
    try:
        booking = service.update_booking(booking_id, changes)
    except EntityNotFoundException:
        return _error(status.HTTP_404_NOT_FOUND, "Booking not found")
    except BusinessRuleValidationException as exc:
        return _error(status.HTTP_400_BAD_REQUEST, "Error updating booking", str(exc))
    except Exception as exc:
        logger.error("Error updating booking", booking_id=booking_id, error=str(exc))
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Error updating booking", str(exc))
    return booking.to_response()


@router.delete("/delete/{booking_id}")
@router.delete("/delete{booking_id}")
def delete_booking(
    booking_id: str,
    service: BookingApplicationService = Depends(get_booking_service),
    logger: ILogger = Depends(get_logger),
):
    try:
        service.delete_booking(booking_id)
    except EntityNotFoundException:
        return _error(status.HTTP_404_NOT_FOUND, "Booking not found")
    except Exception as exc:
        logger.error("Error deleting booking", booking_id=booking_id, error=str(exc))
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Error deleting booking", str(exc))
    return {"message": "Booking deleted successfully"}


@accommodations_router.get("/")
def list_accommodations(
    service: AccommodationApplicationService = Depends(get_accommodation_service),
):
    return [
        accommodation.model_dump(by_alias=True)
        for accommodation in service.list_accommodations()
    ]


@accommodations_router.get("/{accommodation_id}")
def get_accommodation(
    accommodation_id: str,
    service: AccommodationApplicationService = Depends(get_accommodation_service),
):
    try:
        accommodation = service.get_accommodation(accommodation_id)
    except EntityNotFoundException:
        return _error(status.HTTP_404_NOT_FOUND, "Accommodation not found")
    return accommodation.model_dump(by_alias=True)
