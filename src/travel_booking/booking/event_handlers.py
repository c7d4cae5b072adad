"""
Обработчики событий контекста бронирования.

Ведут журнал аудита: каждое изменение бронирования попадает в лог
с идентификатором записи.
"""

from ..shared_kernel import ILogger
from .domain import BookingCreated, BookingDeleted, BookingUpdated


def on_booking_created(event: BookingCreated, logger: ILogger) -> None:
    """Обработчик события создания бронирования."""
    logger.info(
        "Audit: booking created",
        booking_id=event.booking_id,
        accommodation=event.accommodation_id,
        package_type=event.package_type.value,
        travellers=event.number_of_travellers,
    )


def on_booking_updated(event: BookingUpdated, logger: ILogger) -> None:
    logger.info(
        "Audit: booking updated",
        booking_id=event.booking_id,
        changed_fields=event.changed_fields,
    )


def on_booking_deleted(event: BookingDeleted, logger: ILogger) -> None:
    logger.info("Audit: booking deleted", booking_id=event.booking_id)
