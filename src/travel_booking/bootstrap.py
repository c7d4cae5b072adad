from functools import partial
from typing import Any, Dict, Optional

from .booking.application import AccommodationApplicationService, BookingApplicationService
from .booking.domain import BookingCreated, BookingDeleted, BookingUpdated
from .booking.event_handlers import on_booking_created, on_booking_deleted, on_booking_updated
from .booking.infrastructure import create_booking_uow
from .config import Settings, get_settings
from .reviews.application import ReviewApplicationService
from .reviews.domain import ReviewAdded, ReviewDeleted
from .reviews.event_handlers import on_review_added, on_review_deleted
from .reviews.infrastructure import create_review_uow
from .shared_kernel import ConsoleLogger, IEventBus, ILogger, InMemoryEventBus


def subscribe_audit_handlers(event_bus: IEventBus, logger: ILogger) -> None:
    """Подписывает обработчики журнала аудита на события обоих контекстов."""
    # partial передает логгер в обработчик
    event_bus.subscribe(BookingCreated, partial(on_booking_created, logger=logger))
    event_bus.subscribe(BookingUpdated, partial(on_booking_updated, logger=logger))
    event_bus.subscribe(BookingDeleted, partial(on_booking_deleted, logger=logger))
    event_bus.subscribe(ReviewAdded, partial(on_review_added, logger=logger))
    event_bus.subscribe(ReviewDeleted, partial(on_review_deleted, logger=logger))


def bootstrap_app(
    settings: Optional[Settings] = None, logger: Optional[ILogger] = None
) -> Dict[str, Any]:
    """Создает и настраивает все серверные компоненты приложения."""
    settings = settings or get_settings()
    logger = logger or ConsoleLogger(verbose=settings.debug)

    # 1. Одна шина событий на оба контекста
    event_bus = InMemoryEventBus(logger)

    # 2. Единицы работы с хранилищем, выбранным в настройках
    booking_uow = create_booking_uow(
        settings.storage_backend, settings.data_dir, event_bus=event_bus, logger=logger
    )
    review_uow = create_review_uow(
        settings.storage_backend, settings.data_dir, event_bus=event_bus, logger=logger
    )

    # 3. Подписываем обработчики на события
    subscribe_audit_handlers(event_bus, logger)

    # 4. Сервисы приложения
    return {
        "settings": settings,
        "logger": logger,
        "event_bus": event_bus,
        "booking_uow": booking_uow,
        "review_uow": review_uow,
        "booking_service": BookingApplicationService(booking_uow, logger),
        "accommodation_service": AccommodationApplicationService(booking_uow),
        "review_service": ReviewApplicationService(review_uow, logger),
    }
