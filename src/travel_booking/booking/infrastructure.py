"""
Инфраструктурный слой контекста бронирования.

Содержит реализации репозиториев и единицы работы,
зависимые от конкретных технологий хранения.
"""

import threading
from pathlib import Path
from typing import List, Optional, Union

from ..shared_kernel import (
    ConsoleLogger,
    IEventBus,
    ILogger,
    InMemoryEventBus,
)
from ..shared_kernel.storage import InMemoryRepository, JsonFileRepository, newest_first
from . import interfaces as ports
from .domain import Accommodation, Booking

SAMPLE_ACCOMMODATIONS = [
    Accommodation(
        id="664f1a2b9c1e4a0012a1b001",
        name="Ella Mountain Lodge",
        location="Ella",
        description="Tea-country cabins with a view of Little Adam's Peak",
        price_per_night=85.0,
    ),
    Accommodation(
        id="664f1a2b9c1e4a0012a1b002",
        name="Galle Fort Residence",
        location="Galle",
        description="Colonial villa inside the fort walls",
        price_per_night=140.0,
    ),
    Accommodation(
        id="664f1a2b9c1e4a0012a1b003",
        name="Kandy Lake Hotel",
        location="Kandy",
        description="Lakeside rooms near the Temple of the Tooth",
        price_per_night=110.0,
    ),
]


class InMemoryBookingRepository(InMemoryRepository[Booking], ports.IBookingRepository):
    """Реализация репозитория бронирований в памяти."""

    entity_name = "Booking"

    def list_all(self) -> List[Booking]:
        # Новые бронирования первыми
        return newest_first(list(self._items.values()))


class InMemoryAccommodationRepository(
    InMemoryRepository[Accommodation], ports.IAccommodationRepository
):
    """Реализация репозитория размещений в памяти."""

    entity_name = "Accommodation"

    def __init__(self, seed: bool = True) -> None:
        super().__init__()
        if seed:
            self._initialize_sample_data()

    def _initialize_sample_data(self) -> None:
        """Инициализирует тестовые данные."""
        for accommodation in SAMPLE_ACCOMMODATIONS:
            self.add(accommodation.model_copy())
        self.flush()


class JsonFileBookingRepository(JsonFileRepository[Booking], ports.IBookingRepository):
    """Репозиторий бронирований, хранящий данные в JSON-файле."""

    entity_name = "Booking"

    def __init__(self, file_path: Union[str, Path]):
        super().__init__(file_path, Booking)

    def list_all(self) -> List[Booking]:
        return newest_first(list(self._items.values()))


class JsonFileAccommodationRepository(
    JsonFileRepository[Accommodation], ports.IAccommodationRepository
):
    """Репозиторий размещений, хранящий данные в JSON-файле."""

    entity_name = "Accommodation"

    def __init__(self, file_path: Union[str, Path], seed: bool = True):
        super().__init__(file_path, Accommodation)
        if seed and not self._items:
            for accommodation in SAMPLE_ACCOMMODATIONS:
                self.add(accommodation.model_copy())
            self.flush()


class BookingUnitOfWork(ports.IBookingUnitOfWork):
    """Единица работы для контекста бронирования."""

    def __init__(
        self,
        bookings_repo: Optional[InMemoryRepository] = None,
        accommodations_repo: Optional[InMemoryRepository] = None,
        event_bus: Optional[IEventBus] = None,
        logger: Optional[ILogger] = None,
    ):
        self._logger = logger or ConsoleLogger()
        self._bookings = bookings_repo or InMemoryBookingRepository()
        self._accommodations = accommodations_repo or InMemoryAccommodationRepository()
        self._event_bus = event_bus or InMemoryEventBus(self._logger)
        self._committed = False
        # Одна транзакция за раз: откат возвращает весь репозиторий к снимку
        self._lock = threading.Lock()

    @property
    def bookings(self) -> ports.IBookingRepository:
        return self._bookings

    @property
    def accommodations(self) -> ports.IAccommodationRepository:
        return self._accommodations

    @property
    def event_bus(self) -> IEventBus:
        return self._event_bus

    def commit(self) -> None:
        """Фиксирует все изменения."""
        self._bookings.flush()
        self._accommodations.flush()
        self._committed = True
        self._logger.info("BookingUnitOfWork committed")

    def rollback(self) -> None:
        """Откатывает все изменения."""
        self._bookings.discard()
        self._accommodations.discard()
        self._committed = False
        self._logger.warning("BookingUnitOfWork rolled back")

    def __enter__(self) -> "BookingUnitOfWork":
        self._lock.acquire()
        self._committed = False
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        try:
            if exc_type is None:
                if not self._committed:
                    self.commit()
            else:
                self.rollback()
        finally:
            self._lock.release()
        return False  # Пробрасываем исключение дальше, если оно было


def create_booking_uow(
    storage_backend: str = "memory",
    data_dir: Union[str, Path] = "data",
    event_bus: Optional[IEventBus] = None,
    logger: Optional[ILogger] = None,
) -> BookingUnitOfWork:
    """Собирает единицу работы с репозиториями выбранного типа."""
    if storage_backend == "json":
        data_path = Path(data_dir)
        return BookingUnitOfWork(
            bookings_repo=JsonFileBookingRepository(data_path / "bookings.json"),
            accommodations_repo=JsonFileAccommodationRepository(
                data_path / "accommodations.json"
            ),
            event_bus=event_bus,
            logger=logger,
        )
    if storage_backend != "memory":
        raise ValueError(f"Unknown storage backend: {storage_backend}")
    return BookingUnitOfWork(event_bus=event_bus, logger=logger)
