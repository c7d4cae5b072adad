"""
Инфраструктурный слой контекста отзывов.
"""

import threading
from pathlib import Path
from typing import List, Optional, Union

from ..shared_kernel import ConsoleLogger, IEventBus, ILogger, InMemoryEventBus
from ..shared_kernel.storage import InMemoryRepository, JsonFileRepository, newest_first
from . import interfaces as ports
from .domain import Review


class InMemoryReviewRepository(InMemoryRepository[Review], ports.IReviewRepository):
    """Реализация репозитория отзывов в памяти."""

    entity_name = "Review"

    def list_all(self) -> List[Review]:
        return newest_first(list(self._items.values()))

    def find_by_place(self, place_id: str) -> List[Review]:
        return newest_first([r for r in self._items.values() if r.place_id == place_id])


class JsonFileReviewRepository(JsonFileRepository[Review], ports.IReviewRepository):
    """Репозиторий отзывов, хранящий данные в JSON-файле."""

    entity_name = "Review"

    def __init__(self, file_path: Union[str, Path]):
        super().__init__(file_path, Review)

    def list_all(self) -> List[Review]:
        return newest_first(list(self._items.values()))

    def find_by_place(self, place_id: str) -> List[Review]:
        return newest_first([r for r in self._items.values() if r.place_id == place_id])


class ReviewUnitOfWork(ports.IReviewUnitOfWork):
    """Единица работы для контекста отзывов."""

    def __init__(
        self,
        reviews_repo: Optional[InMemoryRepository] = None,
        event_bus: Optional[IEventBus] = None,
        logger: Optional[ILogger] = None,
    ):
        self._logger = logger or ConsoleLogger()
        self._reviews = reviews_repo or InMemoryReviewRepository()
        self._event_bus = event_bus or InMemoryEventBus(self._logger)
        self._committed = False
        # Одна транзакция за раз: откат возвращает весь репозиторий к снимку
        self._lock = threading.Lock()

    @property
    def reviews(self) -> ports.IReviewRepository:
        return self._reviews

    @property
    def event_bus(self) -> IEventBus:
        return self._event_bus

    def commit(self) -> None:
        """Фиксирует все изменения."""
        self._reviews.flush()
        self._committed = True
        self._logger.info("ReviewUnitOfWork committed")

    def rollback(self) -> None:
        """Откатывает все изменения."""
        self._reviews.discard()
        self._committed = False
        self._logger.warning("ReviewUnitOfWork rolled back")

    def __enter__(self) -> "ReviewUnitOfWork":
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
        return False


def create_review_uow(
    storage_backend: str = "memory",
    data_dir: Union[str, Path] = "data",
    event_bus: Optional[IEventBus] = None,
    logger: Optional[ILogger] = None,
) -> ReviewUnitOfWork:
    """Собирает единицу работы с репозиторием выбранного типа."""
    if storage_backend == "json":
        return ReviewUnitOfWork(
            reviews_repo=JsonFileReviewRepository(Path(data_dir) / "reviews.json"),
            event_bus=event_bus,
            logger=logger,
        )
    if storage_backend != "memory":
        raise ValueError(f"Unknown storage backend: {storage_backend}")
    return ReviewUnitOfWork(event_bus=event_bus, logger=logger)
