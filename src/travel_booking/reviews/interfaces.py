"""
Интерфейсы (порты) для контекста отзывов.
"""

from __future__ import annotations

from typing import Any, List, Optional, Protocol

from ..shared_kernel import EntityId, IEventBus
from .domain import Review


class IReviewRepository(Protocol):
    """Интерфейс репозитория для отзывов."""

    def add(self, review: Review) -> None: ...
    def get_by_id(self, review_id: EntityId) -> Optional[Review]: ...
    def list_all(self) -> List[Review]: ...
    def find_by_place(self, place_id: str) -> List[Review]: ...
    def delete(self, review_id: EntityId) -> Optional[Review]: ...


class IReviewUnitOfWork(Protocol):
    """Интерфейс Unit of Work для контекста Reviews."""

    @property
    def reviews(self) -> IReviewRepository: ...
    @property
    def event_bus(self) -> IEventBus: ...

    def __enter__(self) -> IReviewUnitOfWork: ...
    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None: ...
    def commit(self) -> None: ...
    def rollback(self) -> None: ...
