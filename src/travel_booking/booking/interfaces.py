"""
Интерфейсы (порты) для контекста бронирования.
"""

from __future__ import annotations

from typing import Any, List, Optional, Protocol

from ..shared_kernel import EntityId, IEventBus
from .domain import Accommodation, Booking


class IBookingRepository(Protocol):
    """Интерфейс репозитория для бронирований."""

    def add(self, booking: Booking) -> None: ...
    def get_by_id(self, booking_id: EntityId) -> Optional[Booking]: ...
    def list_all(self) -> List[Booking]: ...
    def update(self, booking: Booking) -> None: ...
    def delete(self, booking_id: EntityId) -> Optional[Booking]: ...


class IAccommodationRepository(Protocol):
    """Интерфейс репозитория для размещений."""

    def add(self, accommodation: Accommodation) -> None: ...
    def get_by_id(self, accommodation_id: EntityId) -> Optional[Accommodation]: ...
    def list_all(self) -> List[Accommodation]: ...


class IBookingUnitOfWork(Protocol):
    """Интерфейс Unit of Work для контекста Booking."""

    @property
    def bookings(self) -> IBookingRepository: ...
    @property
    def accommodations(self) -> IAccommodationRepository: ...
    @property
    def event_bus(self) -> IEventBus: ...

    def __enter__(self) -> IBookingUnitOfWork: ...
    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None: ...
    def commit(self) -> None: ...
    def rollback(self) -> None: ...
