"""
Прикладной слой контекста бронирования.

Содержит сервисы приложения, которые координируют
взаимодействие между HTTP API и доменной моделью.
"""

from datetime import datetime
from typing import Any, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from ..shared_kernel import (
    ConsoleLogger,
    EntityId,
    EntityNotFoundException,
    ILogger,
    PackageType,
)
from . import interfaces as ports
from .domain import Accommodation, Booking

# DTO для исходящих данных


class AccommodationDTO(BaseModel):
    """DTO для представления размещения."""

    model_config = ConfigDict(populate_by_name=True)

    id: EntityId = Field(..., alias="_id")
    name: str
    location: str
    description: str
    price_per_night: float = Field(..., alias="pricePerNight")

    @classmethod
    def from_domain(cls, accommodation: Accommodation) -> "AccommodationDTO":
        """Создает DTO из доменной модели."""
        return cls(
            id=accommodation.id,
            name=accommodation.name,
            location=accommodation.location,
            description=accommodation.description,
            price_per_night=accommodation.price_per_night,
        )


class BookingDTO(BaseModel):
    """
    DTO для представления бронирования.

    Поле ``accommodation`` содержит идентификатор размещения либо, если
    запись была связана с каталогом, само размещение (``None``, если
    размещение с таким идентификатором не найдено).
    """

    model_config = ConfigDict(populate_by_name=True)

    id: EntityId = Field(..., alias="_id")
    accommodation: Union[AccommodationDTO, EntityId, None]
    name: str
    id_number: str = Field(..., alias="idNumber")
    email_address: str = Field(..., alias="emailAddress")
    contact_no: str = Field(..., alias="contactNo")
    package_type: PackageType = Field(..., alias="packageType")
    number_of_travellers: int = Field(..., alias="numberOfTravellers")
    special_needs: str = Field(..., alias="specialNeeds")
    created_at: datetime = Field(..., alias="createdAt")
    updated_at: datetime = Field(..., alias="updatedAt")

    @classmethod
    def from_domain(
        cls,
        booking: Booking,
        accommodation: Union[Accommodation, EntityId, None] = None,
    ) -> "BookingDTO":
        """Создает DTO из доменной модели."""
        if isinstance(accommodation, Accommodation):
            accommodation = AccommodationDTO.from_domain(accommodation)

        return cls(
            id=booking.id,
            accommodation=accommodation,
            name=booking.name,
            id_number=booking.id_number,
            email_address=booking.email_address,
            contact_no=booking.contact_no,
            package_type=booking.package_type,
            number_of_travellers=booking.number_of_travellers,
            special_needs=booking.special_needs,
            created_at=booking.created_at,
            updated_at=booking.updated_at,
        )

    def to_response(self) -> dict:
        return self.model_dump(by_alias=True, mode="json")


# Сервисы приложения


class BookingApplicationService:
    """Сервис приложения для работы с бронированиями."""

    def __init__(self, uow: ports.IBookingUnitOfWork, logger: Optional[ILogger] = None):
        """Инициализирует сервис."""
        self._uow = uow
        self._logger = logger or ConsoleLogger()

    @property
    def uow(self) -> ports.IBookingUnitOfWork:
        return self._uow

    def _publish(self, booking: Booking) -> None:
        for event in booking.pull_domain_events():
            self._uow.event_bus.publish(event)

    def _populate(self, booking: Booking) -> BookingDTO:
        accommodation = self._uow.accommodations.get_by_id(booking.accommodation_id)
        return BookingDTO.from_domain(booking, accommodation)

    def create_booking(self, payload: Mapping[str, Any]) -> BookingDTO:
        """Создает новое бронирование."""
        with self._uow:
            booking = Booking.create(payload)
            self._uow.bookings.add(booking)
            self._uow.commit()

        self._logger.info(
            "Booking created",
            booking_id=booking.id,
            accommodation=booking.accommodation_id,
        )
        self._publish(booking)
        return BookingDTO.from_domain(booking, booking.accommodation_id)

    def list_bookings(self) -> List[BookingDTO]:
        """Возвращает все бронирования вместе со связанными размещениями."""
        return [self._populate(booking) for booking in self._uow.bookings.list_all()]

    def get_booking(self, booking_id: EntityId) -> BookingDTO:
        """Возвращает бронирование вместе со связанным размещением."""
        booking = self._uow.bookings.get_by_id(booking_id)
        if booking is None:
            raise EntityNotFoundException("Booking", booking_id)
        return self._populate(booking)

    def update_booking(self, booking_id: EntityId, changes: Mapping[str, Any]) -> BookingDTO:
        """Обновляет бронирование; новое состояние проходит полную проверку."""
        with self._uow:
            booking = self._uow.bookings.get_by_id(booking_id)
            if booking is None:
                raise EntityNotFoundException("Booking", booking_id)

            updated = booking.apply_changes(changes)
            self._uow.bookings.update(updated)
            self._uow.commit()

        self._logger.info("Booking updated", booking_id=booking_id)
        self._publish(updated)
        return BookingDTO.from_domain(updated, updated.accommodation_id)

    def delete_booking(self, booking_id: EntityId) -> None:
        """Удаляет бронирование."""
        with self._uow:
            booking = self._uow.bookings.delete(booking_id)
            if booking is None:
                raise EntityNotFoundException("Booking", booking_id)
            self._uow.commit()

        self._logger.info("Booking deleted", booking_id=booking_id)
        booking.mark_deleted()
        self._publish(booking)


class AccommodationApplicationService:
    """Сервис приложения для работы с каталогом размещений."""

    def __init__(self, uow: ports.IBookingUnitOfWork):
        self._uow = uow

    def list_accommodations(self) -> List[AccommodationDTO]:
        return [
            AccommodationDTO.from_domain(accommodation)
            for accommodation in self._uow.accommodations.list_all()
        ]

    def get_accommodation(self, accommodation_id: EntityId) -> AccommodationDTO:
        accommodation = self._uow.accommodations.get_by_id(accommodation_id)
        if accommodation is None:
            raise EntityNotFoundException("Accommodation", accommodation_id)
        return AccommodationDTO.from_domain(accommodation)
