"""
Доменная модель контекста бронирования.

Содержит записи о размещениях (Accommodation) и бронированиях (Booking),
а также события, которые порождает жизненный цикл бронирования.

Поля моделей доступны в Python под snake_case-именами, а в документах
хранилища и в HTTP API - под camelCase-псевдонимами (``_id``,
``idNumber``, ``numberOfTravellers`` и т.д.).
"""

from datetime import datetime
from typing import Any, Dict, List, Mapping

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PrivateAttr,
    ValidationError,
    field_validator,
)

from ..shared_kernel import (
    BusinessRuleValidationException,
    DomainEvent,
    EntityId,
    PackageType,
    describe_validation_error,
    generate_id,
    now,
)

# Поля, которые нельзя менять через обновление
IMMUTABLE_FIELDS = frozenset({"_id", "id", "createdAt", "created_at"})


def _field_names_by_key(model: type) -> Dict[str, str]:
    """Сопоставляет псевдонимы и имена полей с именами полей модели."""
    names: Dict[str, str] = {}
    for name, info in model.model_fields.items():
        names[name] = name
        if info.alias:
            names[info.alias] = name
    return names


class Accommodation(BaseModel):
    """Размещение (отель, гостевой дом), на которое оформляется бронирование."""

    model_config = ConfigDict(populate_by_name=True)

    id: EntityId = Field(default_factory=generate_id, alias="_id")
    name: str = Field(..., min_length=1)
    location: str = ""
    description: str = ""
    price_per_night: float = Field(0, ge=0, alias="pricePerNight")


class BookingCreated(DomainEvent):
    """Событие создания бронирования."""

    booking_id: EntityId
    accommodation_id: EntityId
    package_type: PackageType
    number_of_travellers: int


class BookingUpdated(DomainEvent):
    """Событие изменения бронирования."""

    booking_id: EntityId
    changed_fields: List[str]


class BookingDeleted(DomainEvent):
    """Событие удаления бронирования."""

    booking_id: EntityId


class Booking(BaseModel):
    """Бронирование размещения."""

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    id: EntityId = Field(default_factory=generate_id, alias="_id")
    accommodation_id: EntityId = Field(..., min_length=1, alias="accommodation")
    name: str = Field(..., min_length=1)
    id_number: str = Field(..., min_length=1, alias="idNumber")
    email_address: str = Field(..., min_length=1, alias="emailAddress")
    contact_no: str = Field(..., min_length=1, alias="contactNo")
    package_type: PackageType = Field(PackageType.NORMAL, alias="packageType")
    number_of_travellers: int = Field(..., ge=1, alias="numberOfTravellers")
    special_needs: str = Field("", alias="specialNeeds")
    created_at: datetime = Field(default_factory=now, alias="createdAt")
    updated_at: datetime = Field(default_factory=now, alias="updatedAt")

    _domain_events: List[DomainEvent] = PrivateAttr(default_factory=list)

    @field_validator("special_needs", mode="before")
    @classmethod
    def trim_special_needs(cls, value: Any) -> Any:
        if value is None:
            return ""
        if isinstance(value, str):
            return value.strip()
        return value

    @property
    def domain_events(self) -> List[DomainEvent]:
        """Возвращает список доменных событий."""
        return self._domain_events

    def pull_domain_events(self) -> List[DomainEvent]:
        """Возвращает накопленные события и очищает список."""
        events = list(self._domain_events)
        self._domain_events.clear()
        return events

    @classmethod
    def create(cls, data: Mapping[str, Any]) -> "Booking":
        """Создает новое бронирование из полей запроса."""
        fields = {key: value for key, value in data.items() if key not in IMMUTABLE_FIELDS}
        try:
            booking = cls.model_validate(fields)
        except ValidationError as e:
            raise BusinessRuleValidationException(
                describe_validation_error("Booking", e)
            ) from e

        booking._domain_events.append(
            BookingCreated(
                booking_id=booking.id,
                accommodation_id=booking.accommodation_id,
                package_type=booking.package_type,
                number_of_travellers=booking.number_of_travellers,
            )
        )
        return booking

    def apply_changes(self, changes: Mapping[str, Any]) -> "Booking":
        """
        Применяет частичное обновление.

        Новое состояние проверяется по тем же правилам, что и при создании;
        при ошибке исходная запись не меняется. Возвращает новую запись.
        """
        field_names = _field_names_by_key(type(self))
        document = self.model_dump()
        for key, value in changes.items():
            if key in IMMUTABLE_FIELDS:
                continue
            document[field_names.get(key, key)] = value
        document["updated_at"] = now()

        try:
            updated = type(self).model_validate(document)
        except ValidationError as e:
            raise BusinessRuleValidationException(
                describe_validation_error("Booking", e)
            ) from e

        changed = sorted(
            name
            for name in type(self).model_fields
            if name != "updated_at" and getattr(updated, name) != getattr(self, name)
        )
        updated._domain_events.append(
            BookingUpdated(booking_id=updated.id, changed_fields=changed)
        )
        return updated

    def mark_deleted(self) -> None:
        """Регистрирует событие удаления записи."""
        self._domain_events.append(BookingDeleted(booking_id=self.id))
