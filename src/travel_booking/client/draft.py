"""
Состояние формы бронирования (черновик бронирования).
"""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..shared_kernel import PackageType
from .exceptions import UnknownFieldError
from .pricing import total_price

MIN_TRAVELLERS = 1


def clamp_travellers(value: Any) -> int:
    """Приводит количество путешественников к целому числу не меньше 1."""
    try:
        number = int(value)
    except OverflowError:
        # Бесконечность не является количеством
        return MIN_TRAVELLERS
    except (TypeError, ValueError):
        try:
            number = int(float(value))
        except (TypeError, ValueError, OverflowError):
            return MIN_TRAVELLERS
    return max(MIN_TRAVELLERS, number)


class BookingDraft(BaseModel):
    """
    Черновик бронирования, который заполняет пользователь.

    Количество путешественников ограничивается снизу единицей при создании
    и при любом присваивании. Итоговая цена не хранится, а вычисляется
    из пакета и количества путешественников.
    """

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    accommodation_id: str = Field("", alias="accommodation")
    name: str = ""
    id_number: str = Field("", alias="idNumber")
    email_address: str = Field("", alias="emailAddress")
    contact_no: str = Field("", alias="contactNo")
    package_type: str = Field(PackageType.NORMAL.value, alias="packageType")
    number_of_travellers: int = Field(MIN_TRAVELLERS, alias="numberOfTravellers")
    special_needs: str = Field("", alias="specialNeeds")

    @field_validator("number_of_travellers", mode="before")
    @classmethod
    def _clamp_travellers(cls, value: Any) -> int:
        return clamp_travellers(value)

    @field_validator("package_type", mode="before")
    @classmethod
    def _package_value(cls, value: Any) -> Any:
        if isinstance(value, PackageType):
            return value.value
        return value

    @property
    def total_price(self) -> int:
        return total_price(self.package_type, self.number_of_travellers)

    @classmethod
    def resolve_field(cls, name: str) -> str:
        """Возвращает имя поля модели по имени поля или его псевдониму."""
        if name in cls.model_fields:
            return name
        for field_name, field in cls.model_fields.items():
            if field.alias == name:
                return field_name
        raise UnknownFieldError(name)

    def set_field(self, name: str, value: Any) -> str:
        """Устанавливает значение поля; возвращает имя поля модели."""
        field_name = self.resolve_field(name)
        setattr(self, field_name, value)
        return field_name

    def increment_travellers(self) -> None:
        self.number_of_travellers = self.number_of_travellers + 1

    def decrement_travellers(self) -> None:
        self.number_of_travellers = self.number_of_travellers - 1

    def to_payload(self) -> Dict[str, Any]:
        """Тело запроса на создание бронирования."""
        return self.model_dump(by_alias=True)
