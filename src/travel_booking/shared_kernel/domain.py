"""
Основные доменные типы и утилиты общего ядра.
"""

from datetime import datetime, timezone
from enum import Enum
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, ValidationError

# Идентификаторы записей непрозрачны для клиентов (аналог ObjectId)
EntityId = str


def generate_id() -> EntityId:
    """Генерирует новый идентификатор записи."""
    return uuid4().hex


class PackageType(str, Enum):
    """Уровни туристических пакетов."""

    NORMAL = "normal"
    PREMIUM = "premium"
    VIP = "vip"


class DomainEvent(BaseModel):
    """Базовый класс для всех доменных событий."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    event_id: UUID = Field(default_factory=uuid4)
    occurred_on: datetime = Field(default_factory=lambda: now())

    @property
    def event_type(self) -> str:
        return type(self).__name__


# Общие исключения
class DomainException(Exception):
    """Базовое исключение для доменных ошибок."""

    pass


class BusinessRuleValidationException(DomainException):
    """Исключение при нарушении бизнес-правил."""

    pass


class EntityNotFoundException(DomainException):
    """Запись с указанным идентификатором не найдена."""

    def __init__(self, entity: str, entity_id: EntityId):
        super().__init__(f"{entity} with id {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id


# Общие утилиты
def now() -> datetime:
    """Возвращает текущую дату и время (UTC)."""
    return datetime.now(timezone.utc)


def describe_validation_error(model_name: str, error: ValidationError) -> str:
    """Формирует читаемое сообщение из ошибки валидации pydantic."""
    parts = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or model_name
        parts.append(f"{location}: {item['msg']}")
    return f"{model_name} validation failed: " + "; ".join(parts)
