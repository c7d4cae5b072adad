"""
Общее ядро (Shared Kernel) туристической платформы.

Содержит общие типы данных и утилиты, используемые в различных ограниченных контекстах.
"""

from .domain import (
    BusinessRuleValidationException,
    DomainEvent,
    # Исключения
    DomainException,
    # Базовые типы
    EntityId,
    EntityNotFoundException,
    # Перечисления
    PackageType,
    generate_id,
    # Утилиты
    describe_validation_error,
    now,
)
from .events import IEventBus, InMemoryEventBus
from .logger import ConsoleLogger, ILogger

__all__ = [
    # Базовые типы
    "EntityId",
    "generate_id",
    "DomainEvent",
    # Перечисления
    "PackageType",
    # Исключения
    "DomainException",
    "BusinessRuleValidationException",
    "EntityNotFoundException",
    # События
    "IEventBus",
    "InMemoryEventBus",
    # Логирование
    "ILogger",
    "ConsoleLogger",
    # Утилиты
    "describe_validation_error",
    "now",
]
