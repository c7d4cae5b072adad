"""
Модуль контекста бронирования (Booking Context).

Отвечает за хранение бронирований размещений, включая:
- Создание, просмотр, изменение и удаление бронирований
- Связь бронирования с каталогом размещений
- HTTP API, через который работает форма бронирования
"""

from . import api, application, domain, event_handlers, infrastructure, interfaces

__all__ = [
    "domain",
    "event_handlers",
    "application",
    "infrastructure",
    "interfaces",
    "api",
]
