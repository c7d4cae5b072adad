"""
Модуль контекста отзывов (Reviews Context).

Хранит оценки и отзывы путешественников о местах.
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
