"""
Общие фикстуры тестов.
"""

from typing import Any, Dict, List

import pytest
from fastapi.testclient import TestClient

from travel_booking.app import create_app
from travel_booking.config import Settings


class RecordingLogger:
    """Логгер, запоминающий сообщения вместо вывода в консоль."""

    def __init__(self) -> None:
        self.records: List[tuple] = []

    def _record(self, level: str, message: str, **kwargs: Any) -> None:
        self.records.append((level, message, kwargs))

    def info(self, message: str, **kwargs: Any) -> None:
        self._record("info", message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._record("error", message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._record("warning", message, **kwargs)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._record("debug", message, **kwargs)

    def messages(self, level: str) -> List[str]:
        return [message for lvl, message, _ in self.records if lvl == level]


@pytest.fixture
def logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(storage_backend="memory", data_dir=tmp_path, debug=True)


@pytest.fixture
def client(settings, logger) -> TestClient:
    """HTTP-клиент к приложению с хранилищем в памяти."""
    return TestClient(create_app(settings, logger))


@pytest.fixture
def booking_payload() -> Dict[str, Any]:
    """Тело запроса на создание бронирования."""
    return {
        "accommodation": "acc1",
        "name": "Jane Doe",
        "idNumber": "ID123",
        "emailAddress": "jane@example.com",
        "contactNo": "555-1234",
        "packageType": "premium",
        "numberOfTravellers": 3,
        "specialNeeds": "",
    }


@pytest.fixture
def review_payload() -> Dict[str, Any]:
    return {
        "reviewerName": "Kasun",
        "reviewText": "Beautiful sunrise hike",
        "rating": 5,
        "placeId": "ella",
    }
