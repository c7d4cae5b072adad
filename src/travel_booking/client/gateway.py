"""
Шлюзы отправки форм в HTTP API.

Каждая отправка выполняется ровно одной попыткой: повторов и
дедупликации нет, ответ сервера превращается в ``SubmissionResult``.
"""

from typing import Any, Dict, Optional, Protocol

import httpx
from pydantic import BaseModel

from ..config import Settings, get_settings
from ..shared_kernel import ConsoleLogger, ILogger
from .draft import BookingDraft

DEFAULT_BOOKING_ERROR = "Failed to submit booking"
DEFAULT_REVIEW_ERROR = "Failed to submit review"
MISSING_BOOKING_ID_ERROR = "Booking ID missing from server response"


class SubmissionResult(BaseModel):
    """Результат отправки формы."""

    ok: bool
    booking_id: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def success(cls, booking_id: Optional[str] = None) -> "SubmissionResult":
        return cls(ok=True, booking_id=booking_id)

    @classmethod
    def failure(cls, error: str) -> "SubmissionResult":
        return cls(ok=False, error=error)


class ISubmissionGateway(Protocol):
    """Интерфейс шлюза создания бронирования."""

    async def submit(self, draft: BookingDraft) -> SubmissionResult: ...


class HttpGateway:
    """Базовый шлюз, отправляющий JSON-документы POST-запросом."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        logger: Optional[ILogger] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport
        self._logger = logger or ConsoleLogger()

    async def _post(self, path: str, payload: Dict[str, Any]) -> httpx.Response:
        async with httpx.AsyncClient(
            base_url=self.base_url, timeout=self.timeout, transport=self._transport
        ) as client:
            return await client.post(path, json=payload)

    @staticmethod
    def _body_field(response: httpx.Response, key: str) -> Optional[str]:
        """Строковое поле из JSON-тела ответа, если оно есть."""
        try:
            body = response.json()
        except ValueError:
            return None
        if isinstance(body, dict):
            value = body.get(key)
            if isinstance(value, str) and value:
                return value
        return None

    def _failure(self, response: httpx.Response, key: str) -> SubmissionResult:
        message = self._body_field(response, key) or (
            f"Request failed with status code {response.status_code}"
        )
        self._logger.warning(
            "Submission rejected", status_code=response.status_code, error=message
        )
        return SubmissionResult.failure(message)

    def _transport_failure(self, exc: httpx.HTTPError, fallback: str) -> SubmissionResult:
        message = str(exc) or fallback
        self._logger.error("Submission failed", error=message)
        return SubmissionResult.failure(message)


class SubmissionGateway(HttpGateway, ISubmissionGateway):
    """Шлюз, создающий бронирование через ``POST /api/booking/create``."""

    def __init__(
        self,
        base_url: str,
        create_path: str = "/api/booking/create",
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        logger: Optional[ILogger] = None,
    ):
        super().__init__(base_url, timeout=timeout, transport=transport, logger=logger)
        self.create_path = create_path

    @classmethod
    def from_settings(
        cls, settings: Optional[Settings] = None, logger: Optional[ILogger] = None
    ) -> "SubmissionGateway":
        settings = settings or get_settings()
        return cls(
            settings.api_base_url,
            create_path=settings.booking_create_path,
            timeout=settings.request_timeout,
            logger=logger,
        )

    async def submit(self, draft: BookingDraft) -> SubmissionResult:
        """Отправляет черновик и возвращает идентификатор созданного бронирования."""
        self._logger.info("Submitting booking", url=self.base_url + self.create_path)
        try:
            response = await self._post(self.create_path, draft.to_payload())
        except httpx.HTTPError as exc:
            return self._transport_failure(exc, DEFAULT_BOOKING_ERROR)

        if not response.is_success:
            return self._failure(response, "message")

        booking_id = self._booking_id(response)
        if booking_id is None:
            self._logger.error(
                "Booking response without an id", status_code=response.status_code
            )
            return SubmissionResult.failure(MISSING_BOOKING_ID_ERROR)

        self._logger.info("Booking created", booking_id=booking_id)
        return SubmissionResult.success(booking_id)

    @staticmethod
    def _booking_id(response: httpx.Response) -> Optional[str]:
        """Идентификатор созданной записи; числовой идентификатор приводится к строке."""
        try:
            body = response.json()
        except ValueError:
            return None
        if not isinstance(body, dict):
            return None
        value = body.get("_id")
        if isinstance(value, bool) or not isinstance(value, (str, int)):
            return None
        return str(value) or None


class ReviewGateway(HttpGateway):
    """Шлюз, добавляющий отзыв через ``POST /api/reviews/add``."""

    def __init__(
        self,
        base_url: str,
        add_path: str = "/api/reviews/add",
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        logger: Optional[ILogger] = None,
    ):
        super().__init__(base_url, timeout=timeout, transport=transport, logger=logger)
        self.add_path = add_path

    @classmethod
    def from_settings(
        cls, settings: Optional[Settings] = None, logger: Optional[ILogger] = None
    ) -> "ReviewGateway":
        settings = settings or get_settings()
        return cls(
            settings.api_base_url,
            add_path=settings.review_add_path,
            timeout=settings.request_timeout,
            logger=logger,
        )

    async def add_review(self, payload: Dict[str, Any]) -> SubmissionResult:
        try:
            response = await self._post(self.add_path, payload)
        except httpx.HTTPError as exc:
            return self._transport_failure(exc, DEFAULT_REVIEW_ERROR)

        if not response.is_success:
            return self._failure(response, "error")
        return SubmissionResult.success()
