"""
Доменная модель контекста отзывов.
"""

from datetime import datetime
from typing import Any, List, Mapping

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, ValidationError

from ..shared_kernel import (
    BusinessRuleValidationException,
    DomainEvent,
    EntityId,
    describe_validation_error,
    generate_id,
    now,
)

REQUIRED_FIELDS = ("reviewerName", "reviewText", "rating", "placeId")
MIN_RATING = 1
MAX_RATING = 5


class MissingReviewFieldsException(BusinessRuleValidationException):
    """В запросе на создание отзыва отсутствует обязательное поле."""

    def __init__(self, missing: List[str]):
        super().__init__("All fields are required.")
        self.missing = missing


class ReviewAdded(DomainEvent):
    """Событие добавления отзыва."""

    review_id: EntityId
    place_id: str
    rating: int


class ReviewDeleted(DomainEvent):
    """Событие удаления отзыва."""

    review_id: EntityId
    place_id: str


class Review(BaseModel):
    """Отзыв о месте с оценкой от 1 до 5."""

    model_config = ConfigDict(populate_by_name=True)

    id: EntityId = Field(default_factory=generate_id, alias="_id")
    reviewer_name: str = Field(..., min_length=1, alias="reviewerName")
    review_text: str = Field(..., min_length=1, alias="reviewText")
    rating: int = Field(..., ge=MIN_RATING, le=MAX_RATING)
    place_id: str = Field(..., min_length=1, alias="placeId")
    created_at: datetime = Field(default_factory=now, alias="createdAt")

    _domain_events: List[DomainEvent] = PrivateAttr(default_factory=list)

    def pull_domain_events(self) -> List[DomainEvent]:
        """Возвращает накопленные события и очищает список."""
        events = list(self._domain_events)
        self._domain_events.clear()
        return events

    @classmethod
    def create(cls, data: Mapping[str, Any]) -> "Review":
        """
        Создает отзыв из полей запроса.

        Поле считается отсутствующим, если его нет или значение пустое
        (пустая строка, ``0``, ``None``).
        """
        missing = [name for name in REQUIRED_FIELDS if not data.get(name)]
        if missing:
            raise MissingReviewFieldsException(missing)

        fields = {name: data[name] for name in REQUIRED_FIELDS}
        try:
            review = cls.model_validate(fields)
        except ValidationError as e:
            raise BusinessRuleValidationException(
                describe_validation_error("Review", e)
            ) from e

        review._domain_events.append(
            ReviewAdded(review_id=review.id, place_id=review.place_id, rating=review.rating)
        )
        return review

    def mark_deleted(self) -> None:
        self._domain_events.append(ReviewDeleted(review_id=self.id, place_id=self.place_id))
