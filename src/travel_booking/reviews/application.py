"""
Прикладной слой контекста отзывов.
"""

from datetime import datetime
from typing import Any, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..shared_kernel import ConsoleLogger, EntityId, EntityNotFoundException, ILogger
from . import interfaces as ports
from .domain import Review


class ReviewDTO(BaseModel):
    """DTO для представления отзыва."""

    model_config = ConfigDict(populate_by_name=True)

    id: EntityId = Field(..., alias="_id")
    reviewer_name: str = Field(..., alias="reviewerName")
    review_text: str = Field(..., alias="reviewText")
    rating: int
    place_id: str = Field(..., alias="placeId")
    created_at: datetime = Field(..., alias="createdAt")

    @classmethod
    def from_domain(cls, review: Review) -> "ReviewDTO":
        """Создает DTO из доменной модели."""
        return cls(
            id=review.id,
            reviewer_name=review.reviewer_name,
            review_text=review.review_text,
            rating=review.rating,
            place_id=review.place_id,
            created_at=review.created_at,
        )

    def to_response(self) -> dict:
        return self.model_dump(by_alias=True, mode="json")


class ReviewApplicationService:
    """Сервис приложения для работы с отзывами."""

    def __init__(self, uow: ports.IReviewUnitOfWork, logger: Optional[ILogger] = None):
        self._uow = uow
        self._logger = logger or ConsoleLogger()

    @property
    def uow(self) -> ports.IReviewUnitOfWork:
        return self._uow

    def _publish(self, review: Review) -> None:
        for event in review.pull_domain_events():
            self._uow.event_bus.publish(event)

    def add_review(self, payload: Mapping[str, Any]) -> ReviewDTO:
        """Добавляет отзыв."""
        with self._uow:
            review = Review.create(payload)
            self._uow.reviews.add(review)
            self._uow.commit()

        self._logger.info("Review added", review_id=review.id, place_id=review.place_id)
        self._publish(review)
        return ReviewDTO.from_domain(review)

    def reviews_for_place(self, place_id: str) -> List[ReviewDTO]:
        """Отзывы о месте, новые первыми."""
        return [ReviewDTO.from_domain(r) for r in self._uow.reviews.find_by_place(place_id)]

    def all_reviews(self) -> List[ReviewDTO]:
        """Все отзывы, новые первыми."""
        return [ReviewDTO.from_domain(r) for r in self._uow.reviews.list_all()]

    def delete_review(self, review_id: EntityId) -> None:
        """Удаляет отзыв."""
        with self._uow:
            review = self._uow.reviews.delete(review_id)
            if review is None:
                raise EntityNotFoundException("Review", review_id)
            self._uow.commit()

        self._logger.info("Review deleted", review_id=review_id)
        review.mark_deleted()
        self._publish(review)
