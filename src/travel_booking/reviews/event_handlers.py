"""
Обработчики событий контекста отзывов.
"""

from ..shared_kernel import ILogger
from .domain import ReviewAdded, ReviewDeleted


def on_review_added(event: ReviewAdded, logger: ILogger) -> None:
    """Обработчик события добавления отзыва."""
    logger.info(
        "Audit: review added",
        review_id=event.review_id,
        place_id=event.place_id,
        rating=event.rating,
    )


def on_review_deleted(event: ReviewDeleted, logger: ILogger) -> None:
    logger.info("Audit: review deleted", review_id=event.review_id, place_id=event.place_id)
