"""
HTTP API контекста отзывов (префикс ``/api/reviews``).
"""

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, Request, status
from fastapi.responses import JSONResponse

from ..shared_kernel import (
    BusinessRuleValidationException,
    EntityNotFoundException,
    ILogger,
)
from .application import ReviewApplicationService

router = APIRouter(tags=["reviews"])


def get_review_service(request: Request) -> ReviewApplicationService:
    return request.app.state.review_service


def get_logger(request: Request) -> ILogger:
    return request.app.state.logger


def _error(status_code: int, error: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": error})


@router.post("/add", status_code=status.HTTP_201_CREATED)
def add_review(
    payload: Dict[str, Any] = Body(...),
    service: ReviewApplicationService = Depends(get_review_service),
    logger: ILogger = Depends(get_logger),
):
    try:
        review = service.add_review(payload)
    except BusinessRuleValidationException as exc:
        return _error(status.HTTP_400_BAD_REQUEST, str(exc))
    except Exception as exc:
        # Любая ошибка сохранения отдается клиенту как ошибка запроса
        logger.error("Error adding review", error=str(exc))
        return _error(status.HTTP_400_BAD_REQUEST, str(exc))
    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content={"message": "Review added successfully", "review": review.to_response()},
    )


@router.get("/place/{place_id}")
def reviews_for_place(
    place_id: str,
    service: ReviewApplicationService = Depends(get_review_service),
    logger: ILogger = Depends(get_logger),
):
    try:
        reviews = service.reviews_for_place(place_id)
    except Exception as exc:
        logger.error("Error fetching reviews", place_id=place_id, error=str(exc))
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))
    return [review.to_response() for review in reviews]


@router.get("/")
def all_reviews(
    service: ReviewApplicationService = Depends(get_review_service),
    logger: ILogger = Depends(get_logger),
):
    try:
        reviews = service.all_reviews()
    except Exception as exc:
        logger.error("Error fetching reviews", error=str(exc))
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))
    return [review.to_response() for review in reviews]


@router.delete("/{review_id}")
def delete_review(
    review_id: str,
    service: ReviewApplicationService = Depends(get_review_service),
    logger: ILogger = Depends(get_logger),
):
    try:
        service.delete_review(review_id)
    except EntityNotFoundException:
        return _error(status.HTTP_404_NOT_FOUND, "Review not found")
    except Exception as exc:
        logger.error("Error deleting review", review_id=review_id, error=str(exc))
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))
    return {"message": "Review deleted successfully"}
