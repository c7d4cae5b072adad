"""
Форма добавления отзыва.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..shared_kernel import ConsoleLogger, ILogger
from .exceptions import UnknownFieldError, WizardTransitionError
from .gateway import ReviewGateway, SubmissionResult

MIN_RATING = 1
MAX_RATING = 5
SUCCESS_MESSAGE = "Review added successfully"


class ReviewDraft(BaseModel):
    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    reviewer_name: str = Field("", alias="reviewerName")
    review_text: str = Field("", alias="reviewText")
    rating: int = MAX_RATING
    place_id: str = Field("", alias="placeId")

    @field_validator("rating", mode="before")
    @classmethod
    def _clamp_rating(cls, value: Any) -> int:
        try:
            rating = int(value)
        except (TypeError, ValueError):
            return MAX_RATING
        return min(MAX_RATING, max(MIN_RATING, rating))


class ReviewForm:
    """Состояние формы отзыва и ее отправка."""

    def __init__(self, gateway: ReviewGateway, logger: Optional[ILogger] = None):
        self._gateway = gateway
        self._logger = logger or ConsoleLogger()
        self.draft = ReviewDraft()
        self.message: Optional[str] = None
        self.is_submitting = False

    def set_field(self, name: str, value: Any) -> None:
        fields = ReviewDraft.model_fields
        field_name = name if name in fields else next(
            (key for key, field in fields.items() if field.alias == name), None
        )
        if field_name is None:
            raise UnknownFieldError(name)
        setattr(self.draft, field_name, value)

    def set_rating(self, rating: int) -> None:
        self.draft.rating = rating

    async def submit(self) -> SubmissionResult:
        if self.is_submitting:
            raise WizardTransitionError("A review submission is already in progress")

        self.is_submitting = True
        try:
            result = await self._gateway.add_review(self.draft.model_dump(by_alias=True))
        finally:
            self.is_submitting = False

        if result.ok:
            self.message = SUCCESS_MESSAGE
            self.draft = ReviewDraft()
        else:
            self.message = f"Error: {result.error}"
        return result
