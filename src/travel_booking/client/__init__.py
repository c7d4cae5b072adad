"""
Клиентские формы: мастер бронирования и форма отзыва.
"""

from .draft import BookingDraft
from .exceptions import FormError, UnknownFieldError, WizardTransitionError
from .gateway import ReviewGateway, SubmissionGateway, SubmissionResult
from .pricing import PACKAGE_PRICES, total_price, unit_price
from .review_form import ReviewDraft, ReviewForm
from .validation import WizardStep, validate_step
from .wizard import BookingWizard

__all__ = [
    "BookingDraft",
    "BookingWizard",
    "WizardStep",
    "validate_step",
    "PACKAGE_PRICES",
    "unit_price",
    "total_price",
    "SubmissionGateway",
    "SubmissionResult",
    "ReviewGateway",
    "ReviewDraft",
    "ReviewForm",
    "FormError",
    "UnknownFieldError",
    "WizardTransitionError",
]
