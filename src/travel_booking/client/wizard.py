"""
Мастер бронирования - конечный автомат из трех шагов.

    1 (личные данные) --next--> 2 (контакты) --next--> 3 (пакет) --submit--> шлюз
    3 --back--> 2 --back--> 1

Переход ``next`` выполняется только после успешной проверки текущего шага,
``back`` не проверяет ничего и сохраняет введенные данные. Отправка
доступна только на шаге 3 и только если предыдущая отправка завершилась.
"""

from typing import Any, Optional

from ..shared_kernel import ConsoleLogger, ILogger
from .draft import BookingDraft
from .exceptions import WizardTransitionError
from .gateway import ISubmissionGateway, SubmissionResult
from .validation import ValidationErrors, WizardStep, validate_step

SUCCESS_MESSAGE = "Booking successful! Booking ID: {booking_id}"
ERROR_MESSAGE = "Error: {error}"


class BookingWizard:
    """Состояние одной сессии заполнения формы бронирования."""

    def __init__(self, gateway: ISubmissionGateway, logger: Optional[ILogger] = None):
        self._gateway = gateway
        self._logger = logger or ConsoleLogger()
        self.draft = BookingDraft()
        self.step = WizardStep.PERSONAL_INFO
        self.errors: ValidationErrors = {}
        self.message: Optional[str] = None
        self.is_submitting = False
        # Номер сессии; меняется при уходе со страницы, чтобы отбросить поздние ответы
        self._session = 0

    @property
    def total_price(self) -> int:
        return self.draft.total_price

    def set_field(self, name: str, value: Any) -> None:
        """Изменяет поле черновика и снимает ошибку этого поля."""
        field_name = self.draft.set_field(name, value)
        self.errors.pop(field_name, None)

    def increment_travellers(self) -> None:
        self.draft.increment_travellers()

    def decrement_travellers(self) -> None:
        self.draft.decrement_travellers()

    def validate(self) -> bool:
        """Проверяет текущий шаг; ошибки заменяются целиком."""
        self.errors = validate_step(self.step, self.draft)
        return not self.errors

    def next_step(self) -> bool:
        """Переходит на следующий шаг, если текущий заполнен корректно."""
        if self.step == WizardStep.PACKAGE_SELECTION:
            raise WizardTransitionError("Package selection is the last step")
        if not self.validate():
            return False
        self.step = WizardStep(self.step + 1)
        return True

    def previous_step(self) -> None:
        if self.step == WizardStep.PERSONAL_INFO:
            raise WizardTransitionError("Personal information is the first step")
        self.step = WizardStep(self.step - 1)

    def _reset_form(self) -> None:
        self.draft = BookingDraft()
        self.errors = {}
        self.step = WizardStep.PERSONAL_INFO

    async def submit(self) -> Optional[SubmissionResult]:
        """
        Отправляет бронирование.

        Возвращает ``None``, если шаг не прошел проверку, иначе результат
        шлюза. При успехе форма сбрасывается на шаг 1, при ошибке черновик
        и шаг остаются без изменений.
        """
        if self.step != WizardStep.PACKAGE_SELECTION:
            raise WizardTransitionError("Booking can only be submitted from the last step")
        if self.is_submitting:
            raise WizardTransitionError("A booking submission is already in progress")
        if not self.validate():
            return None

        session = self._session
        self.is_submitting = True
        try:
            result = await self._gateway.submit(self.draft.model_copy())
        finally:
            if session == self._session:
                self.is_submitting = False

        if session != self._session:
            self._logger.warning(
                "Discarding response for an abandoned booking form",
                ok=result.ok,
                booking_id=result.booking_id,
            )
            return result

        if result.ok:
            self.message = SUCCESS_MESSAGE.format(booking_id=result.booking_id)
            self._reset_form()
        else:
            self.message = ERROR_MESSAGE.format(error=result.error)
        return result

    def abandon(self) -> None:
        """Пользователь покинул форму: состояние сбрасывается, ожидаемый ответ будет отброшен."""
        self._session += 1
        self._reset_form()
        self.message = None
        self.is_submitting = False
        self._logger.debug("Booking form abandoned", session=self._session)
