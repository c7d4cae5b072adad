"""
Исключения клиентских форм.
"""


class FormError(Exception):
    """Базовое исключение клиентских форм."""

    pass


class UnknownFieldError(FormError):
    """Попытка изменить поле, которого нет в форме."""

    def __init__(self, name: str):
        super().__init__(f"Unknown form field: {name}")
        self.name = name


class WizardTransitionError(FormError):
    """Переход, недопустимый в текущем состоянии мастера."""

    pass
