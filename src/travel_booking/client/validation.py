"""
Проверка полей формы бронирования по шагам мастера.
"""

import re
from enum import IntEnum
from typing import Dict

from .draft import BookingDraft

# Нестрогая проверка вида local@domain.tld
EMAIL_PATTERN = re.compile(r"^\S+@\S+\.\S+$")

ValidationErrors = Dict[str, str]


class WizardStep(IntEnum):
    """Шаги мастера бронирования."""

    PERSONAL_INFO = 1
    CONTACT_DETAILS = 2
    PACKAGE_SELECTION = 3


def _is_blank(value: str) -> bool:
    return not value.strip()


def validate_step(step: WizardStep, draft: BookingDraft) -> ValidationErrors:
    """
    Проверяет поля, обязательные на указанном шаге.

    Возвращает словарь «поле → сообщение»; пустой словарь означает,
    что шаг заполнен корректно.
    """
    errors: ValidationErrors = {}

    if step == WizardStep.PERSONAL_INFO:
        if _is_blank(draft.accommodation_id):
            errors["accommodation_id"] = "Accommodation ID is required"
        if _is_blank(draft.name):
            errors["name"] = "Name is required"
        if _is_blank(draft.id_number):
            errors["id_number"] = "ID Number is required"

    elif step == WizardStep.CONTACT_DETAILS:
        if _is_blank(draft.email_address):
            errors["email_address"] = "Email is required"
        elif not EMAIL_PATTERN.match(draft.email_address):
            errors["email_address"] = "Invalid email format"

        if _is_blank(draft.contact_no):
            errors["contact_no"] = "Contact number is required"

    # На шаге выбора пакета у всех полей есть допустимые значения по умолчанию
    return errors
