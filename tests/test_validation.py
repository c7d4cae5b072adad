"""
Тесты проверки шагов мастера.
"""

import pytest

from travel_booking.client import BookingDraft, WizardStep, validate_step


@pytest.fixture
def personal_info() -> BookingDraft:
    return BookingDraft(accommodation_id="A1", name="Jane", id_number="X9")


def test_valid_personal_info_passes(personal_info):
    assert validate_step(WizardStep.PERSONAL_INFO, personal_info) == {}


@pytest.mark.parametrize(
    "field, message",
    [
        ("accommodation_id", "Accommodation ID is required"),
        ("name", "Name is required"),
        ("id_number", "ID Number is required"),
    ],
)
@pytest.mark.parametrize("blank", ["", "   ", "\t"])
def test_each_blank_personal_field_fails_alone(personal_info, field, message, blank):
    """Пустое поле дает ошибку только для этого поля."""
    personal_info.set_field(field, blank)

    errors = validate_step(WizardStep.PERSONAL_INFO, personal_info)

    assert errors == {field: message}


def test_empty_draft_reports_all_personal_fields():
    errors = validate_step(WizardStep.PERSONAL_INFO, BookingDraft())

    assert set(errors) == {"accommodation_id", "name", "id_number"}


@pytest.mark.parametrize("email", ["a@b.co", "jane.doe@mail.example.com"])
def test_well_formed_email_passes(email):
    draft = BookingDraft(email_address=email, contact_no="555")

    assert validate_step(WizardStep.CONTACT_DETAILS, draft) == {}


@pytest.mark.parametrize("email", ["not-an-email", "a@b", "a b@c.d", "@b.co"])
def test_malformed_email_fails(email):
    draft = BookingDraft(email_address=email, contact_no="555")

    assert validate_step(WizardStep.CONTACT_DETAILS, draft) == {
        "email_address": "Invalid email format"
    }


def test_missing_email_is_required_not_malformed():
    draft = BookingDraft(email_address="  ", contact_no="555")

    assert validate_step(WizardStep.CONTACT_DETAILS, draft) == {
        "email_address": "Email is required"
    }


def test_empty_contact_number_fails_even_with_valid_email():
    draft = BookingDraft(email_address="a@b.co", contact_no="")

    assert validate_step(WizardStep.CONTACT_DETAILS, draft) == {
        "contact_no": "Contact number is required"
    }


def test_package_step_has_no_required_fields():
    assert validate_step(WizardStep.PACKAGE_SELECTION, BookingDraft()) == {}
