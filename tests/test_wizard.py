"""
Тесты мастера бронирования.
"""

import asyncio
from typing import List

import httpx
import pytest

from travel_booking.client import (
    BookingDraft,
    BookingWizard,
    SubmissionGateway,
    SubmissionResult,
    WizardStep,
    WizardTransitionError,
)


class FakeGateway:
    """Шлюз, возвращающий заранее заданный результат."""

    def __init__(self, result: SubmissionResult):
        self.result = result
        self.submitted: List[BookingDraft] = []
        self.release = asyncio.Event()
        self.release.set()

    async def submit(self, draft: BookingDraft) -> SubmissionResult:
        self.submitted.append(draft)
        await self.release.wait()
        return self.result


def fill_personal_info(wizard: BookingWizard) -> None:
    wizard.set_field("accommodation", "acc1")
    wizard.set_field("name", "Jane Doe")
    wizard.set_field("idNumber", "ID123")


def fill_contact_details(wizard: BookingWizard) -> None:
    wizard.set_field("emailAddress", "jane@example.com")
    wizard.set_field("contactNo", "555-1234")


def advance_to_package_step(wizard: BookingWizard) -> None:
    fill_personal_info(wizard)
    assert wizard.next_step()
    fill_contact_details(wizard)
    assert wizard.next_step()
    wizard.set_field("packageType", "premium")
    wizard.set_field("numberOfTravellers", 3)


@pytest.fixture
def gateway() -> FakeGateway:
    return FakeGateway(SubmissionResult.success("b1"))


@pytest.fixture
def wizard(gateway, logger) -> BookingWizard:
    return BookingWizard(gateway, logger)


class TestNavigation:
    """Переходы между шагами."""

    def test_starts_on_personal_info(self, wizard):
        assert wizard.step == WizardStep.PERSONAL_INFO
        assert wizard.errors == {}
        assert wizard.total_price == 100

    def test_next_with_invalid_step_stays_and_reports_errors(self, wizard):
        assert wizard.next_step() is False

        assert wizard.step == WizardStep.PERSONAL_INFO
        assert set(wizard.errors) == {"accommodation_id", "name", "id_number"}

    def test_next_with_valid_step_advances(self, wizard):
        fill_personal_info(wizard)

        assert wizard.next_step() is True
        assert wizard.step == WizardStep.CONTACT_DETAILS
        assert wizard.errors == {}

    def test_back_keeps_entered_data(self, wizard):
        fill_personal_info(wizard)
        wizard.next_step()

        wizard.previous_step()

        assert wizard.step == WizardStep.PERSONAL_INFO
        assert wizard.draft.name == "Jane Doe"
        assert wizard.draft.accommodation_id == "acc1"

    def test_back_does_not_validate(self, wizard):
        advance_to_package_step(wizard)
        wizard.set_field("emailAddress", "broken")

        wizard.previous_step()

        assert wizard.step == WizardStep.CONTACT_DETAILS
        assert wizard.errors == {}

    def test_no_step_before_the_first(self, wizard):
        with pytest.raises(WizardTransitionError):
            wizard.previous_step()

    def test_no_step_after_the_last(self, wizard):
        advance_to_package_step(wizard)

        with pytest.raises(WizardTransitionError):
            wizard.next_step()

    def test_editing_a_field_clears_only_its_error(self, wizard):
        wizard.next_step()

        wizard.set_field("name", "J")

        assert "name" not in wizard.errors
        assert set(wizard.errors) == {"accommodation_id", "id_number"}

    def test_errors_are_replaced_wholesale(self, wizard):
        wizard.next_step()
        fill_personal_info(wizard)
        wizard.next_step()

        wizard.next_step()

        assert set(wizard.errors) == {"email_address", "contact_no"}

    def test_price_follows_package_and_travellers(self, wizard):
        advance_to_package_step(wizard)

        assert wizard.total_price == 750

        wizard.decrement_travellers()
        assert wizard.total_price == 500

        wizard.increment_travellers()
        wizard.increment_travellers()
        assert wizard.total_price == 1000

    def test_overflowing_travellers_fall_back_to_one(self, wizard):
        wizard.set_field("numberOfTravellers", "1e999")

        assert wizard.draft.number_of_travellers == 1
        assert wizard.total_price == 100


class TestSubmission:
    """Отправка бронирования."""

    async def test_submit_only_from_last_step(self, wizard):
        with pytest.raises(WizardTransitionError):
            await wizard.submit()

    async def test_successful_submission_resets_the_form(self, wizard, gateway):
        advance_to_package_step(wizard)

        result = await wizard.submit()

        assert result.ok
        assert wizard.message == "Booking successful! Booking ID: b1"
        assert wizard.step == WizardStep.PERSONAL_INFO
        assert wizard.draft == BookingDraft()
        assert wizard.errors == {}
        assert wizard.is_submitting is False
        assert gateway.submitted[0].package_type == "premium"
        assert gateway.submitted[0].number_of_travellers == 3

    async def test_failed_submission_keeps_the_form(self, wizard, gateway):
        gateway.result = SubmissionResult.failure("DB down")
        advance_to_package_step(wizard)
        before = wizard.draft.model_copy()

        result = await wizard.submit()

        assert not result.ok
        assert wizard.message == "Error: DB down"
        assert wizard.step == WizardStep.PACKAGE_SELECTION
        assert wizard.draft == before
        assert wizard.is_submitting is False

    async def test_resubmission_after_failure(self, wizard, gateway):
        gateway.result = SubmissionResult.failure("DB down")
        advance_to_package_step(wizard)
        await wizard.submit()

        gateway.result = SubmissionResult.success("b2")
        await wizard.submit()

        assert wizard.message == "Booking successful! Booking ID: b2"
        assert len(gateway.submitted) == 2

    async def test_second_submit_while_outstanding_is_rejected(self, wizard, gateway):
        gateway.release.clear()
        advance_to_package_step(wizard)

        first = asyncio.create_task(wizard.submit())
        await asyncio.sleep(0)
        assert wizard.is_submitting is True

        with pytest.raises(WizardTransitionError, match="already in progress"):
            await wizard.submit()

        gateway.release.set()
        await first
        assert len(gateway.submitted) == 1
        assert wizard.is_submitting is False

    async def test_response_after_abandon_is_discarded(self, wizard, gateway, logger):
        gateway.release.clear()
        advance_to_package_step(wizard)

        pending = asyncio.create_task(wizard.submit())
        await asyncio.sleep(0)
        wizard.abandon()
        wizard.set_field("name", "Someone Else")

        gateway.release.set()
        result = await pending

        assert result.ok
        assert wizard.message is None
        assert wizard.draft.name == "Someone Else"
        assert wizard.step == WizardStep.PERSONAL_INFO
        assert "Discarding response for an abandoned booking form" in logger.messages(
            "warning"
        )


class TestEndToEnd:
    """Мастер вместе с HTTP-шлюзом."""

    @staticmethod
    def make_wizard(handler, logger) -> BookingWizard:
        gateway = SubmissionGateway(
            "http://booking.test", transport=httpx.MockTransport(handler), logger=logger
        )
        return BookingWizard(gateway, logger)

    async def test_booking_is_posted_and_form_reset(self, logger):
        requests: List[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(201, json={"_id": "b1"})

        wizard = self.make_wizard(handler, logger)
        advance_to_package_step(wizard)

        await wizard.submit()

        assert requests[0].method == "POST"
        assert requests[0].url.path == "/api/booking/create"
        assert wizard.message == "Booking successful! Booking ID: b1"
        assert wizard.step == WizardStep.PERSONAL_INFO
        assert wizard.draft == BookingDraft()

    async def test_server_error_message_is_surfaced(self, logger):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, json={"message": "DB down"})

        wizard = self.make_wizard(handler, logger)
        advance_to_package_step(wizard)
        before = wizard.draft.model_copy()

        await wizard.submit()

        assert wizard.message == "Error: DB down"
        assert wizard.draft == before
        assert wizard.step == WizardStep.PACKAGE_SELECTION
