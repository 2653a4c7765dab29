"""
Tests for the public booking form: catalog loading, validation and submission.
"""

from __future__ import annotations

import asyncio
from datetime import date, timedelta

import pytest

from salon.application.use_cases.booking import (
    BookingPhase,
    BookingSubmissionPipeline,
    ValidationFailure,
)
from salon.application.utils.resources import ADMIN_STATS
from salon.domain.entities.booking_draft import BookingDraft


TODAY = date(2030, 6, 10)


def make_pipeline(api, cache, notifier, locale="en") -> BookingSubmissionPipeline:
    return BookingSubmissionPipeline(api, cache, notifier, locale=locale, today=lambda: TODAY)


def fill_draft(pipeline: BookingSubmissionPipeline) -> None:
    pipeline.update_field("service_id", "svc-gel-manicure")
    pipeline.update_field("artist_id", "art-lena")
    pipeline.select_date(TODAY + timedelta(days=2))
    pipeline.update_field("appointment_time", "10:30")
    pipeline.update_field("customer_name", "Ana Muster")
    pipeline.update_field("customer_email", "ana@example.com")
    pipeline.update_field("customer_phone", "+41 79 000 00 00")


@pytest.mark.asyncio
async def test_load_catalog_fills_options(api, cache, notifier):
    """Test that services and artists are loaded and offered as options."""
    pipeline = make_pipeline(api, cache, notifier, locale="de")
    assert pipeline.phase is BookingPhase.LOADING

    await pipeline.load_catalog()

    assert pipeline.phase is BookingPhase.FORM
    assert not pipeline.loading
    assert ("svc-gel-manicure", "Gel-Maniküre - CHF 75") in pipeline.service_options()
    assert ("art-lena", "Lena") in pipeline.artist_options()
    assert len(pipeline.time_slots) == 19
    assert notifier.notices == []


@pytest.mark.asyncio
async def test_catalog_is_shared_between_views(api, cache, notifier):
    """Test that a second view reuses the cached catalog."""
    await make_pipeline(api, cache, notifier).load_catalog()
    await make_pipeline(api, cache, notifier).load_catalog()

    assert api.calls["list_services"] == 1
    assert api.calls["list_artists"] == 1


@pytest.mark.asyncio
async def test_catalog_error_leaves_form_usable(api, cache, notifier, network_error):
    """Test that a failed catalog load shows a notice and still enters the form."""
    api.failures["list_services"] = network_error

    pipeline = make_pipeline(api, cache, notifier)
    await pipeline.load_catalog()

    assert pipeline.phase is BookingPhase.FORM
    assert pipeline.catalog_error is True
    assert pipeline.services == ()
    assert len(pipeline.artists) == 2
    assert notifier.last.level == "error"

    notifier.dismiss_all()
    assert notifier.last is None


@pytest.mark.asyncio
async def test_missing_fields_block_submission(api, cache, notifier):
    """Test that an incomplete draft never reaches the backend."""
    pipeline = make_pipeline(api, cache, notifier)
    await pipeline.load_catalog()
    pipeline.update_field("service_id", "svc-gel-manicure")

    result = await pipeline.submit()

    assert result.ok is False
    assert result.error == "validation"
    assert ValidationFailure.MISSING_FIELDS in result.validation.failures
    assert "customer_email" in result.validation.missing_fields
    assert api.calls["create_appointment"] == 0
    assert notifier.last.text == "Please fill in all required fields"
    assert pipeline.draft.service_id == "svc-gel-manicure"
    assert pipeline.phase is BookingPhase.FORM


@pytest.mark.asyncio
async def test_successful_submission_resets_draft(api, cache, notifier):
    """Test the happy path: one request, success phase, empty draft."""
    pipeline = make_pipeline(api, cache, notifier)
    await pipeline.load_catalog()
    await cache.load(ADMIN_STATS, api.get_admin_stats)
    fill_draft(pipeline)
    pipeline.update_field("notes", "French tips please")

    result = await pipeline.submit()

    assert result.ok is True
    assert result.appointment.id == "appt-1"
    assert api.calls["create_appointment"] == 1
    assert api.created[0]["appointment_date"] == "2030-06-12"
    assert api.created[0]["notes"] == "French tips please"
    assert pipeline.phase is BookingPhase.SUCCESS
    assert pipeline.draft.is_empty()
    assert notifier.last.level == "success"
    assert cache.peek(ADMIN_STATS).data is None


@pytest.mark.asyncio
async def test_failed_submission_keeps_draft(api, cache, notifier, server_error):
    """Test that a backend error returns to the form with the draft intact."""
    api.failures["create_appointment"] = server_error
    pipeline = make_pipeline(api, cache, notifier)
    await pipeline.load_catalog()
    fill_draft(pipeline)
    before = pipeline.draft

    result = await pipeline.submit()

    assert result.ok is False
    assert result.error == "request_failed"
    assert pipeline.phase is BookingPhase.FORM
    assert pipeline.draft == before
    assert notifier.last.text == "Failed to book appointment. Please try again."


@pytest.mark.asyncio
async def test_double_submit_sends_one_request(api, cache, notifier):
    """Test that a second submit while one is in flight is ignored."""
    gate = asyncio.Event()
    api.gates["create_appointment"] = gate
    pipeline = make_pipeline(api, cache, notifier)
    await pipeline.load_catalog()
    fill_draft(pipeline)

    first = asyncio.create_task(pipeline.submit())
    await asyncio.sleep(0)
    assert pipeline.phase is BookingPhase.SUBMITTING

    second = await pipeline.submit()
    gate.set()
    first_result = await first

    assert second.error == "busy"
    assert first_result.ok is True
    assert api.calls["create_appointment"] == 1


def test_past_dates_are_not_selectable(api, cache, notifier):
    """Test that only today and later can be picked."""
    pipeline = make_pipeline(api, cache, notifier)

    assert pipeline.select_date(TODAY - timedelta(days=1)) is False
    assert pipeline.draft.appointment_date is None
    assert pipeline.select_date(TODAY) is True
    assert pipeline.draft.appointment_date == TODAY


def test_validate_flags_past_date_and_unknown_slot(api, cache, notifier):
    """Test validation beyond required fields."""
    pipeline = make_pipeline(api, cache, notifier)
    fill_draft(pipeline)
    pipeline.update_field("appointment_date", TODAY - timedelta(days=3))
    pipeline.update_field("appointment_time", "19:00")

    result = pipeline.validate()

    assert not result.is_valid
    assert ValidationFailure.DATE_IN_PAST in result.failures
    assert ValidationFailure.INVALID_TIME_SLOT in result.failures
    assert result.missing_fields == ()


def test_unknown_field_is_rejected(api, cache, notifier):
    """Test that only draft fields can be edited."""
    pipeline = make_pipeline(api, cache, notifier)
    with pytest.raises(ValueError):
        pipeline.update_field("price", "CHF 0")


@pytest.mark.asyncio
async def test_book_again_returns_to_empty_form(api, cache, notifier):
    """Test the success screen's book-again action."""
    pipeline = make_pipeline(api, cache, notifier)
    await pipeline.load_catalog()
    fill_draft(pipeline)
    await pipeline.submit()

    pipeline.book_again()

    assert pipeline.phase is BookingPhase.FORM
    assert pipeline.draft == BookingDraft()


@pytest.mark.asyncio
async def test_closed_view_ignores_late_catalog(api, cache, notifier):
    """Test that results arriving after close() are discarded."""
    gate = asyncio.Event()
    api.gates["list_services"] = gate
    pipeline = make_pipeline(api, cache, notifier)

    loading = asyncio.create_task(pipeline.load_catalog())
    await asyncio.sleep(0)
    pipeline.close()
    gate.set()
    await loading

    assert pipeline.services == ()
    assert pipeline.phase is BookingPhase.LOADING
    # The shared cache still keeps the result for other views.
    assert len(cache.peek("services").data) == 4


@pytest.mark.asyncio
async def test_iso_date_strings_are_accepted(api, cache, notifier):
    """Test that a date typed as YYYY-MM-DD is stored as a date and submits."""
    pipeline = make_pipeline(api, cache, notifier)
    await pipeline.load_catalog()
    fill_draft(pipeline)

    pipeline.update_field("appointment_date", "2030-06-12")
    assert pipeline.draft.appointment_date == date(2030, 6, 12)

    result = await pipeline.submit()
    assert result.ok is True
    assert api.created[0]["appointment_date"] == "2030-06-12"


def test_malformed_dates_are_rejected_on_entry(api, cache, notifier):
    """Test that an unparseable date never reaches the draft."""
    pipeline = make_pipeline(api, cache, notifier)
    fill_draft(pipeline)
    before = pipeline.draft

    with pytest.raises(ValueError):
        pipeline.update_field("appointment_date", "12.06.2030")
    with pytest.raises(ValueError):
        pipeline.update_field("appointment_date", 20300612)
    assert pipeline.draft == before

    pipeline.update_field("appointment_date", "")
    assert pipeline.validate().missing_fields == ("appointment_date",)
