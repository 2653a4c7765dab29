"""
Tests for the contact form and the admin message inbox.
"""

from __future__ import annotations

import asyncio

import pytest

from salon.application.use_cases.contact import ContactForm, MessageInbox
from salon.application.utils.resources import ADMIN_STATS


def fill(form: ContactForm) -> None:
    form.update_field("name", "  Ana Muster ")
    form.update_field("email", "ana@example.com")
    form.update_field("message", "Do you offer gift cards?")


def test_validate_reports_each_field(api, cache, notifier):
    """Test field-level validation errors."""
    form = ContactForm(api, cache, notifier, locale="en")
    form.update_field("email", "not-an-email")

    errors = form.validate()

    assert errors == {
        "name": "This field is required",
        "email": "Please enter a valid email address",
        "message": "This field is required",
    }


def test_typing_clears_field_error(api, cache, notifier):
    """Test that editing a field clears only its own error."""
    form = ContactForm(api, cache, notifier, locale="en")
    form.validate()
    form.update_field("name", "Ana")

    assert "name" not in form.errors
    assert "email" in form.errors


@pytest.mark.asyncio
async def test_invalid_form_is_not_sent(api, cache, notifier):
    """Test that nothing is posted while the form has errors."""
    form = ContactForm(api, cache, notifier)

    assert await form.submit() is False
    assert api.calls["create_contact_message"] == 0


@pytest.mark.asyncio
async def test_submit_posts_trimmed_payload(api, cache, notifier):
    """Test a successful submission."""
    await cache.load(ADMIN_STATS, api.get_admin_stats)
    form = ContactForm(api, cache, notifier, locale="en")
    fill(form)

    assert await form.submit() is True

    assert api.messages[0]["name"] == "Ana Muster"
    assert api.messages[0]["phone"] is None
    assert form.submitted is True
    assert form.draft.name == ""
    assert notifier.last.text == "Message sent! We will get back to you soon."
    assert cache.peek(ADMIN_STATS).data is None

    form.start_over()
    assert form.submitted is False


@pytest.mark.asyncio
async def test_submit_failure_keeps_draft(api, cache, notifier, network_error):
    """Test that a failed send keeps the typed message."""
    api.failures["create_contact_message"] = network_error
    form = ContactForm(api, cache, notifier, locale="en")
    fill(form)

    assert await form.submit() is False
    assert form.draft.message == "Do you offer gift cards?"
    assert form.submitting is False
    assert notifier.last.level == "error"


@pytest.mark.asyncio
async def test_load_settings_uses_cache(api, cache, notifier):
    """Test that the salon address comes from the shared settings entry."""
    form = ContactForm(api, cache, notifier)
    settings = await form.load_settings()
    await ContactForm(api, cache, notifier).load_settings()

    assert settings.address == "Bahnhofstrasse 12, 8001 Zürich, Switzerland"
    assert settings.hours.sunday == "Closed"
    assert api.calls["get_settings"] == 1


@pytest.mark.asyncio
async def test_inbox_delete_flow(api, cache, notifier):
    """Test loading messages and the two-step delete."""
    await api.create_contact_message({"name": "Ana", "email": "ana@example.com", "message": "Hi"})
    await api.create_contact_message({"name": "Ben", "email": "ben@example.com", "message": "Hello"})
    inbox = MessageInbox(api, notifier, cache=cache)

    assert await inbox.load_messages() is True
    assert [m.name for m in inbox.messages] == ["Ana", "Ben"]
    assert inbox.messages[0].created_at.year == 2030

    assert await inbox.confirm_delete() is False
    inbox.request_delete("msg-1")
    assert await inbox.confirm_delete() is True
    assert [m.id for m in inbox.messages] == ["msg-2"]
    assert inbox.pending_delete_id is None


@pytest.mark.asyncio
async def test_inbox_load_failure(api, notifier, server_error):
    """Test that a failed load notifies and stops loading."""
    api.failures["list_contact_messages"] = server_error
    inbox = MessageInbox(api, notifier, locale="en")

    assert await inbox.load_messages() is False
    assert inbox.loading is False
    assert notifier.last.text == "Failed to load messages"


@pytest.mark.asyncio
async def test_closed_inbox_ignores_late_results(api, notifier, network_error):
    """Test that a torn-down inbox neither updates nor notifies."""
    await api.create_contact_message({"name": "Ana", "email": "ana@example.com", "message": "Hi"})
    gate = asyncio.Event()
    api.gates["list_contact_messages"] = gate
    inbox = MessageInbox(api, notifier, locale="en")

    loading = asyncio.create_task(inbox.load_messages())
    await asyncio.sleep(0)
    inbox.close()
    gate.set()

    assert await loading is False
    assert inbox.messages == ()

    api.failures["list_contact_messages"] = network_error
    assert await inbox.load_messages() is False
    assert notifier.notices == []


@pytest.mark.asyncio
async def test_closed_contact_form_sends_no_notice(api, cache, notifier):
    """Test that a send finishing after close() leaves the form alone."""
    gate = asyncio.Event()
    api.gates["create_contact_message"] = gate
    form = ContactForm(api, cache, notifier, locale="en")
    fill(form)

    sending = asyncio.create_task(form.submit())
    await asyncio.sleep(0)
    form.close()
    gate.set()

    assert await sending is True
    assert form.submitted is False
    assert notifier.notices == []
