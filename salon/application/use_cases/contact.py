from __future__ import annotations

import logging
import re
from dataclasses import replace

from salon.application.exceptions import SalonApiError
from salon.application.ports.notifier import NotifierPort
from salon.application.ports.salon_api import SalonApiPort
from salon.application.utils.messages import translate
from salon.application.utils.resources import ADMIN_STATS, SETTINGS, fetcher_for
from salon.application.utils.response_cache import ResponseCache
from salon.domain.entities.contact_message import ContactDraft, ContactMessage
from salon.domain.entities.locale import Locale, normalize_locale
from salon.domain.entities.salon_settings import SalonSettings


EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

_CONTACT_FIELDS = ("name", "email", "phone", "message")


class ContactForm:
    """Public contact form with field-level validation."""

    def __init__(
        self,
        api: SalonApiPort,
        cache: ResponseCache,
        notifier: NotifierPort,
        locale: str | Locale | None = None,
    ) -> None:
        self._api = api
        self._cache = cache
        self._notifier = notifier
        self._locale = normalize_locale(locale)
        self._logger = logging.getLogger(__name__)

        self._draft = ContactDraft()
        self._errors: dict[str, str] = {}
        self._submitting = False
        self._submitted = False
        self._settings: SalonSettings | None = None
        self._closed = False

    @property
    def draft(self) -> ContactDraft:
        return self._draft

    @property
    def errors(self) -> dict[str, str]:
        return dict(self._errors)

    @property
    def submitting(self) -> bool:
        return self._submitting

    @property
    def submitted(self) -> bool:
        return self._submitted

    @property
    def settings(self) -> SalonSettings | None:
        return self._settings

    async def load_settings(self) -> SalonSettings | None:
        """Salon address, phone and opening hours shown next to the form."""
        entry = await self._cache.load(SETTINGS, fetcher_for(SETTINGS, self._api))
        if entry.data is not None and not self._closed:
            self._settings = entry.data
        return self._settings

    def update_field(self, field: str, value: str) -> ContactDraft:
        if field not in _CONTACT_FIELDS:
            raise ValueError(f"Unknown contact field: {field}")
        self._draft = replace(self._draft, **{field: value})
        # Typing into a field clears its error
        self._errors.pop(field, None)
        return self._draft

    def validate(self) -> dict[str, str]:
        errors: dict[str, str] = {}
        if not self._draft.name.strip():
            errors["name"] = translate("contact.required", self._locale)

        email = self._draft.email.strip()
        if not email:
            errors["email"] = translate("contact.required", self._locale)
        elif not EMAIL_PATTERN.match(email):
            errors["email"] = translate("contact.invalidEmail", self._locale)

        if not self._draft.message.strip():
            errors["message"] = translate("contact.required", self._locale)

        self._errors = errors
        return dict(errors)

    async def submit(self) -> bool:
        if self._submitting or self.validate():
            return False

        self._submitting = True
        try:
            await self._api.create_contact_message(self._draft.to_payload())
        except SalonApiError as e:
            self._logger.error("Error sending message", extra={"error": str(e), "status_code": e.status_code})
            if not self._closed:
                self._notifier.error(translate("contact.error", self._locale))
            return False
        finally:
            self._submitting = False

        self._cache.invalidate(ADMIN_STATS)
        if self._closed:
            return True
        self._submitted = True
        self._draft = ContactDraft()
        self._notifier.success(translate("contact.success", self._locale))
        return True

    def start_over(self) -> None:
        self._submitted = False
        self._errors = {}

    def close(self) -> None:
        self._closed = True


class MessageInbox:
    """Admin view of contact messages; deleting takes two steps."""

    def __init__(
        self,
        api: SalonApiPort,
        notifier: NotifierPort,
        cache: ResponseCache | None = None,
        locale: str | Locale | None = None,
    ) -> None:
        self._api = api
        self._notifier = notifier
        self._cache = cache
        self._locale = normalize_locale(locale)
        self._logger = logging.getLogger(__name__)

        self._messages: tuple[ContactMessage, ...] = ()
        self._loading = True
        self._pending_delete_id: str | None = None
        self._load_seq = 0
        self._closed = False

    @property
    def messages(self) -> tuple[ContactMessage, ...]:
        return self._messages

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def pending_delete_id(self) -> str | None:
        return self._pending_delete_id

    async def load_messages(self) -> bool:
        self._load_seq += 1
        seq = self._load_seq
        try:
            payload = await self._api.list_contact_messages()
        except SalonApiError as e:
            self._logger.error("Error fetching messages", extra={"error": str(e)})
            if not self._closed and seq == self._load_seq:
                self._notifier.error(translate("messages.loadError", self._locale))
                self._loading = False
            return False

        if self._closed or seq != self._load_seq:
            return False
        self._messages = tuple(ContactMessage.from_payload(item) for item in payload or [])
        self._loading = False
        return True

    def request_delete(self, message_id: str) -> None:
        self._pending_delete_id = message_id

    def cancel_delete(self) -> None:
        self._pending_delete_id = None

    async def confirm_delete(self) -> bool:
        message_id = self._pending_delete_id
        if message_id is None:
            return False

        try:
            await self._api.delete_contact_message(message_id)
        except SalonApiError as e:
            self._logger.error("Error deleting message", extra={"message_id": message_id, "error": str(e)})
            if not self._closed:
                self._notifier.error(translate("messages.deleteError", self._locale))
            return False

        if self._cache is not None:
            self._cache.invalidate(ADMIN_STATS)
        if self._closed:
            return True
        self._pending_delete_id = None
        self._notifier.success(translate("messages.deleteSuccess", self._locale))
        await self.load_messages()
        return True

    def close(self) -> None:
        self._closed = True
