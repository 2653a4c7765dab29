from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, replace
from datetime import date, datetime
from enum import Enum
from typing import Any, Callable, Mapping
from zoneinfo import ZoneInfo

from salon.application.exceptions import SalonApiError
from salon.application.ports.notifier import NotifierPort
from salon.application.ports.salon_api import SalonApiPort
from salon.application.utils.localization import LocalizedFieldResolver
from salon.application.utils.messages import translate
from salon.application.utils.resources import ADMIN_STATS, ARTISTS, SERVICES, fetcher_for
from salon.application.utils.response_cache import ResponseCache
from salon.domain.entities.appointment import Appointment
from salon.domain.entities.booking_draft import TIME_SLOTS, BookingDraft
from salon.domain.entities.catalog import Artist, Service
from salon.domain.entities.locale import Locale


class BookingPhase(str, Enum):
    LOADING = "loading"
    FORM = "form"
    SUBMITTING = "submitting"
    SUCCESS = "success"


class ValidationFailure(str, Enum):
    MISSING_FIELDS = "missing_fields"
    DATE_IN_PAST = "date_in_past"
    INVALID_TIME_SLOT = "invalid_time_slot"


@dataclass(frozen=True)
class ValidationResult:
    failures: tuple[ValidationFailure, ...] = ()
    missing_fields: tuple[str, ...] = ()

    @property
    def is_valid(self) -> bool:
        return not self.failures


@dataclass(frozen=True)
class SubmissionResult:
    ok: bool
    appointment: Appointment | None = None
    validation: ValidationResult | None = None
    error: str | None = None  # "validation", "busy", "request_failed"


class BookingSubmissionPipeline:
    """
    Public booking form: catalog loading, draft editing, validation and submission.

    Phases: LOADING -> FORM -> SUBMITTING -> SUCCESS | FORM (with an error notice).
    The draft is only cleared by a successful submission or book_again().

    No availability or overlap check happens here; the backend (or staff)
    is trusted to catch conflicting bookings.
    """

    def __init__(
        self,
        api: SalonApiPort,
        cache: ResponseCache,
        notifier: NotifierPort,
        locale: str | Locale | None = None,
        timezone: ZoneInfo | None = None,
        today: Callable[[], date] | None = None,
    ) -> None:
        self._api = api
        self._cache = cache
        self._notifier = notifier
        self._timezone = timezone or ZoneInfo("UTC")
        self._today = today or (lambda: datetime.now(self._timezone).date())
        self._resolver = LocalizedFieldResolver(locale)
        self._logger = logging.getLogger(__name__)

        self._phase = BookingPhase.LOADING
        self._draft = BookingDraft()
        self._services: tuple[Service, ...] = ()
        self._artists: tuple[Artist, ...] = ()
        self._services_loading = False
        self._artists_loading = False
        self._catalog_error = False
        self._closed = False

    @property
    def phase(self) -> BookingPhase:
        return self._phase

    @property
    def draft(self) -> BookingDraft:
        return self._draft

    @property
    def services(self) -> tuple[Service, ...]:
        return self._services

    @property
    def artists(self) -> tuple[Artist, ...]:
        return self._artists

    @property
    def loading(self) -> bool:
        return self._services_loading or self._artists_loading

    @property
    def catalog_error(self) -> bool:
        return self._catalog_error

    @property
    def time_slots(self) -> tuple[str, ...]:
        return TIME_SLOTS

    @property
    def locale(self) -> Locale:
        return self._resolver.locale

    def set_locale(self, locale: str | Locale | None) -> None:
        self._resolver.set_locale(locale)

    async def load_catalog(self) -> None:
        """Fetch services and artists concurrently; each slice is updated as soon as it resolves."""
        self._services_loading = True
        self._artists_loading = True
        self._catalog_error = False
        await asyncio.gather(self._load_services(), self._load_artists())
        if self._closed:
            return
        if self._catalog_error:
            self._notifier.error(translate("booking.catalogError", self.locale))
        if self._phase == BookingPhase.LOADING:
            self._phase = BookingPhase.FORM

    async def _load_services(self) -> None:
        entry = await self._cache.load(SERVICES, fetcher_for(SERVICES, self._api))
        if self._closed:
            return
        if entry.data is not None:
            self._services = entry.data
        self._catalog_error = self._catalog_error or entry.error
        self._services_loading = False

    async def _load_artists(self) -> None:
        entry = await self._cache.load(ARTISTS, fetcher_for(ARTISTS, self._api))
        if self._closed:
            return
        if entry.data is not None:
            self._artists = entry.data
        self._catalog_error = self._catalog_error or entry.error
        self._artists_loading = False

    def service_options(self) -> list[tuple[str, str]]:
        options = []
        for service in self._services:
            label = self._resolver(service, "name")
            if service.price:
                label = f"{label} - {service.price}"
            options.append((service.id, label))
        return options

    def artist_options(self) -> list[tuple[str, str]]:
        return [(artist.id, artist.name) for artist in self._artists]

    def update_field(self, field: str, value: Any) -> BookingDraft:
        """Replace one draft field. Dates are coerced here; everything else waits for validate()."""
        if field not in BookingDraft.field_names():
            raise ValueError(f"Unknown booking field: {field}")
        if field == "appointment_date":
            value = _as_date(value)
        self._draft = replace(self._draft, **{field: value})
        return self._draft

    def is_date_selectable(self, day: date) -> bool:
        return day >= self._today()

    def select_date(self, day: date) -> bool:
        if not self.is_date_selectable(day):
            return False
        self.update_field("appointment_date", day)
        return True

    def validate(self) -> ValidationResult:
        draft = self._draft
        failures: list[ValidationFailure] = []

        missing = draft.missing_fields()
        if missing:
            failures.append(ValidationFailure.MISSING_FIELDS)
        if draft.appointment_date is not None and not self.is_date_selectable(draft.appointment_date):
            failures.append(ValidationFailure.DATE_IN_PAST)
        if draft.appointment_time and draft.appointment_time not in TIME_SLOTS:
            failures.append(ValidationFailure.INVALID_TIME_SLOT)

        return ValidationResult(failures=tuple(failures), missing_fields=missing)

    async def submit(self) -> SubmissionResult:
        if self._phase == BookingPhase.SUBMITTING:
            return SubmissionResult(ok=False, error="busy")

        validation = self.validate()
        if not validation.is_valid:
            self._logger.info(
                "Booking blocked by validation",
                extra={"reason": ",".join(f.value for f in validation.failures)},
            )
            self._notifier.error(translate("booking.missingFields", self.locale))
            return SubmissionResult(ok=False, validation=validation, error="validation")

        self._phase = BookingPhase.SUBMITTING
        try:
            created = await self._api.create_appointment(self._draft.to_payload())
        except SalonApiError as e:
            self._logger.error(
                "Error creating appointment",
                extra={"error": str(e), "status_code": e.status_code},
            )
            if not self._closed:
                self._phase = BookingPhase.FORM
                self._notifier.error(translate("booking.error", self.locale))
            return SubmissionResult(ok=False, error="request_failed")

        appointment = Appointment.from_payload(created) if isinstance(created, Mapping) else None
        self._cache.invalidate(ADMIN_STATS)
        self._logger.info(
            "Appointment booked",
            extra={"appointment_id": appointment.id if appointment else None},
        )
        if not self._closed:
            self._phase = BookingPhase.SUCCESS
            self._draft = BookingDraft()
            self._notifier.success(translate("booking.success", self.locale))
        return SubmissionResult(ok=True, appointment=appointment)

    def book_again(self) -> None:
        if self._phase == BookingPhase.SUCCESS:
            self._draft = BookingDraft()
            self._phase = BookingPhase.FORM

    def close(self) -> None:
        """Tear the view down; results of requests still in flight are discarded."""
        self._closed = True


def _as_date(value: Any) -> date | None:
    """Accept a date, a datetime or an ISO "YYYY-MM-DD" string; raise ValueError otherwise."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return date.fromisoformat(value.strip())
    raise ValueError(f"Not a date: {value!r}")
