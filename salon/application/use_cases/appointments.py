from __future__ import annotations

import logging
from typing import Iterable

from salon.application.exceptions import SalonApiError
from salon.application.ports.notifier import NotifierPort
from salon.application.ports.salon_api import SalonApiPort
from salon.application.utils.localization import resolve
from salon.application.utils.messages import translate
from salon.application.utils.resources import ADMIN_STATS
from salon.application.utils.response_cache import ResponseCache
from salon.domain.entities.appointment import STATUS_FILTER_ALL, Appointment, AppointmentStatus
from salon.domain.entities.locale import Locale, normalize_locale


def filter_appointments(
    appointments: Iterable[Appointment],
    search_term: str,
    status_filter: str | AppointmentStatus,
) -> list[Appointment]:
    """Local search and status filter; keeps the original order and never mutates the input."""
    term = (search_term or "").strip().lower()
    wanted = status_filter.value if isinstance(status_filter, AppointmentStatus) else (status_filter or STATUS_FILTER_ALL)

    result = []
    for appt in appointments:
        if term and not (
            term in appt.customer_name.lower()
            or term in appt.customer_email.lower()
            or term in appt.customer_phone.lower()
        ):
            continue
        if wanted != STATUS_FILTER_ALL and appt.status.value != wanted:
            continue
        result.append(appt)
    return result


class AppointmentLifecycleManager:
    """
    Admin appointment list: load, search/filter locally, change status, delete.

    Every successful write is followed by a full re-fetch; the local list is
    never patched optimistically. Any status may move to any other status.
    """

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

        self._appointments: tuple[Appointment, ...] = ()
        self._loading = True
        self._search_term = ""
        self._status_filter: str = STATUS_FILTER_ALL
        self._pending_delete_id: str | None = None
        self._load_seq = 0
        self._closed = False

    @property
    def appointments(self) -> tuple[Appointment, ...]:
        return self._appointments

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def search_term(self) -> str:
        return self._search_term

    @property
    def status_filter(self) -> str:
        return self._status_filter

    @property
    def pending_delete_id(self) -> str | None:
        return self._pending_delete_id

    @property
    def visible(self) -> list[Appointment]:
        return self.filter(self._search_term, self._status_filter)

    def set_locale(self, locale: str | Locale | None) -> None:
        self._locale = normalize_locale(locale)

    def set_search_term(self, term: str) -> None:
        self._search_term = term or ""

    def set_status_filter(self, status_filter: str | AppointmentStatus) -> None:
        if isinstance(status_filter, AppointmentStatus):
            status_filter = status_filter.value
        self._status_filter = status_filter or STATUS_FILTER_ALL

    def filter(self, search_term: str, status_filter: str | AppointmentStatus) -> list[Appointment]:
        return filter_appointments(self._appointments, search_term, status_filter)

    def service_label(self, appointment: Appointment) -> str:
        return resolve(appointment, "service_name", self._locale) or "N/A"

    def artist_label(self, appointment: Appointment) -> str:
        return appointment.artist_name or "N/A"

    async def load_appointments(self) -> bool:
        """Replace the list with the server's; a response older than the latest request is dropped."""
        self._load_seq += 1
        seq = self._load_seq
        try:
            payload = await self._api.list_appointments()
            appointments = tuple(Appointment.from_payload(item) for item in payload or [])
        except (SalonApiError, ValueError) as e:
            self._logger.error(
                "Error fetching appointments",
                extra={"error": str(e), "status_code": getattr(e, "status_code", None)},
            )
            if not self._closed and seq == self._load_seq:
                self._notifier.error(translate("appointments.loadError", self._locale))
                self._loading = False
            return False

        if self._closed or seq != self._load_seq:
            return False
        self._appointments = appointments
        self._loading = False
        return True

    async def set_status(self, appointment_id: str, new_status: str | AppointmentStatus) -> bool:
        try:
            status = AppointmentStatus(new_status)
        except ValueError:
            self._logger.warning(
                "Rejected unknown appointment status",
                extra={"appointment_id": appointment_id, "status": str(new_status)},
            )
            self._notifier.error(translate("appointments.updateError", self._locale))
            return False

        try:
            await self._api.update_appointment_status(appointment_id, status)
        except SalonApiError as e:
            self._logger.error(
                "Error updating status",
                extra={"appointment_id": appointment_id, "status": status.value, "error": str(e)},
            )
            if not self._closed:
                self._notifier.error(translate("appointments.updateError", self._locale))
            return False

        self._logger.info("Appointment status changed", extra={"appointment_id": appointment_id, "status": status.value})
        self._invalidate_stats()
        if self._closed:
            return True
        self._notifier.success(translate("appointments.updateSuccess", self._locale))
        await self.load_appointments()
        return True

    def request_delete(self, appointment_id: str) -> None:
        """First step of a delete: remembers the target until confirm_delete() or cancel_delete()."""
        self._pending_delete_id = appointment_id

    def cancel_delete(self) -> None:
        self._pending_delete_id = None

    async def delete(self, appointment_id: str) -> bool:
        """
        Delete an appointment that was already confirmed through request_delete().

        Without that confirmation the call only records the request and
        nothing is sent to the backend.
        """
        if self._pending_delete_id != appointment_id:
            self.request_delete(appointment_id)
            return False

        try:
            await self._api.delete_appointment(appointment_id)
        except SalonApiError as e:
            self._logger.error("Error deleting appointment", extra={"appointment_id": appointment_id, "error": str(e)})
            if not self._closed:
                self._notifier.error(translate("appointments.deleteError", self._locale))
            return False

        self._logger.info("Appointment deleted", extra={"appointment_id": appointment_id})
        self._invalidate_stats()
        if self._closed:
            return True
        self._pending_delete_id = None
        self._notifier.success(translate("appointments.deleteSuccess", self._locale))
        await self.load_appointments()
        return True

    async def confirm_delete(self) -> bool:
        if self._pending_delete_id is None:
            return False
        return await self.delete(self._pending_delete_id)

    def close(self) -> None:
        self._closed = True

    def _invalidate_stats(self) -> None:
        if self._cache is not None:
            self._cache.invalidate(ADMIN_STATS)
