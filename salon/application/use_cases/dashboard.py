from __future__ import annotations

import asyncio
import logging

from salon.application.exceptions import SalonApiError
from salon.application.ports.notifier import NotifierPort
from salon.application.ports.salon_api import SalonApiPort
from salon.application.utils.messages import translate
from salon.application.utils.resources import ADMIN_STATS, fetcher_for
from salon.application.utils.response_cache import ResponseCache
from salon.domain.entities.admin_stats import AdminStats
from salon.domain.entities.appointment import Appointment
from salon.domain.entities.locale import Locale, normalize_locale


RECENT_LIMIT = 5


class DashboardUseCase:
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

        self._stats = AdminStats()
        self._recent: tuple[Appointment, ...] = ()
        self._loading = True
        self._closed = False

    @property
    def stats(self) -> AdminStats:
        return self._stats

    @property
    def recent_appointments(self) -> tuple[Appointment, ...]:
        return self._recent

    @property
    def loading(self) -> bool:
        return self._loading

    async def load(self) -> None:
        await asyncio.gather(self._load_stats(), self._load_recent())

    async def _load_stats(self) -> None:
        entry = await self._cache.load(ADMIN_STATS, fetcher_for(ADMIN_STATS, self._api))
        if self._closed:
            return
        if entry.data is not None:
            self._stats = entry.data
        if entry.error:
            self._notifier.error(translate("dashboard.loadError", self._locale))
        self._loading = False

    async def _load_recent(self) -> None:
        try:
            payload = await self._api.list_appointments()
            recent = tuple(Appointment.from_payload(item) for item in (payload or [])[:RECENT_LIMIT])
        except (SalonApiError, ValueError) as e:
            # The stats cards still render; the recent list just stays empty.
            self._logger.error("Error fetching appointments", extra={"error": str(e)})
            return
        if self._closed:
            return
        self._recent = recent

    def close(self) -> None:
        self._closed = True
