from __future__ import annotations

import asyncio
from collections import Counter
from datetime import date
from typing import Any

import pytest

from salon.application.exceptions import NetworkError, ServerError
from salon.application.ports.salon_api import SalonApiPort
from salon.application.utils.response_cache import ResponseCache
from salon.domain.entities.appointment import AppointmentStatus
from salon.infrastructure.notices.memory_notifier import MemoryNotifier
from salon.infrastructure.seed.catalog_data import (
    SEED_ARTISTS,
    SEED_CATEGORIES,
    SEED_GALLERY_COLORS,
    SEED_GALLERY_STYLES,
    SEED_SERVICES,
    SEED_SETTINGS,
)


TODAY = date(2030, 6, 10)


class FakeSalonApi(SalonApiPort):
    """
    In-memory SalonApiPort for use case tests.

    - calls counts invocations per method name
    - failures maps a method name to the exception it raises
    - gates maps a method name to an asyncio.Event the call waits on
    """

    def __init__(self) -> None:
        self.services = [dict(s) for s in SEED_SERVICES]
        self.artists = [dict(a) for a in SEED_ARTISTS]
        self.categories = [dict(c) for c in SEED_CATEGORIES]
        self.gallery: list[dict[str, Any]] = []
        self.gallery_styles = [dict(s) for s in SEED_GALLERY_STYLES]
        self.gallery_colors = [dict(c) for c in SEED_GALLERY_COLORS]
        self.settings = dict(SEED_SETTINGS)
        self.appointments: list[dict[str, Any]] = []
        self.messages: list[dict[str, Any]] = []
        self.stats = {"total_appointments": 0, "pending_appointments": 0}
        self.created: list[dict[str, Any]] = []
        self.status_updates: list[tuple[str, AppointmentStatus]] = []
        self.deleted: list[str] = []

        self.calls: Counter[str] = Counter()
        self.failures: dict[str, Exception] = {}
        self.gates: dict[str, asyncio.Event] = {}

    async def _enter(self, name: str) -> None:
        self.calls[name] += 1
        gate = self.gates.get(name)
        if gate is not None:
            await gate.wait()
        failure = self.failures.get(name)
        if failure is not None:
            raise failure

    async def list_services(self) -> list[dict[str, Any]]:
        await self._enter("list_services")
        return list(self.services)

    async def list_artists(self) -> list[dict[str, Any]]:
        await self._enter("list_artists")
        return list(self.artists)

    async def list_categories(self) -> list[dict[str, Any]]:
        await self._enter("list_categories")
        return list(self.categories)

    async def list_gallery(self) -> list[dict[str, Any]]:
        await self._enter("list_gallery")
        return list(self.gallery)

    async def list_gallery_styles(self) -> list[dict[str, Any]]:
        await self._enter("list_gallery_styles")
        return list(self.gallery_styles)

    async def list_gallery_colors(self) -> list[dict[str, Any]]:
        await self._enter("list_gallery_colors")
        return list(self.gallery_colors)

    async def get_settings(self) -> dict[str, Any]:
        await self._enter("get_settings")
        return dict(self.settings)

    async def create_appointment(self, payload: dict[str, Any]) -> dict[str, Any]:
        await self._enter("create_appointment")
        self.created.append(payload)
        record = {**payload, "id": f"appt-{len(self.created)}", "status": "pending"}
        self.appointments.insert(0, record)
        return record

    async def list_appointments(self) -> list[dict[str, Any]]:
        # Snapshot first: a gated call returns the server state from when it was sent.
        snapshot = [dict(a) for a in self.appointments]
        await self._enter("list_appointments")
        return snapshot

    async def update_appointment_status(self, appointment_id: str, status: AppointmentStatus) -> None:
        await self._enter("update_appointment_status")
        self.status_updates.append((appointment_id, status))
        for record in self.appointments:
            if record["id"] == appointment_id:
                record["status"] = status.value

    async def delete_appointment(self, appointment_id: str) -> None:
        await self._enter("delete_appointment")
        self.deleted.append(appointment_id)
        self.appointments = [a for a in self.appointments if a["id"] != appointment_id]

    async def create_contact_message(self, payload: dict[str, Any]) -> dict[str, Any]:
        await self._enter("create_contact_message")
        record = {**payload, "id": f"msg-{len(self.messages) + 1}", "created_at": "2030-06-10T08:00:00Z"}
        self.messages.append(record)
        return record

    async def list_contact_messages(self) -> list[dict[str, Any]]:
        await self._enter("list_contact_messages")
        return [dict(m) for m in self.messages]

    async def delete_contact_message(self, message_id: str) -> None:
        await self._enter("delete_contact_message")
        self.deleted.append(message_id)
        self.messages = [m for m in self.messages if m["id"] != message_id]

    async def get_admin_stats(self) -> dict[str, Any]:
        await self._enter("get_admin_stats")
        return dict(self.stats)


def appointment_payload(appointment_id: str, name: str, email: str, phone: str, status: str = "pending") -> dict[str, Any]:
    return {
        "id": appointment_id,
        "service_id": "svc-gel-manicure",
        "artist_id": "art-lena",
        "appointment_date": "2030-06-12",
        "appointment_time": "10:00",
        "customer_name": name,
        "customer_email": email,
        "customer_phone": phone,
        "status": status,
        "service_name_en": "Gel Manicure",
        "service_name_de": "Gel-Maniküre",
        "artist_name": "Lena",
    }


@pytest.fixture
def api() -> FakeSalonApi:
    return FakeSalonApi()


@pytest.fixture
def notifier() -> MemoryNotifier:
    return MemoryNotifier()


@pytest.fixture
def cache() -> ResponseCache:
    return ResponseCache(ttl_seconds=300.0)


@pytest.fixture
def network_error() -> NetworkError:
    return NetworkError("connection refused")


@pytest.fixture
def server_error() -> ServerError:
    return ServerError("boom", status_code=500)


@pytest.fixture
def make_appointment():
    return appointment_payload
