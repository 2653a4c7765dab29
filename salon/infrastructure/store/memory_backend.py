from __future__ import annotations

import copy
import logging
import uuid
from datetime import datetime, timezone
from typing import Any

from salon.domain.entities.appointment import AppointmentStatus
from salon.infrastructure.seed.catalog_data import (
    SEED_ARTISTS,
    SEED_CATEGORIES,
    SEED_GALLERY_COLORS,
    SEED_GALLERY_STYLES,
    SEED_SERVICES,
    SEED_SETTINGS,
)


class RecordNotFound(KeyError):
    pass


class InMemorySalonBackend:
    """
    Records behind the development backend.

    Appointments are stored as submitted; there is no overlap or double-booking
    check here either. Lists come back newest first.
    """

    def __init__(self, seed: bool = True) -> None:
        self.services: list[dict[str, Any]] = copy.deepcopy(SEED_SERVICES) if seed else []
        self.artists: list[dict[str, Any]] = copy.deepcopy(SEED_ARTISTS) if seed else []
        self.categories: list[dict[str, Any]] = copy.deepcopy(SEED_CATEGORIES) if seed else []
        self.gallery: list[dict[str, Any]] = []
        self.gallery_styles: list[dict[str, Any]] = copy.deepcopy(SEED_GALLERY_STYLES) if seed else []
        self.gallery_colors: list[dict[str, Any]] = copy.deepcopy(SEED_GALLERY_COLORS) if seed else []
        self.settings: dict[str, Any] = dict(SEED_SETTINGS) if seed else {}
        self._appointments: dict[str, dict[str, Any]] = {}
        self._messages: dict[str, dict[str, Any]] = {}
        self._logger = logging.getLogger(__name__)

    def list_appointments(self) -> list[dict[str, Any]]:
        return [dict(a) for a in reversed(self._appointments.values())]

    def create_appointment(self, data: dict[str, Any]) -> dict[str, Any]:
        service = self._find(self.services, data.get("service_id"), "Service")
        artist = self._find(self.artists, data.get("artist_id"), "Artist")

        appointment_id = uuid.uuid4().hex
        record = {
            **data,
            "id": appointment_id,
            "status": AppointmentStatus.PENDING.value,
            "service_name_en": service.get("name_en"),
            "service_name_de": service.get("name_de"),
            "service_name_fr": service.get("name_fr"),
            "artist_name": artist.get("name"),
            "created_at": _now_iso(),
        }
        self._appointments[appointment_id] = record
        self._logger.info("Appointment stored", extra={"appointment_id": appointment_id})
        return dict(record)

    def set_appointment_status(self, appointment_id: str, status: AppointmentStatus) -> dict[str, Any]:
        record = self._appointments.get(appointment_id)
        if record is None:
            raise RecordNotFound("Appointment not found")
        record["status"] = AppointmentStatus(status).value
        record["updated_at"] = _now_iso()
        return dict(record)

    def delete_appointment(self, appointment_id: str) -> None:
        if self._appointments.pop(appointment_id, None) is None:
            raise RecordNotFound("Appointment not found")

    def list_messages(self) -> list[dict[str, Any]]:
        return [dict(m) for m in reversed(self._messages.values())]

    def create_message(self, data: dict[str, Any]) -> dict[str, Any]:
        message_id = uuid.uuid4().hex
        record = {**data, "id": message_id, "created_at": _now_iso()}
        self._messages[message_id] = record
        return dict(record)

    def delete_message(self, message_id: str) -> None:
        if self._messages.pop(message_id, None) is None:
            raise RecordNotFound("Message not found")

    def stats(self) -> dict[str, int]:
        statuses = [a["status"] for a in self._appointments.values()]
        return {
            "total_appointments": len(statuses),
            "pending_appointments": statuses.count(AppointmentStatus.PENDING.value),
            "confirmed_appointments": statuses.count(AppointmentStatus.CONFIRMED.value),
            "total_services": len(self.services),
            "total_gallery_items": len(self.gallery),
            "total_messages": len(self._messages),
        }

    @staticmethod
    def _find(records: list[dict[str, Any]], record_id: Any, label: str) -> dict[str, Any]:
        for record in records:
            if record.get("id") == record_id:
                return record
        raise RecordNotFound(f"{label} not found")


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()
