from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

from salon.domain.entities.localized_text import LocalizedText


class AppointmentStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


STATUS_FILTER_ALL = "all"


@dataclass(frozen=True)
class Appointment:
    id: str
    service_id: str
    artist_id: str
    appointment_date: str  # YYYY-MM-DD as stored by the backend
    appointment_time: str
    customer_name: str
    customer_email: str
    customer_phone: str
    notes: str = ""
    status: AppointmentStatus = AppointmentStatus.PENDING
    # Denormalized by the backend for display
    service_name: LocalizedText = LocalizedText()
    artist_name: str = ""
    created_at: str | None = None

    @staticmethod
    def from_payload(payload: Mapping[str, Any]) -> "Appointment":
        return Appointment(
            id=str(payload.get("id", "")),
            service_id=str(payload.get("service_id") or ""),
            artist_id=str(payload.get("artist_id") or ""),
            appointment_date=str(payload.get("appointment_date") or ""),
            appointment_time=str(payload.get("appointment_time") or ""),
            customer_name=str(payload.get("customer_name") or ""),
            customer_email=str(payload.get("customer_email") or ""),
            customer_phone=str(payload.get("customer_phone") or ""),
            notes=str(payload.get("notes") or ""),
            status=AppointmentStatus(payload.get("status") or AppointmentStatus.PENDING.value),
            service_name=LocalizedText.from_payload(payload, "service_name"),
            artist_name=str(payload.get("artist_name") or ""),
            created_at=payload.get("created_at"),
        )
