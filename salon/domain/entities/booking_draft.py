from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import date
from typing import Any


TIME_SLOTS: tuple[str, ...] = (
    "09:00", "09:30", "10:00", "10:30", "11:00", "11:30",
    "12:00", "12:30", "13:00", "13:30", "14:00", "14:30",
    "15:00", "15:30", "16:00", "16:30", "17:00", "17:30", "18:00",
)

REQUIRED_FIELDS: tuple[str, ...] = (
    "service_id",
    "artist_id",
    "appointment_date",
    "appointment_time",
    "customer_name",
    "customer_email",
    "customer_phone",
)


@dataclass(frozen=True)
class BookingDraft:
    service_id: str = ""
    artist_id: str = ""
    appointment_date: date | None = None
    appointment_time: str = ""  # one of TIME_SLOTS
    customer_name: str = ""
    customer_email: str = ""
    customer_phone: str = ""
    notes: str = ""

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    def missing_fields(self) -> tuple[str, ...]:
        missing = []
        for name in REQUIRED_FIELDS:
            value = getattr(self, name)
            if value is None or (isinstance(value, str) and not value.strip()):
                missing.append(name)
        return tuple(missing)

    def is_empty(self) -> bool:
        return self == BookingDraft()

    def to_payload(self) -> dict[str, Any]:
        """Request body for POST /appointments; the date is sent as YYYY-MM-DD."""
        return {
            "service_id": self.service_id,
            "artist_id": self.artist_id,
            "appointment_date": self.appointment_date.isoformat() if self.appointment_date else None,
            "appointment_time": self.appointment_time,
            "customer_name": self.customer_name,
            "customer_email": self.customer_email,
            "customer_phone": self.customer_phone,
            "notes": self.notes,
        }
