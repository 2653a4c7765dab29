from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class AdminStats:
    total_appointments: int = 0
    pending_appointments: int = 0
    confirmed_appointments: int = 0
    total_services: int = 0
    total_gallery_items: int = 0
    total_messages: int = 0

    @staticmethod
    def from_payload(payload: Mapping[str, Any] | None) -> "AdminStats":
        payload = payload or {}
        return AdminStats(
            total_appointments=int(payload.get("total_appointments") or 0),
            pending_appointments=int(payload.get("pending_appointments") or 0),
            confirmed_appointments=int(payload.get("confirmed_appointments") or 0),
            total_services=int(payload.get("total_services") or 0),
            total_gallery_items=int(payload.get("total_gallery_items") or 0),
            total_messages=int(payload.get("total_messages") or 0),
        )
