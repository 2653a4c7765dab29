from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping


@dataclass(frozen=True)
class ContactMessage:
    id: str
    name: str
    email: str
    message: str
    created_at: datetime | None = None
    phone: str | None = None

    @staticmethod
    def from_payload(payload: Mapping[str, Any]) -> "ContactMessage":
        created_raw = payload.get("created_at")
        created_at = None
        if created_raw:
            try:
                created_at = datetime.fromisoformat(str(created_raw).replace("Z", "+00:00"))
            except ValueError:
                created_at = None
        return ContactMessage(
            id=str(payload.get("id", "")),
            name=str(payload.get("name") or ""),
            email=str(payload.get("email") or ""),
            message=str(payload.get("message") or ""),
            created_at=created_at,
            phone=payload.get("phone") or None,
        )


@dataclass(frozen=True)
class ContactDraft:
    name: str = ""
    email: str = ""
    phone: str = ""
    message: str = ""

    def to_payload(self) -> dict[str, Any]:
        return {
            "name": self.name.strip(),
            "email": self.email.strip(),
            "phone": self.phone.strip() or None,
            "message": self.message.strip(),
        }
