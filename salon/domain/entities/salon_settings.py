from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class OpeningHours:
    weekday: str = ""
    saturday: str = ""
    sunday: str = ""


@dataclass(frozen=True)
class SalonSettings:
    address_line1: str = ""
    address_line2: str = ""
    postal_code: str = ""
    city: str = ""
    country: str = ""
    phone: str = ""
    email: str = ""
    hours: OpeningHours = OpeningHours()
    instagram_url: str = ""
    facebook_url: str = ""

    @staticmethod
    def from_payload(payload: Mapping[str, Any]) -> "SalonSettings":
        def text(key: str) -> str:
            return str(payload.get(key) or "")

        return SalonSettings(
            address_line1=text("address_line1"),
            address_line2=text("address_line2"),
            postal_code=text("postal_code"),
            city=text("city"),
            country=text("country"),
            phone=text("phone"),
            email=text("email"),
            hours=OpeningHours(
                weekday=text("hours_weekday"),
                saturday=text("hours_saturday"),
                sunday=text("hours_sunday"),
            ),
            instagram_url=text("instagram_url"),
            facebook_url=text("facebook_url"),
        )

    @property
    def address(self) -> str:
        locality = f"{self.postal_code} {self.city}".strip()
        parts = [self.address_line1, self.address_line2, locality, self.country]
        return ", ".join(p for p in parts if p)
