from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from salon.domain.entities.appointment import AppointmentStatus


class SalonApiPort(ABC):
    """
    Backend REST contract (base path /api).

    Every method raises SalonApiError (NetworkError, NotFoundError, ServerError)
    on failure. Payloads are the backend's JSON records.
    """

    @abstractmethod
    async def list_services(self) -> list[dict[str, Any]]:
        raise NotImplementedError

    @abstractmethod
    async def list_artists(self) -> list[dict[str, Any]]:
        raise NotImplementedError

    @abstractmethod
    async def list_categories(self) -> list[dict[str, Any]]:
        raise NotImplementedError

    @abstractmethod
    async def list_gallery(self) -> list[dict[str, Any]]:
        raise NotImplementedError

    @abstractmethod
    async def list_gallery_styles(self) -> list[dict[str, Any]]:
        raise NotImplementedError

    @abstractmethod
    async def list_gallery_colors(self) -> list[dict[str, Any]]:
        raise NotImplementedError

    @abstractmethod
    async def get_settings(self) -> dict[str, Any]:
        raise NotImplementedError

    @abstractmethod
    async def create_appointment(self, payload: dict[str, Any]) -> dict[str, Any]:
        """Create an appointment from a booking draft payload. Returns the created record."""
        raise NotImplementedError

    @abstractmethod
    async def list_appointments(self) -> list[dict[str, Any]]:
        raise NotImplementedError

    @abstractmethod
    async def update_appointment_status(self, appointment_id: str, status: AppointmentStatus) -> None:
        raise NotImplementedError

    @abstractmethod
    async def delete_appointment(self, appointment_id: str) -> None:
        raise NotImplementedError

    @abstractmethod
    async def create_contact_message(self, payload: dict[str, Any]) -> dict[str, Any]:
        raise NotImplementedError

    @abstractmethod
    async def list_contact_messages(self) -> list[dict[str, Any]]:
        raise NotImplementedError

    @abstractmethod
    async def delete_contact_message(self, message_id: str) -> None:
        raise NotImplementedError

    @abstractmethod
    async def get_admin_stats(self) -> dict[str, Any]:
        raise NotImplementedError
