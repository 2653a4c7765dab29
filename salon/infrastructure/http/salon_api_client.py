from __future__ import annotations

import logging
from typing import Any

import httpx

from salon.application.exceptions import NetworkError, NotFoundError, ServerError
from salon.application.ports.salon_api import SalonApiPort
from salon.core.config import settings
from salon.domain.entities.appointment import AppointmentStatus


class HttpSalonApi(SalonApiPort):
    def __init__(
        self,
        base_url: str | None = None,
        api_prefix: str | None = None,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._base_url = (base_url or settings.BACKEND_URL).rstrip("/")
        self._api_prefix = settings.API_PREFIX if api_prefix is None else api_prefix
        self._client = client or httpx.AsyncClient(timeout=timeout or settings.HTTP_TIMEOUT_SECONDS)
        self._logger = logging.getLogger(__name__)

    async def __aenter__(self) -> "HttpSalonApi":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def list_services(self) -> list[dict[str, Any]]:
        return await self._get_json("/services")

    async def list_artists(self) -> list[dict[str, Any]]:
        return await self._get_json("/artists")

    async def list_categories(self) -> list[dict[str, Any]]:
        return await self._get_json("/categories")

    async def list_gallery(self) -> list[dict[str, Any]]:
        return await self._get_json("/gallery")

    async def list_gallery_styles(self) -> list[dict[str, Any]]:
        return await self._get_json("/gallery-styles")

    async def list_gallery_colors(self) -> list[dict[str, Any]]:
        return await self._get_json("/gallery-colors")

    async def get_settings(self) -> dict[str, Any]:
        return await self._get_json("/settings")

    async def create_appointment(self, payload: dict[str, Any]) -> dict[str, Any]:
        resp = await self._request("POST", "/appointments", json=payload)
        return self._decode(resp, "/appointments")

    async def list_appointments(self) -> list[dict[str, Any]]:
        return await self._get_json("/appointments")

    async def update_appointment_status(self, appointment_id: str, status: AppointmentStatus) -> None:
        await self._request(
            "PATCH",
            f"/appointments/{appointment_id}/status",
            params={"status": AppointmentStatus(status).value},
        )

    async def delete_appointment(self, appointment_id: str) -> None:
        await self._request("DELETE", f"/appointments/{appointment_id}")

    async def create_contact_message(self, payload: dict[str, Any]) -> dict[str, Any]:
        resp = await self._request("POST", "/contact", json=payload)
        return self._decode(resp, "/contact")

    async def list_contact_messages(self) -> list[dict[str, Any]]:
        return await self._get_json("/contact")

    async def delete_contact_message(self, message_id: str) -> None:
        await self._request("DELETE", f"/contact/{message_id}")

    async def get_admin_stats(self) -> dict[str, Any]:
        return await self._get_json("/admin/stats")

    async def _get_json(self, path: str) -> Any:
        resp = await self._request("GET", path)
        return self._decode(resp, path)

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        url = f"{self._base_url}{self._api_prefix}{path}"
        try:
            resp = await self._client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            self._logger.error(
                "Backend request failed",
                extra={"resource": f"{method} {path}", "error": str(e) or type(e).__name__},
            )
            raise NetworkError(f"{method} {path} failed: {e}") from e

        if resp.status_code >= 400:
            detail = _error_detail(resp)
            self._logger.error(
                "Backend returned an error",
                extra={"resource": f"{method} {path}", "status_code": resp.status_code, "reason": detail},
            )
            if resp.status_code == 404:
                raise NotFoundError(f"{method} {path}: {detail}", status_code=404)
            raise ServerError(f"{method} {path}: {detail}", status_code=resp.status_code)
        return resp

    def _decode(self, resp: httpx.Response, path: str) -> Any:
        if not resp.content:
            return None
        try:
            return resp.json()
        except ValueError as e:
            self._logger.error("Backend returned invalid JSON", extra={"resource": path, "error": str(e)})
            raise ServerError(f"{path}: invalid JSON", status_code=resp.status_code) from e


def _error_detail(resp: httpx.Response) -> str:
    try:
        body = resp.json()
    except ValueError:
        return resp.text[:200]
    if isinstance(body, dict) and body.get("detail") is not None:
        return str(body["detail"])
    return str(body)[:200]
