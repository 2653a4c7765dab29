from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response

from salon.api.schemas import (
    AdminStatsSchema,
    AppointmentCreateSchema,
    AppointmentSchema,
    ContactCreateSchema,
    ContactMessageSchema,
)
from salon.domain.entities.appointment import AppointmentStatus
from salon.infrastructure.store.memory_backend import InMemorySalonBackend, RecordNotFound


router = APIRouter(prefix="/api")
logger = logging.getLogger(__name__)


def get_backend(request: Request) -> InMemorySalonBackend:
    return request.app.state.backend


@router.get("/services")
def list_services(backend: InMemorySalonBackend = Depends(get_backend)) -> list[dict[str, Any]]:
    return backend.services


@router.get("/artists")
def list_artists(backend: InMemorySalonBackend = Depends(get_backend)) -> list[dict[str, Any]]:
    return backend.artists


@router.get("/categories")
def list_categories(backend: InMemorySalonBackend = Depends(get_backend)) -> list[dict[str, Any]]:
    return backend.categories


@router.get("/gallery")
def list_gallery(backend: InMemorySalonBackend = Depends(get_backend)) -> list[dict[str, Any]]:
    return backend.gallery


@router.get("/gallery-styles")
def list_gallery_styles(backend: InMemorySalonBackend = Depends(get_backend)) -> list[dict[str, Any]]:
    return backend.gallery_styles


@router.get("/gallery-colors")
def list_gallery_colors(backend: InMemorySalonBackend = Depends(get_backend)) -> list[dict[str, Any]]:
    return backend.gallery_colors


@router.get("/settings")
def get_settings(backend: InMemorySalonBackend = Depends(get_backend)) -> dict[str, Any]:
    return backend.settings


@router.post("/appointments", response_model=AppointmentSchema)
def create_appointment(
    req: AppointmentCreateSchema,
    backend: InMemorySalonBackend = Depends(get_backend),
):
    if not req.is_known_slot():
        raise HTTPException(status_code=422, detail="Unknown time slot")
    data = req.model_dump(mode="json")
    try:
        record = backend.create_appointment(data)
    except RecordNotFound as e:
        raise HTTPException(status_code=404, detail=e.args[0])
    return AppointmentSchema.model_validate(record)


@router.get("/appointments", response_model=list[AppointmentSchema])
def list_appointments(backend: InMemorySalonBackend = Depends(get_backend)):
    return [AppointmentSchema.model_validate(a) for a in backend.list_appointments()]


@router.patch("/appointments/{appointment_id}/status", response_model=AppointmentSchema)
def update_appointment_status(
    appointment_id: str,
    status: AppointmentStatus = Query(...),
    backend: InMemorySalonBackend = Depends(get_backend),
):
    try:
        record = backend.set_appointment_status(appointment_id, status)
    except RecordNotFound as e:
        raise HTTPException(status_code=404, detail=e.args[0])
    logger.info("Status updated", extra={"appointment_id": appointment_id, "status": status.value})
    return AppointmentSchema.model_validate(record)


@router.delete("/appointments/{appointment_id}", status_code=204)
def delete_appointment(appointment_id: str, backend: InMemorySalonBackend = Depends(get_backend)) -> Response:
    try:
        backend.delete_appointment(appointment_id)
    except RecordNotFound as e:
        raise HTTPException(status_code=404, detail=e.args[0])
    return Response(status_code=204)


@router.post("/contact", response_model=ContactMessageSchema)
def create_contact_message(
    req: ContactCreateSchema,
    backend: InMemorySalonBackend = Depends(get_backend),
):
    return ContactMessageSchema.model_validate(backend.create_message(req.model_dump(mode="json")))


@router.get("/contact", response_model=list[ContactMessageSchema])
def list_contact_messages(backend: InMemorySalonBackend = Depends(get_backend)):
    return [ContactMessageSchema.model_validate(m) for m in backend.list_messages()]


@router.delete("/contact/{message_id}", status_code=204)
def delete_contact_message(message_id: str, backend: InMemorySalonBackend = Depends(get_backend)) -> Response:
    try:
        backend.delete_message(message_id)
    except RecordNotFound as e:
        raise HTTPException(status_code=404, detail=e.args[0])
    return Response(status_code=204)


@router.get("/admin/stats", response_model=AdminStatsSchema)
def admin_stats(backend: InMemorySalonBackend = Depends(get_backend)):
    return AdminStatsSchema(**backend.stats())
