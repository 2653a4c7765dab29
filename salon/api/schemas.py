from datetime import date

from pydantic import BaseModel, Field

from salon.domain.entities.appointment import AppointmentStatus
from salon.domain.entities.booking_draft import TIME_SLOTS


class AppointmentCreateSchema(BaseModel):
    service_id: str = Field(min_length=1)
    artist_id: str = Field(min_length=1)
    appointment_date: date
    appointment_time: str = Field(pattern=r"^\d{2}:\d{2}$")
    customer_name: str = Field(min_length=1)
    customer_email: str = Field(min_length=1)
    customer_phone: str = Field(min_length=1)
    notes: str | None = ""

    def is_known_slot(self) -> bool:
        return self.appointment_time in TIME_SLOTS


class AppointmentSchema(BaseModel):
    id: str
    service_id: str
    artist_id: str
    appointment_date: str
    appointment_time: str
    customer_name: str
    customer_email: str
    customer_phone: str
    notes: str | None = ""
    status: AppointmentStatus = AppointmentStatus.PENDING
    service_name_en: str | None = None
    service_name_de: str | None = None
    service_name_fr: str | None = None
    artist_name: str | None = None
    created_at: str | None = None


class ContactCreateSchema(BaseModel):
    name: str = Field(min_length=1)
    email: str = Field(min_length=3)
    phone: str | None = None
    message: str = Field(min_length=1)


class ContactMessageSchema(BaseModel):
    id: str
    name: str
    email: str
    phone: str | None = None
    message: str
    created_at: str


class AdminStatsSchema(BaseModel):
    total_appointments: int = 0
    pending_appointments: int = 0
    confirmed_appointments: int = 0
    total_services: int = 0
    total_gallery_items: int = 0
    total_messages: int = 0
