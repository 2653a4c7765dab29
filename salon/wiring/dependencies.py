from functools import lru_cache
import logging
from typing import Callable
from zoneinfo import ZoneInfo

import httpx

from salon.core.config import settings
from salon.application.exceptions import AdminAccessDenied
from salon.application.ports.notifier import NotifierPort
from salon.application.ports.salon_api import SalonApiPort
from salon.application.use_cases.appointments import AppointmentLifecycleManager
from salon.application.use_cases.booking import BookingSubmissionPipeline
from salon.application.use_cases.catalog import GalleryBrowser, ServiceMenu
from salon.application.use_cases.contact import ContactForm, MessageInbox
from salon.application.use_cases.dashboard import DashboardUseCase
from salon.application.utils.response_cache import ResponseCache
from salon.infrastructure.http.salon_api_client import HttpSalonApi
from salon.infrastructure.notices.memory_notifier import MemoryNotifier
from salon.infrastructure.seed.catalog_data import DEFAULT_GALLERY


_response_cache: ResponseCache | None = None
_notifier: MemoryNotifier | None = None


def get_response_cache() -> ResponseCache:
    global _response_cache
    if _response_cache is None:
        _response_cache = ResponseCache(ttl_seconds=settings.CACHE_TTL_SECONDS)
    return _response_cache


def get_notifier() -> NotifierPort:
    global _notifier
    if _notifier is None:
        _notifier = MemoryNotifier()
    return _notifier


@lru_cache
def get_salon_api() -> SalonApiPort:
    logger = logging.getLogger(__name__)
    logger.info("ENV=%s", settings.ENV)

    if settings.USE_DEV_BACKEND:
        from salon.main import create_app

        logger.info("Using in-process dev backend")
        client = httpx.AsyncClient(
            transport=httpx.ASGITransport(app=create_app()),
            timeout=settings.HTTP_TIMEOUT_SECONDS,
        )
        return HttpSalonApi(base_url="http://dev-backend", client=client)

    logger.info("Using backend at %s", settings.BACKEND_URL)
    return HttpSalonApi()


def get_business_timezone() -> ZoneInfo:
    return ZoneInfo(settings.BUSINESS_TIMEZONE)


def get_booking_pipeline(locale: str | None = None) -> BookingSubmissionPipeline:
    return BookingSubmissionPipeline(
        api=get_salon_api(),
        cache=get_response_cache(),
        notifier=get_notifier(),
        locale=locale or settings.DEFAULT_LOCALE,
        timezone=get_business_timezone(),
    )


def get_service_menu(locale: str | None = None) -> ServiceMenu:
    return ServiceMenu(api=get_salon_api(), cache=get_response_cache(), locale=locale or settings.DEFAULT_LOCALE)


def get_gallery_browser(locale: str | None = None) -> GalleryBrowser:
    return GalleryBrowser(
        api=get_salon_api(),
        cache=get_response_cache(),
        locale=locale or settings.DEFAULT_LOCALE,
        fallback_items=DEFAULT_GALLERY,
    )


def get_contact_form(locale: str | None = None) -> ContactForm:
    return ContactForm(
        api=get_salon_api(),
        cache=get_response_cache(),
        notifier=get_notifier(),
        locale=locale or settings.DEFAULT_LOCALE,
    )


def _require_admin(is_authenticated: Callable[[], bool], view: str) -> None:
    if not is_authenticated():
        logging.getLogger(__name__).warning("Admin view refused", extra={"resource": view})
        raise AdminAccessDenied(f"Login required for {view}")


def get_appointment_manager(
    is_authenticated: Callable[[], bool], locale: str | None = None
) -> AppointmentLifecycleManager:
    _require_admin(is_authenticated, "appointments")
    return AppointmentLifecycleManager(
        api=get_salon_api(),
        notifier=get_notifier(),
        cache=get_response_cache(),
        locale=locale or settings.DEFAULT_LOCALE,
    )


def get_message_inbox(is_authenticated: Callable[[], bool], locale: str | None = None) -> MessageInbox:
    _require_admin(is_authenticated, "messages")
    return MessageInbox(
        api=get_salon_api(),
        notifier=get_notifier(),
        cache=get_response_cache(),
        locale=locale or settings.DEFAULT_LOCALE,
    )


def get_dashboard(is_authenticated: Callable[[], bool], locale: str | None = None) -> DashboardUseCase:
    _require_admin(is_authenticated, "dashboard")
    return DashboardUseCase(
        api=get_salon_api(),
        cache=get_response_cache(),
        notifier=get_notifier(),
        locale=locale or settings.DEFAULT_LOCALE,
    )
