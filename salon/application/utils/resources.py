from __future__ import annotations

from typing import Any, Callable

from salon.application.ports.salon_api import SalonApiPort
from salon.application.utils.response_cache import Fetcher
from salon.domain.entities.admin_stats import AdminStats
from salon.domain.entities.catalog import (
    Artist,
    Category,
    GalleryColor,
    GalleryItem,
    GalleryStyle,
    Service,
)
from salon.domain.entities.salon_settings import SalonSettings


# Cache keys, one per backend resource
SERVICES = "services"
ARTISTS = "artists"
CATEGORIES = "categories"
GALLERY = "gallery"
GALLERY_STYLES = "gallery-styles"
GALLERY_COLORS = "gallery-colors"
SETTINGS = "settings"
ADMIN_STATS = "admin/stats"


def _list_fetcher(load: Callable[[], Any], parse: Callable[[Any], Any]) -> Fetcher:
    async def fetch() -> tuple[Any, ...]:
        return tuple(parse(item) for item in await load() or [])

    return fetch


def fetcher_for(key: str, api: SalonApiPort) -> Fetcher:
    """Fetcher that loads one resource and parses it into immutable domain values."""
    if key == SERVICES:
        return _list_fetcher(api.list_services, Service.from_payload)
    if key == ARTISTS:
        return _list_fetcher(api.list_artists, Artist.from_payload)
    if key == CATEGORIES:
        return _list_fetcher(api.list_categories, Category.from_payload)
    if key == GALLERY:
        return _list_fetcher(api.list_gallery, GalleryItem.from_payload)
    if key == GALLERY_STYLES:
        return _list_fetcher(api.list_gallery_styles, GalleryStyle.from_payload)
    if key == GALLERY_COLORS:
        return _list_fetcher(api.list_gallery_colors, GalleryColor.from_payload)
    if key == SETTINGS:

        async def fetch_settings() -> SalonSettings:
            return SalonSettings.from_payload(await api.get_settings() or {})

        return fetch_settings
    if key == ADMIN_STATS:

        async def fetch_stats() -> AdminStats:
            return AdminStats.from_payload(await api.get_admin_stats())

        return fetch_stats
    raise ValueError(f"Unknown resource: {key}")
