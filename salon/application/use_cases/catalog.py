from __future__ import annotations

import asyncio
import logging
from typing import Iterable

from salon.application.ports.salon_api import SalonApiPort
from salon.application.utils.localization import LocalizedFieldResolver
from salon.application.utils.resources import (
    CATEGORIES,
    GALLERY,
    GALLERY_COLORS,
    GALLERY_STYLES,
    SERVICES,
    fetcher_for,
)
from salon.application.utils.response_cache import ResponseCache
from salon.domain.entities.catalog import Category, GalleryColor, GalleryItem, GalleryStyle, Service
from salon.domain.entities.locale import Locale


FILTER_ALL = "all"


class ServiceMenu:
    """Services grouped into category tabs."""

    def __init__(self, api: SalonApiPort, cache: ResponseCache, locale: str | Locale | None = None) -> None:
        self._api = api
        self._cache = cache
        self.resolve = LocalizedFieldResolver(locale)
        self._logger = logging.getLogger(__name__)

        self._services: tuple[Service, ...] = ()
        self._categories: tuple[Category, ...] = ()
        self._active_category_id: str | None = None
        self._loading = True
        self._closed = False

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def categories(self) -> tuple[Category, ...]:
        return self._categories

    async def load(self) -> None:
        services_entry, categories_entry = await asyncio.gather(
            self._cache.load(SERVICES, fetcher_for(SERVICES, self._api)),
            self._cache.load(CATEGORIES, fetcher_for(CATEGORIES, self._api)),
        )
        if self._closed:
            return
        self.resolve.clear()
        self._services = services_entry.data or ()
        self._categories = categories_entry.data or ()
        self._loading = False

    def tabs(self) -> list[tuple[str, str]]:
        return [(category.id, self.resolve(category, "name")) for category in self._categories]

    def select_category(self, category_id: str) -> None:
        self._active_category_id = category_id

    @property
    def active_category(self) -> Category | None:
        for category in self._categories:
            if category.id == self._active_category_id:
                return category
        return self._categories[0] if self._categories else None

    def services_for(self, category: Category | None) -> list[Service]:
        # Services reference their category by its English name.
        if category is None:
            return []
        return [s for s in self._services if s.category == category.name.en]

    @property
    def visible_services(self) -> list[Service]:
        return self.services_for(self.active_category)

    def close(self) -> None:
        self._closed = True


class GalleryBrowser:
    """Gallery with style and color filters; falls back to built-in items when the backend has none."""

    def __init__(
        self,
        api: SalonApiPort,
        cache: ResponseCache,
        locale: str | Locale | None = None,
        fallback_items: Iterable[GalleryItem] = (),
    ) -> None:
        self._api = api
        self._cache = cache
        self.resolve = LocalizedFieldResolver(locale)
        self._fallback_items = tuple(fallback_items)
        self._logger = logging.getLogger(__name__)

        self._items: tuple[GalleryItem, ...] = ()
        self._styles: tuple[GalleryStyle, ...] = ()
        self._colors: tuple[GalleryColor, ...] = ()
        self._selected_style = FILTER_ALL
        self._selected_color = FILTER_ALL
        self._loading = True
        self._closed = False

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def items(self) -> tuple[GalleryItem, ...]:
        return self._items

    @property
    def styles(self) -> tuple[GalleryStyle, ...]:
        return self._styles

    @property
    def colors(self) -> tuple[GalleryColor, ...]:
        return self._colors

    async def load(self) -> None:
        gallery_entry, styles_entry, colors_entry = await asyncio.gather(
            self._cache.load(GALLERY, fetcher_for(GALLERY, self._api)),
            self._cache.load(GALLERY_STYLES, fetcher_for(GALLERY_STYLES, self._api)),
            self._cache.load(GALLERY_COLORS, fetcher_for(GALLERY_COLORS, self._api)),
        )
        if self._closed:
            return
        self.resolve.clear()

        items = gallery_entry.data or ()
        if not items:
            self._logger.info("Using default gallery", extra={"reason": "error" if gallery_entry.error else "empty"})
            items = self._fallback_items
        self._items = items

        # Only offer filter values that at least one item uses (matched on English names).
        used_styles = {item.style for item in items}
        used_colors = {color for item in items for color in item.colors}
        self._styles = tuple(s for s in styles_entry.data or () if s.name.en in used_styles)
        self._colors = tuple(c for c in colors_entry.data or () if c.name.en in used_colors)
        self._loading = False

    def select_style(self, style: str) -> None:
        self._selected_style = style or FILTER_ALL

    def select_color(self, color: str) -> None:
        self._selected_color = color or FILTER_ALL

    @property
    def visible_items(self) -> list[GalleryItem]:
        result = list(self._items)
        if self._selected_style != FILTER_ALL:
            result = [item for item in result if item.style == self._selected_style]
        if self._selected_color != FILTER_ALL:
            result = [item for item in result if self._selected_color in item.colors]
        return result

    def close(self) -> None:
        self._closed = True
