from __future__ import annotations

from typing import Any, Mapping

from salon.domain.entities.locale import Locale, normalize_locale
from salon.domain.entities.localized_text import LocalizedText


_SUFFIXES: dict[Locale, str] = {
    Locale.DE: "_de",
    Locale.FR: "_fr",
    Locale.EN: "_en",
}


def resolve(entity: Any, field: str, locale: str | Locale | None) -> str:
    """
    Display string for a localized field of a catalog record.

    Accepts either a typed entity whose attribute is a LocalizedText or a raw
    backend mapping with suffixed keys (name_en, name_de, ...). Falls back to
    English when the localized value is missing or empty; returns "" when the
    English value is missing as well. Never raises.
    """
    target = normalize_locale(locale)

    if isinstance(entity, Mapping):
        return _resolve_mapping(entity, field, target)

    value = getattr(entity, field, None)
    if isinstance(value, LocalizedText):
        return value.get(target)
    if isinstance(value, str):
        return value
    return ""


def _resolve_mapping(entity: Mapping[str, Any], field: str, locale: Locale) -> str:
    localized = entity.get(field + _SUFFIXES[locale])
    if localized:
        return str(localized)
    fallback = entity.get(field + _SUFFIXES[Locale.EN])
    return str(fallback) if fallback else ""


class LocalizedFieldResolver:
    """Resolver bound to the active display locale, memoized per (entity type, entity id, field, locale)."""

    def __init__(self, locale: str | Locale | None = None) -> None:
        self._locale = normalize_locale(locale)
        self._memo: dict[tuple[str, str, str, Locale], str] = {}

    @property
    def locale(self) -> Locale:
        return self._locale

    def set_locale(self, locale: str | Locale | None) -> None:
        new_locale = normalize_locale(locale)
        if new_locale != self._locale:
            self._locale = new_locale
            self._memo.clear()

    def __call__(self, entity: Any, field: str) -> str:
        entity_id = _entity_id(entity)
        if entity_id is None:
            return resolve(entity, field, self._locale)

        memo_key = (type(entity).__name__, entity_id, field, self._locale)
        cached = self._memo.get(memo_key)
        if cached is None:
            cached = resolve(entity, field, self._locale)
            self._memo[memo_key] = cached
        return cached

    def clear(self) -> None:
        """Drop memoized values, e.g. after the catalog was re-fetched."""
        self._memo.clear()


def _entity_id(entity: Any) -> str | None:
    # Raw mappings carry no record type, so they are resolved without the memo.
    if isinstance(entity, Mapping):
        return None
    value = getattr(entity, "id", None)
    if value in (None, ""):
        return None
    return str(value)
