from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Mapping

from salon.domain.entities.locale import Locale, normalize_locale


@dataclass(frozen=True)
class LocalizedText:
    en: str = ""
    de: str | None = None
    fr: str | None = None

    def get(self, locale: str | Locale | None) -> str:
        value = _ACCESSORS[normalize_locale(locale)](self)
        return value or self.en or ""

    @staticmethod
    def from_payload(payload: Mapping[str, Any], field: str) -> "LocalizedText":
        # Backend payloads carry one suffixed key per locale, e.g. name_en / name_de.
        return LocalizedText(
            en=_as_text(payload.get(f"{field}_en")) or "",
            de=_as_text(payload.get(f"{field}_de")),
            fr=_as_text(payload.get(f"{field}_fr")),
        )


_ACCESSORS: dict[Locale, Callable[[LocalizedText], str | None]] = {
    Locale.DE: lambda text: text.de,
    Locale.FR: lambda text: text.fr,
    Locale.EN: lambda text: text.en,
}


def _as_text(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)
