from __future__ import annotations

from enum import Enum


class Locale(str, Enum):
    DE = "de"
    FR = "fr"
    EN = "en"


def normalize_locale(tag: str | Locale | None) -> Locale:
    """Map a language tag to a supported locale; regional tags use their base language."""
    if isinstance(tag, Locale):
        return tag
    if not tag:
        return Locale.EN
    base = str(tag).strip().replace("_", "-").split("-", 1)[0].lower()
    try:
        return Locale(base)
    except ValueError:
        return Locale.EN
