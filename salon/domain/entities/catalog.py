from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from salon.domain.entities.localized_text import LocalizedText


@dataclass(frozen=True)
class Service:
    id: str
    name: LocalizedText
    description: LocalizedText = LocalizedText()
    price: str = ""
    duration: str = ""
    category: str = ""  # English name of the owning category
    image_url: str | None = None

    @staticmethod
    def from_payload(payload: Mapping[str, Any]) -> "Service":
        return Service(
            id=str(payload.get("id", "")),
            name=LocalizedText.from_payload(payload, "name"),
            description=LocalizedText.from_payload(payload, "description"),
            price=str(payload.get("price") or ""),
            duration=str(payload.get("duration") or ""),
            category=str(payload.get("category") or ""),
            image_url=payload.get("image_url"),
        )


@dataclass(frozen=True)
class Artist:
    id: str
    name: str
    bio: LocalizedText = LocalizedText()
    image_url: str | None = None

    @staticmethod
    def from_payload(payload: Mapping[str, Any]) -> "Artist":
        return Artist(
            id=str(payload.get("id", "")),
            name=str(payload.get("name") or ""),
            bio=LocalizedText.from_payload(payload, "bio"),
            image_url=payload.get("image_url"),
        )


@dataclass(frozen=True)
class Category:
    id: str
    name: LocalizedText

    @staticmethod
    def from_payload(payload: Mapping[str, Any]) -> "Category":
        return Category(id=str(payload.get("id", "")), name=LocalizedText.from_payload(payload, "name"))


@dataclass(frozen=True)
class GalleryItem:
    id: str
    image_url: str
    title: LocalizedText
    artist_name: str = ""
    style: str = ""
    colors: tuple[str, ...] = ()

    @staticmethod
    def from_payload(payload: Mapping[str, Any]) -> "GalleryItem":
        return GalleryItem(
            id=str(payload.get("id", "")),
            image_url=str(payload.get("image_url") or ""),
            title=LocalizedText.from_payload(payload, "title"),
            artist_name=str(payload.get("artist_name") or ""),
            style=str(payload.get("style") or ""),
            colors=tuple(str(c) for c in payload.get("colors") or ()),
        )


@dataclass(frozen=True)
class GalleryStyle:
    id: str
    name: LocalizedText

    @staticmethod
    def from_payload(payload: Mapping[str, Any]) -> "GalleryStyle":
        return GalleryStyle(id=str(payload.get("id", "")), name=LocalizedText.from_payload(payload, "name"))


@dataclass(frozen=True)
class GalleryColor:
    id: str
    name: LocalizedText

    @staticmethod
    def from_payload(payload: Mapping[str, Any]) -> "GalleryColor":
        return GalleryColor(id=str(payload.get("id", "")), name=LocalizedText.from_payload(payload, "name"))
