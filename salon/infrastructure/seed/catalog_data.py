from __future__ import annotations

from typing import Any

from salon.domain.entities.catalog import GalleryItem


SEED_CATEGORIES: list[dict[str, Any]] = [
    {"id": "cat-manicure", "name_en": "Manicure", "name_de": "Maniküre", "name_fr": "Manucure"},
    {"id": "cat-pedicure", "name_en": "Pedicure", "name_de": "Pediküre", "name_fr": "Pédicure"},
    {"id": "cat-nail-art", "name_en": "Nail Art", "name_de": "Nageldesign", "name_fr": "Nail Art"},
]

SEED_SERVICES: list[dict[str, Any]] = [
    {
        "id": "svc-classic-manicure",
        "name_en": "Classic Manicure",
        "name_de": "Klassische Maniküre",
        "name_fr": "Manucure classique",
        "description_en": "Shaping, cuticle care and polish.",
        "description_de": "Formen, Nagelhautpflege und Lack.",
        "description_fr": "",
        "price": "CHF 55",
        "duration": "45 min",
        "category": "Manicure",
    },
    {
        "id": "svc-gel-manicure",
        "name_en": "Gel Manicure",
        "name_de": "Gel-Maniküre",
        "name_fr": None,
        "description_en": "Long-lasting gel polish with UV curing.",
        "price": "CHF 75",
        "duration": "60 min",
        "category": "Manicure",
    },
    {
        "id": "svc-spa-pedicure",
        "name_en": "Spa Pedicure",
        "name_de": "Spa-Pediküre",
        "name_fr": "Pédicure spa",
        "description_en": "Foot bath, exfoliation, massage and polish.",
        "price": "CHF 85",
        "duration": "75 min",
        "category": "Pedicure",
    },
    {
        "id": "svc-nail-art",
        "name_en": "Custom Nail Art",
        "name_de": "Individuelles Nageldesign",
        "name_fr": "Nail art personnalisé",
        "description_en": "Hand-painted designs per nail.",
        "price": "from CHF 10",
        "duration": "30 min",
        "category": "Nail Art",
    },
]

SEED_ARTISTS: list[dict[str, Any]] = [
    {"id": "art-lena", "name": "Lena", "bio_en": "Gel and nail art specialist.", "bio_de": "Spezialistin für Gel und Nageldesign."},
    {"id": "art-sophie", "name": "Sophie", "bio_en": "Pedicure and spa treatments."},
]

SEED_GALLERY_STYLES: list[dict[str, Any]] = [
    {"id": "style-minimalist", "name_en": "Minimalist", "name_de": "Minimalistisch", "name_fr": "Minimaliste"},
    {"id": "style-modern", "name_en": "Modern", "name_de": "Modern", "name_fr": "Moderne"},
    {"id": "style-glitter", "name_en": "Glitter", "name_de": "Glitzer", "name_fr": "Paillettes"},
    {"id": "style-artistic", "name_en": "Artistic", "name_de": "Künstlerisch", "name_fr": "Artistique"},
    {"id": "style-french", "name_en": "French", "name_de": "French", "name_fr": "French"},
    {"id": "style-ombre", "name_en": "Ombre", "name_de": "Ombré", "name_fr": "Ombré"},
]

SEED_GALLERY_COLORS: list[dict[str, Any]] = [
    {"id": f"color-{name.lower()}", "name_en": name, "name_de": de, "name_fr": fr}
    for name, de, fr in (
        ("Nude", "Nude", "Nude"),
        ("White", "Weiss", "Blanc"),
        ("Black", "Schwarz", "Noir"),
        ("Silver", "Silber", "Argent"),
        ("Gold", "Gold", "Or"),
        ("Pink", "Rosa", "Rose"),
        ("Red", "Rot", "Rouge"),
        ("Orange", "Orange", "Orange"),
        ("Yellow", "Gelb", "Jaune"),
        ("Purple", "Lila", "Violet"),
        ("Blue", "Blau", "Bleu"),
        ("Green", "Grün", "Vert"),
        ("Teal", "Petrol", "Bleu canard"),
    )
]

SEED_SETTINGS: dict[str, Any] = {
    "address_line1": "Bahnhofstrasse 12",
    "address_line2": "",
    "postal_code": "8001",
    "city": "Zürich",
    "country": "Switzerland",
    "phone": "+41 44 000 00 00",
    "email": "hello@example.com",
    "hours_weekday": "09:00 - 18:30",
    "hours_saturday": "09:00 - 16:00",
    "hours_sunday": "Closed",
    "instagram_url": "",
    "facebook_url": "",
}

# Shown by the gallery when the backend has no items yet.
_DEFAULT_GALLERY_PAYLOAD: list[dict[str, Any]] = [
    {
        "id": "1", "image_url": "https://images.unsplash.com/photo-1611821828952-3453ba0f9408",
        "title_en": "Elegant Minimalist", "title_de": "Eleganter Minimalist", "title_fr": "Minimaliste Élégant",
        "artist_name": "Artist", "style": "Minimalist", "colors": ["Nude", "White"],
    },
    {
        "id": "2", "image_url": "https://images.unsplash.com/photo-1698308233758-d55c98fd7444",
        "title_en": "Black & Silver Art", "title_de": "Schwarz & Silber Kunst", "title_fr": "Art Noir & Argent",
        "artist_name": "Artist", "style": "Modern", "colors": ["Black", "Silver"],
    },
    {
        "id": "3", "image_url": "https://images.unsplash.com/photo-1617472556169-c5547fde3282",
        "title_en": "Clean Design", "title_de": "Sauberes Design", "title_fr": "Design Épuré",
        "artist_name": "Artist", "style": "Minimalist", "colors": ["Nude", "Pink"],
    },
    {
        "id": "4", "image_url": "https://images.unsplash.com/photo-1571290274554-6a2eaa771e5f",
        "title_en": "Colorful Geometric", "title_de": "Buntes Geometrisch", "title_fr": "Géométrique Coloré",
        "artist_name": "Artist", "style": "Modern", "colors": ["Red", "Orange", "Yellow"],
    },
    {
        "id": "5", "image_url": "https://images.pexels.com/photos/6429663/pexels-photo-6429663.jpeg",
        "title_en": "Professional Colorful", "title_de": "Professionell Bunt", "title_fr": "Coloré Professionnel",
        "artist_name": "Artist", "style": "Artistic", "colors": ["Pink", "Purple", "Blue"],
    },
    {
        "id": "6", "image_url": "https://images.unsplash.com/photo-1648844421638-0655d00dd5ba",
        "title_en": "Glitter Glamour", "title_de": "Glitzer Glamour", "title_fr": "Glamour Pailletté",
        "artist_name": "Artist", "style": "Glitter", "colors": ["Gold", "Silver"],
    },
    {
        "id": "7", "image_url": "https://images.unsplash.com/photo-1648844421727-cde6c4246b13",
        "title_en": "Elegant Glitter", "title_de": "Eleganter Glitzer", "title_fr": "Paillettes Élégantes",
        "artist_name": "Artist", "style": "Glitter", "colors": ["Gold", "Nude"],
    },
    {
        "id": "8", "image_url": "https://images.unsplash.com/photo-1648844421753-351afd50486a",
        "title_en": "Professional Glitter", "title_de": "Professioneller Glitzer", "title_fr": "Paillettes Professionnelles",
        "artist_name": "Artist", "style": "Glitter", "colors": ["Silver", "White"],
    },
    {
        "id": "9", "image_url": "https://images.pexels.com/photos/3997379/pexels-photo-3997379.jpeg",
        "title_en": "Colorful Display", "title_de": "Bunte Anzeige", "title_fr": "Affichage Coloré",
        "artist_name": "Artist", "style": "Artistic", "colors": ["Red", "Blue", "Green", "Yellow"],
    },
    {
        "id": "10", "image_url": "https://images.pexels.com/photos/6830805/pexels-photo-6830805.jpeg",
        "title_en": "Professional Art", "title_de": "Professionelle Kunst", "title_fr": "Art Professionnel",
        "artist_name": "Artist", "style": "French", "colors": ["Nude", "White"],
    },
]

DEFAULT_GALLERY: tuple[GalleryItem, ...] = tuple(GalleryItem.from_payload(p) for p in _DEFAULT_GALLERY_PAYLOAD)
