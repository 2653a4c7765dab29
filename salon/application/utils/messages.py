from __future__ import annotations

from salon.domain.entities.locale import Locale, normalize_locale


# Notice texts shown in the transient notice area; English is the fallback.
MESSAGES: dict[str, dict[Locale, str]] = {
    "booking.missingFields": {
        Locale.EN: "Please fill in all required fields",
        Locale.DE: "Bitte füllen Sie alle Pflichtfelder aus",
        Locale.FR: "Veuillez remplir tous les champs obligatoires",
    },
    "booking.success": {
        Locale.EN: "Booking successful!",
        Locale.DE: "Buchung erfolgreich!",
        Locale.FR: "Réservation réussie !",
    },
    "booking.error": {
        Locale.EN: "Failed to book appointment. Please try again.",
        Locale.DE: "Termin konnte nicht gebucht werden. Bitte versuchen Sie es erneut.",
        Locale.FR: "Impossible de réserver le rendez-vous. Veuillez réessayer.",
    },
    "booking.catalogError": {
        Locale.EN: "Could not load services and artists",
    },
    "appointments.loadError": {
        Locale.EN: "Failed to load appointments",
        Locale.DE: "Termine konnten nicht geladen werden",
    },
    "appointments.updateSuccess": {
        Locale.EN: "Appointment status updated",
        Locale.DE: "Terminstatus aktualisiert",
    },
    "appointments.updateError": {
        Locale.EN: "Failed to update appointment status",
        Locale.DE: "Terminstatus konnte nicht aktualisiert werden",
    },
    "appointments.deleteSuccess": {
        Locale.EN: "Appointment deleted",
        Locale.DE: "Termin gelöscht",
    },
    "appointments.deleteError": {
        Locale.EN: "Failed to delete appointment",
        Locale.DE: "Termin konnte nicht gelöscht werden",
    },
    "messages.loadError": {
        Locale.EN: "Failed to load messages",
        Locale.DE: "Nachrichten konnten nicht geladen werden",
    },
    "messages.deleteSuccess": {
        Locale.EN: "Message deleted",
        Locale.DE: "Nachricht gelöscht",
    },
    "messages.deleteError": {
        Locale.EN: "Failed to delete message",
        Locale.DE: "Nachricht konnte nicht gelöscht werden",
    },
    "contact.required": {
        Locale.EN: "This field is required",
        Locale.DE: "Dieses Feld ist erforderlich",
        Locale.FR: "Ce champ est obligatoire",
    },
    "contact.invalidEmail": {
        Locale.EN: "Please enter a valid email address",
        Locale.DE: "Bitte geben Sie eine gültige E-Mail-Adresse ein",
        Locale.FR: "Veuillez saisir une adresse e-mail valide",
    },
    "contact.success": {
        Locale.EN: "Message sent! We will get back to you soon.",
        Locale.DE: "Nachricht gesendet! Wir melden uns bald.",
        Locale.FR: "Message envoyé ! Nous vous répondrons bientôt.",
    },
    "contact.error": {
        Locale.EN: "Failed to send message. Please try again.",
        Locale.DE: "Nachricht konnte nicht gesendet werden. Bitte versuchen Sie es erneut.",
        Locale.FR: "Impossible d'envoyer le message. Veuillez réessayer.",
    },
    "dashboard.loadError": {
        Locale.EN: "Failed to load stats",
    },
}


def translate(key: str, locale: str | Locale | None) -> str:
    texts = MESSAGES.get(key)
    if not texts:
        return key
    return texts.get(normalize_locale(locale)) or texts.get(Locale.EN) or key
