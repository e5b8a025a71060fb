"""
Domain models and value objects.

Contains fundamental domain entities: MailItem variants, tariff and units.
"""

from src.core.domain.mail_item import (
    Advertisement,
    Letter,
    MailItem,
    MailItemBase,
    MailKind,
    Parcel,
    has_destination,
)
from src.core.domain.tariff import DEFAULT_TARIFF, PostageTariff
from src.core.domain.units import (
    ADVERTISEMENT_RATE_PER_KILOGRAM,
    EXPRESS_MULTIPLIER,
    GRAMS_PER_KILOGRAM,
    LETTER_A3_BASE_FARE,
    LETTER_A3_FORMAT,
    LETTER_STANDARD_BASE_FARE,
    PARCEL_MAX_VOLUME_LITERS,
    PARCEL_RATE_PER_LITER,
    apply_express,
    grams_to_kilograms,
)

__all__ = [
    # Units module
    "GRAMS_PER_KILOGRAM",
    "EXPRESS_MULTIPLIER",
    "LETTER_A3_FORMAT",
    "LETTER_A3_BASE_FARE",
    "LETTER_STANDARD_BASE_FARE",
    "PARCEL_RATE_PER_LITER",
    "PARCEL_MAX_VOLUME_LITERS",
    "ADVERTISEMENT_RATE_PER_KILOGRAM",
    "grams_to_kilograms",
    "apply_express",
    # Tariff
    "PostageTariff",
    "DEFAULT_TARIFF",
    # Mail models
    "MailKind",
    "MailItem",
    "MailItemBase",
    "Letter",
    "Parcel",
    "Advertisement",
    "has_destination",
]
