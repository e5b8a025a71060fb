"""Tariff — Конфигурация почтовых тарифов

Параметры по умолчанию берутся из констант units.py.
Отдельный экземпляр PostageTariff можно передать в расчёт postage
или в Mailbox, чтобы пересчитать весь ящик по другому тарифу.
"""

from dataclasses import dataclass

from src.core.domain.units import (
    ADVERTISEMENT_RATE_PER_KILOGRAM,
    EXPRESS_MULTIPLIER,
    GRAMS_PER_KILOGRAM,
    LETTER_A3_BASE_FARE,
    LETTER_A3_FORMAT,
    LETTER_STANDARD_BASE_FARE,
    PARCEL_MAX_VOLUME_LITERS,
    PARCEL_RATE_PER_LITER,
)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class PostageTariff:
    """Конфигурация тарифов."""

    # Общие параметры
    grams_per_kilogram: float = GRAMS_PER_KILOGRAM
    express_multiplier: float = EXPRESS_MULTIPLIER

    # Letter
    letter_a3_format: str = LETTER_A3_FORMAT
    letter_a3_base_fare: float = LETTER_A3_BASE_FARE
    letter_standard_base_fare: float = LETTER_STANDARD_BASE_FARE

    # Parcel
    parcel_rate_per_liter: float = PARCEL_RATE_PER_LITER
    parcel_max_volume_liters: float = PARCEL_MAX_VOLUME_LITERS  # Включительно

    # Advertisement
    advertisement_rate_per_kilogram: float = ADVERTISEMENT_RATE_PER_KILOGRAM


# Тариф по умолчанию
DEFAULT_TARIFF = PostageTariff()
