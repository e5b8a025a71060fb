"""
PostageUnits — Единицы и тарифные константы почтового учёта

Единственный допустимый способ преобразований между:
- weight (граммы) → надбавка за вес (граммы / 1000)
- базовый тариф → тариф с учётом express

Надбавка за вес — линейная: weight / 1000 добавляется к цене напрямую.
Это историческое соглашение тарифа, а не цена за килограмм.
"""

from typing import Final


# =============================================================================
# ТАРИФНЫЕ КОНСТАНТЫ
# =============================================================================
# Граммов в килограмме (делитель весовой надбавки)
GRAMS_PER_KILOGRAM: Final[float] = 1000.0

# Множитель express-доставки
EXPRESS_MULTIPLIER: Final[float] = 2.0

# Letter: формат с повышенным тарифом (точное совпадение, с учётом регистра)
LETTER_A3_FORMAT: Final[str] = "A3"
LETTER_A3_BASE_FARE: Final[float] = 3.5
LETTER_STANDARD_BASE_FARE: Final[float] = 2.5

# Parcel: тариф за литр и верхняя граница объёма (включительно)
PARCEL_RATE_PER_LITER: Final[float] = 0.25
PARCEL_MAX_VOLUME_LITERS: Final[float] = 50.0

# Advertisement: тариф за килограмм
ADVERTISEMENT_RATE_PER_KILOGRAM: Final[float] = 5.0


# =============================================================================
# БАЗОВЫЕ КОНВЕРТЕРЫ
# =============================================================================


def grams_to_kilograms(weight_grams: float, grams_per_kilogram: float = GRAMS_PER_KILOGRAM) -> float:
    """
    Конверсия: граммы → килограммы.

    Отрицательный вес не отклоняется: входные данные считаются доверенными.

    Args:
        weight_grams: Вес в граммах
        grams_per_kilogram: Делитель (default: GRAMS_PER_KILOGRAM)

    Returns:
        Вес в килограммах
    """
    return weight_grams / grams_per_kilogram


def apply_express(amount: float, express: bool, multiplier: float = EXPRESS_MULTIPLIER) -> float:
    """
    Применение express-множителя к сумме.

    Args:
        amount: Сумма до express
        express: Флаг express-доставки
        multiplier: Множитель (default: EXPRESS_MULTIPLIER)

    Returns:
        amount * multiplier если express, иначе amount
    """
    return amount * multiplier if express else amount
