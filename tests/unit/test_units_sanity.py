"""
Sanity-тест для модуля PostageUnits и тарифной конфигурации

Проверяет:
1. Конверсию граммы → килограммы
2. Express-множитель
3. Значения тарифа по умолчанию
"""

import dataclasses

import pytest

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


class TestGramsToKilograms:
    """Тесты для grams_to_kilograms"""

    def test_basic_conversion(self) -> None:
        """200 г → 0.2"""
        assert grams_to_kilograms(200.0) == pytest.approx(0.2)
        assert grams_to_kilograms(5000.0) == pytest.approx(5.0)

    def test_zero_weight(self) -> None:
        assert grams_to_kilograms(0.0) == 0.0

    def test_negative_weight_not_rejected(self) -> None:
        """Входные данные доверенные: отрицательный вес не вызывает ошибки"""
        assert grams_to_kilograms(-500.0) == pytest.approx(-0.5)

    def test_custom_divisor(self) -> None:
        assert grams_to_kilograms(300.0, grams_per_kilogram=100.0) == pytest.approx(3.0)


class TestApplyExpress:
    """Тесты для apply_express"""

    def test_express_doubles(self) -> None:
        assert apply_express(3.5, True) == 7.0

    def test_non_express_unchanged(self) -> None:
        assert apply_express(3.5, False) == 3.5

    def test_custom_multiplier(self) -> None:
        assert apply_express(2.0, True, multiplier=3.0) == 6.0


class TestDefaultTariff:
    """Тариф по умолчанию совпадает с константами"""

    def test_constants(self) -> None:
        assert GRAMS_PER_KILOGRAM == 1000.0
        assert EXPRESS_MULTIPLIER == 2.0
        assert LETTER_A3_FORMAT == "A3"
        assert LETTER_A3_BASE_FARE == 3.5
        assert LETTER_STANDARD_BASE_FARE == 2.5
        assert PARCEL_RATE_PER_LITER == 0.25
        assert PARCEL_MAX_VOLUME_LITERS == 50.0
        assert ADVERTISEMENT_RATE_PER_KILOGRAM == 5.0

    def test_default_tariff_matches_constants(self) -> None:
        assert DEFAULT_TARIFF == PostageTariff()
        assert DEFAULT_TARIFF.letter_a3_base_fare == LETTER_A3_BASE_FARE
        assert DEFAULT_TARIFF.parcel_max_volume_liters == PARCEL_MAX_VOLUME_LITERS

    def test_tariff_immutable(self) -> None:
        """PostageTariff — frozen dataclass"""
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_TARIFF.express_multiplier = 3.0  # type: ignore
