"""
MailItem — Модели почтовых отправлений

Immutable Pydantic модели для трёх видов отправлений:
- Letter — письмо (тариф зависит от формата)
- Parcel — посылка (тариф зависит от объёма, объём ограничен сверху)
- Advertisement — рекламная рассылка (тариф только по весу)

Набор видов закрыт: MailItem — discriminated union по полю kind.
Каждый вид обязан реализовать calculate_postage и is_valid.

Невалидность — это данные, а не ошибка: пустой адрес или слишком
большой объём не вызывают исключений, а отражаются в is_valid().
"""

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from src.core.domain.tariff import DEFAULT_TARIFF, PostageTariff
from src.core.domain.units import apply_express, grams_to_kilograms


# =============================================================================
# ENUMS
# =============================================================================


class MailKind(str, Enum):
    """Вид отправления (значение совпадает с отображаемым именем)"""

    LETTER = "Letter"
    PARCEL = "Parcel"
    ADVERTISEMENT = "Advertisement"


# =============================================================================
# ВАЛИДНОСТЬ
# =============================================================================


def has_destination(destination_address: str | None) -> bool:
    """
    Общее правило валидности для всех видов: адрес назначения задан.

    Args:
        destination_address: Адрес назначения (может быть пустым)

    Returns:
        True если адрес непустой
    """
    return bool(destination_address)


# =============================================================================
# MAIL MODELS
# =============================================================================


class MailItemBase(BaseModel):
    """
    Общие атрибуты отправления.

    Сам по себе не является видом отправления и не попадает в Mailbox:
    расчёт postage определён только у конкретных видов.
    """

    weight: float = Field(..., description="Вес в граммах")
    express: bool = Field(False, description="Express-доставка")
    destination_address: str = Field("", description="Адрес назначения (может быть пустым)")

    model_config = {"frozen": True}  # Immutable


class Letter(MailItemBase):
    """Письмо. Express удваивает только базовый тариф, весовая надбавка добавляется после."""

    kind: Literal[MailKind.LETTER] = MailKind.LETTER
    format: str = Field(..., description="Формат письма (например, 'A3')")

    def base_fare(self, tariff: PostageTariff = DEFAULT_TARIFF) -> float:
        """Базовый тариф по формату (точное совпадение с учётом регистра)"""
        if self.format == tariff.letter_a3_format:
            return tariff.letter_a3_base_fare
        return tariff.letter_standard_base_fare

    def calculate_postage(self, tariff: PostageTariff = DEFAULT_TARIFF) -> float:
        """
        Расчёт postage письма.

        postage = base_fare (x2 если express) + weight / 1000

        Args:
            tariff: Тарифная конфигурация

        Returns:
            Стоимость отправки
        """
        postage = apply_express(self.base_fare(tariff), self.express, tariff.express_multiplier)
        postage += grams_to_kilograms(self.weight, tariff.grams_per_kilogram)
        return postage

    def is_valid(self, tariff: PostageTariff = DEFAULT_TARIFF) -> bool:
        """Письмо валидно, если задан адрес"""
        return has_destination(self.destination_address)


class Parcel(MailItemBase):
    """Посылка. Express удваивает всю сумму (объём + вес)."""

    kind: Literal[MailKind.PARCEL] = MailKind.PARCEL
    volume: float = Field(..., description="Объём в литрах")

    def calculate_postage(self, tariff: PostageTariff = DEFAULT_TARIFF) -> float:
        """
        Расчёт postage посылки.

        postage = (0.25 * volume + weight / 1000) (x2 если express)

        Args:
            tariff: Тарифная конфигурация

        Returns:
            Стоимость отправки
        """
        postage = tariff.parcel_rate_per_liter * self.volume + grams_to_kilograms(
            self.weight, tariff.grams_per_kilogram
        )
        return apply_express(postage, self.express, tariff.express_multiplier)

    def is_valid(self, tariff: PostageTariff = DEFAULT_TARIFF) -> bool:
        """
        Посылка валидна, если задан адрес и объём не превышает лимит.

        Граница включительная: volume == 50 валиден.
        """
        return (
            has_destination(self.destination_address)
            and self.volume <= tariff.parcel_max_volume_liters
        )


class Advertisement(MailItemBase):
    """Рекламная рассылка"""

    kind: Literal[MailKind.ADVERTISEMENT] = MailKind.ADVERTISEMENT

    def calculate_postage(self, tariff: PostageTariff = DEFAULT_TARIFF) -> float:
        """postage = 5 * weight / 1000 (x2 если express)"""
        postage = tariff.advertisement_rate_per_kilogram * grams_to_kilograms(
            self.weight, tariff.grams_per_kilogram
        )
        return apply_express(postage, self.express, tariff.express_multiplier)

    def is_valid(self, tariff: PostageTariff = DEFAULT_TARIFF) -> bool:
        """Реклама валидна, если задан адрес"""
        return has_destination(self.destination_address)


# Закрытый набор видов, дискриминатор — kind
MailItem = Annotated[Union[Letter, Parcel, Advertisement], Field(discriminator="kind")]
