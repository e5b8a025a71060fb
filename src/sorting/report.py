"""Report — Отчёт о содержимом почтового ящика

Формат текстового отчёта (для каждого отправления в порядке добавления):

    <Kind>
    Weight: <weight> grams
    Express: yes|no
    Destination: <destination_address>
    Price: $<postage>
    Format: <format>              (только Letter)
    Volume: <volume> liters       (только Parcel)
    <пустая строка>

Для невалидного отправления выводится только вид и маркер "(Invalid courier)".
После всех отправлений — две итоговые строки (общая сумма и число невалидных).

Форматирование чисел:
- вес и объём — без потери точности, без хвостового ".0" (200, 30, 12.3456789)
- денежные суммы — два знака после запятой (7.20, 47.20)
"""

import json
from typing import Any, Dict, Iterable, Optional

from pydantic import BaseModel, Field

from src.core.contracts.validators import validate_mailbox_report
from src.core.domain.mail_item import MailItem, MailKind
from src.core.domain.tariff import DEFAULT_TARIFF, PostageTariff


INVALID_COURIER_MARKER = "(Invalid courier)"


# =============================================================================
# MODELS
# =============================================================================


class ReportEntry(BaseModel):
    """Строка отчёта для одного отправления.

    Для невалидного отправления заполнены только kind и is_valid:
    postage невалидных отправлений в отчёт не попадает.
    """

    kind: MailKind = Field(..., description="Вид отправления")
    is_valid: bool = Field(..., description="Результат проверки валидности")

    weight: Optional[float] = Field(None, description="Вес в граммах")
    express: Optional[bool] = Field(None, description="Express-доставка")
    destination_address: Optional[str] = Field(None, description="Адрес назначения")
    postage: Optional[float] = Field(None, description="Стоимость отправки")

    # Поля конкретных видов
    format: Optional[str] = Field(None, description="Формат (только Letter)")
    volume: Optional[float] = Field(None, description="Объём в литрах (только Parcel)")

    model_config = {"frozen": True}


class MailboxReport(BaseModel):
    """Сводный отчёт по почтовому ящику."""

    entries: tuple[ReportEntry, ...] = Field(default=(), description="Отправления в порядке добавления")
    total_postage: float = Field(..., description="Сумма postage валидных отправлений")
    invalid_count: int = Field(..., ge=0, description="Число невалидных отправлений")

    model_config = {"frozen": True}


# =============================================================================
# BUILD
# =============================================================================


def build_entry(item: MailItem, tariff: PostageTariff = DEFAULT_TARIFF) -> ReportEntry:
    """
    Построение строки отчёта для отправления.

    Args:
        item: Отправление
        tariff: Тарифная конфигурация

    Returns:
        ReportEntry (для невалидного — только kind и is_valid)
    """
    if not item.is_valid(tariff):
        return ReportEntry(kind=item.kind, is_valid=False)

    # format / volume есть только у соответствующих видов
    variant_fields = item.model_dump(include={"format", "volume"})

    return ReportEntry(
        kind=item.kind,
        is_valid=True,
        weight=item.weight,
        express=item.express,
        destination_address=item.destination_address,
        postage=item.calculate_postage(tariff),
        **variant_fields,
    )


def build_report(items: Iterable[MailItem], tariff: PostageTariff = DEFAULT_TARIFF) -> MailboxReport:
    """
    Построение сводного отчёта.

    Args:
        items: Отправления в порядке добавления
        tariff: Тарифная конфигурация

    Returns:
        MailboxReport с итогами
    """
    entries = tuple(build_entry(item, tariff) for item in items)
    total_postage = sum(entry.postage for entry in entries if entry.is_valid)
    invalid_count = sum(1 for entry in entries if not entry.is_valid)

    return MailboxReport(
        entries=entries,
        total_postage=float(total_postage),
        invalid_count=invalid_count,
    )


# =============================================================================
# EXPORT
# =============================================================================


def export_report(report: MailboxReport) -> Dict[str, Any]:
    """
    JSON форма отчёта, проверенная по контракту mailbox_report.

    Raises:
        ValidationError: Если отчёт нарушает контракт
    """
    return validate_mailbox_report(report.model_dump(mode="json"))


def export_report_json(report: MailboxReport, indent: Optional[int] = 2) -> str:
    """Сериализованный JSON отчёта (после проверки контракта)"""
    return json.dumps(export_report(report), indent=indent, ensure_ascii=False)


# =============================================================================
# RENDER
# =============================================================================


def format_amount(value: float) -> str:
    """Денежная сумма: два знака после запятой"""
    return f"{value:.2f}"


def format_quantity(value: float) -> str:
    """Вес / объём: repr без хвостового ".0" (значение парсится обратно без потерь)"""
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


def _variant_lines(entry: ReportEntry) -> list[str]:
    """Строки, специфичные для вида отправления.

    Единственная точка диспетчеризации по MailKind при отображении:
    новый вид без ветки здесь приводит к ValueError.
    """
    if entry.kind == MailKind.LETTER:
        return [f"Format: {entry.format}"]

    elif entry.kind == MailKind.PARCEL:
        return [f"Volume: {format_quantity(entry.volume)} liters"]

    elif entry.kind == MailKind.ADVERTISEMENT:
        return []

    raise ValueError(f"Unknown mail kind: {entry.kind!r}")


def render_entry(entry: ReportEntry) -> list[str]:
    """
    Текстовый блок для одного отправления (включая пустую строку-разделитель).

    Args:
        entry: Строка отчёта

    Returns:
        Список строк без символов перевода строки
    """
    lines = [entry.kind.value]

    if not entry.is_valid:
        lines.append(INVALID_COURIER_MARKER)
    else:
        lines.append(f"Weight: {format_quantity(entry.weight)} grams")
        lines.append(f"Express: {'yes' if entry.express else 'no'}")
        lines.append(f"Destination: {entry.destination_address}")
        lines.append(f"Price: ${format_amount(entry.postage)}")
        lines.extend(_variant_lines(entry))

    lines.append("")
    return lines


def render_summary(total_postage: float, invalid_count: int) -> list[str]:
    """Две итоговые строки отчёта"""
    return [
        f"Total amount of postage: ${format_amount(total_postage)}",
        f"Number of invalid mails: {invalid_count}",
    ]


def render_report(report: MailboxReport) -> str:
    """
    Полный текстовый отчёт: блоки отправлений и итоговые строки.

    Args:
        report: Сводный отчёт

    Returns:
        Текст отчёта (заканчивается переводом строки)
    """
    lines: list[str] = []
    for entry in report.entries:
        lines.extend(render_entry(entry))
    lines.extend(render_summary(report.total_postage, report.invalid_count))
    return "\n".join(lines) + "\n"
