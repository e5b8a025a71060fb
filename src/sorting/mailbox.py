"""Mailbox — Почтовый ящик (агрегат отправлений)

Хранит отправления в порядке добавления (append-only, без удаления).
Невалидные отправления не отклоняются при добавлении: они хранятся,
отображаются с маркером и учитываются в count_invalid_mails().

Агрегаты:
- calculate_total_postage — сумма postage только валидных отправлений
- count_invalid_mails — число невалидных отправлений

Добавление сериализовано lock'ом, агрегаты считаются по snapshot'у.
"""

import logging
import sys
import threading
from typing import Iterator, Optional, TextIO

from src.core.domain.mail_item import MailItem
from src.core.domain.tariff import DEFAULT_TARIFF, PostageTariff
from src.sorting.report import (
    MailboxReport,
    build_report,
    export_report_json,
    render_entry,
    render_summary,
)

logger = logging.getLogger(__name__)


class Mailbox:
    """Почтовый ящик: упорядоченный append-only набор отправлений."""

    def __init__(self, tariff: PostageTariff = DEFAULT_TARIFF):
        """
        Args:
            tariff: Тарифная конфигурация для всех агрегатов ящика
        """
        self.tariff = tariff
        self._mails: list[MailItem] = []
        self._lock = threading.Lock()

    # -------------------------------------------------------------------------
    # Наполнение
    # -------------------------------------------------------------------------

    def add_mail(self, mail: MailItem) -> None:
        """
        Добавление отправления в конец ящика (без проверки валидности).

        Args:
            mail: Отправление
        """
        with self._lock:
            self._mails.append(mail)
            size = len(self._mails)

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Mail added: kind=%s valid=%s size=%d",
                mail.kind.value,
                mail.is_valid(self.tariff),
                size,
            )

    # -------------------------------------------------------------------------
    # Чтение
    # -------------------------------------------------------------------------

    @property
    def items(self) -> tuple[MailItem, ...]:
        """Snapshot отправлений в порядке добавления"""
        with self._lock:
            return tuple(self._mails)

    def __len__(self) -> int:
        with self._lock:
            return len(self._mails)

    def __iter__(self) -> Iterator[MailItem]:
        return iter(self.items)

    def valid_items(self) -> tuple[MailItem, ...]:
        """Валидные отправления в порядке добавления"""
        return tuple(mail for mail in self.items if mail.is_valid(self.tariff))

    def invalid_items(self) -> tuple[MailItem, ...]:
        """Невалидные отправления в порядке добавления"""
        return tuple(mail for mail in self.items if not mail.is_valid(self.tariff))

    # -------------------------------------------------------------------------
    # Агрегаты
    # -------------------------------------------------------------------------

    def calculate_total_postage(self) -> float:
        """
        Сумма postage валидных отправлений.

        Postage невалидных отправлений не вычисляется и не суммируется.

        Returns:
            Общая стоимость (0.0 для пустого ящика)
        """
        total_postage = 0.0
        for mail in self.items:
            if mail.is_valid(self.tariff):
                total_postage += mail.calculate_postage(self.tariff)

        logger.debug("Total postage calculated: %.6f", total_postage)
        return total_postage

    def count_invalid_mails(self) -> int:
        """Число невалидных отправлений"""
        count = len(self.invalid_items())
        logger.debug("Invalid mails counted: %d", count)
        return count

    def build_report(self) -> MailboxReport:
        """Сводный отчёт по текущему содержимому"""
        return build_report(self.items, self.tariff)

    def export_report_json(self, indent: Optional[int] = 2) -> str:
        """JSON отчёт по контракту mailbox_report"""
        return export_report_json(self.build_report(), indent=indent)

    # -------------------------------------------------------------------------
    # Отображение
    # -------------------------------------------------------------------------

    def display_contents(self, stream: Optional[TextIO] = None) -> None:
        """
        Вывод содержимого ящика (блок на каждое отправление).

        Args:
            stream: Поток вывода (default: sys.stdout)
        """
        stream = stream if stream is not None else sys.stdout
        for entry in self.build_report().entries:
            for line in render_entry(entry):
                print(line, file=stream)

    def render_summary(self) -> list[str]:
        """Две итоговые строки: общая сумма и число невалидных"""
        return render_summary(self.calculate_total_postage(), self.count_invalid_mails())
