"""Demo — точка входа: демонстрационный почтовый ящик и отчёт в stdout

По умолчанию печатает текстовый отчёт (блоки отправлений + итоги).
С флагом --json печатает JSON отчёт, проверенный по контракту mailbox_report.
Логи идут в stderr, отчёт — в stdout.
"""

import argparse
import logging
from typing import Optional, Sequence

from src.core.domain.mail_item import Advertisement, Letter, Parcel
from src.sorting.mailbox import Mailbox

logger = logging.getLogger(__name__)


def build_sample_mailbox() -> Mailbox:
    """Демонстрационный ящик: 6 отправлений, 3 из них невалидны."""
    mailbox = Mailbox()
    mailbox.add_mail(
        Letter(weight=200.0, express=True, destination_address="Chemin des Acacias 28, 1009 Pully", format="A3")
    )
    mailbox.add_mail(Letter(weight=800.0, express=False, destination_address="", format="B4"))
    mailbox.add_mail(
        Advertisement(weight=1500.0, express=True, destination_address="Les Moilles 13A, 1913 Saillon")
    )
    mailbox.add_mail(Advertisement(weight=3000.0, express=False, destination_address=""))
    mailbox.add_mail(
        Parcel(weight=5000.0, express=True, destination_address="Grand rue 18, 1950 Sion", volume=30.0)
    )
    # volume > 50 — невалидна независимо от адреса
    mailbox.add_mail(
        Parcel(weight=3000.0, express=True, destination_address="Chemin des fleurs 48, 2800 Delemont", volume=70.0)
    )
    return mailbox


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Построение демонстрационного ящика и печать отчёта."""
    parser = argparse.ArgumentParser(description="Mail sorting ledger demo")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the report as JSON (validated against the mailbox_report contract)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    mailbox = build_sample_mailbox()
    logger.info("=== Mail Sorting Ledger === mails=%d", len(mailbox))

    if args.json:
        print(mailbox.export_report_json())
    else:
        mailbox.display_contents()
        for line in mailbox.render_summary():
            print(line)

    logger.info("Report done: invalid=%d", mailbox.count_invalid_mails())


if __name__ == "__main__":
    main()
