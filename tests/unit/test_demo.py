"""End-to-end тест демонстрационного почтового ящика"""

import json

import pytest

from src.core.contracts import validate_mailbox_report
from src.core.domain import Advertisement, Letter, Parcel
from src.sorting.demo import build_sample_mailbox, main


class TestSampleMailbox:
    """Шесть демонстрационных отправлений"""

    def test_composition(self) -> None:
        mailbox = build_sample_mailbox()
        assert [type(m) for m in mailbox] == [Letter, Letter, Advertisement, Advertisement, Parcel, Parcel]

    def test_totals(self) -> None:
        """7.2 (Letter A3) + 15.0 (Advertisement express) + 25.0 (Parcel 30 л)"""
        mailbox = build_sample_mailbox()
        assert mailbox.calculate_total_postage() == pytest.approx(47.2)
        assert mailbox.count_invalid_mails() == 3

    def test_invalid_items(self) -> None:
        invalid = build_sample_mailbox().invalid_items()
        assert [type(m) for m in invalid] == [Letter, Advertisement, Parcel]
        assert invalid[2].volume == 70.0


class TestMain:
    """Вывод в stdout"""

    def test_main_output(self, capsys) -> None:
        main([])
        lines = capsys.readouterr().out.splitlines()

        assert lines[0] == "Letter"
        assert lines[7:10] == ["Letter", "(Invalid courier)", ""]
        assert lines.count("(Invalid courier)") == 3
        assert float(lines[-2].split("$")[1]) == pytest.approx(47.2)
        assert lines[-1] == "Number of invalid mails: 3"

    def test_main_json_output(self, capsys) -> None:
        """--json: отчёт в JSON по контракту mailbox_report"""
        main(["--json"])
        data = json.loads(capsys.readouterr().out)

        validate_mailbox_report(data)
        assert data["total_postage"] == pytest.approx(47.2)
        assert data["invalid_count"] == 3
        assert [e["kind"] for e in data["entries"]] == [
            "Letter", "Letter", "Advertisement", "Advertisement", "Parcel", "Parcel",
        ]
