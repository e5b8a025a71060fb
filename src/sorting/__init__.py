"""Sorting — почтовый ящик и отчёт о его содержимом.

- Mailbox: append-only агрегат отправлений, итоги по postage и валидности
- Report: сводный отчёт и текстовое отображение
"""

from .mailbox import Mailbox
from .report import (
    INVALID_COURIER_MARKER,
    MailboxReport,
    ReportEntry,
    build_entry,
    build_report,
    export_report,
    export_report_json,
    format_amount,
    format_quantity,
    render_entry,
    render_report,
    render_summary,
)

__all__ = [
    "Mailbox",
    "MailboxReport",
    "ReportEntry",
    "INVALID_COURIER_MARKER",
    "build_entry",
    "build_report",
    "export_report",
    "export_report_json",
    "format_amount",
    "format_quantity",
    "render_entry",
    "render_report",
    "render_summary",
]
