"""
Contract Validation Module

JSON Schema контракты почтового учёта (схемы входят в пакет).
"""

from .validators import (
    MAIL_ITEM_CONTRACT,
    MAILBOX_REPORT_CONTRACT,
    Contract,
    load_schema,
    validate_mail_item,
    validate_mailbox_report,
)

__all__ = [
    "Contract",
    "MAIL_ITEM_CONTRACT",
    "MAILBOX_REPORT_CONTRACT",
    "load_schema",
    "validate_mail_item",
    "validate_mailbox_report",
]
