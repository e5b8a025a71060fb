"""
Core domain models, tariff primitives, and contracts.

This module contains the foundational building blocks of the mail ledger
that are independent of how the mailbox is populated or displayed.
"""
