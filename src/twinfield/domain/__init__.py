"""Domain layer for the Twinfield client."""

from twinfield.domain.entities import (
    DebitCredit,
    LineType,
    MatchStatus,
    Money,
    Office,
    PerformanceType,
    ValueFields,
)
from twinfield.domain.invoice import Invoice, InvoiceLine, InvoiceStatus, InvoiceTotals
from twinfield.domain.transaction import Destiny, Transaction
from twinfield.domain.transaction_line import TransactionLine, allowed_fields

__all__ = [
    "DebitCredit",
    "Destiny",
    "Invoice",
    "InvoiceLine",
    "InvoiceStatus",
    "InvoiceTotals",
    "LineType",
    "MatchStatus",
    "Money",
    "Office",
    "PerformanceType",
    "Transaction",
    "TransactionLine",
    "ValueFields",
    "allowed_fields",
]
