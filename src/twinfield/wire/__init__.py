"""XML wire format: request documents and response mappers."""

from twinfield.wire.documents import (
    Document,
    InvoicesDocument,
    ReadRequest,
    TransactionsDocument,
    read_invoice_request,
    read_transaction_request,
)
from twinfield.wire.mappers import map_invoice, map_transaction

__all__ = [
    "Document",
    "InvoicesDocument",
    "ReadRequest",
    "TransactionsDocument",
    "read_invoice_request",
    "read_transaction_request",
    "map_invoice",
    "map_transaction",
]
