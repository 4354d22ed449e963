"""Request documents sent to the ProcessXml service.

A document is built for a single request and thrown away afterwards. Write
documents carry full entity payloads, read requests carry only lookup keys.
Fields the service assigns itself are never written.
"""

from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any, Optional

from lxml import etree

from twinfield.domain.entities import Money
from twinfield.domain.errors import ValidationError, currency_mismatch
from twinfield.domain.invoice import Invoice, InvoiceLine
from twinfield.domain.transaction import Transaction
from twinfield.domain.transaction_line import TransactionLine
from twinfield.utils.amount_parser import format_amount
from twinfield.utils.date_parser import format_date


def _text(value: Any) -> str:
    """Render a field value as element text."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, date):
        return format_date(value)
    if isinstance(value, Money):
        return format_amount(value.amount)
    if isinstance(value, Decimal):
        return f"{value:f}"
    return str(value)


def _check_currency(field: str, value: Optional[Money], expected: Optional[str]) -> None:
    """Line amounts carry no currency on the wire; they must match the header."""
    if value is not None and value.currency != expected:
        raise ValidationError(currency_mismatch(field, value.currency, expected))


def _add(parent: etree._Element, tag: str, value: Any) -> Optional[etree._Element]:
    """Append ``<tag>value</tag>`` to parent, skipping unset values."""
    if value is None:
        return None
    element = etree.SubElement(parent, tag)
    element.text = _text(value)
    return element


class Document:
    """Base class for request documents."""

    def __init__(self, root_tag: str) -> None:
        self.root = etree.Element(root_tag)

    def to_bytes(self) -> bytes:
        """Serialize the document to UTF-8 encoded XML."""
        return etree.tostring(self.root, encoding="utf-8", xml_declaration=False)

    def __len__(self) -> int:
        return len(self.root)


class ReadRequest(Document):
    """``<read>`` request for a single entity.

    Args:
        type: Entity type as the service names it (``salesinvoice``, ``transaction``)
        office: Office code
        code: Invoice type or day book code
        **keys: Further lookup elements, in the order given
    """

    def __init__(self, type: str, office: str, code: str, **keys: str) -> None:
        super().__init__("read")
        _add(self.root, "type", type)
        _add(self.root, "office", office)
        _add(self.root, "code", code)
        for tag, value in keys.items():
            _add(self.root, tag, value)

    def get(self, tag: str) -> Optional[str]:
        """Return the text of a lookup element."""
        return self.root.findtext(tag)


def read_invoice_request(code: str, number: str, office_code: str) -> ReadRequest:
    """Build the read request for one sales invoice."""
    return ReadRequest("salesinvoice", office_code, code, invoicenumber=number)


def read_transaction_request(code: str, number: str, office_code: str) -> ReadRequest:
    """Build the read request for one transaction."""
    return ReadRequest("transaction", office_code, code, number=number)


class InvoicesDocument(Document):
    """``<salesinvoices>`` document holding one or more invoices."""

    def __init__(self) -> None:
        super().__init__("salesinvoices")

    def add_invoice(self, invoice: Invoice) -> "InvoicesDocument":
        if invoice.currency is not None:
            for line in invoice.lines:
                _check_currency("units_price_excl", line.units_price_excl, invoice.currency)

        element = etree.SubElement(self.root, "salesinvoice")
        header = etree.SubElement(element, "header")
        _add(header, "office", invoice.office.code)
        _add(header, "invoicetype", invoice.invoice_type)
        _add(header, "invoicenumber", invoice.invoice_number)
        _add(header, "invoicedate", invoice.invoice_date)
        _add(header, "duedate", invoice.due_date)
        _add(header, "bank", invoice.bank)
        _add(header, "invoiceaddressnumber", invoice.invoice_address_number)
        _add(header, "deliveraddressnumber", invoice.deliver_address_number)
        _add(header, "customer", invoice.customer)
        _add(header, "period", invoice.period)
        _add(header, "currency", invoice.currency)
        _add(header, "status", invoice.status)
        _add(header, "paymentmethod", invoice.payment_method)
        _add(header, "headertext", invoice.header_text)
        _add(header, "footertext", invoice.footer_text)

        lines = etree.SubElement(element, "lines")
        for line in invoice.lines:
            lines.append(invoice_line_to_element(line))
        return self


def invoice_line_to_element(line: InvoiceLine) -> etree._Element:
    element = etree.Element("line")
    if line.id is not None:
        element.set("id", line.id)
    _add(element, "article", line.article)
    _add(element, "subarticle", line.subarticle)
    _add(element, "quantity", line.quantity)
    _add(element, "units", line.units)
    _add(element, "allowdiscountorpremium", line.allow_discount_or_premium)
    _add(element, "description", line.description)
    _add(element, "unitspriceexcl", line.units_price_excl)
    _add(element, "freetext1", line.free_text1)
    _add(element, "freetext2", line.free_text2)
    _add(element, "freetext3", line.free_text3)
    _add(element, "performancetype", line.performance_type)
    _add(element, "performancedate", line.performance_date)
    _add(element, "dim1", line.dim1)
    _add(element, "vatcode", line.vat_code)
    return element


class TransactionsDocument(Document):
    """``<transactions>`` document holding one or more transactions."""

    def __init__(self) -> None:
        super().__init__("transactions")

    def add_transaction(self, transaction: Transaction) -> "TransactionsDocument":
        for line in transaction.lines:
            _check_currency("value", line.value, transaction.currency)
            _check_currency("vat_value", line.vat_value, transaction.currency)

        element = etree.SubElement(self.root, "transaction")
        element.set("destiny", transaction.destiny.value)
        header = etree.SubElement(element, "header")
        _add(header, "office", transaction.office.code)
        _add(header, "code", transaction.code)
        _add(header, "number", transaction.number)
        _add(header, "currency", transaction.currency)
        _add(header, "date", transaction.date)
        _add(header, "period", transaction.period)
        _add(header, "invoicenumber", transaction.invoice_number)

        lines = etree.SubElement(element, "lines")
        for line in transaction.lines:
            lines.append(transaction_line_to_element(line))
        return self


def transaction_line_to_element(line: TransactionLine) -> etree._Element:
    """Serialize the writable state of a transaction line.

    Match information and base/reporting amounts are owned by the service
    and are left out.
    """
    element = etree.Element("line")
    element.set("type", line.line_type.value)
    if line.id is not None:
        element.set("id", line.id)
    _add(element, "dim1", line.dim1)
    _add(element, "dim2", line.dim2)
    _add(element, "debitcredit", line.debit_credit)
    _add(element, "value", line.value)
    _add(element, "description", line.description)
    _add(element, "vatcode", line.vat_code)
    _add(element, "vatvalue", line.vat_value)
    return element
