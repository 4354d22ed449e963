"""Mapper functions to convert response documents into domain entities.

Responses either are the entity element itself (``<salesinvoice>``) or wrap
one or more entity elements in a list element (``<salesinvoices>``). Only the
first entity is mapped.
"""

from typing import Optional

from lxml import etree

from twinfield.domain.entities import (
    DebitCredit,
    LineType,
    MatchStatus,
    Money,
    Office,
    PerformanceType,
)
from twinfield.domain.errors import NotFoundError, entity_not_in_response
from twinfield.domain.invoice import Invoice, InvoiceLine, InvoiceStatus, InvoiceTotals
from twinfield.domain.transaction import Destiny, Transaction
from twinfield.domain.transaction_line import ServerFields, TransactionLine
from twinfield.utils.amount_parser import parse_amount, parse_rate
from twinfield.utils.date_parser import parse_date


def _find_entity(root: etree._Element, tag: str) -> etree._Element:
    if root.tag == tag:
        return root
    element = root.find(f".//{tag}")
    if element is None:
        raise NotFoundError(entity_not_in_response(tag))
    return element


def _text(element: Optional[etree._Element], tag: str) -> Optional[str]:
    # Blank means unset. Other text is kept as is, surrounding spaces included.
    if element is None:
        return None
    text = element.findtext(tag)
    if text is None or not text.strip():
        return None
    return text


def _money(element: etree._Element, tag: str, currency: Optional[str]) -> Optional[Money]:
    amount = parse_amount(element.findtext(tag))
    if amount is None:
        return None
    return Money(amount=amount, currency=currency or "")


def _int(element: etree._Element, tag: str) -> Optional[int]:
    text = _text(element, tag)
    return int(text) if text is not None else None


def _bool(element: etree._Element, tag: str) -> Optional[bool]:
    text = _text(element, tag)
    if text is None:
        return None
    return text.strip().lower() == "true"


def _enum(enum_cls, element: etree._Element, tag: str):
    text = _text(element, tag)
    return enum_cls(text.strip()) if text is not None else None


def map_invoice(root: etree._Element) -> Invoice:
    """Convert a sales invoice response into an Invoice entity.

    Raises:
        NotFoundError: If the response holds no ``<salesinvoice>`` element
    """
    element = _find_entity(root, "salesinvoice")
    header = element.find("header")
    currency = _text(header, "currency")

    invoice = Invoice(
        office=Office(code=_text(header, "office") or ""),
        invoice_type=_text(header, "invoicetype") or "",
        customer=_text(header, "customer") or "",
        currency=currency,
        invoice_number=_text(header, "invoicenumber"),
        status=_enum(InvoiceStatus, header, "status"),
        invoice_date=parse_date(_text(header, "invoicedate")),
        due_date=parse_date(_text(header, "duedate")),
        period=_text(header, "period"),
        bank=_text(header, "bank"),
        invoice_address_number=_int(header, "invoiceaddressnumber"),
        deliver_address_number=_int(header, "deliveraddressnumber"),
        payment_method=_text(header, "paymentmethod"),
        header_text=_text(header, "headertext"),
        footer_text=_text(header, "footertext"),
    )

    for line_element in element.iterfind("lines/line"):
        invoice.lines.append(invoice_line_from_element(line_element, currency))

    totals = element.find("totals")
    if totals is not None:
        invoice._apply_server_fields(
            InvoiceTotals(
                value_excl=_money(totals, "valueexcl", currency),
                value_inc=_money(totals, "valueinc", currency),
            )
        )

    return invoice


def invoice_line_from_element(element: etree._Element, currency: Optional[str]) -> InvoiceLine:
    """Convert a ``<line>`` element of a sales invoice into an InvoiceLine."""
    line = InvoiceLine(
        id=element.get("id"),
        article=_text(element, "article"),
        subarticle=_text(element, "subarticle"),
        quantity=parse_amount(element.findtext("quantity")),
        units=_int(element, "units"),
        units_price_excl=_money(element, "unitspriceexcl", currency),
        allow_discount_or_premium=_bool(element, "allowdiscountorpremium"),
        description=_text(element, "description"),
        free_text1=_text(element, "freetext1"),
        free_text2=_text(element, "freetext2"),
        free_text3=_text(element, "freetext3"),
        performance_type=_enum(PerformanceType, element, "performancetype"),
        performance_date=parse_date(_text(element, "performancedate")),
        dim1=_text(element, "dim1"),
        vat_code=_text(element, "vatcode"),
    )
    line._apply_server_fields(
        value_excl=_money(element, "valueexcl", currency),
        vat_value=_money(element, "vatvalue", currency),
        value_inc=_money(element, "valueinc", currency),
    )
    return line


def map_transaction(root: etree._Element) -> Transaction:
    """Convert a transaction response into a Transaction entity.

    Raises:
        NotFoundError: If the response holds no ``<transaction>`` element
    """
    element = _find_entity(root, "transaction")
    header = element.find("header")
    currency = _text(header, "currency")
    base_currency = _text(header, "basecurrency") or currency
    rep_currency = _text(header, "repcurrency") or base_currency

    transaction = Transaction(
        office=Office(code=_text(header, "office") or ""),
        code=_text(header, "code") or "",
        currency=currency or "",
        number=_text(header, "number"),
        date=parse_date(_text(header, "date")),
        period=_text(header, "period"),
        invoice_number=_text(header, "invoicenumber"),
        destiny=Destiny(element.get("destiny", Destiny.TEMPORARY.value)),
    )

    for line_element in element.iterfind("lines/line"):
        transaction.lines.append(
            transaction_line_from_element(line_element, currency, base_currency, rep_currency)
        )

    return transaction


def transaction_line_from_element(
    element: etree._Element,
    currency: Optional[str],
    base_currency: Optional[str] = None,
    rep_currency: Optional[str] = None,
) -> TransactionLine:
    """Convert a ``<line>`` element of a transaction into a TransactionLine.

    Base and reporting amounts default to the transaction currency when the
    response does not name them.
    """
    base_currency = base_currency or currency
    rep_currency = rep_currency or base_currency

    line = TransactionLine(
        line_type=LineType(element.get("type", LineType.DETAIL.value)),
        id=element.get("id"),
        dim1=_text(element, "dim1"),
        dim2=_text(element, "dim2"),
        description=_text(element, "description"),
        vat_code=_text(element, "vatcode"),
        vat_value=_money(element, "vatvalue", currency),
        match_status=_enum(MatchStatus, element, "matchstatus"),
        match_level=_int(element, "matchlevel"),
    )
    line.value = _money(element, "value", currency)
    debit_credit = _enum(DebitCredit, element, "debitcredit")
    if debit_credit is not None:
        line.debit_credit = debit_credit

    line._apply_server_fields(
        ServerFields(
            base_value=_money(element, "basevalue", base_currency),
            rate=parse_rate(element.findtext("rate")),
            rep_value=_money(element, "repvalue", rep_currency),
            rep_rate=parse_rate(element.findtext("reprate")),
            base_value_open=_money(element, "basevalueopen", base_currency),
        )
    )
    return line
