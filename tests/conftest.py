"""Shared pytest fixtures for twinfield tests."""

from datetime import date
from decimal import Decimal
from pathlib import Path

import pytest
from lxml import etree

from twinfield.domain.entities import LineType, Money, Office, PerformanceType
from twinfield.domain.invoice import Invoice, InvoiceLine, InvoiceStatus
from twinfield.domain.transaction import Transaction
from twinfield.domain.transaction_line import TransactionLine
from twinfield.transport.base import Transport


class RecordingTransport(Transport):
    """Transport double that records documents and returns a canned response."""

    def __init__(self, response: etree._Element | None = None):
        self.documents = []
        self.response = response if response is not None else etree.Element("result")

    def send_document(self, document):
        self.documents.append(document)
        return self.response


@pytest.fixture
def recording_transport():
    """Create a transport double that records every request."""
    return RecordingTransport()


@pytest.fixture
def transport_returning():
    """Return a factory for transports answering with a fixed XML payload."""

    def factory(xml: str | bytes) -> RecordingTransport:
        if isinstance(xml, str):
            xml = xml.encode("utf-8")
        return RecordingTransport(response=etree.fromstring(xml))

    return factory


@pytest.fixture
def office():
    return Office(code="NLA000001")


@pytest.fixture
def sample_invoice(office):
    """Create an invoice with two lines and only writable fields set."""
    invoice = Invoice(
        office=office,
        invoice_type="FACTUUR",
        customer="1000",
        currency="EUR",
        status=InvoiceStatus.CONCEPT,
        invoice_date=date(2024, 1, 15),
        due_date=date(2024, 2, 14),
        period="2024/1",
        bank="BNK",
        invoice_address_number=1,
        deliver_address_number=1,
        payment_method="bank",
        header_text="Thank you for your order",
    )
    invoice.add_line(
        InvoiceLine(
            article="CONSULT",
            quantity=Decimal("2"),
            units=1,
            units_price_excl=Money(Decimal("125.00"), "EUR"),
            allow_discount_or_premium=True,
            description="Consultancy",
            performance_type=PerformanceType.SERVICES,
            performance_date=date(2024, 1, 10),
            vat_code="VH",
        )
    )
    invoice.add_line(
        InvoiceLine(
            article="TRAVEL",
            quantity=Decimal("1.5"),
            units_price_excl=Money(Decimal("40.00"), "EUR"),
            description="Travel expenses",
            free_text1="Amsterdam",
            dim1="8020",
        )
    )
    return invoice


@pytest.fixture
def sample_transaction(office):
    """Create a sales transaction with total, detail and vat lines."""
    transaction = Transaction(
        office=office,
        code="VRK",
        currency="EUR",
        date=date(2024, 1, 15),
        period="2024/01",
        invoice_number="201900011",
    )
    transaction.add_line(
        TransactionLine(
            line_type=LineType.TOTAL,
            dim1="1300",
            dim2="1000",
            value=Money(Decimal("121.00"), "EUR"),
            description="Invoice 201900011",
        )
    )
    transaction.add_line(
        TransactionLine(
            line_type=LineType.DETAIL,
            dim1="8020",
            value=Money(Decimal("-100.00"), "EUR"),
            description="Consultancy",
            vat_code="VH",
            vat_value=Money(Decimal("21.00"), "EUR"),
        )
    )
    transaction.add_line(
        TransactionLine(
            line_type=LineType.VAT,
            dim1="1530",
            value=Money(Decimal("-21.00"), "EUR"),
            vat_code="VH",
        )
    )
    return transaction


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def fixtures_dir():
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"
