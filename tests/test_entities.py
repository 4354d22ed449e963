"""Tests for domain entities and value objects."""

from dataclasses import FrozenInstanceError
from datetime import date
from decimal import Decimal

import pytest

from twinfield.domain.entities import DebitCredit, LineType, Money, Office, ValueFields
from twinfield.domain.errors import ValidationError
from twinfield.domain.invoice import Invoice, InvoiceLine, InvoiceTotals
from twinfield.domain.transaction import Destiny, Transaction
from twinfield.domain.transaction_line import TransactionLine


class TestMoney:
    """Tests for the Money value object."""

    def test_immutability(self):
        money = Money(Decimal("10.00"), "EUR")
        with pytest.raises(FrozenInstanceError):
            money.amount = Decimal("1")

    def test_equality_ignores_trailing_zeros(self):
        assert Money(Decimal("10"), "EUR") == Money(Decimal("10.00"), "EUR")
        assert Money(Decimal("10"), "EUR") != Money(Decimal("10"), "USD")

    def test_absolute_and_negate(self):
        money = Money(Decimal("-5.50"), "EUR")
        assert money.is_negative()
        assert money.absolute() == Money(Decimal("5.50"), "EUR")
        assert money.negate() == Money(Decimal("5.50"), "EUR")

    @pytest.mark.parametrize("amount", ["NaN", "Infinity", "-Infinity", "sNaN"])
    def test_non_finite_amount_rejected(self, amount):
        with pytest.raises(ValidationError, match="finite"):
            Money(Decimal(amount), "EUR")

    def test_line_value_cannot_be_nan(self):
        with pytest.raises(ValidationError):
            TransactionLine(line_type=LineType.DETAIL, value=Money(Decimal("NaN"), "EUR"))


class TestOffice:
    def test_equality_by_value(self):
        assert Office("NLA000001") == Office(code="NLA000001")
        assert Office("NLA000001") != Office("NLA000002")


class TestValueFields:
    """Tests for the value/debit-credit group."""

    def test_set_value_records_sign(self):
        fields = ValueFields()
        fields.set_value(Money(Decimal("-12.50"), "EUR"))
        assert fields.value == Money(Decimal("12.50"), "EUR")
        assert fields.debit_credit == DebitCredit.CREDIT
        assert fields.signed_value == Money(Decimal("-12.50"), "EUR")

    def test_explicit_debit_credit_wins(self):
        fields = ValueFields(Money(Decimal("12.50"), "EUR"), DebitCredit.CREDIT)
        assert fields.debit_credit == DebitCredit.CREDIT
        assert fields.signed_value == Money(Decimal("-12.50"), "EUR")

    def test_equality(self):
        a = ValueFields(Money(Decimal("1"), "EUR"))
        b = ValueFields(Money(Decimal("1.00"), "EUR"))
        assert a == b
        b.debit_credit = DebitCredit.CREDIT
        assert a != b


class TestInvoice:
    """Tests for the Invoice entity."""

    def test_add_line_assigns_ids(self, office):
        invoice = Invoice(office=office, invoice_type="FACTUUR", customer="1000")
        invoice.add_line(InvoiceLine(article="A")).add_line(InvoiceLine(article="B", id="7"))

        assert [line.id for line in invoice.lines] == ["1", "7"]

    def test_equality_ignores_totals(self, office):
        a = Invoice(office=office, invoice_type="FACTUUR", customer="1000")
        b = Invoice(office=office, invoice_type="FACTUUR", customer="1000")
        b._apply_server_fields(InvoiceTotals(value_inc=Money(Decimal("121"), "EUR")))
        assert a == b
        assert b.totals.value_inc == Money(Decimal("121"), "EUR")

    def test_line_equality_ignores_calculated_values(self):
        a = InvoiceLine(id="1", article="A")
        b = InvoiceLine(id="1", article="A")
        b._apply_server_fields(value_inc=Money(Decimal("121"), "EUR"))
        assert a == b
        assert b.value_inc == Money(Decimal("121"), "EUR")

    def test_calculated_values_are_read_only(self):
        line = InvoiceLine(article="A")
        with pytest.raises(AttributeError):
            line.value_inc = Money(Decimal("121"), "EUR")
        with pytest.raises(TypeError):
            InvoiceLine(article="A", vat_value=Money(Decimal("21"), "EUR"))

    def test_totals_are_read_only(self, office):
        invoice = Invoice(office=office, invoice_type="FACTUUR", customer="1000")
        with pytest.raises(AttributeError):
            invoice.totals = InvoiceTotals()
        with pytest.raises(TypeError):
            Invoice(office=office, invoice_type="FACTUUR", customer="1000", totals=InvoiceTotals())

    def test_new_invoice_has_no_number(self, office):
        invoice = Invoice(office=office, invoice_type="FACTUUR", customer="1000")
        assert invoice.invoice_number is None
        assert invoice.totals is None


class TestTransaction:
    def test_defaults(self, office):
        transaction = Transaction(office=office, code="MEMO", currency="EUR", date=date(2024, 3, 1))
        assert transaction.destiny == Destiny.TEMPORARY
        assert transaction.number is None
        assert transaction.lines == []

    def test_add_line_assigns_ids(self, office):
        transaction = Transaction(office=office, code="MEMO", currency="EUR")
        transaction.add_line(TransactionLine()).add_line(TransactionLine())
        assert [line.id for line in transaction.lines] == ["1", "2"]
