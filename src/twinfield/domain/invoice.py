"""Sales invoice entity."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional

from twinfield.domain.entities import Money, Office, PerformanceType


class InvoiceStatus(str, Enum):
    CONCEPT = "concept"
    FINAL = "final"


@dataclass(frozen=True)
class InvoiceTotals:
    """Invoice totals. Calculated by the service, never sent."""

    value_excl: Optional[Money] = None
    value_inc: Optional[Money] = None


@dataclass
class InvoiceLine:
    """Sales invoice line.

    ``value_excl``, ``vat_value`` and ``value_inc`` are calculated by the
    service. They are read-only and only filled in by the response mappers.
    """

    id: Optional[str] = None
    article: Optional[str] = None
    subarticle: Optional[str] = None
    quantity: Optional[Decimal] = None
    units: Optional[int] = None
    units_price_excl: Optional[Money] = None
    allow_discount_or_premium: Optional[bool] = None
    description: Optional[str] = None
    free_text1: Optional[str] = None
    free_text2: Optional[str] = None
    free_text3: Optional[str] = None
    performance_type: Optional[PerformanceType] = None
    performance_date: Optional[date] = None
    dim1: Optional[str] = None
    vat_code: Optional[str] = None
    _value_excl: Optional[Money] = field(default=None, init=False, compare=False, repr=False)
    _vat_value: Optional[Money] = field(default=None, init=False, compare=False, repr=False)
    _value_inc: Optional[Money] = field(default=None, init=False, compare=False, repr=False)

    @property
    def value_excl(self) -> Optional[Money]:
        return self._value_excl

    @property
    def vat_value(self) -> Optional[Money]:
        return self._vat_value

    @property
    def value_inc(self) -> Optional[Money]:
        return self._value_inc

    def _apply_server_fields(
        self,
        value_excl: Optional[Money] = None,
        vat_value: Optional[Money] = None,
        value_inc: Optional[Money] = None,
    ) -> None:
        # Only called by the response mappers.
        self._value_excl = value_excl
        self._vat_value = vat_value
        self._value_inc = value_inc


@dataclass
class Invoice:
    """Twinfield sales invoice.

    ``invoice_number`` is assigned by the service on the first successful
    send. ``totals`` is only present on invoices read from the service.
    """

    office: Office
    invoice_type: str
    customer: str
    currency: Optional[str] = None
    invoice_number: Optional[str] = None
    status: Optional[InvoiceStatus] = None
    invoice_date: Optional[date] = None
    due_date: Optional[date] = None
    period: Optional[str] = None
    bank: Optional[str] = None
    invoice_address_number: Optional[int] = None
    deliver_address_number: Optional[int] = None
    payment_method: Optional[str] = None
    header_text: Optional[str] = None
    footer_text: Optional[str] = None
    lines: list[InvoiceLine] = field(default_factory=list)
    _totals: Optional[InvoiceTotals] = field(default=None, init=False, compare=False, repr=False)

    @property
    def totals(self) -> Optional[InvoiceTotals]:
        return self._totals

    def _apply_server_fields(self, totals: Optional[InvoiceTotals]) -> None:
        # Only called by the response mappers.
        self._totals = totals

    def add_line(self, line: InvoiceLine) -> "Invoice":
        """Append a line. Lines without an ID get the next sequence number."""
        if line.id is None:
            line.id = str(len(self.lines) + 1)
        self.lines.append(line)
        return self
