"""Value objects and enumerations shared by the Twinfield entities.

These are pure data classes, independent of the XML wire format. The wire
layer converts them to and from elements, so the entities stay stable when
the service changes its document layout.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Optional

from twinfield.domain.errors import ValidationError, non_finite_amount


class LineType(str, Enum):
    """Transaction line type. Decides which optional fields a line accepts."""

    TOTAL = "total"
    DETAIL = "detail"
    VAT = "vat"


class MatchStatus(str, Enum):
    """Payment status of a transaction line. Set by the service."""

    AVAILABLE = "available"
    MATCHED = "matched"
    PROPOSED = "proposed"
    NOTMATCHABLE = "notmatchable"


class DebitCredit(str, Enum):
    DEBIT = "debit"
    CREDIT = "credit"


class PerformanceType(str, Enum):
    SERVICES = "services"
    GOODS = "goods"


@dataclass(frozen=True)
class Money:
    """Amount in a given currency."""

    amount: Decimal
    currency: str

    def __post_init__(self) -> None:
        if not self.amount.is_finite():
            raise ValidationError(non_finite_amount(self.amount))

    def is_negative(self) -> bool:
        return self.amount < 0

    def absolute(self) -> "Money":
        return Money(amount=abs(self.amount), currency=self.currency)

    def negate(self) -> "Money":
        return Money(amount=-self.amount, currency=self.currency)


@dataclass(frozen=True)
class Office:
    """Reference to a Twinfield office (administration)."""

    code: str
    name: Optional[str] = None


class ValueFields:
    """Value and debit/credit indicator of a transaction line.

    The service expects an absolute amount plus a debit/credit flag, while
    callers usually think in signed amounts. Setting a value records the sign
    in ``debit_credit`` and keeps the absolute amount.
    """

    def __init__(
        self, value: Optional[Money] = None, debit_credit: Optional[DebitCredit] = None
    ) -> None:
        self._value: Optional[Money] = None
        self._debit_credit: Optional[DebitCredit] = debit_credit
        if value is not None:
            self.set_value(value)
            if debit_credit is not None:
                self._debit_credit = debit_credit

    @property
    def value(self) -> Optional[Money]:
        return self._value

    @property
    def debit_credit(self) -> Optional[DebitCredit]:
        return self._debit_credit

    @debit_credit.setter
    def debit_credit(self, debit_credit: Optional[DebitCredit]) -> None:
        self._debit_credit = debit_credit

    def set_value(self, value: Optional[Money]) -> None:
        """Store ``value`` as an absolute amount plus debit/credit indicator."""
        if value is None:
            self._value = None
            self._debit_credit = None
            return

        self._debit_credit = DebitCredit.CREDIT if value.is_negative() else DebitCredit.DEBIT
        self._value = value.absolute()

    @property
    def signed_value(self) -> Optional[Money]:
        """Value with credit amounts negated."""
        if self._value is None:
            return None
        if self._debit_credit == DebitCredit.CREDIT:
            return self._value.negate()
        return self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValueFields):
            return NotImplemented
        return self._value == other._value and self._debit_credit == other._debit_credit

    def __repr__(self) -> str:
        return f"ValueFields(value={self._value!r}, debit_credit={self._debit_credit!r})"
