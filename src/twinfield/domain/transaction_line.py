"""Transaction line entity.

A transaction line carries a line type that decides which of its optional
fields may be set. Conditional fields are checked when they are assigned, so
a misuse fails at the assignment instead of as an opaque rejection from the
service.
"""

from dataclasses import dataclass
from typing import Any, Optional

from twinfield.domain.entities import (
    DebitCredit,
    LineType,
    MatchStatus,
    Money,
    ValueFields,
)
from twinfield.domain.errors import (
    InvalidFieldForLineType,
    ValidationError,
    description_too_long,
)

DESCRIPTION_MAX_LENGTH = 40

VAT_CODE = "vat_code"
VAT_VALUE = "vat_value"

_ALLOWED_FIELDS: dict[LineType, frozenset[str]] = {
    LineType.TOTAL: frozenset(),
    LineType.DETAIL: frozenset({VAT_CODE, VAT_VALUE}),
    LineType.VAT: frozenset({VAT_CODE}),
}


def allowed_fields(line_type: LineType) -> frozenset[str]:
    """Return the conditional fields that may be set for ``line_type``.

    Args:
        line_type: Line type of the transaction line

    Returns:
        Names of the conditional fields the line type accepts
    """
    return _ALLOWED_FIELDS[LineType(line_type)]


@dataclass(frozen=True)
class ServerFields:
    """Fields only the service assigns. Never sent in a request."""

    base_value: Optional[Money] = None
    rate: Optional[float] = None
    rep_value: Optional[Money] = None
    rep_rate: Optional[float] = None
    base_value_open: Optional[Money] = None


class TransactionLine:
    """A single line of a Twinfield transaction.

    The meaning of ``dim1`` and ``dim2`` depends on the transaction type that
    owns the line (general ledger account, customer, cost center, ...).
    """

    def __init__(
        self,
        line_type: LineType = LineType.DETAIL,
        id: Optional[str] = None,
        dim1: Optional[str] = None,
        dim2: Optional[str] = None,
        value: Optional[Money] = None,
        description: Optional[str] = None,
        vat_code: Optional[str] = None,
        vat_value: Optional[Money] = None,
        match_status: Optional[MatchStatus] = None,
        match_level: Optional[int] = None,
    ) -> None:
        self._line_type = LineType(line_type)
        self.id = id
        self.dim1 = dim1
        self.dim2 = dim2
        self._values = ValueFields()
        self._values.set_value(value)
        self._description: Optional[str] = None
        self.description = description
        self._vat_code: Optional[str] = None
        self._vat_value: Optional[Money] = None
        self.vat_code = vat_code
        self.vat_value = vat_value
        self.match_status = match_status
        self.match_level = match_level
        self._server = ServerFields()

    @property
    def line_type(self) -> LineType:
        return self._line_type

    @line_type.setter
    def line_type(self, line_type: LineType) -> None:
        """Change the line type, re-checking conditional fields already set."""
        line_type = LineType(line_type)
        allowed = allowed_fields(line_type)
        if self._vat_code is not None and VAT_CODE not in allowed:
            raise InvalidFieldForLineType(VAT_CODE, line_type)
        if self._vat_value is not None and VAT_VALUE not in allowed:
            raise InvalidFieldForLineType(VAT_VALUE, line_type)
        self._line_type = line_type

    @property
    def description(self) -> Optional[str]:
        return self._description

    @description.setter
    def description(self, description: Optional[str]) -> None:
        if description is not None and len(description) > DESCRIPTION_MAX_LENGTH:
            raise ValidationError(description_too_long(DESCRIPTION_MAX_LENGTH, len(description)))
        self._description = description

    # Value fields
    @property
    def value(self) -> Optional[Money]:
        """Absolute amount in the transaction currency."""
        return self._values.value

    @value.setter
    def value(self, value: Optional[Money]) -> None:
        self._values.set_value(value)

    @property
    def debit_credit(self) -> Optional[DebitCredit]:
        return self._values.debit_credit

    @debit_credit.setter
    def debit_credit(self, debit_credit: Optional[DebitCredit]) -> None:
        self._values.debit_credit = debit_credit

    @property
    def signed_value(self) -> Optional[Money]:
        return self._values.signed_value

    # Conditional fields
    @property
    def vat_code(self) -> Optional[str]:
        """VAT code. Only for detail and vat lines."""
        return self._vat_code

    @vat_code.setter
    def vat_code(self, vat_code: Optional[str]) -> None:
        self._check_allowed(VAT_CODE, vat_code)
        self._vat_code = vat_code

    @property
    def vat_value(self) -> Optional[Money]:
        """VAT amount in the transaction currency. Only for detail lines."""
        return self._vat_value

    @vat_value.setter
    def vat_value(self, vat_value: Optional[Money]) -> None:
        self._check_allowed(VAT_VALUE, vat_value)
        self._vat_value = vat_value

    def _check_allowed(self, field: str, new_value: Any) -> None:
        if new_value is not None and field not in allowed_fields(self._line_type):
            raise InvalidFieldForLineType(field, self._line_type)

    # Read-only fields, assigned by the service
    @property
    def base_value(self) -> Optional[Money]:
        """Amount in the base currency."""
        return self._server.base_value

    @property
    def rate(self) -> Optional[float]:
        """Exchange rate used to calculate the base amount."""
        return self._server.rate

    @property
    def rep_value(self) -> Optional[Money]:
        """Amount in the reporting currency."""
        return self._server.rep_value

    @property
    def rep_rate(self) -> Optional[float]:
        """Exchange rate used to calculate the reporting amount."""
        return self._server.rep_rate

    @property
    def base_value_open(self) -> Optional[Money]:
        return self._server.base_value_open

    def _apply_server_fields(self, server_fields: ServerFields) -> None:
        # Only called by the response mappers.
        self._server = server_fields

    def writable_fields(self) -> dict[str, Any]:
        """Return the state a client may set and send."""
        return {
            "line_type": self._line_type,
            "id": self.id,
            "dim1": self.dim1,
            "dim2": self.dim2,
            "value": self.value,
            "debit_credit": self.debit_credit,
            "description": self._description,
            "vat_code": self._vat_code,
            "vat_value": self._vat_value,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TransactionLine):
            return NotImplemented
        return (
            self.writable_fields() == other.writable_fields()
            and self.match_status == other.match_status
            and self.match_level == other.match_level
            and self._server == other._server
        )

    def __repr__(self) -> str:
        return (
            f"TransactionLine(id={self.id!r}, line_type={self._line_type.value!r}, "
            f"dim1={self.dim1!r}, value={self.signed_value!r})"
        )
