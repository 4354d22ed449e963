"""Transaction entity."""

import datetime
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from twinfield.domain.entities import Office
from twinfield.domain.transaction_line import TransactionLine


class Destiny(str, Enum):
    """Whether a sent transaction is stored as a draft or posted."""

    TEMPORARY = "temporary"
    FINAL = "final"


@dataclass
class Transaction:
    """A booking in one of the office's day books.

    ``code`` is the day book code. ``number`` is assigned by the service when
    the transaction is first stored.
    """

    office: Office
    code: str
    currency: str
    number: Optional[str] = None
    date: Optional[datetime.date] = None
    period: Optional[str] = None
    invoice_number: Optional[str] = None
    destiny: Destiny = Destiny.TEMPORARY
    lines: list[TransactionLine] = field(default_factory=list)

    def add_line(self, line: TransactionLine) -> "Transaction":
        """Append a line. Lines without an ID get the next sequence number."""
        if line.id is None:
            line.id = str(len(self.lines) + 1)
        self.lines.append(line)
        return self
