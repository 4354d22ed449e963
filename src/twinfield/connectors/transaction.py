"""Transaction connector."""

import logging
from typing import Iterable

from twinfield.connectors.base import ProcessXmlApiConnector
from twinfield.domain.entities import Office
from twinfield.domain.transaction import Transaction
from twinfield.wire.documents import TransactionsDocument, read_transaction_request
from twinfield.wire.mappers import map_transaction

logger = logging.getLogger(__name__)


class TransactionApiConnector(ProcessXmlApiConnector):
    """Read and send transactions of any day book."""

    def get(self, code: str, number: str, office: Office) -> Transaction:
        """Get one transaction.

        Args:
            code: Day book code
            number: Transaction number
            office: Office the transaction belongs to

        Returns:
            The transaction as mapped from the response
        """
        request = read_transaction_request(code, number, office.code)
        logger.debug("Reading transaction %s/%s in office %s", code, number, office.code)
        return map_transaction(self.send_document(request))

    def send(self, transaction: Transaction) -> None:
        self.send_all([transaction])

    def send_all(self, transactions: Iterable[Transaction]) -> None:
        """Send transactions in one request.

        Raises:
            ValidationError: If the batch is empty, holds a non-Transaction or
                a line amount in another currency than its transaction
        """
        transactions = self.validate_batch(transactions, Transaction)

        document = TransactionsDocument()
        for transaction in transactions:
            document.add_transaction(transaction)

        logger.info("Sending %d transaction(s)", len(transactions))
        self.send_document(document)
