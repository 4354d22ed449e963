"""Sales invoice connector."""

import logging
from typing import Iterable

from twinfield.connectors.base import ProcessXmlApiConnector
from twinfield.domain.entities import Office
from twinfield.domain.invoice import Invoice
from twinfield.wire.documents import InvoicesDocument, read_invoice_request
from twinfield.wire.mappers import map_invoice

logger = logging.getLogger(__name__)


class InvoiceApiConnector(ProcessXmlApiConnector):
    """Read and send sales invoices.

    For finer control over the request documents, build them with
    ``twinfield.wire.documents`` and pass them to ``send_document``.
    """

    def get(self, code: str, number: str, office: Office) -> Invoice:
        """Get one invoice.

        Args:
            code: Invoice type code
            number: Invoice number
            office: Office the invoice belongs to

        Returns:
            The invoice as mapped from the response

        Raises:
            NotFoundError: If the response holds no invoice
            ServiceError: If the service rejected the request
            TransportError: If the service could not be reached
        """
        request = read_invoice_request(code, number, office.code)
        logger.debug("Reading invoice %s/%s in office %s", code, number, office.code)
        response = self.send_document(request)
        return map_invoice(response)

    def send(self, invoice: Invoice) -> None:
        """Create or update a single invoice."""
        self.send_all([invoice])

    def send_all(self, invoices: Iterable[Invoice]) -> None:
        """Create or update invoices in one request.

        Raises:
            ValidationError: If the batch is empty, holds a non-Invoice or a
                line priced in another currency, before anything is sent
        """
        invoices = self.validate_batch(invoices, Invoice)

        document = InvoicesDocument()
        for invoice in invoices:
            document.add_invoice(invoice)

        logger.info("Sending %d invoice(s)", len(invoices))
        self.send_document(document)
