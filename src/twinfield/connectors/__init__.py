"""Connectors exposing read and write operations per entity family."""

from twinfield.connectors.base import ProcessXmlApiConnector
from twinfield.connectors.invoice import InvoiceApiConnector
from twinfield.connectors.transaction import TransactionApiConnector

__all__ = ["ProcessXmlApiConnector", "InvoiceApiConnector", "TransactionApiConnector"]
