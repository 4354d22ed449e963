"""Abstract transport interface."""

from abc import ABC, abstractmethod

from lxml import etree

from twinfield.domain.errors import ServiceError
from twinfield.wire.documents import Document


class Transport(ABC):
    """Sends a request document to the service and returns its response."""

    @abstractmethod
    def send_document(self, document: Document) -> etree._Element:
        """Send ``document`` and return the root element of the response.

        Raises:
            TransportError: If the service could not be reached or answered
                with something that is not a response document
            ServiceError: If the service rejected the request
        """
        pass


def collect_errors(root: etree._Element) -> list[str]:
    """Return the error messages of a response document.

    The service marks rejected elements with ``msgtype="error"`` and a
    ``msg`` attribute, and flags the enclosing entity with ``result="0"``.
    """
    messages = []
    for element in root.iter():
        if element.get("msgtype") == "error":
            message = element.get("msg")
            if message:
                messages.append(message)
    return messages


def assert_successful(root: etree._Element) -> None:
    """Raise ServiceError if any element of the response carries ``result="0"``."""
    failed = any(element.get("result") == "0" for element in root.iter())
    if failed:
        raise ServiceError(collect_errors(root))
