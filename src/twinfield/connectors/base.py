"""Base connector for the ProcessXml service."""

from typing import Iterable

from lxml import etree

from twinfield.domain.errors import ValidationError, empty_batch, wrong_entity_type
from twinfield.transport.base import Transport
from twinfield.wire.documents import Document


class ProcessXmlApiConnector:
    """Connector that sends request documents through a transport."""

    def __init__(self, transport: Transport):
        """Initialize connector.

        Args:
            transport: Transport used for every request
        """
        self.transport = transport

    def send_document(self, document: Document) -> etree._Element:
        """Send a request document and return the response root.

        Transport and service errors propagate unchanged.
        """
        return self.transport.send_document(document)

    @staticmethod
    def validate_batch(entities: Iterable[object], entity_type: type) -> list:
        """Check a batch before anything is sent.

        Args:
            entities: Entities to send
            entity_type: Class every entity must be an instance of

        Returns:
            The entities as a list, in input order

        Raises:
            ValidationError: If an entity has the wrong type or the batch is empty
        """
        entities = list(entities)
        for entity in entities:
            if not isinstance(entity, entity_type):
                raise ValidationError(wrong_entity_type(entity_type.__name__, entity))
        if not entities:
            raise ValidationError(empty_batch(entity_type.__name__))
        return entities
