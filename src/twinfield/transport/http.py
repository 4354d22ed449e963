"""HTTP transport for the ProcessXml web service."""

import logging
import re
from typing import Optional

import requests
from lxml import etree

from twinfield.domain.errors import ServiceError, TransportError
from twinfield.transport.base import Transport, assert_successful
from twinfield.wire.documents import Document

logger = logging.getLogger(__name__)

SOAP_NS = "http://schemas.xmlsoap.org/soap/envelope/"
TWINFIELD_NS = "http://www.twinfield.com/"
PROCESS_XML_PATH = "/webservices/processxml.asmx"
SOAP_ACTION = "http://www.twinfield.com/ProcessXmlString"

# The inner document is returned as text; its declaration may name an encoding
# that no longer applies.
_XML_DECLARATION = re.compile(r"^\s*<\?xml[^>]*\?>")

_parser = etree.XMLParser(resolve_entities=False, no_network=True)


class HttpTransport(Transport):
    """Sends documents to ``ProcessXmlString`` over HTTPS.

    Args:
        cluster: Base URL of the cluster the organisation lives on,
            e.g. ``https://accounting.twinfield.com``
        access_token: OAuth2 access token
        company_code: Office code sent in the session header
        session: requests session to reuse, mainly for tests
        timeout: Request timeout in seconds
    """

    def __init__(
        self,
        cluster: str,
        access_token: str,
        company_code: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 30,
    ) -> None:
        self.endpoint = cluster.rstrip("/") + PROCESS_XML_PATH
        self.access_token = access_token
        self.company_code = company_code
        self.session = session or requests.Session()
        self.timeout = timeout

    def build_envelope(self, document: Document) -> bytes:
        """Wrap ``document`` in a SOAP envelope with the authentication header."""
        envelope = etree.Element(f"{{{SOAP_NS}}}Envelope", nsmap={"soap": SOAP_NS})
        soap_header = etree.SubElement(envelope, f"{{{SOAP_NS}}}Header")
        header = etree.SubElement(soap_header, f"{{{TWINFIELD_NS}}}Header", nsmap={None: TWINFIELD_NS})
        etree.SubElement(header, f"{{{TWINFIELD_NS}}}AccessToken").text = self.access_token
        if self.company_code is not None:
            etree.SubElement(header, f"{{{TWINFIELD_NS}}}CompanyCode").text = self.company_code

        body = etree.SubElement(envelope, f"{{{SOAP_NS}}}Body")
        process = etree.SubElement(body, f"{{{TWINFIELD_NS}}}ProcessXmlString", nsmap={None: TWINFIELD_NS})
        etree.SubElement(process, f"{{{TWINFIELD_NS}}}xmlRequest").text = document.to_bytes().decode("utf-8")
        return etree.tostring(envelope, encoding="utf-8", xml_declaration=True)

    def send_document(self, document: Document) -> etree._Element:
        logger.debug("Sending <%s> document to %s", document.root.tag, self.endpoint)
        try:
            response = self.session.post(
                self.endpoint,
                data=self.build_envelope(document),
                headers={
                    "Content-Type": "text/xml; charset=utf-8",
                    "SOAPAction": f'"{SOAP_ACTION}"',
                },
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            raise TransportError(f"Could not reach {self.endpoint}: {e}") from e

        try:
            envelope = self._parse(response.content, "SOAP response")
        except TransportError:
            self._raise_for_status(response)
            raise

        fault = envelope.find(f".//{{{SOAP_NS}}}Fault")
        if fault is not None:
            raise TransportError(f"SOAP fault: {fault.findtext('faultstring') or 'unknown fault'}")

        self._raise_for_status(response)

        result = envelope.findtext(f".//{{{TWINFIELD_NS}}}ProcessXmlStringResult")
        if result is None:
            raise TransportError("SOAP response does not contain a ProcessXmlStringResult")

        root = self._parse(_XML_DECLARATION.sub("", result, count=1).encode("utf-8"), "response document")
        try:
            assert_successful(root)
        except ServiceError:
            logger.warning("Service rejected <%s> document", document.root.tag)
            raise
        return root

    @staticmethod
    def _raise_for_status(response: requests.Response) -> None:
        try:
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            raise TransportError(str(e)) from e

    @staticmethod
    def _parse(content: bytes, what: str) -> etree._Element:
        try:
            return etree.fromstring(content, _parser)
        except etree.XMLSyntaxError as e:
            raise TransportError(f"Could not parse {what}: {e}") from e
