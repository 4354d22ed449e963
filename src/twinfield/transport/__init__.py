"""Transport layer for the Twinfield client."""

from twinfield.transport.base import Transport
from twinfield.transport.factories import create_http_transport
from twinfield.transport.http import HttpTransport

__all__ = ["Transport", "HttpTransport", "create_http_transport"]
