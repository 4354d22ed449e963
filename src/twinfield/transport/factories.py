"""Transport factory functions."""

import os
from typing import Optional

from twinfield.domain.errors import ValidationError
from twinfield.transport.http import HttpTransport

DEFAULT_CLUSTER = "https://accounting.twinfield.com"


def create_http_transport(
    cluster: Optional[str] = None,
    access_token: Optional[str] = None,
    company_code: Optional[str] = None,
    timeout: float = 30,
) -> HttpTransport:
    """Create an HTTP transport.

    Args:
        cluster: Cluster base URL. If None, checks TWINFIELD_CLUSTER
            environment variable, then defaults to https://accounting.twinfield.com
        access_token: OAuth2 access token. If None, checks TWINFIELD_ACCESS_TOKEN
        company_code: Office code for the session header. If None, checks
            TWINFIELD_COMPANY_CODE
        timeout: Request timeout in seconds

    Returns:
        HttpTransport instance

    Raises:
        ValidationError: If no access token is configured
    """
    if cluster is None:
        cluster = os.environ.get("TWINFIELD_CLUSTER", DEFAULT_CLUSTER)

    if access_token is None:
        access_token = os.environ.get("TWINFIELD_ACCESS_TOKEN")

    if not access_token:
        raise ValidationError(
            "No access token configured. Pass one explicitly or set TWINFIELD_ACCESS_TOKEN"
        )

    if company_code is None:
        company_code = os.environ.get("TWINFIELD_COMPANY_CODE")

    return HttpTransport(
        cluster=cluster,
        access_token=access_token,
        company_code=company_code,
        timeout=timeout,
    )
