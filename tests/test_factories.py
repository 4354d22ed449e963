"""Tests for transport factory functions."""

import pytest

from twinfield.domain.errors import ValidationError
from twinfield.transport.factories import DEFAULT_CLUSTER, create_http_transport


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("TWINFIELD_CLUSTER", "TWINFIELD_ACCESS_TOKEN", "TWINFIELD_COMPANY_CODE"):
        monkeypatch.delenv(name, raising=False)


def test_explicit_arguments():
    transport = create_http_transport(
        cluster="https://api.accounting.twinfield.com", access_token="abc", company_code="NLA000001"
    )
    assert transport.endpoint == "https://api.accounting.twinfield.com/webservices/processxml.asmx"
    assert transport.access_token == "abc"
    assert transport.company_code == "NLA000001"


def test_environment_fallback(monkeypatch):
    monkeypatch.setenv("TWINFIELD_CLUSTER", "https://c3.twinfield.com")
    monkeypatch.setenv("TWINFIELD_ACCESS_TOKEN", "from-env")
    monkeypatch.setenv("TWINFIELD_COMPANY_CODE", "NLA000002")

    transport = create_http_transport()

    assert transport.endpoint.startswith("https://c3.twinfield.com/")
    assert transport.access_token == "from-env"
    assert transport.company_code == "NLA000002"


def test_arguments_override_environment(monkeypatch):
    monkeypatch.setenv("TWINFIELD_ACCESS_TOKEN", "from-env")
    assert create_http_transport(access_token="explicit").access_token == "explicit"


def test_default_cluster():
    transport = create_http_transport(access_token="abc")
    assert transport.endpoint.startswith(DEFAULT_CLUSTER)
    assert transport.company_code is None


def test_missing_access_token():
    with pytest.raises(ValidationError, match="TWINFIELD_ACCESS_TOKEN"):
        create_http_transport()
