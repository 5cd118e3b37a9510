import json
from unittest.mock import Mock

import pytest
import requests

from quickbooks_api_client import AccessToken, QuickBooksClient, QuickBooksConfig, SANDBOX_BASE_URL


def make_response(status_code=200, body=None, *, text=None, headers=None):
    response = requests.Response()
    response.status_code = status_code
    if text is None:
        text = json.dumps(body if body is not None else {})
    response._content = text.encode("utf-8")
    response.encoding = "utf-8"
    response.headers.update(headers or {})
    return response


@pytest.fixture
def config():
    return QuickBooksConfig(
        client_id="client-id",
        client_secret="client-secret",
        base_url=SANDBOX_BASE_URL,
        company_id="123",
        token=AccessToken(access_token="old", refresh_token="old-r"),
    )


@pytest.fixture
def session():
    session = requests.Session()
    session.send = Mock(return_value=make_response(200, {"QueryResponse": {}}))
    return session


@pytest.fixture
def client(config, session):
    return QuickBooksClient(config, session=session)


def sent_request(session):
    """The PreparedRequest passed to the last ``session.send`` call."""
    return session.send.call_args[0][0]
