"""
Construction of unsent :class:`requests.Request` objects.

Nothing in this module touches the network; :class:`QuickBooksClient`
prepares and sends what these helpers return.
"""

from __future__ import annotations

import copy
from typing import Dict

import requests
from requests.auth import AuthBase, HTTPBasicAuth

from .constants import TOKEN_URL
from .models import AccessToken, ApiPaths, QuickBooksConfig

JSON_HEADERS = {
    "Accept": "application/json",
    "Content-Type": "application/json",
}


class BearerAuth(AuthBase):
    """Sets ``Authorization: <token_type> <access_token>`` on a request.

    Passed as ``auth=`` so that ``requests`` neither looks the host up in
    ``~/.netrc`` nor applies ``Session.auth`` over the token.
    """

    def __init__(self, token: AccessToken) -> None:
        self.token = token

    def __eq__(self, other: object) -> bool:
        return isinstance(other, BearerAuth) and self.token == other.token

    def __ne__(self, other: object) -> bool:
        return not self == other

    def __call__(self, r: requests.PreparedRequest) -> requests.PreparedRequest:
        r.headers["Authorization"] = self.token.authorization
        return r


def apply_auth_headers(request: requests.Request, token: AccessToken) -> requests.Request:
    """Return a copy of ``request`` carrying the JSON and auth headers.

    Every other field of ``request`` (body, cookies, hooks, ...) is kept
    and ``request`` itself is left untouched.  The ``Authorization``
    value is ``"<token_type> <access_token>"`` even when either part is
    empty; the API answers such a request with 401.
    """
    headers: Dict[str, str] = dict(request.headers or {})
    headers.update(JSON_HEADERS)
    headers["Authorization"] = token.authorization

    authed = copy.copy(request)
    authed.headers = headers
    authed.params = copy.copy(request.params)
    authed.hooks = {event: list(hooks) for event, hooks in request.hooks.items()}
    authed.auth = BearerAuth(token)
    return authed


def build_read_request(
    paths: ApiPaths,
    minor_version: str,
    token: AccessToken,
    resource_key: str,
    id: str,
) -> requests.Request:
    url = f"{paths.base}/{resource_key}/{id}?minorversion={minor_version}"
    return apply_auth_headers(requests.Request("GET", url), token)


def build_query_request(paths: ApiPaths, token: AccessToken, query: str) -> requests.Request:
    """GET the query URL with ``query`` as a URL-encoded parameter."""
    return apply_auth_headers(
        requests.Request("GET", paths.query, params={"query": query}), token
    )


def build_refresh_request(config: QuickBooksConfig, refresh_token: str) -> requests.Request:
    """POST for the OAuth2 ``refresh_token`` grant.

    The client credentials go in a Basic ``Authorization`` header and
    ``requests`` form-encodes the body.
    """
    return requests.Request(
        "POST",
        TOKEN_URL,
        headers={"Accept": "application/json"},
        data={"grant_type": "refresh_token", "refresh_token": refresh_token},
        auth=HTTPBasicAuth(config.client_id, config.client_secret),
    )
