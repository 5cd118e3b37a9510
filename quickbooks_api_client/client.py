"""
Client implementation for the QuickBooks Online REST API.

This module defines the :class:`QuickBooksClient` class which reads
and queries entities of one QuickBooks company and refreshes its
OAuth2 bearer token using the ``refresh_token`` grant.  Every call
performs at most one blocking HTTP round trip; nothing is retried.

Usage
-----

.. code-block:: python

    from quickbooks_api_client import (
        AccessToken,
        QueryConfig,
        QuickBooksClient,
        QuickBooksConfig,
    )

    config = QuickBooksConfig.for_environment(
        "sandbox",
        client_id="abc123",
        client_secret="shhsecret",
        company_id="9130357766900000",
        token=AccessToken(access_token="...", refresh_token="..."),
    )

    with QuickBooksClient(config) as client:
        client.refresh_access_token()
        page = client.query_customers(QueryConfig(where="Active = true"))
        for customer in page["QueryResponse"].get("Customer", []):
            print(customer["DisplayName"])

The refresh token rotates on every refresh.  Persist ``client.token``
after calling :meth:`QuickBooksClient.refresh_access_token` if you need
it across processes.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import requests

from .constants import DEFAULT_TIMEOUT
from .exceptions import (
    DecodeError,
    PreconditionError,
    QuickBooksAPIError,
    QuickBooksAuthError,
    TransportError,
)
from .models import AccessToken, ApiPaths, QueryConfig, QuickBooksConfig, derive_paths
from .query import build_query_string
from .request import build_query_request, build_read_request, build_refresh_request

logger = logging.getLogger(__name__)


class QuickBooksClient:
    """A client for one company of the QuickBooks Online API.

    Parameters
    ----------
    config : QuickBooksConfig
        Credentials, host, company and initial token.  The config is
        never modified; the current token lives on the client and is
        available as :attr:`token`.
    session : requests.Session, optional
        Session used for every request.  When omitted the client
        creates one and closes it in :meth:`close`.  A session passed
        in is left open.
    timeout : float, optional
        Timeout in seconds applied to every request.  Defaults to 5.

    Notes
    -----
    :meth:`refresh_access_token` is the only method that changes the
    client's state.  If one client is shared between threads, callers
    must serialise refreshes themselves: two concurrent refreshes with
    the same refresh token will leave one of them holding a token the
    platform has already revoked.
    """

    def __init__(
        self,
        config: QuickBooksConfig,
        *,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        if not config.base_url.lower().startswith("https://"):
            raise ValueError("base_url must use https, got %r" % config.base_url)

        self._config = config
        self._token = config.token
        self._paths = derive_paths(config)
        self._owns_session = session is None
        self._session = session if session is not None else requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------
    @property
    def config(self) -> QuickBooksConfig:
        return self._config

    @property
    def paths(self) -> ApiPaths:
        return self._paths

    @property
    def token(self) -> AccessToken:
        """The current token pair."""
        return self._token

    def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> "QuickBooksClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    # ------------------------------------------------------------------
    # HTTP helpers
    # ------------------------------------------------------------------
    def _send(
        self,
        request: requests.Request,
        error_cls: type = QuickBooksAPIError,
    ) -> Any:
        """Send ``request`` and return the decoded JSON body.

        Raises
        ------
        TransportError
            If the request could not be completed.
        QuickBooksAPIError
            If the response status is not 2xx (``error_cls`` picks the
            subclass).
        DecodeError
            If the body is not valid JSON.
        """
        prepared = self._session.prepare_request(request)
        # proxies and CA bundle from the environment, as Session.request does
        settings = self._session.merge_environment_settings(
            prepared.url, {}, None, None, None
        )
        logger.debug("%s %s", prepared.method, prepared.url)
        try:
            response = self._session.send(prepared, timeout=self.timeout, **settings)
        except requests.RequestException as exc:
            raise TransportError(f"Failed to connect to {request.url}: {exc}") from exc

        if not 200 <= response.status_code < 300:
            raise error_cls(
                response.status_code,
                response.text,
                url=request.url,
                intuit_tid=response.headers.get("intuit_tid"),
            )

        try:
            return response.json()
        except ValueError as exc:
            raise DecodeError(
                f"Response from {request.url} is not valid JSON: {exc}"
            ) from exc

    # ------------------------------------------------------------------
    # Reads and queries
    # ------------------------------------------------------------------
    def query_raw(self, query: str) -> Any:
        """Run an already-built query string against the query endpoint."""
        return self._send(build_query_request(self._paths, self._token, query))

    def query(self, resource_key: str, config: Optional[QueryConfig] = None) -> Any:
        """Fetch one page of ``resource_key`` entities.

        See :func:`~quickbooks_api_client.query.build_query_string` for
        how ``config`` is turned into a query.  The decoded response is
        returned as is.

        Raises
        ------
        PreconditionError
            If the page window in ``config`` is invalid.  No request is
            made in that case.
        """
        return self.query_raw(build_query_string(resource_key, config))

    def read(self, resource_key: str, id: str) -> Any:
        """Fetch a single entity by id, e.g. ``client.read("item", "42")``."""
        return self._send(
            build_read_request(
                self._paths, self._config.minor_version, self._token, resource_key, id
            )
        )

    def company_info(self) -> Any:
        return self.query_raw("SELECT * FROM CompanyInfo")

    def read_item(self, id: str) -> Any:
        return self.read("item", id)

    def query_customers(self, config: Optional[QueryConfig] = None) -> Any:
        return self.query("Customer", config)

    def query_items(self, config: Optional[QueryConfig] = None) -> Any:
        """Return up to 1000 items (products) starting at ``config.start_position``."""
        return self.query("Item", config)

    # ------------------------------------------------------------------
    # Authentication
    # ------------------------------------------------------------------
    def refresh_access_token(self) -> AccessToken:
        """Exchange the refresh token for a new token pair.

        This method posts to the Intuit token endpoint with the
        client credentials in a Basic ``Authorization`` header.  On
        success the whole token is replaced and returned.  On failure
        the current token is kept and the error is raised.  A single
        attempt is made.

        Raises
        ------
        PreconditionError
            If the client holds no refresh token.
        TransportError
            If the token endpoint could not be reached.
        QuickBooksAuthError
            If the token endpoint answers with a non-2xx status.
        DecodeError
            If the response is not a token payload.
        """
        refresh_token = self._token.refresh_token
        if not refresh_token:
            raise PreconditionError("no refresh_token available to refresh with")

        payload = self._send(
            build_refresh_request(self._config, refresh_token),
            error_cls=QuickBooksAuthError,
        )
        token = AccessToken.from_dict(payload)
        if not token.access_token:
            raise DecodeError("Token response did not contain an access_token")

        self._token = token
        logger.info("Refreshed QuickBooks access token for company %s", self._config.company_id)
        return token
