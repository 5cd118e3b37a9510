"""
Value types shared by the QuickBooks client.

:class:`AccessToken` is the OAuth2 credential pair held by the client,
:class:`QuickBooksConfig` describes which company to talk to and with
which credentials, and :class:`QueryConfig` describes one page of a
query.  All of them are frozen; the client replaces its token by
swapping in a new :class:`AccessToken` rather than editing fields.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from .constants import (
    BASE_URLS,
    DEFAULT_MINOR_VERSION,
    DEFAULT_TOKEN_TYPE,
    MAX_QUERY_LENGTH,
)
from .exceptions import DecodeError


@dataclass(frozen=True)
class AccessToken:
    """OAuth2 bearer token and the refresh token paired with it.

    Any field may be empty, e.g. before the first authorisation.  Empty
    fields are left out of :meth:`to_dict`.
    """

    access_token: str = ""
    refresh_token: str = ""
    token_type: str = DEFAULT_TOKEN_TYPE

    @classmethod
    def from_dict(cls, data: Any) -> "AccessToken":
        """Build a token from a decoded token-endpoint response.

        Missing fields take their defaults and unknown keys such as
        ``expires_in`` are ignored.

        Raises
        ------
        DecodeError
            If ``data`` is not a mapping or a token field is not a string.
        """
        if not isinstance(data, Mapping):
            raise DecodeError(f"expected a JSON object for a token, got {type(data).__name__}")
        values: Dict[str, str] = {}
        for name in ("access_token", "refresh_token", "token_type"):
            if name not in data:
                continue
            value = data[name]
            if not isinstance(value, str):
                raise DecodeError(f"token field {name!r} must be a string, got {type(value).__name__}")
            values[name] = value
        return cls(**values)

    def to_dict(self) -> Dict[str, str]:
        """Serialise the token, omitting empty fields."""
        data = {
            "access_token": self.access_token,
            "refresh_token": self.refresh_token,
            "token_type": self.token_type,
        }
        return {key: value for key, value in data.items() if value}

    @property
    def authorization(self) -> str:
        """Value of the ``Authorization`` header for this token."""
        return f"{self.token_type} {self.access_token}"

    def __repr__(self) -> str:
        # Keep secrets out of logs and tracebacks.
        return (
            f"AccessToken(access_token={'***' if self.access_token else ''!r}, "
            f"refresh_token={'***' if self.refresh_token else ''!r}, "
            f"token_type={self.token_type!r})"
        )


@dataclass(frozen=True)
class ApiConfig:
    minor_version: str = DEFAULT_MINOR_VERSION


@dataclass(frozen=True)
class QueryConfig:
    """One page of a query.

    ``where`` and ``order_by`` are passed to the API verbatim; callers
    are responsible for their content.  ``start_position`` is 1-based.
    """

    where: Optional[str] = None
    order_by: Optional[str] = None
    start_position: int = 1
    max_results: int = MAX_QUERY_LENGTH


@dataclass(frozen=True)
class QuickBooksConfig:
    """Credentials and target company for a :class:`QuickBooksClient`.

    Parameters
    ----------
    client_id : str
        OAuth client identifier of your Intuit app.
    client_secret : str
        OAuth client secret of your Intuit app.
    base_url : str
        API host, normally :data:`~quickbooks_api_client.constants.PRODUCTION_BASE_URL`
        or :data:`~quickbooks_api_client.constants.SANDBOX_BASE_URL`.
    company_id : str
        The realm (company) identifier.  Not validated here; an empty
        value surfaces as an error response from the API.
    token : AccessToken, optional
        Initial token pair.  Defaults to an empty token.
    api : ApiConfig, optional
        Overrides the API minor version.
    """

    client_id: str
    client_secret: str
    base_url: str
    company_id: str
    token: AccessToken = field(default_factory=AccessToken)
    api: Optional[ApiConfig] = None

    @classmethod
    def for_environment(
        cls,
        environment: str = "sandbox",
        *,
        client_id: str,
        client_secret: str,
        company_id: str,
        token: Optional[AccessToken] = None,
        api: Optional[ApiConfig] = None,
        base_url: Optional[str] = None,
    ) -> "QuickBooksConfig":
        """Build a config whose base URL is picked by environment name.

        ``environment`` is ``"sandbox"`` or ``"production"``.  An explicit
        ``base_url`` overrides the URL derived from the environment.
        """
        environment = environment.lower()
        if environment not in BASE_URLS:
            raise ValueError(
                "environment must be either 'sandbox' or 'production', got %r"
                % environment
            )
        return cls(
            client_id=client_id,
            client_secret=client_secret,
            base_url=base_url or BASE_URLS[environment],
            company_id=company_id,
            token=token if token is not None else AccessToken(),
            api=api,
        )

    @property
    def minor_version(self) -> str:
        return self.api.minor_version if self.api is not None else DEFAULT_MINOR_VERSION

    def __repr__(self) -> str:
        return (
            f"QuickBooksConfig(client_id={self.client_id!r}, client_secret='***', "
            f"base_url={self.base_url!r}, company_id={self.company_id!r}, "
            f"token={self.token!r}, api={self.api!r})"
        )


@dataclass(frozen=True)
class ApiPaths:
    """URLs derived once from a :class:`QuickBooksConfig`."""

    base: str
    query: str


def derive_paths(config: QuickBooksConfig) -> ApiPaths:
    """Return the company base URL and the query URL for ``config``.

    >>> config = QuickBooksConfig(
    ...     "id", "secret", "https://sandbox-quickbooks.api.intuit.com", "123"
    ... )
    >>> paths = derive_paths(config)
    >>> paths.query
    'https://sandbox-quickbooks.api.intuit.com/v3/company/123/query?minorversion=65'
    """
    base = f"{config.base_url}/v3/company/{config.company_id}"
    query = f"{base}/query?minorversion={config.minor_version}"
    return ApiPaths(base=base, query=query)
