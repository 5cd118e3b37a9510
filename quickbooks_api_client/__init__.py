"""
Python client for the QuickBooks Online accounting API.

This package provides a `QuickBooksClient` class that reads and
queries the entities of one QuickBooks company and refreshes its OAuth2
bearer token with the ``refresh_token`` grant.

Examples
--------

```python
from quickbooks_api_client import QueryConfig, QuickBooksClient, QuickBooksConfig

config = QuickBooksConfig.for_environment(
    "production",
    client_id="YOUR_CLIENT_ID",
    client_secret="YOUR_CLIENT_SECRET",
    company_id="YOUR_REALM_ID",
)

client = QuickBooksClient(config)
items = client.query_items(QueryConfig(start_position=1001, order_by="Name"))
```

Queries are built from ``SELECT * FROM <entity>`` with a page window
(``MAXRESULTS`` capped at 1000, ``STARTPOSITION`` starting at 1) and
optional ``WHERE``/``ORDERBY`` clauses that are passed through verbatim.
"""

from .client import QuickBooksClient
from .constants import MAX_QUERY_LENGTH, PRODUCTION_BASE_URL, SANDBOX_BASE_URL
from .exceptions import (
    DecodeError,
    PreconditionError,
    QuickBooksAPIError,
    QuickBooksAuthError,
    QuickBooksError,
    TransportError,
)
from .models import AccessToken, ApiConfig, ApiPaths, QueryConfig, QuickBooksConfig
from .query import build_query_string
from .request import apply_auth_headers

__all__ = [
    "QuickBooksClient",
    "QuickBooksConfig",
    "AccessToken",
    "ApiConfig",
    "ApiPaths",
    "QueryConfig",
    "build_query_string",
    "apply_auth_headers",
    "MAX_QUERY_LENGTH",
    "PRODUCTION_BASE_URL",
    "SANDBOX_BASE_URL",
    "QuickBooksError",
    "PreconditionError",
    "TransportError",
    "QuickBooksAPIError",
    "QuickBooksAuthError",
    "DecodeError",
]
