"""
Fixed endpoints and limits of the QuickBooks Online platform.
"""

PRODUCTION_BASE_URL = "https://quickbooks.api.intuit.com"
SANDBOX_BASE_URL = "https://sandbox-quickbooks.api.intuit.com"

# Declared for completeness; the client does not call the payments API.
PAYMENTS_PRODUCTION_BASE_URL = "https://api.intuit.com"
PAYMENTS_SANDBOX_BASE_URL = "https://sandbox.api.intuit.com/quickbooks/v4/payments"

BASE_URLS = {
    "production": PRODUCTION_BASE_URL,
    "sandbox": SANDBOX_BASE_URL,
}

TOKEN_URL = "https://oauth.platform.intuit.com/oauth2/v1/tokens/bearer"

# Largest page the query endpoint will return.
MAX_QUERY_LENGTH = 1000

DEFAULT_MINOR_VERSION = "65"
DEFAULT_TOKEN_TYPE = "Bearer"

# Seconds per request.
DEFAULT_TIMEOUT = 5.0
