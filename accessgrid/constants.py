"""
Constants for the AccessGrid client library.
"""

# API origin
BASE_URL = "https://api.accessgrid.com/v1"

# HTTP Headers
HEADER_ACCOUNT_ID = "X-ACCT-ID"
HEADER_PAYLOAD_SIG = "X-PAYLOAD-SIG"
HEADER_CONTENT_TYPE = "Content-Type"
CONTENT_TYPE_JSON = "application/json"

# Query parameter carrying the signed payload on body-less requests
SIG_PAYLOAD_PARAM = "sig_payload"

# Methods that never carry a body; their payload travels in the query string
BODYLESS_METHODS = frozenset({"GET", "HEAD", "DELETE"})

# API paths
NFC_KEYS_PATH = "/nfc-keys"
TEMPLATES_PATH = "/enterprise/templates"

# Environment variables read by AccessGridClient.from_env()
ENV_ACCOUNT_ID = "ACCESSGRID_ACCOUNT_ID"
ENV_SECRET_KEY = "ACCESSGRID_SECRET_KEY"

# Default configuration values
DEFAULT_CONFIG = {
    'base_url': BASE_URL,
    'timeout': 30,              # HTTP timeout in seconds
}
