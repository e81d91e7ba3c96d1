"""
AccessGrid Client Library

A Python client for the AccessGrid API. Every request is signed with
HMAC-SHA256 over the Base64 of its canonical JSON payload.

Example usage:
    from accessgrid import AccessGridClient, ProvisionCardRequest

    client = AccessGridClient("your-account-id", "your-secret-key")
    card = client.access_cards.provision(
        ProvisionCardRequest(card_template_id="0xd3adb00b5", full_name="Employee name")
    )
"""

import logging

from .client import AccessGridClient
from .api import AccessCards, Console
from .exceptions import (
    AccessGridError,
    ConfigurationError,
    APIError
)
from .models import (
    Card,
    CreateTemplateRequest,
    Device,
    Event,
    EventLogFilters,
    ProvisionCardRequest,
    SupportInfo,
    Template,
    TemplateDesign,
    UnifiedAccessPass,
    UpdateCardRequest,
    UpdateTemplateRequest,
    canonical_json,
    resolve_provision_result
)
from .constants import (
    BASE_URL,
    HEADER_ACCOUNT_ID,
    HEADER_PAYLOAD_SIG,
    SIG_PAYLOAD_PARAM,
    DEFAULT_CONFIG
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"
__author__ = "AccessGrid"
__all__ = [
    "AccessGridClient",
    "AccessCards",
    "Console",
    "AccessGridError",
    "ConfigurationError",
    "APIError",
    "Card",
    "CreateTemplateRequest",
    "Device",
    "Event",
    "EventLogFilters",
    "ProvisionCardRequest",
    "SupportInfo",
    "Template",
    "TemplateDesign",
    "UnifiedAccessPass",
    "UpdateCardRequest",
    "UpdateTemplateRequest",
    "canonical_json",
    "resolve_provision_result",
    "BASE_URL",
    "HEADER_ACCOUNT_ID",
    "HEADER_PAYLOAD_SIG",
    "SIG_PAYLOAD_PARAM",
    "DEFAULT_CONFIG"
]
