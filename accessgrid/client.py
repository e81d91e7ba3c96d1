"""
AccessGrid API client.

This module builds HMAC-SHA256 signed requests for the AccessGrid API and
executes them. The signature covers the Base64 form of the canonical JSON
payload; POST-style requests send that JSON as the body while body-less
requests send it as the ``sig_payload`` query parameter.
"""

import base64
import hashlib
import hmac
import json
import logging
import os
from typing import Any, Dict, Optional
from urllib.parse import urlencode

import requests

from .api import AccessCards, Console
from .constants import (
    HEADER_ACCOUNT_ID,
    HEADER_PAYLOAD_SIG,
    HEADER_CONTENT_TYPE,
    CONTENT_TYPE_JSON,
    SIG_PAYLOAD_PARAM,
    BODYLESS_METHODS,
    DEFAULT_CONFIG,
    ENV_ACCOUNT_ID,
    ENV_SECRET_KEY,
)
from .exceptions import APIError, ConfigurationError
from .models import canonical_json

log = logging.getLogger(__name__)


class AccessGridClient:
    """
    Client for the AccessGrid API.

    Holds the account id, the API secret and a pooled HTTP session. Nothing
    on the client changes after construction, so one instance can be shared
    across threads.

    Resource operations are grouped under ``access_cards`` and ``console``.
    """

    def __init__(self, account_id: str, secret_key: str, **config):
        """
        Initialize AccessGrid client.

        Args:
            account_id: Public account identifier, sent as X-ACCT-ID
            secret_key: API secret used as the HMAC key; never sent
            **config: Configuration options (base_url, timeout)
        """
        self.account_id = account_id
        self.secret_key = secret_key

        # Merge default config with user overrides
        self.config = {**DEFAULT_CONFIG, **config}

        self._validate_config()

        self.base_url = self.config['base_url'].rstrip('/')
        self.session = requests.Session()

        self.access_cards = AccessCards(self)
        self.console = Console(self)

    @classmethod
    def from_env(cls, **config) -> "AccessGridClient":
        """Create a client from ACCESSGRID_ACCOUNT_ID and ACCESSGRID_SECRET_KEY."""
        return cls(
            os.environ.get(ENV_ACCOUNT_ID, ''),
            os.environ.get(ENV_SECRET_KEY, ''),
            **config
        )

    def _validate_config(self):
        """Validate client configuration."""
        if not self.account_id:
            raise ConfigurationError("account_id cannot be empty")

        if not self.secret_key:
            raise ConfigurationError("secret_key cannot be empty")

        if not self.config['base_url']:
            raise ConfigurationError("base_url cannot be empty")

        if self.config['timeout'] <= 0:
            raise ConfigurationError("timeout must be positive")

    def generate_signature(self, payload) -> str:
        """
        Sign a payload.

        HMAC-SHA256 keyed with the UTF-8 secret, computed over the Base64
        encoding of the canonical JSON payload, as lowercase hex.

        Args:
            payload: Model, mapping or JSON string (see canonical_json)

        Returns:
            Hex-encoded signature
        """
        encoded_payload = base64.b64encode(canonical_json(payload).encode('utf-8'))
        mac = hmac.new(
            self.secret_key.encode('utf-8'),
            encoded_payload,
            hashlib.sha256
        )
        return mac.hexdigest()

    def verify_signature(self, payload, signature: str) -> bool:
        """
        Check a signature against the one this client would produce.

        Args:
            payload: Model, mapping or JSON string
            signature: Hex-encoded signature to verify

        Returns:
            True if signature matches
        """
        expected_signature = self.generate_signature(payload)

        # Use constant-time comparison to prevent timing attacks
        return hmac.compare_digest(
            expected_signature.encode('utf-8'),
            signature.encode('utf-8')
        )

    def create_signed_request(
        self,
        method: str,
        path: str,
        payload=None,
        params: Optional[Dict[str, Any]] = None
    ) -> requests.Request:
        """
        Build an authenticated request ready for the transport.

        Body-bearing methods send the signed JSON as the body. GET, HEAD and
        DELETE send it URL-encoded as ``sig_payload`` after any ``params``.

        Args:
            method: HTTP method
            path: API path, appended to base_url
            payload: Request body, or the signing payload for body-less methods
            params: Extra query parameters

        Returns:
            requests.Request with method, absolute URL, headers and body

        Raises:
            APIError: If the payload cannot be serialized
        """
        method = method.upper()
        try:
            payload_json = canonical_json(payload)
        except (TypeError, ValueError) as e:
            raise APIError(f"Failed to serialize payload: {e}", cause=e) from e
        signature = self.generate_signature(payload_json)

        headers = {
            HEADER_ACCOUNT_ID: self.account_id,
            HEADER_PAYLOAD_SIG: signature,
            HEADER_CONTENT_TYPE: CONTENT_TYPE_JSON,
        }

        url = self.base_url + path
        query = dict(params or {})
        body = None

        if method in BODYLESS_METHODS:
            query[SIG_PAYLOAD_PARAM] = payload_json
        else:
            body = payload_json.encode('utf-8')

        if query:
            separator = '&' if '?' in path else '?'
            url = f"{url}{separator}{urlencode(query)}"

        return requests.Request(method, url, headers=headers, data=body)

    def send_request(self, request: requests.Request) -> requests.Response:
        """
        Execute a signed request.

        Args:
            request: Request from create_signed_request

        Returns:
            requests.Response with a 2xx status

        Raises:
            APIError: On network failure or a non-2xx status
        """
        try:
            response = self.session.request(
                request.method,
                request.url,
                headers=request.headers,
                data=request.data,
                timeout=self.config['timeout']
            )
        except requests.RequestException as e:
            log.warning("%s %s failed: %s", request.method, request.url, e)
            raise APIError(f"HTTP request failed: {e}", cause=e) from e

        log.debug("%s %s -> %s", request.method, request.url, response.status_code)

        if response.status_code < 200 or response.status_code >= 300:
            log.warning(
                "%s %s returned HTTP %s", request.method, request.url, response.status_code
            )
            raise APIError(
                "API request failed",
                status_code=response.status_code,
                body=response.text
            )

        return response

    def request_json(
        self,
        method: str,
        path: str,
        payload=None,
        params: Optional[Dict[str, Any]] = None
    ):
        """
        Sign, send and parse one API call.

        Returns:
            Parsed JSON response body

        Raises:
            APIError: On any request failure or an unparseable body
        """
        request = self.create_signed_request(method, path, payload, params)
        response = self.send_request(request)
        try:
            return json.loads(response.text)
        except ValueError as e:
            raise APIError(
                f"Invalid JSON in response: {e}",
                status_code=response.status_code,
                body=response.text,
                cause=e
            ) from e

    def close(self):
        """Close HTTP session."""
        if self.session:
            self.session.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
