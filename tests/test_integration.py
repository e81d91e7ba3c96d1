"""
Integration tests against the live AccessGrid API.

Skipped unless ACCESSGRID_ACCOUNT_ID and ACCESSGRID_SECRET_KEY are set.
ACCESSGRID_TEMPLATE_ID selects the template cards are issued from.
"""

import os
from datetime import datetime, timedelta, timezone

import pytest

from accessgrid import (
    AccessGridClient,
    APIError,
    Card,
    ProvisionCardRequest,
    UnifiedAccessPass,
)

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(
        not (os.environ.get("ACCESSGRID_ACCOUNT_ID") and os.environ.get("ACCESSGRID_SECRET_KEY")),
        reason="AccessGrid credentials not configured"
    ),
]


class TestIntegration:
    """Integration tests with the AccessGrid API."""

    @pytest.fixture(scope="class")
    def client(self):
        """Create authenticated client from the environment."""
        with AccessGridClient.from_env() as client:
            yield client

    @pytest.fixture
    def template_id(self):
        template_id = os.environ.get("ACCESSGRID_TEMPLATE_ID")
        if not template_id:
            pytest.skip("ACCESSGRID_TEMPLATE_ID not configured")
        return template_id

    def test_provision_and_get(self, client, template_id):
        """Test issuing a card and reading it back."""
        now = datetime.now(timezone.utc)
        result = client.access_cards.provision(ProvisionCardRequest(
            card_template_id=template_id,
            employee_id="python-integration-test",
            full_name="Integration Test",
            email="integration.test@example.com",
            start_date=now.isoformat(),
            expiration_date=(now + timedelta(days=1)).isoformat(),
        ))

        assert isinstance(result, (Card, UnifiedAccessPass))
        assert result.id

        if isinstance(result, Card):
            fetched = client.access_cards.get(result.id)
            assert fetched.id == result.id

    def test_read_template(self, client, template_id):
        template = client.console.read_template(template_id)

        assert template.id == template_id

    def test_wrong_secret_key(self, template_id):
        """Test that a wrong secret is rejected with the API's own message."""
        wrong_client = AccessGridClient(os.environ["ACCESSGRID_ACCOUNT_ID"], "wrong-secret-key")

        with pytest.raises(APIError) as exc_info:
            wrong_client.console.read_template(template_id)

        assert exc_info.value.status_code in (401, 403)
        assert exc_info.value.body is not None
