#!/usr/bin/env python3
"""
Basic usage examples for the AccessGrid client library.

Reads credentials from ACCESSGRID_ACCOUNT_ID and ACCESSGRID_SECRET_KEY and
the template to issue from ACCESSGRID_TEMPLATE_ID.
"""

import logging
import os
import sys
from datetime import datetime, timedelta, timezone

from accessgrid import (
    AccessGridClient,
    AccessGridError,
    EventLogFilters,
    ProvisionCardRequest,
    UnifiedAccessPass,
)


def main():
    """Run basic usage examples."""
    logging.basicConfig(level=logging.DEBUG)

    template_id = os.environ.get("ACCESSGRID_TEMPLATE_ID")
    if not template_id:
        print("Set ACCESSGRID_TEMPLATE_ID to run the examples")
        return 1

    print("=== AccessGrid Python Client Usage Examples ===\n")

    try:
        client = AccessGridClient.from_env()
    except AccessGridError as e:
        print(f"   ✗ Could not create client: {e}")
        return 1

    print(f"1. Client created for account: {client.account_id}\n")

    with client:
        try:
            print("2. Provisioning a card...")
            now = datetime.now(timezone.utc)
            result = client.access_cards.provision(ProvisionCardRequest(
                card_template_id=template_id,
                employee_id="123456789",
                full_name="Employee name",
                email="employee@yourwebsite.com",
                start_date=now.isoformat(),
                expiration_date=(now + timedelta(days=90)).isoformat(),
            ))
            if isinstance(result, UnifiedAccessPass):
                print(f"   ✓ Unified pass {result.id} with {len(result.details)} cards")
            else:
                print(f"   ✓ Card {result.id} ({result.state})")
            print(f"   Install URL: {result.url}\n")

            print("3. Reading the template...")
            template = client.console.read_template(template_id)
            print(f"   ✓ {template.name}: {template.active_keys_count} active keys\n")

            print("4. Reading the event log...")
            events = client.console.event_log(template_id, EventLogFilters(
                start_date=now - timedelta(days=7),
            ))
            for event in events:
                print(f"   {event.timestamp} {event.type} {event.user_id}")
        except AccessGridError as e:
            print(f"   ✗ Request failed: {e}")
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
