"""
Resource groupings of the AccessGrid API.

Each facade forwards to the client it was created with and keeps no state
of its own.
"""

import logging
from typing import List, Optional
from urllib.parse import quote

from pydantic import TypeAdapter, ValidationError

from .constants import NFC_KEYS_PATH, TEMPLATES_PATH
from .exceptions import APIError, ConfigurationError
from .models import (
    Card,
    CreateTemplateRequest,
    Event,
    EventLogFilters,
    ProvisionCardRequest,
    ProvisionResult,
    Template,
    UpdateCardRequest,
    UpdateTemplateRequest,
    resolve_provision_result,
)

log = logging.getLogger(__name__)

_EVENT_LIST = TypeAdapter(List[Event])


def _path_id(value: str) -> str:
    return quote(str(value), safe='')


class _Resource:
    """Shared plumbing for the resource facades."""

    def __init__(self, client):
        if not getattr(client, 'account_id', None) or not getattr(client, 'secret_key', None):
            raise ConfigurationError(
                f"{type(self).__name__} requires a client with account_id and secret_key"
            )
        self.client = client

    def _call(self, method: str, path: str, payload=None, params=None, *, parse):
        document = self.client.request_json(method, path, payload, params)
        try:
            return parse(document)
        except ValidationError as e:
            raise APIError(f"Unexpected response shape from {method} {path}", cause=e) from e


class AccessCards(_Resource):
    """Access card operations."""

    def provision(self, request: ProvisionCardRequest) -> ProvisionResult:
        """
        Issue a new access card.

        Returns a UnifiedAccessPass when the template is a template pair,
        otherwise a Card.
        """
        result = self._call('POST', NFC_KEYS_PATH, request, parse=resolve_provision_result)
        log.debug("Provisioned %s %s", type(result).__name__, result.id)
        return result

    def get(self, card_id: str) -> Card:
        """Get details about a specific access card."""
        return self._call(
            'GET',
            f"{NFC_KEYS_PATH}/{_path_id(card_id)}",
            {"id": card_id},
            parse=Card.model_validate
        )

    def update(self, card_id: str, request: UpdateCardRequest) -> Card:
        """Update holder details of an issued card."""
        return self._call(
            'PATCH',
            f"{NFC_KEYS_PATH}/{_path_id(card_id)}",
            request,
            parse=Card.model_validate
        )

    def suspend(self, card_id: str) -> Card:
        return self._action(card_id, 'suspend')

    def resume(self, card_id: str) -> Card:
        return self._action(card_id, 'resume')

    def unlink(self, card_id: str) -> Card:
        return self._action(card_id, 'unlink')

    def delete(self, card_id: str) -> Card:
        return self._action(card_id, 'delete')

    def _action(self, card_id: str, action: str) -> Card:
        return self._call(
            'POST',
            f"{NFC_KEYS_PATH}/{_path_id(card_id)}/{action}",
            {},
            parse=Card.model_validate
        )


class Console(_Resource):
    """Console (template management) operations."""

    def create_template(self, request: CreateTemplateRequest) -> Template:
        """Create a new card template."""
        return self._call('POST', TEMPLATES_PATH, request, parse=Template.model_validate)

    def read_template(self, template_id: str) -> Template:
        return self._call(
            'GET',
            f"{TEMPLATES_PATH}/{_path_id(template_id)}",
            {"id": template_id},
            parse=Template.model_validate
        )

    def update_template(self, template_id: str, request: UpdateTemplateRequest) -> Template:
        return self._call(
            'PUT',
            f"{TEMPLATES_PATH}/{_path_id(template_id)}",
            request,
            parse=Template.model_validate
        )

    def event_log(self, template_id: str, filters: Optional[EventLogFilters] = None) -> List[Event]:
        """
        List audit-log entries for a template.

        The signing payload is ``{"id": template_id}``; filters travel as
        plain query parameters.
        """
        params = filters.model_dump(mode="json", exclude_none=True) if filters else None
        return self._call(
            'GET',
            f"{TEMPLATES_PATH}/{_path_id(template_id)}/logs",
            {"id": template_id},
            params,
            parse=_parse_events
        )


def _parse_events(document) -> List[Event]:
    if isinstance(document, dict) and "logs" in document:
        document = document["logs"]
    return _EVENT_LIST.validate_python(document)
