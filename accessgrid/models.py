"""
Data models for the AccessGrid API.

Attribute names match the snake_case wire names one to one, so the models
dump straight to the JSON the API expects. Every field is optional; the API
decides what is required.
"""

import json
from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic_core import to_jsonable_python


class AccessGridModel(BaseModel):
    """Base for all request and response models."""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)


class Device(AccessGridModel):
    """Device an access pass is installed on."""

    id: Optional[str] = None
    platform: Optional[str] = None
    device_type: Optional[str] = None
    status: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class ProvisionCardRequest(AccessGridModel):
    """Request body for issuing a new access card."""

    card_template_id: Optional[str] = None
    employee_id: Optional[str] = None
    tag_id: Optional[str] = None
    full_name: Optional[str] = None
    email: Optional[str] = None
    phone_number: Optional[str] = None
    classification: Optional[str] = None
    start_date: Optional[str] = None
    expiration_date: Optional[str] = None
    employee_photo: Optional[str] = None


class UpdateCardRequest(AccessGridModel):
    """Request body for updating an issued card. The card id goes in the path."""

    employee_id: Optional[str] = None
    full_name: Optional[str] = None
    classification: Optional[str] = None
    expiration_date: Optional[str] = None
    employee_photo: Optional[str] = None


class Card(AccessGridModel):
    """An issued access card."""

    id: Optional[str] = None
    state: Optional[str] = None
    full_name: Optional[str] = None
    expiration_date: Optional[str] = None
    card_template_id: Optional[str] = None
    card_number: Optional[str] = None
    site_code: Optional[str] = None
    file_data: Optional[str] = None
    install_url: Optional[str] = None
    direct_install_url: Optional[str] = None
    details: Any = None
    devices: List[Device] = []
    metadata: Dict[str, Any] = {}

    @field_validator("devices", mode="before")
    @classmethod
    def empty_devices_when_null(cls, value):
        return [] if value is None else value

    @field_validator("metadata", mode="before")
    @classmethod
    def empty_metadata_when_null(cls, value):
        return {} if value is None else value

    @property
    def url(self) -> Optional[str]:
        return self.install_url


class UnifiedAccessPass(AccessGridModel):
    """
    A pair of platform-specific cards issued together from a template pair.

    The API returns this instead of a Card when the provision request targets
    a template pair; `details` then holds one Card per platform.
    """

    id: Optional[str] = None
    state: Optional[str] = None
    status: Optional[str] = None
    install_url: Optional[str] = None
    details: List[Card] = []
    metadata: Dict[str, Any] = {}

    @field_validator("details", mode="before")
    @classmethod
    def empty_details_when_null(cls, value):
        return [] if value is None else value

    @field_validator("metadata", mode="before")
    @classmethod
    def empty_metadata_when_null(cls, value):
        return {} if value is None else value

    @property
    def url(self) -> Optional[str]:
        return self.install_url


class TemplateDesign(AccessGridModel):
    background_color: Optional[str] = None
    label_color: Optional[str] = None
    label_secondary_color: Optional[str] = None
    background_image: Optional[str] = None
    logo_image: Optional[str] = None
    icon_image: Optional[str] = None


class SupportInfo(AccessGridModel):
    support_url: Optional[str] = None
    support_phone_number: Optional[str] = None
    support_email: Optional[str] = None
    privacy_policy_url: Optional[str] = None
    terms_and_conditions_url: Optional[str] = None


class CreateTemplateRequest(AccessGridModel):
    """Request body for creating a card template."""

    name: Optional[str] = None
    platform: Optional[str] = None
    use_case: Optional[str] = None
    protocol: Optional[str] = None
    allow_on_multiple_devices: Optional[bool] = None
    watch_count: Optional[int] = None
    iphone_count: Optional[int] = None
    design: Optional[TemplateDesign] = None
    support_info: Optional[SupportInfo] = None


class UpdateTemplateRequest(AccessGridModel):
    """Request body for updating a card template. The id goes in the path."""

    name: Optional[str] = None
    allow_on_multiple_devices: Optional[bool] = None
    watch_count: Optional[int] = None
    iphone_count: Optional[int] = None
    support_info: Optional[SupportInfo] = None


class Template(AccessGridModel):
    """A card template."""

    id: Optional[str] = None
    name: Optional[str] = None
    platform: Optional[str] = None
    use_case: Optional[str] = None
    protocol: Optional[str] = None
    allow_on_multiple_devices: Optional[bool] = None
    watch_count: Optional[int] = None
    iphone_count: Optional[int] = None
    issued_keys_count: Optional[int] = None
    active_keys_count: Optional[int] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    last_published_at: Optional[str] = None


class EventLogFilters(AccessGridModel):
    """Query filters for a template's event log."""

    device: Optional[str] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    event_type: Optional[str] = None


class Event(AccessGridModel):
    """An audit-log entry."""

    type: Optional[str] = None
    timestamp: Optional[str] = None
    user_id: Optional[str] = None
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None
    metadata: Any = None


ProvisionResult = Union[Card, UnifiedAccessPass]


def canonical_json(payload) -> str:
    """
    Serialize a payload to the exact string that is signed and transmitted.

    Models dump in field declaration order with unset (None) fields left out;
    mappings keep their insertion order. A str is taken to be JSON already
    and returned untouched. Output is compact, unsorted and not ASCII-escaped.

    Args:
        payload: AccessGridModel, mapping, JSON string, or None (``{}``)

    Returns:
        JSON string
    """
    if payload is None:
        payload = {}
    if isinstance(payload, str):
        return payload
    if isinstance(payload, BaseModel):
        data = payload.model_dump(mode="json", exclude_none=True)
    else:
        data = to_jsonable_python(payload)
    return json.dumps(data, separators=(',', ':'), ensure_ascii=False)


def resolve_provision_result(document) -> ProvisionResult:
    """
    Pick the result type of a provision response.

    The API carries no type tag. A top-level ``details`` holding a JSON array
    marks a UnifiedAccessPass; anything else (object, missing) is a Card.

    Args:
        document: Parsed JSON response body

    Returns:
        UnifiedAccessPass or Card

    Raises:
        pydantic.ValidationError: If the document does not fit the chosen type
    """
    if isinstance(document, dict) and isinstance(document.get("details"), list):
        return UnifiedAccessPass.model_validate(document)
    return Card.model_validate(document)
