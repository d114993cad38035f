"""Request and response models for the webhooks settings and subscriptions API."""

from __future__ import annotations

import re
from dataclasses import dataclass, field, fields, is_dataclass
from datetime import datetime, timezone
from enum import StrEnum
from typing import Any

ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)

_EXCESS_FRACTION = re.compile(r"(\.\d{6})\d+")


def _parse_time(value: Any) -> datetime:
    """Parse an RFC 3339 timestamp, keeping at most microsecond precision."""
    if not isinstance(value, str):
        raise ValueError(f"invalid timestamp: {value!r}")
    return datetime.fromisoformat(_EXCESS_FRACTION.sub(r"\1", value))


def _format_time(moment: datetime) -> str:
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.isoformat().replace("+00:00", "Z")


def _field(key: str, default: Any = None, *, factory=None, omit=False, decode=None) -> Any:
    """Declare a field with its JSON key, omit-when-empty rule and decoder."""
    meta = {"key": key, "omit": omit, "decode": decode}
    if factory is not None:
        return field(default_factory=factory, metadata=meta)
    return field(default=default, metadata=meta)


def _encode(value: Any) -> Any:
    if isinstance(value, datetime):
        return _format_time(value)
    if is_dataclass(value) and not isinstance(value, type):
        return value.to_dict()
    if isinstance(value, list):
        return [_encode(item) for item in value]
    if isinstance(value, dict):
        return dict(value)
    return value


def _to_dict(model: Any) -> dict[str, Any]:
    """Encode a model dataclass as its JSON object."""
    result: dict[str, Any] = {}
    for spec in fields(model):
        value = getattr(model, spec.name)
        if spec.metadata["omit"] and value in (None, "", [], {}):
            continue
        result[spec.metadata["key"]] = _encode(value)
    return result


def _from_dict(cls: type, data: dict[str, Any] | None) -> Any:
    """Build a model dataclass from its JSON object."""
    data = data or {}
    values = {}
    for spec in fields(cls):
        raw = data.get(spec.metadata["key"])
        if raw is not None:
            decode = spec.metadata["decode"]
            values[spec.name] = decode(raw) if decode else raw
    return cls(**values)


def _list_of(model: type):
    return lambda items: [model.from_dict(item) for item in items]


class EventType(StrEnum):
    """Webhook event types."""

    CONTACT_PROPERTY_CHANGE = "contact.propertyChange"
    COMPANY_PROPERTY_CHANGE = "company.propertyChange"
    DEAL_PROPERTY_CHANGE = "deal.propertyChange"
    TICKET_PROPERTY_CHANGE = "ticket.propertyChange"
    PRODUCT_PROPERTY_CHANGE = "product.propertyChange"
    LINE_ITEM_PROPERTY_CHANGE = "line_item.propertyChange"
    CONTACT_CREATION = "contact.creation"
    CONTACT_DELETION = "contact.deletion"
    CONTACT_PRIVACY_DELETION = "contact.privacyDeletion"
    COMPANY_CREATION = "company.creation"
    COMPANY_DELETION = "company.deletion"
    DEAL_CREATION = "deal.creation"
    DEAL_DELETION = "deal.deletion"
    TICKET_CREATION = "ticket.creation"
    TICKET_DELETION = "ticket.deletion"
    PRODUCT_CREATION = "product.creation"
    PRODUCT_DELETION = "product.deletion"
    LINE_ITEM_CREATION = "line_item.creation"
    LINE_ITEM_DELETION = "line_item.deletion"
    CONVERSATION_CREATION = "conversation.creation"
    CONVERSATION_DELETION = "conversation.deletion"
    CONVERSATION_NEW_MESSAGE = "conversation.newMessage"
    CONVERSATION_PRIVACY_DELETION = "conversation.privacyDeletion"
    CONVERSATION_PROPERTY_CHANGE = "conversation.propertyChange"
    CONTACT_MERGE = "contact.merge"
    COMPANY_MERGE = "company.merge"
    DEAL_MERGE = "deal.merge"
    TICKET_MERGE = "ticket.merge"
    PRODUCT_MERGE = "product.merge"
    LINE_ITEM_MERGE = "line_item.merge"
    CONTACT_RESTORE = "contact.restore"
    COMPANY_RESTORE = "company.restore"
    DEAL_RESTORE = "deal.restore"
    TICKET_RESTORE = "ticket.restore"
    PRODUCT_RESTORE = "product.restore"
    LINE_ITEM_RESTORE = "line_item.restore"
    CONTACT_ASSOCIATION_CHANGE = "contact.associationChange"
    COMPANY_ASSOCIATION_CHANGE = "company.associationChange"
    DEAL_ASSOCIATION_CHANGE = "deal.associationChange"
    TICKET_ASSOCIATION_CHANGE = "ticket.associationChange"
    LINE_ITEM_ASSOCIATION_CHANGE = "line_item.associationChange"
    OBJECT_PROPERTY_CHANGE = "object.propertyChange"
    OBJECT_CREATION = "object.creation"
    OBJECT_DELETION = "object.deletion"
    OBJECT_MERGE = "object.merge"
    OBJECT_RESTORE = "object.restore"
    OBJECT_ASSOCIATION_CHANGE = "object.associationChange"


@dataclass
class ThrottlingSettings:
    """Concurrency limits for webhook delivery."""

    max_concurrent_requests: int = _field("maxConcurrentRequests", 0)

    def to_dict(self) -> dict[str, Any]:
        return _to_dict(self)

    @classmethod
    def from_dict(cls, data):
        return _from_dict(cls, data)


def _throttling() -> Any:
    return _field("throttling", factory=ThrottlingSettings, decode=ThrottlingSettings.from_dict)


@dataclass
class SettingsChangeRequest:
    """Input for configuring an app's webhook settings."""

    throttling: ThrottlingSettings = _throttling()
    target_url: str = _field("targetUrl", "")

    def to_dict(self) -> dict[str, Any]:
        return _to_dict(self)

    @classmethod
    def from_dict(cls, data):
        return _from_dict(cls, data)


@dataclass
class SettingsResponse:
    """An app's webhook settings as returned by the API."""

    created_at: datetime = _field("createdAt", ZERO_TIME, decode=_parse_time)
    throttling: ThrottlingSettings = _throttling()
    target_url: str = _field("targetUrl", "")
    updated_at: datetime | None = _field("updatedAt", omit=True, decode=_parse_time)

    def to_dict(self) -> dict[str, Any]:
        return _to_dict(self)

    @classmethod
    def from_dict(cls, data):
        return _from_dict(cls, data)


@dataclass
class SubscriptionCreateRequest:
    """Input for creating a webhook subscription."""

    object_type_id: str = _field("objectTypeId", "", omit=True)
    property_name: str = _field("propertyName", "", omit=True)
    active: bool | None = _field("active", omit=True)
    event_type: str = _field("eventType", "")

    def to_dict(self) -> dict[str, Any]:
        return _to_dict(self)

    @classmethod
    def from_dict(cls, data):
        return _from_dict(cls, data)


@dataclass
class SubscriptionPatchRequest:
    """Input for updating a webhook subscription."""

    active: bool | None = _field("active", omit=True)

    def to_dict(self) -> dict[str, Any]:
        return _to_dict(self)

    @classmethod
    def from_dict(cls, data):
        return _from_dict(cls, data)


@dataclass
class SubscriptionResponse:
    """A single webhook subscription."""

    created_at: datetime = _field("createdAt", ZERO_TIME, decode=_parse_time)
    object_type_id: str = _field("objectTypeId", "", omit=True)
    property_name: str = _field("propertyName", "", omit=True)
    active: bool = _field("active", False)
    event_type: str = _field("eventType", "")
    id: str = _field("id", "")
    updated_at: datetime | None = _field("updatedAt", omit=True, decode=_parse_time)

    def to_dict(self) -> dict[str, Any]:
        return _to_dict(self)

    @classmethod
    def from_dict(cls, data):
        return _from_dict(cls, data)


@dataclass
class SubscriptionListResponse:
    """A list of webhook subscriptions."""

    results: list[SubscriptionResponse] = _field(
        "results", factory=list, decode=_list_of(SubscriptionResponse)
    )

    def to_dict(self) -> dict[str, Any]:
        return _to_dict(self)

    @classmethod
    def from_dict(cls, data):
        return _from_dict(cls, data)


@dataclass
class SubscriptionBatchUpdateRequest:
    """One item of a batch subscription update."""

    active: bool = _field("active", False)
    id: int = _field("id", 0)

    def to_dict(self) -> dict[str, Any]:
        return _to_dict(self)

    @classmethod
    def from_dict(cls, data):
        return _from_dict(cls, data)


@dataclass
class BatchInputSubscriptionBatchUpdateRequest:
    """Input for a batch subscription update."""

    inputs: list[SubscriptionBatchUpdateRequest] = _field(
        "inputs", factory=list, decode=_list_of(SubscriptionBatchUpdateRequest)
    )

    def to_dict(self) -> dict[str, Any]:
        return _to_dict(self)

    @classmethod
    def from_dict(cls, data):
        return _from_dict(cls, data)


@dataclass
class BatchResponseSubscriptionResponse:
    """Result of a batch subscription update."""

    completed_at: datetime = _field("completedAt", ZERO_TIME, decode=_parse_time)
    requested_at: datetime | None = _field("requestedAt", omit=True, decode=_parse_time)
    started_at: datetime = _field("startedAt", ZERO_TIME, decode=_parse_time)
    links: dict[str, str] = _field("links", factory=dict, omit=True, decode=dict)
    results: list[SubscriptionResponse] = _field(
        "results", factory=list, decode=_list_of(SubscriptionResponse)
    )
    status: str = _field("status", "")

    def to_dict(self) -> dict[str, Any]:
        return _to_dict(self)

    @classmethod
    def from_dict(cls, data):
        return _from_dict(cls, data)