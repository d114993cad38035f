from datetime import datetime, timedelta, timezone

import pytest

from hubhooks.models import (
    BatchInputSubscriptionBatchUpdateRequest,
    BatchResponseSubscriptionResponse,
    EventType,
    SettingsChangeRequest,
    SettingsResponse,
    SubscriptionBatchUpdateRequest,
    SubscriptionCreateRequest,
    SubscriptionListResponse,
    SubscriptionPatchRequest,
    SubscriptionResponse,
    ThrottlingSettings,
)

MOMENT = datetime(2024, 5, 6, 7, 8, 9, 123456, tzinfo=timezone.utc)


def test_event_type_values_match_wire_strings():
    assert EventType.CONTACT_CREATION == "contact.creation"
    assert EventType.LINE_ITEM_PROPERTY_CHANGE == "line_item.propertyChange"
    assert EventType.CONVERSATION_PRIVACY_DELETION == "conversation.privacyDeletion"
    assert EventType("object.associationChange") is EventType.OBJECT_ASSOCIATION_CHANGE


def test_throttling_round_trip():
    settings = ThrottlingSettings(max_concurrent_requests=10)
    assert settings.to_dict() == {"maxConcurrentRequests": 10}
    assert ThrottlingSettings.from_dict(settings.to_dict()) == settings


def test_settings_change_request_round_trip():
    request = SettingsChangeRequest(
        target_url="https://example.com/webhook",
        throttling=ThrottlingSettings(max_concurrent_requests=5),
    )
    data = request.to_dict()
    assert data["targetUrl"] == "https://example.com/webhook"
    assert data["throttling"] == {"maxConcurrentRequests": 5}
    assert SettingsChangeRequest.from_dict(data) == request


def test_settings_response_omits_missing_updated_at():
    response = SettingsResponse(target_url="https://example.com/webhook", created_at=MOMENT)
    data = response.to_dict()
    assert "updatedAt" not in data
    assert SettingsResponse.from_dict(data) == response


def test_settings_response_keeps_updated_at():
    later = MOMENT + timedelta(hours=1)
    response = SettingsResponse(created_at=MOMENT, updated_at=later)
    restored = SettingsResponse.from_dict(response.to_dict())
    assert restored.updated_at == later


def test_zero_time_default_serialises_like_unset_timestamp():
    assert SettingsResponse().to_dict()["createdAt"] == "0001-01-01T00:00:00Z"


def test_timestamp_with_nanoseconds_is_truncated():
    response = SubscriptionResponse.from_dict(
        {"id": "1", "createdAt": "2024-05-06T07:08:09.123456789Z"}
    )
    assert response.created_at == MOMENT


def test_timestamp_with_offset_keeps_instant():
    response = SubscriptionResponse.from_dict({"createdAt": "2024-05-06T09:08:09.123456+02:00"})
    assert response.created_at == MOMENT


def test_invalid_timestamp_raises():
    with pytest.raises(ValueError):
        SubscriptionResponse.from_dict({"createdAt": "yesterday"})


def test_subscription_create_request_omits_empty_fields():
    request = SubscriptionCreateRequest(event_type=EventType.CONTACT_CREATION)
    assert request.to_dict() == {"eventType": "contact.creation"}


def test_subscription_create_request_round_trip_with_all_fields():
    request = SubscriptionCreateRequest(
        event_type=EventType.CONTACT_PROPERTY_CHANGE,
        object_type_id="0-1",
        property_name="email",
        active=False,
    )
    data = request.to_dict()
    assert data["active"] is False
    assert SubscriptionCreateRequest.from_dict(data) == request


def test_subscription_patch_request_distinguishes_unset_from_false():
    assert SubscriptionPatchRequest().to_dict() == {}
    assert SubscriptionPatchRequest(active=False).to_dict() == {"active": False}
    assert SubscriptionPatchRequest.from_dict({}).active is None


def test_subscription_list_round_trip():
    listing = SubscriptionListResponse(
        results=[
            SubscriptionResponse(id="1", event_type=EventType.CONTACT_CREATION, active=True, created_at=MOMENT),
            SubscriptionResponse(id="2", event_type=EventType.DEAL_CREATION, created_at=MOMENT),
        ]
    )
    restored = SubscriptionListResponse.from_dict(listing.to_dict())
    assert restored == listing
    assert restored.results[0].event_type == EventType.CONTACT_CREATION


def test_subscription_list_null_results_become_empty():
    assert SubscriptionListResponse.from_dict({"results": None}).results == []


def test_batch_input_round_trip():
    batch = BatchInputSubscriptionBatchUpdateRequest(
        inputs=[
            SubscriptionBatchUpdateRequest(id=1, active=True),
            SubscriptionBatchUpdateRequest(id=2, active=False),
        ]
    )
    data = batch.to_dict()
    assert data["inputs"][0] == {"active": True, "id": 1}
    assert BatchInputSubscriptionBatchUpdateRequest.from_dict(data) == batch


def test_batch_response_round_trip_and_omissions():
    response = BatchResponseSubscriptionResponse(
        status="COMPLETE",
        started_at=MOMENT,
        completed_at=MOMENT,
        results=[SubscriptionResponse(id="1", active=True, created_at=MOMENT)],
    )
    data = response.to_dict()
    assert "links" not in data
    assert "requestedAt" not in data
    assert BatchResponseSubscriptionResponse.from_dict(data) == response


def test_batch_response_keeps_links_and_requested_at():
    response = BatchResponseSubscriptionResponse(
        status="COMPLETE",
        requested_at=MOMENT,
        links={"self": "https://example.com/batch"},
    )
    restored = BatchResponseSubscriptionResponse.from_dict(response.to_dict())
    assert restored.links == {"self": "https://example.com/batch"}
    assert restored.requested_at == MOMENT