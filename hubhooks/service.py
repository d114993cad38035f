"""Clients for the webhooks settings and subscriptions endpoints."""

from __future__ import annotations

import json
import urllib.request
from typing import Any, Mapping
from urllib.parse import urlencode

from .models import (
    BatchInputSubscriptionBatchUpdateRequest,
    BatchResponseSubscriptionResponse,
    SettingsChangeRequest,
    SettingsResponse,
    SubscriptionCreateRequest,
    SubscriptionListResponse,
    SubscriptionPatchRequest,
    SubscriptionResponse,
)

WEBHOOKS_V3_PATH = "/webhooks/v3"

_NO_BODY = object()


class Requester:
    """Sends JSON requests to the API and returns decoded JSON responses.

    HTTP error statuses raise ``urllib.error.HTTPError``.
    """

    def __init__(self, base_url: str, access_token: str | None = None, *, timeout: float = 30.0):
        self.base_url = base_url.rstrip("/")
        self.access_token = access_token
        self.timeout = timeout

    def _request(
        self,
        method: str,
        path: str,
        query: Mapping[str, Any] | None = None,
        body: Any = _NO_BODY,
    ) -> Any:
        url = self.base_url + path
        if query:
            url += "?" + urlencode(query, doseq=True)
        headers = {"Accept": "application/json"}
        data = None
        if body is not _NO_BODY:
            data = json.dumps(body).encode("utf-8")
            headers["Content-Type"] = "application/json"
        if self.access_token:
            headers["Authorization"] = f"Bearer {self.access_token}"
        request = urllib.request.Request(url, data=data, headers=headers, method=method)
        with urllib.request.urlopen(request, timeout=self.timeout) as response:
            raw = response.read()
        return json.loads(raw) if raw else None

    def get(self, path: str, query: Mapping[str, Any] | None = None) -> Any:
        return self._request("GET", path, query=query)

    def post(self, path: str, body: Any) -> Any:
        return self._request("POST", path, body=body)

    def put(self, path: str, body: Any) -> Any:
        return self._request("PUT", path, body=body)

    def patch(self, path: str, body: Any) -> Any:
        return self._request("PATCH", path, body=body)

    def delete(self, path: str) -> None:
        self._request("DELETE", path)


def _body(request: Any) -> Any:
    return None if request is None else request.to_dict()


class SettingsService:
    """Manages an app's webhook settings."""

    def __init__(self, requester: Requester):
        self._requester = requester

    @staticmethod
    def _path(app_id: int) -> str:
        return f"{WEBHOOKS_V3_PATH}/{app_id:d}/settings"

    def get_all(self, app_id: int) -> SettingsResponse:
        """Return the current webhook settings of an app."""
        return SettingsResponse.from_dict(self._requester.get(self._path(app_id), None))

    def configure(self, app_id: int, request: SettingsChangeRequest) -> SettingsResponse:
        """Replace the webhook settings of an app."""
        data = self._requester.post(self._path(app_id), _body(request))
        return SettingsResponse.from_dict(data)

    def clear(self, app_id: int) -> None:
        """Remove the webhook settings of an app."""
        self._requester.delete(self._path(app_id))


class SubscriptionsService:
    """Manages an app's webhook event subscriptions."""

    def __init__(self, requester: Requester):
        self._requester = requester

    @staticmethod
    def _path(app_id: int, suffix: str = "") -> str:
        return f"{WEBHOOKS_V3_PATH}/{app_id:d}/subscriptions{suffix}"

    def get_all(self, app_id: int) -> SubscriptionListResponse:
        """Return every subscription of an app."""
        return SubscriptionListResponse.from_dict(self._requester.get(self._path(app_id), None))

    def create(self, app_id: int, request: SubscriptionCreateRequest) -> SubscriptionResponse:
        """Create a subscription for an app."""
        data = self._requester.post(self._path(app_id), _body(request))
        return SubscriptionResponse.from_dict(data)

    def get_by_id(self, subscription_id: int, app_id: int) -> SubscriptionResponse:
        """Return one subscription."""
        path = self._path(app_id, f"/{subscription_id:d}")
        return SubscriptionResponse.from_dict(self._requester.get(path, None))

    def update(
        self, subscription_id: int, app_id: int, request: SubscriptionPatchRequest
    ) -> SubscriptionResponse:
        """Update a subscription's active flag."""
        path = self._path(app_id, f"/{subscription_id:d}")
        return SubscriptionResponse.from_dict(self._requester.patch(path, _body(request)))

    def archive(self, subscription_id: int, app_id: int) -> None:
        """Delete a subscription."""
        self._requester.delete(self._path(app_id, f"/{subscription_id:d}"))

    def batch_update(
        self, app_id: int, request: BatchInputSubscriptionBatchUpdateRequest
    ) -> BatchResponseSubscriptionResponse:
        """Update several subscriptions in one request."""
        data = self._requester.post(self._path(app_id, "/batch/update"), _body(request))
        return BatchResponseSubscriptionResponse.from_dict(data)


class WebhooksService:
    """Entry point to the webhooks APIs."""

    def __init__(self, requester: Requester):
        self.settings = SettingsService(requester)
        self.subscriptions = SubscriptionsService(requester)