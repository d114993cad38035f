# hubhooks

Manage the webhook settings and event subscriptions of a HubSpot app.

`hubhooks` builds the API paths and turns request models into JSON bodies.
It also turns JSON responses back into dataclasses. The HTTP calls go
through a *requester*.

## Installation

```
pip install hubhooks
```

To run the test suite:

```
pip install "hubhooks[test]"
pytest
```

## The requester

`hubhooks.service.Requester` sends JSON requests with the standard library's
`urllib`:

```python
from hubhooks.service import Requester, WebhooksService

requester = Requester("https://api.example.com", access_token="token", timeout=30.0)
service = WebhooksService(requester)
```

The requester behaves as follows:

- Each path is appended to `base_url`.
- When an access token is set, it is sent as a `Bearer` `Authorization` header.
- The decoded JSON response is returned, or `None` when the body is empty.
- An HTTP error status raises `urllib.error.HTTPError`.

The services call only these methods on the requester:

- `get(path, query)`
- `post(path, body)`
- `patch(path, body)`
- `delete(path)`

Any object with the same methods can take the requester's place, for example
one that adds its own authentication or retries. `Requester` also has
`put(path, body)`.

## Settings

```python
from hubhooks.models import SettingsChangeRequest, ThrottlingSettings

settings = service.settings.configure(
    12345,
    SettingsChangeRequest(
        target_url="https://example.com/webhook",
        throttling=ThrottlingSettings(max_concurrent_requests=10),
    ),
)
print(settings.target_url, settings.throttling.max_concurrent_requests)

current = service.settings.get_all(12345)
service.settings.clear(12345)
```

## Subscriptions

```python
from hubhooks.models import (
    BatchInputSubscriptionBatchUpdateRequest,
    EventType,
    SubscriptionBatchUpdateRequest,
    SubscriptionCreateRequest,
    SubscriptionPatchRequest,
)

created = service.subscriptions.create(
    12345, SubscriptionCreateRequest(event_type=EventType.CONTACT_CREATION)
)

for sub in service.subscriptions.get_all(12345).results:
    print(sub.id, sub.event_type, sub.active)

sub = service.subscriptions.get_by_id(100, 12345)
service.subscriptions.update(100, 12345, SubscriptionPatchRequest(active=False))
service.subscriptions.archive(100, 12345)

batch = service.subscriptions.batch_update(
    12345,
    BatchInputSubscriptionBatchUpdateRequest(
        inputs=[
            SubscriptionBatchUpdateRequest(id=1, active=True),
            SubscriptionBatchUpdateRequest(id=2, active=False),
        ]
    ),
)
print(batch.status, len(batch.results))
```

App and subscription identifiers must be integers. They are formatted into
paths such as `/webhooks/v3/12345/subscriptions/100`.

## Models

Every model in `hubhooks.models` is a dataclass with two conversion methods:

- `to_dict()` produces the JSON object with camelCase keys.
  - Optional fields that are empty, such as `updated_at`, `active` on a patch, or `object_type_id`, are left out.
  - Timestamps are written in ISO 8601 form, with `Z` for UTC.
- `from_dict()` builds the model from a decoded response.
  - Missing keys keep their defaults.
  - Timestamps are parsed into `datetime` objects.

`EventType` is a string enumeration of the webhook event types, such as
`EventType.CONTACT_CREATION` (`"contact.creation"`) and
`EventType.DEAL_PROPERTY_CHANGE` (`"deal.propertyChange"`).

## What it does not do

`hubhooks` only configures where and for which events webhooks are sent. It
does not:

- run a server that receives webhook deliveries;
- verify the signatures of deliveries;
- retry failed requests or apply rate limits.