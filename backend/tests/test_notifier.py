import asyncio
import json
from datetime import datetime, timedelta, timezone

import pytest

from statushook.config import Settings
from statushook.domain.errors import DeliveryError
from statushook.domain.models import Event, EventState, Provider
from statushook.services.notifier import ChatNotifier

from conftest import WEBHOOK_URL, WebhookRecorder


def _event(state: EventState, minutes: int = 15) -> Event:
    return Event(
        source=Provider.apex,
        id="a1",
        name="API",
        state=state,
        duration=timedelta(minutes=minutes),
        date=datetime(2020, 1, 1, 0, 10, tzinfo=timezone.utc),
    )


def test_render_down_event(settings) -> None:
    message = ChatNotifier(settings).render(_event(EventState.down, minutes=5))

    assert message["tts"] is False
    embed = message["embeds"][0]
    assert embed["title"] == "API"
    assert embed["description"] == "The service is unreachable for longer than 5 minute(s)"
    assert embed["timestamp"] == "2020-01-01T00:10:00+00:00"
    assert embed["url"] == "https://status.example.test"
    assert embed["thumbnail"] == {"url": "https://cdn.example.test/img/service-down.png"}


def test_render_up_event(settings) -> None:
    embed = ChatNotifier(settings).render(_event(EventState.up))["embeds"][0]

    assert embed["description"] == "The service returned to online state after 15 minute(s)"
    assert embed["thumbnail"]["url"].endswith("/service-up.png")


def test_render_without_optional_urls() -> None:
    embed = ChatNotifier(Settings(discord_url=WEBHOOK_URL)).render(_event(EventState.up))["embeds"][0]

    assert "thumbnail" not in embed
    assert "url" not in embed


def test_send_posts_exactly_once(settings) -> None:
    webhook = WebhookRecorder()
    notifier = ChatNotifier(settings, transport=webhook.transport)

    asyncio.run(notifier.send(_event(EventState.down)))

    assert len(webhook.requests) == 1
    request = webhook.requests[0]
    assert request.method == "POST"
    assert str(request.url) == WEBHOOK_URL
    assert json.loads(request.content)["embeds"][0]["title"] == "API"


def test_send_raises_on_rejected_message(settings) -> None:
    webhook = WebhookRecorder(status_code=400)
    notifier = ChatNotifier(settings, transport=webhook.transport)

    with pytest.raises(DeliveryError, match="webhook rejected message"):
        asyncio.run(notifier.send(_event(EventState.down)))
    assert len(webhook.requests) == 1


def test_send_raises_on_transport_failure_without_retry(settings) -> None:
    webhook = WebhookRecorder(fail=True)
    notifier = ChatNotifier(settings, transport=webhook.transport)

    with pytest.raises(DeliveryError, match="connection refused"):
        asyncio.run(notifier.send(_event(EventState.up)))
    assert len(webhook.requests) == 1


def test_send_requires_webhook_url() -> None:
    with pytest.raises(DeliveryError, match="not configured"):
        asyncio.run(ChatNotifier(Settings()).send(_event(EventState.up)))
