"""Chat webhook notifier."""

import logging
from typing import Any

import httpx

from statushook.config import Settings
from statushook.domain.errors import DeliveryError
from statushook.domain.models import Event, EventState
from statushook.utils.redaction import redact_text

logger = logging.getLogger(__name__)


def describe(event: Event) -> str:
    if event.state == EventState.down:
        return f"The service is unreachable for longer than {event.minutes} minute(s)"
    return f"The service returned to online state after {event.minutes} minute(s)"


class ChatNotifier:
    """Render events as Discord-style embeds and post them to the chat webhook."""

    def __init__(self, settings: Settings, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self.settings = settings
        self.transport = transport

    def render(self, event: Event) -> dict[str, Any]:
        embed: dict[str, Any] = {
            "title": event.name,
            "description": describe(event),
            "timestamp": event.date.isoformat(),
        }
        if self.settings.status_url:
            embed["url"] = self.settings.status_url
        if self.settings.image_base_url:
            image = "service-down.png" if event.state == EventState.down else "service-up.png"
            embed["thumbnail"] = {"url": f"{self.settings.image_base_url.rstrip('/')}/{image}"}
        return {"embeds": [embed], "tts": False}

    async def send(self, event: Event) -> None:
        """Post one notification. Any failure raises DeliveryError; nothing is retried."""

        if not self.settings.webhook_url:
            raise DeliveryError("chat webhook URL is not configured")

        message = self.render(event)
        async with httpx.AsyncClient(
            transport=self.transport,
            timeout=self.settings.webhook_timeout_seconds,
        ) as client:
            try:
                response = await client.post(self.settings.webhook_url, json=message)
                response.raise_for_status()
            except httpx.HTTPStatusError as exc:
                detail = exc.response.text or str(exc)
                logger.error("chat webhook rejected event id=%s status=%s", event.id, exc.response.status_code)
                raise DeliveryError(redact_text(detail)) from exc
            except httpx.HTTPError as exc:
                logger.error("chat webhook unreachable for event id=%s: %s", event.id, redact_text(str(exc)))
                raise DeliveryError(redact_text(str(exc)) or exc.__class__.__name__) from exc
        logger.info("relayed %s event id=%s state=%s", event.source.value, event.id, event.state.value)
