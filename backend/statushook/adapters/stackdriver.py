"""Stackdriver incident adapter."""

from datetime import datetime, timezone
from typing import Any

from statushook.adapters.interfaces import AlertSourceAdapter
from statushook.domain.errors import MalformedPayloadError
from statushook.domain.models import Event, EventState, Provider, StackdriverPayload
from statushook.utils.time_windows import from_epoch


class StackdriverAdapter(AlertSourceAdapter):
    """Normalize Stackdriver incident notifications.

    Open incidents report the time elapsed until ``now``, so their duration
    grows with every notification.
    """

    payload_model = StackdriverPayload

    def normalize(self, payload: dict[str, Any], now: datetime | None = None) -> Event:
        incident = self.parse(payload).incident
        try:
            started_at = from_epoch(incident.started_at)
            ended_at = from_epoch(incident.ended_at) if incident.ended_at is not None else None
        except (ValueError, OverflowError, OSError) as exc:
            raise MalformedPayloadError(f"invalid Stackdriver timestamp: {exc}") from exc

        if incident.state == "closed":
            if ended_at is None:
                raise MalformedPayloadError("closed Stackdriver incident without ended_at")
            duration = ended_at - started_at
        else:
            duration = (now or datetime.now(timezone.utc)) - started_at

        return Event(
            source=Provider.stackdriver,
            id=incident.incident_id,
            name=incident.policy_name,
            state=EventState.down if incident.state == "open" else EventState.up,
            duration=duration,
            date=ended_at or started_at,
        )
