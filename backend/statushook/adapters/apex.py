"""Apex check alert adapter."""

from datetime import datetime, timedelta
from typing import Any

from statushook.adapters.interfaces import AlertSourceAdapter
from statushook.domain.errors import MalformedPayloadError
from statushook.domain.models import ApexAlertPayload, Event, EventState, Provider
from statushook.utils.time_windows import minutes_between, parse_timestamp


class ApexAdapter(AlertSourceAdapter):
    """Normalize Apex alert webhooks.

    ``window_duration`` is the detection window in minutes that elapsed before
    the alert fired, so a resolved alert reports the elapsed trigger-to-resolve
    minutes plus that window.
    """

    payload_model = ApexAlertPayload

    def normalize(self, payload: dict[str, Any], now: datetime | None = None) -> Event:
        data = self.parse(payload)
        try:
            triggered_at = parse_timestamp(data.triggered_at)
            resolved_at = parse_timestamp(data.resolved_at) if data.resolved_at else None
        except ValueError as exc:
            raise MalformedPayloadError(f"invalid Apex timestamp: {exc}") from exc

        minutes = data.alert.window_duration
        if data.state == "resolved":
            if resolved_at is None:
                raise MalformedPayloadError("resolved Apex alert without resolved_at")
            minutes += minutes_between(triggered_at, resolved_at)

        try:
            duration = timedelta(minutes=minutes)
        except OverflowError as exc:
            raise MalformedPayloadError(f"Apex window_duration out of range: {minutes}") from exc

        return Event(
            source=Provider.apex,
            id=data.alert.id,
            name=data.check.name,
            state=EventState.down if data.state == "triggered" else EventState.up,
            duration=duration,
            date=resolved_at or triggered_at,
        )
