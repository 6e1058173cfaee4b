"""Domain schemas and enums."""

from datetime import datetime, timedelta
from enum import Enum

from pydantic import BaseModel, ConfigDict

from statushook.utils.time_windows import whole_minutes


class Provider(str, Enum):
    """Alert sources a token subject may name."""

    apex = "apex"
    stackdriver = "stackdriver"


class EventState(str, Enum):
    up = "up"
    down = "down"


class Event(BaseModel):
    """Canonical event relayed to the chat webhook."""

    source: Provider
    id: str
    name: str
    state: EventState
    duration: timedelta
    date: datetime

    @property
    def minutes(self) -> int:
        return whole_minutes(self.duration)


class _ProviderPayload(BaseModel):
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)


class ApexAlert(_ProviderPayload):
    id: str
    window_duration: int


class ApexCheck(_ProviderPayload):
    name: str


class ApexAlertPayload(_ProviderPayload):
    """Apex check alert webhook body."""

    state: str
    triggered_at: str
    resolved_at: str | None = None
    alert: ApexAlert
    check: ApexCheck


class StackdriverIncident(_ProviderPayload):
    incident_id: str
    policy_name: str
    state: str
    started_at: int
    ended_at: int | None = None


class StackdriverPayload(_ProviderPayload):
    """Stackdriver incident notification body."""

    incident: StackdriverIncident
