"""Alert normalization service."""

from datetime import datetime
from typing import Any

from statushook.adapters.apex import ApexAdapter
from statushook.adapters.interfaces import AlertSourceAdapter
from statushook.adapters.stackdriver import StackdriverAdapter
from statushook.domain.errors import UnsupportedProviderError
from statushook.domain.models import Event, Provider

ADAPTERS: dict[str, type[AlertSourceAdapter]] = {
    Provider.apex.value: ApexAdapter,
    Provider.stackdriver.value: StackdriverAdapter,
}


def adapter_for(service: str) -> AlertSourceAdapter:
    """Return the adapter registered for a token subject."""

    try:
        return ADAPTERS[service]()
    except KeyError:
        raise UnsupportedProviderError(service) from None


def normalize_payload(service: str, payload: dict[str, Any], now: datetime | None = None) -> Event:
    """Normalize a provider payload into a canonical event."""

    return adapter_for(service).normalize(payload, now=now)
