"""Adapter interface contracts."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ValidationError

from statushook.domain.errors import MalformedPayloadError
from statushook.domain.models import Event


class AlertSourceAdapter(ABC):
    """Normalize external alert payloads into a canonical Event."""

    payload_model: type[BaseModel]

    @abstractmethod
    def normalize(self, payload: dict[str, Any], now: datetime | None = None) -> Event:
        raise NotImplementedError

    def parse(self, payload: dict[str, Any]):
        try:
            return self.payload_model.model_validate(payload)
        except ValidationError as exc:
            fields = ", ".join(".".join(str(part) for part in err["loc"]) for err in exc.errors())
            raise MalformedPayloadError(f"invalid {self.payload_model.__name__} fields: {fields}") from exc
