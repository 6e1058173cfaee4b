"""FastAPI routes."""

import json
import logging

from fastapi import APIRouter, Request, Response, status

from statushook.config import Settings
from statushook.domain.errors import MalformedPayloadError, MethodNotAllowedError
from statushook.services.normalization import normalize_payload
from statushook.services.security import service_from_token

logger = logging.getLogger(__name__)

router = APIRouter()

PREFLIGHT_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST",
    "Access-Control-Allow-Headers": "Content-Type",
    "Access-Control-Max-Age": "3600",
}


def _settings(request: Request) -> Settings:
    return request.app.state.settings


async def _read_json(request: Request) -> dict:
    body = await request.body()
    try:
        data = json.loads(body)
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise MalformedPayloadError(f"body is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise MalformedPayloadError("body must be a JSON object")
    return data


@router.options("/")
def preflight() -> Response:
    return Response(status_code=status.HTTP_204_NO_CONTENT, headers=PREFLIGHT_HEADERS)


@router.post("/")
async def relay_alert(request: Request, token: str | None = None) -> Response:
    """Verify the token, normalize the provider payload and post it to chat."""

    settings = _settings(request)
    service = service_from_token(token, settings)
    payload = await _read_json(request)
    event = normalize_payload(service, payload)
    logger.debug("normalized %s event id=%s state=%s minutes=%s", service, event.id, event.state.value, event.minutes)
    await request.app.state.notifier.send(event)
    return Response(
        status_code=status.HTTP_200_OK,
        headers={"Access-Control-Allow-Origin": settings.allowed_origin},
    )


@router.api_route("/", methods=["GET", "PUT", "PATCH", "DELETE"], include_in_schema=False)
def method_not_allowed() -> Response:
    raise MethodNotAllowedError()
