"""FastAPI app entrypoint."""

import logging

import httpx
from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from statushook.api.routes import router
from statushook.config import Settings, get_settings
from statushook.domain.errors import MethodNotAllowedError, RelayError
from statushook.services.notifier import ChatNotifier
from statushook.utils.redaction import redact_text

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, transport: httpx.AsyncBaseTransport | None = None) -> FastAPI:
    """Build the relay app around one settings object loaded at startup."""

    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    # httpx logs every request URL at INFO, and the webhook URL path holds its secret
    for name in ("httpx", "httpcore"):
        logging.getLogger(name).setLevel(logging.WARNING)

    app = FastAPI(title="Status Webhook Relay")
    app.state.settings = settings
    app.state.notifier = ChatNotifier(settings, transport=transport)
    app.include_router(router)

    @app.exception_handler(RelayError)
    async def relay_error_handler(request: Request, exc: RelayError) -> PlainTextResponse:
        logger.warning(
            "%s %s rejected with %s: %s",
            request.method,
            redact_text(str(request.url)),
            exc.status_code,
            redact_text(exc.message),
        )
        headers = {}
        if request.method == "POST":
            headers["Access-Control-Allow-Origin"] = settings.allowed_origin
        return PlainTextResponse(exc.message, status_code=exc.status_code, headers=headers)

    @app.exception_handler(StarletteHTTPException)
    async def method_not_allowed_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            return await relay_error_handler(request, MethodNotAllowedError())
        return await http_exception_handler(request, exc)

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    return app


app = create_app()
