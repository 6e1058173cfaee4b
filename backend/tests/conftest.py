import httpx
import pytest

from statushook.config import Settings, get_settings
from statushook.main import create_app

SECRET = "test-signing-secret-0123456789abcdef"
WEBHOOK_URL = "https://chat.example.test/api/webhooks/1/abc"

_ENV_KEYS = [
    "JWT_SECRET",
    "SIGNING_SECRET",
    "CORS_ALLOW_ORIGIN",
    "ALLOWED_ORIGIN",
    "DISCORD_URL",
    "WEBHOOK_URL",
    "STATUS_URL",
    "IMAGE_URL",
    "IMAGE_BASE_URL",
]


@pytest.fixture(autouse=True)
def _reset_settings_cache(monkeypatch):
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    return Settings(
        jwt_secret=SECRET,
        cors_allow_origin="https://status.example.test",
        discord_url=WEBHOOK_URL,
        status_url="https://status.example.test",
        image_url="https://cdn.example.test/img/",
    )


class WebhookRecorder:
    """Mock chat webhook that records posted messages."""

    def __init__(self, status_code: int = 204, fail: bool = False) -> None:
        self.status_code = status_code
        self.fail = fail
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.fail:
            raise httpx.ConnectError("connection refused", request=request)
        if self.status_code >= 400:
            return httpx.Response(self.status_code, text="webhook rejected message")
        return httpx.Response(self.status_code)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


@pytest.fixture
def webhook() -> WebhookRecorder:
    return WebhookRecorder()


@pytest.fixture
def app(settings, webhook):
    return create_app(settings, transport=webhook.transport)
