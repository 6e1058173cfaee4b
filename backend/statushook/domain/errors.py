"""Relay error taxonomy."""

from fastapi import status


class RelayError(Exception):
    """Base error terminating a relay request with a plain-text response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class AuthError(RelayError):
    """Missing, invalid or expired token."""

    status_code = status.HTTP_401_UNAUTHORIZED


class UnsupportedProviderError(RelayError):
    """Token subject does not name a known provider."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, service: str) -> None:
        super().__init__("Unknown service")
        self.service = service


class MethodNotAllowedError(RelayError):
    status_code = status.HTTP_405_METHOD_NOT_ALLOWED

    def __init__(self) -> None:
        super().__init__("Method Not Allowed")


class MalformedPayloadError(RelayError):
    """Body is not JSON or lacks the fields the provider format requires."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, reason: str) -> None:
        super().__init__(f"Malformed payload: {reason}")
        self.reason = reason


class DeliveryError(RelayError):
    """Chat webhook call failed."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
