"""Custom exception classes for structured error handling."""

from typing import Any


class LingoRelayError(Exception):
    """Base exception for all LingoRelay errors."""

    def __init__(self, code: str, message: str, status_code: int = 500) -> None:
        self.code = code
        self.message = message
        self.status_code = status_code
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {"error": {"code": self.code, "message": self.message}}


class ProviderError(LingoRelayError):
    """A single provider call failed: transport, timeout, status or malformed body."""

    def __init__(
        self, message: str = "Translation provider call failed", provider: str | None = None
    ) -> None:
        self.provider = provider
        super().__init__(code="PROVIDER_ERROR", message=message, status_code=502)


class ProviderNotConfiguredError(ProviderError):
    def __init__(
        self, message: str = "Translation provider is not configured", provider: str | None = None
    ) -> None:
        super().__init__(message=message, provider=provider)
        self.code = "PROVIDER_NOT_CONFIGURED"


class InvalidPairError(LingoRelayError):
    def __init__(self, message: str = "Unsupported language code") -> None:
        super().__init__(code="INVALID_PAIR", message=message, status_code=400)


class PairNotFoundError(LingoRelayError):
    def __init__(self, message: str = "No language pair configured for user") -> None:
        super().__init__(code="PAIR_NOT_FOUND", message=message, status_code=404)


class InvalidSignatureError(LingoRelayError):
    def __init__(self, message: str = "Invalid or missing webhook signature") -> None:
        super().__init__(code="INVALID_SIGNATURE", message=message, status_code=401)


class MessagingError(LingoRelayError):
    def __init__(self, message: str = "Reply delivery failed") -> None:
        super().__init__(code="MESSAGING_ERROR", message=message, status_code=502)


class StoreConnectionError(LingoRelayError):
    def __init__(self, message: str = "Pair store connection failed") -> None:
        super().__init__(code="STORE_CONNECTION_ERROR", message=message, status_code=503)
