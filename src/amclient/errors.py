from __future__ import annotations


class AlertmanagerError(Exception):
    """Base class for all errors raised by amclient."""


class ConfigurationError(AlertmanagerError, ValueError):
    """Invalid client configuration. Raised at construction time, never retryable."""


class EndpointRequiredError(ConfigurationError):
    """Raised when no Alertmanager endpoint is configured."""

    def __init__(self, message: str = "invalid Alertmanager config: endpoint required") -> None:
        super().__init__(message)


class InvalidEndpointError(ConfigurationError):
    """Raised when the endpoint cannot be parsed or lacks a scheme or host."""

    def __init__(
        self,
        message: str = "invalid Alertmanager config: endpoint scheme and host are required",
    ) -> None:
        super().__init__(message)


class InvalidProxyError(ConfigurationError):
    """Raised when a proxy URL cannot be used."""


class InvalidTLSVersionError(ConfigurationError):
    """Raised when a TLS version string is outside the allowed set."""


class AlertmanagerTransportError(AlertmanagerError):
    """The request never produced a response (DNS, TLS, timeout, refused)."""

    def __init__(self, endpoint: str, cause: Exception) -> None:
        super().__init__(f"failed to post alert to {endpoint}: {cause}")
        self.endpoint = endpoint


class EmissionFailedError(AlertmanagerError):
    """Alertmanager answered with a status other than 200."""

    def __init__(self, endpoint: str, status_code: int, body: str = "") -> None:
        super().__init__(f"emission failed: HTTP {status_code} from {endpoint}")
        self.endpoint = endpoint
        self.status_code = status_code
        self.body = body
