"""
Client configuration options.

Each option is a callable applied to the ``ClientConfig`` under construction.
Options validate their own input and raise a ``ConfigurationError`` subclass
to abort construction. Options touching the transport only set their own
fields on the shared ``TransportConfig`` record, so unrelated settings from
earlier options survive.
"""

from __future__ import annotations

import ssl
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any, Callable, Iterable
from urllib.parse import urlsplit, urlunsplit

from amclient.errors import EndpointRequiredError, InvalidEndpointError, InvalidProxyError
from amclient.logging import get_logger

ALERTS_PATH = "/api/v2/alerts"

TLS10 = ssl.TLSVersion.TLSv1
TLS11 = ssl.TLSVersion.TLSv1_1
TLS12 = ssl.TLSVersion.TLSv1_2
TLS13 = ssl.TLSVersion.TLSv1_3

DEFAULT_MIN_TLS_VERSION = TLS12

PROXY_SCHEMES = frozenset({"http", "https", "socks5", "socks5h"})


@dataclass
class TransportConfig:
    """Settings for the underlying HTTP transport."""

    ca_certificates: list[bytes] = field(default_factory=list)
    min_tls_version: ssl.TLSVersion | None = None
    max_tls_version: ssl.TLSVersion | None = None
    insecure_skip_verify: bool = False
    proxy_url: str | None = None
    timeout: float | None = None


@dataclass
class ClientConfig:
    """Mutable configuration folded by options before the client is built."""

    endpoint: str = ""
    username: str = ""
    password: str = ""
    labels: dict[str, str] = field(default_factory=dict)
    annotations: dict[str, str] = field(default_factory=dict)
    transport: TransportConfig = field(default_factory=TransportConfig)
    logger: Any = field(default_factory=get_logger)


ClientOption = Callable[[ClientConfig], None]


def apply_options(config: ClientConfig, options: Iterable[ClientOption]) -> ClientConfig:
    """Apply options in order. The first failing option aborts the fold."""
    for option in options:
        option(config)
    return config


def with_endpoint(endpoint: str) -> ClientOption:
    """Point the client at an Alertmanager base URL.

    Any path, query or fragment is dropped and ``/api/v2/alerts`` appended.
    """

    def _apply(config: ClientConfig) -> None:
        if not endpoint:
            raise EndpointRequiredError()

        try:
            parts = urlsplit(endpoint)
            _ = parts.port  # ValueError on a malformed port
        except ValueError as exc:
            raise InvalidEndpointError(
                f"invalid Alertmanager config: failed to parse endpoint: {exc}"
            ) from exc
        if not parts.scheme or not parts.hostname:
            raise InvalidEndpointError()

        if parts.path or parts.query or parts.fragment:
            config.logger.debug("stripping_endpoint_path", path=parts.path)

        base = urlunsplit((parts.scheme, parts.netloc, "", "", ""))
        config.endpoint = f"{base}{ALERTS_PATH}"

    return _apply


def with_basic_auth(username: str, password: str) -> ClientOption:
    """Store basic-auth credentials. The header is sent only when both are non-empty."""

    def _apply(config: ClientConfig) -> None:
        config.username = username
        config.password = password

    return _apply


def with_custom_ca(ca_cert: bytes) -> ClientOption:
    """Trust a PEM encoded CA certificate in addition to the system roots."""

    def _apply(config: ClientConfig) -> None:
        # An empty bundle still switches the client to the system trust roots.
        config.transport.ca_certificates.append(bytes(ca_cert))

    return _apply


def with_insecure_skip_verify(insecure_skip_verify: bool) -> ClientOption:
    def _apply(config: ClientConfig) -> None:
        config.transport.insecure_skip_verify = insecure_skip_verify

    return _apply


def with_min_tls_version(version: ssl.TLSVersion) -> ClientOption:
    def _apply(config: ClientConfig) -> None:
        config.transport.min_tls_version = version

    return _apply


def with_max_tls_version(version: ssl.TLSVersion) -> ClientOption:
    def _apply(config: ClientConfig) -> None:
        config.transport.max_tls_version = version

    return _apply


def with_proxy_url(proxy_url: str) -> ClientOption:
    """Route requests through a fixed proxy. An empty string leaves the transport untouched."""

    def _apply(config: ClientConfig) -> None:
        if not proxy_url:
            return

        try:
            parts = urlsplit(proxy_url)
            _ = parts.port
        except ValueError as exc:
            raise InvalidProxyError(f"invalid proxy URL: {exc}") from exc
        if parts.scheme not in PROXY_SCHEMES or not parts.hostname:
            raise InvalidProxyError(
                f"invalid proxy URL: {proxy_url!r} needs one of "
                f"{', '.join(sorted(PROXY_SCHEMES))} and a host"
            )

        config.transport.proxy_url = proxy_url

    return _apply


def with_timeout(timeout: float | timedelta) -> ClientOption:
    """Set the overall request timeout, in seconds.

    Zero disables the timeout. A negative value also disables it; it is stored
    as zero and a warning is logged.
    """

    def _apply(config: ClientConfig) -> None:
        if isinstance(timeout, timedelta):
            seconds = timeout.total_seconds()
        else:
            seconds = float(timeout)
        if seconds < 0:
            config.logger.warning("negative_timeout_disables_limit", timeout=seconds)
            seconds = 0.0
        config.transport.timeout = seconds

    return _apply


def with_base_label(key: str, value: str) -> ClientOption:
    """Add a label merged into every emitted alert."""

    def _apply(config: ClientConfig) -> None:
        if config.labels is None:
            config.labels = {}
        config.labels[key] = value

    return _apply


def with_base_annotation(key: str, value: str) -> ClientOption:
    """Add an annotation merged into every emitted alert."""

    def _apply(config: ClientConfig) -> None:
        if config.annotations is None:
            config.annotations = {}
        config.annotations[key] = value

    return _apply
