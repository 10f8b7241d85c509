"""
Convenience constructors.

Both entry points expand flat configuration into the same option list that
``AlertmanagerClient`` accepts directly.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from amclient.client import AlertmanagerClient
from amclient.config.settings import DEFAULT_TIMEOUT_SECONDS, AlertmanagerSettings, parse_tls_version
from amclient.errors import ConfigurationError, EndpointRequiredError, InvalidTLSVersionError
from amclient.options import (
    ClientOption,
    with_basic_auth,
    with_custom_ca,
    with_endpoint,
    with_insecure_skip_verify,
    with_max_tls_version,
    with_min_tls_version,
    with_proxy_url,
    with_timeout,
)

_TRUE_VALUES = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_VALUES = frozenset({"0", "f", "F", "FALSE", "false", "False"})


def settings_to_options(settings: AlertmanagerSettings) -> list[ClientOption]:
    """Translate enabled settings into client options, validating as it goes."""
    if not settings.url:
        raise ConfigurationError("alertmanager URL must be provided when enabled")

    options: list[ClientOption] = [
        with_endpoint(settings.url),
        with_timeout(settings.timeout or DEFAULT_TIMEOUT_SECONDS),
    ]

    if settings.username and settings.password:
        options.append(with_basic_auth(settings.username, settings.password))
    elif settings.username or settings.password:
        raise ConfigurationError("both basic auth username and password must be provided together")

    if settings.tls_ca_cert_path:
        try:
            ca_cert = Path(settings.tls_ca_cert_path).read_bytes()
        except OSError as exc:
            raise ConfigurationError(f"failed to read CA cert: {exc}") from exc
        options.append(with_custom_ca(ca_cert))

    if settings.tls_insecure_skip_verify:
        options.append(with_insecure_skip_verify(True))

    if settings.proxy_url:
        options.append(with_proxy_url(settings.proxy_url))

    if settings.tls_min_version:
        try:
            options.append(with_min_tls_version(parse_tls_version(settings.tls_min_version)))
        except InvalidTLSVersionError as exc:
            raise InvalidTLSVersionError(f"invalid TLS min version: {exc}") from exc

    if settings.tls_max_version:
        try:
            options.append(with_max_tls_version(parse_tls_version(settings.tls_max_version)))
        except InvalidTLSVersionError as exc:
            raise InvalidTLSVersionError(f"invalid TLS max version: {exc}") from exc

    return options


def client_from_settings(
    settings: AlertmanagerSettings,
    *,
    logger: Any = None,
) -> AlertmanagerClient | None:
    """
    Build a client from flat settings.

    Returns ``None`` when ``settings.enabled`` is false; callers must check
    before use. Applies a 2 second timeout when none is set and only accepts
    TLS 1.2 / TLS 1.3 version names.
    """
    if not settings.enabled:
        return None
    return AlertmanagerClient(*settings_to_options(settings), logger=logger)


def _text(value: bytes | str | None) -> str:
    if value is None:
        return ""
    if isinstance(value, bytes):
        return value.decode("utf-8")
    return value


def _parse_bool(value: str) -> bool:
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigurationError(
        f"invalid Alertmanager config: failed to parse insecureSkipVerify: {value!r}"
    )


def client_from_secret(
    data: Mapping[str, bytes | str],
    *,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
    logger: Any = None,
) -> AlertmanagerClient:
    """
    Build a client from a secret-store style mapping.

    Recognised keys: ``endpoint`` (required), ``username``, ``password``,
    ``insecureSkipVerify`` and ``caCert`` (PEM bytes). Unlike
    :func:`client_from_settings`, a lone username or password is stored and
    simply never sent.
    """
    if "endpoint" not in data:
        raise EndpointRequiredError()

    options: list[ClientOption] = [
        with_endpoint(_text(data["endpoint"])),
        with_timeout(timeout),
        with_basic_auth(_text(data.get("username")), _text(data.get("password"))),
    ]

    if "insecureSkipVerify" in data:
        options.append(with_insecure_skip_verify(_parse_bool(_text(data["insecureSkipVerify"]))))

    if "caCert" in data:
        ca_cert = data["caCert"]
        options.append(with_custom_ca(ca_cert.encode("utf-8") if isinstance(ca_cert, str) else ca_cert))

    return AlertmanagerClient(*options, logger=logger)
