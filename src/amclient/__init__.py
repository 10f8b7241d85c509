"""
Client library for posting alerts to an Alertmanager-compatible receiver.

Build alerts with :func:`new_alert`, configure an :class:`AlertmanagerClient`
with ``with_*`` options (or :func:`client_from_settings`), then call
:meth:`AlertmanagerClient.emit`.
"""

from amclient.alert import (
    Alert,
    AlertOption,
    new_alert,
    with_annotation,
    with_ends_at,
    with_label,
    with_starts_at,
)
from amclient.client import AlertmanagerClient, basic_auth_header
from amclient.config import (
    AlertmanagerSettings,
    client_from_secret,
    client_from_settings,
    load_settings,
    parse_tls_version,
)
from amclient.errors import (
    AlertmanagerError,
    AlertmanagerTransportError,
    ConfigurationError,
    EmissionFailedError,
    EndpointRequiredError,
    InvalidEndpointError,
    InvalidProxyError,
    InvalidTLSVersionError,
)
from amclient.options import (
    ALERTS_PATH,
    TLS10,
    TLS11,
    TLS12,
    TLS13,
    ClientConfig,
    ClientOption,
    TransportConfig,
    with_base_annotation,
    with_base_label,
    with_basic_auth,
    with_custom_ca,
    with_endpoint,
    with_insecure_skip_verify,
    with_max_tls_version,
    with_min_tls_version,
    with_proxy_url,
    with_timeout,
)

__version__ = "0.1.0"

__all__ = [
    "ALERTS_PATH",
    "Alert",
    "AlertOption",
    "AlertmanagerClient",
    "AlertmanagerError",
    "AlertmanagerSettings",
    "AlertmanagerTransportError",
    "ClientConfig",
    "ClientOption",
    "ConfigurationError",
    "EmissionFailedError",
    "EndpointRequiredError",
    "InvalidEndpointError",
    "InvalidProxyError",
    "InvalidTLSVersionError",
    "TLS10",
    "TLS11",
    "TLS12",
    "TLS13",
    "TransportConfig",
    "basic_auth_header",
    "client_from_secret",
    "client_from_settings",
    "load_settings",
    "new_alert",
    "parse_tls_version",
    "with_annotation",
    "with_base_annotation",
    "with_base_label",
    "with_basic_auth",
    "with_custom_ca",
    "with_endpoint",
    "with_ends_at",
    "with_insecure_skip_verify",
    "with_label",
    "with_max_tls_version",
    "with_min_tls_version",
    "with_proxy_url",
    "with_starts_at",
    "with_timeout",
]
