"""Flat configuration for building Alertmanager clients."""

from amclient.config.factory import client_from_secret, client_from_settings, settings_to_options
from amclient.config.settings import (
    DEFAULT_TIMEOUT_SECONDS,
    AlertmanagerSettings,
    load_settings,
    parse_tls_version,
)

__all__ = [
    "AlertmanagerSettings",
    "DEFAULT_TIMEOUT_SECONDS",
    "client_from_secret",
    "client_from_settings",
    "load_settings",
    "parse_tls_version",
    "settings_to_options",
]
