"""
Flat Alertmanager client settings.

Values come from keyword arguments, ``ALERTMANAGER_`` prefixed environment
variables, a ``.env`` file, or a YAML document via :func:`load_settings`.
"""

from __future__ import annotations

import ssl
from pathlib import Path

import yaml
from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from amclient.errors import ConfigurationError, InvalidTLSVersionError
from amclient.logging import get_logger
from amclient.options import TLS12, TLS13

logger = get_logger()

DEFAULT_TIMEOUT_SECONDS = 2.0


class AlertmanagerSettings(BaseSettings):
    """Settings for building a client through :func:`client_from_settings`."""

    model_config = SettingsConfigDict(
        env_prefix="ALERTMANAGER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    enabled: bool = False
    url: str = ""

    # Basic auth, both or neither
    username: str = ""
    password: str = ""

    # TLS
    tls_ca_cert_path: str = ""
    tls_insecure_skip_verify: bool = False
    tls_min_version: str = ""  # TLS12 or TLS13
    tls_max_version: str = ""

    proxy_url: str = ""

    # Seconds; 0 means DEFAULT_TIMEOUT_SECONDS
    timeout: float = 0.0


def parse_tls_version(version: str) -> ssl.TLSVersion:
    """Translate a TLS version name. Only TLS 1.2 and TLS 1.3 are accepted."""
    if version == "TLS10":
        raise InvalidTLSVersionError("TLS 1.0 is not allowed (minimum: TLS 1.2)")
    if version == "TLS11":
        raise InvalidTLSVersionError("TLS 1.1 is not allowed (minimum: TLS 1.2)")
    if version == "TLS12":
        return TLS12
    if version == "TLS13":
        return TLS13
    raise InvalidTLSVersionError(f"unknown TLS version {version!r}: must be one of: TLS12, TLS13")


def load_settings(path: str | Path) -> AlertmanagerSettings:
    """
    Load settings from a YAML file.

    The document may hold the fields at top level or under an
    ``alertmanager:`` key. Environment variables fill fields the file omits.
    """
    path = Path(path)
    try:
        with open(path) as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigurationError(f"failed to load Alertmanager config {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigurationError(f"Alertmanager config {path} must be a mapping")
    section = data.get("alertmanager", data)
    if not isinstance(section, dict):
        raise ConfigurationError(f"'alertmanager' section in {path} must be a mapping")

    try:
        settings = AlertmanagerSettings(**section)
    except ValidationError as exc:
        raise ConfigurationError(f"invalid Alertmanager config {path}: {exc}") from exc

    logger.debug("loaded_alertmanager_config", path=str(path), enabled=settings.enabled)
    return settings
