"""
Build the httpx transport from a ``TransportConfig``.

Every client gets its own ``ssl.SSLContext``; trust stores are never shared
between clients.
"""

from __future__ import annotations

import ssl
from typing import Any

import certifi
import httpx

from amclient.logging import get_logger
from amclient.options import DEFAULT_MIN_TLS_VERSION, TransportConfig

logger = get_logger()

DEFAULT_TIMEOUT_SECONDS = 5.0


def build_ssl_context(transport: TransportConfig, log: Any = None) -> ssl.SSLContext:
    """Create a client-side TLS context reflecting every transport setting."""
    log = log or logger
    context = ssl.SSLContext(ssl.PROTOCOL_TLS_CLIENT)

    if transport.ca_certificates:
        try:
            context.load_default_certs(ssl.Purpose.SERVER_AUTH)
        except ssl.SSLError as exc:
            log.warning("system_trust_store_unavailable", error=str(exc))
        for pem in transport.ca_certificates:
            if not pem:
                continue
            try:
                context.load_verify_locations(cadata=pem.decode("ascii", errors="ignore"))
            except (ssl.SSLError, ValueError) as exc:
                log.warning("ignoring_unparseable_ca_certificate", error=str(exc))
    else:
        context.load_verify_locations(cafile=certifi.where())

    if transport.insecure_skip_verify:
        # check_hostname must be cleared before verify_mode can drop to CERT_NONE.
        context.check_hostname = False
        context.verify_mode = ssl.CERT_NONE

    context.minimum_version = transport.min_tls_version or DEFAULT_MIN_TLS_VERSION
    if transport.max_tls_version is not None:
        context.maximum_version = transport.max_tls_version

    return context


def resolve_timeout(transport: TransportConfig) -> httpx.Timeout:
    if transport.timeout is None:
        return httpx.Timeout(DEFAULT_TIMEOUT_SECONDS)
    if transport.timeout <= 0:
        return httpx.Timeout(None)
    return httpx.Timeout(transport.timeout)


def build_http_client(transport: TransportConfig, log: Any = None) -> httpx.Client:
    """Create the pooled httpx client used for emission."""
    return httpx.Client(
        verify=build_ssl_context(transport, log),
        proxy=transport.proxy_url or None,
        timeout=resolve_timeout(transport),
    )
