"""
Alertmanager client.

Merges the client's base labels and annotations into each alert and posts
the batch as one JSON array to ``/api/v2/alerts``. There is no retry,
batching or queueing: every call is a single synchronous POST and the
outcome is handed back to the caller.
"""

from __future__ import annotations

import base64
from dataclasses import replace
from typing import Any, Iterable

import httpx

from amclient.alert import Alert
from amclient.errors import (
    AlertmanagerTransportError,
    EmissionFailedError,
    EndpointRequiredError,
)
from amclient.logging import bind_endpoint, redact_url
from amclient.options import ClientConfig, ClientOption, TransportConfig, apply_options
from amclient.transport import build_http_client


def basic_auth_header(username: str, password: str) -> str:
    """Return the ``Authorization`` value for HTTP basic auth."""
    token = base64.b64encode(f"{username}:{password}".encode("utf-8")).decode("ascii")
    return f"Basic {token}"


class AlertmanagerClient:
    """Client for a single Alertmanager-compatible receiver.

    Configuration is finalised by the options passed to the constructor (or
    to :meth:`apply`). Emitting concurrently from several threads is fine once
    configuration is done; changing configuration during emission is not.
    """

    def __init__(self, *options: ClientOption, logger: Any = None) -> None:
        config = ClientConfig()
        if logger is not None:
            config.logger = logger
        self._config = apply_options(config, options)
        self._logger = bind_endpoint(self._config.logger, self._config.endpoint)
        self._http = build_http_client(self._config.transport, self._logger)

    def __enter__(self) -> AlertmanagerClient:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        """Release the underlying connection pool."""
        self._http.close()

    @property
    def endpoint(self) -> str:
        return self._config.endpoint

    @property
    def labels(self) -> dict[str, str]:
        return dict(self._config.labels)

    @property
    def annotations(self) -> dict[str, str]:
        return dict(self._config.annotations)

    @property
    def transport(self) -> TransportConfig:
        return replace(
            self._config.transport,
            ca_certificates=list(self._config.transport.ca_certificates),
        )

    @property
    def auth_header(self) -> str | None:
        if self._config.username and self._config.password:
            return basic_auth_header(self._config.username, self._config.password)
        return None

    def apply(self, *options: ClientOption) -> AlertmanagerClient:
        """Apply further options and rebuild the transport.

        Options run against a copy of the current configuration, so a failing
        option leaves the client unchanged.
        """
        current = self._config
        candidate = replace(
            current,
            labels=dict(current.labels),
            annotations=dict(current.annotations),
            transport=replace(
                current.transport,
                ca_certificates=list(current.transport.ca_certificates),
            ),
        )
        apply_options(candidate, options)

        http = build_http_client(candidate.transport, candidate.logger)
        self._http.close()
        self._config = candidate
        self._logger = bind_endpoint(candidate.logger, candidate.endpoint)
        self._http = http
        return self

    def merge_alert(self, alert: Alert) -> Alert:
        """Layer an alert on top of the base labels and annotations. The alert wins on collision."""
        return Alert(
            labels={**self._config.labels, **(alert.labels or {})},
            annotations={**self._config.annotations, **(alert.annotations or {})},
            starts_at=alert.starts_at,
            ends_at=alert.ends_at,
        )

    def merge_alerts(self, alerts: Iterable[Alert | None]) -> list[dict[str, Any]]:
        return [self.merge_alert(alert).to_dict() for alert in alerts if alert is not None]

    def emit(self, *alerts: Alert | None) -> httpx.Response:
        """Post alerts to Alertmanager and return the response, whatever its status.

        ``None`` entries are skipped. Raises :class:`EndpointRequiredError`
        before any I/O when no endpoint is configured, and
        :class:`AlertmanagerTransportError` when no response was received.
        """
        endpoint = self._config.endpoint
        if not endpoint:
            raise EndpointRequiredError()

        payload = self.merge_alerts(alerts)
        self._logger.debug("alertmanager_payload", payload=payload)

        headers = {"Content-Type": "application/json"}
        auth = self.auth_header
        if auth:
            headers["Authorization"] = auth

        try:
            response = self._http.post(endpoint, json=payload, headers=headers)
        except httpx.HTTPError as exc:
            self._logger.error("alertmanager_post_failed", error=str(exc))
            raise AlertmanagerTransportError(redact_url(endpoint), exc) from exc

        if response.status_code == httpx.codes.OK:
            self._logger.info(
                "alertmanager_alerts_posted",
                status=response.status_code,
                alerts=len(payload),
            )
        else:
            self._logger.warning(
                "alertmanager_post_rejected",
                status=response.status_code,
                alerts=len(payload),
            )
        return response

    def emit_or_raise(self, *alerts: Alert | None) -> None:
        """Post alerts and raise :class:`EmissionFailedError` unless Alertmanager answers 200."""
        response = self.emit(*alerts)
        try:
            if response.status_code != httpx.codes.OK:
                raise EmissionFailedError(
                    redact_url(self._config.endpoint), response.status_code, response.text
                )
        finally:
            response.close()
