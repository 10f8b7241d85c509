"""
Alert value object.

An alert is a set of identity labels, descriptive annotations and an
optional validity window. Alertmanager deduplicates on the label set, so
callers that need distinct entries for otherwise identical alerts must add
a distinguishing label themselves.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, Callable

AlertOption = Callable[["Alert"], None]


@dataclass
class Alert:
    """A single Alertmanager alert."""

    labels: dict[str, str] = field(default_factory=dict)
    annotations: dict[str, str] = field(default_factory=dict)
    starts_at: datetime | None = None
    ends_at: datetime | None = None

    def add_label(self, key: str, value: str) -> Alert:
        if self.labels is None:
            self.labels = {}
        self.labels[key] = value
        return self

    def add_annotation(self, key: str, value: str) -> Alert:
        if self.annotations is None:
            self.annotations = {}
        self.annotations[key] = value
        return self

    def set_starts_at(self, starts_at: datetime) -> Alert:
        self.starts_at = starts_at
        return self

    def set_ends_at(self, ends_at: datetime) -> Alert:
        # No ordering check against starts_at; Alertmanager rejects it if invalid.
        self.ends_at = ends_at
        return self

    def to_dict(self) -> dict[str, Any]:
        """Return the Alertmanager v2 wire representation."""
        payload: dict[str, Any] = {
            "labels": dict(self.labels or {}),
            "annotations": dict(self.annotations or {}),
        }
        if self.starts_at is not None:
            payload["startsAt"] = format_timestamp(self.starts_at)
        if self.ends_at is not None:
            payload["endsAt"] = format_timestamp(self.ends_at)
        return payload


def format_timestamp(value: datetime) -> str:
    """Render an RFC 3339 timestamp. Naive datetimes are taken as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    rendered = value.isoformat()
    if value.utcoffset() == timedelta(0) and rendered.endswith("+00:00"):
        return rendered[: -len("+00:00")] + "Z"
    return rendered


def new_alert(*options: AlertOption) -> Alert:
    """Create an alert with empty label and annotation maps, then apply options in order."""
    alert = Alert()
    for option in options:
        option(alert)
    return alert


def with_label(key: str, value: str) -> AlertOption:
    def _apply(alert: Alert) -> None:
        alert.add_label(key, value)

    return _apply


def with_annotation(key: str, value: str) -> AlertOption:
    def _apply(alert: Alert) -> None:
        alert.add_annotation(key, value)

    return _apply


def with_starts_at(starts_at: datetime) -> AlertOption:
    def _apply(alert: Alert) -> None:
        alert.set_starts_at(starts_at)

    return _apply


def with_ends_at(ends_at: datetime) -> AlertOption:
    def _apply(alert: Alert) -> None:
        alert.set_ends_at(ends_at)

    return _apply
