"""Tests for the Alert value object."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from amclient.alert import (
    Alert,
    format_timestamp,
    new_alert,
    with_annotation,
    with_ends_at,
    with_label,
    with_starts_at,
)


class TestNewAlert:
    def test_no_options_gives_empty_maps(self) -> None:
        alert = new_alert()

        assert alert.labels == {}
        assert alert.annotations == {}
        assert alert.starts_at is None
        assert alert.ends_at is None

    def test_options_applied_in_order(self) -> None:
        alert = new_alert(
            with_label("alertname", "DiskFull"),
            with_label("severity", "warning"),
            with_annotation("summary", "disk is full"),
        )

        assert alert.labels == {"alertname": "DiskFull", "severity": "warning"}
        assert alert.annotations == {"summary": "disk is full"}

    def test_last_label_write_wins(self) -> None:
        alert = new_alert(
            with_label("severity", "warning"),
            with_label("team", "storage"),
            with_label("severity", "critical"),
        )

        assert alert.labels == {"severity": "critical", "team": "storage"}

    def test_last_annotation_write_wins(self) -> None:
        alert = new_alert(with_annotation("summary", "first"), with_annotation("summary", "second"))

        assert alert.annotations == {"summary": "second"}

    def test_timestamps(self) -> None:
        start = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
        end = start + timedelta(hours=1)

        alert = new_alert(with_starts_at(start), with_ends_at(end))

        assert alert.starts_at == start
        assert alert.ends_at == end

    def test_ends_before_starts_is_accepted(self) -> None:
        start = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)

        alert = new_alert(with_starts_at(start), with_ends_at(start - timedelta(minutes=5)))

        assert alert.ends_at < alert.starts_at


class TestAlertMutators:
    def test_add_label_upserts(self) -> None:
        alert = Alert()
        alert.add_label("env", "dev").add_label("env", "prod")

        assert alert.labels == {"env": "prod"}

    def test_empty_keys_and_values_allowed(self) -> None:
        alert = Alert().add_label("", "").add_annotation("", "")

        assert alert.labels == {"": ""}
        assert alert.annotations == {"": ""}

    def test_instances_do_not_share_maps(self) -> None:
        first = Alert().add_label("a", "1")
        second = Alert()

        assert second.labels == {}
        assert first.labels == {"a": "1"}


class TestToDict:
    def test_timestamps_omitted_when_unset(self) -> None:
        payload = new_alert(with_label("alertname", "Test")).to_dict()

        assert payload == {"labels": {"alertname": "Test"}, "annotations": {}}

    def test_timestamps_rendered_rfc3339(self) -> None:
        start = datetime(2024, 5, 1, 12, 30, 15, tzinfo=timezone.utc)
        end = datetime(2024, 5, 1, 14, 0, tzinfo=timezone(timedelta(hours=2)))

        payload = new_alert(with_starts_at(start), with_ends_at(end)).to_dict()

        assert payload["startsAt"] == "2024-05-01T12:30:15Z"
        assert payload["endsAt"] == "2024-05-01T14:00:00+02:00"

    def test_naive_timestamp_treated_as_utc(self) -> None:
        assert format_timestamp(datetime(2024, 1, 2, 3, 4, 5)) == "2024-01-02T03:04:05Z"

    def test_to_dict_copies_maps(self) -> None:
        alert = new_alert(with_label("a", "1"))
        payload = alert.to_dict()
        payload["labels"]["b"] = "2"

        assert alert.labels == {"a": "1"}
