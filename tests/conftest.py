"""Root test configuration."""

import logging

import certifi
import pytest
import structlog


def pytest_configure(config):
    """Configure structlog for tests to suppress debug/info output."""
    logging.basicConfig(level=logging.WARNING, force=True)
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.add_log_level,
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )


class RecordingLogger:
    """Minimal structlog-style logger that keeps every event."""

    def __init__(self, events: list | None = None, context: dict | None = None) -> None:
        self.events: list[tuple[str, str, dict]] = [] if events is None else events
        self.context = dict(context or {})

    def bind(self, **kw) -> "RecordingLogger":
        return RecordingLogger(self.events, {**self.context, **kw})

    def _record(self, level: str, event: str, **kw) -> None:
        self.events.append((level, event, {**self.context, **kw}))

    def debug(self, event: str, **kw) -> None:
        self._record("debug", event, **kw)

    def info(self, event: str, **kw) -> None:
        self._record("info", event, **kw)

    def warning(self, event: str, **kw) -> None:
        self._record("warning", event, **kw)

    def error(self, event: str, **kw) -> None:
        self._record("error", event, **kw)

    def names(self) -> list[str]:
        return [event for _, event, _ in self.events]


@pytest.fixture
def recording_logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture(scope="session")
def ca_pem() -> bytes:
    """A real PEM encoded root certificate, taken from the certifi bundle."""
    with open(certifi.where(), "rb") as fh:
        bundle = fh.read()
    end_marker = b"-----END CERTIFICATE-----"
    start = bundle.index(b"-----BEGIN CERTIFICATE-----")
    end = bundle.index(end_marker, start) + len(end_marker)
    return bundle[start:end] + b"\n"
