"""Shared fixtures for the nitpick test suite."""

from types import SimpleNamespace

import pytest
from structlog.testing import capture_logs

from nitpick import LogLevel, PropLogger, create_prop_types
from nitpick.config import Settings


class RecordingSink:
    """Stands in for the structlog logger and records every write."""

    def __init__(self):
        self.calls = []

    def __getattr__(self, method):
        if method.startswith("_"):
            raise AttributeError(method)

        def write(event, **fields):
            self.calls.append((method, event, fields))
        return write

    @property
    def events(self):
        return [event for _, event, _ in self.calls]


class BrokenSink:
    """A sink that fails on every write, like a console that went away."""

    def __getattr__(self, method):
        if method.startswith("_"):
            raise AttributeError(method)

        def write(event, **fields):
            raise OSError("console unavailable")
        return write


@pytest.fixture
def element():
    return SimpleNamespace(tag="x-slider", id="hero")


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def logger(sink):
    return PropLogger(level=LogLevel.VERBOSE, sink=sink)


@pytest.fixture
def settings():
    return Settings(TESTING=False, PACKAGE_VERSION="2.3.1", LOG_LEVEL=3)


@pytest.fixture
def prop_types(logger, settings):
    return create_prop_types(logger=logger, settings=settings)


@pytest.fixture
def captured():
    with capture_logs() as logs:
        yield logs
