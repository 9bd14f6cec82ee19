"""Pytest fixtures for wsdemo tests."""

import logging
from unittest.mock import MagicMock

import pytest

from wsdemo.app import create_app
from wsdemo.config import ConfigType
from wsdemo.lib.connection import Connection
from wsdemo.lib.dispatcher import EventDispatcher


class RecordingSleep:
    """Stand-in for SocketIO.sleep that records the requested waits."""

    def __init__(self):
        self.calls: list[float] = []

    def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


@pytest.fixture
def send():
    """Emit capability of the stub connection; inspect it with call_args_list."""
    return MagicMock()


@pytest.fixture
def connection(send):
    """A connection that was opened with userName 'testUser'."""
    return Connection("sid-1", "testUser", send)


@pytest.fixture
def sleep():
    return RecordingSleep()


@pytest.fixture
def dispatcher(sleep):
    return EventDispatcher(sleep=sleep)


@pytest.fixture
def app():
    return create_app(ConfigType.TESTING)


@pytest.fixture
def socket_client(app):
    """Socket.IO test client connected as 'testUser', with the greeting already drained."""
    client = app.socketio.test_client(app, auth={"userName": "testUser"})
    client.get_received()
    yield client
    if client.is_connected():
        client.disconnect()


def _all_loggers():
    return [logging.getLogger()] + [
        logger
        for logger in logging.root.manager.loggerDict.values()
        if isinstance(logger, logging.Logger)
    ]


@pytest.fixture
def isolated_logging():
    """Restore handlers, levels and propagation of every logger touched by configure_logger."""
    saved = {
        logger: (logger.handlers[:], logger.level, logger.propagate) for logger in _all_loggers()
    }
    yield
    added = set()
    for logger in _all_loggers():
        handlers, level, propagate = saved.get(logger, ([], logging.NOTSET, True))
        added.update(h for h in logger.handlers if h not in handlers)
        logger.handlers[:] = handlers
        logger.setLevel(level)
        logger.propagate = propagate
    for handler in added:
        handler.close()
