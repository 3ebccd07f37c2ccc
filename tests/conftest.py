"""Shared fixtures for the TUIO bridge tests."""

import pytest

from tuio_bridge.core.TUIOEventDispatcher import TUIOEventDispatcher
from tuio_bridge.core.TUIOFrameSequencer import TUIOFrameSequencer
from tuio_bridge.core.TUIOSessionRegistry import TUIOSessionRegistry
from tuio_bridge.data_transportation.TUIOEncoder import TUIOEncodingError, encode_tuio_message

CURSOR = '/tuio/2Dcur'
OBJECT = '/tuio/2Dobj'
BLOB = '/tuio/2Dblb'


class RecordingTUIOServer:
    """Stands in for TUIOServer and keeps every message instead of sending it.

    Messages are still run through the real encoder so that encoding failures behave like in production.
    """

    def __init__(self):
        self.messages = []
        self.dropped = []

    def send_tuio_message(self, address, arguments):
        try:
            encode_tuio_message(address, arguments)
        except TUIOEncodingError:
            self.dropped.append((address, [value for _, value in arguments]))
            return False
        self.messages.append((address, [value for _, value in arguments]))
        return True

    def of_kind(self, kind, address=None):
        return [
            (msg_address, values)
            for msg_address, values in self.messages
            if values[0] == kind and (address is None or msg_address == address)
        ]

    def clear(self):
        self.messages.clear()
        self.dropped.clear()


@pytest.fixture
def registry():
    return TUIOSessionRegistry()


@pytest.fixture
def tuio_server():
    return RecordingTUIOServer()


@pytest.fixture
def sequencer(registry, tuio_server):
    return TUIOFrameSequencer(registry, tuio_server)


@pytest.fixture
def dispatcher(registry, sequencer, tuio_server):
    return TUIOEventDispatcher(registry, sequencer, tuio_server)


def cursor(action, session_id, **attributes):
    return dict(type='cursor', action=action, sessionId=session_id, **attributes)


def tuio_object(action, session_id, **attributes):
    return dict(type='object', action=action, sessionId=session_id, **attributes)


def blob(action, session_id, **attributes):
    return dict(type='blob', action=action, sessionId=session_id, **attributes)
