"""
Shared fixtures: a fake pygame event surface, a recording OSC client and
a headless display.
"""

import sys
from pathlib import Path
from types import SimpleNamespace

import pytest

# Allow running the tests from a plain checkout
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from delaychain.display import Display  # noqa: E402
from delaychain.input import ScriptedPointer  # noqa: E402
from delaychain.link import ControlSender  # noqa: E402
from delaychain.params import BUFFER_SIZE  # noqa: E402


class FakeEventQueue:
    """Stands in for pygame.event: queued events and the blocked set."""

    def __init__(self):
        self.queue = []
        self.blocked = []

    def get(self):
        events, self.queue = self.queue, []
        return events

    def set_blocked(self, types):
        self.blocked.extend(types)


class FakePygame:
    """Event constants and pygame.event, nothing else."""

    QUIT = 256
    KEYDOWN = 768
    MOUSEMOTION = 1024
    MOUSEBUTTONDOWN = 1025
    MOUSEBUTTONUP = 1026
    MOUSEWHEEL = 1027
    FINGERDOWN = 1792
    FINGERUP = 1793
    FINGERMOTION = 1794
    MULTIGESTURE = 2050
    VIDEORESIZE = 32770

    K_ESCAPE = 27
    K_q = 113

    def __init__(self):
        self.event = FakeEventQueue()

    def post(self, type_, **attrs):
        self.event.queue.append(SimpleNamespace(type=type_, **attrs))


class RecordingClient:
    """OSC client that records (address, args) instead of sending."""

    def __init__(self, fail=False):
        self.messages = []
        self.fail = fail

    def send_message(self, address, args):
        if self.fail:
            raise OSError("Network is unreachable")
        self.messages.append((address, list(args)))


class StubReceiver:
    """Receiver stand-in that counts polls and closes."""

    def __init__(self):
        self.polls = 0
        self.closed = False

    def poll(self):
        self.polls += 1
        return 0

    def close(self):
        self.closed = True


def make_values(selector=0.0, expression=0.0, magnitudes=(0.0, 0.0, 0.0, 0.0),
                raw=(0.0, 0.0, 0.0, 0.0)):
    """Build an 11-value host buffer."""
    values = [0.0] * BUFFER_SIZE
    values[1:5] = list(magnitudes)
    values[5] = selector
    values[6:10] = list(raw)
    values[10] = expression
    return values


@pytest.fixture
def fake_pygame():
    return FakePygame()


@pytest.fixture
def recording_client():
    return RecordingClient()


@pytest.fixture
def sender(recording_client):
    return ControlSender('127.0.0.1', 9000, client=recording_client)


@pytest.fixture
def scripted_pointer():
    return ScriptedPointer()


@pytest.fixture
def headless_display(scripted_pointer):
    display = Display(480, 800, backend='headless', pointer=scripted_pointer)
    yield display
    display.cleanup()
