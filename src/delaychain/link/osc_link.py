"""
OSC link to the pedal.

Outbound: flat key/value records (viewport size, touch coordinates) sent
as one OSC message each, arguments alternating key and value:

    /gui/control "width" 480 "height" 800
    /gui/control "x" 120.0 "y" 342.5

Inbound: the parameter buffer as one OSC message of floats:

    /gui/buffer 0.0 0.42 0.1 0.9 0.0 2.5 3.0 250.0 0.7 0.0 1.0

Sending is fire-and-forget. The receiver never runs on its own thread;
the frame loop drains it with poll().
"""

import logging
import select
from typing import Any, Dict, Iterable, Optional

from pythonosc.dispatcher import Dispatcher
from pythonosc.osc_server import BlockingOSCUDPServer
from pythonosc.udp_client import SimpleUDPClient

from ..input.pointer import TouchSample
from ..params.parameter_state import ParameterState

log = logging.getLogger(__name__)

CONTROL_ADDRESS = '/gui/control'
BUFFER_ADDRESS = '/gui/buffer'

DEFAULT_HOST_PORT = 7562
DEFAULT_LISTEN_PORT = 7563


def flatten_record(record: Dict[str, Any]) -> list:
    """Turn {'x': 1.0, 'y': 2.0} into ['x', 1.0, 'y', 2.0]."""
    args = []
    for key, value in record.items():
        args.append(key)
        args.append(value)
    return args


class ControlSender:
    """
    Sends control records to the pedal.

    Every send is best-effort: a socket error drops the message, bumps
    `dropped` and nothing else happens. No retry, no acknowledgement.
    """

    def __init__(self, host: str, port: int = DEFAULT_HOST_PORT,
                 address: str = CONTROL_ADDRESS, client: Optional[Any] = None):
        """
        Initialize control sender.

        Args:
            host: Pedal hostname or IP
            port: Pedal OSC port
            address: OSC address for control records
            client: Pre-built client with send_message(address, args)
                    (default: SimpleUDPClient, created on first send)
        """
        self.host = host
        self.port = port
        self.address = address
        self.client = client
        self.sent = 0
        self.dropped = 0

    def send(self, record: Dict[str, Any]) -> bool:
        """
        Send one flat key/value record.

        Args:
            record: Field name -> number

        Returns:
            True if the message left this process
        """
        try:
            if self.client is None:
                # Resolving the pedal's name can fail until it is on the network
                self.client = SimpleUDPClient(self.host, self.port)
            self.client.send_message(self.address, flatten_record(record))
        except OSError:
            self.dropped += 1
            return False

        self.sent += 1
        return True

    def send_viewport(self, width: int, height: int) -> bool:
        """Send the viewport size."""
        return self.send({'width': int(width), 'height': int(height)})

    def send_touch(self, sample: TouchSample) -> bool:
        """Send one touch sample's coordinates."""
        return self.send({'x': float(sample.x), 'y': float(sample.y)})

    def send_touches(self, samples: Iterable[TouchSample]) -> int:
        """
        Send every active touch, one message each.

        Args:
            samples: Active touches this frame

        Returns:
            Number of messages handed to the socket
        """
        return sum(1 for sample in samples if self.send_touch(sample))

    def __repr__(self) -> str:
        return f"ControlSender({self.host}:{self.port}{self.address}, sent={self.sent}, dropped={self.dropped})"


class BufferReceiver:
    """
    Receives parameter buffers from the pedal and stores them in a
    ParameterState.
    """

    def __init__(self, state: ParameterState, host: str = '0.0.0.0',
                 port: int = DEFAULT_LISTEN_PORT, address: str = BUFFER_ADDRESS):
        """
        Initialize buffer receiver and bind the UDP socket.

        Args:
            state: ParameterState to update
            host: Interface to listen on
            port: UDP port to listen on (0 = any free port)
            address: OSC address carrying the buffer
        """
        self.state = state
        self.address = address
        self.messages = 0

        self.dispatcher = Dispatcher()
        self.dispatcher.map(address, self._on_buffer)
        self.dispatcher.set_default_handler(self._on_unknown)

        self.server = BlockingOSCUDPServer((host, port), self.dispatcher)
        self.server.timeout = 0
        log.info("Listening for %s on %s:%d", address, *self.server.server_address[:2])

    @property
    def port(self) -> int:
        return self.server.server_address[1]

    def _on_buffer(self, address: str, *args):
        self.messages += 1
        self.state.replace(args)

    def _on_unknown(self, address: str, *args):
        log.debug("Ignoring OSC message %s (%d args)", address, len(args))

    def poll(self, timeout: float = 0.0) -> int:
        """
        Handle every datagram already waiting, without blocking.

        Drains the socket until it is empty, so the snapshot rendered this
        frame is the newest buffer the pedal sent.

        Args:
            timeout: How long to wait for the first datagram (seconds)

        Returns:
            Number of datagrams handled
        """
        handled = 0
        wait = timeout
        while True:
            readable, _, _ = select.select([self.server.socket], [], [], wait)
            if not readable:
                break
            self.server.handle_request()
            handled += 1
            wait = 0.0
        return handled

    def close(self):
        """Close the listening socket."""
        self.server.server_close()
