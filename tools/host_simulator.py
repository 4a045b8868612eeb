#!/usr/bin/env python3
"""
Host Simulator - stand in for the pedal while working on the GUI.

Usage:
    python tools/host_simulator.py [--gui-host 127.0.0.1] [--gui-port 7563]

Sends a parameter buffer to the GUI at 30 Hz with slowly sweeping dials,
steps through every effect (and the expression target) every few seconds,
and prints every control record the GUI sends back.

Run the GUI against it with:
    python delaychain_control.py --host 127.0.0.1
"""

import argparse
import math
import select
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from pythonosc.dispatcher import Dispatcher  # noqa: E402
from pythonosc.osc_server import BlockingOSCUDPServer  # noqa: E402
from pythonosc.udp_client import SimpleUDPClient  # noqa: E402

from delaychain.link import BUFFER_ADDRESS, CONTROL_ADDRESS, DEFAULT_HOST_PORT, DEFAULT_LISTEN_PORT  # noqa: E402
from delaychain.params import BUFFER_SIZE  # noqa: E402

# Selector sequence, including the tape delay ramp variant
EFFECT_CYCLE = [1.0, 2.0, 2.5, 3.0, 4.0, 0.0]


def build_buffer(t: float, selector: float, expression: float) -> list:
    """One parameter buffer at time t (seconds)."""
    values = [0.0] * BUFFER_SIZE
    for slot in range(1, 5):
        phase = 2 * math.pi * 0.1 * slot * t
        magnitude = math.sin(phase)
        values[slot] = magnitude
        values[slot + 5] = round(magnitude * 100.0, 1)
    values[5] = selector
    values[10] = expression
    return values


def print_record(address, *args):
    pairs = ", ".join(f"{args[i]}={args[i + 1]}" for i in range(0, len(args) - 1, 2))
    print(f"{address}  {pairs}")


def main():
    """Run host simulator."""
    parser = argparse.ArgumentParser(description="Pretend to be the pedal")
    parser.add_argument("--gui-host", default="127.0.0.1", help="Where the GUI runs")
    parser.add_argument("--gui-port", type=int, default=DEFAULT_LISTEN_PORT,
                        help="GUI buffer port (default: %(default)s)")
    parser.add_argument("--listen-port", type=int, default=DEFAULT_HOST_PORT,
                        help="Port to receive control records on (default: %(default)s)")
    parser.add_argument("--rate", type=float, default=30.0, help="Buffers per second")
    parser.add_argument("--hold", type=float, default=4.0, help="Seconds per effect")
    args = parser.parse_args()

    client = SimpleUDPClient(args.gui_host, args.gui_port)

    dispatcher = Dispatcher()
    dispatcher.map(CONTROL_ADDRESS, print_record)
    server = BlockingOSCUDPServer(("0.0.0.0", args.listen_port), dispatcher)
    server.timeout = 0

    print("=" * 60)
    print("Host Simulator")
    print("=" * 60)
    print(f"Sending {BUFFER_ADDRESS} to {args.gui_host}:{args.gui_port} at {args.rate:g} Hz")
    print(f"Printing {CONTROL_ADDRESS} received on port {args.listen_port}")
    print("Press Ctrl-C to exit")
    print("-" * 60)

    t0 = time.time()
    period = 1.0 / args.rate
    try:
        while True:
            t = time.time() - t0
            step = int(t // args.hold)
            selector = EFFECT_CYCLE[step % len(EFFECT_CYCLE)]
            # Expression pedal walks over the four slots, then off
            expression = float(step % 5 + 1) if step % 5 < 4 else 0.0

            client.send_message(BUFFER_ADDRESS, build_buffer(t, selector, expression))

            # Print whatever the GUI sent meanwhile
            while select.select([server.socket], [], [], 0)[0]:
                server.handle_request()

            time.sleep(period)

    except KeyboardInterrupt:
        print("\n" + "-" * 60)
        print("Simulator stopped")

    finally:
        server.server_close()


if __name__ == '__main__':
    main()
