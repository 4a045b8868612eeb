"""
Command-line entry point: delaychain-gui
"""

import argparse
import atexit
import logging
import sys
from pathlib import Path

from .config import ConfigError, load_config
from .controller import GUIController
from .display import BACKENDS

log = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str):
    """
    Send log records to stderr at the configured level.

    Leaves the root logger alone when something (a test runner, an
    embedding application) has already attached handlers.

    Args:
        level: Level name from the config (DEBUG, INFO, WARNING, ERROR)
    """
    root = logging.getLogger()
    if root.handlers:
        return
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Delay Chain GUI - touchscreen remote for the effects pedal"
    )

    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML config file (default: ./delaychain.yml if present)"
    )

    parser.add_argument(
        "--width",
        type=int,
        default=None,
        help="Window width in pixels (default: 480)"
    )

    parser.add_argument(
        "--height",
        type=int,
        default=None,
        help="Window height in pixels (default: 800)"
    )

    parser.add_argument(
        "--fullscreen",
        action="store_true",
        default=None,
        help="Use the whole screen at its native resolution"
    )

    parser.add_argument(
        "--fps",
        type=int,
        default=None,
        help="Target frames per second (default: 60)"
    )

    parser.add_argument(
        "--backend",
        choices=BACKENDS,
        default=None,
        help="Display backend (default: auto)"
    )

    parser.add_argument(
        "--frames",
        type=int,
        default=None,
        dest="max_frames",
        help="Quit after this many frames (headless soak runs)"
    )

    parser.add_argument(
        "--host",
        type=str,
        default=None,
        help="Pedal hostname or IP (default: bela.local)"
    )

    parser.add_argument(
        "--host-port",
        type=int,
        default=None,
        help="Pedal OSC port for control messages (default: 7562)"
    )

    parser.add_argument(
        "--listen-host",
        type=str,
        default=None,
        help="Interface to receive parameter buffers on (default: 0.0.0.0)"
    )

    parser.add_argument(
        "--listen-port",
        type=int,
        default=None,
        help="UDP port to receive parameter buffers on (default: 7563)"
    )

    parser.add_argument(
        "--control-address",
        type=str,
        default=None,
        help="OSC address for outgoing control records (default: /gui/control)"
    )

    parser.add_argument(
        "--buffer-address",
        type=str,
        default=None,
        help="OSC address of incoming parameter buffers (default: /gui/buffer)"
    )

    parser.add_argument(
        "--brightness",
        type=float,
        default=None,
        help="Brightness percentage (1-100, default: 100)"
    )

    parser.add_argument(
        "--gamma",
        type=float,
        default=None,
        help="Gamma correction value (0.5-3.0, default: 1.0)"
    )

    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        dest="level",
        help="DEBUG, INFO, WARNING or ERROR (default: INFO)"
    )

    return parser


OVERRIDES = (
    'width', 'height', 'fullscreen', 'fps', 'backend', 'max_frames', 'host', 'host_port',
    'listen_host', 'listen_port', 'control_address', 'buffer_address',
    'brightness', 'gamma', 'level',
)


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
        config = config.with_overrides(**{name: getattr(args, name) for name in OVERRIDES})
    except ConfigError as e:
        parser.error(str(e))

    setup_logging(config.level)

    # Print startup banner
    print("=" * 60)
    print("DELAY CHAIN GUI")
    print("=" * 60)
    if config.fullscreen:
        print("Window Size: fullscreen")
    else:
        print(f"Window Size: {config.width}×{config.height}")
    print(f"Target FPS: {config.fps}")
    print(f"Pedal: {config.host}:{config.host_port} ({config.control_address})")
    print(f"Listening: {config.listen_host}:{config.listen_port} ({config.buffer_address})")
    print("=" * 60)
    print()

    controller = None
    try:
        controller = GUIController(config)

        # Register cleanup as atexit handler (safety net)
        atexit.register(controller.cleanup)

        controller.run()

    except KeyboardInterrupt:
        print("\n\nShutting down...")
    except OSError as e:
        log.error("Could not start: %s", e)
        return 1
    finally:
        # Always cleanup, even on error
        if controller:
            controller.cleanup()

    return 0


if __name__ == "__main__":
    sys.exit(main())
