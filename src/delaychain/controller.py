"""
GUI controller - the frame loop.

One thread, one tick per frame:

    input -> forward viewport/touches -> drain host updates -> render -> show

Nothing blocks inside a frame; the only wait is the sleep that holds the
frame rate.
"""

import logging
import time
from typing import Optional

from .config import GUIConfig
from .display import Display
from .input import InputHandler
from .link import BufferReceiver, ControlSender
from .params import ParameterState
from .render import FrameRenderer

log = logging.getLogger(__name__)


class GUIController:
    """
    Owns the display, the OSC link and the parameter state, and runs the
    loop that ties them together.
    """

    def __init__(self, config: GUIConfig, display: Optional[Display] = None,
                 sender: Optional[ControlSender] = None,
                 receiver: Optional[BufferReceiver] = None,
                 state: Optional[ParameterState] = None):
        """
        Initialize the controller.

        Args:
            config: Runtime settings
            display: Pre-built display (default: from config)
            sender: Pre-built control sender (default: from config)
            receiver: Pre-built buffer receiver (default: bound from config)
            state: Parameter state shared with the receiver
        """
        self.config = config
        self.fps = config.fps

        self.state = state if state is not None else ParameterState()

        if sender is None:
            sender = ControlSender(config.host, config.host_port, config.control_address)
        self.sender = sender

        # Bind before opening a window, so a busy port fails with nothing to tear down
        owns_receiver = receiver is None
        if owns_receiver:
            receiver = BufferReceiver(
                self.state, config.listen_host, config.listen_port, config.buffer_address
            )
        self.receiver = receiver

        if display is None:
            try:
                display = Display(
                    config.width,
                    config.height,
                    backend=config.backend,
                    brightness=config.brightness,
                    gamma=config.gamma,
                    fullscreen=config.fullscreen,
                    max_frames=config.max_frames,
                )
            except Exception:
                if owns_receiver:
                    receiver.close()
                raise
        self.display = display

        self.input_handler = InputHandler()
        self.renderer = FrameRenderer()

        self.frame_count = 0

        # FPS tracking
        self.fps_counter = 0
        self.fps_last_time = time.time()
        self.fps_current = 0.0

        self._started = False
        self._cleanup_done = False

    def start(self):
        """Announce the viewport to the pedal. Runs once."""
        if self._started:
            return
        self._started = True
        width, height = self.display.viewport
        self.sender.send_viewport(width, height)
        log.info("Viewport %dx%d sent to %s:%d", width, height, self.sender.host, self.sender.port)

    def step(self) -> bool:
        """
        Run one frame.

        Returns:
            False once quit was requested, True otherwise
        """
        events = self.display.handle_events()
        self.input_handler.update(events)

        if self.input_handler.is_quit_requested():
            return False

        if self.input_handler.get_viewport_change():
            width, height = self.display.viewport
            self.sender.send_viewport(width, height)

        self.sender.send_touches(self.input_handler.get_touches())

        if self.receiver is not None:
            self.receiver.poll()

        self.renderer.render(self.display.canvas, self.state.snapshot())
        self.display.show()

        self.frame_count += 1
        self._update_fps()
        return True

    def run(self):
        """Main run loop."""
        log.info("Starting GUI (%s, %d fps)", self.display.backend_type, self.fps)
        self.start()

        running = True
        while running:
            frame_start = time.time()

            running = self.step()

            # Frame rate limiting
            sleep_time = (1.0 / self.fps) - (time.time() - frame_start)
            if running and sleep_time > 0:
                time.sleep(sleep_time)

        log.info(
            "Shutdown after %d frames (%d messages sent, %d dropped, %d host updates)",
            self.frame_count, self.sender.sent, self.sender.dropped, self.state.update_count,
        )
        self.cleanup()

    def _update_fps(self):
        self.fps_counter += 1
        current_time = time.time()
        if current_time - self.fps_last_time >= 1.0:
            self.fps_current = self.fps_counter / (current_time - self.fps_last_time)
            self.fps_counter = 0
            self.fps_last_time = current_time
            log.debug("%.1f fps", self.fps_current)

    def cleanup(self):
        """Clean up resources (receiver socket, display). Safe to call twice."""
        if self._cleanup_done:
            return
        self._cleanup_done = True

        if self.receiver is not None:
            self.receiver.close()
        if self.display:
            self.display.cleanup()
