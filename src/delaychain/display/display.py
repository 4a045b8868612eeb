"""
Display - the persistent framebuffer and the backend that shows it.

The framebuffer survives between frames on purpose: each frame only fades
what is already there before drawing, which is what leaves the trails.
"""

import logging

import numpy as np

from .display_backend import create_display_backend
from ..input.pointer import PointerState
from ..render.canvas import Canvas

log = logging.getLogger(__name__)


class Display:
    """
    Viewport-sized framebuffer with backend abstraction.

    Renderers draw through `canvas`; show() applies brightness/gamma and
    hands the frame to the backend.
    """

    def __init__(self, width: int, height: int, backend: str = 'auto',
                 brightness: float = 100.0, gamma: float = 1.0, **kwargs):
        """
        Initialize display.

        Args:
            width: Requested viewport width in pixels
            height: Requested viewport height in pixels
            backend: Backend type ('auto', 'pygame', 'headless')
            brightness: Brightness percentage applied on show (1-100)
            gamma: Gamma correction applied on show (0.5-3.0)
            **kwargs: Additional backend-specific arguments
        """
        self.brightness = brightness
        self.gamma = gamma
        self.backend = create_display_backend(backend, width, height, **kwargs)
        self.backend_type = type(self.backend).__name__

        # The backend decides the real size (fullscreen, window manager)
        self._allocate(self.backend.width, self.backend.height)

        log.info("Display initialized: %dx%d (%s)", self.width, self.height, self.backend_type)

    def _allocate(self, width: int, height: int):
        self.width = width
        self.height = height
        self.framebuffer = np.zeros((height, width, 3), dtype=np.uint8)
        self.canvas = Canvas(self.framebuffer)

    @property
    def viewport(self):
        """Current (width, height)."""
        return self.width, self.height

    def resize(self, width: int, height: int):
        """
        Re-create the framebuffer for a new viewport size.

        The trail from the old size is dropped.

        Args:
            width: New width in pixels
            height: New height in pixels
        """
        if (width, height) == self.viewport:
            return
        log.info("Viewport resized: %dx%d -> %dx%d", self.width, self.height, width, height)
        self._allocate(width, height)

    def show(self):
        """Apply corrections and display the framebuffer. Call once per frame."""
        framebuffer = self.backend.apply_corrections(self.framebuffer, self.brightness, self.gamma)
        self.backend.show_framebuffer(framebuffer)

    def handle_events(self) -> PointerState:
        """
        Handle input events, following viewport changes.

        Returns:
            PointerState for this frame
        """
        state = self.backend.handle_events()
        if state.viewport:
            self.resize(*state.viewport)
        return state

    def cleanup(self):
        """Clean up display resources."""
        self.backend.cleanup()
