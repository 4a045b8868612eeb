"""
Pygame display backend for the touchscreen (KMS/DRM or a desktop window).
"""

import logging

import numpy as np
from .display_backend import DisplayBackend
from ..input.pointer import PointerState
from ..input.pygame_pointer import PygamePointer, configure_gesture_hints, suppress_gestures

log = logging.getLogger(__name__)


class PygameBackend(DisplayBackend):
    """Pygame backend: full-viewport surface plus touch/mouse input."""

    def __init__(self, width: int, height: int, fullscreen: bool = False,
                 caption: str = "Delay Chain", **kwargs):
        """
        Initialize pygame backend.

        Args:
            width: Window width in pixels (ignored when fullscreen)
            height: Window height in pixels (ignored when fullscreen)
            fullscreen: Take over the whole screen at its native size
            caption: Window title
            **kwargs: Additional arguments (ignored, for cross-backend compatibility)
        """
        # SDL reads these at init time
        configure_gesture_hints()

        import pygame
        self.pygame = pygame

        pygame.init()
        self.fullscreen = fullscreen

        if fullscreen:
            self.screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
        else:
            self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)

        width, height = self.screen.get_size()
        super().__init__(width, height)

        pygame.display.set_caption(caption)
        suppress_gestures(pygame)

        self.pointer = PygamePointer(pygame, width, height)
        log.info("Pygame backend initialized: %dx%d%s", width, height,
                 " (fullscreen)" if fullscreen else "")

    def show_framebuffer(self, framebuffer: np.ndarray):
        """
        Display a complete framebuffer via pygame.

        Args:
            framebuffer: (height, width, 3) uint8 array
        """
        # Convert numpy array to pygame surface (pygame is column-major)
        surface = self.pygame.surfarray.make_surface(
            np.transpose(framebuffer, (1, 0, 2))
        )

        # A resize can land between render and show; stretch for that one frame
        if surface.get_size() != self.screen.get_size():
            surface = self.pygame.transform.scale(surface, self.screen.get_size())

        self.screen.blit(surface, (0, 0))
        self.pygame.display.flip()

    def handle_events(self) -> PointerState:
        """Poll pygame and follow window resizes."""
        state = self.pointer.poll()
        if state.viewport:
            self.resize(*state.viewport)
        return state

    def resize(self, width: int, height: int):
        if not self.fullscreen:
            self.screen = self.pygame.display.set_mode((width, height), self.pygame.RESIZABLE)
        super().resize(width, height)

    def cleanup(self):
        """Clean up pygame and pointer state."""
        self.pointer.cleanup()
        self.pygame.quit()
