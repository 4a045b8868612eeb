"""
Display backend abstraction.
Supports pygame (window or touchscreen) and headless (no screen).
"""

import numpy as np
from abc import ABC, abstractmethod

from ..input.pointer import PointerState

BACKENDS = ('auto', 'pygame', 'headless')


class DisplayBackend(ABC):
    """Abstract base class for display backends."""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height

    def apply_corrections(self, framebuffer: np.ndarray, brightness: float = 100.0, gamma: float = 1.0) -> np.ndarray:
        """
        Apply brightness and gamma corrections to framebuffer.

        Args:
            framebuffer: Input framebuffer
            brightness: Brightness percentage (1-100)
            gamma: Gamma correction value (0.5-3.0)

        Returns:
            Corrected framebuffer (the input itself when no correction applies)
        """
        if gamma == 1.0 and brightness == 100.0:
            return framebuffer

        result = framebuffer.astype(np.float32)

        if gamma != 1.0:
            result = np.power(result / 255.0, gamma) * 255.0

        if brightness != 100.0:
            result = result * (brightness / 100.0)

        return np.clip(result, 0, 255).astype(np.uint8)

    def resize(self, width: int, height: int):
        """Record a new viewport size reported by the platform."""
        self.width = width
        self.height = height

    @abstractmethod
    def show_framebuffer(self, framebuffer: np.ndarray):
        """
        Display a complete framebuffer.

        Args:
            framebuffer: (height, width, 3) uint8 array
        """
        pass

    @abstractmethod
    def handle_events(self) -> PointerState:
        """
        Handle input events.

        Returns:
            PointerState for this frame
        """
        pass

    @abstractmethod
    def cleanup(self):
        """Clean up resources."""
        pass


def create_display_backend(backend: str, width: int, height: int, **kwargs) -> DisplayBackend:
    """
    Factory function to create a display backend.

    Args:
        backend: 'pygame', 'headless' or 'auto' (pygame)
        width: Viewport width in pixels
        height: Viewport height in pixels
        **kwargs: Backend-specific arguments

    Returns:
        DisplayBackend instance
    """
    if backend in ('auto', 'pygame'):
        from .pygame_backend import PygameBackend
        return PygameBackend(width, height, **kwargs)
    elif backend == 'headless':
        from .headless_backend import HeadlessBackend
        return HeadlessBackend(width, height, **kwargs)
    else:
        raise ValueError(f"Unknown backend type: {backend}")
