"""
Headless display backend - no screen, keeps the last frame in memory.

Used for soak runs on a board without a panel attached and in tests.
Input comes from a PointerInput (ScriptedPointer by default).
"""

from typing import Optional

import numpy as np
from .display_backend import DisplayBackend
from ..input.pointer import PointerInput, PointerState, ScriptedPointer


class HeadlessBackend(DisplayBackend):
    """Backend that records frames instead of showing them."""

    def __init__(self, width: int, height: int, pointer: Optional[PointerInput] = None,
                 max_frames: Optional[int] = None, **kwargs):
        """
        Initialize headless backend.

        Args:
            width: Viewport width in pixels
            height: Viewport height in pixels
            pointer: Input source (default: empty ScriptedPointer)
            max_frames: Request quit after this many frames were shown
            **kwargs: Additional arguments (ignored, for cross-backend compatibility)
        """
        super().__init__(width, height)
        self.pointer = pointer if pointer is not None else ScriptedPointer()
        self.max_frames = max_frames
        self.frames_shown = 0
        self.last_frame: Optional[np.ndarray] = None

    def show_framebuffer(self, framebuffer: np.ndarray):
        self.last_frame = framebuffer.copy()
        self.frames_shown += 1

    def handle_events(self) -> PointerState:
        state = self.pointer.poll()
        if state.viewport:
            self.resize(*state.viewport)
        if self.max_frames is not None and self.frames_shown >= self.max_frames:
            state.quit = True
        return state

    def cleanup(self):
        self.pointer.cleanup()
