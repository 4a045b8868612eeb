"""
Input handler - per-frame view of pointer input for the controller.
"""

from typing import List, Optional, Tuple

from .pointer import PointerState, TouchSample


class InputHandler:
    """
    Wraps the PointerState from the display backend.

    Keeps the controller free of backend details: it asks whether to quit,
    which touches are active and whether the viewport changed.
    """

    def __init__(self):
        """Initialize input handler."""
        self.quit_requested = False
        self.touches: List[TouchSample] = []
        self.viewport_change: Optional[Tuple[int, int]] = None

    def update(self, state: PointerState):
        """
        Update from this frame's PointerState.

        Args:
            state: PointerState from display.handle_events()
        """
        self.quit_requested = state.quit
        self.touches = list(state.touches)
        self.viewport_change = state.viewport

    def is_quit_requested(self) -> bool:
        """Check if quit was requested (window close, Escape, q)."""
        return self.quit_requested

    def get_touches(self) -> List[TouchSample]:
        """Active touches this frame (copy)."""
        return self.touches.copy()

    def get_viewport_change(self) -> Optional[Tuple[int, int]]:
        """New (width, height) if the viewport changed this frame."""
        return self.viewport_change

    def __repr__(self) -> str:
        return (
            f"InputHandler(quit={self.quit_requested}, "
            f"touches={len(self.touches)})"
        )
