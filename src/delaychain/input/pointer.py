"""
Pointer input abstraction.

Touches and mouse drags are both reported as TouchSamples in viewport
pixels, so the forwarder doesn't care where they came from.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Hashable, List, Optional, Tuple


@dataclass(frozen=True)
class TouchSample:
    """One active touch or pointer this frame, in viewport pixels."""
    pointer_id: Hashable
    x: float
    y: float


class PointerState:
    """What happened on the input side during one frame."""

    def __init__(self):
        self.quit = False
        self.touches: List[TouchSample] = []
        # New (width, height) if the viewport was re-established this frame
        self.viewport: Optional[Tuple[int, int]] = None

    def __repr__(self) -> str:
        return f"PointerState(quit={self.quit}, touches={len(self.touches)}, viewport={self.viewport})"


class PointerInput(ABC):
    """
    Abstract base class for pointer input.

    Implementations:
    - PygamePointer: pygame finger and mouse events (window or touchscreen)
    - ScriptedPointer: replays prepared frames (headless runs and tests)
    """

    @abstractmethod
    def poll(self) -> PointerState:
        """
        Poll for input and return this frame's state.

        Returns:
            PointerState with quit flag, active touches and any
            viewport change
        """
        pass

    @abstractmethod
    def cleanup(self):
        """Release input resources."""
        pass


class ScriptedPointer(PointerInput):
    """Replays a list of prepared PointerStates, one per poll."""

    def __init__(self, frames: Optional[List[PointerState]] = None):
        self.frames = list(frames or [])

    def push(self, state: PointerState):
        self.frames.append(state)

    def poll(self) -> PointerState:
        if self.frames:
            return self.frames.pop(0)
        return PointerState()

    def cleanup(self):
        self.frames.clear()
