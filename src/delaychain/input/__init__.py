"""
Input handling for the pedal GUI.

- PointerInput / PointerState / TouchSample: pointer abstraction
- PygamePointer: pygame finger and mouse events
- ScriptedPointer: prepared frames for headless runs
- InputHandler: per-frame view of the latest PointerState
"""

from .pointer import PointerInput, PointerState, TouchSample, ScriptedPointer
from .pygame_pointer import PygamePointer, configure_gesture_hints, suppress_gestures
from .input_handler import InputHandler

__all__ = [
    'PointerInput',
    'PointerState',
    'TouchSample',
    'ScriptedPointer',
    'PygamePointer',
    'configure_gesture_hints',
    'suppress_gestures',
    'InputHandler',
]
