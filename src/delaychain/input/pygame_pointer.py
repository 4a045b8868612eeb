"""
Pygame pointer implementation.

Tracks every finger on a touchscreen plus a held left mouse button, and
keeps the platform from turning drags into scroll or zoom gestures.
"""

import logging
import os
from typing import Any, Dict, Hashable, Tuple

from .pointer import PointerInput, PointerState, TouchSample

log = logging.getLogger(__name__)

MOUSE_POINTER = 'mouse'

# SDL hints read at video init: no mouse events synthesized from touches
# and no touch events synthesized from the mouse, so every contact is
# reported exactly once.
GESTURE_HINTS = {
    'SDL_TOUCH_MOUSE_EVENTS': '0',
    'SDL_MOUSE_TOUCH_EVENTS': '0',
}

# Event types that would scroll or zoom
GESTURE_EVENT_NAMES = ('MOUSEWHEEL', 'MULTIGESTURE')

QUIT_KEYS = ('escape', 'q')


def configure_gesture_hints(environ=None):
    """
    Set SDL hints that stop touch/mouse event synthesis.

    Must run before pygame.init() to take effect.

    Args:
        environ: Mapping to write into (default: os.environ)
    """
    environ = os.environ if environ is None else environ
    for key, value in GESTURE_HINTS.items():
        environ[key] = value


def suppress_gestures(pygame: Any):
    """
    Block scroll and zoom gesture events for the rest of the session.

    Args:
        pygame: The pygame module
    """
    names = [name for name in GESTURE_EVENT_NAMES if hasattr(pygame, name)]
    if names:
        pygame.event.set_blocked([getattr(pygame, name) for name in names])
    log.debug("Blocked gesture events: %s", ", ".join(names))


class PygamePointer(PointerInput):
    """
    Pointer input using pygame events.

    Finger positions arrive normalized (0.0-1.0) and are scaled to the
    current viewport. Touches stay active from FINGERDOWN until FINGERUP;
    the mouse counts as one pointer while its left button is held.
    """

    def __init__(self, pygame: Any, width: int, height: int):
        """
        Initialize pygame pointer.

        Args:
            pygame: The pygame module (passed in to avoid import issues)
            width: Current viewport width
            height: Current viewport height
        """
        self.pygame = pygame
        self.width = width
        self.height = height
        self._fingers: Dict[Hashable, Tuple[float, float]] = {}
        self._mouse = None
        self._key_map = {
            pygame.K_ESCAPE: 'escape',
            pygame.K_q: 'q',
        }

    def poll(self) -> PointerState:
        """
        Drain pygame events and report active touches.

        Returns:
            PointerState for this frame
        """
        pg = self.pygame
        state = PointerState()

        for event in pg.event.get():
            if event.type == pg.QUIT:
                state.quit = True

            elif event.type == pg.KEYDOWN:
                if self._key_map.get(event.key) in QUIT_KEYS:
                    state.quit = True

            elif event.type in (pg.FINGERDOWN, pg.FINGERMOTION):
                finger = (getattr(event, 'touch_id', 0), event.finger_id)
                self._fingers[finger] = (event.x * self.width, event.y * self.height)

            elif event.type == pg.FINGERUP:
                finger = (getattr(event, 'touch_id', 0), event.finger_id)
                self._fingers.pop(finger, None)

            elif event.type == pg.MOUSEBUTTONDOWN:
                # Touch-synthesized mouse events are already counted as fingers
                if event.button == 1 and not getattr(event, 'touch', False):
                    self._mouse = event.pos

            elif event.type == pg.MOUSEMOTION:
                if self._mouse is not None and not getattr(event, 'touch', False):
                    self._mouse = event.pos

            elif event.type == pg.MOUSEBUTTONUP:
                if event.button == 1:
                    self._mouse = None

            elif event.type == pg.VIDEORESIZE:
                self.width, self.height = event.w, event.h
                state.viewport = (event.w, event.h)

        for finger, (x, y) in self._fingers.items():
            state.touches.append(TouchSample(finger, x, y))
        if self._mouse is not None:
            state.touches.append(TouchSample(MOUSE_POINTER, self._mouse[0], self._mouse[1]))

        return state

    def release_all(self):
        """Forget every active touch (e.g. after the window lost focus)."""
        self._fingers.clear()
        self._mouse = None

    def cleanup(self):
        self.release_all()
