"""
Effect table - which effect the pedal is running and how it is labelled.

The host encodes the active effect as a float sentinel (1, 2, 2.5, 3, 4).
2.5 is the ramp variant of the tape delay and is matched exactly, never
rounded down to 2.
"""

from enum import Enum
from typing import Optional, Tuple


# Dial colour when the selector matches nothing
NO_MATCH_COLOR = (255, 255, 255)

# Looper mode replaces every corner label with its loop slot name
LOOP_LABELS = ('loop_1', 'loop_2', 'loop_3', 'loop_4')

# Slots 1 and 2 are the same for every non-looper effect
MIX_LABELS = ('dry/wet', 'fx-level')


class Effect(Enum):
    """
    Effects known to the pedal.

    Each member carries (selector, title, slot 3 label, slot 4 label,
    centre button glyph, dial colour).
    """

    SCANNER_VIBRATO = (1.0, 'SCANNER VIBRATO', 'rate', 'depth', None, (183, 147, 210))
    TAPE_DELAY = (2.0, 'TAPE DELAY', 'time', 'feedback', 'v', (136, 180, 220))
    TAPE_DELAY_RAMP = (2.5, 'TAPE DELAY', 'ramp', 'rolloff', '^', (136, 180, 220))
    FREEVERB = (3.0, 'FREEVERB', 'time', 'damping', None, (125, 209, 159))
    LOOPER = (4.0, '4xLOOPER', 'loop_3', 'loop_4', None, (255, 202, 175))
    UNKNOWN = (None, '', '', '', None, NO_MATCH_COLOR)

    def __init__(self, selector, title, lower_left, lower_right, glyph, color):
        self.selector: Optional[float] = selector
        self.title: str = title
        self.lower_labels: Tuple[str, str] = (lower_left, lower_right)
        self.glyph: Optional[str] = glyph
        self.color: Tuple[int, int, int] = color

    @property
    def is_looper(self) -> bool:
        return self is Effect.LOOPER

    def slot_label(self, slot: int) -> str:
        """
        Get the label for a corner slot.

        Args:
            slot: Slot index 1-4 (1/2 top row, 3/4 bottom row)

        Returns:
            Label text without brackets
        """
        if slot not in (1, 2, 3, 4):
            raise ValueError(f"Slot must be 1-4, got {slot}")

        if self.is_looper:
            return LOOP_LABELS[slot - 1]
        if slot <= 2:
            return MIX_LABELS[slot - 1]
        return self.lower_labels[slot - 3]

    def slot_labels(self) -> Tuple[str, str, str, str]:
        """All four corner labels in slot order."""
        return tuple(self.slot_label(slot) for slot in (1, 2, 3, 4))


# Exact-match lookup, built once from the enum
_BY_SELECTOR = {
    effect.selector: effect for effect in Effect if effect.selector is not None
}


def lookup_effect(selector: float) -> Effect:
    """
    Map a raw selector value from the host to an Effect.

    Total: anything that is not exactly one of the known sentinels
    (including NaN and non-numeric input) maps to Effect.UNKNOWN.

    Args:
        selector: Value of the effect selector slot

    Returns:
        Matching Effect member, or Effect.UNKNOWN
    """
    try:
        key = float(selector)
    except (TypeError, ValueError):
        return Effect.UNKNOWN
    return _BY_SELECTOR.get(key, Effect.UNKNOWN)
