"""
Parameter state - the latest values pushed by the host.

The host sends one flat buffer of floats per update. Slot layout:

    0      unused
    1-4    dial magnitudes (normalized, sign ignored on screen)
    5      effect selector
    6-9    raw values shown under each dial
    10     expression target (1-4, anything else = none)

The render pass never sees this holder, only the immutable snapshot it
hands out, so a host update can't land halfway through a frame.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional, Tuple

log = logging.getLogger(__name__)

BUFFER_SIZE = 11

EFFECT_INDEX = 5
EXPRESSION_INDEX = 10
MAGNITUDE_OFFSET = 0   # slot n -> index n
RAW_VALUE_OFFSET = 5   # slot n -> index n + 5


def _check_slot(slot: int):
    if slot not in (1, 2, 3, 4):
        raise ValueError(f"Slot must be 1-4, got {slot}")


@dataclass(frozen=True)
class ParameterBuffer:
    """Immutable snapshot of one host update."""

    values: Tuple[float, ...] = field(default=(0.0,) * BUFFER_SIZE)

    def __post_init__(self):
        if len(self.values) != BUFFER_SIZE:
            raise ValueError(
                f"ParameterBuffer needs {BUFFER_SIZE} values, got {len(self.values)}"
            )

    @classmethod
    def from_values(cls, values: Iterable) -> 'ParameterBuffer':
        """
        Build a snapshot from raw host values.

        Extra values past the last slot are dropped.

        Args:
            values: At least BUFFER_SIZE numbers

        Returns:
            ParameterBuffer

        Raises:
            ValueError: Too few values, or a value that is not a number
        """
        raw = list(values)
        if len(raw) < BUFFER_SIZE:
            raise ValueError(f"Expected at least {BUFFER_SIZE} values, got {len(raw)}")

        converted = []
        for index, value in enumerate(raw[:BUFFER_SIZE]):
            if isinstance(value, (str, bytes)):
                raise ValueError(f"Slot {index} is not numeric: {value!r}")
            try:
                converted.append(float(value))
            except (TypeError, ValueError):
                raise ValueError(f"Slot {index} is not numeric: {value!r}")

        return cls(tuple(converted))

    @property
    def effect_selector(self) -> float:
        return self.values[EFFECT_INDEX]

    @property
    def expression_target(self) -> Optional[int]:
        """Slot (1-4) bound to the expression pedal, or None."""
        target = self.values[EXPRESSION_INDEX]
        if target in (1.0, 2.0, 3.0, 4.0):
            return int(target)
        return None

    def magnitude(self, slot: int) -> float:
        """Normalized dial magnitude for a slot, as sent (not clamped)."""
        _check_slot(slot)
        return self.values[slot + MAGNITUDE_OFFSET]

    def raw_value(self, slot: int) -> float:
        """Raw display value for a slot, as sent."""
        _check_slot(slot)
        return self.values[slot + RAW_VALUE_OFFSET]


class ParameterState:
    """
    Holds the current ParameterBuffer.

    Written by the inbound receiver, read by the render pass. Both run on
    the frame loop, so a plain reference swap is enough.
    """

    def __init__(self, initial: Optional[ParameterBuffer] = None):
        """
        Initialize parameter state.

        Args:
            initial: Starting snapshot (default: all zeros)
        """
        self._buffer = initial if initial is not None else ParameterBuffer()
        self.update_count = 0
        self.rejected_count = 0

    def replace(self, values: Iterable) -> bool:
        """
        Replace the whole buffer with new host values.

        Malformed updates are dropped and the previous snapshot stays
        current.

        Args:
            values: Raw values from the host

        Returns:
            True if the snapshot was replaced
        """
        try:
            buffer = ParameterBuffer.from_values(values)
        except ValueError as e:
            self.rejected_count += 1
            log.debug("Ignoring parameter update: %s", e)
            return False

        self._buffer = buffer
        self.update_count += 1
        return True

    def snapshot(self) -> ParameterBuffer:
        """Current snapshot (immutable, safe to hold across a frame)."""
        return self._buffer

    def __repr__(self) -> str:
        values_str = ", ".join(f"{v:g}" for v in self._buffer.values)
        return f"ParameterState([{values_str}], updates={self.update_count})"
