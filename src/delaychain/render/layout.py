"""
Frame layout - what goes where on screen for one parameter snapshot.

compose_frame() is pure: it turns (viewport, snapshot) into a FrameLayout
of text, circles and lines with absolute pixel positions. FrameRenderer
rasterizes the result; tests can check the layout without touching pixels.

All offsets are fixed pixel distances from the viewport centre or edges,
sized for a phone or tablet held in portrait.
"""

import math
from dataclasses import dataclass
from typing import Tuple

from ..params.effects import Effect, lookup_effect
from ..params.parameter_state import ParameterBuffer

# Text sizes (pixel height of a capital letter, roughly)
TITLE_SIZE = 35
LABEL_SIZE = 25
VALUE_SIZE = 30
BUTTON_SIZE = 25

TITLE_Y = 50
RULE_Y = 12
BUTTON_MARGIN = 25

DIAL_DIAMETER = 120
THICKNESS_SCALE = 15.0
DIAL_X_NUDGE = 2.5

EXP_MARKER = '[exp]'

# Row offsets from the vertical centre: (label y, value y, dial y)
TOP_ROW = (-50, -135, -118)
BOTTOM_ROW = (195, 110, 127)


@dataclass(frozen=True)
class TextItem:
    """Horizontally centred text. anchor is 'top' or 'bottom' edge at y."""
    text: str
    x: float
    y: float
    size: int
    anchor: str = 'top'


@dataclass(frozen=True)
class CircleItem:
    """Unfilled circle. thickness is the stroke width in pixels."""
    x: float
    y: float
    diameter: float
    thickness: float
    color: Tuple[int, int, int]


@dataclass(frozen=True)
class LineItem:
    """One-pixel line."""
    x1: float
    y1: float
    x2: float
    y2: float


@dataclass(frozen=True)
class SlotLayout:
    """One corner control: label, value readout and dial."""
    slot: int
    label: str
    value: str
    label_item: TextItem
    value_item: TextItem
    dial: CircleItem


@dataclass(frozen=True)
class FrameLayout:
    width: int
    height: int
    effect: Effect
    rule: LineItem
    title: TextItem
    slots: Tuple[SlotLayout, SlotLayout, SlotLayout, SlotLayout]
    buttons: Tuple[TextItem, ...]

    def slot(self, slot: int) -> SlotLayout:
        return self.slots[slot - 1]


def format_value(value: float) -> str:
    """
    Format a raw host value for display.

    Absolute value, integral numbers without a decimal point, everything
    else in shortest round-trip form.

    Args:
        value: Raw value from the buffer

    Returns:
        Display text
    """
    value = abs(value)
    if math.isnan(value):
        return 'NaN'
    if math.isinf(value):
        return 'Infinity'
    if value.is_integer() and value < 1e21:
        return str(int(value))
    return repr(value)


def slot_value_text(slot: int, effect: Effect, buffer: ParameterBuffer) -> str:
    """
    Value readout for one slot.

    Args:
        slot: Slot index 1-4
        effect: Active effect
        buffer: Parameter snapshot

    Returns:
        '[exp]' if the slot is under expression control, '' in looper
        mode, otherwise the formatted raw value
    """
    if buffer.expression_target == slot:
        return EXP_MARKER
    if effect.is_looper:
        return ''
    return format_value(buffer.raw_value(slot))


def dial_thickness(magnitude: float) -> float:
    """Stroke width for a dial magnitude (sign ignored, not clamped)."""
    return THICKNESS_SCALE * abs(magnitude)


def bracket(text: str) -> str:
    return f'[{text}]' if text else ''


def _compose_slot(slot: int, effect: Effect, buffer: ParameterBuffer,
                  width: int, height: int) -> SlotLayout:
    left = slot in (1, 3)
    label_dy, value_dy, dial_dy = TOP_ROW if slot <= 2 else BOTTOM_ROW

    text_x = width / 4 if left else 3 * width / 4
    dial_center = width / 2 - DIAL_X_NUDGE
    dial_x = dial_center - width / 4 if left else dial_center + width / 4

    label = effect.slot_label(slot)
    value = slot_value_text(slot, effect, buffer)

    return SlotLayout(
        slot=slot,
        label=label,
        value=value,
        label_item=TextItem(bracket(label), text_x, height / 2 + label_dy, LABEL_SIZE),
        value_item=TextItem(value, text_x, height / 2 + value_dy, VALUE_SIZE),
        dial=CircleItem(
            dial_x,
            height / 2 + dial_dy,
            DIAL_DIAMETER,
            dial_thickness(buffer.magnitude(slot)),
            effect.color,
        ),
    )


def _compose_buttons(effect: Effect, width: int, height: int) -> Tuple[TextItem, ...]:
    y = height - BUTTON_MARGIN
    buttons = [
        TextItem(bracket('<'), width / 6, y, BUTTON_SIZE, anchor='bottom'),
        TextItem(bracket('>'), 5 * width / 6, y, BUTTON_SIZE, anchor='bottom'),
    ]
    if effect.glyph:
        buttons.append(TextItem(bracket(effect.glyph), width / 2, y, BUTTON_SIZE, anchor='bottom'))
    return tuple(buttons)


def compose_frame(width: int, height: int, buffer: ParameterBuffer) -> FrameLayout:
    """
    Lay out one frame.

    Args:
        width: Viewport width in pixels
        height: Viewport height in pixels
        buffer: Parameter snapshot for this frame

    Returns:
        FrameLayout with absolute positions
    """
    effect = lookup_effect(buffer.effect_selector)

    slots = (
        _compose_slot(1, effect, buffer, width, height),
        _compose_slot(2, effect, buffer, width, height),
        _compose_slot(3, effect, buffer, width, height),
        _compose_slot(4, effect, buffer, width, height),
    )

    return FrameLayout(
        width=width,
        height=height,
        effect=effect,
        rule=LineItem(0, RULE_Y, width, RULE_Y),
        title=TextItem(effect.title, width / 2, TITLE_Y, TITLE_SIZE),
        slots=slots,
        buttons=_compose_buttons(effect, width, height),
    )
