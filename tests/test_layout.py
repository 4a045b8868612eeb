"""Frame layout: labels, readouts, dial geometry and buttons."""

import math

import pytest

from delaychain.params import Effect, ParameterBuffer
from delaychain.render.layout import (
    EXP_MARKER,
    bracket,
    compose_frame,
    dial_thickness,
    format_value,
)

from conftest import make_values

W, H = 480, 800


def layout_for(**kwargs):
    return compose_frame(W, H, ParameterBuffer.from_values(make_values(**kwargs)))


@pytest.mark.parametrize("selector, title, labels", [
    (1, 'SCANNER VIBRATO', ('dry/wet', 'fx-level', 'rate', 'depth')),
    (2, 'TAPE DELAY', ('dry/wet', 'fx-level', 'time', 'feedback')),
    (2.5, 'TAPE DELAY', ('dry/wet', 'fx-level', 'ramp', 'rolloff')),
    (3, 'FREEVERB', ('dry/wet', 'fx-level', 'time', 'damping')),
    (4, '4xLOOPER', ('loop_1', 'loop_2', 'loop_3', 'loop_4')),
])
def test_title_and_labels(selector, title, labels):
    layout = layout_for(selector=selector)
    assert layout.title.text == title
    assert tuple(slot.label for slot in layout.slots) == labels
    assert tuple(slot.label_item.text for slot in layout.slots) == tuple(f'[{label}]' for label in labels)


def test_unknown_selector_blanks_title_and_lower_labels():
    layout = layout_for(selector=7)
    assert layout.effect is Effect.UNKNOWN
    assert layout.title.text == ''
    assert layout.slot(1).label_item.text == '[dry/wet]'
    assert layout.slot(3).label_item.text == ''
    assert layout.slot(4).label_item.text == ''
    assert all(slot.dial.color == (255, 255, 255) for slot in layout.slots)


@pytest.mark.parametrize("selector", [1, 2, 2.5, 3, 4])
def test_every_dial_uses_effect_color(selector):
    layout = layout_for(selector=selector)
    colors = {slot.dial.color for slot in layout.slots}
    assert colors == {layout.effect.color}


def test_readouts_show_absolute_values():
    layout = layout_for(selector=3, raw=(-3.0, 0.5, -0.25, 250.0))
    assert [slot.value for slot in layout.slots] == ['3', '0.5', '0.25', '250']


@pytest.mark.parametrize("slot", [1, 2, 3, 4])
def test_expression_target_overrides_readout(slot):
    layout = layout_for(selector=1, expression=slot, raw=(1, 2, 3, 4))
    for other in layout.slots:
        if other.slot == slot:
            assert other.value == EXP_MARKER
        else:
            assert other.value == format_value(float(other.slot))


def test_looper_blanks_readouts():
    layout = layout_for(selector=4, raw=(1, 2, 3, 4))
    assert [slot.value for slot in layout.slots] == ['', '', '', '']


def test_looper_still_shows_expression_marker():
    layout = layout_for(selector=4, expression=2, raw=(1, 2, 3, 4))
    assert [slot.value for slot in layout.slots] == ['', EXP_MARKER, '', '']


def test_dial_thickness_ignores_sign():
    assert dial_thickness(0.5) == dial_thickness(-0.5) == 7.5
    assert dial_thickness(0.0) == 0.0


def test_dial_thickness_is_not_clamped():
    assert dial_thickness(2.0) == 30.0


def test_dials_follow_magnitudes():
    layout = layout_for(selector=2, magnitudes=(1.0, -0.5, 0.0, 0.2))
    assert [slot.dial.thickness for slot in layout.slots] == pytest.approx([15.0, 7.5, 0.0, 3.0])


def test_positions():
    layout = layout_for(selector=1)

    assert (layout.title.x, layout.title.y) == (240, 50)
    assert (layout.rule.y1, layout.rule.x1, layout.rule.x2) == (12, 0, W)

    s1, s2, s3, s4 = layout.slots
    assert (s1.label_item.x, s1.label_item.y) == (120, 350)
    assert (s2.label_item.x, s2.label_item.y) == (360, 350)
    assert (s3.label_item.x, s3.label_item.y) == (120, 595)
    assert (s4.value_item.x, s4.value_item.y) == (360, 510)
    assert (s1.value_item.y, s3.value_item.y) == (265, 510)

    assert (s1.dial.x, s1.dial.y) == (117.5, 282)
    assert (s2.dial.x, s2.dial.y) == (357.5, 282)
    assert (s3.dial.x, s3.dial.y) == (117.5, 527)
    assert (s4.dial.x, s4.dial.y) == (357.5, 527)
    assert all(slot.dial.diameter == 120 for slot in layout.slots)


def test_positions_follow_viewport():
    layout = compose_frame(1000, 600, ParameterBuffer())
    assert layout.title.x == 500
    assert layout.slot(2).label_item.x == 750
    assert layout.slot(3).dial.y == 300 + 127


def test_navigation_buttons_always_present():
    for selector in (0, 1, 3, 4):
        buttons = layout_for(selector=selector).buttons
        assert [b.text for b in buttons] == ['[<]', '[>]']
        assert [b.x for b in buttons] == [W / 6, 5 * W / 6]
        assert all(b.anchor == 'bottom' and b.y == H - 25 for b in buttons)


@pytest.mark.parametrize("selector, glyph", [(2, '[v]'), (2.5, '[^]')])
def test_tape_delay_centre_button(selector, glyph):
    buttons = layout_for(selector=selector).buttons
    assert buttons[-1].text == glyph
    assert buttons[-1].x == W / 2


@pytest.mark.parametrize("value, text", [
    (0.0, '0'),
    (-0.0, '0'),
    (1.0, '1'),
    (0.1, '0.1'),
    (-12.75, '12.75'),
    (math.nan, 'NaN'),
    (-math.inf, 'Infinity'),
])
def test_format_value(value, text):
    assert format_value(value) == text


def test_bracket():
    assert bracket('exp') == '[exp]'
    assert bracket('') == ''
