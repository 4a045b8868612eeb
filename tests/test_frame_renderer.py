"""Whole frames drawn onto a persistent framebuffer."""

import numpy as np

from delaychain.params import Effect, ParameterBuffer
from delaychain.render import Canvas, FrameRenderer

from conftest import make_values

W, H = 480, 800

# On the slot 1 ring (centre 117.5, 282; radius 60), clear of any text
RING_PIXEL = (282, 177)
# Inside the slot 1 ring, off the stroke and clear of any text
INSIDE_PIXEL = (242, 117)


def new_canvas():
    return Canvas(np.zeros((H, W, 3), dtype=np.uint8))


def buffer(**kwargs):
    return ParameterBuffer.from_values(make_values(**kwargs))


def test_dial_drawn_in_effect_color():
    canvas = new_canvas()
    layout = FrameRenderer().render(canvas, buffer(selector=1, magnitudes=(1, 1, 1, 1)))

    assert layout.effect is Effect.SCANNER_VIBRATO
    assert tuple(canvas.framebuffer[RING_PIXEL]) == (183, 147, 210)
    assert not canvas.framebuffer[INSIDE_PIXEL].any()


def test_unknown_effect_dial_is_white():
    canvas = new_canvas()
    FrameRenderer().render(canvas, buffer(selector=9, magnitudes=(1, 0, 0, 0)))
    assert tuple(canvas.framebuffer[RING_PIXEL]) == (255, 255, 255)


def test_zero_magnitude_draws_no_dial():
    canvas = new_canvas()
    FrameRenderer().render(canvas, buffer(selector=1))
    assert not canvas.framebuffer[RING_PIXEL].any()


def test_previous_frame_fades_instead_of_clearing():
    canvas = new_canvas()
    renderer = FrameRenderer()
    renderer.render(canvas, buffer(selector=1, magnitudes=(1, 0, 0, 0)))
    renderer.render(canvas, buffer(selector=1))

    red = int(canvas.framebuffer[RING_PIXEL][0])
    assert 0 < red < 183


def test_trail_is_gone_after_many_frames():
    canvas = new_canvas()
    renderer = FrameRenderer()
    renderer.render(canvas, buffer(selector=1, magnitudes=(1, 0, 0, 0)))
    for _ in range(60):
        renderer.render(canvas, buffer(selector=1))
    assert not canvas.framebuffer[RING_PIXEL].any()


def test_sign_of_magnitudes_and_values_does_not_matter():
    positive, negative = new_canvas(), new_canvas()
    renderer = FrameRenderer()
    renderer.render(positive, buffer(selector=3, magnitudes=(0.5, 0.25, 1, 0.75), raw=(3, 0.5, 12, 7)))
    renderer.render(negative, buffer(selector=3, magnitudes=(-0.5, -0.25, -1, -0.75), raw=(-3, -0.5, -12, -7)))
    assert np.array_equal(positive.framebuffer, negative.framebuffer)


def test_rule_line_drawn():
    canvas = new_canvas()
    FrameRenderer().render(canvas, ParameterBuffer())
    assert canvas.framebuffer[12].all()
