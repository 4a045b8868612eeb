"""
Rendering - layout of one frame and rasterization onto a numpy framebuffer.
"""

from .canvas import Canvas
from .frame_renderer import FrameRenderer, FADE_ALPHA
from .layout import (
    FrameLayout,
    SlotLayout,
    TextItem,
    CircleItem,
    LineItem,
    compose_frame,
    format_value,
    dial_thickness,
    EXP_MARKER,
)

__all__ = [
    'Canvas',
    'FrameRenderer',
    'FADE_ALPHA',
    'FrameLayout',
    'SlotLayout',
    'TextItem',
    'CircleItem',
    'LineItem',
    'compose_frame',
    'format_value',
    'dial_thickness',
    'EXP_MARKER',
]
