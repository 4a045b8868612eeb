"""
Frame renderer - rasterizes a FrameLayout onto the canvas each frame.
"""

from .canvas import Canvas, WHITE, scale_for_size
from .layout import FrameLayout, TextItem, compose_frame
from ..params.parameter_state import ParameterBuffer

# Overlay opacity per frame; the previous frame shows through as a trail
FADE_ALPHA = 50 / 255


class FrameRenderer:
    """
    Stateless renderer: the only carry-over between frames is whatever is
    left in the framebuffer after the fade.
    """

    def __init__(self, fade_alpha: float = FADE_ALPHA, text_color=WHITE):
        """
        Initialize frame renderer.

        Args:
            fade_alpha: Opacity of the black overlay painted each frame
            text_color: RGB color for text and the rule line
        """
        self.fade_alpha = fade_alpha
        self.text_color = text_color

    def render(self, canvas: Canvas, buffer: ParameterBuffer) -> FrameLayout:
        """
        Render one frame.

        Args:
            canvas: Canvas over the persistent framebuffer (viewport sized)
            buffer: Parameter snapshot for this frame

        Returns:
            The layout that was drawn
        """
        layout = compose_frame(canvas.width, canvas.height, buffer)

        canvas.fade(self.fade_alpha)

        rule = layout.rule
        canvas.draw_line(rule.x1, rule.y1, rule.x2, rule.y2, self.text_color)

        self._draw_text(canvas, layout.title)
        for slot in layout.slots:
            self._draw_text(canvas, slot.label_item)
            self._draw_text(canvas, slot.value_item)
        for button in layout.buttons:
            self._draw_text(canvas, button)

        for slot in layout.slots:
            dial = slot.dial
            canvas.draw_ring(dial.x, dial.y, dial.diameter / 2, dial.thickness, dial.color)

        return layout

    def _draw_text(self, canvas: Canvas, item: TextItem):
        canvas.draw_text(
            item.text,
            item.x,
            item.y,
            self.text_color,
            scale=scale_for_size(item.size),
            anchor=item.anchor,
        )
