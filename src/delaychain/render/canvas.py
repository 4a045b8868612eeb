"""
Canvas - primitive drawing operations on a numpy framebuffer.

Text uses a 5x7 bitmap font scaled up in whole pixels, so frames are
identical on every machine and need no font files on the pedal.
"""

import math
from typing import Tuple

import numpy as np


Color = Tuple[int, int, int]

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)

# 5x7 bitmap font. Each character is 5 pixels wide, 7 pixels tall,
# stored as 7 row bitmasks (MSB = leftmost column).
GLYPH_WIDTH = 5
GLYPH_HEIGHT = 7
GLYPH_ADVANCE = GLYPH_WIDTH + 1

FONT_5X7 = {
    ' ': [0b00000, 0b00000, 0b00000, 0b00000, 0b00000, 0b00000, 0b00000],
    'A': [0b01110, 0b10001, 0b10001, 0b11111, 0b10001, 0b10001, 0b10001],
    'B': [0b11110, 0b10001, 0b10001, 0b11110, 0b10001, 0b10001, 0b11110],
    'C': [0b01110, 0b10001, 0b10000, 0b10000, 0b10000, 0b10001, 0b01110],
    'D': [0b11110, 0b10001, 0b10001, 0b10001, 0b10001, 0b10001, 0b11110],
    'E': [0b11111, 0b10000, 0b10000, 0b11110, 0b10000, 0b10000, 0b11111],
    'F': [0b11111, 0b10000, 0b10000, 0b11110, 0b10000, 0b10000, 0b10000],
    'G': [0b01110, 0b10001, 0b10000, 0b10111, 0b10001, 0b10001, 0b01110],
    'H': [0b10001, 0b10001, 0b10001, 0b11111, 0b10001, 0b10001, 0b10001],
    'I': [0b01110, 0b00100, 0b00100, 0b00100, 0b00100, 0b00100, 0b01110],
    'J': [0b00111, 0b00010, 0b00010, 0b00010, 0b00010, 0b10010, 0b01100],
    'K': [0b10001, 0b10010, 0b10100, 0b11000, 0b10100, 0b10010, 0b10001],
    'L': [0b10000, 0b10000, 0b10000, 0b10000, 0b10000, 0b10000, 0b11111],
    'M': [0b10001, 0b11011, 0b10101, 0b10101, 0b10001, 0b10001, 0b10001],
    'N': [0b10001, 0b11001, 0b10101, 0b10011, 0b10001, 0b10001, 0b10001],
    'O': [0b01110, 0b10001, 0b10001, 0b10001, 0b10001, 0b10001, 0b01110],
    'P': [0b11110, 0b10001, 0b10001, 0b11110, 0b10000, 0b10000, 0b10000],
    'Q': [0b01110, 0b10001, 0b10001, 0b10001, 0b10101, 0b10010, 0b01101],
    'R': [0b11110, 0b10001, 0b10001, 0b11110, 0b10100, 0b10010, 0b10001],
    'S': [0b01111, 0b10000, 0b10000, 0b01110, 0b00001, 0b00001, 0b11110],
    'T': [0b11111, 0b00100, 0b00100, 0b00100, 0b00100, 0b00100, 0b00100],
    'U': [0b10001, 0b10001, 0b10001, 0b10001, 0b10001, 0b10001, 0b01110],
    'V': [0b10001, 0b10001, 0b10001, 0b10001, 0b10001, 0b01010, 0b00100],
    'W': [0b10001, 0b10001, 0b10001, 0b10101, 0b10101, 0b11011, 0b10001],
    'X': [0b10001, 0b10001, 0b01010, 0b00100, 0b01010, 0b10001, 0b10001],
    'Y': [0b10001, 0b10001, 0b01010, 0b00100, 0b00100, 0b00100, 0b00100],
    'Z': [0b11111, 0b00001, 0b00010, 0b00100, 0b01000, 0b10000, 0b11111],
    'a': [0b00000, 0b00000, 0b01110, 0b00001, 0b01111, 0b10001, 0b01111],
    'b': [0b10000, 0b10000, 0b10110, 0b11001, 0b10001, 0b10001, 0b11110],
    'c': [0b00000, 0b00000, 0b01110, 0b10000, 0b10000, 0b10001, 0b01110],
    'd': [0b00001, 0b00001, 0b01101, 0b10011, 0b10001, 0b10001, 0b01111],
    'e': [0b00000, 0b00000, 0b01110, 0b10001, 0b11111, 0b10000, 0b01110],
    'f': [0b00110, 0b01001, 0b01000, 0b11100, 0b01000, 0b01000, 0b01000],
    'g': [0b00000, 0b01111, 0b10001, 0b10001, 0b01111, 0b00001, 0b01110],
    'h': [0b10000, 0b10000, 0b10110, 0b11001, 0b10001, 0b10001, 0b10001],
    'i': [0b00100, 0b00000, 0b01100, 0b00100, 0b00100, 0b00100, 0b01110],
    'j': [0b00010, 0b00000, 0b00110, 0b00010, 0b00010, 0b10010, 0b01100],
    'k': [0b10000, 0b10000, 0b10010, 0b10100, 0b11000, 0b10100, 0b10010],
    'l': [0b01100, 0b00100, 0b00100, 0b00100, 0b00100, 0b00100, 0b01110],
    'm': [0b00000, 0b00000, 0b11010, 0b10101, 0b10101, 0b10001, 0b10001],
    'n': [0b00000, 0b00000, 0b10110, 0b11001, 0b10001, 0b10001, 0b10001],
    'o': [0b00000, 0b00000, 0b01110, 0b10001, 0b10001, 0b10001, 0b01110],
    'p': [0b00000, 0b00000, 0b11110, 0b10001, 0b11110, 0b10000, 0b10000],
    'q': [0b00000, 0b00000, 0b01101, 0b10011, 0b01111, 0b00001, 0b00001],
    'r': [0b00000, 0b00000, 0b10110, 0b11001, 0b10000, 0b10000, 0b10000],
    's': [0b00000, 0b00000, 0b01110, 0b10000, 0b01110, 0b00001, 0b11110],
    't': [0b01000, 0b01000, 0b11100, 0b01000, 0b01000, 0b01001, 0b00110],
    'u': [0b00000, 0b00000, 0b10001, 0b10001, 0b10001, 0b10011, 0b01101],
    'v': [0b00000, 0b00000, 0b10001, 0b10001, 0b10001, 0b01010, 0b00100],
    'w': [0b00000, 0b00000, 0b10001, 0b10001, 0b10101, 0b10101, 0b01010],
    'x': [0b00000, 0b00000, 0b10001, 0b01010, 0b00100, 0b01010, 0b10001],
    'y': [0b00000, 0b00000, 0b10001, 0b10001, 0b01111, 0b00001, 0b01110],
    'z': [0b00000, 0b00000, 0b11111, 0b00010, 0b00100, 0b01000, 0b11111],
    '0': [0b01110, 0b10001, 0b10011, 0b10101, 0b11001, 0b10001, 0b01110],
    '1': [0b00100, 0b01100, 0b00100, 0b00100, 0b00100, 0b00100, 0b01110],
    '2': [0b01110, 0b10001, 0b00001, 0b00010, 0b00100, 0b01000, 0b11111],
    '3': [0b11111, 0b00010, 0b00100, 0b00010, 0b00001, 0b10001, 0b01110],
    '4': [0b00010, 0b00110, 0b01010, 0b10010, 0b11111, 0b00010, 0b00010],
    '5': [0b11111, 0b10000, 0b11110, 0b00001, 0b00001, 0b10001, 0b01110],
    '6': [0b00110, 0b01000, 0b10000, 0b11110, 0b10001, 0b10001, 0b01110],
    '7': [0b11111, 0b00001, 0b00010, 0b00100, 0b01000, 0b01000, 0b01000],
    '8': [0b01110, 0b10001, 0b10001, 0b01110, 0b10001, 0b10001, 0b01110],
    '9': [0b01110, 0b10001, 0b10001, 0b01111, 0b00001, 0b00010, 0b01100],
    '-': [0b00000, 0b00000, 0b00000, 0b11111, 0b00000, 0b00000, 0b00000],
    '+': [0b00000, 0b00100, 0b00100, 0b11111, 0b00100, 0b00100, 0b00000],
    '_': [0b00000, 0b00000, 0b00000, 0b00000, 0b00000, 0b00000, 0b11111],
    ':': [0b00000, 0b00100, 0b00000, 0b00000, 0b00000, 0b00100, 0b00000],
    '/': [0b00000, 0b00001, 0b00010, 0b00100, 0b01000, 0b10000, 0b00000],
    '.': [0b00000, 0b00000, 0b00000, 0b00000, 0b00000, 0b00000, 0b00100],
    '<': [0b00010, 0b00100, 0b01000, 0b10000, 0b01000, 0b00100, 0b00010],
    '>': [0b01000, 0b00100, 0b00010, 0b00001, 0b00010, 0b00100, 0b01000],
    '^': [0b00100, 0b01010, 0b10001, 0b00000, 0b00000, 0b00000, 0b00000],
    '[': [0b01110, 0b01000, 0b01000, 0b01000, 0b01000, 0b01000, 0b01110],
    ']': [0b01110, 0b00010, 0b00010, 0b00010, 0b00010, 0b00010, 0b01110],
}


def scale_for_size(size: int) -> int:
    """Whole-pixel font scale for a text size (cap height in pixels)."""
    return max(1, int(size) // GLYPH_HEIGHT)


def text_width(text: str, scale: int = 1) -> int:
    """Width in pixels of text drawn at scale (including letter spacing)."""
    return len(text) * GLYPH_ADVANCE * scale


class Canvas:
    """Draws onto a numpy framebuffer of shape (height, width, 3), uint8."""

    def __init__(self, framebuffer: np.ndarray):
        """
        Initialize canvas.

        Args:
            framebuffer: numpy array of shape (height, width, 3), dtype=uint8
        """
        self.framebuffer = framebuffer
        self.height, self.width = framebuffer.shape[:2]

    def fade(self, alpha: float, color: Color = BLACK):
        """
        Composite a full-frame rectangle over the previous frame.

        Leaves a decaying trail of whatever was drawn before instead of a
        hard clear.

        Args:
            alpha: Opacity of the overlay (0.0-1.0)
            color: Overlay color
        """
        alpha = min(1.0, max(0.0, alpha))
        blended = self.framebuffer.astype(np.float32) * (1.0 - alpha)
        if color != BLACK:
            blended += np.array(color, dtype=np.float32) * alpha
        self.framebuffer[:, :] = np.clip(blended, 0, 255).astype(np.uint8)

    def draw_rect(self, x: int, y: int, width: int, height: int, color: Color):
        """
        Draw a filled rectangle, clipped to the canvas.

        Args:
            x, y: Top-left corner
            width, height: Dimensions
            color: RGB tuple (0-255)
        """
        x1, y1 = max(0, x), max(0, y)
        x2, y2 = min(self.width, x + width), min(self.height, y + height)
        if x1 >= x2 or y1 >= y2:
            return

        self.framebuffer[y1:y2, x1:x2] = color

    def draw_char(self, char: str, x: int, y: int, color: Color = WHITE, scale: int = 1) -> int:
        """
        Draw a single character using the bitmap font.

        Characters missing from the font are drawn as blanks.

        Args:
            char: Character to draw
            x, y: Top-left position
            color: RGB tuple (0-255)
            scale: Scaling factor (1 = 5x7 pixels)

        Returns:
            Advance width of the character
        """
        bitmap = FONT_5X7.get(char, FONT_5X7[' '])

        for row_idx, row_data in enumerate(bitmap):
            for col_idx in range(GLYPH_WIDTH):
                if row_data & (1 << (GLYPH_WIDTH - 1 - col_idx)):
                    # Scaled pixel block, clipped to the canvas
                    self.draw_rect(x + col_idx * scale, y + row_idx * scale, scale, scale, color)

        return GLYPH_ADVANCE * scale

    def draw_text(self, text: str, x: float, y: float, color: Color = WHITE,
                  scale: int = 1, anchor: str = 'top') -> int:
        """
        Draw text centred horizontally on x.

        Args:
            text: String to draw
            x: Horizontal centre
            y: Top edge (anchor='top') or bottom edge (anchor='bottom')
            color: RGB tuple (0-255)
            scale: Scaling factor
            anchor: Which text edge sits on y

        Returns:
            Total width of drawn text
        """
        if not text:
            return 0

        total_width = text_width(text, scale)
        cursor_x = int(round(x)) - total_width // 2
        top = int(round(y))
        if anchor == 'bottom':
            top -= GLYPH_HEIGHT * scale
        elif anchor != 'top':
            raise ValueError(f"Unknown text anchor: {anchor}")

        for char in text:
            cursor_x += self.draw_char(char, cursor_x, top, color, scale)

        return total_width

    def draw_line(self, x1: int, y1: int, x2: int, y2: int, color: Color = WHITE):
        """
        Draw a one-pixel line using Bresenham's algorithm.

        Args:
            x1, y1: Start point
            x2, y2: End point
            color: RGB tuple (0-255)
        """
        x1, y1, x2, y2 = int(round(x1)), int(round(y1)), int(round(x2)), int(round(y2))
        dx = abs(x2 - x1)
        dy = abs(y2 - y1)
        sx = 1 if x1 < x2 else -1
        sy = 1 if y1 < y2 else -1
        err = dx - dy

        while True:
            if 0 <= x1 < self.width and 0 <= y1 < self.height:
                self.framebuffer[y1, x1] = color

            if x1 == x2 and y1 == y2:
                break

            e2 = 2 * err
            if e2 > -dy:
                err -= dy
                x1 += sx
            if e2 < dx:
                err += dx
                y1 += sy

    def draw_ring(self, cx: float, cy: float, radius: float, thickness: float, color: Color):
        """
        Draw an unfilled circle with a stroke centred on the radius.

        The stroke covers radius +/- thickness/2. Zero, negative or
        non-finite thickness draws nothing.

        Args:
            cx, cy: Centre
            radius: Circle radius in pixels
            thickness: Stroke width in pixels
            color: RGB tuple (0-255)
        """
        if not math.isfinite(thickness) or thickness <= 0:
            return

        half = thickness / 2.0
        reach = radius + half

        # Only evaluate the bounding box of the ring
        x0 = max(0, int(math.floor(cx - reach)))
        x1 = min(self.width, int(math.ceil(cx + reach)) + 1)
        y0 = max(0, int(math.floor(cy - reach)))
        y1 = min(self.height, int(math.ceil(cy + reach)) + 1)
        if x0 >= x1 or y0 >= y1:
            return

        ys, xs = np.mgrid[y0:y1, x0:x1]
        dist = np.hypot(xs - cx, ys - cy)
        mask = np.abs(dist - radius) <= half
        self.framebuffer[y0:y1, x0:x1][mask] = color
