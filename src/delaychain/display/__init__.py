"""
Display layer - persistent framebuffer and display backends.
"""

from .display import Display
from .display_backend import DisplayBackend, create_display_backend, BACKENDS
from .headless_backend import HeadlessBackend

__all__ = [
    'Display',
    'DisplayBackend',
    'create_display_backend',
    'BACKENDS',
    'HeadlessBackend',
]
