"""UI components for CMYK Portrait Studio

- pointer_source.py: Qt event filter feeding pointer drag events
- studio_canvas.py: Canvas widget (drops, pointer drags, tracking ticks)
"""

from .pointer_source import QtPointerSource
from .studio_canvas import StudioCanvas

__all__ = [
    'QtPointerSource',
    'StudioCanvas',
]
