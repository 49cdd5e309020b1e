"""
CMYK Portrait Studio

Compose a portrait from color-separated part layers and keep them placed by
hand (pointer drags) or by live face/hand tracking.
"""

__version__ = "0.1.0"
