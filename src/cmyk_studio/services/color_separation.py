"""
CMYK Portrait Studio - Color Separation Service

Derives four print-separation rasters (cyan, magenta, yellow, black) from an
RGBA source. Each output paints every pixel at its channel's fixed hue and
encodes the channel's contribution in alpha:

    cyan    = (1 - r) * a
    magenta = (1 - g) * a
    yellow  = (1 - b) * a
    black   = (1 - luminance) * a,  luminance = 0.299r + 0.587g + 0.114b

with r, g, b, a normalized to [0, 1] and alpha = round(value * 255).
"""

import numpy as np

from cmyk_studio.constants import LUMINANCE_WEIGHTS
from cmyk_studio.models.part import Channel
from cmyk_studio.models.raster import SeparationLayerSet, SourceRaster


def _to_alpha(values: np.ndarray) -> np.ndarray:
    """Scale [0, 1] values to 0-255, rounding halves up"""
    return np.clip(np.floor(values * 255.0 + 0.5), 0, 255).astype(np.uint8)


def _paint(hue, alpha: np.ndarray) -> np.ndarray:
    """Build an RGBA raster of one fixed hue with the given alpha plane"""
    raster = np.empty(alpha.shape + (4,), dtype=np.uint8)
    raster[:, :, :3] = hue
    raster[:, :, 3] = alpha
    return raster


def channel_alphas(raster: SourceRaster):
    """Per-pixel channel contributions in [0, 1]

    Returns:
        Tuple of four H x W float arrays (cyan, magenta, yellow, black)
    """
    normalized = raster.pixels.astype(np.float64) / 255.0
    r = normalized[:, :, 0]
    g = normalized[:, :, 1]
    b = normalized[:, :, 2]
    a = normalized[:, :, 3]

    wr, wg, wb = LUMINANCE_WEIGHTS
    luminance = wr * r + wg * g + wb * b

    return ((1.0 - r) * a,
            (1.0 - g) * a,
            (1.0 - b) * a,
            (1.0 - luminance) * a)


def separate(raster: SourceRaster) -> SeparationLayerSet:
    """Split a source raster into four alpha-masked separation rasters

    A zero-area source yields four zero-area rasters.

    Args:
        raster: RGBA source

    Returns:
        SeparationLayerSet with rasters of the source's dimensions
    """
    cyan, magenta, yellow, black = channel_alphas(raster)

    return SeparationLayerSet(
        cyan=_paint(Channel.CYAN.hue, _to_alpha(cyan)),
        magenta=_paint(Channel.MAGENTA.hue, _to_alpha(magenta)),
        yellow=_paint(Channel.YELLOW.hue, _to_alpha(yellow)),
        black=_paint(Channel.BLACK.hue, _to_alpha(black)),
    )


def separate_file(image_path) -> SeparationLayerSet:
    """Load an image file and separate it"""
    return separate(SourceRaster.from_file(image_path))
