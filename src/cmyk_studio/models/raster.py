"""Raster containers for color separation.

SourceRaster wraps an RGBA pixel buffer. SeparationLayerSet holds the four
single-hue rasters derived from it, one per print channel.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Tuple, Union

import numpy as np
from PIL import Image

from cmyk_studio.constants import CHANNEL_STACK_ORDER
from cmyk_studio.models.part import Channel


def _readonly(array: np.ndarray) -> np.ndarray:
    array = np.array(array, dtype=np.uint8)
    array.setflags(write=False)
    return array


class SourceRaster:
    """Immutable RGBA source image (uint8, shape H x W x 4)."""

    def __init__(self, pixels: np.ndarray):
        """Wrap a pixel array

        Args:
            pixels: H x W x 4 (RGBA) or H x W x 3 (RGB, treated as opaque) array

        Raises:
            ValueError: If the array is not a 3-channel or 4-channel image
        """
        pixels = np.asarray(pixels)
        if pixels.ndim != 3 or pixels.shape[2] not in (3, 4):
            raise ValueError(f"Expected H x W x 4 RGBA pixels, got shape {pixels.shape}")

        if pixels.shape[2] == 3:
            alpha = np.full(pixels.shape[:2] + (1,), 255, dtype=np.uint8)
            pixels = np.concatenate([pixels.astype(np.uint8), alpha], axis=2)

        self._pixels = _readonly(pixels)

    @classmethod
    def from_image(cls, image: Image.Image) -> 'SourceRaster':
        """Create from a Pillow image (any mode, converted to RGBA)"""
        return cls(np.array(image.convert('RGBA')))

    @classmethod
    def from_file(cls, image_path: Union[str, Path]) -> 'SourceRaster':
        """Load an image file as RGBA"""
        with Image.open(image_path) as img:
            return cls.from_image(img)

    @classmethod
    def empty(cls) -> 'SourceRaster':
        return cls(np.zeros((0, 0, 4), dtype=np.uint8))

    @property
    def pixels(self) -> np.ndarray:
        return self._pixels

    @property
    def width(self) -> int:
        return self._pixels.shape[1]

    @property
    def height(self) -> int:
        return self._pixels.shape[0]

    @property
    def size(self) -> Tuple[int, int]:
        """(width, height)"""
        return (self.width, self.height)

    def __repr__(self) -> str:
        return f"SourceRaster({self.width}x{self.height})"


@dataclass(frozen=True, eq=False)
class SeparationLayerSet:
    """Four alpha-masked single-hue rasters derived from one source

    Every raster has the source's dimensions. Pixel color is fixed per
    raster (Channel.hue); only alpha varies.
    """
    cyan: np.ndarray
    magenta: np.ndarray
    yellow: np.ndarray
    black: np.ndarray

    def __post_init__(self):
        for name in ('cyan', 'magenta', 'yellow', 'black'):
            object.__setattr__(self, name, _readonly(getattr(self, name)))

    @property
    def width(self) -> int:
        return self.cyan.shape[1]

    @property
    def height(self) -> int:
        return self.cyan.shape[0]

    def layer(self, channel: Channel) -> np.ndarray:
        return {
            Channel.CYAN: self.cyan,
            Channel.MAGENTA: self.magenta,
            Channel.YELLOW: self.yellow,
            Channel.BLACK: self.black,
        }[channel]

    def alpha(self, channel: Channel) -> np.ndarray:
        """Alpha plane (H x W) of one channel's raster"""
        return self.layer(channel)[:, :, 3]

    def in_stack_order(self) -> List[Tuple[Channel, np.ndarray]]:
        """Rasters in composition order: cyan, magenta, yellow, black"""
        return [(Channel(code), self.layer(Channel(code))) for code in CHANNEL_STACK_ORDER]

    def to_images(self) -> Dict[Channel, Image.Image]:
        """Convert each raster to a Pillow RGBA image"""
        return {channel: Image.fromarray(np.array(raster))
                for channel, raster in self.in_stack_order()}

    def save(self, directory: Union[str, Path], stem: str) -> Dict[Channel, Path]:
        """Write the four rasters as PNG files

        Files are named <stem>_c.png, <stem>_m.png, <stem>_y.png, <stem>_k.png

        Returns:
            Mapping of channel to written path
        """
        directory = Path(directory)
        directory.mkdir(parents=True, exist_ok=True)

        written = {}
        for channel, image in self.to_images().items():
            path = directory / f"{stem}_{channel.value}.png"
            image.save(path)
            written[channel] = path
        return written
