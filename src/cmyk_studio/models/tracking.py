"""Tracking observation data structures.

One TrackingObservation is produced per tracker tick and consumed by the
tracking binder. Points are normalized to the camera frame (0-1 per axis).
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

from cmyk_studio.models.transform import Vec2


class Handedness(Enum):
    """Side reported for a detected hand"""
    LEFT = 'Left'
    RIGHT = 'Right'


@dataclass(frozen=True)
class Hand:
    """A detected hand: its side and palm center"""
    handedness: Handedness
    center: Vec2


@dataclass(frozen=True)
class TrackingObservation:
    """Snapshot of detected landmarks for one tick

    Every landmark is optional; a missing landmark means the tracker did not
    report it this tick. `eyes` is the centroid of both eyes and is used as
    a fallback when a specific eye is absent.
    """
    left_eye: Optional[Vec2] = None
    right_eye: Optional[Vec2] = None
    eyes: Optional[Vec2] = None
    lips: Optional[Vec2] = None
    nose: Optional[Vec2] = None
    left_ear: Optional[Vec2] = None
    right_ear: Optional[Vec2] = None
    hands: Tuple[Hand, ...] = field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        return not self.hands and all(
            point is None for point in (
                self.left_eye, self.right_eye, self.eyes, self.lips,
                self.nose, self.left_ear, self.right_ear,
            )
        )
