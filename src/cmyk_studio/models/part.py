"""
CMYK Portrait Studio - Part Data Model

Roles, print-separation channels and the static part definitions
that describe each droppable portrait part.

This is part of the MODEL layer - pure data, no UI logic.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Tuple

from cmyk_studio.constants import CHANNEL_HUES, ROLE_RENDER_SCALES
from cmyk_studio.models.transform import LayerTransform


class Role(Enum):
    """Semantic body-part category of a placed layer."""
    EYES = 'eyes'
    EARS = 'ears'
    NOSE = 'nose'
    LIPS = 'lips'
    ARM_LEFT = 'arm_left'
    ARM_RIGHT = 'arm_right'

    @property
    def render_scale(self) -> float:
        return ROLE_RENDER_SCALES[self.value]

    @property
    def is_arm(self) -> bool:
        return self in (Role.ARM_LEFT, Role.ARM_RIGHT)

    @property
    def is_paired(self) -> bool:
        """Paired face parts are mirrored when placed twice"""
        return self in (Role.EYES, Role.EARS)

    def opposite_arm(self) -> 'Role':
        """Get the arm role on the other side

        Raises:
            ValueError: If this role is not an arm
        """
        if self is Role.ARM_LEFT:
            return Role.ARM_RIGHT
        if self is Role.ARM_RIGHT:
            return Role.ARM_LEFT
        raise ValueError(f"{self.value} has no opposite side")

    @classmethod
    def parse(cls, value) -> Optional['Role']:
        """Look up a role by name, returning None when unknown"""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


class Channel(Enum):
    """One of the four print-separation colors.

    Values are the single-letter codes used by asset references.
    """
    CYAN = 'c'
    MAGENTA = 'm'
    YELLOW = 'y'
    BLACK = 'k'

    @property
    def hue(self) -> Tuple[int, int, int]:
        return CHANNEL_HUES[self.value]

    @classmethod
    def parse(cls, value) -> Optional['Channel']:
        """Look up a channel by code ('c') or name ('cyan')

        Returns:
            Channel, or None if the value matches nothing
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        text = value.strip().lower()
        for channel in cls:
            if text == channel.value or text == channel.name.lower():
                return channel
        return None


@dataclass(frozen=True)
class PartDefinition:
    """Static configuration record for one droppable part

    Attributes:
        role: Role this part fills
        title: Display title (e.g. "Eyes")
        assets: Asset reference per channel (missing channels are not offered)
        default_transform: Where the part lands when dropped
    """
    role: Role
    title: str
    assets: Dict[Channel, str] = field(default_factory=dict)
    default_transform: LayerTransform = field(default_factory=LayerTransform)

    def asset_for(self, channel: Channel) -> Optional[str]:
        return self.assets.get(channel)

    def label_for(self, channel: Channel) -> str:
        """Layer list label, e.g. 'Eyes (C)'"""
        return f"{self.title} ({channel.value.upper()})"
