"""
CMYK Portrait Studio - Tracking Binder

Maps one tracking observation per tick onto the placed layers:
- eyes: ordinal 0 follows the left eye, ordinal 1 the right eye, any ordinal
  falls back to the eyes centroid
- ears: ordinal 0/1 follow left/right ear, pushed outward; both ears required
- arm_left / arm_right: follow the palm center of the hand with matching side

Targets are converted from normalized camera space to canvas-local pixels
(center origin) and approached with exponential smoothing. Rotation is never
touched. A layer without a usable landmark keeps its transform.
"""

import logging
from typing import Dict, Optional, Tuple

from cmyk_studio.constants import TRACKING_SMOOTHING, SECOND_EYE_BIAS, EAR_SIDE_BIAS
from cmyk_studio.models.part import Role
from cmyk_studio.models.scene import PlacedLayer, Scene
from cmyk_studio.models.tracking import Handedness, TrackingObservation
from cmyk_studio.models.transform import LayerTransform, Vec2

logger = logging.getLogger(__name__)

ARM_SIDES = {
    Role.ARM_LEFT: Handedness.LEFT,
    Role.ARM_RIGHT: Handedness.RIGHT,
}


def to_canvas(point: Vec2, width: float, height: float) -> Vec2:
    """Normalized point (0-1) to canvas-local pixels around the center"""
    return Vec2((point.x - 0.5) * width, (point.y - 0.5) * height)


def smooth(old: float, target: float, factor: float = TRACKING_SMOOTHING) -> float:
    """One exponential smoothing step from old toward target"""
    return old + (target - old) * factor


class TrackingBinder:
    """Applies tracking observations to a scene, one tick at a time

    The binder starts inactive; the host activates it once a tracker is
    delivering observations. While inactive every tick is a no-op, so a
    tracker that never starts leaves manual control untouched.
    """

    def __init__(self, smoothing: float = TRACKING_SMOOTHING):
        self.smoothing = smoothing
        self.active = False

    def set_active(self, active: bool):
        self.active = bool(active)
        logger.info(f"Tracking {'enabled' if self.active else 'disabled'}")

    def apply(self, observation: Optional[TrackingObservation], scene: Scene,
              canvas_size: Optional[Tuple[float, float]]) -> Dict[str, LayerTransform]:
        """Move tracked layers toward this tick's landmarks

        Args:
            observation: Landmarks for this tick
            scene: Scene to update
            canvas_size: (width, height) of the canvas in pixels

        Returns:
            Mapping of layer id to the transform applied this tick
        """
        if not self.active or observation is None or len(scene) == 0:
            return {}
        if not canvas_size or canvas_size[0] <= 0 or canvas_size[1] <= 0:
            return {}

        width, height = canvas_size
        ordinals = self._ordinals(scene)
        updates = {}

        for layer in scene.ordered():
            target = self._target_for(layer, ordinals[layer.id], observation, width, height)
            if target is None:
                continue
            current = layer.transform
            updates[layer.id] = current.with_position(
                smooth(current.x, target.x, self.smoothing),
                smooth(current.y, target.y, self.smoothing),
            )

        if updates:
            scene.apply_transforms(updates)
        return updates

    def _ordinals(self, scene: Scene) -> Dict[str, int]:
        """Ordinal of every layer among same-role layers, by creation order"""
        ordinals = {}
        for role in Role:
            for ordinal, layer in enumerate(scene.layers_with_role(role)):
                ordinals[layer.id] = ordinal
        return ordinals

    def _target_for(self, layer: PlacedLayer, ordinal: int,
                    observation: TrackingObservation,
                    width: float, height: float) -> Optional[Vec2]:
        role = layer.role
        if role is Role.EYES:
            return self._eye_target(ordinal, observation, width, height)
        if role is Role.EARS:
            return self._ear_target(ordinal, observation, width, height)
        if role.is_arm:
            return self._hand_target(ARM_SIDES[role], observation, width, height)
        if role in (Role.NOSE, Role.LIPS):
            return None
        raise ValueError(f"Unhandled role: {role}")

    def _eye_target(self, ordinal, observation, width, height) -> Optional[Vec2]:
        point = None
        if ordinal == 0:
            point = observation.left_eye
        elif ordinal == 1:
            point = observation.right_eye
        if point is None:
            point = observation.eyes
        if point is None:
            return None

        target = to_canvas(point, width, height)
        if ordinal == 1:
            target = Vec2(target.x + SECOND_EYE_BIAS * width, target.y)
        return target

    def _ear_target(self, ordinal, observation, width, height) -> Optional[Vec2]:
        if observation.left_ear is None or observation.right_ear is None:
            return None

        if ordinal == 0:
            target = to_canvas(observation.left_ear, width, height)
            return Vec2(target.x - EAR_SIDE_BIAS * width, target.y)
        if ordinal == 1:
            target = to_canvas(observation.right_ear, width, height)
            return Vec2(target.x + EAR_SIDE_BIAS * width, target.y)
        return None

    def _hand_target(self, side: Handedness, observation, width, height) -> Optional[Vec2]:
        # Last matching hand wins
        target = None
        for hand in observation.hands:
            if hand.handedness is side:
                target = to_canvas(hand.center, width, height)
        return target
