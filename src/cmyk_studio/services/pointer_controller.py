"""
CMYK Portrait Studio - Pointer Transform Controller

Manual move/rotate of one placed layer with the pointer.

States:
    Idle     - no gesture (state is None)
    Dragging - PointerDragState holds the layer, mode, press position and
               the transform captured at press time

Press on a layer starts a gesture: plain press moves, press with the rotate
modifier (Shift in the studio) rotates. Move events are received through a
subscription held only for the gesture; a one-shot release subscription
ends the gesture and detaches the move subscription wherever the release
happens.
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from cmyk_studio.constants import ROTATE_PIXELS_PER_DEGREE
from cmyk_studio.models.scene import Scene
from cmyk_studio.models.transform import LayerTransform, Vec2
from cmyk_studio.utils.event_hub import EventHub, Subscription, POINTER_MOVE, POINTER_RELEASE

logger = logging.getLogger(__name__)


class DragMode(Enum):
    MOVE = 'move'
    ROTATE = 'rotate'


@dataclass(frozen=True)
class PointerDragState:
    """Drag state for one pointer gesture"""
    layer_id: str
    mode: DragMode
    start_pointer: Vec2
    origin_transform: LayerTransform


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def dragged_transform(state: PointerDragState, pointer: Vec2) -> LayerTransform:
    """Transform for the current pointer position

    Move changes only the position, rotate changes only the rotation;
    the other family stays frozen at the origin.
    """
    delta = pointer - state.start_pointer
    origin = state.origin_transform
    if state.mode is DragMode.MOVE:
        return origin.with_position(round_half_up(origin.x + delta.x), round_half_up(origin.y + delta.y))
    return origin.with_rotation(round_half_up(origin.rotation + delta.x / ROTATE_PIXELS_PER_DEGREE))


class PointerTransformController:
    """Drives move/rotate gestures against a scene"""

    def __init__(self, scene: Scene, events: EventHub):
        """
        Args:
            scene: Scene whose layers are manipulated
            events: Source of POINTER_MOVE / POINTER_RELEASE events (payload: Vec2)
        """
        self.scene = scene
        self.events = events
        self.state: Optional[PointerDragState] = None
        self._move_sub: Optional[Subscription] = None
        self._release_sub: Optional[Subscription] = None

    @property
    def is_dragging(self) -> bool:
        return self.state is not None

    def press(self, layer_id: str, pointer: Vec2, rotate_modifier: bool = False) -> bool:
        """Start a gesture on a layer

        A press while another gesture is active replaces it.

        Args:
            layer_id: Layer under the pointer
            pointer: Press position
            rotate_modifier: True if the rotate modifier key is held

        Returns:
            True if a gesture started
        """
        layer = self.scene.get(layer_id)
        if layer is None:
            return False

        if self.state is not None:
            self._end()

        self.state = PointerDragState(
            layer_id=layer_id,
            mode=DragMode.ROTATE if rotate_modifier else DragMode.MOVE,
            start_pointer=pointer,
            origin_transform=layer.transform,
        )
        self._move_sub = self.events.subscribe(POINTER_MOVE, self.on_move)
        self._release_sub = self.events.subscribe(POINTER_RELEASE, self.on_release, once=True)
        logger.debug(f"Drag start: {layer_id} ({self.state.mode.value})")
        return True

    def on_move(self, pointer: Vec2):
        state = self.state
        if state is None:
            return
        if not self.scene.has_layer(state.layer_id):
            # Layer removed mid-gesture
            self._end()
            return
        self.scene.set_transform(state.layer_id, dragged_transform(state, pointer))

    def on_release(self, pointer: Optional[Vec2] = None):
        if self.state is not None:
            logger.debug(f"Drag end: {self.state.layer_id}")
        self._end()

    def cancel(self):
        """End the gesture without a release event"""
        self._end()

    def _end(self):
        for subscription in (self._move_sub, self._release_sub):
            if subscription is not None:
                subscription.release()
        self._move_sub = None
        self._release_sub = None
        self.state = None
