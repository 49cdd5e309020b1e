"""
CMYK Portrait Studio - Scene Data Model

THE MODEL for the studio canvas. Owns the ordered collection of placed layers.

This class handles:
- Layer creation through the placement policy (mirroring, auto-balance)
- Layer removal and whole-value transform replacement
- Reordering (move to tail)
- Query API for painting and for the tracking binder (ordinals)

The Scene model is INDEPENDENT of UI:
- No Qt imports
- No rendering logic
- No drag state (that lives in the controllers)

All mutations are copy-on-write: each operation builds a new tuple of layers
and swaps it in, so a listener never observes a half-applied change.

Usage:
    scene = Scene(catalog)
    layer_id = scene.add_layer(Role.EYES, Channel.CYAN, 'eyes_c.png', LayerTransform())
    scene.set_transform(layer_id, LayerTransform(10, 20, 0))
    scene.move_to_tail(layer_id)
    for layer in scene.ordered():
        ...
"""

import logging
import uuid as uuid_module
from dataclasses import dataclass, replace
from typing import Callable, Dict, List, Optional, Tuple

from cmyk_studio.models.part import Channel, Role
from cmyk_studio.models.transform import LayerTransform


@dataclass(frozen=True)
class PlacedLayer:
    """One part placed on the canvas

    Attributes:
        id: Stable identity (UUID string)
        role: Body-part role
        channel: Print-separation channel
        asset: Asset reference of the channel artwork
        transform: Current transform (replaced whole)
        sequence: Creation counter; orders same-role layers for tracking
    """
    id: str
    role: Role
    channel: Channel
    asset: str
    transform: LayerTransform
    sequence: int

    def __repr__(self) -> str:
        return f"PlacedLayer(id='{self.id}', role={self.role.value}, channel={self.channel.value})"


class Scene:
    """Ordered collection of placed layers with the placement policy

    Scene order doubles as paint order (see PAINT_ORDER_TAIL_ON_TOP).
    """

    def __init__(self, catalog):
        """Create an empty scene

        Args:
            catalog: PartCatalog consulted by the placement policy
        """
        self._catalog = catalog
        self._layers: Tuple[PlacedLayer, ...] = ()
        self._next_sequence = 0
        self._listeners: List[Callable[['Scene'], None]] = []
        self._logger = logging.getLogger('Scene')

    # ========================================
    # Mutation
    # ========================================

    def add_layer(self, role: Role, channel: Channel, asset: str,
                  default_transform: LayerTransform) -> str:
        """Place a new layer at the tail of the sequence

        The final role and transform come from the placement policy, so the
        new layer may be mirrored or moved to the opposite arm.

        Args:
            role: Requested role
            channel: Channel of the artwork
            asset: Asset reference
            default_transform: Part definition default transform

        Returns:
            Identity of the new layer
        """
        # placement imports cmyk_studio.models, whose package init imports this module
        from cmyk_studio.services.placement import resolve_placement

        placement = resolve_placement(role, channel, asset, default_transform,
                                      self._layers, self._catalog)
        layer = PlacedLayer(
            id=str(uuid_module.uuid4()),
            role=placement.role,
            channel=channel,
            asset=placement.asset,
            transform=placement.transform,
            sequence=self._next_sequence,
        )
        self._next_sequence += 1

        self._commit(self._layers + (layer,))
        self._logger.debug(f"Added layer: {layer.id} ({layer.role.value}/{channel.value}) at {layer.transform}")
        return layer.id

    def remove_layer(self, layer_id: str):
        """Remove layer by id

        Raises:
            ValueError: If id not found
        """
        index = self._index_of(layer_id)
        self._commit(self._layers[:index] + self._layers[index + 1:])
        self._logger.debug(f"Removed layer: {layer_id}")

    def set_transform(self, layer_id: str, transform: LayerTransform):
        """Replace a layer's transform

        Raises:
            ValueError: If id not found
        """
        self.apply_transforms({layer_id: transform})

    def apply_transforms(self, transforms: Dict[str, LayerTransform]):
        """Replace several transforms in a single mutation

        Raises:
            ValueError: If any id is not found (nothing is applied)
        """
        if not transforms:
            return
        for layer_id in transforms:
            self._index_of(layer_id)

        self._commit(tuple(
            replace(layer, transform=transforms[layer.id]) if layer.id in transforms else layer
            for layer in self._layers
        ))

    def move_to_tail(self, layer_id: str):
        """Move a layer to the end of the sequence, transform unchanged

        With PAINT_ORDER_TAIL_ON_TOP the layer ends up painted above all others.

        Raises:
            ValueError: If id not found
        """
        index = self._index_of(layer_id)
        layer = self._layers[index]
        self._commit(self._layers[:index] + self._layers[index + 1:] + (layer,))
        self._logger.debug(f"Moved layer to tail: {layer_id}")

    def clear(self):
        """Remove all layers"""
        self._commit(())
        self._logger.debug("Cleared scene")

    # ========================================
    # Query
    # ========================================

    def ordered(self) -> Tuple[PlacedLayer, ...]:
        """Layers in paint order"""
        return self._layers

    def get(self, layer_id: str) -> Optional[PlacedLayer]:
        for layer in self._layers:
            if layer.id == layer_id:
                return layer
        return None

    def has_layer(self, layer_id: str) -> bool:
        return self.get(layer_id) is not None

    def layers_with_role(self, role: Role) -> List[PlacedLayer]:
        """Layers of one role in creation order"""
        return sorted((layer for layer in self._layers if layer.role is role),
                      key=lambda layer: layer.sequence)

    def ordinal_of(self, layer_id: str) -> int:
        """Position of a layer among same-role layers in creation order

        Raises:
            ValueError: If id not found
        """
        layer = self._layers[self._index_of(layer_id)]
        return sum(1 for other in self._layers
                   if other.role is layer.role and other.sequence < layer.sequence)

    def __len__(self) -> int:
        return len(self._layers)

    def __iter__(self):
        return iter(self._layers)

    def __repr__(self) -> str:
        return f"Scene({len(self._layers)} layers)"

    # ========================================
    # Listeners
    # ========================================

    def add_listener(self, callback: Callable[['Scene'], None]):
        """Register a callback run after every completed mutation"""
        self._listeners.append(callback)

    def remove_listener(self, callback: Callable[['Scene'], None]):
        self._listeners.remove(callback)

    # ========================================
    # Internal
    # ========================================

    def _index_of(self, layer_id: str) -> int:
        for i, layer in enumerate(self._layers):
            if layer.id == layer_id:
                return i
        raise ValueError(f"Layer with id '{layer_id}' not found")

    def _commit(self, layers: Tuple[PlacedLayer, ...]):
        self._layers = layers
        for callback in list(self._listeners):
            callback(self)
