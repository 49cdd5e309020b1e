"""
CMYK Portrait Studio - Placement Policy

Decides where a newly dropped part lands, based on the parts already placed:
- Arms are auto-balanced: a second arm on an occupied side moves to the
  free side
- Eyes and ears are mirrored around the canvas center line
- Everything else uses its part definition's default transform

Placement never mirrors y or rotation; those always come from the default.
These functions are independent of the UI.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from cmyk_studio.constants import EYE_MIRROR_OFFSET, EAR_MIRROR_OFFSET, EAR_EXTRA_PUSH
from cmyk_studio.models.part import Channel, Role
from cmyk_studio.models.transform import LayerTransform

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Placement:
    """Resolved role, asset and transform for a new layer"""
    role: Role
    asset: str
    transform: LayerTransform


def resolve_placement(role: Role, channel: Channel, asset: str,
                      default_transform: LayerTransform,
                      existing: Sequence, catalog) -> Placement:
    """Apply the placement policy to a new layer

    Args:
        role: Requested role
        channel: Channel of the new layer
        asset: Requested asset reference
        default_transform: Part definition default for the requested role
        existing: Placed layers in scene order
        catalog: PartCatalog used to look up the opposite arm

    Returns:
        Placement with the final role, asset and transform
    """
    if role.is_arm:
        return _balance_arm(role, channel, asset, default_transform, existing, catalog)
    if role.is_paired:
        return Placement(role, asset, _mirror_paired(role, default_transform, existing))
    if role in (Role.NOSE, Role.LIPS):
        return Placement(role, asset, default_transform)
    raise ValueError(f"Unhandled role: {role}")


def _balance_arm(role, channel, asset, default_transform, existing, catalog) -> Placement:
    """Redirect to the opposite arm when only the requested side is occupied"""
    opposite = role.opposite_arm()
    roles_present = {layer.role for layer in existing}

    if role not in roles_present or opposite in roles_present:
        return Placement(role, asset, default_transform)

    definition = catalog.get(opposite)
    if definition is None:
        logger.debug(f"No definition for {opposite.value}, keeping {role.value}")
        return Placement(role, asset, default_transform)

    redirected_asset = definition.asset_for(channel) or asset
    logger.debug(f"Auto-balanced {role.value} -> {opposite.value}")
    return Placement(opposite, redirected_asset, definition.default_transform)


def _mirror_paired(role: Role, default_transform: LayerTransform, existing) -> LayerTransform:
    """Mirror a second eye/ear against the first one found"""
    reference = _first_with_role(existing, role)
    if reference is None:
        return default_transform

    if reference.transform.x == 0:
        if role is Role.EYES:
            x = EYE_MIRROR_OFFSET
        else:
            x = EAR_MIRROR_OFFSET + EAR_EXTRA_PUSH
    else:
        x = -reference.transform.x

    return default_transform.with_position(x, default_transform.y)


def _first_with_role(existing, role: Role) -> Optional[object]:
    for layer in existing:
        if layer.role is role:
            return layer
    return None
