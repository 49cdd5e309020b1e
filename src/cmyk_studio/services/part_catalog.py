"""
CMYK Portrait Studio - Part Catalog

Read-only PartDefinition records, one per role. The catalog is loaded from a
JSON document keyed by role name:

    {
        "eyes": {"title": "Eyes", "c": "parts/eyes_c.png", "m": "parts/eyes_m.png",
                 "posX": 0, "posY": -60, "posRot": 0},
        "arm_left": {"title": "Left arm", "k": "parts/arm_left_k.png", "posX": -180}
    }

Channel keys (c/m/y/k) are optional; only listed channels can be dropped.
posX/posY/posRot default to 0.
"""

import json
import logging
from typing import Dict, Iterator, Optional

from cmyk_studio.models.part import Channel, PartDefinition, Role
from cmyk_studio.models.transform import LayerTransform
from cmyk_studio.utils.logger import loggerRaise

logger = logging.getLogger(__name__)


def part_from_dict(role: Role, data: Dict) -> PartDefinition:
    """Build a PartDefinition from one catalog entry"""
    assets = {}
    for channel in Channel:
        ref = data.get(channel.value)
        if ref:
            assets[channel] = ref

    default_transform = LayerTransform(
        x=float(data.get('posX', 0)),
        y=float(data.get('posY', 0)),
        rotation=float(data.get('posRot', 0)),
    )
    return PartDefinition(
        role=role,
        title=data.get('title', role.value),
        assets=assets,
        default_transform=default_transform,
    )


class PartCatalog:
    """Part definitions by role"""

    def __init__(self, definitions=None):
        self._definitions: Dict[Role, PartDefinition] = {}
        for definition in definitions or ():
            self._definitions[definition.role] = definition

    @classmethod
    def from_dict(cls, data: Dict) -> 'PartCatalog':
        """Create from a parsed catalog document

        Entries whose key is not a known role are skipped.
        """
        definitions = []
        for key, entry in data.items():
            role = Role.parse(key)
            if role is None:
                logger.warning(f"Skipping unknown part role in catalog: {key}")
                continue
            definitions.append(part_from_dict(role, entry))
        return cls(definitions)

    @classmethod
    def from_json_file(cls, path) -> 'PartCatalog':
        """Load a catalog from a JSON file"""
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            loggerRaise(e, f"Error loading part catalog: {path}")
        return cls.from_dict(data)

    def get(self, role: Role) -> Optional[PartDefinition]:
        return self._definitions.get(role)

    def __contains__(self, role) -> bool:
        return role in self._definitions

    def __iter__(self) -> Iterator[PartDefinition]:
        return iter(self._definitions.values())

    def __len__(self) -> int:
        return len(self._definitions)

    def label_for(self, layer) -> str:
        """Layer list label for a placed layer, e.g. 'Eyes (C)'"""
        definition = self.get(layer.role)
        if definition is None:
            return f"{layer.role.value} ({layer.channel.value.upper()})"
        return definition.label_for(layer.channel)
