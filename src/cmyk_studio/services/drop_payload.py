"""
CMYK Portrait Studio - Drop Payload

The parts sidebar starts a drag carrying a small {role, channel} record as
text. The canvas decodes it on drop before placing a layer. Anything that
does not name a catalogued role with an asset for the requested channel is
treated as malformed and the drop is ignored.
"""

import json
import logging
from dataclasses import dataclass
from typing import Optional

from cmyk_studio.models.part import Channel, PartDefinition, Role

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DropPayload:
    """Decoded drop: the part definition and the channel to place"""
    part: PartDefinition
    channel: Channel

    @property
    def role(self) -> Role:
        return self.part.role

    @property
    def asset(self) -> str:
        return self.part.asset_for(self.channel)


def encode_drop_payload(role: Role, channel: Channel) -> str:
    """Text form of a drop record"""
    return json.dumps({'role': role.value, 'channel': channel.value})


def decode_drop_payload(text, catalog) -> Optional[DropPayload]:
    """Decode a drop record against the part catalog

    Accepts {"role", "channel"} as well as the {"key", "color"} spelling.
    The channel may be a code ("c") or a name ("cyan").

    Returns:
        DropPayload, or None if the payload is malformed
    """
    if not text:
        logger.debug("Ignoring drop: empty payload")
        return None

    try:
        data = json.loads(text)
    except ValueError:
        logger.debug(f"Ignoring drop: payload is not JSON: {text!r}")
        return None
    if not isinstance(data, dict):
        logger.debug(f"Ignoring drop: payload is not an object: {text!r}")
        return None

    role = Role.parse(data.get('role', data.get('key')))
    channel = Channel.parse(data.get('channel', data.get('color')))
    if role is None or channel is None:
        logger.debug(f"Ignoring drop: unknown role or channel in {data}")
        return None

    part = catalog.get(role)
    if part is None or part.asset_for(channel) is None:
        logger.debug(f"Ignoring drop: no {channel.value} asset for {role.value}")
        return None

    return DropPayload(part, channel)
