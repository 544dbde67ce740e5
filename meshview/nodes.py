"""Node bookkeeping and the helpers that turn node data into display text."""

from __future__ import annotations

import base64
import binascii
import logging
import time
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

logger = logging.getLogger(__name__)

BROADCAST_ADDRESS = 0xFFFFFFFF
DEFAULT_OFFLINE_AFTER = 30 * 60

_MINUTE = 60
_HOUR = 3600
_DAY = 86400
_SHOW_DAYS_UNTIL = _DAY * 60


class Role(IntEnum):
    """Device role a node announces."""

    CLIENT = 0
    CLIENT_MUTE = 1
    ROUTER = 2
    ROUTER_CLIENT = 3
    REPEATER = 4
    TRACKER = 5
    SENSOR = 6
    TAK = 7
    CLIENT_HIDDEN = 8
    LOST_AND_FOUND = 9
    TAK_TRACKER = 10
    UNKNOWN = 255


_ROLE_NAMES: dict[Role, str] = {
    Role.CLIENT: "Client",
    Role.CLIENT_MUTE: "Client Mute",
    Role.ROUTER: "Router",
    Role.ROUTER_CLIENT: "Router Client",
    Role.REPEATER: "Repeater",
    Role.TRACKER: "Tracker",
    Role.SENSOR: "Sensor",
    Role.TAK: "TAK",
    Role.CLIENT_HIDDEN: "Client Hidden",
    Role.LOST_AND_FOUND: "Lost & Found",
    Role.TAK_TRACKER: "TAK Tracker",
}


def device_role_to_string(role: int) -> str:
    """Return the display name of a role, or ``<unknown>`` for an invalid one."""
    try:
        return _ROLE_NAMES[Role(role)]
    except (ValueError, KeyError):
        logger.error("Invalid device role: %d", role)
        return "<unknown>"


def default_user_names(node_num: int) -> tuple[str, str]:
    """Return the short and long name given to a node without user information."""
    short_name = f"{node_num & 0xFFFF:04x}"
    return short_name, "Meshtastic " + short_name


def node_color(node_num: int) -> tuple[int, int]:
    """Return the RGB background and a readable foreground colour for a node."""
    red = (node_num & 0xFF0000) >> 16
    green = (node_num & 0xFF00) >> 8
    blue = node_num & 0xFF
    while red + green + blue < 0xF0:
        red += red // 3 + 10
        green += green // 3 + 10
        blue += blue // 3 + 10
    background = (red << 16) | (green << 8) | blue
    foreground = 0x000000 if (2 * red + 2 * green + blue) > 600 else 0xFFFFFF
    return background, foreground


def last_heard_to_string(
    last_heard: int, now: Optional[float] = None, offline_after: int = DEFAULT_OFFLINE_AFTER
) -> tuple[str, bool]:
    """Describe how long ago a node was heard; the flag tells whether it counts as online."""
    if now is None:
        now = time.time()
    diff = int(now) - int(last_heard)
    if diff < _MINUTE:
        text = "now"
    elif diff < _HOUR:
        text = f"{diff // _MINUTE} min"
    elif diff < _DAY:
        text = f"{diff // _HOUR} h"
    elif diff < _SHOW_DAYS_UNTIL:
        text = f"{diff // _DAY} d"
    else:
        text = ""
    return text, diff <= offline_after


def psk_to_base64(key: bytes) -> str:
    """Encode a pre-shared key as base64; an empty key gives an empty string."""
    if not key:
        return ""
    return base64.b64encode(bytes(key)).decode("ascii")


def base64_to_psk(text: str) -> bytes:
    """Decode a base64 pre-shared key; raise ValueError if the text is not valid base64."""
    try:
        return base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as exc:
        logger.error("Cannot decode '%s'", text)
        raise ValueError(f"cannot decode {text!r}") from exc


@dataclass
class Node:
    """What is known about one node of the mesh."""

    num: int
    channel: int
    short_name: str
    long_name: str
    last_heard: int
    role: Role


class NodeDirectory:
    """The nodes seen on the mesh, keyed by node number."""

    def __init__(self, own_node: int = 0):
        self.own_node = own_node
        self.nodes: dict[int, Node] = {}

    def __len__(self) -> int:
        return len(self.nodes)

    def __contains__(self, node_num: int) -> bool:
        return node_num in self.nodes

    def __getitem__(self, node_num: int) -> Node:
        return self.nodes[node_num]

    def add_or_update(
        self,
        node_num: int,
        channel: int,
        short_name: Optional[str],
        long_name: Optional[str],
        last_heard: int,
        role: int,
    ) -> Node:
        """Add a node or refresh it; missing names are replaced by generated defaults."""
        if short_name is None or long_name is None:
            default_short, default_long = default_user_names(node_num)
            short_name = default_short if short_name is None else short_name
            long_name = default_long if long_name is None else long_name
        try:
            node_role = Role(role)
        except ValueError:
            node_role = Role.UNKNOWN
        node = self.nodes.get(node_num)
        if node is None:
            node = Node(node_num, channel, short_name, long_name, last_heard, node_role)
            self.nodes[node_num] = node
        else:
            node.channel = channel
            node.short_name = short_name
            node.long_name = long_name
            node.last_heard = last_heard
            node.role = node_role
        return node

    def packet_received(self, sender: int, to: int, channel: int) -> list[int]:
        """Create default entries for unknown sender and addressee; return the nodes added."""
        added: list[int] = []
        if sender not in self.nodes:
            self.add_or_update(sender, channel, None, None, 0, Role.UNKNOWN)
            added.append(sender)
        if to not in (self.own_node, BROADCAST_ADDRESS) and to not in self.nodes:
            self.add_or_update(to, channel, None, None, 0, Role.UNKNOWN)
            added.append(to)
        return added