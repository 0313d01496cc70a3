"""Shared-memory records of the game's positional-audio link and its identity data."""

from __future__ import annotations

import json
import struct
from dataclasses import dataclass, field
from enum import IntEnum, IntFlag
from typing import ClassVar, TypeVar

from arcext.combat import Prof

__all__ = [
    "MountIndex",
    "UiStateFlags",
    "Race",
    "UIScaling",
    "MumbleContext",
    "LinkedMem",
    "Identity",
]

_E = TypeVar("_E", bound=IntEnum)


class MountIndex(IntEnum):
    """Mount the character is currently using."""

    NONE = 0
    JACKAL = 1
    GRIFFON = 2
    SPRINGER = 3
    SKIMMER = 4
    RAPTOR = 5
    ROLLER_BEETLE = 6
    WARCLAW = 7
    SKYSCALE = 8
    SKIFF = 9
    SIEGE_TURTLE = 10


class UiStateFlags(IntFlag):
    """Bits describing the state of the game's user interface."""

    NONE = 0
    MAP_OPEN = 1 << 0
    COMPASS_TOP_RIGHT = 1 << 1
    COMPASS_ROTATION = 1 << 2
    GAME_FOCUS = 1 << 3
    COMPETITIVE = 1 << 4
    TEXT_BOX_FOCUS = 1 << 5
    IN_COMBAT = 1 << 6


class Race(IntEnum):
    """Race of the character."""

    ASURA = 0
    CHARR = 1
    HUMAN = 2
    NORN = 3
    SYLVARI = 4


class UIScaling(IntEnum):
    """Interface size chosen by the user."""

    SMALL = 0
    NORMAL = 1
    LARGE = 2
    LARGER = 3


def _enum_or_int(enum_type: type[_E], value: int) -> _E | int:
    try:
        return enum_type(value)
    except ValueError:
        return value


def _wide_string(raw: bytes) -> str:
    text = raw.decode("utf-16-le", errors="replace")
    return text.split("\x00", 1)[0]


@dataclass
class MumbleContext:
    """Game-specific context block stored inside the link memory (88 bytes)."""

    server_address: bytes = bytes(28)
    map_id: int = 0
    map_type: int = 0
    shard_id: int = 0
    instance: int = 0
    build_id: int = 0
    ui_state: UiStateFlags = UiStateFlags.NONE
    compass_width: int = 0
    compass_height: int = 0
    compass_rotation: float = 0.0
    player_x: float = 0.0
    player_y: float = 0.0
    map_center_x: float = 0.0
    map_center_y: float = 0.0
    map_scale: float = 0.0
    process_id: int = 0
    mount_index: MountIndex | int = MountIndex.NONE

    _STRUCT: ClassVar[struct.Struct] = struct.Struct("<28s5IIHH6fIB3x")
    SIZE: ClassVar[int] = 88

    @classmethod
    def from_bytes(cls, data: bytes | bytearray | memoryview) -> MumbleContext:
        """Decode a context from the first 88 bytes of ``data``."""
        if len(data) < cls.SIZE:
            raise ValueError(f"mumble context needs {cls.SIZE} bytes, got {len(data)}")
        (
            server_address,
            map_id,
            map_type,
            shard_id,
            instance,
            build_id,
            ui_state,
            compass_width,
            compass_height,
            compass_rotation,
            player_x,
            player_y,
            map_center_x,
            map_center_y,
            map_scale,
            process_id,
            mount_index,
        ) = cls._STRUCT.unpack_from(data)
        return cls(
            server_address=server_address,
            map_id=map_id,
            map_type=map_type,
            shard_id=shard_id,
            instance=instance,
            build_id=build_id,
            ui_state=UiStateFlags(ui_state),
            compass_width=compass_width,
            compass_height=compass_height,
            compass_rotation=compass_rotation,
            player_x=player_x,
            player_y=player_y,
            map_center_x=map_center_x,
            map_center_y=map_center_y,
            map_scale=map_scale,
            process_id=process_id,
            mount_index=_enum_or_int(MountIndex, mount_index),
        )


Vector = tuple[float, float, float]


@dataclass
class LinkedMem:
    """The whole shared-memory block of the positional-audio link (5460 bytes)."""

    ui_version: int = 0
    ui_tick: int = 0
    avatar_position: Vector = (0.0, 0.0, 0.0)
    avatar_front: Vector = (0.0, 0.0, 0.0)
    avatar_top: Vector = (0.0, 0.0, 0.0)
    name: str = ""
    camera_position: Vector = (0.0, 0.0, 0.0)
    camera_front: Vector = (0.0, 0.0, 0.0)
    camera_top: Vector = (0.0, 0.0, 0.0)
    identity: str = ""
    context_len: int = 0
    context: bytes = field(default_factory=lambda: bytes(256))
    description: str = ""

    _STRUCT: ClassVar[struct.Struct] = struct.Struct(
        "<II3f3f3f512s3f3f3f512sI256s4096s"
    )
    SIZE: ClassVar[int] = 5460

    @classmethod
    def from_bytes(cls, data: bytes | bytearray | memoryview) -> LinkedMem:
        """Decode the block from the first 5460 bytes of ``data``."""
        if len(data) < cls.SIZE:
            raise ValueError(f"linked memory needs {cls.SIZE} bytes, got {len(data)}")
        values = cls._STRUCT.unpack_from(data)
        return cls(
            ui_version=values[0],
            ui_tick=values[1],
            avatar_position=tuple(values[2:5]),
            avatar_front=tuple(values[5:8]),
            avatar_top=tuple(values[8:11]),
            name=_wide_string(values[11]),
            camera_position=tuple(values[12:15]),
            camera_front=tuple(values[15:18]),
            camera_top=tuple(values[18:21]),
            identity=_wide_string(values[21]),
            context_len=values[22],
            context=values[23],
            description=_wide_string(values[24]),
        )

    def mumble_context(self) -> MumbleContext:
        """Decode the game-specific context held in ``context``."""
        return MumbleContext.from_bytes(self.context)


@dataclass
class Identity:
    """Character identity published as JSON in the link memory."""

    name: str = ""
    profession: Prof | int = Prof.UNKNOWN
    spec: int = 0
    race: Race | int = Race.ASURA
    map_id: int = 0
    world_id: int = 0
    team_color_id: int = 0
    commander: bool = False
    fov: float = 0.0
    uisz: UIScaling | int = UIScaling.SMALL

    @classmethod
    def from_json(cls, text: str | bytes) -> Identity:
        """Parse the identity JSON; missing keys keep their defaults.

        Raises ValueError for malformed JSON or a document that is not an object.
        """
        data = json.loads(text)
        if not isinstance(data, dict):
            raise ValueError("identity must be a JSON object")
        identity = cls()
        if "name" in data:
            identity.name = str(data["name"])
        if "profession" in data:
            identity.profession = _enum_or_int(Prof, int(data["profession"]))
        if "spec" in data:
            identity.spec = int(data["spec"])
        if "race" in data:
            identity.race = _enum_or_int(Race, int(data["race"]))
        if "map_id" in data:
            identity.map_id = int(data["map_id"])
        if "world_id" in data:
            identity.world_id = int(data["world_id"])
        if "team_color_id" in data:
            identity.team_color_id = int(data["team_color_id"])
        if "commander" in data:
            identity.commander = bool(data["commander"])
        if "fov" in data:
            identity.fov = float(data["fov"])
        if "uisz" in data:
            identity.uisz = _enum_or_int(UIScaling, int(data["uisz"]))
        return identity