"""Combat event and agent records delivered by the combat log, with their enums."""

from __future__ import annotations

import struct
from dataclasses import astuple, dataclass
from enum import IntEnum
from typing import ClassVar

__all__ = [
    "Iff",
    "CbtResult",
    "CbtActivation",
    "CbtStateChange",
    "CbtBuffRemove",
    "CbtBuffCycle",
    "Attribute",
    "BuffCategory",
    "CustomSkill",
    "GwLanguage",
    "ContentLocal",
    "Prof",
    "SpecializationId",
    "WeaponSet",
    "ColorsCore",
    "CombatEvent",
    "Agent",
]


class Iff(IntEnum):
    """Whether an agent is friend or foe."""

    FRIEND = 0
    FOE = 1
    UNKNOWN = 2


class CbtResult(IntEnum):
    """Result of a physical strike."""

    NORMAL = 0
    CRIT = 1
    GLANCE = 2
    BLOCK = 3
    EVADE = 4
    INTERRUPT = 5
    ABSORB = 6
    BLIND = 7
    KILLINGBLOW = 8
    DOWNED = 9
    BREAKBAR = 10
    ACTIVATION = 11
    UNKNOWN = 12


class CbtActivation(IntEnum):
    """Skill activation state of an event."""

    NONE = 0
    START = 1
    QUICKNESS_UNUSED = 2
    CANCEL_FIRE = 3
    CANCEL_CANCEL = 4
    RESET = 5
    UNKNOWN = 6


class CbtStateChange(IntEnum):
    """Kind of state change an event carries."""

    NONE = 0
    ENTERCOMBAT = 1
    EXITCOMBAT = 2
    CHANGEUP = 3
    CHANGEDEAD = 4
    CHANGEDOWN = 5
    SPAWN = 6
    DESPAWN = 7
    HEALTHUPDATE = 8
    LOGSTART = 9
    LOGEND = 10
    WEAPSWAP = 11
    MAXHEALTHUPDATE = 12
    POINTOFVIEW = 13
    LANGUAGE = 14
    GWBUILD = 15
    SHARDID = 16
    REWARD = 17
    BUFFINITIAL = 18
    POSITION = 19
    VELOCITY = 20
    FACING = 21
    TEAMCHANGE = 22
    ATTACKTARGET = 23
    TARGETABLE = 24
    MAPID = 25
    REPLINFO = 26
    STACKACTIVE = 27
    STACKRESET = 28
    GUILD = 29
    BUFFINFO = 30
    BUFFFORMULA = 31
    SKILLINFO = 32
    SKILLTIMING = 33
    BREAKBARSTATE = 34
    BREAKBARPERCENT = 35
    ERROR = 36
    TAG = 37
    BARRIERUPDATE = 38
    STATRESET = 39
    EXTENSION = 40
    APIDELAYED = 41
    INSTANCESTART = 42
    TICKRATE = 43
    LAST90BEFOREDOWN = 44
    EFFECT = 45
    IDTOGUID = 46
    LOGNPCUPDATE = 47
    UNKNOWN = 48


class CbtBuffRemove(IntEnum):
    """How a buff was removed."""

    NONE = 0
    ALL = 1
    SINGLE = 2
    MANUAL = 3
    UNKNOWN = 4


class CbtBuffCycle(IntEnum):
    """When buff damage happened relative to the tick timer."""

    CYCLE = 0
    NOTCYCLE = 1
    NOTCYCLENORESIST = 2
    NOTCYCLEDMGTOTARGETONHIT = 3
    NOTCYCLEDMGTOSOURCEONHIT = 4
    NOTCYCLEDMGTOTARGETONSTACKREMOVE = 5
    UNKNOWN = 6


class Attribute(IntEnum):
    """Attributes used by buff formulas."""

    NONE = 0
    POWER = 1
    PRECISION = 2
    TOUGHNESS = 3
    VITALITY = 4
    FEROCITY = 5
    HEALING = 6
    CONDITION = 7
    CONCENTRATION = 8
    EXPERTISE = 9
    CUST_ARMOR = 10
    CUST_AGONY = 11
    CUST_STATINC = 12
    CUST_PHYSINC = 13
    CUST_CONDINC = 14
    CUST_PHYSREC = 15
    CUST_CONDREC = 16
    CUST_ATTACKSPEED = 17
    CUST_SIPHONINC = 18
    CUST_SIPHONREC = 19
    UNKNOWN = 65535


class BuffCategory(IntEnum):
    """Category of a buff as reported by buff info events."""

    BOON = 0
    ANY = 1
    CONDITION = 2
    FOOD = 4
    UPGRADE = 6
    BOOST = 8
    TRAIT = 11
    ENHANCEMENT = 13
    STANCE = 16


class CustomSkill(IntEnum):
    """Skill ids with a special meaning."""

    RESURRECT = 1066
    BANDAGE = 1175
    DODGE = 65001


class GwLanguage(IntEnum):
    """Game text language."""

    ENG = 0
    FRE = 2
    GEM = 3
    SPA = 4
    CN = 5


class ContentLocal(IntEnum):
    """Kind of content referred to by an id-to-guid event."""

    EFFECT = 0
    MARKER = 1


class Prof(IntEnum):
    """Profession of an agent."""

    UNKNOWN = 0
    GUARD = 1
    WARRIOR = 2
    ENGINEER = 3
    RANGER = 4
    THIEF = 5
    ELE = 6
    MESMER = 7
    NECRO = 8
    RENEGADE = 9


class SpecializationId(IntEnum):
    """Specialization ids of all professions."""

    NONE = 0x0
    MESMER_DUELING = 0x1
    NECROMANCER_DEATH_MAGIC = 0x2
    REVENANT_INVOCATION = 0x3
    WARRIOR_STRENGTH = 0x4
    RANGER_DRUID = 0x5
    ENGINEER_EXPLOSIVES = 0x6
    THIEF_DAREDEVIL = 0x7
    RANGER_MARKSMANSHIP = 0x8
    REVENANT_RETRIBUTION = 0x9
    MESMER_DOMINATION = 0xA
    WARRIOR_TACTICS = 0xB
    REVENANT_SALVATION = 0xC
    GUARDIAN_VALOR = 0xD
    REVENANT_CORRUPTION = 0xE
    REVENANT_DEVASTATION = 0xF
    GUARDIAN_RADIANCE = 0x10
    ELEMENTALIST_WATER = 0x11
    WARRIOR_BERSERKER = 0x12
    NECROMANCER_BLOOD_MAGIC = 0x13
    THIEF_SHADOW_ARTS = 0x14
    ENGINEER_TOOLS = 0x15
    WARRIOR_DEFENSE = 0x16
    MESMER_INSPIRATION = 0x17
    MESMER_ILLUSIONS = 0x18
    RANGER_NATURE_MAGIC = 0x19
    ELEMENTALIST_EARTH = 0x1A
    GUARDIAN_DRAGONHUNTER = 0x1B
    THIEF_DEADLY_ARTS = 0x1C
    ENGINEER_ALCHEMY = 0x1D
    RANGER_SKIRMISHING = 0x1E
    ELEMENTALIST_FIRE = 0x1F
    RANGER_BEASTMASTERY = 0x20
    RANGER_WILDERNESS_SURVIVAL = 0x21
    NECROMANCER_REAPER = 0x22
    THIEF_CRITICAL_STRIKES = 0x23
    WARRIOR_ARMS = 0x24
    ELEMENTALIST_ARCANE = 0x25
    ENGINEER_FIREARMS = 0x26
    NECROMANCER_CURSES = 0x27
    MESMER_CHRONOMANCER = 0x28
    ELEMENTALIST_AIR = 0x29
    GUARDIAN_ZEAL = 0x2A
    ENGINEER_SCRAPPER = 0x2B
    THIEF_TRICKERY = 0x2C
    MESMER_CHAOS = 0x2D
    GUARDIAN_VIRTUES = 0x2E
    ENGINEER_INVENTIONS = 0x2F
    ELEMENTALIST_TEMPEST = 0x30
    GUARDIAN_HONOR = 0x31
    NECROMANCER_SOUL_REAPING = 0x32
    WARRIOR_DISCIPLINE = 0x33
    REVENANT_HERALD = 0x34
    NECROMANCER_SPITE = 0x35
    THIEF_ACROBATICS = 0x36
    RANGER_SOULBEAST = 0x37
    ELEMENTALIST_WEAVER = 0x38
    ENGINEER_HOLOSMITH = 0x39
    THIEF_DEADEYE = 0x3A
    MESMER_MIRAGE = 0x3B
    NECROMANCER_SCOURGE = 0x3C
    WARRIOR_SPELLBREAKER = 0x3D
    GUARDIAN_FIREBRAND = 0x3E
    REVENANT_RENEGADE = 0x3F
    NECROMANCER_HARBINGER = 0x40
    GUARDIAN_WILLBENDER = 0x41
    MESMER_VIRTUOSO = 0x42
    ELEMENTALIST_CATALYST = 0x43
    WARRIOR_BLADESWORN = 0x44
    REVENANT_VINDICATOR = 0x45
    ENGINEER_MECHANIST = 0x46
    THIEF_SPECTER = 0x47
    RANGER_UNTAMED = 0x48


class WeaponSet(IntEnum):
    """Weapon set ids reported by weapon swap events."""

    WATER_FIRST = 0
    WATER_SECOND = 1
    BUNDLES = 2
    TRANSFORM = 3
    LAND_FIRST = 4
    LAND_SECOND = 5


class ColorsCore(IntEnum):
    """Indices into the core colour table."""

    TRANSPARENT = 0
    WHITE = 1
    LWHITE = 2
    LGREY = 3
    LYELLOW = 4
    LGREEN = 5
    LRED = 6
    LTEAL = 7
    MGREY = 8
    DGREY = 9
    NUM = 10


def _as_enum(enum_type: type[IntEnum], value: int) -> IntEnum:
    try:
        return enum_type(value)
    except ValueError:
        return enum_type["UNKNOWN"]


@dataclass
class CombatEvent:
    """One combat event in its 64-byte little-endian wire layout."""

    time: int = 0
    src_agent: int = 0
    dst_agent: int = 0
    value: int = 0
    buff_dmg: int = 0
    overstack_value: int = 0
    skillid: int = 0
    src_instid: int = 0
    dst_instid: int = 0
    src_master_instid: int = 0
    dst_master_instid: int = 0
    iff: int = 0
    buff: int = 0
    result: int = 0
    is_activation: int = 0
    is_buffremove: int = 0
    is_ninety: int = 0
    is_fifty: int = 0
    is_moving: int = 0
    is_statechange: int = 0
    is_flanking: int = 0
    is_shields: int = 0
    is_offcycle: int = 0
    pad61: int = 0
    pad62: int = 0
    pad63: int = 0
    pad64: int = 0

    _STRUCT: ClassVar[struct.Struct] = struct.Struct("<QQQiiIIHHHH16B")
    SIZE: ClassVar[int] = 64

    @classmethod
    def from_bytes(cls, data: bytes | bytearray | memoryview) -> CombatEvent:
        """Decode an event from the first 64 bytes of ``data``."""
        if len(data) < cls.SIZE:
            raise ValueError(
                f"combat event needs {cls.SIZE} bytes, got {len(data)}"
            )
        return cls(*cls._STRUCT.unpack_from(data))

    def to_bytes(self) -> bytes:
        """Encode the event into its 64-byte wire form."""
        try:
            return self._STRUCT.pack(*(int(v) for v in astuple(self)))
        except struct.error as exc:
            raise ValueError(f"combat event field out of range: {exc}") from exc

    @property
    def activation(self) -> CbtActivation:
        """The activation state, UNKNOWN if the raw value has no name."""
        return _as_enum(CbtActivation, self.is_activation)

    @property
    def buff_remove(self) -> CbtBuffRemove:
        """The buff removal kind, UNKNOWN if the raw value has no name."""
        return _as_enum(CbtBuffRemove, self.is_buffremove)

    @property
    def state_change(self) -> CbtStateChange:
        """The state change kind, UNKNOWN if the raw value has no name."""
        return _as_enum(CbtStateChange, self.is_statechange)


@dataclass
class Agent:
    """Short description of an agent taking part in an event."""

    name: str | None = None
    id: int = 0
    prof: Prof | int = Prof.UNKNOWN
    elite: int = 0
    is_self: bool = False
    team: int = 0

    def __post_init__(self) -> None:
        try:
            self.prof = Prof(self.prof)
        except ValueError:
            pass