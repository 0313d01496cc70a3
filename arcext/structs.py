"""Layout enums of the extension windows and the player check for agents."""

from __future__ import annotations

from enum import Enum

from arcext.combat import Agent
from arcext.translations import ExtensionTranslation, Language, translate

__all__ = [
    "Alignment",
    "Position",
    "CornerPosition",
    "SizingPolicy",
    "to_string",
    "is_player",
]

_NO_ELITE = 0xFFFFFFFF


class Alignment(Enum):
    """Horizontal alignment of text in a column or header."""

    LEFT = 0
    CENTER = 1
    RIGHT = 2
    UNALIGNED = 3


class Position(Enum):
    """How a window is positioned."""

    MANUAL = 0
    SCREEN_RELATIVE = 1
    WINDOW_RELATIVE = 2


class CornerPosition(Enum):
    """Corner of a window or of the screen used as an anchor."""

    TOP_LEFT = 0
    TOP_RIGHT = 1
    BOTTOM_LEFT = 2
    BOTTOM_RIGHT = 3


class SizingPolicy(Enum):
    """How a window's size relates to its content."""

    SIZE_TO_CONTENT = 0
    SIZE_CONTENT_TO_WINDOW = 1
    MANUAL_WINDOW_SIZE = 2


_KEYS: dict[Enum, ExtensionTranslation] = {
    Alignment.LEFT: ExtensionTranslation.LEFT,
    Alignment.CENTER: ExtensionTranslation.CENTER,
    Alignment.RIGHT: ExtensionTranslation.RIGHT,
    Alignment.UNALIGNED: ExtensionTranslation.UNALIGNED,
    Position.MANUAL: ExtensionTranslation.POSITION_MANUAL,
    Position.SCREEN_RELATIVE: ExtensionTranslation.POSITION_SCREEN_RELATIVE,
    Position.WINDOW_RELATIVE: ExtensionTranslation.POSITION_WINDOW_RELATIVE,
    CornerPosition.TOP_LEFT: ExtensionTranslation.CORNER_POSITION_TOP_LEFT,
    CornerPosition.TOP_RIGHT: ExtensionTranslation.CORNER_POSITION_TOP_RIGHT,
    CornerPosition.BOTTOM_LEFT: ExtensionTranslation.CORNER_POSITION_BOTTOM_LEFT,
    CornerPosition.BOTTOM_RIGHT: ExtensionTranslation.CORNER_POSITION_BOTTOM_RIGHT,
    SizingPolicy.SIZE_TO_CONTENT: ExtensionTranslation.SIZING_POLICY_SIZE_TO_CONTENT,
    SizingPolicy.SIZE_CONTENT_TO_WINDOW: ExtensionTranslation.SIZING_POLICY_SIZE_CONTENT_TO_WINDOW,
    SizingPolicy.MANUAL_WINDOW_SIZE: ExtensionTranslation.SIZING_POLICY_MANUAL_WINDOW_SIZE,
}

_SUPPORTED = (Alignment, Position, CornerPosition, SizingPolicy)


def to_string(
    value: Alignment | Position | CornerPosition | SizingPolicy,
    language: Language | int = Language.ENGLISH,
) -> str:
    """Return the display name of a layout value in ``language``.

    Raises TypeError for a value that is not one of the layout enums.
    """
    if not isinstance(value, _SUPPORTED):
        raise TypeError(f"no display name for {type(value).__name__}")
    return translate(_KEYS[value], language)


def is_player(agent: Agent | None) -> bool:
    """Tell whether an agent describes a player character."""
    if agent is None:
        return False
    if agent.elite == _NO_ELITE:
        return False
    if not agent.name or len(agent.name.encode("utf-8")) <= 1:
        return False
    return bool(agent.id)