import pytest

from arcext.combat import Agent
from arcext.structs import (
    Alignment,
    CornerPosition,
    Position,
    SizingPolicy,
    is_player,
    to_string,
)
from arcext.translations import ExtensionTranslation, Language, translate


@pytest.mark.parametrize(
    "value, expected",
    [
        (Alignment.LEFT, "Left"),
        (Alignment.CENTER, "Centered"),
        (Alignment.RIGHT, "Right"),
        (Alignment.UNALIGNED, "Standard"),
        (Position.MANUAL, "Manual"),
        (Position.SCREEN_RELATIVE, "Screen Relative"),
        (Position.WINDOW_RELATIVE, "Window Relative"),
        (CornerPosition.TOP_LEFT, "Top-Left"),
        (CornerPosition.TOP_RIGHT, "Top-Right"),
        (CornerPosition.BOTTOM_LEFT, "Bottom-Left"),
        (CornerPosition.BOTTOM_RIGHT, "Bottom-Right"),
        (SizingPolicy.SIZE_TO_CONTENT, "Size to Content"),
        (SizingPolicy.SIZE_CONTENT_TO_WINDOW, "Size Content to Window"),
        (SizingPolicy.MANUAL_WINDOW_SIZE, "Manual Window Size"),
    ],
)
def test_english_names(value, expected):
    assert to_string(value) == expected


def test_german_names():
    assert to_string(Alignment.LEFT, Language.GERMAN) == "Links"
    assert to_string(SizingPolicy.MANUAL_WINDOW_SIZE, Language.GERMAN) == "Manuelle Fenstergröße"


def test_names_follow_translation_table():
    for language in Language:
        assert to_string(CornerPosition.BOTTOM_RIGHT, language) == translate(
            ExtensionTranslation.CORNER_POSITION_BOTTOM_RIGHT, language
        )


def test_every_value_has_a_distinct_name_per_enum():
    for enum_type in (Alignment, Position, CornerPosition, SizingPolicy):
        names = [to_string(v) for v in enum_type]
        assert len(set(names)) == len(names)


def test_unsupported_value_raises():
    with pytest.raises(TypeError):
        to_string(3)


def test_unknown_language_raises():
    with pytest.raises(ValueError):
        to_string(Alignment.LEFT, 1)


def test_is_player_true():
    assert is_player(Agent(name="Some Player", id=42, elite=0)) is True


@pytest.mark.parametrize(
    "agent",
    [
        None,
        Agent(name="Some Player", id=42, elite=0xFFFFFFFF),
        Agent(name=None, id=42, elite=0),
        Agent(name="", id=42, elite=0),
        Agent(name="A", id=42, elite=0),
        Agent(name="Some Player", id=0, elite=0),
    ],
)
def test_is_player_false(agent):
    assert is_player(agent) is False


def test_is_player_counts_encoded_length():
    assert is_player(Agent(name="é", id=1, elite=0)) is True