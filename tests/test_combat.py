import pytest

from arcext.combat import (
    Agent,
    Attribute,
    CbtActivation,
    CbtBuffRemove,
    CbtStateChange,
    CombatEvent,
    CustomSkill,
    Prof,
    SpecializationId,
)


def _sample_event() -> CombatEvent:
    return CombatEvent(
        time=123456789,
        src_agent=0x637261,
        dst_agent=42,
        value=-500,
        buff_dmg=77,
        overstack_value=3,
        skillid=int(CustomSkill.DODGE),
        src_instid=10,
        dst_instid=11,
        src_master_instid=12,
        dst_master_instid=13,
        iff=1,
        buff=0,
        result=1,
        is_activation=int(CbtActivation.START),
        is_buffremove=int(CbtBuffRemove.SINGLE),
        is_ninety=1,
        is_fifty=0,
        is_moving=1,
        is_statechange=int(CbtStateChange.LOGSTART),
        is_flanking=1,
        is_shields=0,
        is_offcycle=0,
        pad61=5,
        pad62=6,
        pad63=7,
        pad64=8,
    )


def test_encoded_size_is_64_bytes():
    assert len(_sample_event().to_bytes()) == CombatEvent.SIZE == 64


def test_round_trip():
    event = _sample_event()
    assert CombatEvent.from_bytes(event.to_bytes()) == event


def test_wire_layout_offsets():
    event = _sample_event()
    data = event.to_bytes()
    assert int.from_bytes(data[0:8], "little") == event.time
    assert int.from_bytes(data[8:16], "little") == event.src_agent
    assert int.from_bytes(data[24:28], "little", signed=True) == event.value
    assert data[56] == event.is_statechange
    assert data[63] == event.pad64


def test_from_bytes_ignores_trailing_data():
    event = _sample_event()
    assert CombatEvent.from_bytes(event.to_bytes() + b"\xff" * 8) == event


def test_from_bytes_short_input_raises():
    with pytest.raises(ValueError):
        CombatEvent.from_bytes(b"\x00" * 63)


def test_to_bytes_out_of_range_raises():
    with pytest.raises(ValueError):
        CombatEvent(iff=256).to_bytes()


def test_enum_properties():
    event = _sample_event()
    assert event.state_change is CbtStateChange.LOGSTART
    assert event.activation is CbtActivation.START
    assert event.buff_remove is CbtBuffRemove.SINGLE


def test_unnamed_raw_values_map_to_unknown():
    event = CombatEvent(is_statechange=200, is_activation=99, is_buffremove=50)
    assert event.state_change is CbtStateChange.UNKNOWN
    assert event.activation is CbtActivation.UNKNOWN
    assert event.buff_remove is CbtBuffRemove.UNKNOWN


def test_documented_enum_values():
    event = CombatEvent(is_statechange=18)
    assert event.state_change is CbtStateChange.BUFFINITIAL
    assert Attribute(65535) is Attribute.UNKNOWN
    assert CustomSkill(1066) is CustomSkill.RESURRECT
    assert SpecializationId(0x48) is SpecializationId.RANGER_UNTAMED
    assert Agent(prof=9).prof is Prof.RENEGADE


def test_agent_coerces_profession():
    agent = Agent(name="Player", id=5, prof=6)
    assert agent.prof is Prof.ELE


def test_agent_keeps_unknown_profession_value():
    agent = Agent(prof=99)
    assert agent.prof == 99