import pytest

from arcext.mob_ids import TargetID, TrashID


@pytest.mark.parametrize(
    ("member", "value"),
    [
        (TargetID.VALE_GUARDIAN, 15438),
        (TargetID.DEIMOS, 17154),
        (TargetID.GADGET_THE_DRAGON_VOID2, 1378),
        (TargetID.SOO_WON_OW, 35552),
        (TrashID.WARG, 7481),
        (TrashID.SOO_WON_TAIL, 51756),
    ],
)
def test_pinned_ids(member, value):
    assert int(member) == value


def test_lookup_by_value():
    assert TargetID(17154) is TargetID.DEIMOS
    assert TrashID(16261) is TrashID.KEEP_CONSTRUCT_CORE


def test_unknown_id_raises():
    with pytest.raises(ValueError):
        TargetID(1)


def test_same_species_in_both_tables():
    assert TargetID(24375) is TargetID.VOID_AMALGAMATE1
    assert TrashID(24375) is TrashID.VOID_AMALGAMATE


def test_ankka_differs_between_tables():
    assert TargetID(23957) is TargetID.ANKKA
    assert TrashID(24634) is TrashID.ANKKA


def test_lookup_by_name_round_trip():
    for member in TargetID:
        assert TargetID[member.name] is member
    for member in TrashID:
        assert TrashID(member.value) is TrashID[member.name]


def test_ids_are_positive():
    for member in TargetID:
        assert TargetID(member.value) is member
        assert member.value > 0
    for member in TrashID:
        assert TrashID(member.value) is member
        assert member.value > 0