"""Tests for roster normalization."""

from riokeys.codes import Role, RoleKind
from riokeys.kernel.responses import RosterMember, RunDetailsResponse
from riokeys.kernel.roster import normalize_roster, summarize_run

from conftest import load_fixture


def _member(role: str, name: str, ilvl: int = 600) -> RosterMember:
    return RosterMember(
        character={"name": name},
        items={"item_level_equipped": ilvl},
        role=role,
    )


def test_tank_and_healer_promoted_dps_order_kept():
    roster = [
        _member("dps", "A"),
        _member("tank", "B"),
        _member("healer", "C"),
        _member("dps", "D"),
    ]
    entries = normalize_roster(roster)
    assert [e.character_name for e in entries] == ["B", "C", "A", "D"]
    assert [e.role.kind for e in entries] == [
        RoleKind.TANK, RoleKind.HEALER, RoleKind.OTHER, RoleKind.OTHER
    ]


def test_unknown_roles_share_dps_partition_and_keep_label():
    roster = [
        _member("support", "A"),
        _member("dps", "B"),
        _member("healer", "C"),
        _member("Tank", "D"),  # case matters: not a tank
    ]
    entries = normalize_roster(roster)
    assert [e.character_name for e in entries] == ["C", "A", "B", "D"]
    assert str(entries[1].role) == "support"
    assert entries[3].role == Role(RoleKind.OTHER, "Tank")


def test_no_filtering_or_dedup():
    roster = [_member("tank", "Same"), _member("tank", "Same"), _member("dps", "Other")]
    entries = normalize_roster(roster)
    assert len(entries) == 3
    assert [e.character_name for e in entries] == ["Same", "Same", "Other"]


def test_projection_uses_equipped_item_level():
    entries = normalize_roster([_member("healer", "Ghostbrew", 622)])
    assert entries[0].item_level == 622
    assert entries[0].role.label == "healer"


def test_empty_roster():
    assert normalize_roster([]) == ()


def test_summarize_run_from_payload():
    details = RunDetailsResponse.model_validate(load_fixture("run_details.json"))
    summary = summarize_run(details)
    assert summary.id == 7654321
    assert summary.chest_count == 1
    assert summary.level == 10
    assert summary.dungeon_name == "Grim Batol"
    assert [e.character_name for e in summary.roster] == [
        "Tacostruck", "Ghostbrew", "Spikyy", "Lanivar", "Jardom"
    ]
