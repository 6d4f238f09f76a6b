"""Roster normalization: order by role, project to RosterEntry."""

from typing import Sequence, Tuple

from riokeys.codes import Role
from riokeys.kernel.responses import RosterMember, RunDetailsResponse
from riokeys.kernel.run_summary import RosterEntry, RunSummary


def normalize_roster(members: Sequence[RosterMember]) -> Tuple[RosterEntry, ...]:
    """Sort members tank -> healer -> everything else and project them.

    The sort is stable: members of the same priority keep the order the
    API returned them in. Every member yields exactly one entry.
    """
    entries = [
        RosterEntry(
            role=Role.parse(member.role),
            item_level=member.items.item_level_equipped,
            character_name=member.character.name,
        )
        for member in members
    ]
    return tuple(sorted(entries, key=lambda entry: entry.role.priority))


def summarize_run(details: RunDetailsResponse) -> RunSummary:
    """Build the cacheable summary for a run-details payload."""
    return RunSummary(
        id=details.keystone_run_id,
        chest_count=details.num_chests,
        level=details.mythic_level,
        dungeon_name=details.dungeon.name,
        roster=normalize_roster(details.roster),
    )
