"""Plain-text report rendering."""

from riokeys.kernel.responses import CharacterProfile
from riokeys.kernel.run_summary import RosterEntry, RunSummary

RUN_SEPARATOR = "-" * 36


def render_roster_entry(entry: RosterEntry) -> str:
    return f"{entry.role}\t{entry.item_level}\t{entry.character_name}"


def render_run_summary(summary: RunSummary) -> str:
    """Render a run as header, blank line, then one tab-separated line per member.

    The chest count is shown as that many '+' characters in front of the level.
    The result ends with exactly one newline.
    """
    lines = [f"{'+' * summary.chest_count}{summary.level} - {summary.dungeon_name}", ""]
    lines.extend(render_roster_entry(entry) for entry in summary.roster)
    return "\n".join(lines) + "\n"


def render_recent_runs(profile: CharacterProfile) -> str:
    lines = [f"Recent keys for {profile.name}", ""]
    for run in profile.mythic_plus_recent_runs:
        lines.append(f"ID: {run.keystone_run_id}\t+{run.mythic_level} - {run.dungeon}")
        lines.append(RUN_SEPARATOR)
    return "\n".join(lines) + "\n"
