"""Cached run summary models.

A RunSummary is the persisted unit of the run cache. Runs cannot change
once completed, so summaries are frozen and never rewritten.

On disk the chest count is stored as ``num_chests``; in Python it is
``chest_count``. Always dump with ``by_alias=True``.
"""

from typing import Annotated, Tuple

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, PlainValidator

from riokeys.codes import Role


def _coerce_role(value: object) -> Role:
    if isinstance(value, Role):
        return value
    if isinstance(value, str):
        return Role.parse(value)
    raise ValueError(f"role must be a string, got {type(value).__name__}")


RoleField = Annotated[
    Role,
    PlainValidator(_coerce_role),
    PlainSerializer(lambda role: role.label, return_type=str),
]


class RosterEntry(BaseModel):
    """A roster member projected down to what the report shows."""
    role: RoleField
    item_level: int = Field(..., ge=0)
    character_name: str

    model_config = ConfigDict(frozen=True, extra="forbid")


class RunSummary(BaseModel):
    """Immutable summary of a completed run."""
    id: int
    chest_count: int = Field(..., ge=0, alias="num_chests")
    level: int = Field(..., ge=0)
    dungeon_name: str
    roster: Tuple[RosterEntry, ...]  # normalized order, see kernel.roster

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    def to_json_dict(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)
