"""Pydantic models for raider.io response payloads.

Only the fields riokeys reads are declared. Unknown fields are ignored,
declared fields are required.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class Dungeon(BaseModel):
    name: str
    short_name: str

    model_config = ConfigDict(extra="ignore")


class MemberCharacter(BaseModel):
    name: str

    model_config = ConfigDict(extra="ignore")


class MemberItems(BaseModel):
    item_level_equipped: int = Field(..., ge=0)

    model_config = ConfigDict(extra="ignore")


class RosterMember(BaseModel):
    """One participant of a run as returned by run-details."""
    character: MemberCharacter
    items: MemberItems
    role: str

    model_config = ConfigDict(extra="ignore")


class RunDetailsResponse(BaseModel):
    """Body of GET /mythic-plus/run-details."""
    season: str
    status: str
    dungeon: Dungeon
    keystone_run_id: int
    mythic_level: int = Field(..., ge=0)
    num_chests: int = Field(..., ge=0)
    roster: List[RosterMember]

    model_config = ConfigDict(extra="ignore")


class Affix(BaseModel):
    id: int
    name: str
    description: str
    icon: str
    icon_url: str
    wowhead_url: str

    model_config = ConfigDict(extra="ignore")


class MythicPlusRecentRun(BaseModel):
    dungeon: str
    short_name: str
    mythic_level: int
    completed_at: str  # ISO 8601
    clear_time_ms: int
    keystone_run_id: int
    par_time_ms: int
    num_keystone_upgrades: int
    map_challenge_mode_id: int
    zone_id: int
    zone_expansion_id: int
    icon_url: str
    background_image_url: str
    score: float
    affixes: List[Affix]
    url: str

    model_config = ConfigDict(extra="ignore")


class CharacterProfile(BaseModel):
    """Body of GET /characters/profile with fields=mythic_plus_recent_runs."""
    name: str
    race: str
    class_: str = Field(alias="class")
    active_spec_name: str
    active_spec_role: str
    gender: str
    faction: str
    achievement_points: int
    thumbnail_url: str
    region: str
    realm: str
    last_crawled_at: str
    profile_url: str
    profile_banner: str
    mythic_plus_recent_runs: List[MythicPlusRecentRun]

    model_config = ConfigDict(extra="ignore", populate_by_name=True)
