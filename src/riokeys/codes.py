"""Enumerations used by riokeys.

Role values arrive as free text from the remote API, so Role keeps the
original label alongside its kind instead of collapsing unknown roles.
"""

from dataclasses import dataclass
from enum import Enum


class RoleKind(str, Enum):
    """Role partitions used for roster ordering."""

    TANK = "tank"
    HEALER = "healer"
    OTHER = "other"


_ROLE_PRIORITY = {
    RoleKind.TANK: 0,
    RoleKind.HEALER: 1,
    RoleKind.OTHER: 2,
}


@dataclass(frozen=True)
class Role:
    """Tagged role: Tank, Healer, or Other(label)."""

    kind: RoleKind
    label: str

    @classmethod
    def parse(cls, value: str) -> "Role":
        if value == RoleKind.TANK.value:
            return cls(RoleKind.TANK, value)
        if value == RoleKind.HEALER.value:
            return cls(RoleKind.HEALER, value)
        return cls(RoleKind.OTHER, value)

    @property
    def priority(self) -> int:
        return _ROLE_PRIORITY[self.kind]

    def __str__(self) -> str:
        return self.label


class Region(str, Enum):
    """Regions accepted by the profile endpoint."""

    US = "us"
    EU = "eu"
    TW = "tw"
    KR = "kr"
    CN = "cn"

    def __str__(self) -> str:
        return self.value


class Server(str, Enum):
    """Supported realms. Values are the realm slugs sent to the API."""

    ZUL_JIN = "zuljin"
    SARGERAS = "sargeras"
    ILLIDAN = "illidan"

    @property
    def cli_name(self) -> str:
        return self.name.lower().replace("_", "-")

    @classmethod
    def from_cli(cls, value: str) -> "Server":
        for member in cls:
            if value in (member.cli_name, member.value):
                return member
        raise ValueError(f"Unknown server '{value}'")

    def __str__(self) -> str:
        return self.value
