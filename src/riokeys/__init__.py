"""riokeys: raider.io keystone lookups with a local run cache."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("riokeys")
except PackageNotFoundError:
    __version__ = "dev"

from riokeys.api import lookup_run, recent_runs, RunLookup
from riokeys.codes import Region, Role, RoleKind, Server
from riokeys.errors import CacheIOError, CorruptCacheError, DecodeError, RioError, TransportError
from riokeys.kernel.run_summary import RosterEntry, RunSummary

__all__ = [
    "__version__",
    "lookup_run",
    "recent_runs",
    "RunLookup",
    "Region",
    "Role",
    "RoleKind",
    "Server",
    "RosterEntry",
    "RunSummary",
    "RioError",
    "TransportError",
    "DecodeError",
    "CacheIOError",
    "CorruptCacheError",
]
