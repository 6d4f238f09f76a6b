"""Public API for riokeys.

High-level functions that return complete, structured results. The CLI is
a thin layer over these.
"""

import logging
from typing import Literal, Optional
from urllib.parse import urlencode

from pydantic import BaseModel, ConfigDict

from riokeys._internal.cache_store import CacheStore
from riokeys._internal.http import RemoteClient
from riokeys.codes import Region, Server
from riokeys.config import RioSettings
from riokeys.errors import CacheIOError
from riokeys.kernel.render import render_recent_runs, render_run_summary
from riokeys.kernel.responses import CharacterProfile, RunDetailsResponse
from riokeys.kernel.roster import summarize_run
from riokeys.kernel.run_summary import RunSummary

logger = logging.getLogger(__name__)


class RunLookup(BaseModel):
    """Result of looking up one run."""
    summary: RunSummary
    source: Literal["cache", "remote"]
    persisted: bool  # False when the fetched run could not be written to the cache
    persist_error: Optional[str] = None
    report: str

    model_config = ConfigDict(frozen=True)


def run_details_url(base_url: str, season: str, run_id: int) -> str:
    query = urlencode({"season": season, "id": run_id})
    return f"{base_url.rstrip('/')}/mythic-plus/run-details?{query}"


def profile_url(base_url: str, name: str, region: Region, server: Server) -> str:
    query = urlencode({
        "region": str(region),
        "name": name,
        "realm": str(server),
        "fields": "mythic_plus_recent_runs",
    })
    return f"{base_url.rstrip('/')}/characters/profile?{query}"


def fetch_run_summary(client: RemoteClient, settings: RioSettings, run_id: int) -> RunSummary:
    """Fetch one run from the API and normalize it. Touches no cache."""
    details = client.fetch(run_details_url(settings.base_url, settings.season, run_id), RunDetailsResponse)
    return summarize_run(details)


def lookup_run(
    run_id: int,
    *,
    store: CacheStore,
    client: RemoteClient,
    settings: RioSettings,
) -> RunLookup:
    """Return the report for ``run_id``, fetching and caching it on a miss.

    Steps:
    1. cache hit: render the cached summary; no network call, no write
    2. miss: fetch run-details, normalize the roster, build the summary
    3. persist: append to the cache; a write failure is logged and recorded
       on the result, the report is still produced
    4. render

    Raises:
        TransportError, DecodeError: the fetch failed; the cache is untouched
        CacheIOError: the cache exists but cannot be read
    """
    cached = store.lookup(run_id)
    if cached is not None:
        logger.debug("Cache hit for run %s", run_id)
        return RunLookup(
            summary=cached,
            source="cache",
            persisted=True,
            report=render_run_summary(cached),
        )

    logger.debug("Cache miss for run %s", run_id)
    summary = fetch_run_summary(client, settings, run_id)

    persisted = True
    persist_error = None
    try:
        store.append(summary)
    except CacheIOError as e:
        logger.warning("Run %s was fetched but not cached: %s", run_id, e)
        persisted = False
        persist_error = str(e)

    return RunLookup(
        summary=summary,
        source="remote",
        persisted=persisted,
        persist_error=persist_error,
        report=render_run_summary(summary),
    )


def recent_runs(
    name: str,
    region: Region,
    server: Server,
    *,
    client: RemoteClient,
    settings: RioSettings,
) -> str:
    """Fetch a character profile and render its recent runs list."""
    profile = client.fetch(profile_url(settings.base_url, name, region, server), CharacterProfile)
    return render_recent_runs(profile)


__all__ = [
    "RunLookup",
    "fetch_run_summary",
    "lookup_run",
    "profile_url",
    "recent_runs",
    "run_details_url",
]
