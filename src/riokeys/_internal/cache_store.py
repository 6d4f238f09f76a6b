"""File-backed cache of run summaries.

The cache file is a JSON array of run summaries. Every update reads the
whole file, changes the list in memory and writes the whole file back.
Single-process access is assumed; nothing is locked.

A file that is not a valid run cache reads as empty. Only ``append`` resets
it: a warning is logged, the file is rewritten as an empty array and the
new entry is added to that.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from pydantic import TypeAdapter, ValidationError

from riokeys._internal.json_io import atomic_write_text, dumps
from riokeys.errors import CacheIOError, CorruptCacheError
from riokeys.kernel.run_summary import RunSummary

logger = logging.getLogger(__name__)

_CACHE_ADAPTER = TypeAdapter(List[RunSummary])


def parse_cache(text: str) -> List[RunSummary]:
    """Parse cache file content.

    Raises:
        CorruptCacheError: content is not valid JSON or not a list of summaries
    """
    try:
        return _CACHE_ADAPTER.validate_json(text)
    except ValidationError as e:
        raise CorruptCacheError(f"Invalid run cache content: {e.error_count()} error(s)") from e


def serialize_cache(summaries: List[RunSummary], *, pretty: bool = True) -> str:
    return dumps([summary.to_json_dict() for summary in summaries], pretty=pretty)


class CacheStore:
    """Run summaries keyed by run id, persisted in one JSON file."""

    def __init__(self, path: Union[str, Path], *, pretty: bool = True) -> None:
        self._path = Path(path)
        self._pretty = pretty

    @property
    def path(self) -> Path:
        return self._path

    def load(self, *, reset_corrupt: bool = False) -> List[RunSummary]:
        """Return every cached summary in file order.

        A missing file is an empty cache. A corrupt file reads as empty; with
        ``reset_corrupt`` it is also overwritten with an empty cache.

        Raises:
            CacheIOError: the file exists but cannot be read, or cannot be reset
        """
        if not self._path.exists():
            return []
        try:
            text = self._path.read_text(encoding="utf-8")
        except OSError as e:
            raise CacheIOError(f"Cannot read cache {self._path}: {e}") from e

        try:
            return parse_cache(text)
        except CorruptCacheError as e:
            if not reset_corrupt:
                logger.warning("Ignoring corrupt cache %s: %s", self._path, e)
                return []
            logger.warning(
                "The cache has been compromised, flushing it down the drain! (%s: %s)",
                self._path, e,
            )
            self._write([])
            return []

    def lookup(self, run_id: int) -> Optional[RunSummary]:
        for summary in self.load():
            if summary.id == run_id:
                return summary
        return None

    def append(self, summary: RunSummary) -> None:
        """Add ``summary`` and persist the whole cache.

        An existing entry with the same id is replaced in place, so the file
        never holds two summaries for one run.

        Raises:
            CacheIOError: the cache cannot be read or written
        """
        summaries = self.load(reset_corrupt=True)
        for index, existing in enumerate(summaries):
            if existing.id == summary.id:
                logger.debug("Replacing cached run %s", summary.id)
                summaries[index] = summary
                break
        else:
            summaries.append(summary)
        self._write(summaries)
        logger.info("Cached run %s in %s (%d entries)", summary.id, self._path, len(summaries))

    def _write(self, summaries: List[RunSummary]) -> None:
        try:
            atomic_write_text(self._path, serialize_cache(summaries, pretty=self._pretty))
        except OSError as e:
            raise CacheIOError(f"Cannot write cache {self._path}: {e}") from e
