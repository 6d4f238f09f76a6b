"""JSON serialization helpers for the run cache.

Two encodings are supported:
- pretty: indent=2, human-inspectable (default)
- canonical: sorted keys, stable separators, no whitespace

Both round-trip to the same Python objects; only the bytes differ.
"""

import json
import os
import stat
import tempfile
from pathlib import Path
from typing import Any


def canonical_dumps(obj: Any) -> str:
    """
    Canonical JSON serialization.

    Rules:
    - UTF-8 encoding
    - Sorted keys
    - Stable separators (",", ":")
    - No trailing whitespace

    Args:
        obj: Python object to serialize

    Returns:
        Canonical JSON string
    """
    return json.dumps(
        obj,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False
    )


def pretty_dumps(obj: Any) -> str:
    """Indented JSON for files meant to be read by people."""
    return json.dumps(obj, indent=2, ensure_ascii=False)


def dumps(obj: Any, *, pretty: bool) -> str:
    return pretty_dumps(obj) if pretty else canonical_dumps(obj)


def atomic_write_text(path: Path, text: str) -> None:
    """Replace ``path`` with ``text`` in one step.

    Content goes to a temporary file in the same directory first, then
    ``os.replace`` swaps it in, so readers see the old file or the new one.
    The result keeps the mode of the file it replaces; a new file gets the
    usual umask-derived mode.
    """
    directory = path.parent if str(path.parent) else Path(".")
    directory.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=directory)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(text)
        os.chmod(tmp_name, _target_mode(path))
        os.replace(tmp_name, path)
    except OSError:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise


def _target_mode(path: Path) -> int:
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask
