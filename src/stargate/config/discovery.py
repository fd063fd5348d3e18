"""Locating ``stargate.toml``.

A roster belongs to a directory tree: running ``stargate`` anywhere below
the directory holding ``stargate.toml`` uses that file, and the database
lands in ``.stargate/`` beside it. ``STARGATE_CONFIG`` pins one file for
every invocation (useful for scripts and CI). An explicit ``--config``
never reaches this module.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "stargate.toml"
CONFIG_ENV_VAR = "STARGATE_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """The ``stargate.toml`` governing *start* (default: cwd), or None.

    When ``STARGATE_CONFIG`` is set it is the only candidate: a path that
    is not an existing file yields None rather than falling back to the
    directory search. Otherwise the nearest file in *start* or one of its
    ancestors wins.
    """
    pinned = os.environ.get(CONFIG_ENV_VAR)
    if pinned:
        path = Path(pinned)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
