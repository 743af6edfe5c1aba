"""Locate the shop a CLI invocation belongs to.

A shop is identified by its ``pieshop.toml`` or, for shops that were
never ``init``-ed, by an existing ``.pieshop/`` data directory. Both are
searched for from the working directory upward, the way git finds
``.git/``. ``PIESHOP_CONFIG`` pins the config file explicitly.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "pieshop.toml"
CONFIG_ENV_VAR = "PIESHOP_CONFIG"
DATA_DIRNAME = ".pieshop"


def _ancestors(start: Path | None) -> list[Path]:
    here = (start or Path.cwd()).resolve()
    return [here, *here.parents]


def find_config(start: Path | None = None) -> Path | None:
    """Return the ``pieshop.toml`` governing *start* (default: cwd), if any.

    When ``PIESHOP_CONFIG`` is set it wins outright; a path that does not
    name a file yields None rather than falling back to the search.
    """
    pinned = os.environ.get(CONFIG_ENV_VAR)
    if pinned:
        path = Path(pinned)
        return path if path.is_file() else None

    for directory in _ancestors(start):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def resolve_shop_root(config_path: Path | None, start: Path | None = None) -> Path:
    """Directory that holds (or will hold) the shop's ``.pieshop/`` data.

    The config file's directory when there is one; otherwise the nearest
    ancestor of *start* with a ``.pieshop/`` directory; otherwise *start*.
    """
    if config_path is not None:
        return config_path.resolve().parent
    candidates = _ancestors(start)
    for directory in candidates:
        if (directory / DATA_DIRNAME).is_dir():
            return directory
    return candidates[0]
