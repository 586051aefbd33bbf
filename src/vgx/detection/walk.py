"""Source tree walk — skip-list pruning and extension filtering."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import AbstractSet, Iterator

logger = logging.getLogger(__name__)


def iter_source_files(
    root: Path,
    extensions: AbstractSet[str],
    skip_dirs: AbstractSet[str],
) -> Iterator[Path]:
    """Yield source files under *root* in lexical order.

    Directories named in *skip_dirs* are not descended into, and symlinked
    directories are never followed. Files whose suffix is not in *extensions*
    are not yielded. Entries that cannot be listed or stat-ed are skipped.
    """
    try:
        entries = sorted(root.iterdir(), key=lambda p: p.name)
    except OSError as exc:
        logger.debug("Cannot list %s: %s", root, exc)
        return

    for entry in entries:
        try:
            is_dir = entry.is_dir() and not entry.is_symlink()
            is_file = not is_dir and entry.is_file()
        except OSError as exc:
            logger.debug("Cannot stat %s: %s", entry, exc)
            continue

        if is_dir:
            if entry.name in skip_dirs:
                continue
            yield from iter_source_files(entry, extensions, skip_dirs)
        elif is_file and entry.suffix in extensions:
            yield entry
