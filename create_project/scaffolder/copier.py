"""Recursive template copy with name-based exclusion."""

from __future__ import annotations

import shutil
from collections.abc import Iterable
from pathlib import Path

from create_project.config import DEFAULT_EXCLUDED_NAMES


def copy_tree(
    src: str | Path,
    dest: str | Path,
    excluded_names: Iterable[str] = DEFAULT_EXCLUDED_NAMES,
) -> int:
    """Copy the tree at *src* to *dest*, skipping excluded entries.

    ``dest`` and any missing parents are created. An entry is skipped when
    its own name is in *excluded_names*, at any depth and whether it is a
    file or a directory; the rest of its path is not considered. File
    contents are copied byte-for-byte.

    Permission and disk errors propagate as ``OSError`` and nothing is
    rolled back, so a failed copy can leave a partial tree behind.

    Returns:
        The number of files copied.
    """
    excluded = frozenset(excluded_names)
    copied: list[str] = []

    def _ignore(_directory: str, names: list[str]) -> set[str]:
        return {name for name in names if name in excluded}

    def _copy(source: str, target: str) -> str:
        copied.append(target)
        return shutil.copy2(source, target)

    shutil.copytree(src, dest, ignore=_ignore, copy_function=_copy)
    return len(copied)
