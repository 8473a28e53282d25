"""Discovery engine for extfind.

This module walks a directory tree depth-first and yields the regular
files whose extension matches the configured set.  Ignored directories
are pruned before they are opened, so large excluded subtrees such as
``node_modules`` cost a single directory entry.  The walk is lazy and
built on ``os.scandir``; entries come out in the order the operating
system lists them.
"""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, FrozenSet, Iterator, Optional

from .filters import IgnoreMatcher, has_extension, in_recycle_bin

ErrorHandler = Callable[[Path, OSError], None]


@dataclass(frozen=True)
class SearchConfig:
    root: Path
    extensions: FrozenSet[str]
    ignore: FrozenSet[str] = field(default_factory=frozenset)
    max_depth: Optional[int] = None


@dataclass(frozen=True)
class WalkEntry:
    path: Path
    is_dir: bool
    is_file: bool
    depth: int


def _report(on_error: Optional[ErrorHandler], path: Path, exc: OSError) -> None:
    if on_error is not None:
        on_error(path, exc)


def walk(
    root: Path,
    ignore: IgnoreMatcher,
    max_depth: Optional[int] = None,
    on_error: Optional[ErrorHandler] = None,
) -> Iterator[WalkEntry]:
    """Yield entries under ``root``, pruning ignored directories.

    Args:
        root: Directory (or single file) to start from.
        ignore: Matcher for directory names to skip, including their subtrees.
        max_depth: Number of levels to descend below ``root``; ``0`` lists
            only the entries of ``root`` itself, ``None`` is unlimited.
        on_error: Called with the path and exception for every entry that
            cannot be read.  The walk always continues.

    Yields:
        ``WalkEntry`` objects in depth-first pre-order.
    """
    if max_depth is not None and max_depth < 0:
        raise ValueError(f'max_depth must be non-negative, got {max_depth}')
    root = Path(root)
    if ignore.matches_path(root) or in_recycle_bin(root):
        return
    try:
        mode = os.stat(root).st_mode
    except OSError as exc:
        _report(on_error, root, exc)
        return
    if stat.S_ISREG(mode):
        yield WalkEntry(path=root, is_dir=False, is_file=True, depth=0)
    elif stat.S_ISDIR(mode):
        yield from _walk_dir(root, 1, ignore, max_depth, on_error)


def _walk_dir(
    directory: Path,
    depth: int,
    ignore: IgnoreMatcher,
    max_depth: Optional[int],
    on_error: Optional[ErrorHandler],
) -> Iterator[WalkEntry]:
    try:
        with os.scandir(directory) as it:
            dir_entries = list(it)
    except OSError as exc:
        _report(on_error, directory, exc)
        return

    for dir_entry in dir_entries:
        path = directory / dir_entry.name
        try:
            is_dir = dir_entry.is_dir(follow_symlinks=False)
            is_file = dir_entry.is_file(follow_symlinks=False)
        except OSError as exc:
            _report(on_error, path, exc)
            continue

        if in_recycle_bin(path):
            continue
        if is_dir and ignore.matches_name(dir_entry.name):
            continue

        yield WalkEntry(path=path, is_dir=is_dir, is_file=is_file, depth=depth)

        if is_dir and (max_depth is None or depth <= max_depth):
            yield from _walk_dir(path, depth + 1, ignore, max_depth, on_error)


def discover_files(config: SearchConfig, on_error: Optional[ErrorHandler] = None) -> Iterator[Path]:
    """Yield paths of regular files under ``config.root`` matching ``config.extensions``."""
    matcher = IgnoreMatcher(config.ignore)
    for entry in walk(config.root, matcher, max_depth=config.max_depth, on_error=on_error):
        if entry.is_file and has_extension(entry.path.name, config.extensions):
            yield entry.path


def search(
    config: SearchConfig,
    emit: Callable[[Path], None],
    on_error: Optional[ErrorHandler] = None,
) -> int:
    """Stream every matching file to ``emit`` and return how many were found.

    No traversal happens when ``config.extensions`` is empty.
    """
    if not config.extensions:
        return 0
    found = 0
    for path in discover_files(config, on_error=on_error):
        emit(path)
        found += 1
    return found
