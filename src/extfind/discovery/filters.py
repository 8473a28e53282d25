"""Filters used by the discovery engine.

Normalizes the comma-separated extension and ignore lists given on the
command line and decides which directories are pruned and which files
match.  Directory names are compared case-insensitively against every
component of a path; extensions are compared case-sensitively.
"""

from __future__ import annotations

from pathlib import PurePath
from typing import FrozenSet, Iterable, List, Optional, Union

RECYCLE_BIN_MARKER = '$recycle.bin'


def split_list(raw: Optional[str], strip_dots: bool = False) -> List[str]:
    """Split a comma-separated string into trimmed, non-empty pieces.

    Args:
        raw: The raw string, e.g. ``".txt, md ,"``.  ``None`` is treated as empty.
        strip_dots: Also remove leading dots from each piece.

    Returns:
        The pieces in first-seen order, without duplicates.
    """
    if not raw:
        return []
    pieces: List[str] = []
    for piece in raw.split(','):
        piece = piece.strip()
        if strip_dots:
            piece = piece.lstrip('.')
        if piece and piece not in pieces:
            pieces.append(piece)
    return pieces


def normalize_extensions(raw: Optional[str]) -> FrozenSet[str]:
    return frozenset(split_list(raw, strip_dots=True))


def normalize_ignore(raw: Optional[str]) -> FrozenSet[str]:
    return frozenset(split_list(raw))


class IgnoreMatcher:
    """Case-insensitive matcher for ignored directory names."""

    def __init__(self, names: Iterable[str]):
        self.names = frozenset(name.lower() for name in names)

    def matches_name(self, name: str) -> bool:
        return name.lower() in self.names

    def matches_path(self, path: Union[str, PurePath]) -> bool:
        """Return ``True`` if any component of ``path`` is an ignored name."""
        return any(self.matches_name(part) for part in PurePath(path).parts)


def in_recycle_bin(path: Union[str, PurePath]) -> bool:
    return RECYCLE_BIN_MARKER in str(path).lower()


def extension_of(name: str) -> str:
    """Return the text after the final dot of ``name``.

    Names without a dot, and dotfiles such as ``.bashrc``, have no
    extension and give an empty string.
    """
    stem, dot, ext = name.rpartition('.')
    if not dot or not stem:
        return ''
    return ext


def has_extension(name: str, extensions: FrozenSet[str]) -> bool:
    ext = extension_of(name)
    return bool(ext) and ext in extensions
