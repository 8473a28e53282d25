from __future__ import annotations

from pathlib import PurePosixPath

import pytest

from extfind.discovery.filters import (
    IgnoreMatcher,
    extension_of,
    has_extension,
    in_recycle_bin,
    normalize_extensions,
    normalize_ignore,
    split_list,
)


def test_normalize_extensions_strips_dots_whitespace_and_empties() -> None:
    assert normalize_extensions('.txt, md ,') == frozenset({'txt', 'md'})


@pytest.mark.parametrize('raw', ['', None, ' , ', '.', ' . , ..'])
def test_normalize_extensions_can_be_empty(raw) -> None:
    assert normalize_extensions(raw) == frozenset()


def test_split_list_keeps_first_seen_order_without_duplicates() -> None:
    assert split_list('rs, py,rs , toml') == ['rs', 'py', 'toml']


def test_normalize_ignore_keeps_leading_dots() -> None:
    assert normalize_ignore('.git, node_modules,,') == frozenset({'.git', 'node_modules'})


def test_ignore_matcher_is_case_insensitive() -> None:
    matcher = IgnoreMatcher({'.git', 'node_modules'})
    assert matcher.matches_name('.GIT')
    assert matcher.matches_name('Node_Modules')
    assert not matcher.matches_name('src')


def test_ignore_matcher_checks_every_path_component() -> None:
    matcher = IgnoreMatcher({'.git'})
    assert matcher.matches_path(PurePosixPath('project/.Git/objects'))
    assert not matcher.matches_path(PurePosixPath('project/git/objects'))
    assert not matcher.matches_path(PurePosixPath('project/.github'))


def test_in_recycle_bin_matches_substring_case_insensitively() -> None:
    assert in_recycle_bin('D:/$Recycle.Bin/S-1-5/file.txt')
    assert in_recycle_bin('backup$RECYCLE.BIN.old')
    assert not in_recycle_bin('D:/recycle/file.txt')


@pytest.mark.parametrize(
    'name, expected',
    [
        ('a.txt', 'txt'),
        ('archive.tar.gz', 'gz'),
        ('readme', ''),
        ('.bashrc', ''),
        ('trailing.', ''),
        ('.config.yml', 'yml'),
    ],
)
def test_extension_of(name: str, expected: str) -> None:
    assert extension_of(name) == expected


def test_has_extension_is_case_sensitive() -> None:
    exts = frozenset({'txt'})
    assert has_extension('a.txt', exts)
    assert not has_extension('A.TXT', exts)
    assert not has_extension('a.txt.bak', exts)


def test_file_without_extension_never_matches() -> None:
    assert not has_extension('readme', frozenset({'readme', ''}))
