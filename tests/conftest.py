from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src'))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


def make_files(root: Path, *relative: str) -> None:
    for rel in relative:
        target = root / rel
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text('x', encoding='utf-8')


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Tree with matches at several depths and inside ignored directories."""
    root = tmp_path / 'root'
    root.mkdir()
    make_files(
        root,
        'a.txt',
        'readme',
        'notes.md',
        'sub/b.txt',
        'sub/.git/c.txt',
        'sub/deep/d.txt',
        'node_modules/pkg/e.txt',
        'Build.TXT',
    )
    return root
