"""Shared fixtures for the doot test suite."""

import io
import sys
from pathlib import Path

import pytest

# Add scripts to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "scripts"))


@pytest.fixture
def diagnostics() -> io.StringIO:
    """Capturable diagnostic stream."""
    return io.StringIO()


@pytest.fixture
def make_tree(tmp_path: Path):
    """Build a file tree from a {relative_path: content} mapping."""

    def _make(files: dict) -> Path:
        for rel, content in files.items():
            path = tmp_path / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, bytes):
                path.write_bytes(content)
            else:
                path.write_text(content)
        return tmp_path

    return _make
