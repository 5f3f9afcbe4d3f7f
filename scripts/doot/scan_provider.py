"""
Concrete implementation of AnnotationProvider over the filesystem.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TextIO

from doot.extractor import DEFAULT_MARKER_PATTERN, MarkerExtractor
from doot.providers import Annotation
from doot.walker import walk_files


class FileScanProvider:
    """AnnotationProvider that walks a directory tree."""

    def __init__(
        self,
        root: Path | str,
        pattern: str = DEFAULT_MARKER_PATTERN,
        diagnostics: TextIO | None = None,
    ):
        self._root = Path(root)
        self._extractor = MarkerExtractor(pattern)
        self._diagnostics = diagnostics

    def load(self) -> list[Annotation]:
        """Scan the whole tree and return annotations in discovery order."""
        diagnostics = self._diagnostics if self._diagnostics is not None else sys.stderr

        annotations: list[Annotation] = []
        for path in walk_files(self._root, diagnostics):
            try:
                annotations.extend(self._extractor.extract(path))
            except (OSError, UnicodeDecodeError) as e:
                print(f"{path}: {e}", file=diagnostics)
        return annotations
