"""
Marker extraction.

Finds lines that start (after indentation) with the TODO marker and
pulls out the text that follows it.
"""

from __future__ import annotations

import re
from pathlib import Path

from doot.providers import Annotation

DEFAULT_MARKER_PATTERN = r"^\s*// TODO"

# Files containing this byte are treated as binary and never match
BINARY_SENTINEL = b"\x00"

UTF8_BOM = b"\xef\xbb\xbf"


class MarkerPatternError(ValueError):
    """Raised when the marker pattern cannot be compiled."""


def extract_payload(rest: str) -> str:
    """Strip one optional colon from the text after a marker, then trim."""
    if rest.startswith(":"):
        rest = rest[1:]
    return rest.strip()


class MarkerExtractor:
    """Searches files for marker lines."""

    def __init__(self, pattern: str = DEFAULT_MARKER_PATTERN) -> None:
        try:
            self._matcher = re.compile(pattern)
        except re.error as e:
            raise MarkerPatternError(f"invalid marker pattern {pattern!r}: {e}") from e
        self.pattern = pattern

    def extract(self, path: Path) -> list[Annotation]:
        """
        Return the annotations in a file, in line order.

        The file is read line by line. Binary files yield nothing: reading
        stops at the first NUL byte. Raises OSError if the file cannot be
        read and UnicodeDecodeError if a matched line is not valid UTF-8.
        """
        annotations = []
        with open(path, "rb") as f:
            for line_number, raw in enumerate(f, start=1):
                if BINARY_SENTINEL in raw:
                    return []
                if line_number == 1 and raw.startswith(UTF8_BOM):
                    raw = raw[len(UTF8_BOM):]
                raw = raw.rstrip(b"\n")
                if raw.endswith(b"\r"):
                    raw = raw[:-1]

                match = self._matcher.search(raw.decode("utf-8", errors="surrogateescape"))
                if match is None:
                    continue
                line = raw.decode("utf-8")
                annotations.append(Annotation(
                    text=extract_payload(line[match.end():]),
                    path=path,
                    line_number=line_number,
                ))
        return annotations
