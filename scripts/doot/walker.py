"""
Ignore-aware directory walk.

Yields the regular files under a root, skipping hidden entries and
anything excluded by .gitignore / .ignore files found along the way.
"""

from __future__ import annotations

import os
import re
import stat
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterator, TextIO

# Later names take precedence over earlier ones in the same directory
IGNORE_FILENAMES = (".gitignore", ".ignore")


class EntryKind(Enum):
    FILE = "file"
    DIRECTORY = "directory"
    OTHER = "other"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class IgnoreRule:
    """A single rule from an ignore file."""

    pattern: str
    negation: bool
    directory_only: bool
    anchored: bool  # Pattern is matched against the path from base
    base: Path  # Directory containing the ignore file

    def matches(self, path: Path, is_dir: bool) -> bool:
        if self.directory_only and not is_dir:
            return False
        if self.base.is_absolute() and not path.is_absolute():
            path = _absolute(path)
        try:
            rel = path.relative_to(self.base)
        except ValueError:
            return False

        target = rel.as_posix() if self.anchored else path.name
        return _compile_glob(self.pattern).fullmatch(target) is not None


_GLOB_CACHE: dict[str, re.Pattern] = {}


def _compile_glob(pattern: str) -> re.Pattern:
    """Translate a gitignore glob to a regex; '*' never crosses '/'."""
    cached = _GLOB_CACHE.get(pattern)
    if cached is not None:
        return cached

    out = []
    i, n = 0, len(pattern)
    while i < n:
        c = pattern[i]
        if pattern.startswith("**/", i):
            out.append("(?:.*/)?")
            i += 3
        elif pattern.startswith("/**", i) and i + 3 == n:
            out.append("/.*")
            i += 3
        elif pattern.startswith("**", i):
            out.append(".*")
            i += 2
        elif c == "*":
            out.append("[^/]*")
            i += 1
        elif c == "?":
            out.append("[^/]")
            i += 1
        elif c == "[":
            end = pattern.find("]", i + 1)
            if end == -1:
                out.append(re.escape(c))
                i += 1
                continue
            body = pattern[i + 1:end]
            if body.startswith("!"):
                body = "^" + body[1:]
            out.append(f"[{body}]")
            i = end + 1
        elif c == "\\" and i + 1 < n:
            out.append(re.escape(pattern[i + 1]))
            i += 2
        else:
            out.append(re.escape(c))
            i += 1

    compiled = re.compile("".join(out))
    _GLOB_CACHE[pattern] = compiled
    return compiled


def parse_ignore_lines(lines: list[str], base: Path) -> list[IgnoreRule]:
    """Parse ignore-file lines into rules rooted at base."""
    rules = []
    for line in lines:
        line = line.rstrip("\n\r")
        # Skip empty lines and comments
        if not line.strip() or line.startswith("#"):
            continue
        if not line.endswith("\\ "):
            line = line.rstrip(" ")

        negation = line.startswith("!")
        if negation:
            line = line[1:]
        elif line.startswith("\\!") or line.startswith("\\#"):
            line = line[1:]

        directory_only = line.endswith("/")
        if directory_only:
            line = line.rstrip("/")

        anchored = line.startswith("/")
        if anchored:
            line = line.lstrip("/")

        # A slash anywhere else also anchors the pattern
        if "/" in line:
            anchored = True

        if not line:
            continue

        rules.append(IgnoreRule(
            pattern=line,
            negation=negation,
            directory_only=directory_only,
            anchored=anchored,
            base=base,
        ))
    return rules


def load_ignore_rules(directory: Path, diagnostics: TextIO) -> list[IgnoreRule]:
    """Load the rules from every ignore file in directory."""
    rules: list[IgnoreRule] = []
    for name in IGNORE_FILENAMES:
        ignore_path = directory / name
        if not ignore_path.is_file():
            continue
        try:
            with open(ignore_path, "r", encoding="utf-8", errors="ignore") as f:
                rules.extend(parse_ignore_lines(f.readlines(), directory))
        except OSError as e:
            print(e, file=diagnostics)
    return rules


def _absolute(path: Path) -> Path:
    return Path(os.path.abspath(path))


def load_parent_rules(root: Path, diagnostics: TextIO) -> list[IgnoreRule]:
    """
    Load ignore rules from the directories above root, outermost first.

    Stops at the enclosing repository root (the first directory holding
    .git); outside a repository every ancestor is read.
    """
    root = _absolute(root)
    if (root / ".git").exists():
        return []

    ancestors = []
    for parent in root.parents:
        ancestors.append(parent)
        if (parent / ".git").exists():
            break

    rules: list[IgnoreRule] = []
    for directory in reversed(ancestors):
        rules.extend(load_ignore_rules(directory, diagnostics))
    return rules


def is_ignored(path: Path, is_dir: bool, rules: list[IgnoreRule]) -> bool:
    """Check a path against rules; the last matching rule wins."""
    ignored = False
    for rule in rules:
        if rule.matches(path, is_dir):
            ignored = not rule.negation
    return ignored


def entry_kind(entry: os.DirEntry) -> EntryKind:
    """Classify an entry without following symlinks."""
    try:
        mode = entry.stat(follow_symlinks=False).st_mode
    except OSError:
        return EntryKind.UNKNOWN

    if stat.S_ISREG(mode):
        return EntryKind.FILE
    if stat.S_ISDIR(mode):
        return EntryKind.DIRECTORY
    return EntryKind.OTHER


def walk_files(root: Path | str, diagnostics: TextIO | None = None) -> Iterator[Path]:
    """
    Yield every regular, non-ignored file under root.

    Entries are visited in sorted order. Errors for individual entries are
    printed to diagnostics (stderr by default) and the entry is skipped.
    """
    if diagnostics is None:
        diagnostics = sys.stderr
    root = Path(root)

    try:
        mode = root.stat().st_mode
    except OSError as e:
        print(e, file=diagnostics)
        return

    if stat.S_ISREG(mode):
        yield root
        return
    if not stat.S_ISDIR(mode):
        return

    yield from _walk_dir(root, load_parent_rules(root, diagnostics), diagnostics)


def _walk_dir(
    directory: Path,
    inherited: list[IgnoreRule],
    diagnostics: TextIO,
) -> Iterator[Path]:
    rules = inherited + load_ignore_rules(directory, diagnostics)

    try:
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError as e:
        print(e, file=diagnostics)
        return

    for entry in entries:
        if entry.name.startswith("."):
            continue

        kind = entry_kind(entry)
        if kind is EntryKind.UNKNOWN or kind is EntryKind.OTHER:
            continue

        path = Path(entry.path)
        is_dir = kind is EntryKind.DIRECTORY
        if is_ignored(path, is_dir, rules):
            continue

        if is_dir:
            yield from _walk_dir(path, rules, diagnostics)
        else:
            yield path
