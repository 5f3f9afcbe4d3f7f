"""
Data types and providers for the presenter.

Protocols define the interface; implementations can be swapped
for testing or alternative hosts.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Protocol, Union


@dataclass(frozen=True)
class Annotation:
    """A single TODO found in a source file."""

    text: str
    path: Path
    line_number: int


class Phase(Enum):
    """Lifecycle of one presenter run."""

    SCANNING = "scanning"
    RUNNING = "running"
    EXITED = "exited"


@dataclass
class PresenterState:
    """Everything the presenter owns for one run."""

    annotations: list[Annotation] = field(default_factory=list)
    exit: bool = False


@dataclass(frozen=True)
class Frame:
    """Renderable snapshot of presenter state."""

    title: str
    entries: tuple[Annotation, ...]
    instructions: tuple[tuple[str, str], ...]
    selected: int | None = None
    highlight_symbol: str = ">>"

    @property
    def items(self) -> tuple[str, ...]:
        return tuple(entry.text for entry in self.entries)

    @property
    def status(self) -> str:
        """Plain-text status line, e.g. ' Settings <S>  Quit <Q> '."""
        parts = [f"{label} <{key}>" for label, key in self.instructions]
        return " " + "  ".join(parts) + " "


class KeyEventKind(Enum):
    PRESS = "press"
    RELEASE = "release"
    REPEAT = "repeat"


@dataclass(frozen=True)
class KeyEvent:
    """A key event; `key` is the character typed or the key name."""

    key: str
    kind: KeyEventKind = KeyEventKind.PRESS


@dataclass(frozen=True)
class ResizeEvent:
    width: int
    height: int


InputEvent = Union[KeyEvent, ResizeEvent]


class AnnotationProvider(Protocol):
    """Protocol for producing the annotations of one scan."""

    def load(self) -> list[Annotation]:
        """Scan and return annotations in discovery order."""
        ...


class RenderTarget(Protocol):
    """Protocol for a surface that can show a frame."""

    def draw(self, frame: Frame) -> None:
        """Render one frame."""
        ...


class EventSource(Protocol):
    """Protocol for a blocking source of input events."""

    def read(self) -> InputEvent:
        """Block until the next input event and return it."""
        ...
