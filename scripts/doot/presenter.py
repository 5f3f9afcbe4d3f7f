"""
Presenter: owns the annotation list and the exit flag, and turns input
events into state changes.

The presenter knows nothing about the terminal. Hosts hand it events and
draw the frames it renders; `run` drives a full loop over any RenderTarget
and EventSource pair.
"""

from __future__ import annotations

from doot.providers import (
    AnnotationProvider,
    EventSource,
    Frame,
    InputEvent,
    KeyEvent,
    KeyEventKind,
    Phase,
    PresenterState,
    RenderTarget,
)

APP_TITLE = " doot 💀🎺 "

INSTRUCTIONS = (
    ("Settings", "S"),
    ("Quit", "Q"),
)

HIGHLIGHT_SYMBOL = ">>"

QUIT_KEY = "q"


class Presenter:
    """Drives one scan-and-browse session."""

    def __init__(self, provider: AnnotationProvider) -> None:
        self._provider = provider
        self._scanned = False
        self.state = PresenterState()

    @property
    def phase(self) -> Phase:
        if not self._scanned:
            return Phase.SCANNING
        if self.state.exit:
            return Phase.EXITED
        return Phase.RUNNING

    def scan(self) -> None:
        """Run the one-time scan. Later calls do nothing."""
        if self._scanned:
            return
        self.state.annotations.extend(self._provider.load())
        self._scanned = True

    def render(self) -> Frame:
        # Most recently discovered first
        return Frame(
            title=APP_TITLE,
            entries=tuple(reversed(self.state.annotations)),
            instructions=INSTRUCTIONS,
            highlight_symbol=HIGHLIGHT_SYMBOL,
        )

    def handle_event(self, event: InputEvent) -> None:
        """Apply one input event. Only a 'q' key press changes state."""
        if not isinstance(event, KeyEvent) or event.kind is not KeyEventKind.PRESS:
            return
        if event.key == QUIT_KEY:
            self.state.exit = True
        # 'S' (settings) is advertised but has no action yet

    def run(self, target: RenderTarget, events: EventSource) -> None:
        """Scan, then render and wait for one event until exit is requested."""
        self.scan()
        while not self.state.exit:
            target.draw(self.render())
            self.handle_event(events.read())
