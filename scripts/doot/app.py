"""
doot TUI Application.

Hosts a Presenter in a Textual app: key presses go to the presenter and
the app exits once the presenter asks for it.
"""

from __future__ import annotations

from textual import events
from textual.app import App
from textual.binding import Binding

from doot.presenter import Presenter
from doot.providers import KeyEvent
from doot.views.todo_list import TodoListScreen


class DootApp(App):
    """Main doot application."""

    TITLE = "doot"

    CSS = """
    Screen {
        background: $surface;
    }
    """

    # Only the presenter decides when to quit
    ENABLE_COMMAND_PALETTE = False

    BINDINGS = [
        Binding("ctrl+q", "forward_key('ctrl+q')", "Forward", show=False, priority=True),
        Binding("ctrl+c", "forward_key('ctrl+c')", "Forward", show=False, priority=True),
    ]

    def __init__(self, presenter: Presenter, **kwargs) -> None:
        super().__init__(**kwargs)
        self._presenter = presenter

    @property
    def presenter(self) -> Presenter:
        return self._presenter

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self._presenter.scan()
        self.push_screen(TodoListScreen(self._presenter.render()))

    def on_key(self, event: events.Key) -> None:
        self._forward(KeyEvent(event.character or event.key))

    def action_forward_key(self, key: str) -> None:
        """Hand a key claimed by a binding to the presenter."""
        self._forward(KeyEvent(key))

    def _forward(self, event: KeyEvent) -> None:
        self._presenter.handle_event(event)
        if self._presenter.state.exit:
            self.exit()


def run(presenter: Presenter) -> None:
    """Scan, then run the TUI until the user quits."""
    # Scan before Textual takes over the terminal so diagnostics reach stderr
    presenter.scan()
    app = DootApp(presenter)
    app.run()
