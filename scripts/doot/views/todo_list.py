"""TODO list view: one bordered panel holding the annotations."""

from textual.app import ComposeResult
from textual.screen import Screen
from textual.widgets import Label, ListItem, ListView, Static

from doot.providers import Annotation, Frame


def status_markup(frame: Frame) -> str:
    """Instructions for the panel's bottom border, keys highlighted."""
    parts = [f"{label} [bold blue]<{key}>[/]" for label, key in frame.instructions]
    return " " + "  ".join(parts) + " "


class TodoItem(ListItem):
    """One annotation in the list."""

    def __init__(self, annotation: Annotation, **kwargs) -> None:
        label = Label(annotation.text, markup=False)
        super().__init__(label, **kwargs)
        self.annotation = annotation
        self.display_text = annotation.text
        self._label = label

    def set_prefix(self, prefix: str) -> None:
        """Show prefix (highlight symbol or padding) before the text."""
        self.display_text = f"{prefix} {self.annotation.text}" if prefix else self.annotation.text
        self._label.update(self.display_text)


class TodoListPanel(Static):
    """Bordered list of annotations."""

    DEFAULT_CSS = """
    TodoListPanel {
        height: 1fr;
        border: thick $primary;
        border-title-align: center;
        border-subtitle-align: center;
    }

    TodoListPanel ListView {
        height: 1fr;
        background: transparent;
    }

    TodoListPanel ListItem.-highlight {
        text-style: italic;
    }
    """

    def __init__(self, frame: Frame, **kwargs) -> None:
        super().__init__(**kwargs)
        self._frame = frame
        self.border_title = frame.title
        self.border_subtitle = status_markup(frame)

    def compose(self) -> ComposeResult:
        items = [TodoItem(entry) for entry in self._frame.entries]
        yield ListView(*items, initial_index=self._frame.selected)

    def on_list_view_highlighted(self, event: ListView.Highlighted) -> None:
        # Active row gets the symbol, the rest are padded to stay aligned
        symbol = self._frame.highlight_symbol
        for item in self.query(TodoItem):
            if event.item is None:
                item.set_prefix("")
            elif item is event.item:
                item.set_prefix(symbol)
            else:
                item.set_prefix(" " * len(symbol))


class TodoListScreen(Screen):
    """Full-screen TODO list."""

    def __init__(self, frame: Frame, **kwargs) -> None:
        super().__init__(**kwargs)
        self._frame = frame

    def compose(self) -> ComposeResult:
        yield TodoListPanel(self._frame, id="todos")
