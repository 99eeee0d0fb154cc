"""Modal screens for the TUI.

This module hides the design decisions about:
- Name prompt appearance (CSS, layout)
- How the name is collected and validated before dismissal

To change how the name prompt looks, modify only this file.
"""

from collections.abc import Callable

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Static

from ..i18n import Language, text
from .config import MAX_NAME_LENGTH


class NamePromptScreen(ModalScreen[str]):
    """Blocking modal that collects the user's name.

    The screen only dismisses once `on_submit` accepts the name; blank
    submissions leave it open. Dismisses with the accepted name.
    """

    CSS = """
    NamePromptScreen {
        align: center middle;
        background: $background 70%;
    }

    #name-dialog {
        width: 60;
        height: auto;
        border: tall $primary;
        background: $surface;
        padding: 1 2;
    }

    #name-title {
        width: 100%;
        text-align: center;
        text-style: bold;
        color: $primary;
        padding: 0 0 1 0;
        border-bottom: solid $border;
        margin-bottom: 1;
    }

    #name-description {
        width: 100%;
        text-align: center;
        margin-bottom: 1;
    }

    #name-buttons {
        width: 100%;
        height: 3;
        align: center middle;
        margin-top: 1;
    }
    """

    def __init__(self, language: Language, on_submit: Callable[[str], bool]) -> None:
        super().__init__()
        self._language = language
        self._on_submit = on_submit

    def compose(self) -> ComposeResult:
        with Vertical(id="name-dialog"):
            yield Static("", id="name-title", markup=False)
            yield Static("", id="name-description", markup=False)
            yield Input(id="name-input", max_length=MAX_NAME_LENGTH)
            with Horizontal(id="name-buttons"):
                yield Button("", id="name-submit", variant="primary")

    def on_mount(self) -> None:
        self.localize(self._language)
        self.query_one("#name-input", Input).focus()

    def localize(self, language: Language) -> None:
        """Re-render every label in the given language."""
        self._language = language
        self.query_one("#name-title", Static).update(text(language, "name_prompt_title"))
        self.query_one("#name-description", Static).update(text(language, "name_prompt_description"))
        self.query_one("#name-input", Input).placeholder = text(language, "name_placeholder")
        self.query_one("#name-submit", Button).label = text(language, "name_submit")

    def _submit(self) -> None:
        name = self.query_one("#name-input", Input).value
        if self._on_submit(name):
            self.dismiss(name.strip())

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self._submit()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "name-submit":
            event.stop()
            self._submit()
