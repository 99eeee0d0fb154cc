"""Main Textual TUI application.

Orchestrates the UI components and routes user interaction to the
ChatController. Every widget is re-rendered from the controller's session
after each state change; no widget holds chat state of its own.
"""

import asyncio
from typing import TypeVar

from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widget import Widget
from textual.widgets import Button, Footer

from ..chat import ChatController
from ..i18n import text
from .config import LogLevel
from .screens import NamePromptScreen
from .styles import APP_CSS
from .themes import MITRA_CALM
from .widgets import ChatHistoryWidget, ChatInputBar, DebugPanel, HeaderBar

WidgetT = TypeVar("WidgetT", bound=Widget)


class MitraApp(App):
    """Textual TUI for the bilingual support chat."""

    CSS = APP_CSS
    TITLE = "Mitra"

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit"),
        Binding("ctrl+t", "toggle_language", "Language"),
        Binding("ctrl+r", "copy_last_response", "Copy Response"),
        Binding("ctrl+l", "toggle_debug", "Log"),
    ]

    def __init__(self, controller: ChatController, log_level: str | None = None) -> None:
        super().__init__()
        self._controller = controller
        self._log_level = log_level
        self._mirrored_input = ""

    @property
    def controller(self) -> ChatController:
        return self._controller

    def compose(self) -> ComposeResult:
        yield HeaderBar(id="header-bar")
        yield ChatHistoryWidget(id="chat-history")
        yield DebugPanel(id="debug-panel")
        yield ChatInputBar(id="chat-input-bar")
        yield Footer()

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self.register_theme(MITRA_CALM)
        self.theme = "mitra-calm"

        if self._log_level is not None:
            log_panel = self._main_query("#debug-panel", DebugPanel)
            log_panel.log_level = LogLevel.from_string(self._log_level)
            log_panel.show()
            log_panel.info("TUI", f"Log panel enabled with level: {self._log_level.upper()}")

        self._controller.set_debug_callback(self._route_debug)
        self._controller.set_change_callback(self._refresh_view)
        self.sub_title = self._controller.client.model_name
        self._refresh_view()

        if self._controller.gated:
            self.push_screen(
                NamePromptScreen(self._controller.session.language, self._controller.submit_name),
                callback=self._on_name_accepted,
            )
        else:
            self._main_query("#chat-input-bar", ChatInputBar).focus_input()

    def _main_query(self, selector: str, expect_type: type[WidgetT]) -> WidgetT:
        """Query the base screen, even while a modal is on top of it."""
        return self.screen_stack[0].query_one(selector, expect_type)

    def _route_debug(self, level: str, component: str, message: str) -> None:
        """Route controller and client log messages to the log panel."""
        log_panel = self._main_query("#debug-panel", DebugPanel)
        if level == "debug":
            log_panel.debug(component, message)
        elif level == "info":
            log_panel.info(component, message)
        elif level == "warning":
            log_panel.warning(component, message)
        elif level == "error":
            log_panel.error(component, message)

    def _refresh_view(self) -> None:
        """Project the session onto the widgets."""
        session = self._controller.session
        language = session.language

        self.title = text(language, "app_title")
        self._main_query("#header-bar", HeaderBar).localize(language, session.display_name)

        input_bar = self._main_query("#chat-input-bar", ChatInputBar)
        input_bar.localize(language)
        # Push only buffer changes the controller made (the clear on send)
        if session.input_buffer != self._mirrored_input:
            input_bar.set_value(session.input_buffer)
            self._mirrored_input = session.input_buffer
        input_bar.set_busy(self._controller.busy)

        self._main_query("#chat-history", ChatHistoryWidget).sync(session.messages)

        if isinstance(self.screen, NamePromptScreen):
            self.screen.localize(language)

    def _on_name_accepted(self, name: str | None) -> None:
        self._main_query("#debug-panel", DebugPanel).info("TUI", f"Chat started for {name}")
        self._main_query("#chat-input-bar", ChatInputBar).focus_input()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "language-btn":
            self.action_toggle_language()

    def on_chat_input_bar_changed(self, event: ChatInputBar.Changed) -> None:
        self._mirror_input(event.value)

    def _mirror_input(self, value: str) -> None:
        self._controller.set_input(value)
        self._mirrored_input = value

    def on_chat_input_bar_submitted(self, event: ChatInputBar.Submitted) -> None:
        """Handle user input submission."""
        self._mirror_input(event.value)
        if not event.value.strip() or self._controller.busy:
            return
        self._send(event.value)

    @work(group="send")
    async def _send(self, value: str) -> None:
        """Run one send as a background async worker.

        The controller also ignores sends made while a reply is
        outstanding, so a worker that races another is harmless.
        """
        await self._controller.send(value)

    def action_toggle_language(self) -> None:
        self._controller.toggle_language()

    def action_toggle_debug(self) -> None:
        """Toggle the log panel visibility."""
        log_panel = self._main_query("#debug-panel", DebugPanel)
        is_visible = log_panel.toggle()
        self.notify(f"Log panel {'shown' if is_visible else 'hidden'}", timeout=2)

    def action_copy_last_response(self) -> None:
        """Copy last assistant response to clipboard."""
        response = self._controller.session.last_reply()
        if response:
            self.copy_to_clipboard(response)
            self.notify("Response copied")
        else:
            self.notify("No response to copy", severity="warning")


async def run_textual_tui(controller: ChatController, log_level: str | None = None) -> None:
    """Run the Textual TUI.

    Args:
        controller: Chat controller owning the session and response client
        log_level: Log level for panel (debug/info/warning/error), None to hide
    """
    app = MitraApp(controller=controller, log_level=log_level)
    try:
        await app.run_async()
    except (KeyboardInterrupt, asyncio.CancelledError):
        pass
    finally:
        await controller.close()
