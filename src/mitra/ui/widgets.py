"""Custom Textual widgets for the TUI.

Hides widget implementation details:
- Header layout (title, welcome line, language toggle)
- Chat message rendering and auto-scroll
- Input bar mirroring and submission
- Log rendering and level filtering
"""

from collections.abc import Sequence
from datetime import datetime

from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.message import Message as TextualMessage
from textual.widgets import Button, Input, RichLog, Static

from ..chat.session import Message, Sender
from ..i18n import Language, text, toggle_label
from .config import LOG_TIMESTAMP_FORMAT, MESSAGE_TIMESTAMP_FORMAT, LogLevel


class HeaderBar(Horizontal):
    """Title, optional welcome line and the language toggle."""

    def compose(self):
        with Vertical(id="title-block"):
            yield Static("", id="app-title", markup=False)
            yield Static("", id="welcome-line", markup=False)
        yield Button("", id="language-btn")

    def localize(self, language: Language, display_name: str = "") -> None:
        """Render the header for the given language and user."""
        self.query_one("#app-title", Static).update(text(language, "app_title"))
        welcome = text(language, "welcome_user", name=display_name) if display_name else ""
        self.query_one("#welcome-line", Static).update(welcome)
        self.query_one("#language-btn", Button).label = toggle_label(language)


class ChatHistoryWidget(VerticalScroll):
    """Scrollable conversation, one row per message.

    The widget is a projection of the session's message log: `sync`
    mounts whatever messages it has not rendered yet, in order, and
    scrolls to the newest one.
    """

    BORDER_TITLE = "Chat"
    BORDER_SUBTITLE = "0 messages"
    ALLOW_MAXIMIZE = True
    ALLOW_SELECT = True

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._rendered = 0

    @property
    def rendered_count(self) -> int:
        return self._rendered

    def sync(self, messages: Sequence[Message]) -> None:
        """Render any messages appended since the last sync."""
        new_messages = list(messages[self._rendered:])
        if not new_messages:
            return
        for message in new_messages:
            self._render_message(message)
        self._rendered += len(new_messages)
        self.border_subtitle = f"{self._rendered} messages"
        self.call_after_refresh(self.scroll_end, animate=False)

    def _render_message(self, message: Message) -> None:
        """Mount a single message row."""
        is_user = message.sender is Sender.USER
        row_class = "user-row" if is_user else "assistant-row"
        bubble_class = "user-message" if is_user else "assistant-message"

        bubble = Static(message.text, classes=f"chat-message {bubble_class}", markup=False)
        bubble.tooltip = message.timestamp.strftime(MESSAGE_TIMESTAMP_FORMAT)

        row = Horizontal(classes=f"chat-row {row_class}")
        row.compose_add_child(bubble)
        self.mount(row)


class ChatInputBar(Horizontal):
    """Single-line message input with a Send button."""

    class Changed(TextualMessage):
        """Posted whenever the input text changes."""

        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

    class Submitted(TextualMessage):
        """Posted when the user presses Enter or Send."""

        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

    def compose(self):
        yield Input(id="chat-input")
        yield Button("", id="send-btn", variant="primary")

    @property
    def value(self) -> str:
        return self.query_one("#chat-input", Input).value

    def set_value(self, value: str) -> None:
        """Mirror the session's input buffer into the field."""
        field = self.query_one("#chat-input", Input)
        if field.value != value:
            field.value = value

    def localize(self, language: Language) -> None:
        self.query_one("#chat-input", Input).placeholder = text(language, "input_placeholder")
        self.query_one("#send-btn", Button).label = text(language, "send_button")

    def set_busy(self, busy: bool) -> None:
        """Disable Send while a reply is outstanding."""
        self.query_one("#send-btn", Button).disabled = busy

    def focus_input(self) -> None:
        self.query_one("#chat-input", Input).focus()

    def on_input_changed(self, event: Input.Changed) -> None:
        event.stop()
        self.post_message(self.Changed(event.value))

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.post_message(self.Submitted(event.value))

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "send-btn":
            event.stop()
            self.post_message(self.Submitted(self.value))


class DebugPanel(RichLog):
    """Log panel for real-time tracing with level filtering.

    Shows timestamped log messages from all components.
    Supports standard log levels: DEBUG < INFO < WARNING < ERROR.
    Hidden by default, shown with --log-level flag or toggled with Ctrl+L.
    """

    BORDER_TITLE = "Log"
    BORDER_SUBTITLE = "Trace log"

    LEVEL_COLORS = {
        LogLevel.DEBUG: "dim white",
        LogLevel.INFO: "cyan",
        LogLevel.WARNING: "yellow",
        LogLevel.ERROR: "red",
    }

    COMPONENT_COLORS = {
        "TUI": "cyan",
        "Controller": "green",
        "Client": "bright_blue",
        "LLM": "magenta",
    }

    def __init__(self, *args, log_level: int = LogLevel.DEBUG, **kwargs) -> None:
        super().__init__(
            *args,
            markup=True,
            highlight=False,
            auto_scroll=True,
            wrap=True,
            **kwargs
        )
        self._log_level = log_level

    @property
    def log_level(self) -> int:
        """Current log level threshold."""
        return self._log_level

    @log_level.setter
    def log_level(self, level: int) -> None:
        self._log_level = level
        self._update_subtitle()

    def _update_subtitle(self) -> None:
        if self.display:
            self.border_subtitle = f"Level: {LogLevel.name(self._log_level)}"
        else:
            self.border_subtitle = "Hidden"

    def on_mount(self) -> None:
        """Hide by default."""
        self.display = False

    def add_entry(
        self,
        component: str,
        message: str,
        level: int = LogLevel.DEBUG
    ) -> None:
        """Add a log entry if it meets the current level threshold.

        Args:
            component: Component name (TUI, Controller, Client, LLM)
            message: Log message
            level: Log level (LogLevel.DEBUG, INFO, WARNING, ERROR)
        """
        if level < self._log_level:
            return

        from rich.markup import escape

        timestamp = datetime.now().strftime(LOG_TIMESTAMP_FORMAT)
        level_color = self.LEVEL_COLORS.get(level, "white")
        comp_color = self.COMPONENT_COLORS.get(component, "white")

        self.write(
            f"[dim]{timestamp}[/] "
            f"[{level_color}]{LogLevel.name(level):<5}[/] "
            f"[{comp_color}]\\[{component}][/] {escape(message)}"
        )

    def debug(self, component: str, message: str) -> None:
        self.add_entry(component, message, LogLevel.DEBUG)

    def info(self, component: str, message: str) -> None:
        self.add_entry(component, message, LogLevel.INFO)

    def warning(self, component: str, message: str) -> None:
        self.add_entry(component, message, LogLevel.WARNING)

    def error(self, component: str, message: str) -> None:
        self.add_entry(component, message, LogLevel.ERROR)

    def show(self) -> None:
        self.display = True
        self._update_subtitle()

    def hide(self) -> None:
        self.display = False
        self.border_subtitle = "Hidden"

    def toggle(self) -> bool:
        """Toggle visibility. Returns new state."""
        if self.display:
            self.hide()
            return False
        self.show()
        return True
