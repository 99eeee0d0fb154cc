"""Terminal UI module for mitra.

Provides a Textual-based TUI over the ChatController.

Module structure (Parnas principle - each module hides a design decision):
- widgets.py: Custom widgets (header, message rendering, input bar, log panel)
- styles.py: CSS styling (layout decisions)
- themes.py: Color palettes and theme configuration
- screens.py: Modal dialogs (name prompt)
- app.py: Application orchestration (user interaction flow)
"""

from .app import MitraApp, run_textual_tui
from .config import LogLevel
from .screens import NamePromptScreen
from .widgets import ChatHistoryWidget, ChatInputBar, DebugPanel, HeaderBar

__all__ = [
    "ChatHistoryWidget",
    "ChatInputBar",
    "DebugPanel",
    "HeaderBar",
    "LogLevel",
    "MitraApp",
    "NamePromptScreen",
    "run_textual_tui",
]
