"""CSS styles for the TUI.

Hides layout and styling decisions from the application logic.
Uses Textual CSS features: nesting, pseudo-classes, variables.

Layout: a header bar on top, the scrolling conversation in the middle,
the optional log panel under it, and the input bar docked at the bottom.
User messages sit on the right, assistant messages on the left.
"""

APP_CSS = """
Screen {
    layout: vertical;
    background: $background;
}

/* ============================================
   Header Bar - Title, Welcome, Language Toggle
   ============================================ */
#header-bar {
    height: 3;
    padding: 0 2;
    background: $primary;
    color: $foreground;
}

#title-block {
    width: 1fr;
    height: 3;
}

#app-title {
    text-style: bold;
    height: 1;
    margin-top: 1;
}

#welcome-line {
    height: 1;
    color: $accent;
}

#language-btn {
    min-width: 12;
    height: 3;
    border: none;
    background: $primary-darken-2;
    color: $foreground;

    &:hover {
        background: $primary-darken-1;
    }
}

/* ============================================
   Chat History Panel
   ============================================ */
#chat-history {
    height: 1fr;
    background: $panel;
    border: round $primary 60%;
    border-title-color: $primary;
    border-title-style: bold;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    scrollbar-gutter: stable;

    &:focus-within {
        border: round $primary;
    }
}

.chat-row {
    width: 100%;
    height: auto;
    margin: 0 0 1 0;
}

.user-row {
    align-horizontal: right;
}

.assistant-row {
    align-horizontal: left;
}

.chat-message {
    width: auto;
    max-width: 80%;
    height: auto;
    padding: 0 1;
}

.user-message {
    background: $primary;
    color: $foreground;
}

.assistant-message {
    background: $secondary 40%;
    color: $foreground;
}

.message-time {
    color: $text-muted;
    text-style: italic;
}

/* ============================================
   Debug/Log Panel
   ============================================ */
#debug-panel {
    height: auto;
    min-height: 6;
    max-height: 12;
    background: $panel;
    border: round $warning 60%;
    border-title-color: $warning;
    border-title-style: bold;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
}

/* ============================================
   Chat Input Bar - Text Entry + Send
   ============================================ */
ChatInputBar {
    height: auto;
    padding: 1 1 0 1;
    background: $surface;
}

#chat-input {
    width: 1fr;
}

#send-btn {
    width: 12;
    margin: 0 0 0 1;
    text-style: bold;
}

/* ============================================
   Footer - Keyboard Shortcuts
   ============================================ */
Footer {
    background: $panel;
}

Toast {
    background: $surface;
    border: tall $border;
    padding: 0 1;

    &.-information {
        border: tall $primary;
    }

    &.-warning {
        border: tall $warning;
    }
}
"""
