"""Theme definitions for the TUI.

This module hides the design decisions about:
- Color palettes and visual appearance
- Theme variables (borders, scrollbars, etc.)

To add a new theme, define it here and register in the app.
"""

from textual.theme import Theme

# Calm blue palette, matching the chat's blue header and user bubbles
MITRA_CALM = Theme(
    name="mitra-calm",
    primary="#2563eb",      # Blue 600 - header, user messages
    secondary="#64748b",    # Slate 500 - assistant messages
    accent="#93c5fd",       # Blue 300 - highlights
    foreground="#e2e8f0",   # Light text
    background="#0f172a",   # Slate 900
    success="#34d399",
    warning="#fbbf24",
    error="#f87171",
    surface="#1e293b",      # Slate 800
    panel="#172033",
    dark=True,
    variables={
        "input-cursor-background": "#e2e8f0",
        "input-cursor-foreground": "#0f172a",
        "input-selection-background": "#2563eb 30%",

        "border": "#334155",
        "border-blurred": "#1e293b",

        "scrollbar": "#1e293b",
        "scrollbar-hover": "#334155",
        "scrollbar-active": "#2563eb",
        "scrollbar-background": "#172033",
        "scrollbar-corner-color": "#172033",

        "footer-foreground": "#cbd5e1",
        "footer-background": "#0f172a",
        "footer-key-foreground": "#93c5fd",
        "footer-key-background": "#1e293b",

        "text-muted": "#94a3b8",

        "button-foreground": "#e2e8f0",
        "button-color-foreground": "#0f172a",
        "button-focus-text-style": "bold reverse",
    },
)
