"""
Mitra: a bilingual (English/Bengali) support chat backed by a hosted Gemini model.

The package follows Parnas's information hiding principles,
where each module hides a specific design decision.
"""

__version__ = "0.1.0"

from .chat import (
    ChatController,
    Message,
    ResponseClient,
    Sender,
    Session,
)
from .i18n import Language

__all__ = [
    "ChatController",
    "Language",
    "Message",
    "ResponseClient",
    "Sender",
    "Session",
]
