"""Chat core: session state, response client and interaction controller."""

from .client import ResponseClient
from .controller import ChatController
from .session import Message, Sender, Session

__all__ = [
    "ChatController",
    "Message",
    "ResponseClient",
    "Sender",
    "Session",
]
