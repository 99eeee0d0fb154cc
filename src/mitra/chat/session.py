"""Session state for one running chat.

Hides how the message log, input buffer, display name, language and
name gate are stored. Every mutation is synchronous; the log only grows.
"""

from collections.abc import Sequence
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from ..i18n import Language, toggle_language


class Sender(str, Enum):
    """Who produced a message."""

    USER = "user"
    ASSISTANT = "assistant"


class Message(BaseModel):
    """A chat message. Immutable once created."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(min_length=1, description="Message text, never empty")
    sender: Sender = Field(description="Who produced the message")
    timestamp: datetime = Field(default_factory=datetime.now)


class Session:
    """In-memory state of a single chat.

    The message log is append-only: insertion order is display order and
    entries are never removed or replaced. The name gate starts open and
    closes for good once a non-empty name is submitted.
    """

    def __init__(self, language: Language = Language.ENGLISH) -> None:
        self._messages: list[Message] = []
        self._input_buffer = ""
        self._display_name = ""
        self._language = Language(language)
        self._name_gate_open = True

    @property
    def messages(self) -> Sequence[Message]:
        """Read-only view of the message log."""
        return tuple(self._messages)

    @property
    def input_buffer(self) -> str:
        return self._input_buffer

    @property
    def display_name(self) -> str:
        return self._display_name

    @property
    def language(self) -> Language:
        return self._language

    @property
    def name_gate_open(self) -> bool:
        return self._name_gate_open

    def append_message(self, message: Message) -> None:
        """Append a message to the end of the log."""
        self._messages.append(message)

    def set_input(self, text: str) -> None:
        self._input_buffer = text

    def clear_input(self) -> None:
        self._input_buffer = ""

    def set_language(self, language: Language | str) -> None:
        """Switch to a supported language.

        Raises:
            ValueError: If the value is not a supported language tag
        """
        self._language = Language(language)

    def toggle_language(self) -> Language:
        """Switch to the other language and return it."""
        self._language = toggle_language(self._language)
        return self._language

    def submit_name(self, name: str) -> bool:
        """Record the user's name and close the gate.

        Blank names are ignored, as are submissions after the gate closed.

        Returns:
            True if this call closed the gate
        """
        if not self._name_gate_open:
            return False
        cleaned = name.strip()
        if not cleaned:
            return False
        self._display_name = cleaned
        self._name_gate_open = False
        return True

    def last_reply(self) -> str | None:
        """Text of the most recent assistant message, if any."""
        for message in reversed(self._messages):
            if message.sender is Sender.ASSISTANT:
                return message.text
        return None
