"""Interaction controller.

Orchestrates user actions (submit name, toggle language, send message)
against the session and the response client. Front ends call into this
class and re-render from `controller.session`; they never mutate the
session directly.
"""

from typing import Any

from ..i18n import Language, text
from .client import ResponseClient
from .session import Message, Sender, Session


class ChatController:
    """Owns one session and the client that answers it.

    Sends are serialized through a single slot: while a reply is
    outstanding, further sends are ignored. Every accepted send appends
    exactly one user message followed by exactly one assistant message.
    """

    def __init__(
        self,
        client: ResponseClient,
        session: Session | None = None,
        language: Language = Language.ENGLISH,
    ) -> None:
        self._client = client
        self._session = session or Session(language=language)
        self._busy = False
        self._debug_callback: Any | None = None
        self._change_callback: Any | None = None

    @property
    def session(self) -> Session:
        return self._session

    @property
    def client(self) -> ResponseClient:
        return self._client

    @property
    def gated(self) -> bool:
        """True until a name has been accepted."""
        return self._session.name_gate_open

    @property
    def busy(self) -> bool:
        """True while a reply is outstanding."""
        return self._busy

    def set_debug_callback(self, callback: Any) -> None:
        """Set the debug callback for detailed logging.

        Args:
            callback: Callable(level: str, component: str, message: str)
                      level: 'debug', 'info', 'warning', 'error'
                      component: Source component name
                      message: Log message

        The callback is propagated to the response client.
        """
        self._debug_callback = callback
        self._client.set_debug_callback(callback)

    def set_change_callback(self, callback: Any) -> None:
        """Set a zero-argument callable invoked after each visible state change.

        Front ends use it to re-render from the session. Input buffer
        edits do not trigger it; the input field is their source.
        """
        self._change_callback = callback

    def _debug(self, level: str, component: str, message: str) -> None:
        if self._debug_callback:
            self._debug_callback(level, component, message)

    def _notify(self) -> None:
        if self._change_callback:
            self._change_callback()

    def submit_name(self, name: str) -> bool:
        """Try to close the name gate. Returns True if it closed now."""
        accepted = self._session.submit_name(name)
        if accepted:
            self._debug("info", "Controller", "Name accepted, chat started")
            self._notify()
        return accepted

    def toggle_language(self) -> Language:
        language = self._session.toggle_language()
        self._debug("info", "Controller", f"Language switched to {language.value}")
        self._notify()
        return language

    def set_language(self, language: Language | str) -> None:
        self._session.set_language(language)
        self._notify()

    def set_input(self, value: str) -> None:
        self._session.set_input(value)

    async def send(self, message_text: str | None = None) -> Message | None:
        """Send a message and wait for the assistant's reply.

        Args:
            message_text: Text to send; defaults to the session's input buffer

        Returns:
            The appended assistant message, or None if the send was ignored
            (blank text, or another reply still outstanding)
        """
        raw = self._session.input_buffer if message_text is None else message_text
        if not raw.strip():
            return None
        if self._busy:
            self._debug("warning", "Controller", "Send ignored: a reply is still outstanding")
            return None

        self._busy = True
        try:
            self._session.append_message(Message(text=raw, sender=Sender.USER))
            self._session.clear_input()
            self._notify()

            # Every string for this send uses the language active right now
            language = self._session.language
            try:
                reply = await self._client.get_reply(raw, language)
            except Exception as e:
                self._debug("error", "Controller", f"Response client failed: {e}")
                reply = text(language, "controller_fallback")

            if not reply:
                reply = text(language, "controller_fallback")

            assistant = Message(text=reply, sender=Sender.ASSISTANT)
            self._session.append_message(assistant)
            return assistant
        finally:
            self._busy = False
            self._notify()

    async def close(self) -> None:
        await self._client.close()
