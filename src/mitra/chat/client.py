"""Response client.

Turns user text into assistant text through the hosted model. All model
failures are recovered here and replaced with a localized apology, so
`get_reply` never raises an `Exception` to its caller.
"""

from typing import Any

from ..i18n import Language, text
from ..llm import DEFAULT_MODEL, ChatMessage, LLMProvider, create_llm_provider


def _truncate(value: str, limit: int) -> str:
    return value if len(value) <= limit else value[:limit] + "..."


class ResponseClient:
    """Wraps a single model call per user message.

    Example:
        async with ResponseClient.from_api_key(api_key) as client:
            reply = await client.get_reply("I feel anxious today", Language.ENGLISH)
    """

    def __init__(self, llm: LLMProvider) -> None:
        self._llm = llm
        self._debug_callback: Any | None = None

    @classmethod
    def from_api_key(cls, api_key: str, model: str = DEFAULT_MODEL) -> "ResponseClient":
        """Build a client backed by Gemini with an explicit API key."""
        return cls(create_llm_provider("gemini", api_key=api_key, model=model))

    @property
    def model_name(self) -> str:
        return getattr(self._llm, "model", "unknown")

    def set_debug_callback(self, callback: Any) -> None:
        """Set the debug callback.

        Args:
            callback: Callable(level: str, component: str, message: str)
        """
        self._debug_callback = callback

    def _debug(self, level: str, component: str, message: str) -> None:
        if self._debug_callback:
            self._debug_callback(level, component, message)

    def build_prompt(self, user_text: str, language: Language) -> str:
        """Embed the user's text, verbatim, in the language's instruction template."""
        return text(language, "reply_prompt", message=user_text)

    async def get_reply(self, user_text: str, language: Language) -> str:
        """Ask the model to respond to the user's text.

        Args:
            user_text: Raw text the user sent
            language: Language of the prompt template and of any fallback

        Returns:
            The model's reply, or the localized apology if the call failed
            or produced no text
        """
        prompt = self.build_prompt(user_text, language)
        self._debug("debug", "Client", f"Prompt ({len(prompt)} chars): {_truncate(prompt, 150)}")

        try:
            self._debug("info", "LLM", f"Calling {self.model_name}...")
            response = await self._llm.chat_completion(
                [ChatMessage(role="user", content=prompt)]
            )
        except Exception as e:
            self._debug("error", "LLM", f"Model call failed: {e}")
            return text(language, "reply_fallback")

        content = response.content or ""
        if not content.strip():
            self._debug("warning", "LLM", "Model returned an empty response")
            return text(language, "reply_fallback")

        tokens = response.usage.get("total_tokens") if response.usage else None
        self._debug(
            "info", "LLM",
            f"Response received ({len(content)} chars, {tokens if tokens is not None else '?'} tokens)"
        )
        return content

    async def close(self) -> None:
        await self._llm.close()

    async def __aenter__(self) -> "ResponseClient":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()
