from .base import LLMProvider
from .factory import create_llm_provider
from .models import ChatMessage, LLMResponse
from .providers import DEFAULT_MODEL, GeminiProvider

__all__ = [
    "DEFAULT_MODEL",
    "LLMProvider",
    "create_llm_provider",
    "ChatMessage",
    "LLMResponse",
    "GeminiProvider",
]
