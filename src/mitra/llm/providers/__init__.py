from .gemini import DEFAULT_MODEL, GeminiProvider

__all__ = ["DEFAULT_MODEL", "GeminiProvider"]
