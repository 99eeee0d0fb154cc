"""Localization table.

Hides which languages exist and how user-facing text is worded.
Every string the UI shows and every prompt template sent to the model
is looked up here, so adding a language only touches this module.
"""

from enum import Enum


class Language(str, Enum):
    """Supported UI languages."""

    ENGLISH = "en"
    BENGALI = "bn"


# Native display names, used on the language toggle
LANGUAGE_NAMES = {
    Language.ENGLISH: "English",
    Language.BENGALI: "বাংলা",
}

STRINGS: dict[Language, dict[str, str]] = {
    Language.ENGLISH: {
        "app_title": "Mental Health Support Chat",
        "welcome_user": "Welcome, {name}",
        "input_placeholder": "Type your message...",
        "send_button": "Send",
        "name_prompt_title": "Welcome to Mental Health Support Chat",
        "name_prompt_description": "Please enter your name to begin chatting.",
        "name_placeholder": "Your name",
        "name_submit": "Start Chatting",
        "you_label": "You",
        "assistant_label": "Assistant",
        "reply_prompt": (
            "You are a compassionate mental health support assistant. "
            'Respond to the following message with empathy and support: "{message}"'
        ),
        "reply_fallback": (
            "I apologize, but I'm having trouble responding right now. "
            "How else can I support you?"
        ),
        "controller_fallback": "Sorry, I couldn't process your request. Please try again.",
    },
    Language.BENGALI: {
        "app_title": "মানসিক স্বাস্থ্য সহায়তা চ্যাট",
        "welcome_user": "স্বাগতম, {name}",
        "input_placeholder": "আপনার বার্তা টাইপ করুন...",
        "send_button": "পাঠান",
        "name_prompt_title": "মানসিক স্বাস্থ্য সহায়তা চ্যাটে স্বাগতম",
        "name_prompt_description": "চ্যাট শুরু করতে আপনার নাম লিখুন।",
        "name_placeholder": "আপনার নাম",
        "name_submit": "চ্যাট শুরু করুন",
        "you_label": "আপনি",
        "assistant_label": "সহকারী",
        "reply_prompt": (
            "আপনি একজন সহানুভূতিশীল মানসিক স্বাস্থ্য সহায়তা সহকারী। "
            'নিম্নলিখিত বার্তার প্রতি সহানুভূতি ও সমর্থন সহ উত্তর দিন: "{message}"'
        ),
        "reply_fallback": (
            "আমি দুঃখিত, কিন্তু আমি এখন উত্তর দিতে সমস্যা হচ্ছে। "
            "আমি আপনাকে কীভাবে সাহায্য করতে পারি?"
        ),
        "controller_fallback": (
            "দুঃখিত, আমি আপনার অনুরোধ প্রক্রিয়া করতে পারিনি। "
            "অনুগ্রহ করে আবার চেষ্টা করুন।"
        ),
    },
}


def text(language: Language, key: str, **fields: str) -> str:
    """Look up a localized string and fill in its named fields.

    Args:
        language: Language to render in
        key: String identifier (e.g. "send_button")
        **fields: Values for placeholders such as {name} or {message}

    Returns:
        The localized text

    Raises:
        KeyError: If the key is not defined
    """
    template = STRINGS[Language(language)][key]
    if fields:
        return template.format(**fields)
    return template


def toggle_language(language: Language) -> Language:
    """Return the other supported language."""
    if Language(language) is Language.ENGLISH:
        return Language.BENGALI
    return Language.ENGLISH


def toggle_label(language: Language) -> str:
    """Label for the language toggle: the name of the language it switches to."""
    return LANGUAGE_NAMES[toggle_language(language)]


__all__ = [
    "LANGUAGE_NAMES",
    "Language",
    "STRINGS",
    "text",
    "toggle_label",
    "toggle_language",
]
