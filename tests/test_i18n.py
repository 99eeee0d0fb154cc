"""Unit tests for the localization table."""
import pytest
from hypothesis import given
from hypothesis import strategies as st

from mitra.i18n import (
    LANGUAGE_NAMES,
    STRINGS,
    Language,
    text,
    toggle_label,
    toggle_language,
)


class TestLanguage:
    """Tests for the Language enum."""

    def test_languages_exist(self):
        """Test that exactly the two supported tags are defined."""
        assert Language.ENGLISH == "en"
        assert Language.BENGALI == "bn"
        assert len(Language) == 2

    @given(st.text())
    def test_language_validation(self, tag: str):
        """Property test: Only supported tags are accepted."""
        if tag in ("en", "bn"):
            assert Language(tag) in Language
        else:
            with pytest.raises(ValueError):
                Language(tag)

    @given(st.sampled_from(list(Language)))
    def test_toggle_twice_is_identity(self, language: Language):
        """Property test: Toggling twice returns the original language."""
        assert toggle_language(toggle_language(language)) is language
        assert toggle_language(language) is not language


class TestStrings:
    """Tests for the string table."""

    def test_every_language_has_same_keys(self):
        """Test that no language is missing an entry."""
        english_keys = set(STRINGS[Language.ENGLISH])
        for language in Language:
            assert set(STRINGS[language]) == english_keys
            assert language in LANGUAGE_NAMES

    def test_fallback_strings(self):
        """Test the two apology strings in each language."""
        assert text(Language.ENGLISH, "reply_fallback") == (
            "I apologize, but I'm having trouble responding right now. "
            "How else can I support you?"
        )
        assert text(Language.ENGLISH, "controller_fallback") == (
            "Sorry, I couldn't process your request. Please try again."
        )
        assert text(Language.BENGALI, "reply_fallback").startswith("আমি দুঃখিত")
        assert text(Language.BENGALI, "controller_fallback").startswith("দুঃখিত")

    def test_welcome_formats_name(self):
        """Test that named fields are filled in."""
        assert text(Language.ENGLISH, "welcome_user", name="Alice") == "Welcome, Alice"
        assert "Alice" in text(Language.BENGALI, "welcome_user", name="Alice")

    def test_unknown_key_raises(self):
        """Test that unknown keys are not silently rendered."""
        with pytest.raises(KeyError):
            text(Language.ENGLISH, "no_such_key")

    def test_accepts_raw_tag(self):
        """Test that a plain tag string works as the language."""
        assert text("bn", "send_button") == "পাঠান"

    @given(st.text())
    def test_prompt_embeds_message_verbatim(self, message: str):
        """Property test: The user's text appears unchanged in the prompt."""
        for language in Language:
            assert message in text(language, "reply_prompt", message=message)

    def test_toggle_label_names_other_language(self):
        """Test that the toggle shows where it will switch to."""
        assert toggle_label(Language.ENGLISH) == "বাংলা"
        assert toggle_label(Language.BENGALI) == "English"
