"""Tests for the Textual TUI, driven through App.run_test pilots."""
import asyncio

import pytest
from textual.widgets import Button, Input, Static

from mitra.chat import ChatController, ResponseClient, Sender
from mitra.i18n import Language, text
from mitra.ui import ChatHistoryWidget, DebugPanel, MitraApp, NamePromptScreen

from .conftest import FakeProvider


def _make_app(provider=None, log_level=None):
    controller = ChatController(ResponseClient(provider or FakeProvider()))
    return MitraApp(controller, log_level=log_level)


async def _enter_name(app, pilot, name="Alice"):
    app.screen.query_one("#name-input", Input).value = name
    await pilot.press("enter")
    await pilot.pause()


async def _send_text(app, pilot, value):
    app.screen.query_one("#chat-input", Input).value = value
    await pilot.press("enter")
    await pilot.pause()
    await app.workers.wait_for_complete()
    await pilot.pause()


class TestNamePrompt:
    """Tests for the blocking name modal."""

    @pytest.mark.asyncio
    async def test_modal_shown_on_start(self):
        app = _make_app()
        async with app.run_test() as pilot:
            await pilot.pause()
            assert isinstance(app.screen, NamePromptScreen)
            assert app.controller.gated is True

    @pytest.mark.asyncio
    async def test_blank_name_keeps_modal(self):
        app = _make_app()
        async with app.run_test() as pilot:
            await pilot.pause()
            await _enter_name(app, pilot, "   ")

            assert isinstance(app.screen, NamePromptScreen)
            assert app.controller.gated is True

    @pytest.mark.asyncio
    async def test_name_closes_modal_and_welcomes(self):
        app = _make_app()
        async with app.run_test() as pilot:
            await pilot.pause()
            await _enter_name(app, pilot, "Alice")

            assert not isinstance(app.screen, NamePromptScreen)
            assert app.controller.gated is False
            welcome = app.screen.query_one("#welcome-line", Static)
            assert str(welcome.render()) == "Welcome, Alice"

    @pytest.mark.asyncio
    async def test_toggle_relocalizes_open_modal(self):
        app = _make_app()
        async with app.run_test() as pilot:
            await pilot.pause()
            await pilot.press("ctrl+t")
            await pilot.pause()

            assert app.controller.session.language is Language.BENGALI
            submit = app.screen.query_one("#name-submit", Button)
            assert str(submit.label) == text(Language.BENGALI, "name_submit")


class TestConversation:
    """Tests for sending messages through the UI."""

    @pytest.mark.asyncio
    async def test_send_renders_both_messages(self):
        provider = FakeProvider(reply="You are not alone.")
        app = _make_app(provider)
        async with app.run_test() as pilot:
            await pilot.pause()
            await _enter_name(app, pilot)

            await _send_text(app, pilot, "I feel anxious today")

            messages = app.controller.session.messages
            assert [m.sender for m in messages] == [Sender.USER, Sender.ASSISTANT]
            assert messages[1].text == "You are not alone."
            assert app.screen.query_one("#chat-history", ChatHistoryWidget).rendered_count == 2
            assert app.screen.query_one("#chat-input", Input).value == ""

    @pytest.mark.asyncio
    async def test_blank_send_does_nothing(self):
        provider = FakeProvider()
        app = _make_app(provider)
        async with app.run_test() as pilot:
            await pilot.pause()
            await _enter_name(app, pilot)

            app.screen.query_one("#chat-input", Input).value = "   "
            await pilot.press("enter")
            await app.workers.wait_for_complete()
            await pilot.pause()

            assert app.controller.session.messages == ()
            assert provider.requests == []

    @pytest.mark.asyncio
    async def test_language_button_switches_labels(self):
        app = _make_app()
        async with app.run_test() as pilot:
            await pilot.pause()
            await _enter_name(app, pilot)

            await pilot.click("#language-btn")
            await pilot.pause()

            assert app.controller.session.language is Language.BENGALI
            send = app.screen.query_one("#send-btn", Button)
            toggle = app.screen.query_one("#language-btn", Button)
            assert str(send.label) == "পাঠান"
            assert str(toggle.label) == "English"

    @pytest.mark.asyncio
    async def test_send_disabled_while_reply_outstanding(self):
        gate = asyncio.Event()
        app = _make_app(FakeProvider(gate=gate))
        async with app.run_test() as pilot:
            await pilot.pause()
            await _enter_name(app, pilot)

            app.screen.query_one("#chat-input", Input).value = "hello"
            await pilot.press("enter")
            await pilot.pause()

            send = app.screen.query_one("#send-btn", Button)
            assert app.controller.busy is True
            assert send.disabled is True

            gate.set()
            await app.workers.wait_for_complete()
            await pilot.pause()

            assert app.controller.busy is False
            assert send.disabled is False
            assert len(app.controller.session.messages) == 2

    @pytest.mark.asyncio
    async def test_text_typed_during_reply_is_kept(self):
        """Test that a reply landing does not wipe what the user is typing."""
        gate = asyncio.Event()
        app = _make_app(FakeProvider(gate=gate))
        async with app.run_test() as pilot:
            await pilot.pause()
            await _enter_name(app, pilot)

            app.screen.query_one("#chat-input", Input).value = "first thought"
            await pilot.press("enter")
            await pilot.pause()

            field = app.screen.query_one("#chat-input", Input)
            field.value = "next thought"
            gate.set()
            await app.workers.wait_for_complete()
            await pilot.pause()

            assert field.value == "next thought"
            assert app.controller.session.input_buffer == "next thought"
            assert len(app.controller.session.messages) == 2

    @pytest.mark.asyncio
    async def test_history_scrolls_to_newest(self):
        reply = "\n".join(f"line {i}" for i in range(10))
        app = _make_app(FakeProvider(reply=reply))
        async with app.run_test(size=(80, 24)) as pilot:
            await pilot.pause()
            await _enter_name(app, pilot)

            for i in range(6):
                await _send_text(app, pilot, f"message {i}")
            await pilot.pause()

            history = app.screen.query_one("#chat-history", ChatHistoryWidget)
            assert history.rendered_count == 12
            assert history.max_scroll_y > 0
            assert history.scroll_y == history.max_scroll_y


class TestBindings:
    """Tests for the app key bindings."""

    @pytest.mark.asyncio
    async def test_ctrl_l_toggles_log_panel(self):
        app = _make_app()
        async with app.run_test() as pilot:
            await pilot.pause()
            await _enter_name(app, pilot)
            panel = app.screen.query_one("#debug-panel", DebugPanel)

            await pilot.press("ctrl+l")
            await pilot.pause()
            assert panel.display is True

            await pilot.press("ctrl+l")
            await pilot.pause()
            assert panel.display is False

    @pytest.mark.asyncio
    async def test_ctrl_r_copies_last_reply(self):
        app = _make_app(FakeProvider(reply="Take a slow breath."))
        copied = []
        async with app.run_test() as pilot:
            app.copy_to_clipboard = copied.append
            await pilot.pause()
            await _enter_name(app, pilot)

            await pilot.press("ctrl+r")
            await pilot.pause()
            assert copied == []

            await _send_text(app, pilot, "hello")
            await pilot.press("ctrl+r")
            await pilot.pause()
            assert copied == ["Take a slow breath."]


class TestLogPanel:
    """Tests for the log panel."""

    @pytest.mark.asyncio
    async def test_hidden_by_default(self):
        app = _make_app()
        async with app.run_test() as pilot:
            await pilot.pause()
            panel = app.screen_stack[0].query_one("#debug-panel", DebugPanel)
            assert panel.display is False

    @pytest.mark.asyncio
    async def test_shown_with_log_level(self):
        app = _make_app(log_level="warning")
        async with app.run_test() as pilot:
            await pilot.pause()
            panel = app.screen_stack[0].query_one("#debug-panel", DebugPanel)
            assert panel.display is True
            assert panel.border_subtitle == "Level: WARNING"
