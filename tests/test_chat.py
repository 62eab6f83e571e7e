from __future__ import annotations

from agents.responses import GREETING, NO_DATA_REPLY
from logic.logic_chat import (
    add_user_message_action,
    assistant_reply_action,
    new_transcript,
    reset_chat_action,
    to_chatbot,
)
from storage import ReadingStore


def test_new_transcript_starts_with_greeting() -> None:
    transcript = new_transcript()
    assert len(transcript) == 1
    assert transcript[0].role == "assistant"
    assert transcript[0].content == GREETING


def test_to_chatbot_appends_time() -> None:
    messages = to_chatbot(new_transcript())
    assert messages[0]["role"] == "assistant"
    assert messages[0]["content"].startswith(GREETING + "\n\n*")


def test_blank_input_is_ignored() -> None:
    transcript = new_transcript()
    out, chatbot, box, status = add_user_message_action("   ", transcript)
    assert len(out) == 1
    assert box == "   "
    assert status == ""


def test_user_message_clears_input_and_shows_typing() -> None:
    out, chatbot, box, status = add_user_message_action("How are my steps?", new_transcript())
    assert out[-1].role == "user"
    assert box == ""
    assert status == "Assistant is typing..."
    assert len(chatbot) == 2


def test_assistant_replies_to_last_user_message(make_reading) -> None:
    store = ReadingStore([make_reading(steps=12000)])
    transcript, _, _, _ = add_user_message_action("steps", new_transcript())
    out, chatbot, status = assistant_reply_action(transcript, store, delay=0)
    assert out[-1].role == "assistant"
    assert out[-1].content.startswith("Great job! You've walked 12000 steps today")
    assert status == ""


def test_assistant_does_not_reply_twice(make_reading) -> None:
    transcript = new_transcript()
    out, _, _ = assistant_reply_action(transcript, ReadingStore([make_reading()]), delay=0)
    assert len(out) == 1


def test_reply_without_data() -> None:
    transcript, _, _, _ = add_user_message_action("How is my sleep?", new_transcript())
    out, _, _ = assistant_reply_action(transcript, None, delay=0)
    assert [m.role for m in out] == ["assistant", "user", "assistant"]
    assert out[-1].content == NO_DATA_REPLY


def test_reset_chat() -> None:
    transcript, chatbot, box = reset_chat_action()
    assert len(transcript) == 1
    assert box == ""
