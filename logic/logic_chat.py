import time
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional, Sequence

from agents.assistant import health_assistant
from agents.responses import GREETING
from health_config import ASSISTANT_DELAY
from logging_setup import get_logger
from storage import ReadingStore

logger = get_logger(__name__)


@dataclass(frozen=True)
class ChatMessage:
    role: str  # "user" or "assistant"
    content: str
    timestamp: datetime = field(default_factory=datetime.now)


def new_transcript() -> List[ChatMessage]:
    """A fresh session transcript, opened by the assistant's greeting."""
    return [ChatMessage(role="assistant", content=GREETING)]


def to_chatbot(transcript: Sequence[ChatMessage]) -> List[Dict[str, str]]:
    """Convert the transcript into Gradio's messages format."""
    return [
        {
            "role": m.role,
            "content": f"{m.content}\n\n*{m.timestamp.strftime('%H:%M')}*",
        }
        for m in transcript
    ]


def awaiting_reply(transcript: Sequence[ChatMessage]) -> bool:
    return bool(transcript) and transcript[-1].role == "user"


def add_user_message_action(user_input: str, transcript: List[ChatMessage]):
    """
    Gradio callback: append the user's message and clear the input box.

    Outputs: transcript, chatbot, input box, status.
    """
    transcript = list(transcript or new_transcript())
    if not user_input or not user_input.strip():
        return transcript, to_chatbot(transcript), user_input, ""

    transcript.append(ChatMessage(role="user", content=user_input))
    return transcript, to_chatbot(transcript), "", "Assistant is typing..."


def assistant_reply_action(
    transcript: List[ChatMessage],
    store: Optional[ReadingStore],
    delay: Optional[float] = None,
):
    """
    Gradio callback: after a short "thinking" pause, answer the last user message.

    Outputs: transcript, chatbot, status.
    """
    transcript = list(transcript or new_transcript())
    if not awaiting_reply(transcript):
        return transcript, to_chatbot(transcript), ""

    pause = ASSISTANT_DELAY if delay is None else delay
    if pause > 0:
        time.sleep(pause)

    readings = store.readings if store is not None else []
    reply = health_assistant.reply(transcript[-1].content, readings)
    transcript.append(ChatMessage(role="assistant", content=reply))
    logger.info("assistant_replied", messages=len(transcript))
    return transcript, to_chatbot(transcript), ""


def reset_chat_action():
    transcript = new_transcript()
    return transcript, to_chatbot(transcript), ""
