"""
Simulated chat assistant for the public hotel page
No model is called; every question gets the configured canned reply
"""
from typing import List
from hotelpms.config import settings
from hotelpms.models.schemas import ChatMessage


def build_reply(message: str) -> str:
    return settings.CHAT_REPLY_TEMPLATE.format(message=message)


def chat(message: str, history: List[ChatMessage]) -> dict:
    """Append the question and the canned answer to the conversation"""
    message = message.strip()
    if not message:
        raise ValueError("Message cannot be empty")

    reply = ChatMessage(role="assistant", content=build_reply(message))
    return {
        'reply': reply,
        'history': list(history) + [ChatMessage(role="user", content=message), reply],
    }
