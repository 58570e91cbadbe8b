"""Utilities module"""

from .schemas import (
    ChatMessage,
    ChatRequest,
    ConversationData,
    NVCData,
    ChatResponse,
)

__all__ = [
    "ChatMessage",
    "ChatRequest",
    "ConversationData",
    "NVCData",
    "ChatResponse",
]
