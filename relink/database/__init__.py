"""Database module - DB 접근 및 복합 쿼리"""

from .database import Database

# Conversation Repository
from .conversation_repository import (
    build_conversation,
    save_conversation,
    get_conversations,
    get_recent_conversations,
    get_conversation_by_id,
)

# Check-in Repository
from .checkin_repository import (
    save_emotion_checkin,
    get_emotion_checkins,
    get_weekly_emotion_checkins,
    get_weekly_overview,
    group_by_day,
)

__all__ = [
    # Database class
    "Database",

    # Conversation Repository
    "build_conversation",
    "save_conversation",
    "get_conversations",
    "get_recent_conversations",
    "get_conversation_by_id",

    # Check-in Repository
    "save_emotion_checkin",
    "get_emotion_checkins",
    "get_weekly_emotion_checkins",
    "get_weekly_overview",
    "group_by_day",
]
