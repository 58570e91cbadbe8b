"""Configuration module

이 모듈은 애플리케이션의 모든 설정 값을 중앙에서 관리합니다.
"""

from datetime import datetime, timezone, timedelta

from .business_config import (
    MIN_SPECIFIC_TEXT_LENGTH,
    MIN_CONCRETE_TEXT_LENGTH,
    MAX_OBSERVATION_TURNS,
    EMOTION_SUGGESTION_COUNT,
    NEED_SUGGESTION_COUNT,
    RESPONSE_DELAY_SECONDS,
    RECENT_CONVERSATION_COUNT,
    CHECKIN_WINDOW_DAYS,
)

# 한국 시간대 (KST = UTC+9)
KST = timezone(timedelta(hours=9))


def get_kst_now():
    """한국 시간 기준 현재 datetime 반환 (timezone-aware)"""
    return datetime.now(KST)


def now_millis() -> int:
    """현재 시각을 epoch 밀리초로 반환 (저장 데이터의 date 필드 형식)"""
    return int(get_kst_now().timestamp() * 1000)


__all__ = [
    "MIN_SPECIFIC_TEXT_LENGTH",
    "MIN_CONCRETE_TEXT_LENGTH",
    "MAX_OBSERVATION_TURNS",
    "EMOTION_SUGGESTION_COUNT",
    "NEED_SUGGESTION_COUNT",
    "RESPONSE_DELAY_SECONDS",
    "RECENT_CONVERSATION_COUNT",
    "CHECKIN_WINDOW_DAYS",
    "KST",
    "get_kst_now",
    "now_millis",
]
