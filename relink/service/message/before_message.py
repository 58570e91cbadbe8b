"""변환 전 메시지 (상대방에게 하던 비난조의 말)"""
from typing import List

from ...core.fallbacks import BEFORE_MESSAGE_RULES
from ..grammar.emotion_forms import describe_emotions


def generate_before_message(situation: str, emotions: List[str]) -> str:
    """상황 키워드로 변환 전 메시지 선택 (없으면 상황 + 반말 감정)"""
    for keywords, message in BEFORE_MESSAGE_RULES:
        if any(keyword in situation for keyword in keywords):
            return f'"{message}"'
    return f'"{situation}... 정말 {describe_emotions(emotions, polite=False)}!"'
