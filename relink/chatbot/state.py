"""
LangGraph용 대화 상태 관리
"""

from typing import List, Optional, TypedDict
from enum import Enum

from ..utils.schemas import ChatMessage, ChatResponse


class Stage(str, Enum):
    """대화 단계"""
    OBSERVATION = "observation"  # 무슨 일이 있었는지
    FEELING = "feeling"          # 그때 느낀 감정
    NEED = "need"                # 나에게 중요한 것
    EMPATHY = "empathy"          # 욕구 공감 + 정리 안내
    RESULT = "result"            # NVC 메시지 완성


class ChatState(TypedDict):
    """요청 하나의 워크플로우 상태 (저장하지 않음)"""
    messages: List[ChatMessage]
    stage: str

    # 일반 응답 노드로 넘기는 값
    stage_prompt: str
    next_stage: str
    options: List[str]

    # 최종 응답
    response: Optional[ChatResponse]
