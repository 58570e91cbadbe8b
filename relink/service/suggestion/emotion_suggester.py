"""상황 기반 감정 추천"""
from typing import List
from langchain_core.messages import SystemMessage, HumanMessage
from langsmith import traceable
import logging

from ...config.business_config import EMOTION_SUGGESTION_COUNT
from ...core.fallbacks import EMOTION_VOCABULARY, FALLBACK_EMOTIONS
from ...prompt.suggestion_prompts import EMOTION_SUGGESTION_SYSTEM_PROMPT, EMOTION_SUGGESTION_USER_PROMPT
from .parsing import parse_list_response, unique

logger = logging.getLogger(__name__)


@traceable(name="suggest_emotions")
async def suggest_emotions(situation: str, llm) -> List[str]:
    """상황에서 느낄 수 있는 감정 추천

    Args:
        situation: 사용자가 설명한 상황
        llm: LangChain LLM 인스턴스

    Returns:
        List[str]: 최대 8개 감정 (실패하거나 비어 있으면 기본 감정 목록)
    """
    try:
        response = await llm.ainvoke([
            SystemMessage(content=EMOTION_SUGGESTION_SYSTEM_PROMPT.format(vocabulary=", ".join(EMOTION_VOCABULARY))),
            HumanMessage(content=EMOTION_SUGGESTION_USER_PROMPT.format(situation=situation))
        ])

        emotions = unique(parse_list_response(response.content))[:EMOTION_SUGGESTION_COUNT]
        if emotions:
            logger.info(f"[EmotionSuggester] 감정 추천 완료: {emotions}")
            return emotions

        logger.warning("[EmotionSuggester] 빈 응답 → 기본 감정 목록 사용")

    except Exception as e:
        logger.error(f"[EmotionSuggester] 감정 추천 실패: {e}")

    return list(FALLBACK_EMOTIONS)
