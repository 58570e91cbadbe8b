"""상황 + 감정 기반 욕구 추천"""
from typing import List
from langchain_core.messages import SystemMessage, HumanMessage
from langsmith import traceable
import logging

from ...config.business_config import NEED_SUGGESTION_COUNT
from ...core.fallbacks import EMOTION_KEYWORDS, FALLBACK_NEEDS
from ...prompt.suggestion_prompts import NEED_SUGGESTION_SYSTEM_PROMPT, NEED_SUGGESTION_USER_PROMPT
from .parsing import parse_list_response, unique

logger = logging.getLogger(__name__)


def is_emotion(text: str) -> bool:
    return any(keyword in text for keyword in EMOTION_KEYWORDS)


@traceable(name="suggest_needs")
async def suggest_needs(situation: str, emotions: List[str], llm) -> List[str]:
    """충족되지 않은 욕구 추천

    Args:
        situation: 사용자가 설명한 상황 (전체 사용자 메시지)
        emotions: 선택한 감정 목록
        llm: LangChain LLM 인스턴스

    Returns:
        List[str]: 최대 6개 욕구 (감정 단어가 들어간 항목 제외, 실패 시 기본 욕구 목록)
    """
    try:
        response = await llm.ainvoke([
            SystemMessage(content=NEED_SUGGESTION_SYSTEM_PROMPT),
            HumanMessage(content=NEED_SUGGESTION_USER_PROMPT.format(situation=situation, emotions=",".join(emotions)))
        ])

        candidates = parse_list_response(response.content)[:NEED_SUGGESTION_COUNT]
        needs = [need for need in unique(candidates) if not is_emotion(need)]
        if needs:
            logger.info(f"[NeedSuggester] 욕구 추천 완료: {needs}")
            return needs[:NEED_SUGGESTION_COUNT]

        logger.warning(f"[NeedSuggester] 사용할 욕구 없음 (원본 {len(candidates)}개) → 기본 욕구 목록 사용")

    except Exception as e:
        logger.error(f"[NeedSuggester] 욕구 추천 실패: {e}")

    return list(FALLBACK_NEEDS)
