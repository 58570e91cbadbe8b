"""상황 + 욕구 기반 부탁 생성"""
from typing import List
from langchain_core.messages import SystemMessage, HumanMessage
from langsmith import traceable
import logging

from ...prompt.suggestion_prompts import REQUEST_SYSTEM_PROMPT, REQUEST_USER_PROMPT
from ..grammar.request_forms import normalize_request, fallback_request

logger = logging.getLogger(__name__)


@traceable(name="generate_request")
async def generate_request(needs: List[str], situation: str, llm) -> str:
    """상대방에게 전할 부탁 생성 ("~해줄" 형태)

    Args:
        needs: 선택한 욕구 목록
        situation: 사용자가 설명한 상황
        llm: LangChain LLM 인스턴스

    Returns:
        str: 정규화된 부탁 (실패 시 키워드 기반 기본 부탁)
    """
    try:
        response = await llm.ainvoke([
            SystemMessage(content=REQUEST_SYSTEM_PROMPT),
            HumanMessage(content=REQUEST_USER_PROMPT.format(situation=situation, needs=", ".join(needs)))
        ])

        request = normalize_request(response.content or "")
        if request:
            logger.info(f"[RequestGenerator] 부탁 생성 완료: {request}")
            return request

        logger.warning("[RequestGenerator] 빈 응답 → 기본 부탁 사용")

    except Exception as e:
        logger.error(f"[RequestGenerator] 부탁 생성 실패: {e}")

    return fallback_request(situation, needs)
