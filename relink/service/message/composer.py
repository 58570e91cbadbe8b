"""NVC 메시지 조립 (관찰 - 감정 - 욕구 - 부탁)

DB 접근 없음 - 대화에서 추출한 데이터를 받아 LLM 호출과 문장 조립만 수행
"""
from typing import List
from langchain_core.messages import SystemMessage, HumanMessage
from langsmith import traceable
import logging

from ...prompt.nvc_message_prompt import NVC_MESSAGE_SYSTEM_PROMPT, NVC_MESSAGE_USER_PROMPT
from ...utils.schemas import ConversationData, NVCData
from ..grammar.emotion_forms import describe_emotions
from ..grammar.need_forms import describe_needs, need_sentence
from ..grammar.request_forms import to_polite_request
from ..grammar.repair import repair_nvc_message, to_when_clause
from ..suggestion.request_generator import generate_request

logger = logging.getLogger(__name__)

DEFAULT_EMOTION_TEXT = "힘들었어요"

MISSING_SITUATION = "상황 정보 없음"
MISSING_EMOTIONS = "감정 정보 없음"
MISSING_NEEDS = "욕구 정보 없음"
MISSING_REQUEST = "부탁 정보 없음"
MISSING_SITUATION_MESSAGE = "상황 정보가 부족합니다. 다시 시작해주세요."


def emotions_display(emotions: List[str]) -> str:
    return ", ".join(emotions) if emotions else DEFAULT_EMOTION_TEXT


def compose_nvc_message(situation: str, emotions: List[str], needs: List[str], request: str) -> str:
    """템플릿으로 NVC 메시지 조립

    Returns:
        str: "<상황>을 때, <감정>했어요.\\n<욕구 문장>.\\n다음부터는 <부탁>"
    """
    return (
        f"{to_when_clause(situation)}, {describe_emotions(emotions)}.\n"
        f"{need_sentence(needs)}.\n"
        f"다음부터는 {to_polite_request(request)}"
    )


@traceable(name="generate_nvc_data")
async def generate_nvc_data(data: ConversationData, llm) -> NVCData:
    """대화 데이터로 구조화된 NVC 변환 결과 생성

    Args:
        data: 추출된 상황/감정/욕구
        llm: LangChain LLM 인스턴스 (부탁 생성 + 최종 메시지 작성)

    Returns:
        NVCData: 표시용 항목과 완성된 메시지
    """
    situation = data.situation.strip()
    emotions = data.emotions
    needs = data.needs

    emotion_text = emotions_display(emotions)
    need_text = describe_needs(needs)
    request = await generate_request(needs, situation, llm)

    if not situation or situation == MISSING_SITUATION:
        logger.error(f"[Composer] 상황이 비어 있음: emotions={emotions}, needs={needs}")
        return NVCData(
            observation=MISSING_SITUATION,
            emotions=emotion_text or MISSING_EMOTIONS,
            needs=need_text or MISSING_NEEDS,
            request=request or MISSING_REQUEST,
            fullMessage=MISSING_SITUATION_MESSAGE,
        )

    # 1. LLM 메시지 + 문법 보정
    try:
        response = await llm.ainvoke([
            SystemMessage(content=NVC_MESSAGE_SYSTEM_PROMPT),
            HumanMessage(content=NVC_MESSAGE_USER_PROMPT.format(
                situation=situation,
                emotions=", ".join(emotions),
                emotion_example=describe_emotions(emotions),
                needs=", ".join(needs),
                need_example=need_sentence(needs),
                request=request,
            ))
        ])

        generated = (response.content or "").strip()
        if generated:
            full_message = repair_nvc_message(generated, situation)
            logger.info("[Composer] LLM 메시지 생성 완료")
            return NVCData(
                observation=situation,
                emotions=emotion_text,
                needs=need_text,
                request=request or MISSING_REQUEST,
                fullMessage=full_message,
            )

        logger.warning("[Composer] 빈 응답 → 템플릿 메시지 사용")

    except Exception as e:
        logger.error(f"[Composer] 메시지 생성 실패: {e}")

    # 2. 템플릿 메시지
    polite_request = to_polite_request(request)
    return NVCData(
        observation=situation,
        emotions=emotion_text,
        needs=need_text,
        request=polite_request or MISSING_REQUEST,
        fullMessage=compose_nvc_message(situation, emotions, needs, request),
    )
