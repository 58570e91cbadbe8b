"""대화 기록에서 상황/감정/욕구 추출"""
from typing import List, Optional
import json
import logging

from ...core.emotion_taxonomy import is_emotion_label
from ...core.fallbacks import SHORT_REPLIES
from ...prompt.stage_prompts import CONTINUE_BUTTON_TEXT, EMPATHY_OPTIONS
from ...utils.schemas import ChatMessage, ConversationData
from ..grammar.need_forms import DEFAULT_NEED

logger = logging.getLogger(__name__)

# 이보다 짧은 상황은 관찰 단계 메시지를 모두 합쳐서 사용
MIN_SITUATION_LENGTH = 10

# 공감 단계 버튼 응답 (상황/욕구로 쓰지 않음)
CONTINUE_REPLIES = {CONTINUE_BUTTON_TEXT, *EMPATHY_OPTIONS}


def _load_json_list(content: str) -> Optional[list]:
    try:
        parsed = json.loads(content)
    except ValueError:
        return None
    return parsed if isinstance(parsed, list) else None


def is_selection_message(content: str) -> bool:
    """감정 선택 메시지인지 여부

    JSON 배열이거나, 쉼표로 나눈 모든 항목이 감정 라벨일 때만 선택으로 본다.
    ("서운함" 하나만 고른 경우 포함, "늦어서, 서운함이 컸어요" 같은 문장은 제외)
    """
    if _load_json_list(content) is not None:
        return True
    parts = [p.strip() for p in content.split(",") if p.strip()]
    return bool(parts) and all(is_emotion_label(p) for p in parts)


def is_continue_reply(content: str) -> bool:
    return content.strip() in CONTINUE_REPLIES


def parse_selection(content: str) -> List[str]:
    """선택 메시지를 목록으로 변환 (JSON 배열 → 쉼표 구분 → 원문 하나)"""
    items = _load_json_list(content)
    if items is not None:
        return [str(item).strip() for item in items if str(item).strip()]
    parts = [p.strip() for p in content.split(",") if p.strip()]
    return parts or ([content.strip()] if content.strip() else [])


def user_contents(messages: List[ChatMessage]) -> List[str]:
    return [m.content for m in messages if m.role == "user"]


def extract_situation(user_messages: List[str]) -> str:
    """첫 선택 메시지 이전의 관찰 단계 입력 중 가장 구체적인 상황"""
    observations = []
    for content in user_messages:
        if is_selection_message(content):
            break
        trimmed = content.strip()
        if len(trimmed) > 3 and trimmed not in SHORT_REPLIES and not is_continue_reply(trimmed):
            observations.append(content)

    situation = ""
    if observations:
        situation = max(observations, key=len)

    # 두 번째 입력이 첫 입력 이상으로 길면 보통 더 구체적
    if len(observations) >= 2 and len(observations[1]) >= len(observations[0]):
        situation = observations[1]

    if len(situation) < MIN_SITUATION_LENGTH:
        joined = " ".join(observations)
        if len(joined) > len(situation):
            situation = joined

    return situation


def extract_emotions(user_messages: List[str]) -> List[str]:
    for content in user_messages:
        if is_selection_message(content):
            return parse_selection(content)
    return []


def extract_needs(user_messages: List[str]) -> List[str]:
    """감정 선택 다음에 온 욕구 선택 (버튼 응답은 건너뜀, 없으면 기본 욕구)"""
    start = next((i + 1 for i, content in enumerate(user_messages) if is_selection_message(content)), None)
    candidates = user_messages[start:] if start is not None else user_messages[-1:]

    for content in candidates:
        if is_continue_reply(content):
            continue
        needs = parse_selection(content)
        if needs:
            return needs
    return [DEFAULT_NEED]


def extract_conversation_data(messages: List[ChatMessage], include_needs: bool = False) -> ConversationData:
    """대화 기록에서 변환에 필요한 데이터 추출

    Args:
        messages: 정규화된 대화 메시지
        include_needs: True면 감정 선택 다음 메시지에서 욕구도 추출

    Returns:
        ConversationData: 상황, 감정, (선택 시) 욕구
    """
    user_messages = user_contents(messages)
    data = ConversationData(
        situation=extract_situation(user_messages),
        emotions=extract_emotions(user_messages),
    )
    if include_needs:
        data.needs = extract_needs(user_messages)

    logger.info(
        f"[Extractor] 상황 {len(data.situation)}자, "
        f"감정 {data.emotions}, 욕구 {data.needs}"
    )
    return data
