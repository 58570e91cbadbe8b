"""부탁 문장 정규화

LLM이 만든 부탁은 "~해줄" 형태로 맞춘 뒤 최종 메시지에서 "~해주세요"로 바꾼다.
"""
from typing import List, Optional, Tuple
import logging
import re

logger = logging.getLogger(__name__)

DEFAULT_REQUEST = "내 마음을 이해해줄"

CARD_REQUEST = "평소 목소리로 카드를 다시 찍어달라고 얘기해줄"
VOICE_REQUEST = "평소 목소리로 말해달라고 얘기해줄"
LISTEN_REQUEST = "내 말을 끝까지 들어줄"
SAFETY_REQUEST = "내 주변 환경을 안전하고 편안하게 지켜줄"

# (검사 대상, 키워드 그룹들 - 그룹마다 하나 이상 포함, 부탁)
FALLBACK_REQUEST_RULES: List[Tuple[str, Tuple[Tuple[str, ...], ...], str]] = [
    ("situation", (("소리", "지르"), ("카드", "찍")), CARD_REQUEST),
    ("situation", (("소리", "지르"),), VOICE_REQUEST),
    ("situation", (("카드",), ("찍",)), CARD_REQUEST),
    ("situation", (("말", "듣지"),), LISTEN_REQUEST),
    ("needs", (("안전", "편안"),), SAFETY_REQUEST),
]

# 상대를 3인칭으로 부르는 간접 표현
INDIRECT_ADDRESS_PATTERNS = [
    r"^저에게는?\s*",
    r"^상대방에게\s*",
    r"^상대방이\s*",
    r"아저씨에게\s*",
    r"에게\s*",
]

QUOTE_PATTERN = re.compile(r"^[\"'“”‘’]+|[\"'“”‘’]+$")

# (어미, "~줄" 형태) - 위에서부터 먼저 매칭
REQUEST_ENDING_RULES = [
    ("해줄래요?", "해줄"),
    ("해줄래?", "해줄"),
    ("줄래요?", "줄"),
    ("줄래?", "줄"),
    ("해주세요", "해줄"),
    ("주세요", "줄"),
    ("할", "해줄"),
]

# (어미, 존댓말 부탁)
POLITE_REQUEST_RULES = [
    ("할 수 있을까요?", "해주세요"),
    ("줄래요?", "주세요"),
    ("줄래?", "주세요"),
    ("줄", "주세요"),
    ("할", "해주세요"),
]


def fallback_request(situation: str, needs: List[str]) -> str:
    """키워드 기반 기본 부탁"""
    sources = {"situation": situation or "", "needs": " ".join(needs or [])}
    for source, groups, request in FALLBACK_REQUEST_RULES:
        text = sources[source]
        if all(any(k in text for k in group) for group in groups):
            return request
    return DEFAULT_REQUEST


def remove_indirect_address(request: str) -> str:
    for pattern in INDIRECT_ADDRESS_PATTERNS:
        request = re.sub(pattern, "", request)
    return request.strip()


def normalize_request(raw: str) -> Optional[str]:
    """LLM 부탁을 "~해줄" 형태로 정규화 (남는 내용이 없으면 None)

    Examples:
        "물건을 던지지 말아줄래?" → "물건을 던지지 말아줄"
        "상대방에게 천천히 말해주세요" → "천천히 말해줄"
    """
    request = QUOTE_PATTERN.sub("", raw.strip()).strip()
    request = re.sub(r"(할 )?수 있을까요\?", "", request).strip()

    # "~할 때, ~해줄" 설명문이면 마지막 절만
    if "때" in request and "," in request:
        request = request.split(",")[-1].strip()

    request = remove_indirect_address(request).rstrip(".").strip()
    if not request:
        return None

    if not request.endswith("줄"):
        for ending, replacement in REQUEST_ENDING_RULES:
            if request.endswith(ending):
                request = request[: -len(ending)] + replacement
                break
        else:
            request = f"{request}해줄"

    return request


def to_polite_request(request: str) -> str:
    """부탁을 존댓말 문장으로 변환 (들어줄 → 들어주세요)"""
    request = remove_indirect_address(request.strip().rstrip("."))
    request = request.replace("똑바로", "다시")

    for ending, replacement in POLITE_REQUEST_RULES:
        if request.endswith(ending):
            return request[: -len(ending)] + replacement

    if request.endswith(("요", "?")):
        return request
    return f"{request}해주세요"
