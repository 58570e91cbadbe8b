"""관찰 단계 입력의 구체성 판별"""
import logging
import re

from ...config.business_config import MIN_SPECIFIC_TEXT_LENGTH, MIN_CONCRETE_TEXT_LENGTH

logger = logging.getLogger(__name__)

# 막연한 표현 (하나라도 매칭되면 구체적이지 않음)
VAGUE_PATTERNS = [
    re.compile(p) for p in (
        r"^오늘.*힘들",
        r"^너무.*힘들",
        r"^정말.*힘들",
        r"힘들어요$",
        r"^힘든.*하루",
        r"^피곤",
        r"^지쳐",
        r"^우울",
        r"^화나",
        r"맨날 그래",
        r"또 그래",
        r"언제.*나아",
        r"대체 왜",
        r"^그냥",
        r"^별로",
        r"^뭔가",
        r"^그렇게",
        r"^그런",
    )
]

# 구체적 표현
CONCRETE_PATTERNS = [
    re.compile(p) for p in (
        r"\".*\"",                                          # 인용부호
        r"\d+번",
        r"\d+시간",
        r"\d+분",
        r"(말했|했|그랬|소리|지르|늦|무시|끼어들|자르|듣지|들어주지)",   # 동사
        r"(때문|해서|하면서|하고)",                          # 인과관계
        r"(보고서|문서|자료|메시지|전화|회의|약속|약속시간)",     # 대상
        r"(라고|라며|라고 했|라고 말)",                      # 인용 표현
    )
]


def is_specific_enough(text: str) -> bool:
    """상황 설명이 감정 단계로 넘어갈 만큼 구체적인지 판별

    Args:
        text: 사용자가 입력한 상황 설명

    Returns:
        bool: 구체적 표현이 있고 충분히 길면 True
    """
    if len(text) < MIN_SPECIFIC_TEXT_LENGTH:
        return False

    for pattern in VAGUE_PATTERNS:
        if pattern.search(text):
            logger.info(f"[Specificity] 막연한 표현: {pattern.pattern}")
            return False

    has_concrete = any(pattern.search(text) for pattern in CONCRETE_PATTERNS)
    return has_concrete and len(text) >= MIN_CONCRETE_TEXT_LENGTH
