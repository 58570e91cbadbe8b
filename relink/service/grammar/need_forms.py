"""욕구 문장 활용

욕구 선택지는 "존중받고 싶었어요", "안전하길 바랐어요" 처럼 1인칭 과거형 문장이다.
- 명사구: "존중받는 것" (공감 문장 "~이 중요하셨군요")
- 연결형: "존중받고 싶고" / 현재형: "존중받고 싶어요" (표시용)
- 최종 메시지용 욕구 문장: 키워드 규칙 → 없으면 1인칭 현재형
"""
from typing import List, Optional, Tuple
import logging
import re

from .hangul import decompose, replace_jong, josa, JONG_NONE, JONG_RIEUL

logger = logging.getLogger(__name__)

DEFAULT_NEED = "존중받고 싶었어요"

# 욕구 문장 끝 (어간을 남기고 자름)
NEED_ENDING_PATTERN = re.compile(r"^(?P<stem>.+?)\s*(?P<ending>고 싶었어요|고 싶어요|길 바랐어요|길 바라요)$")

# (어미, 연결형, 현재형)
NEED_ENDING_FORMS = {
    "고 싶었어요": ("고 싶고", "고 싶어요"),
    "고 싶어요": ("고 싶고", "고 싶어요"),
    "길 바랐어요": ("길 바랐고", "길 바라요"),
    "길 바라요": ("길 바라고", "길 바라요"),
}

# (모두 포함해야 하는 키워드, 포함하면 안 되는 키워드, 문장)
SINGLE_NEED_RULES: List[Tuple[Tuple[str, ...], Tuple[str, ...], str]] = [
    (("안전",), (), "제 주변 환경이 안전했으면 좋겠어요"),
    (("편안",), (), "제 주변 환경이 편안했으면 좋겠어요"),
    (("존중", "배려"), (), "저는 존중받고 배려받고 싶어요"),
    (("존중", "이해", "의견"), (), "제 의견이 존중받고 이해받고 싶어요"),
    (("존중", "이해"), (), "저는 존중받고 이해받고 싶어요"),
    (("의견",), (), "제 의견이 존중받았으면 좋겠어요"),
    (("존중",), (), "저는 존중받고 싶어요"),
    (("이해",), (), "저는 이해받고 싶어요"),
    (("배려",), (), "저는 배려받고 싶어요"),
]

PAIR_NEED_RULES: List[Tuple[Tuple[str, ...], Tuple[str, ...], str]] = [
    (("존중", "배려"), (), "저는 존중받고 배려받고 싶어요"),
    (("존중", "이해", "의견"), (), "제 의견이 존중받고 이해받고 싶어요"),
    (("존중", "이해"), (), "저는 존중받고 이해받고 싶어요"),
]

MANY_NEED_RULES: List[Tuple[Tuple[str, ...], Tuple[str, ...], str]] = [
    (("안전",), (), "제 주변 환경이 안전했으면 좋겠어요"),
    (("편안",), (), "제 주변 환경이 편안했으면 좋겠어요"),
]


def _split_need(need: str) -> Optional[Tuple[str, str]]:
    match = NEED_ENDING_PATTERN.match(need.strip().rstrip("."))
    if not match:
        return None
    return match.group("stem"), match.group("ending")


def _adnominal(stem: str) -> str:
    """현재 관형형 (받 → 받는, 만들 → 만드는)"""
    last = decompose(stem[-1])
    if last is not None and last[2] == JONG_RIEUL:
        return f"{stem[:-1]}{replace_jong(stem[-1], JONG_NONE)}는"
    return f"{stem}는"


def need_to_noun_phrase(need: str) -> str:
    """욕구 문장을 명사구로 변환 (존중받고 싶었어요 → 존중받는 것)"""
    parts = _split_need(need)
    if parts is None:
        return need.strip()
    stem, ending = parts
    if ending.startswith("길"):
        # 안전하길 바랐어요 → 안전한 것
        if stem.endswith("하"):
            return f"{stem[:-1]}한 것"
    return f"{_adnominal(stem)} 것"


def need_to_wish(need: str, last: bool = True) -> str:
    """욕구 문장을 표시용으로 변환 (last=False면 연결형 "~고 싶고")"""
    parts = _split_need(need)
    if parts is None:
        return need.strip()
    stem, ending = parts
    connective, present = NEED_ENDING_FORMS[ending]
    return f"{stem}{present if last else connective}"


def describe_needs(needs: List[str]) -> str:
    """선택한 욕구를 한 문장으로 연결

    한 개면 선택한 문장 그대로, 여러 개면 "~고 싶고 ~고 싶어요" 형태.
    """
    needs = [n.strip() for n in needs if n and n.strip()]
    if not needs:
        return DEFAULT_NEED
    if len(needs) == 1:
        return needs[0]
    return " ".join(need_to_wish(n, last=(i == len(needs) - 1)) for i, n in enumerate(needs))


def join_noun_phrases(needs: List[str]) -> str:
    """명사구 나열 ("A과 B", "A, B, 그리고 C")"""
    phrases = [need_to_noun_phrase(n) for n in needs if n and n.strip()] or [need_to_noun_phrase(DEFAULT_NEED)]
    if len(phrases) == 1:
        return phrases[0]
    if len(phrases) == 2:
        return f"{josa(phrases[0], '과/와')} {phrases[1]}"
    return f"{', '.join(phrases[:-1])}, 그리고 {phrases[-1]}"


def empathy_sentence(needs: List[str]) -> str:
    """공감 문장 (존중받는 것과 이해받는 것이 중요하셨군요.)"""
    return f"{josa(join_noun_phrases(needs), '이/가')} 중요하셨군요."


def _first_person(sentence: str) -> str:
    if sentence.startswith("내가 "):
        return "제가 " + sentence[len("내가 "):]
    if sentence.startswith("내 "):
        return "제 " + sentence[len("내 "):]
    if sentence.startswith(("저", "제 ", "제가")):
        return sentence
    return f"저는 {sentence}"


def need_sentence(needs: List[str]) -> str:
    """최종 메시지 둘째 줄에 들어갈 욕구 문장 (끝 마침표 없음)

    Examples:
        ["존중받고 싶었어요"] → "저는 존중받고 싶어요"
        ["안전하길 바랐어요"] → "제 주변 환경이 안전했으면 좋겠어요"
    """
    needs = [n.strip() for n in needs if n and n.strip()] or [DEFAULT_NEED]
    text = " ".join(needs)

    if len(needs) == 1:
        rules = SINGLE_NEED_RULES
    elif len(needs) == 2:
        rules = PAIR_NEED_RULES
    else:
        rules = MANY_NEED_RULES

    for required, excluded, sentence in rules:
        if all(k in text for k in required) and not any(k in text for k in excluded):
            return sentence

    wishes = " ".join(need_to_wish(n, last=(i == len(needs) - 1)) for i, n in enumerate(needs))
    return _first_person(wishes.rstrip("."))
