"""LLM이 만든 NVC 메시지 문법 보정

규칙 표는 위에서부터 순서대로, 더 이상 바뀌지 않을 때까지 적용한다.
"""
from typing import List, Tuple
import logging
import re

from .hangul import decompose, josa, replace_jong, JONG_BIEUP, JONG_RIEUL, JONG_SSANG_SIOT

logger = logging.getLogger(__name__)

MAX_REPAIR_PASSES = 5

# 감정 활용 오류 (분하했어요 → 분했어요, 힘들했어요 → 힘들었어요)
EMOTION_REPAIR_RULES: List[Tuple[str, str]] = [
    (r"(분|억울|답답|서운|속상|불안|피곤|난처|당황|초조|섭섭)하(했|하고)", r"\1\2"),
    (r"힘(?:든|들)하고", "힘들고"),
    (r"힘(?:든|들)했", "힘들었"),
    (r"힘들하", "힘들"),
]

# 욕구 문장 오류 (주어 반복, "싶어요, ~싶어요" 나열)
NEED_REPAIR_RULES: List[Tuple[str, str]] = [
    (r"(내가|저는|제가)( [^\n]*?) \1 ", r"\1\2 "),
    (r"([^,.\n]+?)싶어요, ([^,.\n]+?싶어요)", r"\1싶고 \2"),
    (r"싶었고", "싶고"),
]

# 부탁 어미 (해줄래? → 해주세요)
REQUEST_REPAIR_RULES: List[Tuple[str, str]] = [
    (r"해줄래요\?", "해주세요"),
    (r"해줄래\?", "해주세요"),
    (r"해줄(?=[\s.,]|$)", "해주세요"),
]

REQUEST_LINE_MARKERS = ("다음부터는", "다음에는")

SITUATION_MARKERS = ("때", "서", "했을")


def apply_rules(text: str, rules: List[Tuple[str, str]]) -> str:
    for pattern, replacement in rules:
        for _ in range(MAX_REPAIR_PASSES):
            text, count = re.subn(pattern, replacement, text, flags=re.MULTILINE)
            if count == 0:
                break
    return text


def to_when_clause(situation: str) -> str:
    """상황 서술을 "~했을 때" 절로 변환

    Examples:
        "상사가 소리를 질렀어요" → "상사가 소리를 질렀을 때"
        "상사가 소리를 질렀습니다" → "상사가 소리를 질렀을 때"
        "동료가 내 험담을 했대요" → "동료가 내 험담을 했을 때"
        "친구가 약속에 늦어요" → "친구가 약속에 늦어서"
        "회의 중 상사의 고함" → "회의 중 상사의 고함이 있었을 때"
    """
    text = situation.strip().rstrip(".!?~ ")
    if not text:
        return text

    # 과거형 어미 (질렀어요 / 질렀어 / 질렀다)
    match = re.search(r"(어요|어|다)$", text)
    if match and match.start() > 0:
        stem_end = text[match.start() - 1]
        parts = decompose(stem_end)
        if parts is not None and parts[2] == JONG_SSANG_SIOT:
            return f"{text[:match.start()]}을 때"

    # 합쇼체 (질렀습니다 / 늦습니다 / 지릅니다)
    if len(text) > 3 and text.endswith("니다"):
        if text[-3] == "습":
            return f"{text[:-3]}을 때"
        parts = decompose(text[-3])
        if parts is not None and parts[2] == JONG_BIEUP:
            return f"{text[:-3]}{replace_jong(text[-3], JONG_RIEUL)} 때"

    # 전해 들은 말 (했대요 / 간대요 / 나오래요)
    if len(text) > 2 and text.endswith("래요"):
        return f"{text[:-2]}라고 했을 때"
    if len(text) > 2 and text.endswith("대요"):
        parts = decompose(text[-3])
        if parts is not None and parts[2] == JONG_SSANG_SIOT and text[-3] != "겠":
            return f"{text[:-2]}을 때"
        return f"{text[:-2]}다고 했을 때"

    if "때" in text or text.endswith("서"):
        return text

    # 현재형 (늦어요, 속상해요) → 원인절
    if re.search(r"[어아해]요$", text):
        return f"{text[:-1]}서"

    return f"{josa(text, '이/가')} 있었을 때"


def has_situation(line: str) -> bool:
    return any(marker in line for marker in SITUATION_MARKERS)


def dedupe_need_clauses(line: str) -> str:
    """같은 욕구 절이 반복되면 한 번만 남김"""
    clauses = [c.strip() for c in re.split(r"(?<=싶고)\s+", line)]
    kept, keys = [], set()
    for clause in clauses:
        key = re.sub(r"^(저는|제가|내가)\s*", "", clause.replace("싶고", "싶어요").rstrip("."))
        if key in keys:
            continue
        keys.add(key)
        kept.append(clause)
    result = " ".join(kept)
    # 마지막 절이 연결형으로 끝나면 현재형으로
    if result.endswith("싶고"):
        result = result[: -len("싶고")] + "싶어요."
    return result


def repair_nvc_message(message: str, situation: str) -> str:
    """LLM NVC 메시지 보정

    Args:
        message: LLM이 만든 3줄 메시지
        situation: 사용자가 설명한 상황 (첫 줄에 상황이 빠졌을 때 사용)

    Returns:
        str: 보정된 메시지
    """
    lines = [line.strip() for line in message.strip().split("\n") if line.strip()]
    if not lines:
        return message.strip()

    if situation and not has_situation(lines[0]):
        logger.info("[Repair] 첫 줄에 상황이 없어 상황 절 추가")
        lines[0] = f"{to_when_clause(situation)}, {lines[0]}"

    text = apply_rules("\n".join(lines), EMOTION_REPAIR_RULES + NEED_REPAIR_RULES)

    lines = text.split("\n")
    if len(lines) >= 2:
        lines[1] = dedupe_need_clauses(lines[1])

    lines = [
        apply_rules(line, REQUEST_REPAIR_RULES) if any(m in line for m in REQUEST_LINE_MARKERS) else line
        for line in lines
    ]
    return "\n".join(lines)
