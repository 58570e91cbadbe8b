"""감정 단어 활용 (명사형 감정 → 용언 어간 → 연결형/과거형)

감정 선택지는 "화남", "외로움" 같은 명사형으로 들어온다.
문장에 넣을 때는 어간("화나", "외롭")을 구한 뒤
연결형("화나고")이나 과거형("화났어요")으로 활용한다.
"""
from typing import List
import logging

from .hangul import (
    decompose,
    compose,
    replace_jong,
    josa,
    JUNG_A,
    JUNG_EO,
    JUNG_YEO,
    JUNG_O,
    JUNG_WA,
    JUNG_U,
    JUNG_WO,
    JUNG_EU,
    JUNG_I,
    JONG_NONE,
    JONG_RIEUL,
    JONG_RIEUL_MIEUM,
    JONG_MIEUM,
    JONG_BIEUP,
    JONG_SSANG_SIOT,
)

logger = logging.getLogger(__name__)

DEFAULT_EMOTION_STEM = "힘들"

# 규칙으로 구할 수 없는 감정의 어간
EMOTION_STEMS = {
    "화남": "화나",
    "짜증": "짜증나",
    "짜증남": "짜증나",
    "배신감": "배신당하",
    "힘든": "힘들",
    "실망": "실망하",
    "걱정": "걱정되",
    "안심": "안심되",
    "흥분": "흥분되",
    "분노": "분노하",
    "만족": "만족스럽",
}

# 모음 축약: 어간 끝 모음 → 과거형(-았/었-)과 합쳐진 모음
PAST_VOWEL_CONTRACTIONS = {
    JUNG_A: JUNG_A,      # 나 → 났
    JUNG_EO: JUNG_EO,    # 서 → 섰
    JUNG_YEO: JUNG_YEO,  # 켜 → 켰
    JUNG_O: JUNG_WA,     # 보 → 봤
    JUNG_U: JUNG_WO,     # 주 → 줬
    JUNG_I: JUNG_YEO,    # 지치 → 지쳤
}

# 르로 끝나지만 ㅡ만 탈락하는 규칙 어간
REGULAR_REU_STEMS = ("따르", "치르")


def emotion_stem(emotion: str) -> str:
    """명사형 감정을 용언 어간으로 변환

    Examples:
        화남 → 화나, 당황함 → 당황하, 외로움 → 외롭, 힘듦 → 힘들,
        슬픔 → 슬프, 좌절감 → 좌절감을 느끼
    """
    emotion = emotion.strip()
    if not emotion:
        return DEFAULT_EMOTION_STEM
    if emotion in EMOTION_STEMS:
        return EMOTION_STEMS[emotion]

    last = decompose(emotion[-1])

    # '~감'은 명사 (좌절감, 상실감)
    if last is not None and not emotion.endswith("감"):
        _, _, jong = last

        # ㅂ 불규칙: 외로움 → 외롭
        if emotion.endswith("움") and len(emotion) >= 2 and decompose(emotion[-2]):
            prev = emotion[-2]
            if decompose(prev)[2] == JONG_NONE:
                return emotion[:-2] + replace_jong(prev, JONG_BIEUP)

        # ㄹ 어간 명사형: 힘듦 → 힘들
        if jong == JONG_RIEUL_MIEUM:
            return emotion[:-1] + replace_jong(emotion[-1], JONG_RIEUL)

        # 명사형 어미 ㅁ 제거: 서운함 → 서운하, 슬픔 → 슬프
        if jong == JONG_MIEUM and len(emotion) >= 2:
            return emotion[:-1] + replace_jong(emotion[-1], JONG_NONE)

    logger.info(f"[EmotionForms] 명사 감정으로 처리: '{emotion}'")
    return f"{josa(emotion, '을/를')} 느끼"


def connective_form(stem: str) -> str:
    """연결형 (화나 → 화나고)"""
    return f"{stem}고"


def past_polite_form(stem: str) -> str:
    """과거 해요체 (화나 → 화났어요, 외롭 → 외로웠어요, 억울하 → 억울했어요)"""
    last = decompose(stem[-1])
    if last is None:
        return f"{stem}었어요"

    cho, jung, jong = last
    head = stem[:-1]

    if stem.endswith("하"):
        return f"{head}했어요"

    # ㅂ 불규칙 (외롭, 무섭, 실망스럽)
    if jong == JONG_BIEUP:
        return f"{head}{replace_jong(stem[-1], JONG_NONE)}웠어요"

    if jong != JONG_NONE:
        ending = "았어요" if jung in (JUNG_A, JUNG_O) else "었어요"
        return f"{stem}{ending}"

    # ㅡ 탈락: 앞 음절 모음에 따라 ㅏ/ㅓ (아프 → 아팠, 슬프 → 슬펐)
    if jung == JUNG_EU:
        prev = decompose(head[-1]) if head else None
        vowel = JUNG_A if prev is not None and prev[1] in (JUNG_A, JUNG_O) else JUNG_EO
        # 르 불규칙: 앞 음절에 ㄹ 받침 (모르 → 몰랐, 배부르 → 배불렀)
        if (stem[-1] == "르" and prev is not None and prev[2] == JONG_NONE
                and not stem.endswith(REGULAR_REU_STEMS)):
            return f"{head[:-1]}{replace_jong(head[-1], JONG_RIEUL)}{compose(cho, vowel, JONG_SSANG_SIOT)}어요"
        return f"{head}{compose(cho, vowel, JONG_SSANG_SIOT)}어요"

    if jung in PAST_VOWEL_CONTRACTIONS:
        return f"{head}{compose(cho, PAST_VOWEL_CONTRACTIONS[jung], JONG_SSANG_SIOT)}어요"

    return f"{stem}었어요"


def past_casual_form(stem: str) -> str:
    """과거 반말 (화나 → 화났어)"""
    return past_polite_form(stem)[:-1]


def describe_emotions(emotions: List[str], polite: bool = True) -> str:
    """여러 감정을 하나의 과거형 서술로 연결

    Args:
        emotions: 명사형 감정 목록 (예: ["서운함", "당황함"])
        polite: True면 해요체, False면 반말

    Returns:
        str: "서운하고 당황했어요" 형태 (감정이 없으면 "힘들었어요")
    """
    stems = [emotion_stem(e) for e in emotions if e and e.strip()] or [DEFAULT_EMOTION_STEM]
    last = past_polite_form(stems[-1]) if polite else past_casual_form(stems[-1])
    return " ".join([connective_form(s) for s in stems[:-1]] + [last])
