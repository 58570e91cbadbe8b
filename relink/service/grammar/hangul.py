"""한글 음절 분해/조합 및 조사 선택

완성형 한글 음절(가~힣)은 (초성 * 21 + 중성) * 28 + 종성 + 0xAC00 으로 계산된다.
"""
from typing import Optional, Tuple

HANGUL_BASE = 0xAC00
HANGUL_LAST = 0xD7A3

# 중성 인덱스
JUNG_A = 0      # ㅏ
JUNG_EO = 4     # ㅓ
JUNG_YEO = 6    # ㅕ
JUNG_O = 8      # ㅗ
JUNG_WA = 9     # ㅘ
JUNG_U = 13     # ㅜ
JUNG_WO = 14    # ㅝ
JUNG_EU = 18    # ㅡ
JUNG_I = 20     # ㅣ

# 종성 인덱스
JONG_NONE = 0
JONG_RIEUL = 8      # ㄹ
JONG_RIEUL_MIEUM = 10   # ㄻ
JONG_MIEUM = 16     # ㅁ
JONG_BIEUP = 17     # ㅂ
JONG_SSANG_SIOT = 20    # ㅆ


def is_hangul_syllable(char: str) -> bool:
    return len(char) == 1 and HANGUL_BASE <= ord(char) <= HANGUL_LAST


def decompose(char: str) -> Optional[Tuple[int, int, int]]:
    """음절을 (초성, 중성, 종성) 인덱스로 분해 (한글 음절이 아니면 None)"""
    if not is_hangul_syllable(char):
        return None
    offset = ord(char) - HANGUL_BASE
    return offset // (21 * 28), (offset % (21 * 28)) // 28, offset % 28


def compose(cho: int, jung: int, jong: int = JONG_NONE) -> str:
    return chr(HANGUL_BASE + (cho * 21 + jung) * 28 + jong)


def replace_jong(char: str, jong: int) -> str:
    """음절의 종성만 교체 (받침 제거는 JONG_NONE)"""
    cho, jung, _ = decompose(char)
    return compose(cho, jung, jong)


def last_syllable(word: str) -> Optional[str]:
    """마지막 한글 음절 (공백/문장부호는 건너뜀)"""
    for char in reversed(word.strip()):
        if is_hangul_syllable(char):
            return char
        if char.isalnum():
            return None
    return None


def has_batchim(word: str) -> bool:
    """마지막 음절에 받침이 있는지 여부"""
    char = last_syllable(word)
    if char is None:
        return False
    return decompose(char)[2] != JONG_NONE


# (받침 있을 때, 받침 없을 때)
PARTICLES = {
    "이/가": ("이", "가"),
    "은/는": ("은", "는"),
    "을/를": ("을", "를"),
    "과/와": ("과", "와"),
    "이에요/예요": ("이에요", "예요"),
}


def josa(word: str, particle: str) -> str:
    """받침 유무에 맞는 조사를 붙여 반환

    Examples:
        >>> josa("존중받는 것", "이/가")
        '존중받는 것이'
        >>> josa("친구", "과/와")
        '친구와'
        >>> josa("후임", "으로/로")
        '후임으로'
    """
    if particle == "으로/로":
        char = last_syllable(word)
        # ㄹ 받침은 '로'를 쓴다 (서울로)
        if char is not None and decompose(char)[2] not in (JONG_NONE, JONG_RIEUL):
            return f"{word}으로"
        return f"{word}로"

    with_batchim, without_batchim = PARTICLES[particle]
    return f"{word}{with_batchim if has_batchim(word) else without_batchim}"
