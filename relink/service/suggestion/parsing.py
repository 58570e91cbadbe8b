"""LLM 목록 응답 파싱"""
from typing import List
import json
import re

CODE_FENCE_PATTERN = re.compile(r"^```[a-zA-Z]*\s*|\s*```$")


def parse_list_response(response: str) -> List[str]:
    """JSON 배열 또는 쉼표 구분 목록을 문자열 리스트로 변환

    Examples:
        '["화남", "서운함"]' → ["화남", "서운함"]
        '[화남, 서운함]' → ["화남", "서운함"]
    """
    text = CODE_FENCE_PATTERN.sub("", (response or "").strip()).strip()
    if not text:
        return []

    try:
        parsed = json.loads(text)
    except ValueError:
        items = re.sub(r'[\[\]"]', "", text).split(",")
        return [item.strip() for item in items if item.strip()]

    # JSON이지만 배열이 아니면 사용하지 않음
    if not isinstance(parsed, list):
        return []
    return [str(item).strip() for item in parsed if str(item).strip()]


def unique(items: List[str]) -> List[str]:
    """순서를 유지하며 중복 제거"""
    return list(dict.fromkeys(items))
