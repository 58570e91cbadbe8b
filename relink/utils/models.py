import os
from langchain_openai import ChatOpenAI
from ..config.config import (
    CHAT_MODEL_NAME,
    CHAT_TEMPERATURE,
    CHAT_MAX_TOKENS,
    CHAT_TIMEOUT,
    SUGGESTION_MODEL_NAME,
    SUGGESTION_TEMPERATURE,
    SUGGESTION_MAX_TOKENS,
    SUGGESTION_TIMEOUT,
)
from ..service.errors import MissingAPIKeyError


# OpenAI 모델 설정 (API 키는 환경변수 OPENAI_API_KEY에서 자동 로드)
CHAT_MODEL_CONFIG = {
    "model": CHAT_MODEL_NAME,
    "temperature": CHAT_TEMPERATURE,
    "max_tokens": CHAT_MAX_TOKENS,
    "timeout": CHAT_TIMEOUT,
}

SUGGESTION_MODEL_CONFIG = {
    "model": SUGGESTION_MODEL_NAME,
    "temperature": SUGGESTION_TEMPERATURE,
    "max_tokens": SUGGESTION_MAX_TOKENS,
    "timeout": SUGGESTION_TIMEOUT,
}

# .env.example에 들어있는 자리표시자 값
PLACEHOLDER_API_KEY = "your_api_key_here"


def check_api_key() -> str:
    """OPENAI_API_KEY 확인 (없거나 자리표시자면 MissingAPIKeyError)"""
    api_key = os.getenv("OPENAI_API_KEY", "")
    if not api_key.strip() or api_key == PLACEHOLDER_API_KEY:
        raise MissingAPIKeyError()
    return api_key


# =============================================================================
# LLM 인스턴스 캐싱 (싱글톤 패턴)
# =============================================================================

_cached_chat_llm = None
_cached_suggestion_llm = None


def get_chat_llm() -> ChatOpenAI:
    """단계별 대화/최종 메시지 생성용 LLM 인스턴스 반환 (캐시됨)"""
    global _cached_chat_llm
    if _cached_chat_llm is None:
        check_api_key()
        _cached_chat_llm = ChatOpenAI(**CHAT_MODEL_CONFIG)
    return _cached_chat_llm


def get_suggestion_llm() -> ChatOpenAI:
    """감정/욕구/부탁 추천용 LLM 인스턴스 반환 (캐시됨)"""
    global _cached_suggestion_llm
    if _cached_suggestion_llm is None:
        check_api_key()
        _cached_suggestion_llm = ChatOpenAI(**SUGGESTION_MODEL_CONFIG)
    return _cached_suggestion_llm
