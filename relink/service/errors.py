"""에러 정의 및 사용자용 에러 메시지 매핑"""
from dataclasses import dataclass
from typing import Optional
import logging

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "잠시 문제가 생겼어요. 다시 시도해주세요."


class RelinkError(Exception):
    """사용자에게 그대로 보여줄 메시지를 가진 에러"""

    user_message = GENERIC_ERROR_MESSAGE
    status_code = 500

    def __init__(self, user_message: Optional[str] = None):
        if user_message:
            self.user_message = user_message
        super().__init__(self.user_message)


class MissingAPIKeyError(RelinkError):
    user_message = "API 키가 설정되지 않았어요. .env 파일에 OPENAI_API_KEY를 입력하고 서버를 재시작해주세요."


class EmptyMessagesError(RelinkError):
    user_message = "메시지가 필요해요."
    status_code = 400


class EmptyCompletionError(RelinkError):
    user_message = "응답을 받지 못했어요. 다시 시도해주세요."


class InvalidCheckInError(RelinkError):
    user_message = "감정 기록 정보가 올바르지 않아요."
    status_code = 400


# (에러 메시지에 포함된 키워드, 사용자 메시지) - 위에서부터 먼저 매칭
LLM_ERROR_MESSAGES = [
    (("quota", "billing"), "API 사용량 한도에 도달했어요. OpenAI 계정의 결제 정보와 사용량을 확인해주세요."),
    (("API key",), "API 키에 문제가 있어요. 확인해주세요."),
    (("rate limit",), "요청이 너무 많아요. 잠시 후 다시 시도해주세요."),
    (("does not exist",), "사용할 수 없는 모델이에요. 다른 모델로 변경이 필요해요."),
]


@dataclass
class ErrorInfo:
    """사용자에게 전달할 에러 정보"""
    message: str
    code: int
    details: Optional[str] = None


def map_error(error: Exception, debug: bool = False) -> ErrorInfo:
    """예외를 사용자용 한국어 에러 메시지로 변환

    Args:
        error: 처리 중 발생한 예외 (LLM 클라이언트 에러 포함)
        debug: True면 원본 에러 메시지를 details에 포함

    Returns:
        ErrorInfo: 메시지, 에러 코드, (디버그 시) 상세 정보
    """
    details = (str(error) or "Unknown error") if debug else None

    if isinstance(error, RelinkError):
        return ErrorInfo(message=error.user_message, code=error.status_code, details=details)

    raw_message = str(error)
    code = getattr(error, "status_code", None) or getattr(error, "status", None) or 500

    for keywords, user_message in LLM_ERROR_MESSAGES:
        if any(keyword in raw_message for keyword in keywords):
            return ErrorInfo(message=user_message, code=code, details=details)

    if raw_message:
        return ErrorInfo(message=f"오류: {raw_message}", code=code, details=details)

    return ErrorInfo(message=GENERIC_ERROR_MESSAGE, code=code, details=details)
