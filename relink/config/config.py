import os

# 대화 모델 설정 (OpenAI)
CHAT_MODEL_NAME = "gpt-3.5-turbo"
CHAT_TEMPERATURE = 0.7
CHAT_MAX_TOKENS = 500
CHAT_TIMEOUT = 30.0

# 추천 리스트(감정/욕구/부탁) 생성 모델 설정
SUGGESTION_MODEL_NAME = "gpt-3.5-turbo"
SUGGESTION_TEMPERATURE = 0.7
SUGGESTION_MAX_TOKENS = 200
SUGGESTION_TIMEOUT = 20.0

# 저장소 키 (두 개의 고정 컬렉션)
CONVERSATIONS_TABLE = "relink_conversations"
CHECKINS_TABLE = "relink_emotion_checkins"


# 개발 모드: 에러 응답에 원본 에러 메시지(errorDetails) 포함
def is_debug() -> bool:
    return os.getenv("RELINK_DEBUG", "").lower() in ("1", "true", "yes")
