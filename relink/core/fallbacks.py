"""LLM 호출 실패 시 사용하는 고정 응답"""

# 감정 추천에 허용하는 어휘
EMOTION_VOCABULARY = [
    "화남", "서운함", "속상함", "불안함", "외로움", "무시당함", "답답함", "억울함",
    "짜증남", "실망스러움", "피곤함", "자존심상함", "분함", "배신감", "혼란스러움",
    "무서움", "부끄러움", "두려움", "당황함",
]

# 욕구 추천 결과에서 걸러낼 감정 키워드
EMOTION_KEYWORDS = EMOTION_VOCABULARY + ["난처함"]

FALLBACK_EMOTIONS = ["화남", "서운함", "속상함", "불안함", "외로움", "답답함", "억울함", "실망스러움"]

FALLBACK_NEEDS = [
    "존중받고 싶었어요",
    "이해받고 싶었어요",
    "배려받고 싶었어요",
    "소통하고 싶었어요",
    "안정감을 느끼고 싶었어요",
    "인정받고 싶었어요",
]

# 상대방에게 하던 말 (상황 키워드 그룹, 비난조 메시지) - 위에서부터 먼저 매칭
BEFORE_MESSAGE_RULES = [
    (("못", "실수"), "왜 이렇게 못하니? 제대로 좀 해봐!"),
    (("늦", "약속"), "왜 또 늦었어? 약속을 지켜야지!"),
    (("무시", "반말"), "왜 나를 무시하는 거야? 예의 좀 지켜!"),
    (("말", "듣지"), "내 말 좀 들어봐! 왜 자꾸 끼어들어?"),
]

# 상황 설명으로 보지 않는 짧은 대답
SHORT_REPLIES = ("네", "예", "맞아요", "맞아", "응", "어", "그래")
