"""애플리케이션 전역 상수 정의

이 파일에 정의된 상수를 변경하면 전체 시스템에 반영됩니다.
"""

# =============================================================================
# 구체성 판단 관련 상수
# =============================================================================

# 이보다 짧은 입력은 무조건 막연한 표현으로 판단
MIN_SPECIFIC_TEXT_LENGTH = 15
"""구체성 판단 최소 길이
- 변경 시 영향: specificity.py (is_specific_enough)
"""

# 구체적 표현이 있어도 이 길이 이상이어야 구체적으로 인정
MIN_CONCRETE_TEXT_LENGTH = 20

# 관찰 단계 최대 사용자 입력 횟수
MAX_OBSERVATION_TURNS = 3
"""이 횟수에 도달하면 구체적이지 않아도 감정 단계로 이동
- 변경 시 영향: nodes.py (observation_node)
"""

# =============================================================================
# 추천 리스트 관련 상수
# =============================================================================

EMOTION_SUGGESTION_COUNT = 8
NEED_SUGGESTION_COUNT = 6

# =============================================================================
# 응답 관련 상수
# =============================================================================

# 템플릿 응답 전 대기 시간 (초)
RESPONSE_DELAY_SECONDS = 2.0
"""직접 생성하는 응답 앞에 넣는 고정 지연
- 변경 시 영향: graph_manager.py, nodes.py
"""

# =============================================================================
# 저장소 관련 상수
# =============================================================================

RECENT_CONVERSATION_COUNT = 3

# 주간 체크인 조회 기간 (일)
CHECKIN_WINDOW_DAYS = 7
