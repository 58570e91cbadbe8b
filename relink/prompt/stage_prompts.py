# =============================================================================
# 1. 관찰 (observation)
# =============================================================================

# 상황이 충분히 구체적일 때 바로 보내는 응답
FEELING_TRANSITION_REPLY = "힘드셨겠어요.\n그때 어떤 기분이 드셨나요?"

# 첫 입력이 막연할 때
VAGUE_OBSERVATION_PROMPT = """사용자가 막연한 표현을 사용했습니다: "{message}"
"그 사람이 정확히 어떤 말을 했나요? 또는 어떤 행동을 했나요?" 라고 물어보세요.
구체적인 상황을 파악하기 위해 더 직접적인 질문을 하세요."""

# 두 번째 입력도 막연할 때 (더 직접적으로)
VAGUE_OBSERVATION_FOLLOWUP_PROMPT = """사용자가 상황을 설명했지만 아직 구체적이지 않습니다.
"그렇군요. 그 사람이 구체적으로 어떤 말을 했나요? 또는 어떤 행동을 했나요?" 라고 물어보세요.
더 직접적이고 구체적인 질문을 하세요."""

# =============================================================================
# 2. 감정 (feeling)
# =============================================================================

FEELING_REFLECTION_PROMPT = """사용자가 "{emotions}"라는 감정을 선택했습니다.
"{emotion_display}. 이런 감정이 든 이유가 뭘까요? 나에게 중요한 건 뭘까요?" 라고 물어보세요.
**중요**: 질문에 감정 단어를 포함하지 마세요. "혼란스러우셨을까요?" 같은 표현은 절대 사용하지 마세요.
감정을 자연스럽게 반영한 따뜻한 톤으로 응답하세요."""

# =============================================================================
# 3. 욕구 (need) → 공감
# =============================================================================

EMPATHY_GUIDANCE = "다음에 이런 상황이 온다면 나의 마음과 나에게 중요한 것을 상대에게 얘기해주세요.\n함께 정리해볼까요?"

EMPATHY_OPTIONS = ["좋아요", "괜찮아요"]

# 클라이언트의 "정리 시작하기" 버튼이 보내는 메시지
CONTINUE_BUTTON_TEXT = "정리 시작하기"

# =============================================================================
# 4. 공감 (empathy) → 결과
# =============================================================================

RESULT_HEADLINE = "📝 이렇게 바뀌었어요"

NVC_ADVANTAGES = [
    "상대방을 비난하지 않아요",
    "내 감정과 욕구를 명확히 전달해요",
    "구체적인 부탁으로 변화를 이끌어요",
]

# =============================================================================
# 5. 결과 (result) 이후 자유 대화
# =============================================================================

RESULT_STAGE_PROMPT = """사용자가 정리된 메시지를 확인했습니다.
메시지에 대한 질문이나 소감에 짧고 따뜻하게 답하세요.
메시지를 다시 쓰고 싶어 하면 처음부터 다시 시작할 수 있다고 안내하세요."""
