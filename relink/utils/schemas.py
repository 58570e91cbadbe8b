"""AI Service Layer Schemas

대화 요청/응답과 NVC 메시지 생성 결과를 정의합니다.
필드 이름은 클라이언트 JSON과 동일하게 맞춥니다 (camelCase).
"""
from pydantic import BaseModel, Field, field_validator
from typing import Optional, List, Literal


# ============================================
# 대화 요청 스키마
# ============================================

class ChatMessage(BaseModel):
    """대화 메시지 (role은 user/assistant로 정규화)"""
    role: Literal["user", "assistant"] = "assistant"
    content: str = ""

    @field_validator("role", mode="before")
    @classmethod
    def normalize_role(cls, value):
        # 'ai' 및 알 수 없는 role은 assistant
        return "user" if value == "user" else "assistant"

    @field_validator("content", mode="before")
    @classmethod
    def normalize_content(cls, value):
        return value or ""


class ChatRequest(BaseModel):
    """POST /api/chat 요청"""
    messages: List[ChatMessage] = Field(default_factory=list)
    stage: str = "observation"

    class Config:
        json_schema_extra = {
            "example": {
                "messages": [
                    {"role": "ai", "content": "어떤 일이 있었나요?"},
                    {"role": "user", "content": "상사가 회의 중에 \"이것도 못 해?\"라고 소리를 질렀어요"}
                ],
                "stage": "observation"
            }
        }


# ============================================
# NVC 변환 데이터
# ============================================

class ConversationData(BaseModel):
    """대화에서 추출한 상황/감정/욕구"""
    situation: str = ""
    emotions: List[str] = Field(default_factory=list)
    needs: List[str] = Field(default_factory=list)


class NVCData(BaseModel):
    """관찰-감정-욕구-부탁 구조의 변환 결과"""
    observation: str = Field(description="사용자가 설명한 상황")
    emotions: str = Field(description="선택한 감정 (표시용, 쉼표 연결)")
    needs: str = Field(description="선택한 욕구 (표시용, '~고' 연결)")
    request: str = Field(description="상대방에게 전할 부탁")
    fullMessage: str = Field(description="완성된 NVC 메시지")

    class Config:
        json_schema_extra = {
            "example": {
                "observation": "친구가 약속 시간에 30분 늦었어요",
                "emotions": "서운함, 답답함",
                "needs": "존중받고 싶고 배려받고 싶어요",
                "request": "늦을 것 같으면 미리 연락해줄",
                "fullMessage": "친구가 약속 시간에 30분 늦었을 때, 서운하고 답답했어요.\n제 시간을 존중받고 싶고 배려받고 싶어요.\n다음부터는 늦을 것 같으면 미리 연락해주세요"
            }
        }


# ============================================
# 대화 응답 스키마
# ============================================

class ChatResponse(BaseModel):
    """POST /api/chat 응답 (단계별 추가 필드는 있을 때만 포함)"""
    content: str
    nextStage: str
    options: List[str] = Field(default_factory=list)
    multiSelect: bool = False
    showContinueButton: Optional[bool] = None
    conversationData: Optional[ConversationData] = None
    beforeMessage: Optional[str] = None
    nvcData: Optional[NVCData] = None
    advantages: Optional[List[str]] = None
    conversationId: Optional[str] = None

    def to_response(self) -> dict:
        return self.model_dump(exclude_none=True)
