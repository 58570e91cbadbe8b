"""Database Pydantic Schemas"""
from pydantic import BaseModel, Field
from typing import Optional, List, Literal


# ============================================
# 1. relink_conversations 스키마
# ============================================

class MessageSchema(BaseModel):
    """대화 메시지 (저장용 role은 user/ai)"""
    role: Literal["user", "ai"]
    content: str
    timestamp: int  # epoch ms


class ConversationSchema(BaseModel):
    """relink_conversations 행의 data"""
    id: str
    date: int  # 생성 시각 (epoch ms)
    situation: str
    observation: str
    emotion: str
    need: str
    request: str
    conversionText: str  # 완성된 NVC 메시지
    messages: List[MessageSchema] = Field(default_factory=list)
    stage: str = "complete"


# ============================================
# 2. relink_emotion_checkins 스키마
# ============================================

class EmotionCheckInSchema(BaseModel):
    """relink_emotion_checkins 행의 data"""
    id: str  # checkin_<epoch ms>
    date: int
    mainCategory: Literal["uncomfortable", "pleasant"]
    subCategory: str
    emotion: str
    situation: Optional[str] = None


class EmotionCheckInCreate(BaseModel):
    """POST /api/checkins 요청"""
    mainCategory: str
    subCategory: str
    emotion: str
    situation: Optional[str] = None


# ============================================
# 3. 주간 감정 기록
# ============================================

class WeeklyDaySchema(BaseModel):
    """주간 감정 기록 하루치"""
    date: int  # 그날 0시 (epoch ms)
    label: str  # 요일 (월, 화, ...)
    day: int
    count: int
    checkIns: List[EmotionCheckInSchema] = Field(default_factory=list)
