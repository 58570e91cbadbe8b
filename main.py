from fastapi import FastAPI, HTTPException
from fastapi.responses import JSONResponse
import logging
from dotenv import load_dotenv

from relink.chatbot.graph_manager import ChatBotManager
from relink.config import RECENT_CONVERSATION_COUNT, get_kst_now, now_millis
from relink.core.emotion_taxonomy import EMOTION_CATEGORIES, NEED_OPTIONS
from relink.database import (
    Database,
    save_conversation,
    get_conversations,
    get_recent_conversations,
    get_conversation_by_id,
    save_emotion_checkin,
    get_emotion_checkins,
    get_weekly_overview,
)
from relink.database.schemas import ConversationSchema, EmotionCheckInCreate
from relink.service import analyze
from relink.service.errors import InvalidCheckInError
from relink.utils.schemas import ChatRequest

# 환경 변수 로드
load_dotenv()

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
)

app = FastAPI(title="Relink - 관계를 다시 잇는 대화")

# 데이터베이스 및 ChatBot 초기화
db = Database()
chatbot_manager = ChatBotManager(db)

# 앱 시작 시 초기화
@app.on_event("startup")
async def startup_event():
    await db.test_connection()
    await chatbot_manager.initialize()

@app.get("/api/status")
async def get_status():
    """서버 상태 확인"""
    return {
        "status": "running",
        "timestamp": get_kst_now().isoformat(),
        "message": "Relink 서버가 정상 작동 중입니다."
    }

@app.post("/api/chat")
async def chat(request: ChatRequest):
    """단계별 NVC 대화"""
    body, status_code = await chatbot_manager.handle_chat(request.messages, request.stage)
    return JSONResponse(content=body, status_code=status_code)

# ============================================
# 대화 변환 기록
# ============================================

@app.get("/api/conversations")
async def list_conversations():
    """저장된 대화 목록 (최신순)"""
    conversations = await get_conversations(db)
    return [c.model_dump() for c in conversations]

@app.post("/api/conversations")
async def create_conversation(conversation: ConversationSchema):
    """대화 저장 (같은 id면 덮어쓰기)"""
    saved = await save_conversation(db, conversation)
    return saved.model_dump()

@app.get("/api/conversations/recent")
async def recent_conversations(count: int = RECENT_CONVERSATION_COUNT):
    """최근 대화 (기본 3개)"""
    conversations = await get_recent_conversations(db, count)
    return [c.model_dump() for c in conversations]

@app.get("/api/conversations/{conversation_id}")
async def get_conversation(conversation_id: str):
    """대화 하나 조회"""
    conversation = await get_conversation_by_id(db, conversation_id)
    if conversation is None:
        raise HTTPException(status_code=404, detail="대화를 찾을 수 없어요.")
    return conversation.model_dump()

# ============================================
# 감정 기록
# ============================================

@app.post("/api/checkins")
async def create_checkin(payload: EmotionCheckInCreate):
    """감정 기록 저장"""
    try:
        checkin = await save_emotion_checkin(db, payload)
        return checkin.model_dump()
    except InvalidCheckInError as e:
        raise HTTPException(status_code=e.status_code, detail=e.user_message)

@app.get("/api/checkins")
async def list_checkins():
    """감정 기록 목록 (최신순)"""
    checkins = await get_emotion_checkins(db)
    return [c.model_dump() for c in checkins]

@app.get("/api/checkins/weekly")
async def weekly_checkins():
    """최근 7일 감정 기록 (하루 단위)"""
    days = await get_weekly_overview(db)
    return [d.model_dump() for d in days]

# ============================================
# 감정 분류 / 분석
# ============================================

@app.get("/api/emotions")
async def get_emotions():
    """감정 분류 체계 + 욕구 선택지"""
    return {
        "categories": EMOTION_CATEGORIES,
        "needs": NEED_OPTIONS,
    }

@app.get("/api/analysis")
async def get_analysis():
    """대화 기록 + 감정 기록 통계"""
    conversations = await get_conversations(db)
    checkins = await get_emotion_checkins(db)
    summary = analyze(conversations, checkins, now_millis())
    return summary.model_dump()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
