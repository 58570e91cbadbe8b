"""대화 변환 기록 DB 로직"""
from typing import List, Optional
import logging

from ..config import RECENT_CONVERSATION_COUNT, now_millis
from ..utils.schemas import ChatMessage, NVCData
from .schemas import ConversationSchema, MessageSchema

logger = logging.getLogger(__name__)


def build_conversation(messages: List[ChatMessage], reply: str, nvc_data: NVCData) -> ConversationSchema:
    """완료된 대화로 저장용 ConversationSchema 생성

    Args:
        messages: 요청에 포함된 대화 메시지
        reply: 마지막 응답 본문
        nvc_data: 변환 결과

    Returns:
        ConversationSchema: assistant → ai로 바꾼 메시지 + 응답 + 완성 메시지
    """
    timestamp = now_millis()
    history = [
        MessageSchema(role="user" if m.role == "user" else "ai", content=m.content, timestamp=timestamp)
        for m in messages
    ]
    history.append(MessageSchema(role="ai", content=reply, timestamp=timestamp))
    history.append(MessageSchema(role="ai", content=nvc_data.fullMessage, timestamp=timestamp))

    return ConversationSchema(
        id=str(timestamp),
        date=timestamp,
        situation=nvc_data.observation,
        observation=nvc_data.observation,
        emotion=nvc_data.emotions,
        need=nvc_data.needs,
        request=nvc_data.request,
        conversionText=nvc_data.fullMessage,
        messages=history,
        stage="complete",
    )


async def save_conversation(db, conversation: ConversationSchema) -> ConversationSchema:
    """대화 저장 (같은 id면 덮어쓰기)"""
    await db.upsert_conversation({
        "id": conversation.id,
        "date": conversation.date,
        "data": conversation.model_dump(),
    })
    logger.info(f"[ConvRepo] 대화 저장: {conversation.id}")
    return conversation


async def get_conversations(db, limit: Optional[int] = None) -> List[ConversationSchema]:
    """저장된 대화 목록 (최신순)"""
    rows = await db.get_conversation_rows(limit=limit)
    return [ConversationSchema(**row["data"]) for row in rows]


async def get_recent_conversations(db, count: int = RECENT_CONVERSATION_COUNT) -> List[ConversationSchema]:
    return await get_conversations(db, limit=count)


async def get_conversation_by_id(db, conversation_id: str) -> Optional[ConversationSchema]:
    row = await db.get_conversation_row(conversation_id)
    return ConversationSchema(**row["data"]) if row else None
