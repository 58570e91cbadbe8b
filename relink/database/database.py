import os
from supabase import create_client, Client
from typing import Optional, Dict, Any, List
import logging

from ..config.config import CONVERSATIONS_TABLE, CHECKINS_TABLE

logger = logging.getLogger(__name__)


class Database:
    """Relink 저장소

    두 컬렉션(대화 변환 기록, 감정 기록)을 JSON 행으로 저장한다.
    행 형태: {"id": str, "date": int(epoch ms), "data": dict}
    """

    def __init__(self):
        # Supabase 클라이언트 설정
        if os.getenv("SUPABASE_URL") and os.getenv("SUPABASE_ANON_KEY"):
            self.supabase: Client = create_client(
                os.getenv("SUPABASE_URL"),
                os.getenv("SUPABASE_ANON_KEY")
            )
            logger.info("✅ Supabase 클라이언트 초기화 성공")
        else:
            logger.warning("⚠️ Supabase 환경 변수가 설정되지 않았습니다. 모킹 모드로 실행됩니다.")
            self.supabase = None

        # 모킹 데이터 저장소 (최신이 [0])
        self._mock_conversations: List[Dict[str, Any]] = []
        self._mock_checkins: List[Dict[str, Any]] = []

    async def test_connection(self) -> bool:
        """데이터베이스 연결 테스트"""
        if not self.supabase:
            logger.info("⚠️ 모킹 모드에서 실행 중입니다.")
            return True

        try:
            self.supabase.table(CONVERSATIONS_TABLE).select("id").limit(1).execute()
            logger.info("✅ Supabase 연결 성공!")
            return True
        except Exception as e:
            logger.error(f"❌ Supabase 연결 실패: {e}")
            return False

    # ============================================
    # 대화 변환 기록 (relink_conversations)
    # ============================================

    async def upsert_conversation(self, row: Dict[str, Any]) -> Dict[str, Any]:
        """대화 저장 (같은 id가 있으면 통째로 덮어쓰기, 없으면 맨 앞에 추가)"""
        if not self.supabase:
            for index, existing in enumerate(self._mock_conversations):
                if existing["id"] == row["id"]:
                    self._mock_conversations[index] = row
                    return row
            self._mock_conversations.insert(0, row)
            return row

        try:
            response = self.supabase.table(CONVERSATIONS_TABLE).upsert(
                row,
                on_conflict="id"
            ).execute()
            logger.info(f"💾 [DB] 대화 저장 완료 - id: {row['id']}")
            return response.data[0] if response.data else row
        except Exception as e:
            logger.error(f"❌ [DB] 대화 저장 실패: {e}")
            raise

    async def get_conversation_rows(self, limit: Optional[int] = None) -> List[Dict[str, Any]]:
        """대화 목록 조회 (date 내림차순)"""
        if not self.supabase:
            rows = sorted(self._mock_conversations, key=lambda r: r["date"], reverse=True)
            return rows[:limit] if limit is not None else rows

        try:
            query = self.supabase.table(CONVERSATIONS_TABLE)\
                .select("*")\
                .order("date", desc=True)
            if limit is not None:
                query = query.limit(limit)
            response = query.execute()
            return response.data if response.data else []
        except Exception as e:
            logger.error(f"❌ [DB] 대화 목록 조회 실패: {e}")
            return []

    async def get_conversation_row(self, conversation_id: str) -> Optional[Dict[str, Any]]:
        """id로 대화 조회"""
        if not self.supabase:
            return next((r for r in self._mock_conversations if r["id"] == conversation_id), None)

        try:
            response = self.supabase.table(CONVERSATIONS_TABLE)\
                .select("*")\
                .eq("id", conversation_id)\
                .limit(1)\
                .execute()
            return response.data[0] if response.data else None
        except Exception as e:
            logger.error(f"❌ [DB] 대화 조회 실패: {e}")
            return None

    # ============================================
    # 감정 기록 (relink_emotion_checkins)
    # ============================================

    async def insert_emotion_checkin(self, row: Dict[str, Any]) -> Dict[str, Any]:
        """감정 기록 추가"""
        if not self.supabase:
            self._mock_checkins.append(row)
            return row

        try:
            response = self.supabase.table(CHECKINS_TABLE).insert(row).execute()
            logger.info(f"💾 [DB] 감정 기록 저장 완료 - id: {row['id']}")
            return response.data[0] if response.data else row
        except Exception as e:
            logger.error(f"❌ [DB] 감정 기록 저장 실패: {e}")
            raise

    async def get_emotion_checkin_rows(self, since: Optional[int] = None) -> List[Dict[str, Any]]:
        """감정 기록 조회 (date 내림차순, since가 있으면 그 이후만)"""
        if not self.supabase:
            rows = [r for r in self._mock_checkins if since is None or r["date"] >= since]
            return sorted(rows, key=lambda r: r["date"], reverse=True)

        try:
            query = self.supabase.table(CHECKINS_TABLE).select("*")
            if since is not None:
                query = query.gte("date", since)
            response = query.order("date", desc=True).execute()
            return response.data if response.data else []
        except Exception as e:
            logger.error(f"❌ [DB] 감정 기록 조회 실패: {e}")
            return []
