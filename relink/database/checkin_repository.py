"""감정 기록(체크인) DB 로직"""
from datetime import datetime, timedelta
from typing import List, Optional
import logging

from ..config import CHECKIN_WINDOW_DAYS, KST, get_kst_now, now_millis
from ..core.emotion_taxonomy import is_known_emotion
from ..service.errors import InvalidCheckInError
from .schemas import EmotionCheckInCreate, EmotionCheckInSchema, WeeklyDaySchema

logger = logging.getLogger(__name__)

DAY_MILLIS = 24 * 60 * 60 * 1000

WEEKDAY_LABELS = ["월", "화", "수", "목", "금", "토", "일"]


async def save_emotion_checkin(db, payload: EmotionCheckInCreate) -> EmotionCheckInSchema:
    """감정 기록 저장

    Args:
        db: Database 인스턴스
        payload: 대분류/소분류/감정/상황 메모

    Returns:
        EmotionCheckInSchema: 저장된 감정 기록

    Raises:
        InvalidCheckInError: 분류 체계에 없는 대분류/소분류/감정 조합
    """
    if not is_known_emotion(payload.mainCategory, payload.subCategory, payload.emotion):
        logger.warning(
            f"[CheckInRepo] 잘못된 감정 기록: {payload.mainCategory}/{payload.subCategory}/{payload.emotion}"
        )
        raise InvalidCheckInError()

    timestamp = now_millis()
    situation = (payload.situation or "").strip() or None
    checkin = EmotionCheckInSchema(
        id=f"checkin_{timestamp}",
        date=timestamp,
        mainCategory=payload.mainCategory,
        subCategory=payload.subCategory,
        emotion=payload.emotion,
        situation=situation,
    )

    await db.insert_emotion_checkin({
        "id": checkin.id,
        "date": checkin.date,
        "data": checkin.model_dump(),
    })
    logger.info(f"[CheckInRepo] 감정 기록 저장: {checkin.id} ({checkin.emotion})")
    return checkin


async def get_emotion_checkins(db) -> List[EmotionCheckInSchema]:
    rows = await db.get_emotion_checkin_rows()
    return [EmotionCheckInSchema(**row["data"]) for row in rows]


async def get_weekly_emotion_checkins(db, days: int = CHECKIN_WINDOW_DAYS) -> List[EmotionCheckInSchema]:
    """최근 days일 동안의 감정 기록 (최신순)"""
    since = now_millis() - days * DAY_MILLIS
    rows = await db.get_emotion_checkin_rows(since=since)
    return [EmotionCheckInSchema(**row["data"]) for row in rows]


def group_by_day(checkins: List[EmotionCheckInSchema], now: Optional[datetime] = None) -> List[WeeklyDaySchema]:
    """감정 기록을 최근 7일 하루 단위로 묶기 (오래된 날부터)

    Args:
        checkins: 감정 기록 목록
        now: 기준 시각 (기본값 현재 KST)

    Returns:
        List[WeeklyDaySchema]: 7개 (요일, 날짜, 개수, 기록)
    """
    now = (now or get_kst_now()).astimezone(KST)
    days = []
    for offset in range(CHECKIN_WINDOW_DAYS - 1, -1, -1):
        date = now - timedelta(days=offset)
        day_start = date.replace(hour=0, minute=0, second=0, microsecond=0)
        start = int(day_start.timestamp() * 1000)
        end = start + DAY_MILLIS - 1

        day_checkins = [c for c in checkins if start <= c.date <= end]
        days.append(WeeklyDaySchema(
            date=start,
            label=WEEKDAY_LABELS[day_start.weekday()],
            day=day_start.day,
            count=len(day_checkins),
            checkIns=day_checkins,
        ))
    return days


async def get_weekly_overview(db) -> List[WeeklyDaySchema]:
    checkins = await get_weekly_emotion_checkins(db)
    return group_by_day(checkins)
