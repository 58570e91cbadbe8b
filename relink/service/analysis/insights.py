"""대화 변환 기록 + 감정 기록 통계 (분석 화면)

DB 접근 없음 - Repository에서 조회한 기록을 받아 집계만 수행
"""
from collections import Counter
from typing import List, Optional
from pydantic import BaseModel, Field
import logging
import re

from ...config import CHECKIN_WINDOW_DAYS
from ...core.emotion_taxonomy import get_emotion_emoji
from ..grammar.hangul import josa
from ..grammar.need_forms import need_to_noun_phrase

logger = logging.getLogger(__name__)

DAY_MILLIS = 24 * 60 * 60 * 1000

# 통계에서 제외하는 표시용 기본값
IGNORED_EMOTIONS = {"힘들었어요", "감정 정보 없음"}
IGNORED_NEEDS = {"욕구 정보 없음"}

# 연결형 욕구 절 → 현재형
NEED_CLAUSE_ENDINGS = [
    (r"고 싶(고|었어요)$", "고 싶어요"),
    (r"길 바(랐고|라고|랐어요)$", "길 바라요"),
]


class EmotionStat(BaseModel):
    label: str
    emoji: str
    count: int


class AnalysisSummary(BaseModel):
    """분석 화면 통계"""
    weeklyConversations: int = 0
    totalConversations: int = 0
    totalCheckIns: int = 0
    mostCommonEmotion: Optional[EmotionStat] = None
    importantNeed: Optional[str] = None
    insights: List[str] = Field(default_factory=list)


def split_emotions(emotion_text: str) -> List[str]:
    """표시용 감정 문자열을 라벨 목록으로 ("화남, 서운함" → ["화남", "서운함"])"""
    labels = [e.strip() for e in (emotion_text or "").split(",")]
    return [e for e in labels if e and e not in IGNORED_EMOTIONS]


def split_needs(need_text: str) -> List[str]:
    """표시용 욕구 문장을 명사구 목록으로

    Examples:
        "존중받고 싶고 배려받고 싶어요" → ["존중받는 것", "배려받는 것"]
    """
    if not need_text or need_text in IGNORED_NEEDS:
        return []
    clauses = re.split(r"(?:(?<=싶고)|(?<=바라고)|(?<=바랐고))\s+", need_text.strip().rstrip("."))
    needs = []
    for clause in clauses:
        for pattern, replacement in NEED_CLAUSE_ENDINGS:
            clause = re.sub(pattern, replacement, clause)
        needs.append(need_to_noun_phrase(clause))
    return [n for n in needs if n]


def _top(counter: Counter, n: int) -> List[str]:
    return [label for label, _ in counter.most_common(n)]


def build_insights(weekly_emotions: Counter, weekly_needs: Counter, weekly_conversations: int) -> List[str]:
    """이번 주 기록으로 짧은 인사이트 문장 생성"""
    insights = []

    top_emotions = [f"'{label}'" for label in _top(weekly_emotions, 2)]
    if len(top_emotions) == 2:
        insights.append(f"이번 주 가장 자주 느낀 감정은 {josa(top_emotions[0], '과/와')} {josa(top_emotions[1], '이에요/예요')}")
    elif top_emotions:
        insights.append(f"이번 주 가장 자주 느낀 감정은 {josa(top_emotions[0], '이에요/예요')}")

    top_needs = [f"'{label}'" for label in _top(weekly_needs, 1)]
    if top_needs:
        insights.append(f"요즘 나에게 가장 중요한 건 {josa(top_needs[0], '이에요/예요')}")

    if weekly_conversations > 0:
        insights.append(f"이번 주에 {weekly_conversations}번의 대화를 NVC로 바꿔봤어요")
    else:
        insights.append("이번 주에는 아직 정리한 대화가 없어요")

    return insights


def analyze(conversations: list, checkins: list, now: int) -> AnalysisSummary:
    """대화 기록과 감정 기록 집계

    Args:
        conversations: ConversationSchema 목록
        checkins: EmotionCheckInSchema 목록
        now: 기준 시각 (epoch ms)

    Returns:
        AnalysisSummary: 이번 주 대화 수, 가장 많이 느낀 감정, 가장 자주 고른 욕구, 인사이트
    """
    week_start = now - CHECKIN_WINDOW_DAYS * DAY_MILLIS

    emotions, weekly_emotions = Counter(), Counter()
    needs, weekly_needs = Counter(), Counter()
    weekly_conversations = 0

    for conversation in conversations:
        is_recent = conversation.date >= week_start
        weekly_conversations += int(is_recent)
        conversation_emotions = split_emotions(conversation.emotion)
        conversation_needs = split_needs(conversation.need)
        emotions.update(conversation_emotions)
        needs.update(conversation_needs)
        if is_recent:
            weekly_emotions.update(conversation_emotions)
            weekly_needs.update(conversation_needs)

    for checkin in checkins:
        emotions[checkin.emotion] += 1
        if checkin.date >= week_start:
            weekly_emotions[checkin.emotion] += 1

    most_common = None
    if emotions:
        label, count = emotions.most_common(1)[0]
        most_common = EmotionStat(label=label, emoji=get_emotion_emoji(label), count=count)

    top_need = _top(needs, 1)

    logger.info(
        f"[Analysis] 대화 {len(conversations)}개, 감정 기록 {len(checkins)}개, "
        f"이번 주 대화 {weekly_conversations}개"
    )

    return AnalysisSummary(
        weeklyConversations=weekly_conversations,
        totalConversations=len(conversations),
        totalCheckIns=len(checkins),
        mostCommonEmotion=most_common,
        importantNeed=top_need[0] if top_need else None,
        insights=build_insights(weekly_emotions, weekly_needs, weekly_conversations),
    )
