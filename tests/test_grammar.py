"""한국어 문장 조립 규칙 테스트 (조사, 감정 활용, 욕구/부탁 문장, 보정)"""
import pytest

from relink.service.grammar import (
    josa,
    has_batchim,
    emotion_stem,
    describe_emotions,
    past_polite_form,
    describe_needs,
    empathy_sentence,
    need_sentence,
    need_to_noun_phrase,
    normalize_request,
    to_polite_request,
    fallback_request,
    repair_nvc_message,
    to_when_clause,
)


# =============================================================================
# 조사
# =============================================================================

def test_has_batchim():
    assert has_batchim("것") is True
    assert has_batchim("친구") is False
    assert has_batchim("'답답함'") is True
    assert has_batchim("") is False


@pytest.mark.parametrize("word, particle, expected", [
    ("존중받는 것", "이/가", "존중받는 것이"),
    ("친구", "이/가", "친구가"),
    ("친구", "과/와", "친구와"),
    ("'답답함'", "과/와", "'답답함'과"),
    ("'화남'", "이에요/예요", "'화남'이에요"),
    ("'외로움'", "이에요/예요", "'외로움'이에요"),
    ("'배려'", "이에요/예요", "'배려'예요"),
    ("좌절감", "을/를", "좌절감을"),
    ("후임", "으로/로", "후임으로"),
    ("서울", "으로/로", "서울로"),
])
def test_josa(word, particle, expected):
    assert josa(word, particle) == expected


# =============================================================================
# 감정 활용
# =============================================================================

@pytest.mark.parametrize("emotion, stem", [
    ("화남", "화나"),
    ("서운함", "서운하"),
    ("외로움", "외롭"),
    ("실망스러움", "실망스럽"),
    ("슬픔", "슬프"),
    ("힘듦", "힘들"),
    ("짜증", "짜증나"),
    ("좌절감", "좌절감을 느끼"),
    ("", "힘들"),
])
def test_emotion_stem(emotion, stem):
    assert emotion_stem(emotion) == stem


@pytest.mark.parametrize("stem, past", [
    ("화나", "화났어요"),
    ("억울하", "억울했어요"),
    ("외롭", "외로웠어요"),
    ("힘들", "힘들었어요"),
    ("슬프", "슬펐어요"),
    ("아프", "아팠어요"),
    ("모르", "몰랐어요"),
    ("배부르", "배불렀어요"),
    ("따르", "따랐어요"),
    ("걱정되", "걱정되었어요"),
    ("좌절감을 느끼", "좌절감을 느꼈어요"),
])
def test_past_polite_form(stem, past):
    assert past_polite_form(stem) == past


def test_describe_emotions_joins_with_connective():
    assert describe_emotions(["서운함", "당황함"]) == "서운하고 당황했어요"
    assert describe_emotions(["화남", "외로움", "실망스러움"]) == "화나고 외롭고 실망스러웠어요"


def test_describe_emotions_casual_and_default():
    assert describe_emotions(["서운함", "화남"], polite=False) == "서운하고 화났어"
    assert describe_emotions([]) == "힘들었어요"


# =============================================================================
# 욕구 문장
# =============================================================================

@pytest.mark.parametrize("need, phrase", [
    ("존중받고 싶었어요", "존중받는 것"),
    ("안정감을 느끼고 싶었어요", "안정감을 느끼는 것"),
    ("안전하길 바랐어요", "안전한 것"),
    ("함께 만들고 싶었어요", "함께 만드는 것"),
    ("자유", "자유"),
])
def test_need_to_noun_phrase(need, phrase):
    assert need_to_noun_phrase(need) == phrase


def test_describe_needs():
    assert describe_needs(["인정받고 싶었어요"]) == "인정받고 싶었어요"
    assert describe_needs(["존중받고 싶었어요", "배려받고 싶었어요"]) == "존중받고 싶고 배려받고 싶어요"
    assert describe_needs(["일이 제대로 되길 바랐어요", "소통하고 싶었어요"]) == "일이 제대로 되길 바랐고 소통하고 싶어요"
    assert describe_needs([]) == "존중받고 싶었어요"


def test_empathy_sentence():
    assert empathy_sentence(["존중받고 싶었어요"]) == "존중받는 것이 중요하셨군요."
    assert empathy_sentence(["존중받고 싶었어요", "이해받고 싶었어요"]) == \
        "존중받는 것과 이해받는 것이 중요하셨군요."
    assert empathy_sentence(["존중받고 싶었어요", "배려받고 싶었어요", "인정받고 싶었어요"]) == \
        "존중받는 것, 배려받는 것, 그리고 인정받는 것이 중요하셨군요."


@pytest.mark.parametrize("needs, sentence", [
    (["존중받고 싶었어요"], "저는 존중받고 싶어요"),
    (["안전하길 바랐어요"], "제 주변 환경이 안전했으면 좋겠어요"),
    (["존중받고 싶었어요", "배려받고 싶었어요"], "저는 존중받고 배려받고 싶어요"),
    (["소통하고 싶었어요"], "저는 소통하고 싶어요"),
    (["소통하고 싶었어요", "인정받고 싶었어요"], "저는 소통하고 싶고 인정받고 싶어요"),
    (["내가 한 일을 인정받고 싶었어요"], "제가 한 일을 인정받고 싶어요"),
    ([], "저는 존중받고 싶어요"),
])
def test_need_sentence(needs, sentence):
    assert need_sentence(needs) == sentence


# =============================================================================
# 부탁 문장
# =============================================================================

@pytest.mark.parametrize("raw, expected", [
    ("물건을 던지지 말아줄래?", "물건을 던지지 말아줄"),
    ("\"상대방에게 천천히 말해주세요.\"", "천천히 말해줄"),
    ("회의할 때, 내 말을 끝까지 들어줄", "내 말을 끝까지 들어줄"),
    ("늦을 것 같으면 미리 연락해줄", "늦을 것 같으면 미리 연락해줄"),
    ("미리 연락할 수 있을까요?", "미리 연락해줄"),
    ("일정을 공유", "일정을 공유해줄"),
    ("\"\"", None),
])
def test_normalize_request(raw, expected):
    assert normalize_request(raw) == expected


@pytest.mark.parametrize("req, polite", [
    ("내 말을 끝까지 들어줄", "내 말을 끝까지 들어주세요"),
    ("똑바로 해줄", "다시 해주세요"),
    ("미리 연락할", "미리 연락해주세요"),
    ("조금만 기다려주세요", "조금만 기다려주세요"),
])
def test_to_polite_request(req, polite):
    assert to_polite_request(req) == polite


def test_fallback_request_keywords():
    assert fallback_request("팀장님이 회의 중에 소리를 질렀어요", []) == "평소 목소리로 말해달라고 얘기해줄"
    assert fallback_request("경비 아저씨가 카드를 찍으라고 소리를 질렀어요", []) == \
        "평소 목소리로 카드를 다시 찍어달라고 얘기해줄"
    assert fallback_request("회의 중에 내 말을 듣지 않았어요", []) == "내 말을 끝까지 들어줄"
    assert fallback_request("이웃집 공사가 밤늦게까지 이어졌어요", ["안전하길 바랐어요"]) == \
        "내 주변 환경을 안전하고 편안하게 지켜줄"
    assert fallback_request("친구가 약속에 늦었어요", []) == "내 마음을 이해해줄"


# =============================================================================
# 상황 절 / LLM 메시지 보정
# =============================================================================

@pytest.mark.parametrize("situation, clause", [
    ("상사가 소리를 질렀어요", "상사가 소리를 질렀을 때"),
    ("동료가 내 자료를 가져갔다.", "동료가 내 자료를 가져갔을 때"),
    ("친구가 약속에 늦어요", "친구가 약속에 늦어서"),
    ("회의 때 말을 잘랐을 때", "회의 때 말을 잘랐을 때"),
    ("회의 중 상사의 고함", "회의 중 상사의 고함이 있었을 때"),
    ("상사가 회의에서 소리를 질렀습니다", "상사가 회의에서 소리를 질렀을 때"),
    ("친구가 약속에 늦습니다", "친구가 약속에 늦을 때"),
    ("팀장님이 매번 소리를 지릅니다", "팀장님이 매번 소리를 지를 때"),
    ("동료가 내 험담을 했대요", "동료가 내 험담을 했을 때"),
    ("친구가 나 없이 여행을 간대요", "친구가 나 없이 여행을 간다고 했을 때"),
    ("팀장님이 주말에도 나오래요", "팀장님이 주말에도 나오라고 했을 때"),
])
def test_to_when_clause(situation, clause):
    assert to_when_clause(situation) == clause


def test_repair_adds_situation_and_fixes_grammar():
    message = (
        "답답하했어요.\n"
        "저는 존중받고 싶어요, 배려받고 싶어요.\n"
        "다음부터는 미리 연락해줄래?"
    )
    repaired = repair_nvc_message(message, "친구가 약속에 30분 늦었어요")

    assert repaired == (
        "친구가 약속에 30분 늦었을 때, 답답했어요.\n"
        "저는 존중받고 싶고 배려받고 싶어요.\n"
        "다음부터는 미리 연락해주세요"
    )


def test_repair_dedupes_repeated_need_clause():
    message = (
        "회의에서 말이 잘렸을 때, 힘들했어요.\n"
        "저는 존중받고 싶고 존중받고 싶어요.\n"
        "다음부터는 끝까지 들어줄"
    )
    lines = repair_nvc_message(message, "회의에서 말이 잘렸어요").split("\n")

    assert lines[0] == "회의에서 말이 잘렸을 때, 힘들었어요."
    assert lines[1] == "저는 존중받고 싶어요."
    assert lines[2] == "다음부터는 끝까지 들어줄"


def test_repair_rewrites_request_ending_only_on_request_line():
    message = (
        "동료가 일을 대신 해줄 때, 서운했어요.\n"
        "저는 인정받고 싶어요.\n"
        "다음부터는 미리 말해줄래?"
    )
    lines = repair_nvc_message(message, "동료가 일을 대신 해줬어요").split("\n")

    assert lines[0] == "동료가 일을 대신 해줄 때, 서운했어요."
    assert lines[2] == "다음부터는 미리 말해주세요"
