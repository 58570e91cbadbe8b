"""POST /api/chat 단계별 흐름 테스트"""
from types import SimpleNamespace

import pytest

from relink.chatbot import nodes
from relink.prompt.stage_prompts import (
    CONTINUE_BUTTON_TEXT,
    EMPATHY_GUIDANCE,
    FEELING_TRANSITION_REPLY,
    NVC_ADVANTAGES,
    VAGUE_OBSERVATION_FOLLOWUP_PROMPT,
)
from relink.prompt.suggestion_prompts import EMOTION_SUGGESTION_USER_PROMPT

from llm_stubs import FailingLLM, RecordingLLM, fake_llm

SITUATION = "팀장님이 회의 중에 \"이것도 못 해?\"라고 소리를 질렀어요"


def conversation(*user_contents):
    messages = [{"role": "ai", "content": "어떤 일이 있었나요?"}]
    for content in user_contents:
        messages.append({"role": "user", "content": content})
        messages.append({"role": "ai", "content": "..."})
    return messages[:-1]


# =============================================================================
# 1. observation
# =============================================================================

def test_specific_first_message_moves_to_feeling(make_client):
    client = make_client(chat_llm=FailingLLM(), suggestion_llm=fake_llm('["화남", "서운함", "억울함"]'))

    response = client.post("/api/chat", json={"messages": conversation(SITUATION), "stage": "observation"})

    assert response.status_code == 200
    body = response.json()
    assert body["content"] == FEELING_TRANSITION_REPLY
    assert body["nextStage"] == "feeling"
    assert body["options"] == ["화남", "서운함", "억울함"]
    assert body["multiSelect"] is True
    assert "nvcData" not in body


def test_vague_first_message_asks_for_details(make_client):
    client = make_client(chat_llm=fake_llm("그 사람이 정확히 어떤 말을 했나요?"), suggestion_llm=FailingLLM())

    response = client.post("/api/chat", json={"messages": conversation("오늘 너무 힘들었어요"), "stage": "observation"})

    body = response.json()
    assert response.status_code == 200
    assert body["content"] == "그 사람이 정확히 어떤 말을 했나요?"
    assert body["nextStage"] == "observation"
    assert body["options"] == []
    assert body["multiSelect"] is False


def test_third_observation_moves_to_feeling_even_if_vague(make_client):
    suggestion_llm = FailingLLM()
    client = make_client(chat_llm=FailingLLM(), suggestion_llm=suggestion_llm)
    messages = conversation("오늘 너무 힘들었어요", "그냥 회사 때문에요", "그냥 다 별로예요")

    body = client.post("/api/chat", json={"messages": messages, "stage": "observation"}).json()

    assert body["nextStage"] == "feeling"
    assert body["options"] == ["화남", "서운함", "속상함", "불안함", "외로움", "답답함", "억울함", "실망스러움"]
    assert suggestion_llm.calls == 1


def test_specific_second_message_suggests_from_all_user_text(make_client):
    suggestion_llm = RecordingLLM('["화남", "억울함"]')
    client = make_client(chat_llm=FailingLLM(), suggestion_llm=suggestion_llm)
    messages = conversation("오늘 너무 힘들었어요", SITUATION)

    body = client.post("/api/chat", json={"messages": messages, "stage": "observation"}).json()

    assert body["nextStage"] == "feeling"
    assert body["options"] == ["화남", "억울함"]
    human_message = suggestion_llm.received[0][-1]
    assert human_message.content == EMOTION_SUGGESTION_USER_PROMPT.format(situation=f"오늘 너무 힘들었어요 {SITUATION}")


def test_vague_second_message_asks_more_directly(make_client):
    chat_llm = RecordingLLM("그렇군요. 그 사람이 구체적으로 어떤 말을 했나요?")
    client = make_client(chat_llm=chat_llm, suggestion_llm=FailingLLM())
    messages = conversation("오늘 너무 힘들었어요", "그냥 회사 때문에요")

    body = client.post("/api/chat", json={"messages": messages, "stage": "observation"}).json()

    assert body["nextStage"] == "observation"
    assert body["content"] == "그렇군요. 그 사람이 구체적으로 어떤 말을 했나요?"
    system_message = chat_llm.received[0][0]
    assert system_message.content.endswith(VAGUE_OBSERVATION_FOLLOWUP_PROMPT)


def test_roles_and_missing_content_are_normalized(make_client):
    client = make_client(chat_llm=FailingLLM(), suggestion_llm=fake_llm('["화남"]'))
    messages = [
        {"role": "system", "content": None},
        {"role": "user", "content": SITUATION},
    ]

    body = client.post("/api/chat", json={"messages": messages}).json()

    assert body["nextStage"] == "feeling"


# =============================================================================
# 2. feeling
# =============================================================================

def test_feeling_suggests_needs(make_client):
    client = make_client(
        chat_llm=fake_llm("화나고 서운했어요. 이런 감정이 든 이유가 뭘까요? 나에게 중요한 건 뭘까요?"),
        suggestion_llm=fake_llm('["존중받고 싶었어요", "이해받고 싶었어요"]'),
    )

    body = client.post("/api/chat", json={
        "messages": conversation(SITUATION, "화남, 서운함"),
        "stage": "feeling",
    }).json()

    assert body["content"].startswith("화나고 서운했어요.")
    assert body["nextStage"] == "need"
    assert body["options"] == ["존중받고 싶었어요", "이해받고 싶었어요"]
    assert body["multiSelect"] is True


# =============================================================================
# 3. need
# =============================================================================

def test_need_replies_with_empathy(make_client):
    client = make_client(chat_llm=FailingLLM(), suggestion_llm=FailingLLM())

    body = client.post("/api/chat", json={
        "messages": conversation(SITUATION, "화남, 서운함", "존중받고 싶었어요, 이해받고 싶었어요"),
        "stage": "need",
    }).json()

    assert body["content"] == f"존중받는 것과 이해받는 것이 중요하셨군요.\n\n{EMPATHY_GUIDANCE}"
    assert body["nextStage"] == "empathy"
    assert body["options"] == ["좋아요", "괜찮아요"]
    assert body["multiSelect"] is False
    assert body["showContinueButton"] is True
    assert body["conversationData"] == {
        "situation": SITUATION,
        "emotions": ["화남", "서운함"],
        "needs": ["존중받고 싶었어요", "이해받고 싶었어요"],
    }


def test_need_defaults_when_selection_is_empty(make_client):
    client = make_client(chat_llm=FailingLLM(), suggestion_llm=FailingLLM())

    body = client.post("/api/chat", json={
        "messages": conversation(SITUATION, "화남", " "),
        "stage": "need",
    }).json()

    assert body["content"].startswith("존중받는 것이 중요하셨군요.")
    assert body["conversationData"]["needs"] == ["존중받고 싶었어요"]


# =============================================================================
# 4. empathy → result
# =============================================================================

def test_empathy_builds_nvc_message_and_saves_conversation(make_client):
    chat_llm = fake_llm(
        "차분하게 말해줄",
        "회의에서 그 말을 들었을 때, 화나고 서운했어요.\n저는 존중받고 이해받고 싶어요.\n다음부터는 차분하게 말해줄래?",
    )
    client = make_client(chat_llm=chat_llm, suggestion_llm=FailingLLM())
    messages = conversation(SITUATION, "화남, 서운함", "존중받고 싶었어요, 이해받고 싶었어요", CONTINUE_BUTTON_TEXT)

    response = client.post("/api/chat", json={"messages": messages, "stage": "empathy"})

    assert response.status_code == 200
    body = response.json()
    assert body["content"] == "📝 이렇게 바뀌었어요"
    assert body["nextStage"] == "result"
    assert body["beforeMessage"] == '"왜 이렇게 못하니? 제대로 좀 해봐!"'
    assert body["advantages"] == NVC_ADVANTAGES
    assert body["nvcData"]["observation"] == SITUATION
    assert body["nvcData"]["emotions"] == "화남, 서운함"
    assert body["nvcData"]["needs"] == "존중받고 싶고 이해받고 싶어요"
    assert body["nvcData"]["request"] == "차분하게 말해줄"
    assert body["nvcData"]["fullMessage"].endswith("다음부터는 차분하게 말해주세요")

    saved = client.get(f"/api/conversations/{body['conversationId']}").json()
    assert saved["conversionText"] == body["nvcData"]["fullMessage"]
    assert saved["emotion"] == "화남, 서운함"
    assert saved["stage"] == "complete"
    assert [m["role"] for m in saved["messages"][:2]] == ["ai", "user"]
    assert saved["messages"][-2]["content"] == "📝 이렇게 바뀌었어요"
    assert saved["messages"][-1]["content"] == body["nvcData"]["fullMessage"]


def test_empathy_falls_back_to_template_when_llm_fails(make_client):
    client = make_client(chat_llm=FailingLLM(), suggestion_llm=FailingLLM())
    messages = conversation(SITUATION, "화남, 서운함", "존중받고 싶었어요", CONTINUE_BUTTON_TEXT)

    body = client.post("/api/chat", json={"messages": messages, "stage": "empathy"}).json()

    assert body["nextStage"] == "result"
    assert body["nvcData"]["fullMessage"] == (
        "팀장님이 회의 중에 \"이것도 못 해?\"라고 소리를 질렀을 때, 화나고 서운했어요.\n"
        "저는 존중받고 싶어요.\n"
        "다음부터는 평소 목소리로 말해달라고 얘기해주세요"
    )


def test_empathy_with_single_emotion_and_need(make_client):
    client = make_client(chat_llm=FailingLLM(), suggestion_llm=FailingLLM())
    messages = conversation(SITUATION, "서운함", "존중받고 싶었어요", CONTINUE_BUTTON_TEXT)

    body = client.post("/api/chat", json={"messages": messages, "stage": "empathy"}).json()

    assert body["nvcData"]["emotions"] == "서운함"
    assert body["nvcData"]["needs"] == "존중받고 싶었어요"
    assert body["nvcData"]["fullMessage"] == (
        "팀장님이 회의 중에 \"이것도 못 해?\"라고 소리를 질렀을 때, 서운했어요.\n"
        "저는 존중받고 싶어요.\n"
        "다음부터는 평소 목소리로 말해달라고 얘기해주세요"
    )


def test_empathy_recovers_situation_from_later_message(make_client):
    client = make_client(chat_llm=FailingLLM(), suggestion_llm=FailingLLM())
    messages = conversation("화남, 서운함", "존중받고 싶었어요", "동료가 내 자료를 가져갔어요", CONTINUE_BUTTON_TEXT)

    body = client.post("/api/chat", json={"messages": messages, "stage": "empathy"}).json()

    assert body["nvcData"]["observation"] == "동료가 내 자료를 가져갔어요"


# =============================================================================
# 5. result (일반 응답)
# =============================================================================

def test_result_stage_uses_generic_reply_without_saving(make_client):
    client = make_client(chat_llm=fake_llm("도움이 되었다니 다행이에요."), suggestion_llm=FailingLLM())

    body = client.post("/api/chat", json={
        "messages": conversation(SITUATION, "고마워요"),
        "stage": "result",
    }).json()

    assert body == {
        "content": "도움이 되었다니 다행이에요.",
        "nextStage": "result",
        "options": [],
        "multiSelect": False,
    }
    assert client.get("/api/conversations").json() == []


# =============================================================================
# 템플릿 응답 전 대기
# =============================================================================

@pytest.fixture
def sleeps(monkeypatch):
    """노드의 asyncio.sleep 호출을 기록"""
    delays = []

    async def sleep(delay):
        delays.append(delay)

    monkeypatch.setattr(nodes, "asyncio", SimpleNamespace(sleep=sleep))
    return delays


@pytest.mark.parametrize("stage, user_messages, chat_reply, expected", [
    ("observation", [SITUATION], None, [1.5]),
    ("observation", ["오늘 너무 힘들었어요"], "어떤 말을 들으셨나요?", []),
    ("feeling", [SITUATION, "화남"], "화났어요. 이유가 뭘까요?", []),
    ("need", [SITUATION, "화남", "존중받고 싶었어요"], None, [1.5]),
    ("empathy", [SITUATION, "화남", "존중받고 싶었어요", CONTINUE_BUTTON_TEXT], None, [1.5]),
    ("result", [SITUATION, "고마워요"], "도움이 되었다니 다행이에요.", []),
])
def test_delay_only_before_templated_replies(make_client, sleeps, stage, user_messages, chat_reply, expected):
    chat_llm = fake_llm(chat_reply) if chat_reply else FailingLLM()
    client = make_client(chat_llm=chat_llm, suggestion_llm=FailingLLM(), response_delay=1.5)

    response = client.post("/api/chat", json={"messages": conversation(*user_messages), "stage": stage})

    assert response.status_code == 200
    assert sleeps == expected


# =============================================================================
# 에러 처리
# =============================================================================

def test_empty_messages_returns_400(make_client):
    client = make_client(chat_llm=FailingLLM(), suggestion_llm=FailingLLM())

    response = client.post("/api/chat", json={"messages": [], "stage": "observation"})

    assert response.status_code == 400
    assert response.json() == {"error": "메시지가 필요해요."}


@pytest.mark.parametrize("api_key", [None, "", "your_api_key_here"])
def test_missing_api_key_returns_500(make_client, monkeypatch, api_key):
    if api_key is None:
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    else:
        monkeypatch.setenv("OPENAI_API_KEY", api_key)
    client = make_client()

    response = client.post("/api/chat", json={"messages": conversation(SITUATION), "stage": "observation"})

    assert response.status_code == 500
    assert "OPENAI_API_KEY" in response.json()["error"]


def test_llm_quota_error_is_mapped(make_client, monkeypatch):
    monkeypatch.delenv("RELINK_DEBUG", raising=False)
    client = make_client(chat_llm=FailingLLM("You exceeded your current quota"), suggestion_llm=FailingLLM())

    response = client.post("/api/chat", json={"messages": conversation("고마워요"), "stage": "result"})

    assert response.status_code == 500
    assert response.json() == {
        "error": "API 사용량 한도에 도달했어요. OpenAI 계정의 결제 정보와 사용량을 확인해주세요.",
        "errorCode": 500,
    }


def test_error_details_in_debug_mode(make_client, monkeypatch):
    monkeypatch.setenv("RELINK_DEBUG", "1")
    client = make_client(chat_llm=FailingLLM("connection reset"), suggestion_llm=FailingLLM())

    body = client.post("/api/chat", json={"messages": conversation("고마워요"), "stage": "result"}).json()

    assert body["error"] == "오류: connection reset"
    assert body["errorDetails"] == "connection reset"


def test_empty_completion_returns_500(make_client):
    client = make_client(chat_llm=fake_llm(""), suggestion_llm=FailingLLM())

    response = client.post("/api/chat", json={"messages": conversation("오늘 너무 힘들었어요"), "stage": "observation"})

    assert response.status_code == 500
    assert response.json() == {"error": "응답을 받지 못했어요. 다시 시도해주세요."}
