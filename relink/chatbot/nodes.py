from .state import ChatState, Stage
from ..config import MAX_OBSERVATION_TURNS
from ..core.fallbacks import SHORT_REPLIES
from ..prompt.system_prompt import SYSTEM_PROMPT, CHAT_SYSTEM_TEMPLATE
from ..prompt.stage_prompts import (
    FEELING_TRANSITION_REPLY,
    VAGUE_OBSERVATION_PROMPT,
    VAGUE_OBSERVATION_FOLLOWUP_PROMPT,
    FEELING_REFLECTION_PROMPT,
    EMPATHY_GUIDANCE,
    EMPATHY_OPTIONS,
    RESULT_HEADLINE,
    NVC_ADVANTAGES,
    RESULT_STAGE_PROMPT,
)
from ..service import (
    is_specific_enough,
    suggest_emotions,
    suggest_needs,
    extract_conversation_data,
    parse_selection,
    generate_before_message,
    generate_nvc_data,
)
from ..service.errors import EmptyCompletionError
from ..service.grammar import DEFAULT_NEED, describe_emotions, empathy_sentence
from ..service.message.extractor import is_continue_reply, is_selection_message, user_contents
from ..utils.schemas import ChatResponse
import asyncio
import logging
from typing import Literal
from langgraph.types import Command
from langchain_core.messages import SystemMessage, HumanMessage, AIMessage
from langsmith import traceable

logger = logging.getLogger(__name__)

STAGE_NODES = {
    Stage.OBSERVATION.value: "observation_node",
    Stage.FEELING.value: "feeling_node",
    Stage.NEED.value: "need_node",
    Stage.EMPATHY.value: "empathy_node",
}

# 관찰 단계 입력 개수별 구체화 질문
VAGUE_PROMPTS = {
    1: VAGUE_OBSERVATION_PROMPT,
    2: VAGUE_OBSERVATION_FOLLOWUP_PROMPT,
}


async def pause(delay: float) -> None:
    """템플릿 응답 전 대기"""
    if delay > 0:
        await asyncio.sleep(delay)


def user_text(state: ChatState) -> str:
    return " ".join(user_contents(state["messages"]))


def last_user_message(state: ChatState) -> str:
    contents = user_contents(state["messages"])
    return contents[-1] if contents else ""


# =============================================================================
# 1. Stage Router Node - 현재 단계별 분기
# =============================================================================

@traceable(name="stage_router_node")
async def stage_router_node(state: ChatState) -> Command[Literal["observation_node", "feeling_node", "need_node", "empathy_node", "generic_node"]]:
    """현재 단계에 맞는 노드로 라우팅 (result 및 알 수 없는 단계는 일반 응답)"""
    stage = state["stage"]
    goto = STAGE_NODES.get(stage, "generic_node")
    logger.info(f"🔀 [StageRouter] stage={stage} → {goto}")

    update = {}
    if goto == "generic_node":
        update = {
            "stage_prompt": RESULT_STAGE_PROMPT if stage == Stage.RESULT.value else "",
            "next_stage": stage,
            "options": [],
        }
    return Command(update=update, goto=goto)


# =============================================================================
# 2. Observation Node - 상황 구체화
# =============================================================================

@traceable(name="observation_node")
async def observation_node(state: ChatState, suggestion_llm, response_delay: float) -> Command[Literal["generic_node", "__end__"]]:
    """상황이 구체적이면 감정 추천 후 feeling 단계로, 막연하면 구체화 질문"""
    contents = user_contents(state["messages"])
    count = len(contents)
    last_message = contents[-1] if contents else ""

    if count == 0:
        logger.info("[ObservationNode] 사용자 메시지 없음 → 일반 응답")
        return Command(
            update={"stage_prompt": "", "next_stage": Stage.OBSERVATION.value, "options": []},
            goto="generic_node"
        )

    forced = count >= MAX_OBSERVATION_TURNS
    if forced or is_specific_enough(last_message):
        # 첫 입력은 그 메시지만, 이후에는 모든 입력을 합쳐서 감정 추천
        situation = last_message if count == 1 else " ".join(contents)
        emotions = await suggest_emotions(situation, suggestion_llm)
        logger.info(f"[ObservationNode] ✅ feeling 단계로 이동 (count={count}, forced={forced})")

        await pause(response_delay)
        response = ChatResponse(
            content=FEELING_TRANSITION_REPLY,
            nextStage=Stage.FEELING.value,
            options=emotions,
            multiSelect=True,
        )
        return Command(update={"response": response}, goto="__end__")

    logger.info(f"[ObservationNode] ⚠️ 막연한 입력 (count={count}) → 구체화 질문")
    stage_prompt = VAGUE_PROMPTS[count].format(message=last_message)
    return Command(
        update={"stage_prompt": stage_prompt, "next_stage": Stage.OBSERVATION.value, "options": []},
        goto="generic_node"
    )


# =============================================================================
# 3. Feeling Node - 감정 반영 + 욕구 추천
# =============================================================================

@traceable(name="feeling_node")
async def feeling_node(state: ChatState, suggestion_llm) -> Command[Literal["generic_node"]]:
    """선택한 감정으로 욕구를 추천하고, 감정을 되짚는 질문은 일반 응답 노드에서 생성"""
    last_message = last_user_message(state)
    emotions = parse_selection(last_message) or [last_message.strip()]

    needs = await suggest_needs(user_text(state), emotions, suggestion_llm)
    logger.info(f"[FeelingNode] 선택 감정={emotions}, 추천 욕구 {len(needs)}개")

    stage_prompt = FEELING_REFLECTION_PROMPT.format(
        emotions=", ".join(emotions),
        emotion_display=describe_emotions(emotions),
    )
    return Command(
        update={"stage_prompt": stage_prompt, "next_stage": Stage.NEED.value, "options": needs},
        goto="generic_node"
    )


# =============================================================================
# 4. Need Node - 욕구 공감
# =============================================================================

@traceable(name="need_node")
async def need_node(state: ChatState, response_delay: float) -> Command[Literal["__end__"]]:
    """선택한 욕구에 공감하고 정리 단계 안내"""
    needs = parse_selection(last_user_message(state)) or [DEFAULT_NEED]

    conversation_data = extract_conversation_data(state["messages"])
    conversation_data.needs = needs

    content = f"{empathy_sentence(needs)}\n\n{EMPATHY_GUIDANCE}"
    logger.info(f"[NeedNode] 선택 욕구={needs}")

    await pause(response_delay)
    response = ChatResponse(
        content=content,
        nextStage=Stage.EMPATHY.value,
        options=list(EMPATHY_OPTIONS),
        multiSelect=False,
        showContinueButton=True,
        conversationData=conversation_data,
    )
    return Command(update={"response": response}, goto="__end__")


# =============================================================================
# 5. Empathy Node - NVC 메시지 완성
# =============================================================================

def recover_situation(contents: list, needs: list) -> str:
    """선택 메시지, 버튼 응답, 짧은 대답, 욕구 선택을 뺀 마지막 사용자 입력"""
    candidates = [
        content for content in contents
        if not is_selection_message(content)
        and not is_continue_reply(content)
        and len(content.strip()) > 3
        and content.strip() not in SHORT_REPLIES
        and parse_selection(content) != needs
    ]
    return candidates[-1] if candidates else ""


@traceable(name="empathy_node")
async def empathy_node(state: ChatState, chat_llm, response_delay: float) -> Command[Literal["__end__"]]:
    """대화 전체에서 상황/감정/욕구를 다시 모아 Before/After 메시지 생성"""
    conversation_data = extract_conversation_data(state["messages"], include_needs=True)

    if not conversation_data.situation.strip():
        conversation_data.situation = recover_situation(
            user_contents(state["messages"]), conversation_data.needs
        )
        logger.info(f"[EmpathyNode] 상황 재추출: {conversation_data.situation[:30]}")

    before_message = generate_before_message(conversation_data.situation, conversation_data.emotions)
    nvc_data = await generate_nvc_data(conversation_data, chat_llm)
    logger.info(f"[EmpathyNode] ✅ NVC 메시지 완성: {nvc_data.fullMessage[:40]}")

    await pause(response_delay)
    response = ChatResponse(
        content=RESULT_HEADLINE,
        nextStage=Stage.RESULT.value,
        options=[],
        multiSelect=False,
        beforeMessage=before_message,
        nvcData=nvc_data,
        advantages=list(NVC_ADVANTAGES),
    )
    return Command(update={"response": response}, goto="__end__")


# =============================================================================
# 6. Generic Node - 시스템 프롬프트 + 단계 지시로 LLM 응답
# =============================================================================

def to_langchain_messages(messages: list) -> list:
    return [
        HumanMessage(content=m.content) if m.role == "user" else AIMessage(content=m.content)
        for m in messages
    ]


@traceable(name="generic_node")
async def generic_node(state: ChatState, chat_llm) -> Command[Literal["__end__"]]:
    """단계별 지시를 붙인 시스템 프롬프트로 LLM 응답 생성

    Raises:
        EmptyCompletionError: LLM이 빈 응답을 반환한 경우
    """
    stage = state["stage"]
    next_stage = state.get("next_stage") or stage

    system_message = CHAT_SYSTEM_TEMPLATE.format(
        system_prompt=SYSTEM_PROMPT,
        stage=stage,
        stage_prompt=state.get("stage_prompt") or "",
    )

    response = await chat_llm.ainvoke([
        SystemMessage(content=system_message),
        *to_langchain_messages(state["messages"]),
    ])

    content = (response.content or "").strip()
    if not content:
        logger.error(f"[GenericNode] ❌ 빈 응답 (stage={stage})")
        raise EmptyCompletionError()

    logger.info(f"[GenericNode] 응답 생성 완료 - stage={stage} → {next_stage}")
    chat_response = ChatResponse(
        content=content,
        nextStage=next_stage,
        options=state.get("options") or [],
        multiSelect=next_stage in (Stage.NEED.value, Stage.FEELING.value),
    )
    return Command(update={"response": chat_response}, goto="__end__")
