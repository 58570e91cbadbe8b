"""
LangGraph 워크플로우 - 단계별 노드 구성
"""

from functools import partial
from langgraph.graph import StateGraph
from .state import ChatState
from .nodes import (
    stage_router_node,
    observation_node,
    feeling_node,
    need_node,
    empathy_node,
    generic_node,
)


def build_workflow_graph(chat_llm, suggestion_llm, response_delay: float) -> StateGraph:
    """대화 단계 워크플로우 그래프 구성

    START → stage_router_node → (단계별 노드) → END

    - observation_node: 구체화 질문 또는 감정 추천
    - feeling_node: 욕구 추천 후 generic_node에서 감정 반영 질문
    - need_node: 욕구 공감 + 정리 안내
    - empathy_node: Before/After NVC 메시지
    - generic_node: 시스템 프롬프트 + 단계 지시로 LLM 응답
    """

    # StateGraph 생성
    workflow = StateGraph(ChatState)

    workflow.add_node("stage_router_node", stage_router_node)
    workflow.add_node(
        "observation_node",
        partial(observation_node, suggestion_llm=suggestion_llm, response_delay=response_delay)
    )
    workflow.add_node("feeling_node", partial(feeling_node, suggestion_llm=suggestion_llm))
    workflow.add_node("need_node", partial(need_node, response_delay=response_delay))
    workflow.add_node(
        "empathy_node",
        partial(empathy_node, chat_llm=chat_llm, response_delay=response_delay)
    )
    workflow.add_node("generic_node", partial(generic_node, chat_llm=chat_llm))

    # 시작점 설정
    workflow.set_entry_point("stage_router_node")

    # 노드 간 이동은 Command의 goto로 처리

    return workflow.compile()
