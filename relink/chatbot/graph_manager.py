"""
그래프 관리 모듈 - 대화 워크플로우 실행 및 완료된 대화 저장
"""

from typing import Dict, List, Optional, Tuple
import logging
from langgraph.graph.state import CompiledStateGraph

from .workflow import build_workflow_graph
from .state import ChatState, Stage
from ..config import RESPONSE_DELAY_SECONDS
from ..config.config import is_debug
from ..utils.models import check_api_key, get_chat_llm, get_suggestion_llm
from ..utils.schemas import ChatMessage, ChatResponse
from ..service.errors import RelinkError, MissingAPIKeyError, EmptyMessagesError, map_error
from ..database import build_conversation, save_conversation

logger = logging.getLogger(__name__)


class ChatBotManager:
    """챗봇 전체 관리 클래스"""

    def __init__(self, database, chat_llm=None, suggestion_llm=None, response_delay: float = RESPONSE_DELAY_SECONDS):
        self.db = database
        self.chat_llm = chat_llm
        self.suggestion_llm = suggestion_llm
        self.response_delay = response_delay
        self.graph: Optional[CompiledStateGraph] = None

    async def initialize(self):
        """챗봇 매니저 초기화 (API 키가 없으면 첫 요청 때 다시 시도)"""
        try:
            self.get_graph()
            logger.info("ChatBotManager 초기화 완료")
        except MissingAPIKeyError:
            logger.warning("⚠️ OPENAI_API_KEY가 설정되지 않았습니다. 대화 요청 시 에러를 반환합니다.")

    def get_graph(self) -> CompiledStateGraph:
        """워크플로우 그래프 반환 (없으면 LLM 준비 후 생성)

        Raises:
            MissingAPIKeyError: 주입된 LLM이 없고 API 키도 없는 경우
        """
        if self.graph is None:
            if self.chat_llm is None or self.suggestion_llm is None:
                check_api_key()
                self.chat_llm = self.chat_llm or get_chat_llm()
                self.suggestion_llm = self.suggestion_llm or get_suggestion_llm()

            self.graph = build_workflow_graph(self.chat_llm, self.suggestion_llm, self.response_delay)
            logger.info("워크플로우 그래프 생성 완료")

        return self.graph

    async def handle_chat(self, messages: List[ChatMessage], stage: str) -> Tuple[Dict, int]:
        """대화 처리 - 워크플로우 진입점

        Args:
            messages: 정규화된 대화 메시지
            stage: 현재 단계

        Returns:
            (응답 JSON, HTTP 상태 코드)
        """
        try:
            graph = self.get_graph()

            if not messages:
                raise EmptyMessagesError()

            initial_state = ChatState(
                messages=messages,
                stage=stage,
                stage_prompt="",
                next_stage=stage,
                options=[],
                response=None,
            )

            # 워크플로우 실행
            final_state = await graph.ainvoke(initial_state)
            response: ChatResponse = final_state["response"]

        except RelinkError as e:
            logger.warning(f"[ChatBotManager] {type(e).__name__}: {e.user_message}")
            return {"error": e.user_message}, e.status_code

        except Exception as e:
            logger.error(f"[ChatBotManager] 대화 처리 실패: {e}")
            error = map_error(e, debug=is_debug())
            body = {"error": error.message, "errorCode": error.code}
            if error.details:
                body["errorDetails"] = error.details
            return body, 500

        if response.nextStage == Stage.RESULT.value and response.nvcData and stage != Stage.RESULT.value:
            response.conversationId = await self.save_completed_conversation(messages, response)

        return response.to_response(), 200

    async def save_completed_conversation(self, messages: List[ChatMessage], response: ChatResponse) -> Optional[str]:
        """완성된 대화 저장 (실패해도 응답은 그대로 반환)"""
        try:
            conversation = build_conversation(messages, response.content, response.nvcData)
            await save_conversation(self.db, conversation)
            return conversation.id
        except Exception as e:
            logger.error(f"[ChatBotManager] 대화 저장 실패: {e}")
            return None


# 싱글톤 인스턴스는 main.py에서 생성
