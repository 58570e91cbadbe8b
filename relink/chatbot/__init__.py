"""
Relink 대화 모듈
LangGraph 기반 단계별 NVC 대화 워크플로우
"""

from .state import Stage, ChatState
from .graph_manager import ChatBotManager

__all__ = ['Stage', 'ChatState', 'ChatBotManager']
__version__ = "1.0.0"
