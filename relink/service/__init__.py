"""LLM 호출 서비스 레이어 - 노드별 비즈니스 로직"""

# Errors
from .errors import RelinkError, map_error, ErrorInfo

# Observation
from .observation import is_specific_enough

# Suggestion
from .suggestion import suggest_emotions, suggest_needs, generate_request

# Message
from .message import (
    extract_conversation_data,
    parse_selection,
    generate_before_message,
    generate_nvc_data,
)

# Analysis
from .analysis import analyze, AnalysisSummary

__all__ = [
    # Errors
    "RelinkError",
    "map_error",
    "ErrorInfo",
    # Observation
    "is_specific_enough",
    # Suggestion
    "suggest_emotions",
    "suggest_needs",
    "generate_request",
    # Message
    "extract_conversation_data",
    "parse_selection",
    "generate_before_message",
    "generate_nvc_data",
    # Analysis
    "analyze",
    "AnalysisSummary",
]
