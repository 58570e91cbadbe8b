from .extractor import extract_conversation_data, parse_selection, is_selection_message
from .before_message import generate_before_message
from .composer import generate_nvc_data, compose_nvc_message

__all__ = [
    "extract_conversation_data",
    "parse_selection",
    "is_selection_message",
    "generate_before_message",
    "generate_nvc_data",
    "compose_nvc_message",
]
