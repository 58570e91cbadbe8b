from .emotion_suggester import suggest_emotions
from .need_suggester import suggest_needs
from .request_generator import generate_request
from .parsing import parse_list_response

__all__ = [
    "suggest_emotions",
    "suggest_needs",
    "generate_request",
    "parse_list_response",
]
