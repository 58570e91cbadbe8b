from .hangul import josa, has_batchim
from .emotion_forms import emotion_stem, describe_emotions, past_polite_form, connective_form
from .need_forms import (
    DEFAULT_NEED,
    describe_needs,
    empathy_sentence,
    need_sentence,
    need_to_noun_phrase,
)
from .request_forms import normalize_request, to_polite_request, fallback_request
from .repair import repair_nvc_message, to_when_clause

__all__ = [
    "josa",
    "has_batchim",
    "emotion_stem",
    "describe_emotions",
    "past_polite_form",
    "connective_form",
    "DEFAULT_NEED",
    "describe_needs",
    "empathy_sentence",
    "need_sentence",
    "need_to_noun_phrase",
    "normalize_request",
    "to_polite_request",
    "fallback_request",
    "repair_nvc_message",
    "to_when_clause",
]
