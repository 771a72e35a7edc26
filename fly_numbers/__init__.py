from .driver import (
    TextBuffer,
    cursor_after,
    reject_before,
    shift_at_point,
    shift_block,
    shift_region,
)
from .literal import Base, Case, NumericLiteral, Sign, parse, render
from .locate import Candidate, find_next, never
from .settings import NumberSettings, PaddingPolicy, RecognitionRules
from .shift import Buffer, Shifted, ShiftRequest, shift

__all__ = [
    "Base",
    "Buffer",
    "Candidate",
    "Case",
    "NumberSettings",
    "NumericLiteral",
    "PaddingPolicy",
    "RecognitionRules",
    "ShiftRequest",
    "Shifted",
    "Sign",
    "TextBuffer",
    "cursor_after",
    "find_next",
    "never",
    "parse",
    "reject_before",
    "render",
    "shift",
    "shift_at_point",
    "shift_block",
    "shift_region",
]
