from dataclasses import dataclass
from typing import NamedTuple, Optional, Protocol

from .literal import Span, parse, render
from .locate import RejectSpan, find_next, never
from .settings import PaddingPolicy, RecognitionRules


class Buffer(Protocol):
    def size(self) -> int:
        ...

    def substr(self, a: int, b: int) -> str:
        ...

    def replace(self, a: int, b: int, text: str) -> None:
        ...


@dataclass(frozen=True)
class ShiftRequest:
    delta: int
    search_span: Span
    rules: RecognitionRules = RecognitionRules()
    padding: PaddingPolicy = PaddingPolicy.DEFAULT
    pad_default: bool = False
    reject_span: RejectSpan = never


class Shifted(NamedTuple):
    start: int
    end: int
    # length of the new text minus that of the literal it replaced
    growth: int


def shift(buffer: Buffer, request: ShiftRequest) -> Optional[Shifted]:
    start, end = request.search_span
    start = max(start, 0)
    end = min(end, buffer.size())
    if start >= end:
        return None

    # one character of context for the sign lookbehind
    lo = max(start - 1, 0)
    text = buffer.substr(lo, end)
    rules = request.rules

    def reject(span: Span) -> bool:
        return request.reject_span((span[0] + lo, span[1] + lo))

    pos = start - lo
    while (found := find_next(text, pos, end - lo, rules, reject)) is not None:
        literal = parse(
            text[found.start : found.end],
            found.base,
            rules.separator_chars,
            found.start + lo,
        )
        if literal is None:
            pos = found.start + 1
            continue

        padded = literal.leading_zero_count > 0 or request.padding.resolve(
            request.pad_default
        )
        new_text = render(
            literal,
            literal.value + request.delta,
            padded,
            rules.hex_case,
            rules.recognize_negative,
        )
        a, b = literal.span
        buffer.replace(a, b, new_text)
        return Shifted(a, a + len(new_text), len(new_text) - (b - a))
    return None
