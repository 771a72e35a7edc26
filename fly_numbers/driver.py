from typing import List, Optional, Sequence

from .literal import Span
from .locate import RejectSpan, never
from .settings import PaddingPolicy, RecognitionRules
from .shift import Buffer, Shifted, ShiftRequest, shift


class TextBuffer:
    """In-memory stand-in for an editor buffer."""

    def __init__(self, text: str = "") -> None:
        self.text = text

    def size(self) -> int:
        return len(self.text)

    def substr(self, a: int, b: int) -> str:
        return self.text[a:b]

    def replace(self, a: int, b: int, text: str) -> None:
        self.text = self.text[:a] + text + self.text[b:]

    def line(self, point: int) -> Span:
        start = self.text.rfind("\n", 0, point) + 1
        end = self.text.find("\n", point)
        return (start, len(self.text) if end == -1 else end)


def reject_before(point: int, inclusive: bool = True) -> RejectSpan:
    """Rejects literals ending before `point`, or at it when `inclusive`."""

    def reject(span: Span) -> bool:
        return span[1] <= point if inclusive else span[1] < point

    return reject


def shift_region(
    buffer: Buffer,
    delta: int,
    region: Span,
    rules: RecognitionRules = RecognitionRules(),
    padding: PaddingPolicy = PaddingPolicy.DEFAULT,
    pad_default: bool = False,
    incremental: bool = False,
    applied: int = 0,
    reject_span: RejectSpan = never,
) -> List[Shifted]:
    """Shifts every literal in `region`, left to right.

    With `incremental` the n-th literal overall is shifted by `delta * n`;
    `applied` is how many literals were already shifted by the same command."""
    cursor, end = region
    done: List[Shifted] = []
    while cursor < end:
        n = applied + len(done) + 1
        request = ShiftRequest(
            delta=delta * n if incremental else delta,
            search_span=(cursor, end),
            rules=rules,
            padding=padding,
            pad_default=pad_default,
            reject_span=reject_span,
        )
        if (result := shift(buffer, request)) is None:
            break
        done.append(result)
        cursor = result.end
        end += result.growth
    return done


def shift_block(
    buffer: Buffer,
    delta: int,
    rows: Sequence[Span],
    rules: RecognitionRules = RecognitionRules(),
    padding: PaddingPolicy = PaddingPolicy.DEFAULT,
    pad_default: bool = False,
    incremental: bool = False,
) -> List[Shifted]:
    """Runs `shift_region` over each row, top to bottom.

    Rows are offsets into the buffer before any edit; later rows are moved
    by the growth of the rewrites above them. Overlapping rows are merged
    so no literal is shifted twice."""
    merged: List[Span] = []
    for a, b in sorted(rows):
        if merged and a <= merged[-1][1]:
            merged[-1] = (merged[-1][0], max(merged[-1][1], b))
        else:
            merged.append((a, b))

    done: List[Shifted] = []
    drift = 0
    for a, b in merged:
        shifted = shift_region(
            buffer,
            delta,
            (a + drift, b + drift),
            rules,
            padding,
            pad_default,
            incremental,
            applied=len(done),
        )
        drift += sum(s.growth for s in shifted)
        done.extend(shifted)
    return done


def shift_at_point(
    buffer: Buffer,
    delta: int,
    point: int,
    line: Span,
    rules: RecognitionRules = RecognitionRules(),
    padding: PaddingPolicy = PaddingPolicy.DEFAULT,
    pad_default: bool = False,
) -> Optional[Shifted]:
    """Shifts the literal under `point`, or the first one after it on `line`.

    A literal ending exactly at `point` only counts when the rules accept a
    literal at point."""
    request = ShiftRequest(
        delta=delta,
        search_span=line,
        rules=rules,
        padding=padding,
        pad_default=pad_default,
        reject_span=reject_before(point, not rules.accept_literal_at_point),
    )
    return shift(buffer, request)


def cursor_after(shifted: Shifted) -> int:
    """The cursor rests on the last character of the rewritten literal."""
    return max(shifted.end - 1, shifted.start)
