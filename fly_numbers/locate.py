import re
from functools import lru_cache
from re import Pattern
from typing import Callable, NamedTuple, Optional

from .literal import DIGITS, Base, Span
from .settings import RecognitionRules

RejectSpan = Callable[[Span], bool]


class Candidate(NamedTuple):
    start: int
    end: int
    base: Base

    @property
    def span(self) -> Span:
        return (self.start, self.end)


def never(span: Span) -> bool:
    return False


def _run(digits: str, separators: str) -> str:
    if not separators:
        return f"[{digits}]+"
    return f"[{digits}](?:[{separators}]*[{digits}])*"


@lru_cache(maxsize=32)
def number_pattern(recognize_negative: bool, separators: str) -> Pattern:
    """Alternatives are tried in order at each start, so a prefixed literal
    wins over the decimal run of its leading zero."""
    seps = re.escape("".join(sorted(set(separators))))
    sign = r"(?:(?<!\w)-)?" if recognize_negative else ""
    return re.compile(
        sign
        + "(?:"
        + f"(?P<hex>0[xX]{_run(DIGITS[Base.HEX], seps)})"
        + f"|(?P<binary>0[bB]{_run(DIGITS[Base.BINARY], seps)})"
        + f"|(?P<octal>0[oO]{_run(DIGITS[Base.OCTAL], seps)})"
        + f"|(?P<decimal>{_run(DIGITS[Base.DECIMAL], seps)})"
        + ")"
    )


GROUPS = {
    "hex": Base.HEX,
    "binary": Base.BINARY,
    "octal": Base.OCTAL,
    "decimal": Base.DECIMAL,
}


def find_next(
    text: str,
    scan_start: int,
    scan_end: int,
    rules: RecognitionRules = RecognitionRules(),
    reject_span: RejectSpan = never,
) -> Optional[Candidate]:
    """First literal in text[scan_start:scan_end] that `reject_span` lets
    through.

    A rejected candidate resumes the scan one character after its start, so
    a later literal overlapping it can still be found and every pass makes
    progress."""
    pattern = number_pattern(rules.recognize_negative, rules.separator_chars)
    scan_end = min(scan_end, len(text))
    pos = scan_start
    while pos < scan_end:
        m = pattern.search(text, pos, scan_end)
        if m is None:
            return None
        span = m.span()
        if reject_span(span):
            pos = span[0] + 1
            continue
        return Candidate(span[0], span[1], GROUPS[m.lastgroup])  # type: ignore
    return None
