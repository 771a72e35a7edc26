from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, List, Optional, Tuple

Span = Tuple[int, int]
# (digits to the right of the separator, separator character)
Mark = Tuple[int, str]


class Base(IntEnum):
    BINARY = 2
    OCTAL = 8
    DECIMAL = 10
    HEX = 16


class Sign(IntEnum):
    NEGATIVE = -1
    POSITIVE = 1


class Case(IntEnum):
    PRESERVE = 0
    UPPER = 1
    LOWER = 2

    @classmethod
    def from_setting(cls, value: str) -> "Case":
        try:
            return cls[str(value).upper()]
        except KeyError:
            raise ValueError(
                f"Unknown hex case {value!r}, expected preserve, upper or lower"
            ) from None


PREFIXES: Dict[Base, str] = {
    Base.BINARY: "0b",
    Base.OCTAL: "0o",
    Base.DECIMAL: "",
    Base.HEX: "0x",
}

DIGITS: Dict[Base, str] = {
    Base.BINARY: "01",
    Base.OCTAL: "01234567",
    Base.DECIMAL: "0123456789",
    Base.HEX: "0123456789abcdefABCDEF",
}

FORMATS: Dict[Base, str] = {
    Base.BINARY: "b",
    Base.OCTAL: "o",
    Base.DECIMAL: "d",
    Base.HEX: "x",
}


@dataclass(frozen=True)
class NumericLiteral:
    base: Base
    sign: Sign
    magnitude: int
    digit_count: int
    leading_zero_count: int
    hex_case: Case
    separators: Tuple[Mark, ...]
    span: Span
    prefix: str = ""

    @property
    def value(self) -> int:
        return self.sign * self.magnitude

    @property
    def separator_positions(self) -> Tuple[int, ...]:
        """Offsets of the separators within the written digit run."""
        positions = []
        for i, (right, _) in enumerate(self.separators):
            positions.append(self.digit_count - right + i)
        return tuple(positions)


def _letter_case(digits: str, prefix: str) -> Case:
    letters = [c for c in digits if c.isalpha()]
    if letters and all(c.isupper() for c in letters):
        return Case.UPPER
    if letters and all(c.islower() for c in letters):
        return Case.LOWER
    # no letters, or mixed case: the prefix decides, else lower case
    if prefix[1:] == "X":
        return Case.UPPER
    return Case.PRESERVE


def parse(
    text: str, base: Base, separators: str = "", start: int = 0
) -> Optional[NumericLiteral]:
    """Splits `text` into sign, prefix and digit run.

    Returns None when the digit run is empty or holds a character that is
    neither a digit of `base` nor one of `separators`."""
    sign = Sign.POSITIVE
    body = text
    if body.startswith("-"):
        sign = Sign.NEGATIVE
        body = body[1:]

    prefix = ""
    if base != Base.DECIMAL:
        if body[:2].lower() != PREFIXES[base]:
            return None
        prefix, body = body[:2], body[2:]

    digits: List[str] = []
    seen: List[Mark] = []
    for ch in body:
        if ch in DIGITS[base]:
            digits.append(ch)
        elif ch in separators and digits:
            seen.append((len(digits), ch))
        else:
            return None

    if not digits or (seen and seen[-1][0] == len(digits)):
        return None

    run = "".join(digits)
    magnitude = int(run, base)
    if magnitude == 0:
        leading = 0
    else:
        leading = len(run) - len(run.lstrip("0"))

    return NumericLiteral(
        base=base,
        sign=sign,
        magnitude=magnitude,
        digit_count=len(run),
        leading_zero_count=leading,
        hex_case=_letter_case(run, prefix) if base == Base.HEX else Case.PRESERVE,
        separators=tuple((len(run) - left, ch) for left, ch in seen),
        span=(start, start + len(text)),
        prefix=prefix,
    )


def _period(literal: NumericLiteral) -> int:
    """Group width when the literal is fully grouped with a single separator
    at equal distances, otherwise 0."""
    marks = literal.separators
    if len({ch for _, ch in marks}) != 1:
        return 0
    rights = sorted(right for right, _ in marks)
    width = rights[0]
    if rights != [width * (i + 1) for i in range(len(rights))]:
        return 0
    if literal.digit_count - rights[-1] > width:
        return 0
    return width


def _group(digits: str, literal: NumericLiteral) -> str:
    if not literal.separators:
        return digits

    n = len(digits)
    if width := _period(literal):
        char = literal.separators[0][1]
        marks: List[Mark] = [(right, char) for right in range(width, n, width)]
    else:
        marks = list(literal.separators)

    at: Dict[int, str] = {}
    for right, ch in marks:
        if 0 < right < n:
            at[right] = at.get(right, "") + ch

    out = []
    for i, d in enumerate(digits):
        out.append(at.get(n - i, ""))
        out.append(d)
    return "".join(out)


def render(
    literal: NumericLiteral,
    value: int,
    padded: bool,
    case: Case = Case.PRESERVE,
    signed: bool = True,
) -> str:
    """Renders the signed `value` with the formatting of `literal`.

    Padding only ever widens the digit run to the original digit count; a
    longer magnitude is never truncated. A minus sign is written only when
    `signed`, otherwise the magnitude alone is rendered.

    With `Case.PRESERVE` hex digits follow the case the literal was written
    in. Literals without letters, or with mixed-case letters, fall back to
    lower case unless their prefix is an upper-case `X`."""
    digits = format(abs(value), FORMATS[literal.base])
    if padded:
        digits = digits.rjust(literal.digit_count, "0")

    if literal.base == Base.HEX:
        if case == Case.PRESERVE:
            case = literal.hex_case
        if case == Case.UPPER:
            digits = digits.upper()

    sign = "-" if value < 0 and signed else ""
    return sign + literal.prefix + _group(digits, literal)
