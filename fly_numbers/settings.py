from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Optional, Union

from .literal import Case

PAD_DEFAULT = "numbers_pad_default"
RECOGNIZE_NEGATIVE = "numbers_recognize_negative"
SEPARATOR_CHARS = "numbers_separator_chars"
HEX_CASE = "numbers_hex_case"
CURSOR_AT_END = "numbers_use_cursor_at_end_of_number"
SAVE_AFTER_CHANGE = "save_after_number_change"


@dataclass(frozen=True)
class RecognitionRules:
    recognize_negative: bool = True
    separator_chars: str = ""
    hex_case: Case = Case.PRESERVE
    accept_literal_at_point: bool = False


class PaddingPolicy(IntEnum):
    DEFAULT = 0
    INVERT = 1
    PADDED = 2
    UNPADDED = 3

    @classmethod
    def from_argument(cls, padded: Union[None, bool, str]) -> "PaddingPolicy":
        """`padded` as passed by a key binding: unset, "invert" or a bool."""
        if padded is None:
            return cls.DEFAULT
        if padded == "invert":
            return cls.INVERT
        if isinstance(padded, bool):
            return cls.PADDED if padded else cls.UNPADDED
        raise ValueError(f"padded must be a bool or 'invert', got {padded!r}")

    def resolve(self, pad_default: bool) -> bool:
        if self == PaddingPolicy.DEFAULT:
            return pad_default
        if self == PaddingPolicy.INVERT:
            return not pad_default
        return self == PaddingPolicy.PADDED


@dataclass(frozen=True)
class NumberSettings:
    """Snapshot of the user settings, taken once per command."""

    pad_default: bool = False
    recognize_negative: bool = True
    separator_chars: str = ""
    hex_case: Case = Case.PRESERVE
    cursor_at_end_of_number: bool = False
    save_after_change: bool = False

    @classmethod
    def from_settings(cls, settings: Any) -> "NumberSettings":
        """`settings` is anything with a `get(key, default)`, such as
        `sublime.Settings` or a dict."""
        separators: Optional[str] = settings.get(SEPARATOR_CHARS, "")
        if separators is None:
            separators = ""
        if not isinstance(separators, str):
            raise ValueError(
                f"{SEPARATOR_CHARS} must be a string, got {separators!r}"
            )
        return cls(
            pad_default=bool(settings.get(PAD_DEFAULT, False)),
            recognize_negative=bool(settings.get(RECOGNIZE_NEGATIVE, True)),
            separator_chars=separators,
            hex_case=Case.from_setting(settings.get(HEX_CASE, "preserve")),
            cursor_at_end_of_number=bool(settings.get(CURSOR_AT_END, False)),
            save_after_change=bool(settings.get(SAVE_AFTER_CHANGE, False)),
        )

    @property
    def rules(self) -> RecognitionRules:
        return RecognitionRules(
            recognize_negative=self.recognize_negative,
            separator_chars=self.separator_chars,
            hex_case=self.hex_case,
            accept_literal_at_point=self.cursor_at_end_of_number,
        )
