"""Data models shared across the globtrace engine."""
from __future__ import annotations

import enum
from dataclasses import dataclass


class TokenKind(str, enum.Enum):
    LITERAL = "literal"
    ALTERNATIVES = "alternatives"
    WILDCARD = "wildcard"


@dataclass(frozen=True)
class PatternSyntax:
    """Marker characters of the pattern mini-language.

    wildcard: matches exactly one character of the candidate
    group_open, group_close: delimit an alternation group
    separator: splits the options inside a group

    The defaults give the standard language: ``.``, ``(``, ``)`` and ``|``.
    Each marker must be a single character and all four must differ.
    """
    wildcard: str = "."
    group_open: str = "("
    group_close: str = ")"
    separator: str = "|"

    def __post_init__(self) -> None:
        markers = self.to_json()
        for name, value in markers.items():
            if not isinstance(value, str) or len(value) != 1:
                raise ValueError(f"{name} marker must be a single character, got {value!r}")
        if len(set(markers.values())) != len(markers):
            raise ValueError(f"pattern markers must be distinct: {markers}")

    def to_json(self) -> dict[str, str]:
        return {
            "wildcard": self.wildcard,
            "group_open": self.group_open,
            "group_close": self.group_close,
            "separator": self.separator,
        }


DEFAULT_SYNTAX = PatternSyntax()
