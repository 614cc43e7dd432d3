"""Token types produced by the pattern compiler."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Union

from .models import TokenKind


@dataclass(frozen=True)
class Span:
    """Index range over a borrowed string; the substring is rebuilt on demand."""

    source: str = field(repr=False)
    start: int
    end: int

    @property
    def text(self) -> str:
        return self.source[self.start:self.end]

    def __len__(self) -> int:
        return self.end - self.start

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:  # pragma: no cover - debug convenience
        return f"Span({self.text!r}, {self.start}, {self.end})"


@dataclass(frozen=True)
class Literal:
    """A run of ordinary characters that must match exactly."""

    span: Span
    kind: ClassVar[TokenKind] = TokenKind.LITERAL

    @property
    def text(self) -> str:
        return self.span.text


@dataclass(frozen=True)
class Alternatives:
    """An alternation group; ``span`` covers the markers, ``options`` the text between them."""

    span: Span
    options: tuple[Span, ...]
    kind: ClassVar[TokenKind] = TokenKind.ALTERNATIVES

    @property
    def texts(self) -> list[str]:
        return [option.text for option in self.options]


@dataclass(frozen=True)
class Wildcard:
    span: Span
    kind: ClassVar[TokenKind] = TokenKind.WILDCARD


Token = Union[Literal, Alternatives, Wildcard]


def token_to_json(token: Token) -> dict[str, object]:
    payload: dict[str, object] = {
        "kind": token.kind.value,
        "pattern": token.span.text,
        "start": token.span.start,
        "end": token.span.end,
    }
    if isinstance(token, Literal):
        payload["text"] = token.text
    elif isinstance(token, Alternatives):
        payload["options"] = token.texts
    return payload
