"""Tests for the pattern compiler."""

import logging

import pytest

from globtrace import MalformedPatternError, PatternSyntax, compile_pattern, tokenize_pattern
from globtrace.engine.models import TokenKind
from globtrace.engine.tokens import Alternatives, Literal, Wildcard


def _describe(pattern: str) -> list[tuple[str, object]]:
    described: list[tuple[str, object]] = []
    for token in tokenize_pattern(pattern):
        if isinstance(token, Alternatives):
            described.append((token.kind.value, token.texts))
        else:
            described.append((token.kind.value, token.span.text))
    return described


def test_compile_mixed_pattern() -> None:
    matcher = compile_pattern("abc(d|e|f).")
    literal, group, wildcard = matcher.tokens
    assert isinstance(literal, Literal)
    assert literal.text == "abc"
    assert isinstance(group, Alternatives)
    assert group.texts == ["d", "e", "f"]
    assert group.span.text == "(d|e|f)"
    assert isinstance(wildcard, Wildcard)
    assert (wildcard.span.start, wildcard.span.end) == (10, 11)
    assert matcher.most_tokens_matched == 0
    assert matcher.pattern == "abc(d|e|f)."


@pytest.mark.parametrize(
    "pattern,expected",
    [
        ("", []),
        ("abc", [("literal", "abc")]),
        ("..", [("wildcard", "."), ("wildcard", ".")]),
        ("(a|b)", [("alternatives", ["a", "b"])]),
        ("()", [("alternatives", [""])]),
        ("(|a|)", [("alternatives", ["", "a", ""])]),
        ("x(a)y", [("literal", "x"), ("alternatives", ["a"]), ("literal", "y")]),
        ("a)b|c", [("literal", "a)b|c")]),
        ("((a|b)", [("alternatives", ["(a", "b"])]),
        ("(a))", [("alternatives", ["a"]), ("literal", ")")]),
        ("a.b(c)", [("literal", "a"), ("wildcard", "."), ("literal", "b"), ("alternatives", ["c"])]),
        ("é.ü", [("literal", "é"), ("wildcard", "."), ("literal", "ü")]),
    ],
    ids=[
        "empty",
        "literal_only",
        "wildcards",
        "group_only",
        "empty_group",
        "empty_options",
        "group_between_literals",
        "stray_close_and_pipe",
        "open_inside_group",
        "close_after_group",
        "mixed",
        "unicode",
    ],
)
def test_tokenize_shapes(pattern: str, expected: list[tuple[str, object]]) -> None:
    assert _describe(pattern) == expected


@pytest.mark.parametrize(
    "pattern",
    ["", "abc(d|e|f).", "(x|y)(z)", "a)b.c(|)d", "..(.|)", "héllo(wörld|💪)."],
)
def test_token_spans_reconstruct_pattern(pattern: str) -> None:
    tokens = tokenize_pattern(pattern)
    assert "".join(token.span.text for token in tokens) == pattern
    for token in tokens:
        assert token.span.source is pattern
        if isinstance(token, Literal):
            assert token.text


@pytest.mark.parametrize(
    "pattern,position",
    [("abc(d|e|f.", 3), ("(", 0), ("a(b)c(d", 5), ("x(y|z", 1)],
    ids=["unclosed_group", "lone_open", "second_group_unclosed", "unclosed_tail"],
)
def test_unterminated_group(pattern: str, position: int) -> None:
    with pytest.raises(MalformedPatternError) as excinfo:
        compile_pattern(pattern)
    assert excinfo.value.pattern == pattern
    assert excinfo.value.position == position
    assert isinstance(excinfo.value, ValueError)
    assert "')'" in str(excinfo.value)


def test_custom_syntax() -> None:
    syntax = PatternSyntax(wildcard="?", group_open="{", group_close="}", separator=",")
    matcher = compile_pattern("a.{x,y}?", syntax)
    assert [token.kind for token in matcher.tokens] == [
        TokenKind.LITERAL,
        TokenKind.ALTERNATIVES,
        TokenKind.WILDCARD,
    ]
    assert matcher.tokens[0].text == "a."
    assert matcher.tokens[1].texts == ["x", "y"]
    assert matcher.syntax is syntax


def test_custom_syntax_unterminated_group() -> None:
    syntax = PatternSyntax(group_open="{", group_close="}")
    with pytest.raises(MalformedPatternError, match="'}'"):
        compile_pattern("ab{c", syntax)
    # Default group markers are plain text under the custom syntax.
    assert compile_pattern("ab(c", syntax).tokens[0].text == "ab(c"


def test_compile_logs_token_count(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="globtrace")
    compile_pattern("a.b")
    assert "compiled 'a.b' into 3 tokens" in caplog.text
