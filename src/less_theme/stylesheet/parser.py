"""Lark Transformer that converts compiled CSS into a Stylesheet model."""

from __future__ import annotations

import re
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import UnexpectedInput

from less_theme.stylesheet.errors import StylesheetParseError
from less_theme.stylesheet.model import AtRule, Comment, Declaration, Node, Rule, Stylesheet

__all__ = ["parse_stylesheet"]

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

_AT_RULE_RE = re.compile(r"@(?P<name>[-\w]+)\s*(?P<params>.*)", re.DOTALL)
_LINE_BREAK_RE = re.compile(r"\s*\n\s*")


def _normalise(text: str) -> str:
    """Join a multi-line selector or value onto one line."""
    return _LINE_BREAK_RE.sub(" ", text.strip())


def _split_prelude(tokens: list[Token]) -> tuple[list[Node], str]:
    """Separate comments from the text of a prelude."""
    comments: list[Node] = [Comment(str(t)) for t in tokens if t.type == "COMMENT"]
    text = "".join(str(t) for t in tokens if t.type != "COMMENT")
    return comments, _normalise(text)


def _flatten(items: list) -> list[Node]:
    nodes: list[Node] = []
    for item in items:
        nodes.extend(item)
    return nodes


def _statement(text: str) -> Node:
    if text.startswith("@"):
        match = _AT_RULE_RE.match(text)
        assert match is not None
        return AtRule(name=match.group("name"), params=match.group("params").strip())
    prop, _, value = text.partition(":")
    return Declaration(prop=prop.strip(), value=value.strip())


class CssTransformer(Transformer):
    """Build Stylesheet nodes bottom-up.

    Every rule callback except ``start`` returns a list of nodes so that
    comments found in a prelude can be emitted next to the node they precede.
    """

    def prelude(self, children: list[Token]) -> list[Token]:
        return list(children)

    def statement(self, children: list) -> list[Node]:
        comments, text = _split_prelude(children[0])
        if not text:
            return comments
        return [*comments, _statement(text)]

    def tail(self, children: list) -> list[Node]:
        # A declaration without a trailing semicolon, or a lone comment.
        return self.statement(children)

    def block(self, children: list) -> list[Node]:
        comments, text = _split_prelude(children[0])
        body = _flatten(children[1:])
        if text.startswith("@"):
            at_rule = _statement(text)
            assert isinstance(at_rule, AtRule)
            at_rule.nodes = body
            return [*comments, at_rule]
        return [*comments, Rule(selector=text, nodes=body)]

    def start(self, children: list) -> Stylesheet:
        return Stylesheet(nodes=_flatten(children))


_parser: Lark | None = None


def _get_parser() -> Lark:
    global _parser
    if _parser is None:
        _parser = Lark(
            GRAMMAR_PATH.read_text(encoding="utf-8"),
            parser="lalr",
            start="start",
        )
    return _parser


def parse_stylesheet(css: str) -> Stylesheet:
    """Parse compiled CSS text into a Stylesheet.

    Raises StylesheetParseError on unbalanced braces or unterminated strings.
    """
    try:
        tree = _get_parser().parse(css)
    except UnexpectedInput as exc:
        raise StylesheetParseError(
            f"Invalid CSS: {exc}",
            line=getattr(exc, "line", None),
            column=getattr(exc, "column", None),
        ) from exc
    return CssTransformer().transform(tree)
