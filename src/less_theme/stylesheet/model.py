"""Stylesheet model: the rule tree of a compiled CSS file."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Union


@dataclass
class Declaration:
    """A ``property: value`` pair inside a rule."""

    prop: str
    value: str

    def to_css(self) -> str:
        return f"{self.prop}: {self.value};"


@dataclass
class Comment:
    text: str  # including the /* */ delimiters

    def to_css(self) -> str:
        return self.text


@dataclass
class Rule:
    """A selector with its block of declarations."""

    selector: str
    nodes: list[Node] = field(default_factory=list)

    @property
    def declarations(self) -> list[Declaration]:
        return [n for n in self.nodes if isinstance(n, Declaration)]

    def to_css(self) -> str:
        # One rule per line keeps line based deduplication safe.
        body = "".join(n.to_css() for n in self.nodes)
        return f"{self.selector} {{{body}}}"


@dataclass
class AtRule:
    """An ``@name params`` statement, with a block when *nodes* is not None."""

    name: str
    params: str = ""
    nodes: list[Node] | None = None

    def to_css(self) -> str:
        head = f"@{self.name} {self.params}".rstrip()
        if self.nodes is None:
            return f"{head};"
        inner = "\n".join(n.to_css() for n in self.nodes)
        return f"{head} {{\n{inner}\n}}" if inner else f"{head} {{}}"


Node = Union[Declaration, Comment, Rule, AtRule]


@dataclass
class Stylesheet:
    """A parsed stylesheet: top-level nodes in source order."""

    nodes: list[Node] = field(default_factory=list)

    def walk(self) -> Iterator[Node]:
        """Yield every node depth-first, parents before children."""
        stack = list(reversed(self.nodes))
        while stack:
            node = stack.pop()
            yield node
            children = getattr(node, "nodes", None)
            if children:
                stack.extend(reversed(children))

    @property
    def rules(self) -> list[Rule]:
        return [n for n in self.walk() if isinstance(n, Rule)]

    def to_css(self) -> str:
        if not self.nodes:
            return ""
        return "\n".join(n.to_css() for n in self.nodes) + "\n"
