# codelines/markdown/highlighting/tokens.py
"""
Token tree produced by the lexer adapter and consumed by the line reconciler.

A tree is made of two node kinds:
- TextSpan: a literal piece of source text
- Classified: an inline node carrying token classes and child nodes

Once positioned, every node carries a Span with the inclusive 1-indexed
lines it covers in the code block text.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class Span:
    start: int
    end: int

    def covers(self, line: int) -> bool:
        return self.start <= line <= self.end


@dataclass(frozen=True)
class TextSpan:
    value: str
    span: Optional[Span] = None


@dataclass(frozen=True)
class Classified:
    classes: Tuple[str, ...] = ()
    children: Tuple["Token", ...] = field(default_factory=tuple)
    span: Optional[Span] = None


Token = Union[TextSpan, Classified]


def to_text(node: Token) -> str:
    """Concatenate every leaf value below ``node`` in document order."""
    if isinstance(node, TextSpan):
        return node.value
    return "".join(to_text(child) for child in node.children)
