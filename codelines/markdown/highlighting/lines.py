# codelines/markdown/highlighting/lines.py
"""
Regroup a token tree into one container per source line.

Lexer output is grouped by token, not by line: a block comment can run over
several lines and a line can hold many tokens. Regrouping happens in two
passes over immutable trees:

1. Positioning. A pre-order fold threads a line cursor through the tree.
   Every text leaf containing line breaks is cut into one leaf per line
   (each piece keeps its trailing "\\n"), and gets the line it sits on.
   Classified nodes then cover the lines of their children.

2. Extraction. For each line, the positioned tree is pruned down to the
   nodes covering that line. Ancestors of a kept leaf are kept, so a
   comment spanning lines 2-4 shows up, split, in each of those lines.

Each resulting LineContainer is then annotated with the classes used in the
output markup: "code-line" always, plus "line-number", "highlight-line",
"inserted" and "deleted" as directed by the block metadata.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from .metadata import BlockMetadata
from .tokens import Classified, Span, TextSpan, Token, to_text

CODE_LINE_CLASS = "code-line"
LINE_NUMBER_CLASS = "line-number"
HIGHLIGHT_LINE_CLASS = "highlight-line"
INSERTED_CLASS = "inserted"
DELETED_CLASS = "deleted"


@dataclass(frozen=True)
class LineContainer:
    index: int
    children: Tuple[Token, ...]
    classes: Tuple[str, ...] = (CODE_LINE_CLASS,)
    line_number: Optional[int] = None

    @property
    def text(self) -> str:
        return "".join(to_text(child) for child in self.children)


def split_source_lines(text: str) -> List[str]:
    """
    Split ``text`` on line breaks, dropping the empty or blank remainder
    left behind by a trailing break.
    """
    lines = text.split("\n")
    if lines and not lines[-1].strip():
        lines.pop()
    return lines


def _split_text(cursor: int, leaf: TextSpan) -> Tuple[int, Tuple[TextSpan, ...]]:
    pieces = leaf.value.split("\n")
    positioned = []
    for offset, piece in enumerate(pieces):
        is_last = offset == len(pieces) - 1
        value = piece if is_last else piece + "\n"
        if not value:
            continue
        line = cursor + offset
        positioned.append(TextSpan(value, Span(line, line)))
    return cursor + len(pieces) - 1, tuple(positioned)


def position_node(cursor: int, node: Token) -> Tuple[int, Tuple[Token, ...]]:
    """
    Position ``node`` starting at line ``cursor``.

    Returns the cursor after the node and the positioned replacement nodes;
    a text leaf may be replaced by several single-line leaves.
    """
    if isinstance(node, TextSpan):
        return _split_text(cursor, node)

    children: List[Token] = []
    for child in node.children:
        cursor, positioned = position_node(cursor, child)
        children.extend(positioned)

    if children:
        span = Span(
            min(child.span.start for child in children),
            max(child.span.end for child in children),
        )
    else:
        span = Span(cursor, cursor)
    return cursor, (Classified(node.classes, tuple(children), span),)


def position_tree(root: Classified) -> Classified:
    _, (positioned,) = position_node(1, root)
    return positioned


def extract_line(node: Token, line: int) -> Optional[Token]:
    """
    Prune a positioned tree down to the content of ``line``.

    Classified nodes left without any children are dropped.
    """
    if node.span is None or not node.span.covers(line):
        return None
    if isinstance(node, TextSpan):
        return node

    children = []
    for child in node.children:
        kept = extract_line(child, line)
        if kept is not None:
            children.append(kept)
    if not children:
        return None
    return Classified(node.classes, tuple(children), node.span)


def annotate_line(line: LineContainer, metadata: BlockMetadata) -> LineContainer:
    classes = list(line.classes)
    line_number = None

    if metadata.show_line_numbers:
        line_number = line.index + metadata.start_line - 1
        classes.append(LINE_NUMBER_CLASS)

    if line.index in metadata.highlight_lines:
        classes.append(HIGHLIGHT_LINE_CLASS)

    if metadata.language is not None and metadata.language.is_diff:
        marker = line.text[:1]
        if marker == "+":
            classes.append(INSERTED_CLASS)
        elif marker == "-":
            classes.append(DELETED_CLASS)

    return LineContainer(line.index, line.children, tuple(classes), line_number)


def build_lines(
    text: str,
    metadata: BlockMetadata,
    root: Optional[Classified] = None,
) -> List[LineContainer]:
    """
    Build the annotated line containers for a code block.

    ``root`` is the lexer's token tree for ``text``; without one, every line
    holds its literal text.
    """
    if root is None:
        root = Classified((), (TextSpan(text),))

    positioned = position_tree(root)
    containers = []
    for index in range(1, len(split_source_lines(text)) + 1):
        extracted = extract_line(positioned, index)
        children = extracted.children if extracted is not None else ()
        containers.append(annotate_line(LineContainer(index, children), metadata))
    return containers
