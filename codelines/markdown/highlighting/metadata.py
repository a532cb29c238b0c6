# codelines/markdown/highlighting/metadata.py
"""
Read the language and display directives of a single code block.

The language comes from the code element's class list:
    <code class="language-py">        -> py
    <code class="language-diff">      -> diff (diff markers)
    <code class="language-diff-css">  -> css  (diff markers, css lexer)

Directives come from the meta string of a fenced block, for example
``{1,3-4} showLineNumbers=10``:
- ``{...}``                 lines to highlight
- ``showLineNumbers``       number the lines
- ``showLineNumbers=N``     number the lines starting at N
- ``showLineNumbers=false`` never number the lines (also "false" and {false})

None of these helpers raise; missing or malformed directives fall back to
the defaults (no highlighting, no numbering, first line is 1).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import FrozenSet, Iterable, Optional

from .ranges import parse_range

LANGUAGE_PREFIX = "language-"
DIFF_LANGUAGE = "diff"
DIFF_PREFIX = "diff-"

HIGHLIGHT_PATTERN = re.compile(r"\{([\d,-]+)\}")
SEPARATOR_SPACING_PATTERN = re.compile(r"\s*([,-])\s*")
START_LINE_PATTERN = re.compile(r"showLineNumbers=(\d+)", re.IGNORECASE)

SHOW_LINE_NUMBERS_TOKEN = "showlinenumbers"
HIDE_LINE_NUMBERS_TOKENS = (
    "showlinenumbers=false",
    'showlinenumbers="false"',
    "showlinenumbers={false}",
)


@dataclass(frozen=True)
class CodeLanguage:
    name: str
    lexer_name: str
    is_diff: bool = False


@dataclass(frozen=True)
class BlockMetadata:
    language: Optional[CodeLanguage]
    highlight_lines: FrozenSet[int]
    start_line: int
    show_line_numbers: bool


def extract_language(class_list: Iterable[str]) -> Optional[CodeLanguage]:
    """Return the language named by the first ``language-*`` class, if any."""
    for class_name in class_list:
        if class_name[: len(LANGUAGE_PREFIX)].lower() != LANGUAGE_PREFIX:
            continue

        name = class_name[len(LANGUAGE_PREFIX):].lower()
        if not name:
            continue

        if name.startswith(DIFF_PREFIX) and len(name) > len(DIFF_PREFIX):
            return CodeLanguage(name=name, lexer_name=name[len(DIFF_PREFIX):], is_diff=True)
        return CodeLanguage(name=name, lexer_name=name, is_diff=name == DIFF_LANGUAGE)

    return None


def extract_highlight_lines(meta: Optional[str]) -> FrozenSet[int]:
    """Line numbers (1-indexed) listed in a ``{1,3-5}`` expression."""
    if not meta:
        return frozenset()

    # {1, 3} and {1 - 3} are accepted
    compact = SEPARATOR_SPACING_PATTERN.sub(r"\1", meta)
    match = HIGHLIGHT_PATTERN.search(compact)
    if not match:
        return frozenset()
    return parse_range(match.group(1))


def extract_start_line(meta: Optional[str]) -> int:
    if not meta:
        return 1
    match = START_LINE_PATTERN.search(meta)
    if match:
        return int(match.group(1))
    return 1


def should_show_line_numbers(meta: Optional[str], default: bool = False) -> bool:
    """
    Decide whether the block gets line numbers.

    The global ``default`` or a ``showLineNumbers`` directive turns numbering
    on; an explicit ``showLineNumbers=false`` always turns it off.
    """
    lowered = (meta or "").lower()
    if any(token in lowered for token in HIDE_LINE_NUMBERS_TOKENS):
        return False
    return default or SHOW_LINE_NUMBERS_TOKEN in lowered


def extract_block_metadata(
    class_list: Iterable[str],
    meta: Optional[str],
    show_line_numbers: bool = False,
) -> BlockMetadata:
    return BlockMetadata(
        language=extract_language(class_list),
        highlight_lines=extract_highlight_lines(meta),
        start_line=extract_start_line(meta),
        show_line_numbers=should_show_line_numbers(meta, show_line_numbers),
    )
