# codelines/markdown/postprocessors/code_highlighter.py
"""
Postprocessor that highlights code blocks and splits them into lines.

This postprocessor:
- Finds every <code> element sitting directly inside a <pre>
- Lexes the code with Pygments when a "language-*" class names a language
- Replaces the code's content with one <span class="code-line"> per line
- Adds "line-number" (and a line="N" attribute), "highlight-line",
  "inserted" and "deleted" classes as directed by the block's meta string
- Adds "code-highlight" to the <code> and "language-<name>" to the <pre>

The meta string of a fenced block is read from a ``data-meta`` attribute on
the <code> (or its <pre>) and removed from the output.

Expected structure:
    Input:
        <pre><code class="language-py" data-meta="{2} showLineNumbers">x = 6
        y = 7
        </code></pre>

    Output:
        <pre class="language-py"><code class="language-py code-highlight">
            <span class="code-line line-number" line="1">x <span class="token operator">=</span> ...
            </span><span class="code-line line-number highlight-line" line="2">y ...
            </span></code></pre>
"""

from __future__ import annotations

import logging
from typing import List, NamedTuple, Optional

from bs4 import BeautifulSoup, NavigableString, Tag

from ..config import get_code_highlight_config
from ..highlighting.lexer import Tokenizer, UnknownLanguage, UnknownLanguageError, tokenize
from ..highlighting.lines import LineContainer, build_lines
from ..highlighting.metadata import LANGUAGE_PREFIX, extract_block_metadata
from ..highlighting.tokens import Classified, TextSpan, Token
from .utils import add_classes, get_class_list

logger = logging.getLogger(__name__)

CODE_HIGHLIGHT_CLASS = "code-highlight"
META_ATTRIBUTE = "data-meta"


class _BlockPlan(NamedTuple):
    code: Tag
    pre: Tag
    code_classes: List[str]
    language_class: Optional[str]
    lines: List[LineContainer]


def _is_code_block(code: Tag) -> bool:
    parent = code.parent
    return isinstance(parent, Tag) and parent.name == "pre"


def _read_meta(code: Tag, pre: Tag) -> str:
    meta = code.get(META_ATTRIBUTE) or pre.get(META_ATTRIBUTE) or ""
    if isinstance(meta, list):
        meta = " ".join(meta)
    return meta


def _token_to_node(soup: BeautifulSoup, token: Token):
    if isinstance(token, TextSpan):
        return NavigableString(token.value)

    span = soup.new_tag("span")
    if token.classes:
        span["class"] = list(token.classes)
    for child in token.children:
        span.append(_token_to_node(soup, child))
    return span


def line_to_tag(soup: BeautifulSoup, line: LineContainer) -> Tag:
    """Render a LineContainer as a <span class="code-line ..."> element."""
    span = soup.new_tag("span")
    span["class"] = list(line.classes)
    if line.line_number is not None:
        span["line"] = str(line.line_number)
    for child in line.children:
        span.append(_token_to_node(soup, child))
    return span


def _plan_block(
    code: Tag,
    show_line_numbers: bool,
    ignore_missing: bool,
    tokenizer: Tokenizer,
) -> _BlockPlan:
    pre = code.parent
    code_classes = get_class_list(code)
    meta = _read_meta(code, pre)
    metadata = extract_block_metadata(code_classes, meta, show_line_numbers)
    text = code.get_text()

    root: Optional[Classified] = None
    language_class = None
    if metadata.language is not None:
        result = tokenizer(text, metadata.language.lexer_name)
        if isinstance(result, UnknownLanguage):
            if not ignore_missing:
                raise UnknownLanguageError(result.language)
            logger.warning(
                "Unknown language '%s', leaving code block unhighlighted",
                result.language,
            )
        else:
            root = result.root
            language_class = f"{LANGUAGE_PREFIX}{metadata.language.lexer_name}"

    lines = build_lines(text, metadata, root)
    logger.debug(
        "Highlighted code block (language=%s, lines=%d)",
        metadata.language.name if metadata.language else None,
        len(lines),
    )
    return _BlockPlan(code, pre, code_classes, language_class, lines)


def _apply_plan(soup: BeautifulSoup, plan: _BlockPlan) -> None:
    for tag in (plan.code, plan.pre):
        if META_ATTRIBUTE in tag.attrs:
            del tag[META_ATTRIBUTE]

    plan.code["class"] = list(dict.fromkeys(plan.code_classes + [CODE_HIGHLIGHT_CLASS]))
    if plan.language_class:
        add_classes(plan.pre, [plan.language_class])

    plan.code.clear()
    for line in plan.lines:
        plan.code.append(line_to_tag(soup, line))


def highlight_code_blocks(
    soup: BeautifulSoup,
    show_line_numbers: bool = False,
    ignore_missing: bool = False,
    tokenizer: Tokenizer = tokenize,
) -> BeautifulSoup:
    """
    Highlight every <pre><code> block of ``soup`` in place.

    All blocks are lexed before any of them is modified, so an unknown
    language leaves the tree untouched.

    Args:
        soup: Parsed document
        show_line_numbers: Number the lines of every block unless its meta
            string says ``showLineNumbers=false``
        ignore_missing: Leave blocks with an unknown language unhighlighted
            instead of raising UnknownLanguageError
        tokenizer: Callable turning (text, language) into a token tree or
            UnknownLanguage (default: any language Pygments knows)

    Returns:
        The same soup, for chaining
    """
    plans = [
        _plan_block(code, show_line_numbers, ignore_missing, tokenizer)
        for code in soup.find_all("code")
        if _is_code_block(code)
    ]
    for plan in plans:
        _apply_plan(soup, plan)
    return soup


def code_highlighter(
    html: str,
    context: dict,
    show_line_numbers: bool = False,
    ignore_missing: bool = False,
    tokenizer: Tokenizer = tokenize,
) -> str:
    """
    Highlight code blocks in an HTML string.

    Args:
        html: HTML string to process
        context: Rendering context (not used)
        show_line_numbers: Number every block's lines (default: False)
        ignore_missing: Tolerate unknown languages (default: False)
        tokenizer: Highlighter used for each block (default: Pygments)

    Returns:
        Processed HTML with line-split code blocks
    """
    soup = BeautifulSoup(html, "html.parser")
    highlight_code_blocks(soup, show_line_numbers, ignore_missing, tokenizer)
    return str(soup)


def code_highlighter_default(html: str, context: dict) -> str:
    """
    Default configuration for code_highlighter.

    Options come from the CODE_HIGHLIGHT setting and may be overridden per
    render through ``context["show_line_numbers"]`` and
    ``context["ignore_missing"]``; ``context["tokenizer"]`` replaces the
    Pygments highlighter.
    """
    config = get_code_highlight_config()
    return code_highlighter(
        html,
        context,
        show_line_numbers=context.get("show_line_numbers", config["show_line_numbers"]),
        ignore_missing=context.get("ignore_missing", config["ignore_missing"]),
        tokenizer=context.get("tokenizer", tokenize),
    )
