# codelines/markdown/highlighting/lexer.py
"""
Pygments adapter that turns source text into a token tree.

Each Pygments token becomes a Classified node whose classes are "token"
followed by the lower-cased token type path, so ``Comment.Multiline`` is
rendered as ``<span class="token comment multiline">``. Plain text and
whitespace tokens become bare TextSpan leaves.

Unknown languages are reported as an UnknownLanguage value; the caller
decides whether that is fatal. Any callable with the signature of
``tokenize`` can stand in for it; ``make_tokenizer`` builds one from a
chosen set of lexer classes.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Callable, Iterable, Iterator, List, Mapping, Tuple, Type, Union

from pygments.lexer import Lexer
from pygments.lexers import get_lexer_by_name
from pygments.token import Text, _TokenType
from pygments.util import ClassNotFound

from .tokens import Classified, TextSpan, Token

TOKEN_CLASS = "token"
BYTE_ORDER_MARK = "\ufeff"
LINE_BREAK_PATTERN = re.compile(r"\r\n|\r|\n")


class UnknownLanguageError(ValueError):
    """Raised when a code block names a language Pygments does not know."""

    def __init__(self, language: str):
        self.language = language
        super().__init__(f'Unknown language: "{language}" is not registered')


@dataclass(frozen=True)
class TokenTree:
    root: Classified


@dataclass(frozen=True)
class UnknownLanguage:
    language: str


LexResult = Union[TokenTree, UnknownLanguage]
Tokenizer = Callable[[str, str], LexResult]


@lru_cache(maxsize=64)
def _get_lexer(language: str) -> Lexer:
    # Keep leading/trailing newlines so the tokens add up to the input text
    return get_lexer_by_name(language, stripnl=False, ensurenl=False)


def normalize_newlines(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


def token_classes(ttype: _TokenType) -> Tuple[str, ...]:
    return (TOKEN_CLASS,) + tuple(part.lower() for part in ttype)


def _restore_line_breaks(
    stream: Iterable[Tuple[_TokenType, str]], breaks: Iterator[str]
) -> Iterator[Tuple[_TokenType, str]]:
    for ttype, value in stream:
        if "\n" in value:
            value = "".join(
                piece if index == 0 else next(breaks, "\n") + piece
                for index, piece in enumerate(value.split("\n"))
            )
        yield ttype, value


def _merge_tokens(stream: Iterable[Tuple[_TokenType, str]]) -> List[Tuple[_TokenType, str]]:
    merged: List[Tuple[_TokenType, str]] = []
    for ttype, value in stream:
        if not value:
            continue
        if merged and merged[-1][0] is ttype:
            merged[-1] = (ttype, merged[-1][1] + value)
        else:
            merged.append((ttype, value))
    return merged


def build_token_tree(stream: Iterable[Tuple[_TokenType, str]]) -> Classified:
    children: List[Token] = []
    for ttype, value in _merge_tokens(stream):
        if ttype in Text:
            children.append(TextSpan(value))
        else:
            children.append(Classified(token_classes(ttype), (TextSpan(value),)))
    return Classified((), tuple(children))


def tokenize_with(lexer: Lexer, text: str) -> TokenTree:
    """
    Lex ``text`` with ``lexer`` so that the tree adds up to ``text`` exactly.

    Pygments drops leading byte order marks and turns "\\r\\n" and "\\r" into
    "\\n"; both are put back.
    """
    body = text.lstrip(BYTE_ORDER_MARK)
    prefix = text[: len(text) - len(body)]
    breaks = iter(LINE_BREAK_PATTERN.findall(body))

    root = build_token_tree(
        _restore_line_breaks(lexer.get_tokens(normalize_newlines(body)), breaks)
    )
    if prefix:
        root = Classified(root.classes, (TextSpan(prefix),) + root.children)
    return TokenTree(root)


def tokenize(text: str, language: str) -> LexResult:
    """Lex ``text`` with the Pygments lexer registered as ``language``."""
    try:
        lexer = _get_lexer(language)
    except ClassNotFound:
        return UnknownLanguage(language)
    return tokenize_with(lexer, text)


def make_tokenizer(lexers: Mapping[str, Type[Lexer]]) -> Tokenizer:
    """
    Build a tokenizer limited to ``lexers``, a mapping of language name to
    Pygments lexer class. Names are matched lower-cased; anything else is an
    UnknownLanguage, whether or not Pygments itself knows it.
    """
    registry = {name.lower(): lexer_class for name, lexer_class in lexers.items()}

    def tokenizer(text: str, language: str) -> LexResult:
        lexer_class = registry.get(language.lower())
        if lexer_class is None:
            return UnknownLanguage(language)
        return tokenize_with(lexer_class(stripnl=False, ensurenl=False), text)

    return tokenizer
