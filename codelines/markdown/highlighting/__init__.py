# codelines/markdown/highlighting/__init__.py

from .lexer import TokenTree, UnknownLanguage, UnknownLanguageError, tokenize
from .lines import LineContainer, build_lines
from .metadata import BlockMetadata, CodeLanguage, extract_block_metadata
from .ranges import parse_range

__all__ = (
    "BlockMetadata",
    "CodeLanguage",
    "LineContainer",
    "TokenTree",
    "UnknownLanguage",
    "UnknownLanguageError",
    "build_lines",
    "extract_block_metadata",
    "parse_range",
    "tokenize",
)
