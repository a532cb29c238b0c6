"""Unit tests for the Pygments lexer adapter."""

from pygments.token import Comment, Name, Text

from codelines.markdown.highlighting.lexer import (
    TokenTree,
    UnknownLanguage,
    UnknownLanguageError,
    build_token_tree,
    make_tokenizer,
    normalize_newlines,
    token_classes,
    tokenize,
)
from codelines.markdown.highlighting.tokens import Classified, TextSpan, to_text


class TestTokenize:
    def test_known_language_returns_tree(self) -> None:
        result = tokenize("x = 6", "py")
        assert isinstance(result, TokenTree)
        assert result.root.classes == ()

    def test_tokens_reproduce_the_source(self) -> None:
        source = "\n\ndef f(a):\n    return a  # twice\n\n"
        result = tokenize(source, "python")
        assert to_text(result.root) == source

    def test_classified_tokens_carry_token_class(self) -> None:
        result = tokenize("x = 6", "py")
        classified = [child for child in result.root.children if isinstance(child, Classified)]
        assert classified
        assert all(child.classes[0] == "token" for child in classified)

    def test_block_comment_is_a_single_token(self) -> None:
        result = tokenize("/**\n * My comment\n */\n", "js")
        comments = [
            child
            for child in result.root.children
            if isinstance(child, Classified) and "comment" in child.classes
        ]
        assert len(comments) == 1
        assert to_text(comments[0]) == "/**\n * My comment\n */"

    def test_unknown_language_is_a_value(self) -> None:
        assert tokenize("x = 6", "thisisnotalanguage") == UnknownLanguage("thisisnotalanguage")

    def test_carriage_returns_are_kept(self) -> None:
        source = "a = 1\r\nb = 2\rc = 3\r\n"
        assert to_text(tokenize(source, "py").root) == source

    def test_byte_order_mark_is_kept(self) -> None:
        result = tokenize("\ufeffx = 1\n", "py")
        assert result.root.children[0] == TextSpan("\ufeff")
        assert to_text(result.root) == "\ufeffx = 1\n"


class TestMakeTokenizer:
    def test_uses_the_given_lexers(self, shout_lexer) -> None:
        tokenizer = make_tokenizer({"shout": shout_lexer})
        result = tokenizer("HEY there", "shout")
        assert result.root.children == (
            Classified(("token", "keyword"), (TextSpan("HEY"),)),
            TextSpan(" there"),
        )

    def test_names_are_case_insensitive(self, shout_lexer) -> None:
        tokenizer = make_tokenizer({"Shout": shout_lexer})
        assert isinstance(tokenizer("HEY", "SHOUT"), TokenTree)

    def test_languages_outside_the_mapping_are_unknown(self, shout_lexer) -> None:
        tokenizer = make_tokenizer({"shout": shout_lexer})
        assert tokenizer("x = 6", "py") == UnknownLanguage("py")

    def test_custom_lexer_is_not_in_the_default_registry(self) -> None:
        assert tokenize("HEY", "shout") == UnknownLanguage("shout")

    def test_line_breaks_are_kept(self, shout_lexer) -> None:
        tokenizer = make_tokenizer({"shout": shout_lexer})
        assert to_text(tokenizer("A\r\nb\r\n", "shout").root) == "A\r\nb\r\n"


class TestBuildTokenTree:
    def test_text_tokens_become_plain_leaves(self) -> None:
        root = build_token_tree([(Text, "  "), (Text.Whitespace, "\n")])
        assert root.children == (TextSpan("  "), TextSpan("\n"))

    def test_adjacent_tokens_of_the_same_type_are_merged(self) -> None:
        root = build_token_tree([(Name, "fo"), (Name, "o"), (Text, " "), (Name, "bar")])
        assert root.children == (
            Classified(("token", "name"), (TextSpan("foo"),)),
            TextSpan(" "),
            Classified(("token", "name"), (TextSpan("bar"),)),
        )

    def test_empty_values_are_skipped(self) -> None:
        root = build_token_tree([(Name, ""), (Text, "x")])
        assert root.children == (TextSpan("x"),)


class TestTokenClasses:
    def test_token_type_path_is_lower_cased(self) -> None:
        assert token_classes(Comment.Multiline) == ("token", "comment", "multiline")


def test_normalize_newlines() -> None:
    assert normalize_newlines("a\r\nb\rc\n") == "a\nb\nc\n"


def test_unknown_language_error_message() -> None:
    error = UnknownLanguageError("nope")
    assert error.language == "nope"
    assert "Unknown language" in str(error)
    assert isinstance(error, ValueError)
