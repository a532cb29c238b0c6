"""Shared fixtures and Django setup for tests."""

import django
import pytest
from bs4 import BeautifulSoup
from django.conf import settings
from pygments.lexer import RegexLexer
from pygments.token import Keyword, Text


def pytest_configure() -> None:
    if not settings.configured:
        settings.configure(
            INSTALLED_APPS=["codelines"],
            TEMPLATES=[
                {
                    "BACKEND": "django.template.backends.django.DjangoTemplates",
                    "APP_DIRS": False,
                }
            ],
        )
        django.setup()


@pytest.fixture
def parse():
    """Parse an HTML fragment the way the postprocessors do."""

    def _parse(html: str) -> BeautifulSoup:
        return BeautifulSoup(html, "html.parser")

    return _parse


class ShoutLexer(RegexLexer):
    """Upper-case words are keywords; registered under no Pygments alias."""

    name = "Shout"
    aliases = []
    filenames = []

    tokens = {
        "root": [
            (r"[A-Z]+", Keyword),
            (r"[^A-Z]+", Text),
        ],
    }


@pytest.fixture
def shout_lexer():
    return ShoutLexer
