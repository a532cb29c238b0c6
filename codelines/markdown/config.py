from django.conf import settings

CODE_HIGHLIGHT_DEFAULTS = {
    "SHOW_LINE_NUMBERS": False,
    "IGNORE_MISSING": False,
}


def get_pandoc_config():
    """
    Configuration for pypandoc/Pandoc markdown rendering.

    Fenced code blocks reach Pandoc as raw HTML (see the fence_meta
    preprocessor), so raw_html must stay enabled. Syntax highlighting is done
    by the code_highlighter postprocessor.
    """
    return {
        "extra_args": [
            "--from=markdown+fenced_code_blocks+fenced_code_attributes+raw_html+pipe_tables+smart",
        ],
        "filters": [],
    }


def get_code_highlight_config():
    """
    Options for the code_highlighter postprocessor.

    Read from the CODE_HIGHLIGHT Django setting:

        CODE_HIGHLIGHT = {
            "SHOW_LINE_NUMBERS": True,   # number every code block
            "IGNORE_MISSING": True,      # unknown languages render as plain text
        }

    Missing keys, or an unconfigured Django, fall back to False.
    """
    overrides = {}
    if settings.configured:
        overrides = getattr(settings, "CODE_HIGHLIGHT", None) or {}

    merged = {**CODE_HIGHLIGHT_DEFAULTS, **overrides}
    return {
        "show_line_numbers": bool(merged["SHOW_LINE_NUMBERS"]),
        "ignore_missing": bool(merged["IGNORE_MISSING"]),
    }
