# codelines/markdown/postprocessors/__init__.py

from .code_highlighter import code_highlighter_default

POSTPROCESSORS = [
    code_highlighter_default,  # Lex code blocks and split them into code-line spans
    # Order matters - they run sequentially
]


def apply_postprocessors(html, context):
    """Apply all postprocessors in order"""
    for processor in POSTPROCESSORS:
        html = processor(html, context)
    return html
