"""
Preprocessor that keeps fenced code block info strings intact through Pandoc.

Pandoc drops everything after the language in an info string, so directives
such as line highlights never reach the HTML. Fenced blocks are turned into
raw HTML before conversion instead:

    ```py {1,3} showLineNumbers
    x = 6
    ```

    → <pre><code class="language-py" data-meta="{1,3} showLineNumbers">x = 6
      </code></pre>

Blocks written with Pandoc attribute syntax (```` ``` {.python} ````) are left
for Pandoc to handle.
"""

import html
import re

FENCE_PATTERN = re.compile(
    r"^(?P<indent>[ ]{0,3})(?P<fence>`{3,}|~{3,})[ \t]*(?P<info>[^\n]*?)[ \t]*\n"
    r"(?P<body>.*?)"
    r"^[ ]{0,3}(?P=fence)[ \t]*$",
    re.MULTILINE | re.DOTALL,
)


def _render_code_block(language: str, meta: str, body: str) -> str:
    attributes = ""
    if language:
        attributes += f' class="language-{html.escape(language)}"'
    if meta:
        attributes += f' data-meta="{html.escape(meta)}"'
    return f"<pre><code{attributes}>{html.escape(body, quote=False)}</code></pre>"


def fence_meta(text: str, context: dict) -> str:
    """
    Rewrite fenced code blocks as raw <pre><code> HTML carrying their meta.

    Args:
        text: Markdown text
        context: Rendering context (not used)

    Returns:
        Markdown with fenced code blocks replaced by raw HTML blocks
    """

    def replace_fence(match):
        info = match.group("info")
        if info.startswith("{") or "`" in info:
            return match.group(0)

        parts = info.split(None, 1)
        language = parts[0] if parts else ""
        meta = parts[1] if len(parts) > 1 else ""
        return _render_code_block(language, meta, match.group("body"))

    return FENCE_PATTERN.sub(replace_fence, text)


def fence_meta_default(text: str, context: dict) -> str:
    """Default instance of the fence meta preprocessor"""
    return fence_meta(text, context)
