"""Tests for the fenced code block preprocessor."""

from codelines.markdown.preprocessors.fence_meta import fence_meta


class TestFenceMeta:
    def test_language_and_meta(self) -> None:
        text = "```py {1,3} showLineNumbers\nx = 6\n```\n"
        assert fence_meta(text, {}) == (
            '<pre><code class="language-py" data-meta="{1,3} showLineNumbers">x = 6\n</code></pre>\n'
        )

    def test_language_only(self) -> None:
        assert fence_meta("~~~jsx\n<Component/>\n~~~", {}) == (
            '<pre><code class="language-jsx">&lt;Component/&gt;\n</code></pre>'
        )

    def test_no_info_string(self) -> None:
        assert fence_meta("```\nplain\n```", {}) == "<pre><code>plain\n</code></pre>"

    def test_meta_is_attribute_escaped(self) -> None:
        result = fence_meta('```py showLineNumbers="false"\nx\n```', {})
        assert 'data-meta="showLineNumbers=&quot;false&quot;"' in result

    def test_pandoc_attribute_syntax_is_left_alone(self) -> None:
        text = "``` {.python .numberLines}\nx = 6\n```"
        assert fence_meta(text, {}) == text

    def test_surrounding_markdown_is_kept(self) -> None:
        text = "Intro\n\n```py\nx\n```\n\nOutro\n"
        result = fence_meta(text, {})
        assert result.startswith("Intro\n\n<pre>")
        assert result.endswith("</pre>\n\nOutro\n")

    def test_blank_lines_inside_block(self) -> None:
        result = fence_meta("```py\nx\n\ny\n```", {})
        assert result == '<pre><code class="language-py">x\n\ny\n</code></pre>'

    def test_empty_block(self) -> None:
        assert fence_meta("```py\n```", {}) == '<pre><code class="language-py"></code></pre>'
