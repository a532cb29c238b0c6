# codelines/templatetags/markdown_tags.py

from django import template
from django.utils.safestring import mark_safe

from codelines.markdown.postprocessors.code_highlighter import code_highlighter_default
from codelines.markdown.renderer import render_markdown

register = template.Library()


@register.filter(name="markdown")
def markdown_filter(value):
    return mark_safe(render_markdown(value))


@register.filter(name="highlight_code")
def highlight_code_filter(value, option=None):
    """
    Highlight the <pre><code> blocks of already rendered HTML.

    Passing "lines" numbers every block that does not opt out:
        {{ body|highlight_code }}
        {{ body|highlight_code:"lines" }}
    """
    context = {}
    if option == "lines":
        context["show_line_numbers"] = True
    return mark_safe(code_highlighter_default(str(value), context))


@register.simple_tag(takes_context=True)
def markdown_with_context(context, value):
    """Template tag that passes template options to processors"""
    processor_context = {}
    for key in ("show_line_numbers", "ignore_missing"):
        if key in context:
            processor_context[key] = context[key]
    return mark_safe(render_markdown(value, context=processor_context))
