# codelines/markdown/preprocessors/__init__.py

from .fence_meta import fence_meta_default

PREPROCESSORS = [
    fence_meta_default,  # Keep code block info strings as data-meta
    # Order matters - they run sequentially
]


def apply_preprocessors(text, context):
    """Apply all preprocessors in order"""
    for processor in PREPROCESSORS:
        text = processor(text, context)
    return text
