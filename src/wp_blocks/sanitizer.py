from .block_parser.parsing.patterns import (
    EVENT_HANDLER_PATTERN, JAVASCRIPT_URL_PATTERN, SCRIPT_PATTERN
)


def sanitize_block_content(content: str) -> str:
    """Strip script elements, inline event handlers and javascript: URLs.

    This is a pattern-based scrub for trusted-but-careless content, not
    a full HTML sanitizer.
    """
    content = SCRIPT_PATTERN.sub('', content)
    content = EVENT_HANDLER_PATTERN.sub('', content)
    return JAVASCRIPT_URL_PATTERN.sub('', content)
