"""
HTML to plain text conversion for mail bodies.

Regex-only and pure: no parser, no I/O. Used when a message has an HTML
body but no text/plain alternative.
"""

import re

_SCRIPT_STYLE = re.compile(r'<(script|style)\b[^>]*>.*?</\1\s*>', re.IGNORECASE | re.DOTALL)
_BREAK = re.compile(r'<br\s*/?>', re.IGNORECASE)
_BLOCK_CLOSE = re.compile(r'</(p|div|tr|li|h[1-6])\s*>', re.IGNORECASE)
# <li> and <li class=...>, but not <link>
_LIST_ITEM = re.compile(r'<li(\s[^>]*)?>', re.IGNORECASE)
_ANY_TAG = re.compile(r'<[^>]+>')
_ENTITY = re.compile(r'&(amp|lt|gt|quot|#39|nbsp);')
_EXCESS_NEWLINES = re.compile(r'\n{3,}')

_ENTITIES = {
    'amp': '&',
    'lt': '<',
    'gt': '>',
    'quot': '"',
    '#39': "'",
    'nbsp': ' ',
}


def html_to_text(html: str) -> str:
    """
    Strip HTML down to readable text.

    Script and style blocks go entirely. Line breaks and the ends of block
    elements become newlines, list items become "- " bullets, remaining tags
    are dropped. The six common entities are decoded in one pass, so
    "&amp;lt;" yields "&lt;" rather than "<".

    Args:
        html: Raw HTML body

    Returns:
        Text with at most one blank line between blocks, trimmed
    """
    if not html:
        return ''

    text = _SCRIPT_STYLE.sub('', html)
    text = _BREAK.sub('\n', text)
    text = _BLOCK_CLOSE.sub('\n', text)
    text = _LIST_ITEM.sub('- ', text)
    text = _ANY_TAG.sub('', text)
    text = _ENTITY.sub(lambda m: _ENTITIES[m.group(1)], text)
    text = _EXCESS_NEWLINES.sub('\n\n', text)
    return text.strip()
