from __future__ import annotations

import re

from collections.abc import Callable, Mapping
from typing import Any, Optional, Union

from .attributes import to_attributes

SANITIZE_REGEX = re.compile(r'<[^>]+>')

# Full list of standard HTML5 elements
STANDARD = (
    'a', 'abbr', 'address', 'article', 'aside', 'audio',
    'b', 'bdi', 'bdo', 'blockquote', 'body', 'button',
    'canvas', 'caption', 'cite', 'code', 'colgroup',
    'datalist', 'dd', 'del', 'details', 'dfn', 'dialog', 'div', 'dl', 'dt',
    'em',
    'fieldset', 'figcaption', 'figure', 'footer', 'form',
    'h1', 'h2', 'h3', 'h4', 'h5', 'h6', 'head', 'header', 'html',
    'i', 'iframe', 'ins',
    'kbd',
    'label', 'legend', 'li',
    'main', 'map', 'mark', 'menu', 'meter',
    'nav', 'noscript',
    'object', 'ol', 'optgroup', 'option', 'output',
    'p', 'picture', 'pre', 'progress',
    'q',
    'rp', 'rt', 'ruby',
    's', 'samp', 'script', 'section', 'select', 'small', 'span',
    'strong', 'style', 'sub', 'summary',
    'table', 'tbody', 'td', 'template', 'textarea', 'tfoot', 'th', 'thead',
    'time', 'title', 'tr',
    'u', 'ul',
    'var', 'video',
)

# Full list of void elements, these never take content or a closing tag
VOID = (
    'area', 'base', 'br', 'col', 'embed', 'hr', 'img', 'input', 'link',
    'menuitem', 'meta', 'param', 'source', 'track', 'wbr',
)

Content = Union[str, Callable[[], Any], None]


def sanitize(text):
    """Strip HTML tags from ``text``, anything that is not a string is returned as is."""
    if not isinstance(text, str):
        return text
    return SANITIZE_REGEX.sub('', text)


def _render_content(content: Content) -> str:
    if callable(content):
        content = content()
    if content is None:
        return ''
    return str(content)


def element(tag: str, attributes: Optional[Mapping] = None, content: Content = None) -> str:
    """Render ``<tag attributes>content</tag>``.

    ``content`` may be a zero argument callable, it is called once before
    the element is assembled.
    """
    content = _render_content(content)
    attrs = to_attributes(attributes)
    if not attrs:
        return f'<{tag}>{content}</{tag}>'
    return f'<{tag} {attrs}>{content}</{tag}>'


def void(tag: str, attributes: Optional[Mapping] = None, content: Content = None) -> str:
    """Render ``<tag attributes>``, ``content`` is ignored and never called."""
    attrs = to_attributes(attributes)
    if not attrs:
        return f'<{tag}>'
    return f'<{tag} {attrs}>'


def _standard_element(tag: str):
    def _e(attributes: Optional[Mapping] = None, content: Content = None) -> str:
        return element(tag, attributes, content)

    _e.__name__ = _e.__qualname__ = tag
    return _e


def _void_element(tag: str):
    def _e(attributes: Optional[Mapping] = None, content: Content = None) -> str:
        return void(tag, attributes, content)

    _e.__name__ = _e.__qualname__ = tag
    return _e


# Module level proxies to element() and void(), e.g. html.div({'id': 'x'})
for t in STANDARD:
    locals()[t] = _standard_element(t)

for t in VOID:
    locals()[t] = _void_element(t)

del t
