from __future__ import annotations

from collections.abc import Iterator, Mapping
from html import escape
from typing import Any, Optional


def to_attributes(attributes: Optional[Mapping]) -> str:
    """Convert a mapping into a space separated HTML attribute string.

    >>> to_attributes({'href': '#nerds', 'some': {'stuff': 'foobar'}})
    'href="#nerds" some-stuff="foobar"'
    """
    if not attributes:
        return ''

    return ' '.join(
        token
        for attribute, value in attributes.items()
        for token in _tokens(attribute, value)
    )


def to_attribute(attribute: Any, value: Any) -> str:
    """Convert a single attribute and value into an HTML attribute string.

    ``True`` renders the bare name, ``False`` renders nothing and a mapping
    renders one attribute per entry, hyphen joined onto ``attribute``.
    """
    return ' '.join(_tokens(attribute, value))


def _tokens(attribute: Any, value: Any) -> Iterator[str]:
    attribute = '' if attribute is None else str(attribute)
    if isinstance(value, bool):
        # An empty bare name would only add a stray separator
        if value and attribute:
            yield attribute
    elif isinstance(value, Mapping):
        for sub_attribute, sub_value in value.items():
            # None or '' applies the value to the parent name itself
            if sub_attribute is None or sub_attribute == '':
                name = attribute
            else:
                name = f'{attribute}-{sub_attribute}'
            yield from _tokens(name, sub_value)
    else:
        text = '' if value is None else str(value)
        yield f'{attribute}="{escape(text)}"'


def merge_attributes(base: Optional[Mapping], override: Optional[Mapping]) -> dict:
    merged = dict(base or {})
    for key, value in (override or {}).items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = merge_attributes(current, value)
        else:
            merged[key] = value
    return merged
