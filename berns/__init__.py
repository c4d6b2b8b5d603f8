from . import html
from .attributes import merge_attributes, to_attribute, to_attributes
from .html import STANDARD, VOID, element, sanitize, void

__all__ = [
    'STANDARD',
    'VOID',
    'element',
    'html',
    'merge_attributes',
    'sanitize',
    'to_attribute',
    'to_attributes',
    'void',
]
