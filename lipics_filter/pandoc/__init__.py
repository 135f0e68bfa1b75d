"""
Pandoc JSON AST: node helpers, metadata decoding and traversal.
"""

from .ast import (
    Node, Attr, make_attr, get_attr, node_type,
    stringify, stringify_inlines,
)
from .meta import meta_to_string, meta_to_inlines, meta_is_set, meta_deep_get
from .walker import DocumentWalker

__all__ = [
    'Node',
    'Attr',
    'make_attr',
    'get_attr',
    'node_type',
    'stringify',
    'stringify_inlines',
    'meta_to_string',
    'meta_to_inlines',
    'meta_is_set',
    'meta_deep_get',
    'DocumentWalker',
]
