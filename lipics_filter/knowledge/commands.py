"""
Knowledge directive parsing.

    [knowledge]{.intro}                 -> intro
    [knowledge]{.reintro}               -> reintro
    [knowledge]{.ref scope=xxx kl=yyy}  -> ref, name "yyy", scope "xxx"
"""

from typing import List, Optional, Tuple

from config.constants import CLASS_INTRO, CLASS_REINTRO, CLASS_REF, KEY_NAME, KEY_SCOPE
from ..pandoc.ast import Node, get_attr, node_type
from .model import KnowledgeCommand, KnowledgeCommandKind

# First match wins
_KIND_PRIORITY = [
    (CLASS_INTRO, KnowledgeCommandKind.INTRO),
    (CLASS_REINTRO, KnowledgeCommandKind.REINTRO),
    (CLASS_REF, KnowledgeCommandKind.REF),
]


def classes_to_knowledge_kind(classes: List[str]) -> Optional[KnowledgeCommandKind]:
    for cls, kind in _KIND_PRIORITY:
        if cls in classes:
            return kind
    return None


def keyvals_to_name_scope(keyvals: List[Tuple[str, str]]) -> Tuple[Optional[str], Optional[str]]:
    """(name, scope) from the ``kl`` and ``scope`` attributes; the last occurrence wins."""
    name = None
    scope = None
    for key, value in keyvals:
        if key == KEY_NAME:
            name = value
        elif key == KEY_SCOPE:
            scope = value
    return name, scope


def span_to_knowledge(inline: Node) -> Optional[KnowledgeCommand]:
    """
    Parse a Span into a knowledge command.

    Returns None for anything that is not a Span carrying one of the
    directive classes; such nodes are left to the caller unchanged.
    """
    if node_type(inline) != "Span":
        return None
    attr, content = inline["c"]
    ident, classes, keyvals = get_attr(attr)

    kind = classes_to_knowledge_kind(classes)
    if kind is None:
        return None

    name, scope = keyvals_to_name_scope(keyvals)
    return KnowledgeCommand(ident=ident, kind=kind, content=list(content), name=name, scope=scope)
