"""
Pandoc JSON AST helpers.

Nodes are kept exactly as pandoc serialises them: ``{"t": tag, "c": content}``
dicts, with an Attr being ``[identifier, [classes], [[key, value], ...]]``.
Only the constructors and accessors the filter needs live here.
"""

from typing import Any, Dict, List, Optional, Tuple

Node = Dict[str, Any]
Attr = List[Any]

LATEX_FORMAT = "latex"


# ============================================================================
# Attributes
# ============================================================================

def make_attr(
    identifier: str = "",
    classes: Optional[List[str]] = None,
    keyvals: Optional[List[Tuple[str, str]]] = None,
) -> Attr:
    """Build a pandoc Attr triple."""
    return [identifier, list(classes or []), [[k, v] for k, v in (keyvals or [])]]


def get_attr(attr: Any) -> Tuple[str, List[str], List[Tuple[str, str]]]:
    """
    Unpack an Attr into (identifier, classes, keyvals).

    Malformed parts decode to empty values instead of raising.
    """
    if not isinstance(attr, list) or len(attr) != 3:
        return "", [], []
    identifier = attr[0] if isinstance(attr[0], str) else ""
    classes = [c for c in attr[1] if isinstance(c, str)] if isinstance(attr[1], list) else []
    keyvals = []
    if isinstance(attr[2], list):
        for item in attr[2]:
            if isinstance(item, list) and len(item) == 2:
                keyvals.append((str(item[0]), str(item[1])))
    return identifier, classes, keyvals


# ============================================================================
# Inline constructors
# ============================================================================

def Str(text: str) -> Node:
    return {"t": "Str", "c": text}


def Space() -> Node:
    return {"t": "Space"}


def Emph(inlines: List[Node]) -> Node:
    return {"t": "Emph", "c": list(inlines)}


def Strong(inlines: List[Node]) -> Node:
    return {"t": "Strong", "c": list(inlines)}


def Span(attr: Attr, inlines: List[Node]) -> Node:
    return {"t": "Span", "c": [attr, list(inlines)]}


def Link(attr: Attr, inlines: List[Node], url: str, title: str = "") -> Node:
    return {"t": "Link", "c": [attr, list(inlines), [url, title]]}


def RawInline(text: str, fmt: str = LATEX_FORMAT) -> Node:
    return {"t": "RawInline", "c": [fmt, text]}


# ============================================================================
# Block constructors
# ============================================================================

def Plain(inlines: List[Node]) -> Node:
    return {"t": "Plain", "c": list(inlines)}


def Para(inlines: List[Node]) -> Node:
    return {"t": "Para", "c": list(inlines)}


def Header(level: int, attr: Attr, inlines: List[Node]) -> Node:
    return {"t": "Header", "c": [level, attr, list(inlines)]}


def Div(attr: Attr, blocks: List[Node]) -> Node:
    return {"t": "Div", "c": [attr, list(blocks)]}


# ============================================================================
# Accessors
# ============================================================================

def node_type(node: Any) -> Optional[str]:
    """Tag of a node, or None for anything that is not a pandoc node."""
    if isinstance(node, dict):
        tag = node.get("t")
        return tag if isinstance(tag, str) else None
    return None


def is_header(node: Any) -> bool:
    return node_type(node) == "Header"


def header_parts(node: Node) -> Tuple[int, Attr, List[Node]]:
    """(level, attr, inlines) of a Header node."""
    level, attr, inlines = node["c"]
    return level, attr, inlines


def text_to_inlines(text: str) -> List[Node]:
    """Split plain text into Str/Space inlines, the way pandoc's reader does."""
    out: List[Node] = []
    for word in text.split():
        if out:
            out.append(Space())
        out.append(Str(word))
    return out


# ============================================================================
# Stringify
# ============================================================================

_TEXT_LEAVES = {"Code", "Math", "RawInline"}
_EMPTY = {"Note", "Image"}
_CONTAINERS = {
    "Emph", "Strong", "Underline", "Strikeout",
    "Superscript", "Subscript", "SmallCaps",
}


def stringify(inline: Node) -> str:
    """Plain-text rendering of one inline node."""
    tag = node_type(inline)
    content = inline.get("c") if isinstance(inline, dict) else None

    if tag == "Str":
        return content
    if tag == "Space":
        return " "
    if tag in ("SoftBreak", "LineBreak"):
        return "\n"
    if tag in _EMPTY:
        return ""
    if tag in _TEXT_LEAVES:
        return content[1]
    if tag in _CONTAINERS:
        return stringify_inlines(content)
    if tag in ("Quoted", "Cite", "Span"):
        return stringify_inlines(content[1])
    if tag == "Link":
        return stringify_inlines(content[1])
    return ""


def stringify_inlines(inlines: List[Node]) -> str:
    return "".join(stringify(i) for i in inlines or [])
