"""
Metadata decoding primitives.

Pandoc metadata is a weakly typed tree (MetaMap, MetaList, MetaString,
MetaInlines, MetaBlocks, MetaBool). Every function here returns None on a
shape mismatch instead of raising: callers treat absence as "not set".
"""

from typing import Any, Dict, List, Optional, Union

from .ast import Node, node_type

MetaValue = Dict[str, Any]


def meta_to_string(meta: Any) -> Optional[str]:
    """MetaString, or MetaInlines made of a single Str."""
    tag = node_type(meta)
    if tag == "MetaString":
        return meta.get("c")
    if tag == "MetaInlines":
        inlines = meta.get("c") or []
        if len(inlines) == 1 and node_type(inlines[0]) == "Str":
            return inlines[0]["c"]
    return None


def meta_to_inlines(meta: Any) -> Optional[List[Node]]:
    """MetaString as a single Str, or the inlines of a MetaInlines."""
    tag = node_type(meta)
    if tag == "MetaString":
        return [{"t": "Str", "c": meta.get("c", "")}]
    if tag == "MetaInlines":
        return list(meta.get("c") or [])
    return None


def meta_to_list(meta: Any) -> Optional[List[MetaValue]]:
    if node_type(meta) == "MetaList" and isinstance(meta.get("c"), list):
        return meta["c"]
    return None


def meta_to_map(meta: Any) -> Optional[Dict[str, MetaValue]]:
    if node_type(meta) == "MetaMap" and isinstance(meta.get("c"), dict):
        return meta["c"]
    return None


def meta_is_set(meta: Any) -> bool:
    """Presence toggle: any value counts, ``false`` included."""
    return meta is not None


def _selectors(path: str) -> List[Union[int, str]]:
    out: List[Union[int, str]] = []
    for part in path.split("."):
        out.append(int(part) if part.isdigit() else part)
    return out


def meta_deep_get(meta: Dict[str, MetaValue], path: str) -> Optional[MetaValue]:
    """
    Follow a dotted path through the metadata.

    Names select map fields, integers select list positions:
    ``meta_deep_get(meta, "knowledges.0.synonyms")``. The first selector
    must be a name.
    """
    selectors = _selectors(path)
    first, rest = selectors[0], selectors[1:]
    if not isinstance(first, str) or not isinstance(meta, dict):
        return None

    current = meta.get(first)
    for selector in rest:
        if current is None:
            return None
        if isinstance(selector, str):
            fields = meta_to_map(current)
            current = fields.get(selector) if fields is not None else None
        else:
            items = meta_to_list(current)
            current = items[selector] if items is not None and selector < len(items) else None
    return current


# ============================================================================
# Encoding (used to write diagnostics back)
# ============================================================================

def MetaString(text: str) -> MetaValue:
    return {"t": "MetaString", "c": text}


def MetaList(items: List[MetaValue]) -> MetaValue:
    return {"t": "MetaList", "c": list(items)}


def MetaMap(fields: Dict[str, MetaValue]) -> MetaValue:
    return {"t": "MetaMap", "c": dict(fields)}


def MetaInlines(inlines: List[Node]) -> MetaValue:
    return {"t": "MetaInlines", "c": list(inlines)}
