"""
Knowledge base construction from document metadata.

Expected metadata shape (YAML front matter)::

    knowledges:
      - synonyms:
          - NP
          - nondeterministic polynomial time
          - name: NP
            scope: complexity

A bare string or rich text gives a global synonym; a map with ``name`` and
``scope`` gives a scoped one. Decoding is best-effort: malformed items are
skipped and a missing or malformed ``knowledges`` entry gives an empty base.
"""

import logging
from typing import Any, Dict, List, Optional

from config.constants import META_KNOWLEDGES
from ..pandoc.ast import node_type
from ..pandoc.meta import meta_to_inlines, meta_to_list, meta_to_map, meta_to_string
from .model import KnowledgeBase, KnowledgeEntry, KnowledgeSynonym

logger = logging.getLogger(__name__)


def parse_knowledge_synonym(meta: Any) -> Optional[KnowledgeSynonym]:
    """Global from MetaString/MetaInlines, scoped from a {name, scope} map."""
    tag = node_type(meta)
    if tag in ("MetaString", "MetaInlines"):
        return KnowledgeSynonym.global_(meta_to_inlines(meta))
    fields = meta_to_map(meta)
    if fields is not None:
        name = meta_to_inlines(fields.get("name"))
        scope = meta_to_string(fields.get("scope"))
        if name is None or scope is None:
            return None
        return KnowledgeSynonym.scoped(name, scope)
    return None


def parse_knowledge_entry(meta: Any) -> Optional[KnowledgeEntry]:
    """
    A knowledge entry is a map with a ``synonyms`` list. More fields
    (url, description, ...) may come later; they are ignored for now.
    """
    fields = meta_to_map(meta)
    if fields is None:
        return None
    items = meta_to_list(fields.get("synonyms"))
    if items is None:
        return None

    synonyms: List[KnowledgeSynonym] = []
    for item in items:
        synonym = parse_knowledge_synonym(item)
        if synonym is None:
            logger.debug(f"Skipping malformed synonym: {item!r}")
            continue
        synonyms.append(synonym)
    return KnowledgeEntry(synonyms=synonyms)


def parse_knowledge_entries(meta: Any) -> Optional[List[KnowledgeEntry]]:
    items = meta_to_list(meta)
    if items is None:
        return None

    entries: List[KnowledgeEntry] = []
    for item in items:
        entry = parse_knowledge_entry(item)
        if entry is None:
            logger.debug(f"Skipping malformed knowledge entry: {item!r}")
            continue
        entries.append(entry)
    return entries


def parse_knowledge_base(meta: Dict[str, Any], key: str = META_KNOWLEDGES) -> KnowledgeBase:
    """
    Build the knowledge base from the document metadata.

    Never fails: an absent or malformed ``knowledges`` value yields an
    empty base, so every directive will resolve as unknown.
    """
    entries = parse_knowledge_entries((meta or {}).get(key))
    if entries is None:
        logger.debug(f"No usable '{key}' metadata, knowledge base is empty")
        return KnowledgeBase()

    base = KnowledgeBase.from_entries(entries)
    logger.debug(f"Knowledge base: {len(base.forward)} entries, {len(base.canonize)} synonyms")
    return base
