"""
One-document pipeline.

    metadata -> KnowledgeBase -> KnowledgeResolver
    document -> LipicsFilter walk (theorems, then knowledge directives)

The output mode and its emitter are fixed before the walk starts.
"""

import json
import logging
from typing import Any, Dict, IO, List, Optional

from config.settings import FilterSettings, settings as default_settings
from .knowledge.base import parse_knowledge_base
from .knowledge.commands import span_to_knowledge
from .knowledge.emitters import KnowledgeEmitter, create_emitter
from .knowledge.resolver import KnowledgeResolver
from .modes import OutputMode, select_mode
from .pandoc.ast import Node
from .pandoc.meta import meta_is_set, meta_to_string
from .pandoc.walker import DocumentWalker
from .structure.theorems import (
    TheoremContext, block_to_theorem, theorem_to_latex, theorem_to_pandoc,
)

logger = logging.getLogger(__name__)


class FilterError(Exception):
    """Base error of the filter."""
    pass


class FilterInputError(FilterError):
    """Raised when the input is not a pandoc JSON document."""
    pass


class LipicsFilter(DocumentWalker):
    """Rewrites theorem Divs and knowledge spans during one traversal."""

    def __init__(self, mode: OutputMode, resolver: KnowledgeResolver):
        self.mode = mode
        self.resolver = resolver
        self.emitter: KnowledgeEmitter = create_emitter(mode, resolver)
        self.theorems = TheoremContext()

    def rewrite_block(self, block: Node) -> Optional[List[Node]]:
        thm = block_to_theorem(self.theorems, block)
        if thm is None:
            return None
        if self.mode.is_latex:
            return theorem_to_latex(thm)
        return theorem_to_pandoc(thm)

    def rewrite_inline(self, inline: Node) -> Optional[List[Node]]:
        command = span_to_knowledge(inline)
        if command is None:
            return None
        return self.emitter.emit(command)


def run_filter(
    doc: Dict[str, Any],
    target: Optional[str] = None,
    settings: Optional[FilterSettings] = None,
) -> Dict[str, Any]:
    """
    Filter a pandoc document in place and return it.

    Args:
        doc: pandoc JSON document (``meta`` + ``blocks``)
        target: target renderer named on the command line; LaTeX modes are
            only honoured when it is ``latex``
        settings: filter settings, defaults to the environment settings
    """
    settings = settings or default_settings
    meta = doc.setdefault("meta", {})

    knowledge = parse_knowledge_base(meta, settings.knowledges_key)
    resolver = KnowledgeResolver(knowledge)
    mode = select_mode(target, meta_to_string(meta.get(settings.mode_key)), settings.default_mode)
    logger.debug(f"Filtering in {mode.value} mode with {len(knowledge)} knowledge(s)")

    walker = LipicsFilter(mode, resolver)
    walker.walk_document(doc)
    logger.debug(f"Rewrote {walker.theorems.theorem_counter} theorem(s)")

    if meta_is_set(meta.get(settings.debug_key)):
        report = resolver.report()
        logger.info(
            f"Knowledges: {len(report.introduced)} introduced, "
            f"{len(report.referenced)} referenced, {len(report.unknown)} unknown, "
            f"{len(report.not_introduced)} never introduced"
        )
        meta[settings.report_key] = report.to_meta()

    return doc


def read_document(stream: IO[str]) -> Dict[str, Any]:
    """Read a whole pandoc JSON document."""
    try:
        doc = json.load(stream)
    except (OSError, ValueError) as e:
        raise FilterInputError(f"Cannot read pandoc JSON: {e}") from e
    if not isinstance(doc, dict) or not isinstance(doc.get("blocks"), list):
        raise FilterInputError("Input is not a pandoc JSON document")
    return doc


def write_document(doc: Dict[str, Any], stream: IO[str]) -> None:
    json.dump(doc, stream, ensure_ascii=False)
