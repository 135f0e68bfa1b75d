"""
Knowledge resolution state for one traversal.

The resolver owns the knowledge base for the run and records, in document
order, which knowledges were introduced, which were referenced and which
directives could not be resolved. It is passed explicitly to the stateful
emitters; the order in which they call it is the document order.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from config.constants import KREF_ID_PREFIX
from ..pandoc.ast import stringify_inlines
from ..pandoc.meta import MetaList, MetaMap, MetaString
from .model import KnowledgeBase, KnowledgeCommand, KnowledgeEntry, KnowledgeId

logger = logging.getLogger(__name__)


@dataclass
class KnowledgeReport:
    """Summary of a traversal, for diagnostics."""
    introduced: List[str] = field(default_factory=list)
    referenced: List[str] = field(default_factory=list)
    unknown: List[str] = field(default_factory=list)
    # Referenced somewhere but introduced nowhere
    not_introduced: List[str] = field(default_factory=list)

    def to_meta(self) -> Dict[str, Any]:
        """MetaMap form, for writing back into the document metadata."""
        return MetaMap({
            name: MetaList([MetaString(s) for s in values])
            for name, values in (
                ("introduced", self.introduced),
                ("referenced", self.referenced),
                ("unknown", self.unknown),
                ("not-introduced", self.not_introduced),
            )
        })


class KnowledgeResolver:
    """Mutable session state wrapping a read-only KnowledgeBase."""

    def __init__(self, knowledge: KnowledgeBase):
        self.knowledge = knowledge
        self.introduced: List[Tuple[KnowledgeId, KnowledgeCommand]] = []
        self.backrefs: List[Tuple[KnowledgeId, KnowledgeCommand]] = []
        self.unknown: List[KnowledgeCommand] = []

    def resolve(self, command: KnowledgeCommand) -> Optional[Tuple[KnowledgeId, KnowledgeEntry]]:
        """
        Resolve a command against the base.

        A miss is recorded in ``unknown`` and returns None; it never raises.
        """
        synonym = command.synonym()
        resolved = self.knowledge.resolve(synonym)
        if resolved is None:
            self.unknown.append(command)
            logger.warning(f"Unknown knowledge ({command.kind.value}): {synonym.to_string()!r}")
        return resolved

    def record_intro(self, kid: KnowledgeId, command: KnowledgeCommand) -> None:
        self.introduced.append((kid, command))

    def record_backref(self, kid: KnowledgeId, command: KnowledgeCommand) -> None:
        self.backrefs.append((kid, command))

    def next_backref_ident(self) -> str:
        """Identifier for the next anonymous reference: kref-0, kref-1, ..."""
        return f"{KREF_ID_PREFIX}{len(self.backrefs)}"

    def _display(self, kid: KnowledgeId) -> str:
        canonical = self.knowledge.forward[kid].canonical
        return canonical.to_string() if canonical is not None else str(kid)

    def report(self) -> KnowledgeReport:
        introduced_ids = {kid for kid, _ in self.introduced}
        referenced_ids: List[KnowledgeId] = []
        for kid, _ in self.backrefs:
            if kid not in referenced_ids:
                referenced_ids.append(kid)

        return KnowledgeReport(
            introduced=[self._display(kid) for kid, _ in self.introduced],
            referenced=[self._display(kid) for kid in referenced_ids],
            unknown=[stringify_inlines(cmd.content) for cmd in self.unknown],
            not_introduced=[self._display(kid) for kid in referenced_ids if kid not in introduced_ids],
        )
