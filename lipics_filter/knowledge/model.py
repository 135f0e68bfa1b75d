"""
Knowledge data model.

A knowledge is a concept with one or more accepted spellings (synonyms),
possibly qualified by a scope. The base is built once from the document
metadata and shared read-only; directives found in the document are parsed
into KnowledgeCommand records.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, NewType, Optional, Tuple

from ..pandoc.ast import Node, stringify_inlines

# Position of an entry in KnowledgeBase.forward; stable within one run only
KnowledgeId = NewType("KnowledgeId", int)


class KnowledgeCommandKind(Enum):
    """The directives that can be issued in the document."""
    INTRO = "intro"      # introduces a knowledge (creates an anchor)
    REINTRO = "reintro"  # re-introduces it (no anchor)
    REF = "ref"          # references it


def _freeze(value: Any) -> Any:
    """Hashable, structurally comparable copy of a JSON value."""
    if isinstance(value, list):
        return tuple(_freeze(v) for v in value)
    if isinstance(value, dict):
        return tuple(sorted((k, _freeze(v)) for k, v in value.items()))
    return value


@dataclass(frozen=True, eq=False)
class KnowledgeSynonym:
    """
    One accepted spelling of a knowledge.

    Global when ``scope`` is None, scoped otherwise. Equality and hashing
    are structural over the inline content and the scope: two synonyms that
    render to the same text but differ in structure are different keys.
    """
    content: List[Node]
    scope: Optional[str] = None

    @classmethod
    def global_(cls, content: List[Node]) -> "KnowledgeSynonym":
        return cls(list(content))

    @classmethod
    def scoped(cls, content: List[Node], scope: str) -> "KnowledgeSynonym":
        return cls(list(content), scope)

    @property
    def is_scoped(self) -> bool:
        return self.scope is not None

    def _key(self) -> Tuple[bool, Optional[str], Any]:
        return (self.is_scoped, self.scope, _freeze(self.content))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, KnowledgeSynonym):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def to_string(self) -> str:
        text = stringify_inlines(self.content)
        return f"{text}@{self.scope}" if self.is_scoped else text

    def __repr__(self) -> str:
        return f"KnowledgeSynonym({self.to_string()!r})"


@dataclass
class KnowledgeEntry:
    """A canonical concept; the first synonym is its display form."""
    synonyms: List[KnowledgeSynonym]

    @property
    def canonical(self) -> Optional[KnowledgeSynonym]:
        return self.synonyms[0] if self.synonyms else None


@dataclass
class KnowledgeBase:
    """
    Entries indexed by KnowledgeId plus the reverse synonym index.

    Every value in ``canonize`` is a valid index into ``forward``.
    """
    forward: List[KnowledgeEntry] = field(default_factory=list)
    canonize: Dict[KnowledgeSynonym, KnowledgeId] = field(default_factory=dict)

    @classmethod
    def from_entries(cls, entries: List[KnowledgeEntry]) -> "KnowledgeBase":
        """Index entries by position; later entries overwrite identical synonyms."""
        canonize: Dict[KnowledgeSynonym, KnowledgeId] = {}
        for i, entry in enumerate(entries):
            for synonym in entry.synonyms:
                canonize[synonym] = KnowledgeId(i)
        return cls(forward=list(entries), canonize=canonize)

    def resolve(self, synonym: KnowledgeSynonym) -> Optional[Tuple[KnowledgeId, KnowledgeEntry]]:
        kid = self.canonize.get(synonym)
        if kid is None or not 0 <= kid < len(self.forward):
            return None
        return kid, self.forward[kid]

    def __len__(self) -> int:
        return len(self.forward)


@dataclass
class KnowledgeCommand:
    """
    One directive found in the document, independent of the output format.

    Attributes:
        ident: span identifier; empty means "assign one if needed"
        kind: intro / reintro / ref
        content: inlines re-emitted as the visible text
        name: explicit knowledge name (``kl=`` attribute)
        scope: explicit scope (``scope=`` attribute)
    """
    ident: str
    kind: KnowledgeCommandKind
    content: List[Node]
    name: Optional[str] = None
    scope: Optional[str] = None

    def synonym(self) -> KnowledgeSynonym:
        """
        Lookup key for this command.

        An explicit name replaces the content as a single Str; an explicit
        scope makes the key scoped.
        """
        text = [{"t": "Str", "c": self.name}] if self.name is not None else self.content
        if self.scope is not None:
            return KnowledgeSynonym.scoped(text, self.scope)
        return KnowledgeSynonym.global_(text)
