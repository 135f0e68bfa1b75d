"""
Theorem/proof records.

Built from a theorem-like Div by ``block_to_theorem`` and consumed right
away by one of the theorem emitters; never stored beyond one rewrite.
"""

from enum import Enum
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set, Union

from config.constants import CUSTOM_THEOREM_PREFIX
from ..pandoc.ast import Node


class TheoremType(Enum):
    """Standard theorem-like environments."""
    THEOREM = "theorem"
    LEMMA = "lemma"
    COROLLARY = "corollary"
    PROPOSITION = "proposition"
    CONJECTURE = "conjecture"
    CLAIM = "claim"


@dataclass(frozen=True)
class CustomTheoremType:
    """Any other environment, written ``custom:<name>`` in the classes."""
    name: str

    @property
    def value(self) -> str:
        return self.name


TheoremKind = Union[TheoremType, CustomTheoremType]


def parse_theorem_kind(cls: str) -> Optional[TheoremKind]:
    """Theorem kind denoted by a single class, if any."""
    if cls.startswith(CUSTOM_THEOREM_PREFIX):
        name = cls[len(CUSTOM_THEOREM_PREFIX):]
        return CustomTheoremType(name) if name else None
    try:
        return TheoremType(cls)
    except ValueError:
        return None


def to_theorem_kind(classes: List[str]) -> Optional[TheoremKind]:
    """First class naming a theorem kind."""
    for cls in classes:
        kind = parse_theorem_kind(cls)
        if kind is not None:
            return kind
    return None


def environment_name(kind: TheoremKind) -> str:
    """LaTeX environment name of a theorem kind."""
    return kind.value


class ProofKind(Enum):
    PROOF = "proof"
    SKETCH = "sketch"


class ProofStatus(Enum):
    IMPORTANT = "important"  # main body
    HIDDEN = "hidden"        # appendix / details


@dataclass
class Proof:
    """A proof attached to a theorem, introduced by a header in the Div."""
    body: List[Node]
    title: Optional[List[Node]] = None
    status: ProofStatus = ProofStatus.IMPORTANT
    kind: ProofKind = ProofKind.PROOF
    label: Optional[str] = None
    classes: Set[str] = field(default_factory=set)
    keyvals: Dict[str, str] = field(default_factory=dict)


@dataclass
class Theorem:
    """
    A theorem-like statement with its proofs.

    Attributes:
        kind: environment kind
        statement: blocks of the statement, verbatim
        title: optional rich-text title
        label: optional identifier for cross-references
        restatable: optional thm-restate macro name
        proofs: proofs in document order
        classes: classes of the Div (and of its title header)
        keyvals: attributes of the Div (and of its title header)
    """
    kind: TheoremKind
    statement: List[Node]
    title: Optional[List[Node]] = None
    label: Optional[str] = None
    restatable: Optional[str] = None
    proofs: List[Proof] = field(default_factory=list)
    classes: Set[str] = field(default_factory=set)
    keyvals: Dict[str, str] = field(default_factory=dict)
