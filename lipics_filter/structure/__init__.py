"""
Document structure: header-driven segmentation and theorem environments.
"""

from .segmenter import split_vec
from .theorem_model import (
    TheoremType,
    CustomTheoremType,
    TheoremKind,
    ProofKind,
    ProofStatus,
    Proof,
    Theorem,
    to_theorem_kind,
    environment_name,
)
from .theorems import TheoremContext, block_to_theorem, theorem_to_latex, theorem_to_pandoc

__all__ = [
    'split_vec',
    'TheoremType',
    'CustomTheoremType',
    'TheoremKind',
    'ProofKind',
    'ProofStatus',
    'Proof',
    'Theorem',
    'to_theorem_kind',
    'environment_name',
    'TheoremContext',
    'block_to_theorem',
    'theorem_to_latex',
    'theorem_to_pandoc',
]
