"""
Knowledges: terms introduced once and referenced throughout the document,
in the manner of the LaTeX ``knowledge`` package.

    [NP]{.intro}     introduce (anchor)
    [NP]{.reintro}   introduce again (no anchor)
    [NP]{.ref}       reference
"""

from .model import (
    KnowledgeId,
    KnowledgeCommandKind,
    KnowledgeSynonym,
    KnowledgeEntry,
    KnowledgeBase,
    KnowledgeCommand,
)
from .base import parse_knowledge_base
from .commands import span_to_knowledge
from .resolver import KnowledgeResolver, KnowledgeReport
from .emitters import (
    KnowledgeEmitter,
    LatexKnowledgeEmitter,
    FastLatexKnowledgeEmitter,
    PandocKnowledgeEmitter,
    create_emitter,
)

__all__ = [
    'KnowledgeId',
    'KnowledgeCommandKind',
    'KnowledgeSynonym',
    'KnowledgeEntry',
    'KnowledgeBase',
    'KnowledgeCommand',
    'parse_knowledge_base',
    'span_to_knowledge',
    'KnowledgeResolver',
    'KnowledgeReport',
    'KnowledgeEmitter',
    'LatexKnowledgeEmitter',
    'FastLatexKnowledgeEmitter',
    'PandocKnowledgeEmitter',
    'create_emitter',
]
