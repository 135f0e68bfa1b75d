"""
Knowledge directive emitters.

Three interchangeable renderings of a KnowledgeCommand, one per OutputMode:

- LatexKnowledgeEmitter: ``\\intro``, ``\\reintro`` and ``\\kl`` macros of the
  LaTeX ``knowledge`` package, which does the resolution itself.
- FastLatexKnowledgeEmitter: resolves here and emits low-level macros so the
  document compiles in a single LaTeX pass. The preamble must define::

      \\akldef{unique-id}{content}
      \\aklredef{unique-id}{content}
      \\aklref{unique-id}{content}
      \\akldeferror{content}
      \\aklredeferror{content}
      \\aklreferror{content}

- PandocKnowledgeEmitter: resolves here and emits spans and links usable by
  any pandoc writer.

Emitters are created once per run by ``create_emitter``.
"""

from abc import ABC, abstractmethod
from dataclasses import replace
from typing import Dict, List, Optional, Type

from config.constants import (
    KL_ID_PREFIX, KL_DEFINED, KL_UNDEFINED, KEY_NAME,
    MACRO_INTRO, MACRO_REINTRO, MACRO_REF,
    MACRO_FAST_DEF, MACRO_FAST_REDEF, MACRO_FAST_REF,
    MACRO_FAST_DEF_ERROR, MACRO_FAST_REDEF_ERROR, MACRO_FAST_REF_ERROR,
)
from ..modes import OutputMode
from ..pandoc.ast import Emph, Link, Node, RawInline, Span, make_attr
from .model import KnowledgeCommand, KnowledgeCommandKind, KnowledgeId
from .resolver import KnowledgeResolver


def knowledge_anchor(kid: KnowledgeId) -> str:
    """Unique per-entry identifier, shared by its definition and references."""
    return f"{KL_ID_PREFIX}{kid}"


def _wrap(opening: str, content: List[Node]) -> List[Node]:
    return [RawInline(opening), *content, RawInline("}")]


class KnowledgeEmitter(ABC):
    """Renders knowledge commands for one output mode."""

    mode: OutputMode

    @abstractmethod
    def emit(self, command: KnowledgeCommand) -> List[Node]:
        """Inline nodes replacing the directive span."""
        pass


class LatexKnowledgeEmitter(KnowledgeEmitter):
    """
    Delegates to the LaTeX ``knowledge`` package. Stateless: nothing is
    resolved, every command is emitted as-is.
    """

    mode = OutputMode.LATEX

    MACROS = {
        KnowledgeCommandKind.INTRO: MACRO_INTRO,
        KnowledgeCommandKind.REINTRO: MACRO_REINTRO,
        KnowledgeCommandKind.REF: MACRO_REF,
    }

    def __init__(self, resolver: Optional[KnowledgeResolver] = None):
        # Accepted for a uniform constructor; never consulted
        self.resolver = resolver

    @staticmethod
    def parameters(command: KnowledgeCommand) -> str:
        """``(scope)[name]``, ``(scope)``, ``[name]`` or nothing."""
        params = ""
        if command.scope is not None:
            params += f"({command.scope})"
        if command.name is not None:
            params += f"[{command.name}]"
        return params

    def emit(self, command: KnowledgeCommand) -> List[Node]:
        macro = self.MACROS[command.kind]
        return _wrap(f"\\{macro}{self.parameters(command)}{{", command.content)


class FastLatexKnowledgeEmitter(KnowledgeEmitter):
    """Resolves against the knowledge base and emits single-pass macros."""

    mode = OutputMode.FAST_LATEX

    RESOLVED = {
        KnowledgeCommandKind.INTRO: MACRO_FAST_DEF,
        KnowledgeCommandKind.REINTRO: MACRO_FAST_REDEF,
        KnowledgeCommandKind.REF: MACRO_FAST_REF,
    }
    UNRESOLVED = {
        KnowledgeCommandKind.INTRO: MACRO_FAST_DEF_ERROR,
        KnowledgeCommandKind.REINTRO: MACRO_FAST_REDEF_ERROR,
        KnowledgeCommandKind.REF: MACRO_FAST_REF_ERROR,
    }

    def __init__(self, resolver: KnowledgeResolver):
        self.resolver = resolver

    def emit(self, command: KnowledgeCommand) -> List[Node]:
        resolved = self.resolver.resolve(command)
        if resolved is None:
            return _wrap(f"\\{self.UNRESOLVED[command.kind]}{{", command.content)

        kid, _ = resolved
        if command.kind is KnowledgeCommandKind.INTRO:
            self.resolver.record_intro(kid, command)
        elif command.kind is KnowledgeCommandKind.REF:
            self.resolver.record_backref(kid, command)
        # Re-introductions leave no trace

        macro = self.RESOLVED[command.kind]
        return _wrap(f"\\{macro}{{{knowledge_anchor(kid)}}}{{", command.content)


class PandocKnowledgeEmitter(KnowledgeEmitter):
    """Resolves against the knowledge base and emits anchors and links."""

    mode = OutputMode.PANDOC

    CLASSES = {
        KnowledgeCommandKind.INTRO: "kl-intro",
        KnowledgeCommandKind.REINTRO: "kl-reintro",
        KnowledgeCommandKind.REF: "kl-ref",
    }

    def __init__(self, resolver: KnowledgeResolver):
        self.resolver = resolver

    def emit(self, command: KnowledgeCommand) -> List[Node]:
        kind_class = self.CLASSES[command.kind]
        resolved = self.resolver.resolve(command)

        if resolved is None:
            attr = make_attr(command.ident, [kind_class, KL_UNDEFINED])
            return [Span(attr, [Emph(command.content)])]

        kid, entry = resolved
        anchor = knowledge_anchor(kid)

        if command.kind is KnowledgeCommandKind.INTRO:
            attr = make_attr(anchor, [kind_class, KL_DEFINED], [(KEY_NAME, str(kid))])
            self.resolver.record_intro(kid, command)
            return [Span(attr, [Emph(command.content)])]

        if command.kind is KnowledgeCommandKind.REINTRO:
            # Not separately anchorable
            attr = make_attr("", [kind_class, KL_DEFINED], [(KEY_NAME, str(kid))])
            return [Span(attr, [Emph(command.content)])]

        if not command.ident:
            command = replace(command, ident=self.resolver.next_backref_ident())
        attr = make_attr(command.ident, [kind_class, KL_DEFINED])
        title = f"Reference to {entry.canonical.to_string()}"
        self.resolver.record_backref(kid, command)
        return [Link(attr, command.content, f"#{anchor}", title)]


# Registry of emitters by output mode
EMITTER_REGISTRY: Dict[OutputMode, Type[KnowledgeEmitter]] = {
    OutputMode.LATEX: LatexKnowledgeEmitter,
    OutputMode.FAST_LATEX: FastLatexKnowledgeEmitter,
    OutputMode.PANDOC: PandocKnowledgeEmitter,
}


def create_emitter(mode: OutputMode, resolver: KnowledgeResolver) -> KnowledgeEmitter:
    """Instantiate the emitter for a run."""
    return EMITTER_REGISTRY[mode](resolver)
