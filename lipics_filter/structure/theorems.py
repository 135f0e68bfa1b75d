"""
Theorem-like environments.

A Div carrying one of the theorem classes is a theorem. Inside it, headers
split the content: the first header (when nothing precedes it) gives the
theorem's title and label, and every further header opens a proof::

    ::: {.lemma}
    # Pumping lemma {#lem:pumping}
    Statement...
    # Proof sketch {.sketch .appendix}
    Argument...
    :::

Two renderings are provided: raw LaTeX environments for LaTeX targets and
plain Divs for every other writer.
"""

import logging
from typing import Dict, List, Optional, Set

from config.constants import CLASS_SKETCH, CLASS_APPENDIX, KEY_RESTATABLE
from ..pandoc.ast import (
    Div, Emph, Node, Para, Plain, RawInline, Space, Str, Strong,
    get_attr, header_parts, is_header, make_attr, node_type, text_to_inlines,
)
from .segmenter import split_vec
from .theorem_model import (
    Proof, ProofKind, ProofStatus, Theorem,
    environment_name, parse_theorem_kind, to_theorem_kind,
)

logger = logging.getLogger(__name__)


class TheoremContext:
    """Per-run state of the theorem rewrite."""

    def __init__(self):
        self.theorem_counter = 0

    def next_theorem(self) -> int:
        current = self.theorem_counter
        self.theorem_counter += 1
        return current


def _header_to_proof(header: Node, body: List[Node]) -> Proof:
    _, attr, inlines = header_parts(header)
    ident, classes, keyvals = get_attr(attr)
    cls: Set[str] = set(classes)
    return Proof(
        body=body,
        title=list(inlines) if inlines else None,
        status=ProofStatus.HIDDEN if CLASS_APPENDIX in cls else ProofStatus.IMPORTANT,
        kind=ProofKind.SKETCH if CLASS_SKETCH in cls else ProofKind.PROOF,
        label=ident or None,
        classes=cls,
        keyvals=dict(keyvals),
    )


def block_to_theorem(ctx: TheoremContext, block: Node) -> Optional[Theorem]:
    """
    Convert a theorem-like Div into a Theorem, or return None for any
    other block.
    """
    if node_type(block) != "Div":
        return None
    attr, children = block["c"]
    ident, classes, keyvals = get_attr(attr)

    kind = to_theorem_kind(classes)
    if kind is None:
        return None
    number = ctx.next_theorem()

    theorem_classes: Set[str] = set(classes)
    theorem_keyvals: Dict[str, str] = dict(keyvals)
    title: Optional[List[Node]] = None
    label: Optional[str] = ident or None

    before, after = split_vec(children, is_header)

    if before or not after:
        statement = before
    else:
        header, statement = after.pop(0)
        _, header_attr, inlines = header_parts(header)
        header_ident, header_classes, header_keyvals = get_attr(header_attr)
        title = list(inlines) if inlines else None
        if header_ident:
            label = header_ident
        theorem_classes.update(header_classes)
        theorem_keyvals.update(header_keyvals)

    proofs = [_header_to_proof(header, body) for header, body in after]
    logger.debug(f"Theorem #{number} ({environment_name(kind)}): {len(proofs)} proof(s)")

    return Theorem(
        kind=kind,
        statement=statement,
        title=title,
        label=label,
        restatable=theorem_keyvals.get(KEY_RESTATABLE),
        proofs=proofs,
        classes=theorem_classes,
        keyvals=theorem_keyvals,
    )


# ============================================================================
# LaTeX rendering
# ============================================================================

def theorem_to_latex(thm: Theorem) -> List[Node]:
    """
    Render a theorem as::

        \\begin{kind}[label=..., restatable=..., title={...}]
        statement
        \\end{kind}
        \\begin{proof}
        body
        \\end{proof}

    Options are omitted when there are none.
    """
    env = environment_name(thm.kind)
    opts = []
    if thm.label is not None:
        opts.append(f"label={thm.label}")
    if thm.restatable is not None:
        opts.append(f"restatable={thm.restatable}")

    if thm.title is not None:
        opts.append("title={")
        begin = [
            RawInline(f"\\begin{{{env}}}["),
            RawInline(", ".join(opts)),
            *thm.title,
            RawInline("}]"),
        ]
    else:
        begin = [RawInline(f"\\begin{{{env}}}")]
        if opts:
            begin.append(RawInline(f"[{', '.join(opts)}]"))

    blocks = [Plain(begin)]
    blocks.extend(thm.statement)
    blocks.append(Plain([RawInline(f"\\end{{{env}}}")]))

    # Proof kind, status, label and title are not rendered yet
    for proof in thm.proofs:
        blocks.append(Plain([RawInline("\\begin{proof}")]))
        blocks.extend(proof.body)
        blocks.append(Plain([RawInline("\\end{proof}")]))

    return blocks


# ============================================================================
# Format-neutral rendering
# ============================================================================

def _display_name(env: str) -> str:
    return env.replace("-", " ").replace("_", " ").capitalize()


def _proof_to_div(proof: Proof) -> Node:
    classes = ["proof"]
    if proof.kind is ProofKind.SKETCH:
        classes.append(CLASS_SKETCH)
    if proof.status is ProofStatus.HIDDEN:
        classes.append(CLASS_APPENDIX)

    if proof.title is not None:
        lead = list(proof.title)
    elif proof.kind is ProofKind.SKETCH:
        lead = text_to_inlines("Proof sketch")
    else:
        lead = [Str("Proof")]

    blocks = [Para([Emph(lead + [Str(".")])])]
    blocks.extend(proof.body)
    return Div(make_attr(proof.label or "", classes), blocks)


def theorem_to_pandoc(thm: Theorem) -> List[Node]:
    """
    Render a theorem as a Div any writer understands: a bold heading
    paragraph, the statement, then one ``.proof`` Div per proof.
    """
    env = environment_name(thm.kind)
    heading = text_to_inlines(_display_name(env))
    if thm.title is not None:
        heading += [Space(), Str("(")] + list(thm.title) + [Str(")")]
    heading.append(Str("."))

    kept_classes = sorted(c for c in thm.classes if parse_theorem_kind(c) is None)
    keyvals = [("kind", env)] + sorted(
        (k, v) for k, v in thm.keyvals.items() if k != "kind"
    )
    attr = make_attr(thm.label or "", ["theorem-like"] + kept_classes, keyvals)

    blocks = [Para([Strong(heading)])]
    blocks.extend(thm.statement)
    blocks.extend(_proof_to_div(proof) for proof in thm.proofs)
    return [Div(attr, blocks)]
