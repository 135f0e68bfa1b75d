"""
Depth-first rewriting traversal over a pandoc document.

Nodes are visited in document order. Each node is offered to the rewrite
hook first; a replacement list is visited in turn (its own nodes may be
rewritten again) and an unchanged node has its children visited. The
left-to-right order of directives, nested ones included, is therefore the
order in which they are rewritten.

A rewrite must not return a node that the same hook matches again.
"""

from typing import Any, Dict, List, Optional

from .ast import Node, node_type

_INLINE_CONTAINERS = {
    "Emph", "Underline", "Strong", "Strikeout",
    "Superscript", "Subscript", "SmallCaps",
}


class DocumentWalker:
    """
    Base traversal. Subclasses override ``rewrite_block`` and
    ``rewrite_inline``; returning None keeps the node unchanged, returning
    a list replaces it.
    """

    def rewrite_block(self, block: Node) -> Optional[List[Node]]:
        return None

    def rewrite_inline(self, inline: Node) -> Optional[List[Node]]:
        return None

    # ------------------------------------------------------------------
    # Entry point
    # ------------------------------------------------------------------

    def walk_document(self, doc: Dict[str, Any]) -> Dict[str, Any]:
        doc["blocks"] = self.visit_blocks(doc.get("blocks") or [])
        return doc

    # ------------------------------------------------------------------
    # Lists
    # ------------------------------------------------------------------

    def visit_blocks(self, blocks: List[Node]) -> List[Node]:
        new_blocks: List[Node] = []
        for block in blocks:
            replacement = self.rewrite_block(block)
            if replacement is None:
                self._walk_block(block)
                new_blocks.append(block)
            else:
                new_blocks.extend(self.visit_blocks(replacement))
        return new_blocks

    def visit_inlines(self, inlines: List[Node]) -> List[Node]:
        new_inlines: List[Node] = []
        for inline in inlines:
            replacement = self.rewrite_inline(inline)
            if replacement is None:
                self._walk_inline(inline)
                new_inlines.append(inline)
            else:
                new_inlines.extend(self.visit_inlines(replacement))
        return new_inlines

    # ------------------------------------------------------------------
    # Children
    # ------------------------------------------------------------------

    def _walk_block(self, block: Node) -> None:
        tag = node_type(block)
        c = block.get("c") if isinstance(block, dict) else None

        if tag in ("Plain", "Para"):
            block["c"] = self.visit_inlines(c)
        elif tag == "LineBlock":
            block["c"] = [self.visit_inlines(line) for line in c]
        elif tag == "BlockQuote":
            block["c"] = self.visit_blocks(c)
        elif tag == "BulletList":
            block["c"] = [self.visit_blocks(item) for item in c]
        elif tag == "OrderedList":
            c[1] = [self.visit_blocks(item) for item in c[1]]
        elif tag == "DefinitionList":
            block["c"] = [
                [self.visit_inlines(term), [self.visit_blocks(d) for d in defs]]
                for term, defs in c
            ]
        elif tag == "Header":
            c[2] = self.visit_inlines(c[2])
        elif tag == "Div":
            c[1] = self.visit_blocks(c[1])
        elif tag == "Figure":
            self._walk_caption(c[1])
            c[2] = self.visit_blocks(c[2])
        elif tag == "Table":
            self._walk_table(c)

    def _walk_caption(self, caption: List[Any]) -> None:
        short, long = caption
        if short is not None:
            caption[0] = self.visit_inlines(short)
        caption[1] = self.visit_blocks(long)

    def _walk_rows(self, rows: List[Any]) -> None:
        for row in rows:
            for cell in row[1]:
                cell[4] = self.visit_blocks(cell[4])

    def _walk_table(self, c: List[Any]) -> None:
        _, caption, _, head, bodies, foot = c
        self._walk_caption(caption)
        self._walk_rows(head[1])
        for body in bodies:
            self._walk_rows(body[2])
            self._walk_rows(body[3])
        self._walk_rows(foot[1])

    def _walk_inline(self, inline: Node) -> None:
        tag = node_type(inline)
        c = inline.get("c") if isinstance(inline, dict) else None

        if tag in _INLINE_CONTAINERS:
            inline["c"] = self.visit_inlines(c)
        elif tag in ("Quoted", "Span"):
            c[1] = self.visit_inlines(c[1])
        elif tag == "Cite":
            for citation in c[0]:
                citation["citationPrefix"] = self.visit_inlines(citation.get("citationPrefix", []))
                citation["citationSuffix"] = self.visit_inlines(citation.get("citationSuffix", []))
            c[1] = self.visit_inlines(c[1])
        elif tag in ("Link", "Image"):
            c[1] = self.visit_inlines(c[1])
        elif tag == "Note":
            inline["c"] = self.visit_blocks(c)
