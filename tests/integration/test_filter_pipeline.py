"""
Integration tests: whole documents through run_filter and the CLI.
"""
import io
import json
import logging

import pytest

from conftest import global_synonym, knowledge_entry
from lipics_filter import cli
from lipics_filter.filter import FilterInputError, read_document, run_filter
from lipics_filter.pandoc.ast import (
    Div, Emph, Header, Para, Plain, RawInline, Space, Span, Str, make_attr, text_to_inlines,
)
from lipics_filter.pandoc.meta import MetaList, MetaString


def directive(text, kind, **keyvals):
    return Span(make_attr("", [kind], list(keyvals.items())), text_to_inlines(text))


def document(blocks, **meta):
    return {"pandoc-api-version": [1, 23, 1], "meta": dict(meta), "blocks": blocks}


def nodes_of(tree, tag):
    """All nodes of one type, in document order."""
    if isinstance(tree, dict):
        if tree.get("t") == tag:
            yield tree
        for value in tree.values():
            yield from nodes_of(value, tag)
    elif isinstance(tree, list):
        for item in tree:
            yield from nodes_of(item, tag)


def raw_texts(blocks):
    return [node["c"][1] for node in nodes_of(blocks, "RawInline")]


@pytest.fixture
def np_meta():
    return {"knowledges": MetaList([knowledge_entry(global_synonym("NP"))])}


def np_document(np_meta, **extra):
    return document([
        Para([Str("Define"), Str(" "), directive("NP", "intro"), Str(".")]),
        Para([Str("Then"), Str(" "), directive("NP", "ref"), Str(".")]),
    ], **np_meta, **extra)


class TestPandocMode:

    def test_intro_then_ref(self, np_meta, test_settings):
        doc = run_filter(np_document(np_meta), target="html", settings=test_settings)
        intro = doc["blocks"][0]["c"][2]
        ref = doc["blocks"][1]["c"][2]

        assert intro["t"] == "Span"
        assert intro["c"][0][0] == "kl-0"
        assert set(intro["c"][0][1]) == {"kl-intro", "kl-defined"}

        assert ref["t"] == "Link"
        assert ref["c"][2] == ["#kl-0", "Reference to NP"]

    def test_no_knowledges_all_undefined(self, test_settings):
        doc = document([Para([directive("NP", "intro"), directive("NP", "ref")])])
        doc = run_filter(doc, target="html", settings=test_settings)
        for span in doc["blocks"][0]["c"]:
            assert span["t"] == "Span"
            assert "kl-undefined" in span["c"][0][1]

    def test_refs_numbered_in_document_order(self, np_meta, test_settings):
        blocks = [
            Para([directive("NP", "ref")]),
            Div(make_attr("", ["note"]), [Para([directive("NP", "ref")])]),
            Para([Emph([directive("NP", "ref")])]),
        ]
        doc = run_filter(document(blocks, **np_meta), target="html", settings=test_settings)
        idents = [
            doc["blocks"][0]["c"][0]["c"][0][0],
            doc["blocks"][1]["c"][1][0]["c"][0]["c"][0][0],
            doc["blocks"][2]["c"][0]["c"][0]["c"][0][0],
        ]
        assert idents == ["kref-0", "kref-1", "kref-2"]

    def test_metadata_latex_mode_ignored_for_html(self, np_meta, test_settings):
        doc = np_document(np_meta, **{"knowledges-mode": MetaString("fast-latex")})
        doc = run_filter(doc, target="html", settings=test_settings)
        assert doc["blocks"][0]["c"][2]["t"] == "Span"

    def test_theorem_becomes_div(self, np_meta, test_settings):
        thm = Div(make_attr("", ["theorem"]), [
            Header(2, make_attr("thm:np"), [directive("NP", "ref")]),
            Para([Str("statement")]),
        ])
        doc = run_filter(document([thm], **np_meta), target="html", settings=test_settings)
        [div] = doc["blocks"]
        assert div["t"] == "Div"
        assert div["c"][0][0] == "thm:np"
        # The directive in the title was resolved after the rewrite
        heading = div["c"][1][0]["c"][0]["c"]
        assert any(node["t"] == "Link" for node in heading)

    def test_nested_ref_numbered_before_following_ref(self, np_meta, test_settings):
        outer = Span(make_attr("", ["intro"], [("kl", "NP")]), [Str("NP"), Space(), directive("NP", "ref")])
        doc = document([Para([outer, directive("NP", "ref")])], **np_meta)
        doc = run_filter(doc, target="html", settings=test_settings)
        assert [link["c"][0][0] for link in nodes_of(doc["blocks"], "Link")] == ["kref-0", "kref-1"]
        assert not any("intro" in span["c"][0][1] for span in nodes_of(doc["blocks"], "Span"))

    def test_refs_in_containers_numbered_in_document_order(self, np_meta, test_settings):
        cell = [make_attr(), {"t": "AlignDefault"}, 1, 1, [Plain([directive("NP", "ref")])]]
        table = {"t": "Table", "c": [
            make_attr(), [None, []], [[{"t": "AlignDefault"}, {"t": "ColWidthDefault"}]],
            [make_attr(), []], [[make_attr(), 0, [], [[make_attr(), [cell]]]]], [make_attr(), []],
        ]}
        figure = {"t": "Figure", "c": [
            make_attr(), [None, [Plain([directive("NP", "ref")])]], [Plain([Str("img")])],
        ]}
        note = {"t": "Note", "c": [Para([directive("NP", "ref")])]}
        definitions = {"t": "DefinitionList", "c": [
            [[Str("term")], [[Para([directive("NP", "ref")])]]],
        ]}
        blocks = [table, figure, Para([Str("x"), note]), definitions]
        doc = run_filter(document(blocks, **np_meta), target="html", settings=test_settings)
        links = list(nodes_of(doc["blocks"], "Link"))
        assert [link["c"][0][0] for link in links] == ["kref-0", "kref-1", "kref-2", "kref-3"]

    def test_theorem_div_is_not_rewritten_twice(self, test_settings):
        thm = Div(make_attr("", ["lemma"]), [Para([Str("s")])])
        doc = run_filter(document([thm]), target="html", settings=test_settings)
        [div] = doc["blocks"]
        _, classes, keyvals = div["c"][0]
        assert classes == ["theorem-like"]
        assert ["kind", "lemma"] in keyvals
        assert div["c"][1][1:] == [Para([Str("s")])]


class TestLatexModes:

    def test_fast_latex(self, np_meta, test_settings):
        doc = np_document(np_meta, **{"knowledges-mode": MetaString("fast-latex")})
        doc = run_filter(doc, target="latex", settings=test_settings)
        first, second = doc["blocks"]
        assert RawInline("\\akldef{kl-0}{") in first["c"]
        assert RawInline("\\aklref{kl-0}{") in second["c"]

    def test_latex(self, np_meta, test_settings):
        doc = np_document(np_meta, **{"knowledges-mode": MetaString("latex")})
        doc = run_filter(doc, target="latex", settings=test_settings)
        assert RawInline("\\intro{") in doc["blocks"][0]["c"]
        assert RawInline("\\kl{") in doc["blocks"][1]["c"]

    def test_theorem_environment(self, test_settings):
        thm = Div(make_attr("", ["lemma"]), [Para([Str("s")]), Header(3, make_attr(), []), Para([Str("p")])])
        doc = document([thm], **{"knowledges-mode": MetaString("latex")})
        doc = run_filter(doc, target="latex", settings=test_settings)
        assert doc["blocks"] == [
            Plain([RawInline("\\begin{lemma}")]),
            Para([Str("s")]),
            Plain([RawInline("\\end{lemma}")]),
            Plain([RawInline("\\begin{proof}")]),
            Para([Str("p")]),
            Plain([RawInline("\\end{proof}")]),
        ]

    def test_theorem_nested_in_proof(self, test_settings):
        thm = Div(make_attr("", ["theorem"]), [
            Header(2, make_attr(), [Str("Main")]),
            Para([Str("s")]),
            Header(3, make_attr(), [Str("Proof")]),
            Div(make_attr("", ["claim"]), [Para([Str("c")])]),
        ])
        doc = document([thm], **{"knowledges-mode": MetaString("latex")})
        doc = run_filter(doc, target="latex", settings=test_settings)
        assert not list(nodes_of(doc["blocks"], "Div"))
        assert raw_texts(doc["blocks"]) == [
            "\\begin{theorem}[", "title={", "}]", "\\end{theorem}",
            "\\begin{proof}", "\\begin{claim}", "\\end{claim}", "\\end{proof}",
        ]

    @pytest.mark.parametrize("mode, expected", [
        ("latex", ["\\intro[NP]{", "\\kl{", "}", "}"]),
        ("fast-latex", ["\\akldef{kl-0}{", "\\aklref{kl-0}{", "}", "}"]),
    ])
    def test_directive_nested_in_directive(self, np_meta, test_settings, mode, expected):
        outer = Span(make_attr("", ["intro"], [("kl", "NP")]), [Str("NP"), Space(), directive("NP", "ref")])
        doc = document([Para([outer])], **np_meta, **{"knowledges-mode": MetaString(mode)})
        doc = run_filter(doc, target="latex", settings=test_settings)
        assert not list(nodes_of(doc["blocks"], "Span"))
        assert raw_texts(doc["blocks"]) == expected


class TestDebugReport:

    def test_report_written_back(self, np_meta, test_settings):
        doc = np_document(np_meta, **{"lipics-debug": MetaString("yes")})
        doc["blocks"].append(Para([directive("coNP", "ref")]))
        doc = run_filter(doc, target="html", settings=test_settings)
        report = doc["meta"]["knowledges-report"]["c"]
        assert report["introduced"]["c"] == [MetaString("NP")]
        assert report["unknown"]["c"] == [MetaString("coNP")]

    def test_false_toggle_still_counts_as_present(self, np_meta, test_settings):
        doc = np_document(np_meta, **{"lipics-debug": {"t": "MetaBool", "c": False}})
        doc = run_filter(doc, target="html", settings=test_settings)
        assert "knowledges-report" in doc["meta"]

    def test_no_report_without_toggle(self, np_meta, test_settings):
        doc = run_filter(np_document(np_meta), target="html", settings=test_settings)
        assert "knowledges-report" not in doc["meta"]


class TestInputOutput:

    def test_read_document_rejects_garbage(self):
        with pytest.raises(FilterInputError):
            read_document(io.StringIO("not json"))
        with pytest.raises(FilterInputError):
            read_document(io.StringIO("[1, 2]"))

    def test_cli_roundtrip(self, np_meta, monkeypatch):
        stdin = io.StringIO(json.dumps(np_document(np_meta)))
        stdout = io.StringIO()
        monkeypatch.setattr("sys.stdin", stdin)
        monkeypatch.setattr("sys.stdout", stdout)

        assert cli.main(["html"]) == 0
        out = json.loads(stdout.getvalue())
        assert out["blocks"][1]["c"][2]["t"] == "Link"

    def test_cli_bad_input(self, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("{"))
        monkeypatch.setattr("sys.stdout", io.StringIO())
        assert cli.main([]) == 1


class TestLogging:

    def test_clean_run_is_silent_at_info(self, np_meta, test_settings, caplog):
        with caplog.at_level(logging.INFO, logger="lipics_filter"):
            run_filter(np_document(np_meta), target="html", settings=test_settings)
        assert [r for r in caplog.records if r.levelno >= logging.INFO] == []

    def test_unknown_directive_warns(self, test_settings, caplog):
        doc = document([Para([directive("coNP", "ref")])])
        with caplog.at_level(logging.INFO, logger="lipics_filter"):
            run_filter(doc, target="html", settings=test_settings)
        assert any(r.levelno == logging.WARNING for r in caplog.records)
