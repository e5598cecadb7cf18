"""
Тесты для компонента KwicConcordancer.
"""

import pytest

from corpus_analyser.components.concordancer import KwicConcordancer
from corpus_analyser.interfaces.corpus import KwicResult


class TestKwicConcordancer:
    """Тесты для KwicConcordancer."""

    def test_basic_match(self, make_doc):
        """«good» в «I love good food» с радиусом 10."""
        concordancer = KwicConcordancer()
        docs = [make_doc("I love good food", title="doc1")]

        result = concordancer.kwic(docs, "good", 10)

        assert result == [KwicResult(left="I love ", node="good", right=" food", doc_id="doc1")]

    def test_whole_word_only(self, make_doc):
        """«cat» внутри «concatenate» не считается вхождением."""
        concordancer = KwicConcordancer()
        result = concordancer.kwic([make_doc("concatenate the cat sat")], "cat")

        assert len(result) == 1
        assert result[0].left == "concatenate the "
        assert result[0].right == " sat"

    def test_window_clipping(self, make_doc):
        concordancer = KwicConcordancer()
        start = concordancer.kwic([make_doc("cat sat")], "cat", 60)
        end = concordancer.kwic([make_doc("the cat")], "cat", 60)

        assert start[0].left == ""
        assert end[0].right == ""

    def test_window_radius(self, make_doc):
        concordancer = KwicConcordancer()
        result = concordancer.kwic([make_doc("0123456789 cat 0123456789")], "cat", 3)
        assert result[0].left == "89 "
        assert result[0].right == " 01"

    def test_zero_radius(self, make_doc):
        concordancer = KwicConcordancer()
        result = concordancer.kwic([make_doc("a cat b")], "cat", 0)
        assert (result[0].left, result[0].right) == ("", "")

    def test_case_insensitive_keeps_original_node(self, make_doc):
        concordancer = KwicConcordancer()
        result = concordancer.kwic([make_doc("The Cat and the CAT")], "cat")
        assert [r.node for r in result] == ["Cat", "CAT"]

    @pytest.mark.parametrize("text", [
        "(cat)",
        "[cat]",
        "¿cat?",
        "¡cat!",
        '"cat"',
        "'cat'",
        "word,cat;word",
        "x:cat.",
    ])
    def test_boundary_characters(self, make_doc, text):
        concordancer = KwicConcordancer()
        assert len(concordancer.kwic([make_doc(text)], "cat")) == 1

    @pytest.mark.parametrize("text", [
        ")cat",
        "]cat",
        "cat(",
        "cat[",
        "cat-like",
        "bobcat",
        "cats",
    ])
    def test_non_boundary_characters(self, make_doc, text):
        """Наборы границ асимметричны: «)» не граница слева, «(» не граница справа."""
        concordancer = KwicConcordancer()
        assert concordancer.kwic([make_doc(text)], "cat") == []

    def test_scan_resumes_after_candidate(self, make_doc):
        concordancer = KwicConcordancer()
        result = concordancer.kwic([make_doc("catcat cat")], "cat", 60)
        assert len(result) == 1
        assert result[0].left == "catcat "

    def test_keyword_is_literal(self, make_doc):
        """Символы регулярных выражений в запросе сравниваются буквально."""
        concordancer = KwicConcordancer()
        docs = [make_doc("c.t cat a+b (x) [y")]

        assert [r.node for r in concordancer.kwic(docs, "c.t")] == ["c.t"]
        assert [r.node for r in concordancer.kwic(docs, "a+b")] == ["a+b"]
        assert concordancer.kwic(docs, "[") == []
        assert concordancer.kwic(docs, "*") == []
        assert [r.node for r in concordancer.kwic(docs, "(x")] == ["(x"]

    def test_empty_keyword(self, make_doc):
        concordancer = KwicConcordancer()
        docs = [make_doc("some text")]
        assert concordancer.kwic(docs, "") == []
        assert concordancer.kwic(docs, "   ") == []

    def test_results_in_document_order(self, make_doc):
        concordancer = KwicConcordancer()
        docs = [
            make_doc("cat one, cat two", title="first"),
            make_doc("no match here", title="second"),
            make_doc("cat three", title="third"),
        ]
        result = concordancer.kwic(docs, "cat", 4)
        assert [(r.doc_id, r.right) for r in result] == [
            ("first", " one"),
            ("first", " two"),
            ("third", " thr"),
        ]

    def test_empty_documents(self, make_doc):
        concordancer = KwicConcordancer()
        assert concordancer.kwic([], "cat") == []
        assert concordancer.kwic([make_doc("")], "cat") == []

    def test_negative_radius(self, make_doc):
        with pytest.raises(ValueError):
            KwicConcordancer(window_radius=-1)
        with pytest.raises(ValueError):
            KwicConcordancer().kwic([make_doc("cat")], "cat", -5)

    def test_default_radius(self, make_doc):
        concordancer = KwicConcordancer(window_radius=2)
        result = concordancer.kwic([make_doc("ab cat cd")], "cat")
        assert (result[0].left, result[0].right) == ("b ", " c")
