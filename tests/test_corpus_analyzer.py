"""
Тесты для модуля corpus_analyzer и функционального интерфейса analysis
"""

import pytest

from corpus_analyser import analysis
from corpus_analyser.corpus_analyzer import CorpusAnalyzer, filter_documents
from corpus_analyser.interfaces.corpus import Language, SourceType


class TestFilterDocuments:
    """Тесты фильтрации набора документов"""

    def test_no_filters(self, sample_documents):
        assert filter_documents(sample_documents) == sample_documents

    def test_by_language(self, sample_documents):
        result = filter_documents(sample_documents, language="ES")
        assert [d.title for d in result] == ["es_perro"]
        assert len(filter_documents(sample_documents, language=Language.ENGLISH)) == 2

    def test_by_source_type(self, make_doc):
        docs = [
            make_doc("a", title="manual"),
            make_doc("b", title="video", source_type=SourceType.YOUTUBE),
        ]
        assert [d.title for d in filter_documents(docs, source_type=SourceType.YOUTUBE)] == ["video"]
        assert filter_documents(docs, source_type=SourceType.ACADEMIC) == []

    def test_empty(self):
        assert filter_documents([], language="EN") == []


class TestCorpusAnalyzer:
    """Тесты фасада CorpusAnalyzer"""

    def test_explicit_parameters(self, temp_directory):
        analyzer = CorpusAnalyzer(remove_stopwords=True, window_radius=10, top_n=3,
                                  output_dir=str(temp_directory))
        assert analyzer.remove_stopwords is True
        assert analyzer.window_radius == 10
        assert analyzer.top_n == 3
        assert analyzer.exporter.output_dir == temp_directory

    def test_analyze(self, sample_documents):
        analyzer = CorpusAnalyzer(remove_stopwords=False, top_n=3)
        analyzer.score_documents(sample_documents)

        report = analyzer.analyze(sample_documents)

        assert report.document_count == 3
        assert report.total_tokens == sum(d.token_count for d in sample_documents)
        assert 0 < report.type_token_ratio <= 1
        assert len(report.frequencies) == 3
        assert len(report.bigrams) == 3
        assert len(report.trigrams) == 3
        assert sum(report.sentiment_distribution.values()) == 3
        assert report.sentiment_distribution["Positive"] == 2
        assert report.pos_summary is not None
        assert report.metadata["languages"] == ["EN", "ES"]
        assert report.metadata["unique_tokens"] >= len(report.frequencies)
        assert report.processing_time >= 0

    def test_analyze_empty(self):
        report = CorpusAnalyzer().analyze([])
        assert report.document_count == 0
        assert report.total_tokens == 0
        assert report.type_token_ratio == 0.0
        assert report.frequencies == []
        assert report.pos_summary is None
        assert report.sentiment_distribution == {"Positive": 0, "Negative": 0, "Neutral": 0}

    def test_stopword_toggle(self, sample_documents):
        with_stopwords = CorpusAnalyzer(remove_stopwords=False).frequencies(sample_documents)
        without = CorpusAnalyzer(remove_stopwords=True).frequencies(sample_documents)
        assert "the" in {f.token for f in with_stopwords}
        assert "the" not in {f.token for f in without}

    def test_ngrams_default_and_invalid_size(self, sample_documents):
        analyzer = CorpusAnalyzer()
        assert all(len(f.token.split()) == 2 for f in analyzer.ngrams(sample_documents))
        with pytest.raises(ValueError):
            analyzer.ngrams(sample_documents, 1)

    def test_kwic_uses_configured_window(self, make_doc):
        analyzer = CorpusAnalyzer(window_radius=3)
        result = analyzer.kwic([make_doc("I love good food", title="doc1")], "good")
        assert (result[0].left, result[0].right, result[0].doc_id) == ("ve ", " fo", "doc1")

    def test_score_documents_keeps_existing(self, make_doc):
        analyzer = CorpusAnalyzer()
        docs = [make_doc("good"), make_doc("bad")]
        docs[1].sentiment = analyzer.sentiment_scorer.score("good", Language.ENGLISH)

        analyzer.score_documents(docs)

        assert docs[0].sentiment.label == "Positive"
        assert docs[1].sentiment.label == "Positive"

    def test_export_report(self, sample_documents, temp_directory):
        analyzer = CorpusAnalyzer(output_dir=str(temp_directory))
        report = analyzer.analyze(sample_documents)
        kwic_rows = analyzer.kwic(sample_documents, "perro")

        exported = analyzer.export_report(report, "test_corpus", kwic_rows)

        assert set(exported) == {"excel", "csv", "json", "kwic"}
        assert all(p.exists() for p in exported.values())


class TestAnalysisFunctions:
    """Тесты функционального интерфейса"""

    def test_end_to_end_examples(self, make_doc):
        docs = [make_doc("The cat sat. The cat ran.", Language.ENGLISH)]
        assert [(f.token, f.count) for f in analysis.frequencies(docs)][:2] == [("the", 2), ("cat", 2)]

        rows = analysis.kwic([make_doc("I love good food", title="doc1")], "good", 10)
        assert (rows[0].left, rows[0].node, rows[0].right) == ("I love ", "good", " food")

        result = analysis.sentiment("good good bad", Language.ENGLISH)
        assert (result.score, result.label) == (0.33, "Positive")

    def test_helpers(self, sample_documents):
        assert analysis.normalize("**x**") == "x"
        assert analysis.tokenize("The cat", remove_stopwords=True) == ["cat"]
        assert [f.token for f in analysis.ngrams(["a", "b", "c"], 3)] == ["a b c"]
        assert analysis.type_token_ratio([]) == 0.0
        assert analysis.aggregate(sample_documents) is not None
        assert analysis.aggregate([]) is None
