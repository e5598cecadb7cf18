"""
Тесты для компонента FrequencyAnalyzer.
"""

import pytest

from corpus_analyser.components.frequency_analyzer import FrequencyAnalyzer
from corpus_analyser.components.tokenizer import TokenProcessor
from corpus_analyser.interfaces.corpus import Language


class TestFrequencyAnalyzer:
    """Тесты для FrequencyAnalyzer."""

    def test_cat_sat_example(self, make_doc):
        """Частотный список для «The cat sat. The cat ran.»"""
        analyzer = FrequencyAnalyzer()
        docs = [make_doc("The cat sat. The cat ran.", Language.ENGLISH)]

        result = analyzer.frequencies(docs)

        assert [(f.token, f.count) for f in result] == [
            ("the", 2), ("cat", 2), ("sat", 1), ("ran", 1),
        ]
        assert result[0].frequency == pytest.approx(2 / 6)
        assert result[-1].frequency == pytest.approx(1 / 6)

    def test_empty_set(self):
        analyzer = FrequencyAnalyzer()
        assert analyzer.frequencies([]) == []
        assert analyzer.type_token_ratio([]) == 0.0
        assert analyzer.total_tokens([]) == 0

    def test_count_conservation(self, sample_documents):
        """Сумма count равна сумме длин токенизаций документов."""
        analyzer = FrequencyAnalyzer()
        tokenizer = TokenProcessor()

        total = sum(f.count for f in analyzer.frequencies(sample_documents, False))
        expected = sum(len(tokenizer.tokenize(d.content, False, d.language)) for d in sample_documents)
        assert total == expected

    def test_sorted_descending(self, sample_documents):
        analyzer = FrequencyAnalyzer()
        result = analyzer.frequencies(sample_documents)
        counts = [f.count for f in result]
        assert counts == sorted(counts, reverse=True)

    def test_tie_break_is_first_seen(self, make_doc):
        """При равных count порядок первого появления сохраняется."""
        analyzer = FrequencyAnalyzer()
        docs = [make_doc("zeta alpha"), make_doc("mid zeta alpha mid")]
        tokens = [f.token for f in analyzer.frequencies(docs)]
        assert tokens == ["zeta", "alpha", "mid"]

    def test_stopwords_use_document_language(self, make_doc):
        """Стоп-слова выбираются по языку каждого документа."""
        analyzer = FrequencyAnalyzer()
        docs = [
            make_doc("the cat el gato", Language.ENGLISH),
            make_doc("el perro the dog", Language.SPANISH),
        ]
        tokens = {f.token for f in analyzer.frequencies(docs, remove_stopwords=True)}
        assert tokens == {"cat", "el", "gato", "perro", "the", "dog"}
        # «the» выпадает только из английского документа, «el» только из испанского
        counts = {f.token: f.count for f in analyzer.frequencies(docs, remove_stopwords=True)}
        assert counts["the"] == 1
        assert counts["el"] == 1

    def test_type_token_ratio(self, make_doc):
        analyzer = FrequencyAnalyzer()
        docs = [make_doc("The cat sat. The cat ran.")]
        assert analyzer.type_token_ratio(docs) == pytest.approx(4 / 6)

    def test_total_tokens_uses_cached_counts(self, sample_documents):
        analyzer = FrequencyAnalyzer()
        assert analyzer.total_tokens(sample_documents) == sum(d.token_count for d in sample_documents)

    def test_top(self, make_doc):
        analyzer = FrequencyAnalyzer()
        docs = [make_doc("a a a b b c")]
        assert [f.token for f in analyzer.top(docs, n=2)] == ["a", "b"]
        assert analyzer.top(docs, n=0) == []
