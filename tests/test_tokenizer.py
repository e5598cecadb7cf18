"""
Тесты для компонента TokenProcessor.
"""

from corpus_analyser.components.tokenizer import TokenProcessor
from corpus_analyser.interfaces.corpus import Language


class TestTokenProcessor:
    """Тесты для TokenProcessor."""

    def test_tokenize_empty_text(self):
        """Тест токенизации пустого текста."""
        processor = TokenProcessor()
        assert processor.tokenize("") == []
        assert processor.tokenize("   ") == []
        assert processor.tokenize(None) == []

    def test_tokenize_simple_text(self):
        """Тест токенизации простого текста."""
        processor = TokenProcessor()
        assert processor.tokenize("Hello, World!") == ["hello", "world"]

    def test_order_and_duplicates_preserved(self):
        processor = TokenProcessor()
        assert processor.tokenize("b a b") == ["b", "a", "b"]

    def test_tokenize_with_accents(self):
        """Тест токенизации текста с акцентами."""
        processor = TokenProcessor()
        tokens = processor.tokenize("El niño está aquí con la niña")
        assert tokens == ["el", "niño", "está", "aquí", "con", "la", "niña"]

    def test_spanish_marks_are_kept(self):
        """¿ ¡ ? не входят в набор удаляемой пунктуации."""
        processor = TokenProcessor()
        assert processor.tokenize("¿Cómo estás?") == ["¿cómo", "estás?"]

    def test_quotes_and_guillemets_removed(self):
        processor = TokenProcessor()
        assert processor.tokenize('«Hola» “mundo” "x"') == ["hola", "mundo", "x"]

    def test_hyphen_removed_inside_word(self):
        processor = TokenProcessor()
        assert processor.tokenize("well-known (fact)") == ["wellknown", "fact"]

    def test_whitespace_runs(self):
        processor = TokenProcessor()
        assert processor.tokenize("a  b\n\tc   d") == ["a", "b", "c", "d"]

    def test_english_stopwords(self):
        processor = TokenProcessor()
        tokens = processor.tokenize("The cat and the dog", remove_stopwords=True,
                                    language=Language.ENGLISH)
        assert tokens == ["cat", "dog"]

    def test_spanish_stopwords(self):
        processor = TokenProcessor()
        tokens = processor.tokenize("El perro y la casa", remove_stopwords=True,
                                    language=Language.SPANISH)
        assert tokens == ["perro", "casa"]

    def test_unknown_language_uses_english_stopwords(self):
        processor = TokenProcessor()
        tokens = processor.tokenize("el perro and the casa", remove_stopwords=True,
                                    language=Language.UNKNOWN)
        assert tokens == ["el", "perro", "casa"]

    def test_stopwords_not_removed_by_default(self):
        processor = TokenProcessor()
        assert processor.tokenize("the cat") == ["the", "cat"]

    def test_determinism(self):
        processor = TokenProcessor()
        text = "Los gatos duermen mucho. Los perros corren rápido."
        first = processor.tokenize(text, True, Language.SPANISH)
        second = processor.tokenize(text, True, Language.SPANISH)
        assert first == second

    def test_custom_stopwords(self):
        processor = TokenProcessor(stopwords={Language.ENGLISH: frozenset({"cat"})})
        assert processor.tokenize("the cat sat", True, Language.ENGLISH) == ["the", "sat"]
        assert processor.tokenize("the cat sat", True, Language.SPANISH) == ["the", "cat", "sat"]

    def test_count_tokens(self):
        processor = TokenProcessor()
        assert processor.count_tokens("The cat sat. The cat ran.") == 6
        assert processor.count_tokens("") == 0
