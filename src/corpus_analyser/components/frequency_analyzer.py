"""
Компонент для анализа частотности токенов в корпусе.

Отвечает за частотный список по набору документов, отношение
типов к токенам и общий объём корпуса. Состояния между вызовами
не хранит: набор документов передаётся в каждый вызов.
"""

from collections import Counter
from typing import List, Optional, Sequence

from ..interfaces.corpus import Document, FrequencyAnalyzerInterface, TokenFrequency
from .tokenizer import TokenProcessor


def counter_to_frequencies(counts: Counter, total: int) -> List[TokenFrequency]:
    """
    Превращает Counter в отсортированный частотный список.

    Сортировка по убыванию count; при равенстве сохраняется порядок
    первого появления (Counter хранит порядок вставки, sorted стабилен).
    """
    return [
        TokenFrequency(token=token, count=count, frequency=count / total if total > 0 else 0.0)
        for token, count in counts.most_common()
    ]


class FrequencyAnalyzer(FrequencyAnalyzerInterface):
    """Анализатор частотности токенов."""

    def __init__(self, tokenizer: Optional[TokenProcessor] = None):
        """
        Инициализирует анализатор частотности.

        Args:
            tokenizer: Токенизатор (по умолчанию TokenProcessor())
        """
        self.tokenizer = tokenizer or TokenProcessor()

    def count_tokens(self, docs: Sequence[Document], remove_stopwords: bool = False) -> Counter:
        """
        Подсчитывает токены по всем документам.

        Каждый документ токенизируется со своим языком, поэтому
        стоп-слова выбираются для каждого документа отдельно.

        Args:
            docs: Набор документов
            remove_stopwords: Удалять ли стоп-слова

        Returns:
            Counter токенов в порядке первого появления
        """
        counts: Counter = Counter()
        for doc in docs or []:
            counts.update(self.tokenizer.tokenize(doc.content, remove_stopwords, doc.language))
        return counts

    def frequencies(self, docs: Sequence[Document],
                    remove_stopwords: bool = False) -> List[TokenFrequency]:
        """
        Строит частотный список по набору документов.

        Args:
            docs: Набор документов
            remove_stopwords: Удалять ли стоп-слова

        Returns:
            Список TokenFrequency по убыванию count
        """
        counts = self.count_tokens(docs, remove_stopwords)
        return counter_to_frequencies(counts, sum(counts.values()))

    def top(self, docs: Sequence[Document], n: int = 20,
            remove_stopwords: bool = False) -> List[TokenFrequency]:
        """Возвращает n самых частых токенов (срез для графика)."""
        if n <= 0:
            return []
        return self.frequencies(docs, remove_stopwords)[:n]

    def type_token_ratio(self, docs: Sequence[Document]) -> float:
        """
        Отношение числа уникальных токенов к общему числу токенов.

        Считается без удаления стоп-слов; для пустого набора 0.
        """
        counts = self.count_tokens(docs, remove_stopwords=False)
        total = sum(counts.values())
        if total == 0:
            return 0.0
        return len(counts) / total

    def total_tokens(self, docs: Sequence[Document]) -> int:
        """Сумма закэшированных token_count документов."""
        return sum(doc.token_count for doc in docs or [])
