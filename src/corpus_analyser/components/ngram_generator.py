"""
Компонент для построения n-грамм.

Скользящее окно ширины n с шагом 1; ключ n-граммы: токены окна,
соединённые одним пробелом.
"""

from collections import Counter
from typing import List, Optional, Sequence

from ..interfaces.corpus import Document, NgramGeneratorInterface, TokenFrequency
from .frequency_analyzer import counter_to_frequencies
from .tokenizer import TokenProcessor


class NgramGenerator(NgramGeneratorInterface):
    """Генератор n-грамм."""

    def __init__(self, tokenizer: Optional[TokenProcessor] = None):
        self.tokenizer = tokenizer or TokenProcessor()

    @staticmethod
    def _check_size(n: int) -> None:
        if n < 2:
            raise ValueError(f"Размер n-граммы должен быть не меньше 2, получено: {n}")

    def count_ngrams(self, tokens: Sequence[str], n: int) -> Counter:
        """
        Считает n-граммы в последовательности токенов.

        Args:
            tokens: Последовательность токенов
            n: Размер окна (>= 2)

        Returns:
            Counter n-грамм в порядке первого появления
        """
        self._check_size(n)
        tokens = list(tokens or [])
        counts: Counter = Counter()
        for i in range(len(tokens) - n + 1):
            counts[' '.join(tokens[i:i + n])] += 1
        return counts

    def ngrams(self, tokens: Sequence[str], n: int) -> List[TokenFrequency]:
        """
        Частотный список n-грамм.

        frequency = count / (len(tokens) - n + 1). Если токенов меньше n,
        возвращается пустой список.

        Args:
            tokens: Последовательность токенов
            n: Размер окна (>= 2)

        Returns:
            Список TokenFrequency по убыванию count
        """
        counts = self.count_ngrams(tokens, n)
        return counter_to_frequencies(counts, sum(counts.values()))

    def corpus_ngrams(self, docs: Sequence[Document], n: int,
                      remove_stopwords: bool = False) -> List[TokenFrequency]:
        """
        N-граммы по набору документов.

        Окна не пересекают границы документов; счётчики документов
        суммируются, frequency считается от общего числа окон.
        """
        self._check_size(n)
        counts: Counter = Counter()
        for doc in docs or []:
            tokens = self.tokenizer.tokenize(doc.content, remove_stopwords, doc.language)
            counts.update(self.count_ngrams(tokens, n))
        return counter_to_frequencies(counts, sum(counts.values()))
