"""
Компонент для оценки тональности по словарю.

Считает совпадения токенов с позитивным и негативным лексиконом языка
и нормирует разницу на число совпавших токенов.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Optional, Sequence

from ..interfaces.corpus import (
    Document,
    Language,
    SentimentResult,
    SentimentScorerInterface,
    SENTIMENT_LABELS,
    SENTIMENT_NEGATIVE,
    SENTIMENT_NEUTRAL,
    SENTIMENT_POSITIVE,
)
from .lexicons import get_sentiment_lexicon
from .tokenizer import TokenProcessor


# Мёртвая зона: один-два случайных слова в коротком тексте не меняют метку
NEUTRAL_THRESHOLD = 0.1


def round_score(value: float) -> float:
    """Округление до 2 знаков, половина от нуля (0.125 → 0.13, -0.125 → -0.13)."""
    return float(Decimal(value).quantize(Decimal('0.01'), rounding=ROUND_HALF_UP))


class SentimentScorer(SentimentScorerInterface):
    """Словарный оценщик тональности."""

    def __init__(self, tokenizer: Optional[TokenProcessor] = None,
                 threshold: float = NEUTRAL_THRESHOLD):
        """
        Args:
            tokenizer: Токенизатор (по умолчанию TokenProcessor())
            threshold: Порог мёртвой зоны для метки Neutral
        """
        self.tokenizer = tokenizer or TokenProcessor()
        self.threshold = threshold

    def score(self, text: Optional[str], language: Language = Language.ENGLISH) -> SentimentResult:
        """
        Оценивает тональность текста.

        Args:
            text: Текст документа
            language: Язык (испанский лексикон только для SPANISH)

        Returns:
            SentimentResult с баллом в [-1, 1], округлённым до 2 знаков
        """
        tokens = self.tokenizer.tokenize(text, remove_stopwords=False, language=language)
        if not tokens:
            return SentimentResult(score=0.0, label=SENTIMENT_NEUTRAL)

        positive, negative = get_sentiment_lexicon(language)
        positive_hits = 0
        negative_hits = 0
        relevant = 0
        for token in tokens:
            is_positive = token in positive
            is_negative = token in negative
            if is_positive:
                positive_hits += 1
            if is_negative:
                negative_hits += 1
            if is_positive or is_negative:
                relevant += 1

        normalized = (positive_hits - negative_hits) / relevant if relevant > 0 else 0.0
        return SentimentResult(score=round_score(normalized), label=self.label_for(normalized))

    def label_for(self, normalized_score: float) -> str:
        """Метка по нормированному баллу (до округления)."""
        if normalized_score > self.threshold:
            return SENTIMENT_POSITIVE
        if normalized_score < -self.threshold:
            return SENTIMENT_NEGATIVE
        return SENTIMENT_NEUTRAL

    def score_document(self, doc: Document) -> SentimentResult:
        """Оценивает тональность документа по его содержимому и языку."""
        return self.score(doc.content, doc.language)

    def distribution(self, docs: Sequence[Document]) -> Dict[str, int]:
        """
        Распределение меток среди документов с уже посчитанной тональностью.

        Returns:
            Словарь {метка: количество}; все три метки присутствуют всегда
        """
        dist = {label: 0 for label in SENTIMENT_LABELS}
        for doc in docs or []:
            if doc.sentiment is not None and doc.sentiment.label in dist:
                dist[doc.sentiment.label] += 1
        return dist
