"""
Функциональный интерфейс движка анализа.

Тонкие обёртки над компонентами с экземплярами по умолчанию. Компоненты
не хранят состояния, поэтому общие экземпляры безопасны для вызова из
нескольких потоков.
"""

from typing import List, Optional, Sequence

from .components.concordancer import DEFAULT_WINDOW_RADIUS, KwicConcordancer
from .components.frequency_analyzer import FrequencyAnalyzer
from .components.ngram_generator import NgramGenerator
from .components.normalizer import TextNormalizer
from .components.pos_aggregator import POSAggregator
from .components.sentiment_scorer import SentimentScorer
from .components.tokenizer import TokenProcessor
from .interfaces.corpus import (
    Document,
    KwicResult,
    Language,
    PosBreakdown,
    SentimentResult,
    TokenFrequency,
)

_normalizer = TextNormalizer()
_tokenizer = TokenProcessor()
_frequency_analyzer = FrequencyAnalyzer(tokenizer=_tokenizer)
_ngram_generator = NgramGenerator(tokenizer=_tokenizer)
_concordancer = KwicConcordancer()
_sentiment_scorer = SentimentScorer(tokenizer=_tokenizer)
_pos_aggregator = POSAggregator()


def normalize(raw: Optional[str]) -> str:
    return _normalizer.normalize(raw)


def tokenize(text: Optional[str], remove_stopwords: bool = False,
             language: Language = Language.ENGLISH) -> List[str]:
    return _tokenizer.tokenize(text, remove_stopwords, language)


def frequencies(docs: Sequence[Document], remove_stopwords: bool = False) -> List[TokenFrequency]:
    return _frequency_analyzer.frequencies(docs, remove_stopwords)


def type_token_ratio(docs: Sequence[Document]) -> float:
    return _frequency_analyzer.type_token_ratio(docs)


def ngrams(tokens: Sequence[str], n: int) -> List[TokenFrequency]:
    return _ngram_generator.ngrams(tokens, n)


def kwic(docs: Sequence[Document], keyword: str,
         window_radius: int = DEFAULT_WINDOW_RADIUS) -> List[KwicResult]:
    return _concordancer.kwic(docs, keyword, window_radius)


def sentiment(text: Optional[str], language: Language = Language.ENGLISH) -> SentimentResult:
    return _sentiment_scorer.score(text, language)


def aggregate(docs: Sequence[Document]) -> Optional[PosBreakdown]:
    return _pos_aggregator.aggregate(docs)


__all__ = [
    'normalize',
    'tokenize',
    'frequencies',
    'type_token_ratio',
    'ngrams',
    'kwic',
    'sentiment',
    'aggregate',
]
