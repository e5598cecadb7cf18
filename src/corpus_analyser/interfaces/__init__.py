"""
Модель данных и интерфейсы для компонентов анализа корпуса.

Определяет документы, результаты анализа и абстрактные базовые классы
для всех компонентов, обеспечивая единообразный API и возможность
замены реализаций.
"""

from .corpus import (
    Language,
    DocumentType,
    SourceType,
    Document,
    TokenFrequency,
    KwicResult,
    SentimentResult,
    PosBreakdown,
    CorpusReport,
    POS_FIELDS,
    SENTIMENT_POSITIVE,
    SENTIMENT_NEGATIVE,
    SENTIMENT_NEUTRAL,
    SENTIMENT_LABELS,
    TextNormalizerInterface,
    TokenProcessorInterface,
    FrequencyAnalyzerInterface,
    NgramGeneratorInterface,
    ConcordancerInterface,
    SentimentScorerInterface,
    POSAggregatorInterface,
)

__all__ = [
    'Language',
    'DocumentType',
    'SourceType',
    'Document',
    'TokenFrequency',
    'KwicResult',
    'SentimentResult',
    'PosBreakdown',
    'CorpusReport',
    'POS_FIELDS',
    'SENTIMENT_POSITIVE',
    'SENTIMENT_NEGATIVE',
    'SENTIMENT_NEUTRAL',
    'SENTIMENT_LABELS',
    'TextNormalizerInterface',
    'TokenProcessorInterface',
    'FrequencyAnalyzerInterface',
    'NgramGeneratorInterface',
    'ConcordancerInterface',
    'SentimentScorerInterface',
    'POSAggregatorInterface',
]
