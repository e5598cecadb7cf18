"""
Компоненты для анализа корпуса текстов.

Каждый компонент отвечает за одну конкретную задачу:
- TextNormalizer - очистка сырого текста от артефактов генерации
- TokenProcessor - токенизация и фильтрация стоп-слов
- FrequencyAnalyzer - частотный список и отношение типов к токенам
- NgramGenerator - n-граммы
- KwicConcordancer - конкорданс KWIC
- SentimentScorer - словарная оценка тональности
- POSAggregator - усреднение распределений частей речи
- ResultExporter - экспорт результатов
"""

from .normalizer import TextNormalizer
from .tokenizer import TokenProcessor
from .frequency_analyzer import FrequencyAnalyzer
from .ngram_generator import NgramGenerator
from .concordancer import KwicConcordancer
from .sentiment_scorer import SentimentScorer
from .pos_aggregator import POSAggregator
from .exporter import ResultExporter

__all__ = [
    'TextNormalizer',
    'TokenProcessor',
    'FrequencyAnalyzer',
    'NgramGenerator',
    'KwicConcordancer',
    'SentimentScorer',
    'POSAggregator',
    'ResultExporter',
]
