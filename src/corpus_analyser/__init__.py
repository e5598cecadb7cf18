"""
Corpus Analyser - модуль для анализа двуязычного (EN/ES) корпуса текстов

Этот модуль предоставляет инструменты для:
- Очистки сгенерированных текстов перед добавлением в корпус
- Токенизации, частотных списков и n-грамм
- Конкорданса KWIC
- Словарной оценки тональности
- Усреднения распределений частей речи
- Экспорта отчётов в Excel/CSV/JSON
"""

__version__ = "0.1.0"
__author__ = "Sergey"

from .text_processor import CorpusTextProcessor
from .corpus_analyzer import CorpusAnalyzer, filter_documents
from . import analysis
from . import cli

__all__ = [
    "CorpusTextProcessor",
    "CorpusAnalyzer",
    "filter_documents",
    "analysis",
    "cli"
]
