"""
Модуль для анализа корпуса документов

Объединяет компоненты в единый интерфейс:
- Частотный список и отношение типов к токенам
- N-граммы
- Конкорданс KWIC
- Распределение тональности
- Усреднение частей речи
- Экспорт отчётов
"""

import logging
import time
from typing import Any, List, Optional, Sequence

from .config import config
from .components.concordancer import KwicConcordancer
from .components.exporter import ResultExporter
from .components.frequency_analyzer import FrequencyAnalyzer
from .components.ngram_generator import NgramGenerator
from .components.pos_aggregator import POSAggregator
from .components.sentiment_scorer import SentimentScorer
from .components.tokenizer import TokenProcessor
from .interfaces.corpus import (
    CorpusReport,
    Document,
    KwicResult,
    Language,
    PosBreakdown,
    SourceType,
    TokenFrequency,
)

logger = logging.getLogger(__name__)


def filter_documents(docs: Sequence[Document],
                     source_type: Optional[SourceType] = None,
                     language: Any = None) -> List[Document]:
    """
    Фильтрует документы по источнику и языку

    None в любом параметре означает «все».

    Returns:
        Новый список документов в исходном порядке
    """
    lang = Language.from_value(language) if language is not None else None
    return [
        doc for doc in docs or []
        if (source_type is None or doc.source_type == source_type)
        and (lang is None or doc.language == lang)
    ]


class CorpusAnalyzer:
    """Фасад для анализа корпуса документов"""

    def __init__(self,
                 remove_stopwords: Optional[bool] = None,
                 window_radius: Optional[int] = None,
                 top_n: Optional[int] = None,
                 output_dir: Optional[str] = None):
        """
        Инициализация анализатора корпуса

        Параметры, не заданные явно, берутся из config.yaml.
        """
        self.remove_stopwords = (
            config.is_stopword_removal_enabled() if remove_stopwords is None else remove_stopwords
        )
        self.window_radius = config.get_kwic_window() if window_radius is None else window_radius
        self.top_n = config.get_top_n() if top_n is None else top_n

        self.tokenizer = TokenProcessor()
        self.frequency_analyzer = FrequencyAnalyzer(tokenizer=self.tokenizer)
        self.ngram_generator = NgramGenerator(tokenizer=self.tokenizer)
        self.concordancer = KwicConcordancer(window_radius=self.window_radius)
        self.sentiment_scorer = SentimentScorer(tokenizer=self.tokenizer)
        self.pos_aggregator = POSAggregator()
        self.exporter = ResultExporter(
            output_dir=output_dir or config.get_results_folder(),
            decimal_places=config.get_frequency_decimal_places(),
            main_sheet_name=config.get_main_sheet_name(),
        )

    def frequencies(self, docs: Sequence[Document],
                    remove_stopwords: Optional[bool] = None) -> List[TokenFrequency]:
        """Частотный список по набору документов"""
        if remove_stopwords is None:
            remove_stopwords = self.remove_stopwords
        return self.frequency_analyzer.frequencies(docs, remove_stopwords)

    def ngrams(self, docs: Sequence[Document], n: Optional[int] = None,
               remove_stopwords: Optional[bool] = None) -> List[TokenFrequency]:
        """N-граммы по набору документов (окна не пересекают границы документов)"""
        if remove_stopwords is None:
            remove_stopwords = self.remove_stopwords
        return self.ngram_generator.corpus_ngrams(docs, n or config.get_ngram_size(), remove_stopwords)

    def kwic(self, docs: Sequence[Document], keyword: str,
             window_radius: Optional[int] = None) -> List[KwicResult]:
        """Конкорданс KWIC по набору документов"""
        return self.concordancer.kwic(docs, keyword, window_radius)

    def score_documents(self, docs: Sequence[Document]) -> List[Document]:
        """
        Считает тональность для документов, у которых её ещё нет

        Документы обновляются на месте (поле sentiment) и возвращаются.
        """
        for doc in docs or []:
            if doc.sentiment is None:
                doc.sentiment = self.sentiment_scorer.score_document(doc)
        return list(docs or [])

    def aggregate_pos(self, docs: Sequence[Document]) -> Optional[PosBreakdown]:
        """Усреднённое распределение частей речи или None"""
        return self.pos_aggregator.aggregate(docs)

    def analyze(self, docs: Sequence[Document]) -> CorpusReport:
        """
        Полный анализ набора документов

        Args:
            docs: Набор документов (уже отфильтрованный вызывающей стороной)

        Returns:
            CorpusReport со статистикой, топом частот, n-граммами,
            тональностью и частями речи
        """
        start = time.perf_counter()
        docs = list(docs or [])

        frequencies = self.frequencies(docs)
        report = CorpusReport(
            document_count=len(docs),
            total_tokens=self.frequency_analyzer.total_tokens(docs),
            type_token_ratio=self.frequency_analyzer.type_token_ratio(docs),
            frequencies=frequencies[:self.top_n],
            bigrams=self.ngrams(docs, 2)[:self.top_n],
            trigrams=self.ngrams(docs, 3)[:self.top_n],
            sentiment_distribution=self.sentiment_scorer.distribution(docs),
            pos_summary=self.aggregate_pos(docs),
            metadata={
                'unique_tokens': len(frequencies),
                'remove_stopwords': self.remove_stopwords,
                'languages': sorted({doc.language.value for doc in docs}),
            },
        )
        report.processing_time = time.perf_counter() - start

        logger.info(
            f"Проанализировано документов: {report.document_count}, "
            f"токенов: {report.total_tokens}, TTR: {report.type_token_ratio:.3f}"
        )
        return report

    def export_report(self, report: CorpusReport, base_filename: Optional[str] = None,
                      kwic_results: Optional[Sequence[KwicResult]] = None):
        """Экспортирует отчёт во все форматы в папку результатов"""
        return self.exporter.export_all_formats(
            report, base_filename or config.get_results_filename_prefix(), kwic_results)
