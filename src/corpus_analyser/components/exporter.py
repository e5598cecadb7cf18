"""
Компонент для экспорта результатов анализа.

Отвечает за экспорт результатов в различные форматы:
Excel (несколько листов), CSV (частотный список, KWIC, метаданные корпуса)
и JSON с временными метками.
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union

import pandas as pd

from ..interfaces.corpus import (
    CorpusReport,
    Document,
    KwicResult,
    Language,
    TokenFrequency,
)

logger = logging.getLogger(__name__)


# Колонки таблицы метаданных корпуса
METADATA_COLUMNS = [
    'ID_Documento',
    'ID_Fuente_Paralelo',
    'Idioma',
    'Source_Type',
    'Titulo',
    'Fuente_URL',
    'Longitud_Palabras_Estimada',
    'Fecha_Publicacion',
    'Nombre_Archivo',
]


def frequencies_to_dataframe(frequencies: Sequence[TokenFrequency],
                             decimal_places: Optional[int] = None) -> pd.DataFrame:
    """Частотный список → DataFrame с колонками token/count/frequency."""
    df = pd.DataFrame([f.to_dict() for f in frequencies], columns=['token', 'count', 'frequency'])
    if decimal_places is not None and not df.empty:
        df['frequency'] = df['frequency'].round(decimal_places)
    return df


def kwic_to_dataframe(results: Sequence[KwicResult]) -> pd.DataFrame:
    """Строки KWIC → DataFrame с колонками doc_id/left/node/right."""
    return pd.DataFrame([r.to_dict() for r in results], columns=['doc_id', 'left', 'node', 'right'])


class ResultExporter:
    """Экспортёр результатов анализа корпуса."""

    def __init__(self, output_dir: Union[str, Path] = "data/results",
                 decimal_places: int = 4,
                 main_sheet_name: str = "Frequencies"):
        """
        Инициализирует экспортёр.

        Args:
            output_dir: Папка для сохранения результатов
            decimal_places: Знаков после запятой для относительной частоты
            main_sheet_name: Название листа с частотным списком
        """
        self.output_dir = Path(output_dir)
        self.decimal_places = decimal_places
        self.main_sheet_name = main_sheet_name

    def _prepare_path(self, filepath: Union[str, Path], suffix: str) -> Path:
        filepath = Path(filepath)
        if not filepath.suffix:
            filepath = filepath.with_suffix(suffix)
        filepath.parent.mkdir(parents=True, exist_ok=True)
        return filepath

    def export_to_excel(self, report: CorpusReport, filepath: Union[str, Path],
                        kwic_results: Optional[Sequence[KwicResult]] = None) -> Optional[Path]:
        """
        Экспортирует отчёт в Excel.

        Листы: частотный список, статистика, биграммы, триграммы,
        части речи (если есть) и KWIC (если переданы строки).

        Args:
            report: Отчёт по корпусу
            filepath: Путь для сохранения файла
            kwic_results: Строки конкорданса

        Returns:
            Путь к файлу или None, если экспортировать нечего
        """
        if report is None or report.document_count == 0:
            logger.info("Нет данных для экспорта в Excel")
            return None

        filepath = self._prepare_path(filepath, '.xlsx')
        try:
            with pd.ExcelWriter(filepath, engine='openpyxl') as writer:
                frequencies_to_dataframe(report.frequencies, self.decimal_places).to_excel(
                    writer, sheet_name=self.main_sheet_name, index=False)

                stats_df = pd.DataFrame({
                    'Параметр': [
                        'Документов',
                        'Всего токенов',
                        'Уникальных токенов',
                        'Type/Token Ratio',
                        'Positive',
                        'Neutral',
                        'Negative',
                        'Время обработки (сек)',
                        'Дата анализа',
                    ],
                    'Значение': [
                        report.document_count,
                        report.total_tokens,
                        (report.metadata or {}).get('unique_tokens', len(report.frequencies)),
                        round(report.type_token_ratio, 4),
                        report.sentiment_distribution.get('Positive', 0),
                        report.sentiment_distribution.get('Neutral', 0),
                        report.sentiment_distribution.get('Negative', 0),
                        round(report.processing_time, 3),
                        datetime.now().strftime('%Y-%m-%d %H:%M:%S'),
                    ],
                })
                stats_df.to_excel(writer, sheet_name='Статистика', index=False)

                if report.bigrams:
                    frequencies_to_dataframe(report.bigrams, self.decimal_places).to_excel(
                        writer, sheet_name='Биграммы', index=False)
                if report.trigrams:
                    frequencies_to_dataframe(report.trigrams, self.decimal_places).to_excel(
                        writer, sheet_name='Триграммы', index=False)

                if report.pos_summary is not None:
                    pos_df = pd.DataFrame(
                        list(report.pos_summary.to_dict().items()),
                        columns=['Часть речи', '%'],
                    )
                    pos_df.to_excel(writer, sheet_name='Части речи', index=False)

                if kwic_results:
                    kwic_to_dataframe(kwic_results).to_excel(writer, sheet_name='KWIC', index=False)
        except OSError as e:
            logger.error(f"Ошибка экспорта в Excel: {e}")
            raise

        logger.info(f"Результат экспортирован в Excel: {filepath}")
        return filepath

    def export_frequencies_csv(self, frequencies: Sequence[TokenFrequency],
                               filepath: Union[str, Path]) -> Optional[Path]:
        """
        Экспортирует частотный список (или n-граммы) в CSV.

        Args:
            frequencies: Частотный список
            filepath: Путь для сохранения файла
        """
        if not frequencies:
            logger.info("Нет данных для экспорта частот в CSV")
            return None

        filepath = self._prepare_path(filepath, '.csv')
        try:
            frequencies_to_dataframe(frequencies, self.decimal_places).to_csv(
                filepath, index=False, encoding='utf-8')
        except OSError as e:
            logger.error(f"Ошибка экспорта в CSV: {e}")
            raise
        logger.info(f"Частотный список экспортирован в CSV: {filepath} ({len(frequencies)} строк)")
        return filepath

    def export_kwic_csv(self, results: Sequence[KwicResult],
                        filepath: Union[str, Path]) -> Optional[Path]:
        """
        Экспортирует строки конкорданса в CSV.

        Args:
            results: Строки KWIC
            filepath: Путь для сохранения файла
        """
        if not results:
            logger.info("Нет строк KWIC для экспорта")
            return None

        filepath = self._prepare_path(filepath, '.csv')
        try:
            kwic_to_dataframe(results).to_csv(filepath, index=False, encoding='utf-8')
        except OSError as e:
            logger.error(f"Ошибка экспорта KWIC: {e}")
            raise
        logger.info(f"KWIC экспортирован в CSV: {filepath} ({len(results)} строк)")
        return filepath

    def export_to_json(self, report: CorpusReport, filepath: Union[str, Path]) -> Optional[Path]:
        """
        Экспортирует отчёт в JSON.

        Args:
            report: Отчёт по корпусу
            filepath: Путь для сохранения файла
        """
        if report is None:
            logger.info("Нет данных для экспорта в JSON")
            return None

        filepath = self._prepare_path(filepath, '.json')
        json_data = {
            'metadata': {
                'timestamp': datetime.now().isoformat(),
                'document_count': report.document_count,
                'total_tokens': report.total_tokens,
                'type_token_ratio': report.type_token_ratio,
                'processing_time': report.processing_time,
            },
            'frequencies': [f.to_dict() for f in report.frequencies],
            'bigrams': [f.to_dict() for f in report.bigrams],
            'trigrams': [f.to_dict() for f in report.trigrams],
            'sentiment_distribution': report.sentiment_distribution,
            'pos_summary': report.pos_summary.to_dict() if report.pos_summary else None,
            'additional_metadata': report.metadata or {},
        }
        try:
            with open(filepath, 'w', encoding='utf-8') as jsonfile:
                json.dump(json_data, jsonfile, ensure_ascii=False, indent=2)
        except OSError as e:
            logger.error(f"Ошибка экспорта в JSON: {e}")
            raise

        logger.info(f"Результат экспортирован в JSON: {filepath}")
        return filepath

    def build_metadata_frame(self, docs: Sequence[Document]) -> pd.DataFrame:
        """
        Таблица метаданных корпуса.

        Английские документы нумеруются en_001, en_002, …; все остальные
        попадают в испанскую серию es_001, …
        """
        rows: List[Dict[str, object]] = []
        en_count = 1
        es_count = 1
        for doc in docs:
            is_en = doc.language is Language.ENGLISH
            if is_en:
                doc_id = f"en_{en_count:03d}"
                en_count += 1
            else:
                doc_id = f"es_{es_count:03d}"
                es_count += 1
            rows.append({
                'ID_Documento': doc_id,
                'ID_Fuente_Paralelo': doc.parallel_id or '',
                'Idioma': 'English' if is_en else 'Spanish',
                'Source_Type': doc.source_type.value if doc.source_type else 'Manual',
                'Titulo': doc.title or '',
                'Fuente_URL': doc.source_url or 'N/A',
                'Longitud_Palabras_Estimada': doc.token_count or 0,
                'Fecha_Publicacion': doc.upload_date or datetime.now().date().isoformat(),
                'Nombre_Archivo': f"{doc_id}.txt",
            })
        return pd.DataFrame(rows, columns=METADATA_COLUMNS)

    def export_metadata_csv(self, docs: Sequence[Document],
                            filepath: Union[str, Path]) -> Optional[Path]:
        """
        Экспортирует таблицу метаданных корпуса (metadata.csv).

        Args:
            docs: Набор документов
            filepath: Путь для сохранения файла
        """
        if not docs:
            logger.info("Нет документов для экспорта метаданных")
            return None

        filepath = self._prepare_path(filepath, '.csv')
        try:
            self.build_metadata_frame(docs).to_csv(filepath, index=False, encoding='utf-8')
        except OSError as e:
            logger.error(f"Ошибка экспорта метаданных: {e}")
            raise
        logger.info(f"Метаданные корпуса экспортированы: {filepath}")
        return filepath

    def export_all_formats(self, report: CorpusReport, base_filename: str,
                           kwic_results: Optional[Sequence[KwicResult]] = None) -> Dict[str, Path]:
        """
        Экспортирует отчёт во все доступные форматы.

        Args:
            report: Отчёт по корпусу
            base_filename: Базовое имя файла без расширения
            kwic_results: Строки конкорданса (необязательно)

        Returns:
            Словарь с путями к созданным файлам
        """
        timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
        base = self.output_dir / f"{base_filename}_{timestamp}"

        exported: Dict[str, Path] = {}
        excel_path = self.export_to_excel(report, base.with_suffix('.xlsx'), kwic_results)
        if excel_path:
            exported['excel'] = excel_path
        csv_path = self.export_frequencies_csv(report.frequencies, Path(f"{base}_frequencies.csv"))
        if csv_path:
            exported['csv'] = csv_path
        json_path = self.export_to_json(report, base.with_suffix('.json'))
        if json_path:
            exported['json'] = json_path
        if kwic_results:
            kwic_path = self.export_kwic_csv(kwic_results, Path(f"{base}_kwic.csv"))
            if kwic_path:
                exported['kwic'] = kwic_path

        logger.info(f"Результат экспортирован в папку: {self.output_dir}")
        return exported
