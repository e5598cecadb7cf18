#!/usr/bin/env python3
"""
Интерфейс командной строки для Corpus Analyser

Команды работают с папкой текстовых файлов (*.txt):
1. stats     - частотный список и сводная статистика
2. kwic      - конкорданс для слова
3. ngrams    - биграммы/триграммы
4. sentiment - тональность по документам
5. export    - полный отчёт в Excel/CSV/JSON + метаданные корпуса
"""

import argparse
import logging
import os
from pathlib import Path
from typing import List, Optional

from .config import config
from .corpus_analyzer import CorpusAnalyzer
from .interfaces.corpus import Document, TokenFrequency
from .text_processor import CorpusTextProcessor

logger = logging.getLogger(__name__)


def _load(folder: Optional[str], language: Optional[str]) -> List[Document]:
    processor = CorpusTextProcessor()
    docs = processor.load_directory(folder, language=language)
    if not docs:
        print(f"❌ В папке {folder or config.get_corpus_folder()} нет текстов (*.txt)")
    return docs


def _print_table(rows: List[TokenFrequency], title: str) -> None:
    print(f"\n{title}:")
    if not rows:
        print("   (пусто)")
        return
    width = max(len(r.token) for r in rows)
    for i, row in enumerate(rows, 1):
        print(f"{i:3d}. {row.token:<{width}}  {row.count:6d}  {row.frequency:.4f}")


def run_stats(args: argparse.Namespace) -> int:
    """Сводная статистика и частотный список"""
    docs = _load(args.folder, args.language)
    if not docs:
        return 1
    analyzer = CorpusAnalyzer(remove_stopwords=args.stopwords, top_n=args.top)
    report = analyzer.analyze(docs)

    print(f"\n📊 Документов: {report.document_count}")
    print(f"   Всего токенов: {report.total_tokens}")
    print(f"   Уникальных токенов: {report.metadata['unique_tokens']}")
    print(f"   Type/Token Ratio: {report.type_token_ratio:.3f}")
    _print_table(report.frequencies, f"🔤 Топ-{analyzer.top_n} токенов")
    return 0


def run_kwic(args: argparse.Namespace) -> int:
    """Конкорданс KWIC"""
    docs = _load(args.folder, args.language)
    if not docs:
        return 1
    analyzer = CorpusAnalyzer(window_radius=args.window)
    results = analyzer.kwic(docs, args.keyword)

    print(f"\n🔎 '{args.keyword}': найдено {len(results)} вхождений")
    for r in results:
        left = r.left.replace('\n', ' ')
        right = r.right.replace('\n', ' ')
        print(f"[{r.doc_id}] {left.rjust(analyzer.window_radius)} [{r.node}] {right}")
    return 0


def run_ngrams(args: argparse.Namespace) -> int:
    """N-граммы"""
    docs = _load(args.folder, args.language)
    if not docs:
        return 1
    analyzer = CorpusAnalyzer(remove_stopwords=args.stopwords, top_n=args.top)
    rows = analyzer.ngrams(docs, args.size)[:analyzer.top_n]
    _print_table(rows, f"🔗 Топ-{analyzer.top_n} {args.size}-грамм")
    return 0


def run_sentiment(args: argparse.Namespace) -> int:
    """Тональность по документам"""
    docs = _load(args.folder, args.language)
    if not docs:
        return 1
    analyzer = CorpusAnalyzer()
    analyzer.score_documents(docs)

    print("\n💬 Тональность документов:")
    for doc in docs:
        print(f"   {doc.title:<30} {doc.sentiment.label:<9} {doc.sentiment.score:+.2f}")
    dist = analyzer.sentiment_scorer.distribution(docs)
    print("\n   " + ", ".join(f"{label}: {count}" for label, count in dist.items()))
    return 0


def run_export(args: argparse.Namespace) -> int:
    """Полный отчёт во все форматы"""
    docs = _load(args.folder, args.language)
    if not docs:
        return 1
    analyzer = CorpusAnalyzer(remove_stopwords=args.stopwords, output_dir=args.output_dir)
    report = analyzer.analyze(docs)
    kwic_results = analyzer.kwic(docs, args.keyword) if args.keyword else None

    exported = analyzer.export_report(report, kwic_results=kwic_results)
    metadata_path = analyzer.exporter.export_metadata_csv(
        docs, Path(analyzer.exporter.output_dir) / "metadata.csv")
    if metadata_path:
        exported['metadata'] = metadata_path

    print("\n📁 Созданы файлы:")
    for kind, path in exported.items():
        print(f"   {kind}: {path}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="corpus-analyser",
        description="Corpus Analyser - частотный анализ, KWIC и тональность корпуса текстов",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Примеры использования:
  corpus-analyser stats data/corpus --stopwords --top 30
  corpus-analyser kwic data/corpus cat --window 40
  corpus-analyser ngrams data/corpus --size 3
  corpus-analyser sentiment data/corpus
  corpus-analyser export data/corpus --keyword cat
        """
    )

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument('folder', nargs='?', default=None,
                        help='Папка с *.txt (по умолчанию files.corpus_folder)')
    common.add_argument('--language', choices=['EN', 'ES', 'UNK'], default=None,
                        help='Принудительный язык для всех документов')

    subparsers = parser.add_subparsers(dest='command')

    stats = subparsers.add_parser('stats', parents=[common], help='Частотный список и статистика')
    stats.add_argument('--stopwords', action='store_true', default=None, help='Удалять стоп-слова')
    stats.add_argument('--top', type=int, default=None, help='Сколько строк показывать')
    stats.set_defaults(func=run_stats)

    kwic = subparsers.add_parser('kwic', parents=[common], help='Конкорданс KWIC')
    kwic.add_argument('keyword', help='Искомое слово')
    kwic.add_argument('--window', type=int, default=None, help='Радиус контекста в символах')
    kwic.set_defaults(func=run_kwic)

    ngrams = subparsers.add_parser('ngrams', parents=[common], help='N-граммы')
    ngrams.add_argument('--size', type=int, default=None, help='Размер n-граммы (>= 2)')
    ngrams.add_argument('--stopwords', action='store_true', default=None, help='Удалять стоп-слова')
    ngrams.add_argument('--top', type=int, default=None, help='Сколько строк показывать')
    ngrams.set_defaults(func=run_ngrams)

    sentiment = subparsers.add_parser('sentiment', parents=[common], help='Тональность документов')
    sentiment.set_defaults(func=run_sentiment)

    export = subparsers.add_parser('export', parents=[common], help='Экспорт отчёта')
    export.add_argument('--keyword', default=None, help='Добавить KWIC для слова')
    export.add_argument('--stopwords', action='store_true', default=None, help='Удалять стоп-слова')
    export.add_argument('--output-dir', default=None, help='Папка результатов')
    export.set_defaults(func=run_export)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Основная функция CLI"""
    if os.environ.get('CORPUS_ANALYSER_DEBUG') == '1':
        os.environ['CORPUS_ANALYSER_LOGGING__LEVEL'] = 'DEBUG'
        config._apply_env_overrides()
    config._configure_logging_if_needed(force=True)

    parser = build_parser()
    args = parser.parse_args(argv)

    if not getattr(args, 'func', None):
        parser.print_help()
        return 0

    if getattr(args, 'size', None) is not None and args.size < 2:
        parser.error("--size должен быть не меньше 2")
    if getattr(args, 'window', None) is not None and args.window < 0:
        parser.error("--window не может быть отрицательным")

    try:
        return args.func(args)
    except OSError as e:
        print(f"❌ Ошибка ввода-вывода: {e}")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
