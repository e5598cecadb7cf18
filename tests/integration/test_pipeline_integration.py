import json

import pandas as pd
import pytest

from corpus_analyser.corpus_analyzer import CorpusAnalyzer, filter_documents
from corpus_analyser.interfaces.corpus import Language, PosBreakdown
from corpus_analyser.text_processor import CorpusTextProcessor


@pytest.mark.integration
def test_full_pipeline_folder_to_excel(sample_texts, temp_directory):
    """Проверяет пайплайн: папка с текстами → очистка → анализ → Excel/JSON/metadata."""
    corpus = temp_directory / "corpus"
    corpus.mkdir()
    (corpus / "en_holiday.txt").write_text(sample_texts["generated"], encoding="utf-8")
    (corpus / "es_casa.txt").write_text(sample_texts["html"], encoding="utf-8")
    (corpus / "en_cats.txt").write_text(sample_texts["english"], encoding="utf-8")

    # 1) Загрузка и очистка
    processor = CorpusTextProcessor()
    docs = processor.load_directory(corpus)
    assert len(docs) == 3
    holiday = next(d for d in docs if d.title == "en_holiday")
    assert "Title:" not in holiday.content
    assert "**" not in holiday.content

    # 2) Внешние данные о частях речи прикрепляются к части документов
    docs[0].pos_data = PosBreakdown.from_dict({"nouns": 30, "verbs": 20})

    # 3) Анализ только английской части корпуса
    english = filter_documents(docs, language=Language.ENGLISH)
    analyzer = CorpusAnalyzer(remove_stopwords=True, top_n=10, output_dir=str(temp_directory / "results"))
    report = analyzer.analyze(english)

    assert report.document_count == 2
    assert report.total_tokens == sum(d.token_count for d in english)
    assert all(f.token not in {"the", "a", "was"} for f in report.frequencies)
    assert sum(report.sentiment_distribution.values()) == 2

    # 4) Экспорт
    kwic_rows = analyzer.kwic(english, "cat")
    exported = analyzer.export_report(report, "integration", kwic_rows)
    metadata = analyzer.exporter.export_metadata_csv(docs, temp_directory / "results" / "metadata.csv")

    sheets = pd.read_excel(exported["excel"], sheet_name=None)
    assert "KWIC" in sheets
    assert len(sheets["KWIC"]) == 2

    data = json.loads(exported["json"].read_text(encoding="utf-8"))
    assert data["metadata"]["document_count"] == 2

    meta_df = pd.read_csv(metadata)
    assert sorted(meta_df["ID_Documento"]) == ["en_001", "en_002", "es_001"]


@pytest.mark.integration
def test_renormalize_keeps_token_count_consistent(sample_texts):
    """token_count совпадает с токенизацией содержимого после повторной очистки."""
    processor = CorpusTextProcessor()
    doc = processor.build_document("gen", sample_texts["generated"], "EN")
    again = processor.renormalize(doc)

    assert again.content == doc.content
    assert again.token_count == doc.token_count == len(processor.tokenizer.tokenize(doc.content))
