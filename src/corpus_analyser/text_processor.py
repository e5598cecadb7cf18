"""
Модуль для подготовки текстов к добавлению в корпус

Содержит функции для:
- Удаления HTML тегов из скачанных страниц
- Очистки текста от артефактов генерации
- Определения языка документа
- Создания документов корпуса и загрузки папки с текстами
"""

import logging
import random
import string
from dataclasses import replace
from datetime import date
from pathlib import Path
from typing import Any, List, Optional, Union

from bs4 import BeautifulSoup

from .components.lexicons import ENGLISH_STOPWORDS, SPANISH_STOPWORDS
from .components.normalizer import TextNormalizer
from .components.sentiment_scorer import SentimentScorer
from .components.tokenizer import TokenProcessor
from .config import config
from .interfaces.corpus import (
    Document,
    DocumentType,
    Language,
    PosBreakdown,
    SourceType,
)

logger = logging.getLogger(__name__)

ID_ALPHABET = string.ascii_lowercase + string.digits
ID_LENGTH = 9


def generate_document_id() -> str:
    """Случайный идентификатор документа из 9 символов [a-z0-9]."""
    return ''.join(random.choices(ID_ALPHABET, k=ID_LENGTH))


class CorpusTextProcessor:
    """Класс для подготовки текстов корпуса"""

    def __init__(self,
                 normalizer: Optional[TextNormalizer] = None,
                 tokenizer: Optional[TokenProcessor] = None,
                 sentiment_scorer: Optional[SentimentScorer] = None) -> None:
        self.normalizer = normalizer or TextNormalizer()
        self.tokenizer = tokenizer or TokenProcessor()
        self.sentiment_scorer = sentiment_scorer or SentimentScorer(tokenizer=self.tokenizer)
        # Буквы, встречающиеся только в испанском
        self.spanish_marks = set("ñáéíóúü¿¡")
        # Минимальная доля стоп-слов, чтобы считать язык определённым
        self.min_stopword_ratio = 0.05

    def remove_html_tags(self, text: str) -> str:
        """
        Удаляет HTML теги из текста используя BeautifulSoup

        Args:
            text: HTML текст

        Returns:
            Очищенный текст без HTML тегов
        """
        if not text:
            return ""

        if '<' in text and '>' in text:
            soup = BeautifulSoup(text, "html.parser")
            return soup.get_text()
        return text

    def clean_text(self, text: str, strip_html: bool = True) -> str:
        """
        Полная очистка текста: HTML (опционально), затем артефакты генерации

        Args:
            text: Исходный текст
            strip_html: Удалять ли HTML теги

        Returns:
            Очищенный текст
        """
        if not text:
            return ""
        if strip_html:
            text = self.remove_html_tags(text)
        return self.normalizer.normalize(text)

    def detect_language_from_filename(self, filename: Union[str, Path]) -> Language:
        """
        Определяет язык по соглашению об именах файлов корпуса

        es_001.txt, entrevista_es.txt → SPANISH; en_001.txt, talk_en.txt → ENGLISH

        Args:
            filename: Имя или путь файла

        Returns:
            Язык или UNKNOWN
        """
        stem = Path(filename).stem.lower()
        if stem.startswith('es_') or stem.endswith('_es') or '_es_' in stem:
            return Language.SPANISH
        if stem.startswith('en_') or stem.endswith('_en') or '_en_' in stem:
            return Language.ENGLISH
        return Language.UNKNOWN

    def guess_language(self, text: str) -> Language:
        """
        Грубо определяет язык текста по доле стоп-слов и испанских букв

        Args:
            text: Текст документа

        Returns:
            SPANISH, ENGLISH или UNKNOWN, если данных мало
        """
        tokens = self.tokenizer.tokenize(text)
        if not tokens:
            return Language.UNKNOWN

        spanish_hits = sum(1 for t in tokens if t in SPANISH_STOPWORDS)
        english_hits = sum(1 for t in tokens if t in ENGLISH_STOPWORDS)
        # Испанские буквы дают дополнительный голос за испанский
        if any(ch in self.spanish_marks for ch in text.lower()):
            spanish_hits += 1

        if max(spanish_hits, english_hits) / len(tokens) < self.min_stopword_ratio:
            return Language.UNKNOWN
        if spanish_hits > english_hits:
            return Language.SPANISH
        if english_hits > spanish_hits:
            return Language.ENGLISH
        return Language.UNKNOWN

    def build_document(self,
                       title: str,
                       raw_text: str,
                       language: Any = Language.UNKNOWN,
                       *,
                       doc_type: DocumentType = DocumentType.TEXT,
                       source_type: SourceType = SourceType.MANUAL_UPLOAD,
                       author: Optional[str] = None,
                       source_url: Optional[str] = None,
                       parallel_id: Optional[str] = None,
                       original_file_name: Optional[str] = None,
                       pos_data: Optional[PosBreakdown] = None,
                       strip_html: bool = False,
                       score_sentiment: bool = True) -> Document:
        """
        Создаёт документ корпуса из сырого текста

        Текст очищается, token_count считается по очищенному тексту,
        тональность прикрепляется сразу при загрузке.

        Args:
            title: Заголовок документа (используется как doc_id в KWIC)
            raw_text: Сырой текст
            language: Язык (Language или код 'EN'/'ES')
            doc_type: Тип исходного материала
            source_type: Источник документа
            author: Автор
            source_url: URL источника
            parallel_id: ID переведённого двойника
            original_file_name: Исходное имя файла
            pos_data: Внешнее распределение частей речи
            strip_html: Удалять ли HTML перед очисткой
            score_sentiment: Считать ли тональность сразу

        Returns:
            Новый Document
        """
        lang = Language.from_value(language)
        content = self.clean_text(raw_text, strip_html=strip_html)
        doc = Document(
            id=generate_document_id(),
            title=title,
            content=content,
            language=lang,
            token_count=self.tokenizer.count_tokens(content, lang),
            pos_data=pos_data,
            doc_type=doc_type,
            source_type=source_type,
            upload_date=date.today().isoformat(),
            author=author,
            source_url=source_url,
            parallel_id=parallel_id,
            original_file_name=original_file_name,
        )
        if score_sentiment:
            doc.sentiment = self.sentiment_scorer.score_document(doc)
        logger.debug(f"Документ '{title}' добавлен: {doc.token_count} токенов, язык {lang.value}")
        return doc

    def renormalize(self, doc: Document) -> Document:
        """
        Повторно очищает содержимое документа и пересчитывает производные поля

        Возвращает новый Document с тем же id; исходный не меняется.
        """
        content = self.normalizer.normalize(doc.content)
        updated = replace(
            doc,
            content=content,
            token_count=self.tokenizer.count_tokens(content, doc.language),
        )
        if doc.sentiment is not None:
            updated.sentiment = self.sentiment_scorer.score_document(updated)
        return updated

    def load_directory(self, folder: Union[str, Path, None] = None,
                       pattern: str = "*.txt",
                       language: Any = None) -> List[Document]:
        """
        Загружает все текстовые файлы папки как документы корпуса

        Язык берётся из аргумента, затем из имени файла, затем угадывается
        по тексту, затем берётся из конфигурации.

        Args:
            folder: Папка с текстами (по умолчанию files.corpus_folder)
            pattern: Шаблон имён файлов
            language: Принудительный язык для всех файлов

        Returns:
            Список документов в порядке имён файлов
        """
        folder = Path(folder or config.get_corpus_folder())
        if not folder.is_dir():
            logger.warning(f"Папка корпуса не найдена: {folder}")
            return []

        forced = Language.from_value(language) if language is not None else None
        fallback = Language.from_value(config.get_default_language())

        documents: List[Document] = []
        for path in sorted(folder.glob(pattern)):
            if not path.is_file():
                continue
            try:
                raw = path.read_text(encoding='utf-8')
            except (OSError, UnicodeDecodeError) as e:
                logger.warning(f"Не удалось прочитать {path.name}: {e}")
                continue

            lang = forced or self.detect_language_from_filename(path.name)
            if lang is Language.UNKNOWN:
                lang = self.guess_language(raw)
            if lang is Language.UNKNOWN:
                lang = fallback

            documents.append(self.build_document(
                title=path.stem,
                raw_text=raw,
                language=lang,
                original_file_name=path.name,
                source_url='Local File',
            ))

        logger.info(f"Загружено документов: {len(documents)} из {folder}")
        return documents
