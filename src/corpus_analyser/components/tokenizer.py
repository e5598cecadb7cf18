"""
Компонент для токенизации английского и испанского текста.

Отвечает за разбивку текста на токены и фильтрацию стоп-слов.
"""

import re
import unicodedata
from typing import FrozenSet, List, Mapping, Optional

from ..interfaces.corpus import Language, TokenProcessorInterface
from .lexicons import get_stopwords


# Удаляемая пунктуация. ¿ ¡ ? ' [ ] намеренно не входят в набор:
# токены вроде «¿cómo» сохраняются как есть.
PUNCTUATION_PATTERN = re.compile(r'[.,/#!$%^&*;:{}=\-_`~()"“”«»]')


class TokenProcessor(TokenProcessorInterface):
    """Процессор для токенизации текста корпуса."""

    def __init__(self, stopwords: Optional[Mapping[Language, FrozenSet[str]]] = None):
        """
        Инициализирует процессор токенизации.

        Args:
            stopwords: Переопределение наборов стоп-слов по языку
                (по умолчанию встроенные английский и испанский)
        """
        self._stopwords = dict(stopwords) if stopwords else None

    def tokenize(self, text: Optional[str], remove_stopwords: bool = False,
                 language: Language = Language.ENGLISH) -> List[str]:
        """
        Разбивает текст на токены.

        Порядок токенов совпадает с порядком в тексте, дубликаты
        сохраняются. Повторный вызов с теми же аргументами даёт тот же
        результат.

        Args:
            text: Исходный текст
            remove_stopwords: Удалять ли стоп-слова
            language: Язык текста (выбор набора стоп-слов)

        Returns:
            Список токенов
        """
        if not text or not text.strip():
            return []
        # Единая Unicode-нормализация (NFC) до разбиения
        text = unicodedata.normalize('NFC', text)

        text = PUNCTUATION_PATTERN.sub('', text.lower())
        tokens = [token for token in text.split() if token]

        if remove_stopwords:
            tokens = self.filter_stopwords(tokens, language)

        return tokens

    def filter_stopwords(self, tokens: List[str], language: Language) -> List[str]:
        """
        Удаляет стоп-слова языка.

        Args:
            tokens: Список токенов
            language: Язык (испанский набор только для SPANISH)

        Returns:
            Отфильтрованный список токенов
        """
        if not tokens:
            return []
        stopwords = self.get_stopwords(language)
        return [token for token in tokens if token not in stopwords]

    def get_stopwords(self, language: Language) -> FrozenSet[str]:
        """Возвращает набор стоп-слов для языка."""
        if self._stopwords is not None:
            key = Language.SPANISH if language is Language.SPANISH else Language.ENGLISH
            return frozenset(self._stopwords.get(key, frozenset()))
        return get_stopwords(language)

    def count_tokens(self, text: Optional[str], language: Language = Language.ENGLISH) -> int:
        """Количество токенов без удаления стоп-слов (кэшируется в Document.token_count)."""
        return len(self.tokenize(text, remove_stopwords=False, language=language))
