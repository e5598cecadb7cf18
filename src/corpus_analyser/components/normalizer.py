"""
Компонент для очистки текста перед добавлением в корпус.

Удаляет артефакты генерации: markdown-разметку, служебные заголовки,
эхо инструкций, плейсхолдеры в квадратных скобках и маркеры списков.
"""

import logging
import re
import unicodedata
from typing import List, Optional, Pattern, Tuple

from ..interfaces.corpus import TextNormalizerInterface

logger = logging.getLogger(__name__)


# Префиксы строк-метаданных, которые удаляются целиком
META_HEADER_PREFIXES = (
    'Title:',
    'Subject:',
    'Here is a text',
    'Video:',
    'Assignment:',
    'Student:',
    'Date:',
    'Instruction:',
)

# Эхо инструкций модели: удаляется от фразы до конца строки
INSTRUCTION_ECHO_PHRASES = (
    'Write a ',
    'Here is the ',
    'Please generate ',
)


class TextNormalizer(TextNormalizerInterface):
    """Нормализатор сырого текста документов."""

    def __init__(self,
                 meta_prefixes: Tuple[str, ...] = META_HEADER_PREFIXES,
                 instruction_phrases: Tuple[str, ...] = INSTRUCTION_ECHO_PHRASES):
        """
        Инициализирует нормализатор.

        Args:
            meta_prefixes: Префиксы строк-метаданных для удаления
            instruction_phrases: Фразы-инструкции, удаляемые до конца строки
        """
        meta = '|'.join(re.escape(p) for p in meta_prefixes)
        echoes = '|'.join(re.escape(p) for p in instruction_phrases)

        # Порядок правил важен: «**» и заголовки снимаются до метастрок
        self._rules: List[Tuple[Pattern[str], str]] = [
            (re.compile(r'\*\*'), ''),
            (re.compile(r'^[ \t]*#{1,6}[ \t]+', re.MULTILINE), ''),
            (re.compile(rf'^(?:{meta}).*$', re.IGNORECASE | re.MULTILINE), ''),
            (re.compile(rf'\b(?:{echoes}).*', re.IGNORECASE), ''),
            (re.compile(r'\[[^\n]*?\]'), ''),
            (re.compile(r'_+'), ''),
            (re.compile(r'^[ \t]*[-*][ \t]+', re.MULTILINE), ''),
            (re.compile(r'\n{3,}'), '\n\n'),
        ]

    def normalize(self, raw: Optional[str]) -> str:
        """
        Очищает текст от артефактов генерации.

        Правила применяются повторно, пока текст меняется: удаление одного
        артефакта может обнажить другой (например, «# # Заголовок»).
        Каждый проход только укорачивает текст, поэтому цикл конечен,
        а результат идемпотентен.

        Args:
            raw: Исходный текст

        Returns:
            Очищенный текст (возможно, пустой)
        """
        if not raw:
            return ""

        text = str(raw)
        passes = 0
        while True:
            cleaned = self._apply_rules(text)
            passes += 1
            if cleaned == text:
                break
            text = cleaned

        if passes > 2:
            logger.debug(f"Нормализация сошлась за {passes} проходов")
        return text

    def normalize_batch(self, texts: List[str]) -> List[str]:
        """
        Нормализует список текстов.

        Args:
            texts: Список сырых текстов

        Returns:
            Список очищенных текстов
        """
        if not texts:
            return []
        return [self.normalize(text) for text in texts]

    def _apply_rules(self, text: str) -> str:
        """Один проход по всем правилам очистки."""
        # NFC на каждом проходе: удаление разметки может соединить букву с диакритикой
        text = unicodedata.normalize('NFC', text)
        text = text.replace('\r\n', '\n').replace('\r', '\n')
        for pattern, replacement in self._rules:
            text = pattern.sub(replacement, text)
        return text.strip()
