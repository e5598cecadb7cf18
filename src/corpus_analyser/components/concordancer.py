"""
Компонент для построения конкорданса KWIC (keyword in context).

Ищет вхождения слова целиком (с проверкой границ) во всех документах
и вырезает левый и правый контекст фиксированного радиуса.

Поиск подстрочный, без регулярных выражений: пользовательский запрос
с символами вроде «(» или «*» сравнивается буквально.
"""

import logging
from typing import List, Optional, Sequence

from ..interfaces.corpus import ConcordancerInterface, Document, KwicResult

logger = logging.getLogger(__name__)


DEFAULT_WINDOW_RADIUS = 60

# Наборы границ различаются: слева допустимы открывающие скобки, справа закрывающие
LEFT_BOUNDARY_CHARS = frozenset('.,;:¡!¿?(["\'')
RIGHT_BOUNDARY_CHARS = frozenset('.,;:¡!¿?)]\'"')


def _lower_preserving_length(text: str) -> str:
    """
    Нижний регистр посимвольно, без изменения длины строки.

    str.lower() может удлинять строку (например, «İ»), из-за чего
    позиции в нижнем регистре разошлись бы с оригиналом.
    """
    lowered = text.lower()
    if len(lowered) == len(text):
        return lowered
    return ''.join(ch.lower() if len(ch.lower()) == 1 else ch for ch in text)


def _is_left_boundary(ch: Optional[str]) -> bool:
    return ch is None or ch.isspace() or ch in LEFT_BOUNDARY_CHARS


def _is_right_boundary(ch: Optional[str]) -> bool:
    return ch is None or ch.isspace() or ch in RIGHT_BOUNDARY_CHARS


class KwicConcordancer(ConcordancerInterface):
    """Построитель конкорданса KWIC."""

    def __init__(self, window_radius: int = DEFAULT_WINDOW_RADIUS):
        """
        Args:
            window_radius: Радиус контекста в символах по умолчанию
        """
        if window_radius < 0:
            raise ValueError(f"Радиус окна не может быть отрицательным: {window_radius}")
        self.window_radius = window_radius

    def kwic(self, docs: Sequence[Document], keyword: str,
             window_radius: Optional[int] = None) -> List[KwicResult]:
        """
        Находит все вхождения слова целиком во всех документах.

        Args:
            docs: Набор документов
            keyword: Искомая строка (сравнивается без учёта регистра)
            window_radius: Радиус контекста в символах

        Returns:
            Результаты в порядке документов, затем в порядке вхождений
        """
        if window_radius is None:
            window_radius = self.window_radius
        if window_radius < 0:
            raise ValueError(f"Радиус окна не может быть отрицательным: {window_radius}")

        if not keyword or not keyword.strip():
            logger.debug("Пустой запрос KWIC, поиск не выполняется")
            return []

        results: List[KwicResult] = []
        for doc in docs or []:
            results.extend(self.find_in_document(doc, keyword, window_radius))

        logger.debug(f"KWIC '{keyword}': {len(results)} вхождений в {len(docs or [])} документах")
        return results

    def find_in_document(self, doc: Document, keyword: str,
                         window_radius: int) -> List[KwicResult]:
        """
        Ищет вхождения слова в одном документе.

        После каждого найденного вхождения (принятого или нет) поиск
        продолжается с позиции сразу за его концом.
        """
        text = doc.content or ""
        length = len(keyword)
        if not text or length == 0:
            return []

        lower_text = _lower_preserving_length(text)
        needle = _lower_preserving_length(keyword)

        results: List[KwicResult] = []
        index = lower_text.find(needle)
        while index != -1:
            end = index + length
            char_before = lower_text[index - 1] if index > 0 else None
            char_after = lower_text[end] if end < len(lower_text) else None

            if _is_left_boundary(char_before) and _is_right_boundary(char_after):
                results.append(KwicResult(
                    left=text[max(0, index - window_radius):index],
                    node=text[index:end],
                    right=text[end:min(len(text), end + window_radius)],
                    doc_id=doc.title,
                ))

            index = lower_text.find(needle, end)
        return results
