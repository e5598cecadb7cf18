"""
Модель данных корпуса и абстрактные интерфейсы компонентов анализа.

Определяет документы, результаты анализа и контракты, которые должны
реализовывать все компоненты, обеспечивая единообразный API и
возможность замены реализаций.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, asdict
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence


class Language(Enum):
    """Язык документа. Определяет выбор стоп-слов и лексикона тональности."""
    ENGLISH = "EN"
    SPANISH = "ES"
    UNKNOWN = "UNK"

    @classmethod
    def from_value(cls, value: Any) -> "Language":
        """
        Приводит произвольное значение к Language.

        Принимает сам Language, код ('EN', 'es') или имя ('spanish').
        Всё нераспознанное считается UNKNOWN.
        """
        if isinstance(value, cls):
            return value
        if value is None:
            return cls.UNKNOWN
        text = str(value).strip()
        for member in cls:
            if text.upper() == member.value or text.upper() == member.name:
                return member
        return cls.UNKNOWN


class DocumentType(Enum):
    """Тип исходного материала документа."""
    TEXT = "TEXT"
    AUDIO = "AUDIO"
    VIDEO = "VIDEO"
    IMAGE = "IMAGE"


class SourceType(Enum):
    """Источник, из которого документ попал в корпус."""
    MANUAL_UPLOAD = "Manual Upload"
    ACADEMIC = "Google Scholar/Academic"
    YOUTUBE = "YouTube Transcript"
    SOCIAL = "Social Media/Forum"
    CLASSROOM = "Google Classroom"
    GENERATED = "AI Generated (Augmentation)"
    SEGMENT = "Document Segment"


# Метки тональности
SENTIMENT_POSITIVE = "Positive"
SENTIMENT_NEGATIVE = "Negative"
SENTIMENT_NEUTRAL = "Neutral"
SENTIMENT_LABELS = (SENTIMENT_POSITIVE, SENTIMENT_NEGATIVE, SENTIMENT_NEUTRAL)


@dataclass(frozen=True)
class TokenFrequency:
    """Частота токена (или n-граммы) в наборе документов."""
    token: str
    count: int
    frequency: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class KwicResult:
    """Одна строка конкорданса: левый контекст, найденное слово, правый контекст."""
    left: str
    node: str
    right: str
    doc_id: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class SentimentResult:
    """Результат оценки тональности: нормализованный балл и метка."""
    score: float
    label: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


POS_FIELDS = (
    'nouns',
    'verbs',
    'adjectives',
    'adverbs',
    'pronouns',
    'determiners',
    'conjunctions',
    'others',
)


@dataclass(frozen=True)
class PosBreakdown:
    """
    Распределение частей речи в процентах.

    Данные приходят из внешнего сервиса и приблизительны: сумма полей
    не обязана равняться 100.
    """
    nouns: int = 0
    verbs: int = 0
    adjectives: int = 0
    adverbs: int = 0
    pronouns: int = 0
    determiners: int = 0  # включая артикли
    conjunctions: int = 0
    others: int = 0

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "PosBreakdown":
        """
        Создаёт PosBreakdown из словаря внешнего сервиса.

        Отсутствующие или нечисловые поля становятся 0.
        """
        data = data or {}
        values = {}
        for name in POS_FIELDS:
            try:
                values[name] = int(round(float(data.get(name, 0) or 0)))
            except (TypeError, ValueError):
                values[name] = 0
        return cls(**values)

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)


@dataclass
class Document:
    """Документ корпуса."""
    id: str
    title: str
    content: str
    language: Language = Language.UNKNOWN
    token_count: int = 0
    sentiment: Optional[SentimentResult] = None
    pos_data: Optional[PosBreakdown] = None
    # Метаданные источника
    doc_type: DocumentType = DocumentType.TEXT
    source_type: SourceType = SourceType.MANUAL_UPLOAD
    upload_date: str = ""
    author: Optional[str] = None
    source_url: Optional[str] = None
    # ID переведённого двойника (параллельный корпус)
    parallel_id: Optional[str] = None
    original_file_name: Optional[str] = None


@dataclass
class CorpusReport:
    """Сводный результат анализа набора документов."""
    document_count: int
    total_tokens: int
    type_token_ratio: float
    frequencies: List[TokenFrequency]
    bigrams: List[TokenFrequency]
    trigrams: List[TokenFrequency]
    sentiment_distribution: Dict[str, int]
    pos_summary: Optional[PosBreakdown]
    processing_time: float = 0.0
    metadata: Optional[Dict[str, Any]] = None


class TextNormalizerInterface(ABC):
    """Интерфейс для очистки сырого текста."""

    @abstractmethod
    def normalize(self, raw: str) -> str:
        """Удаляет артефакты генерации из текста."""
        pass


class TokenProcessorInterface(ABC):
    """Интерфейс для токенизации текста."""

    @abstractmethod
    def tokenize(self, text: str, remove_stopwords: bool = False,
                 language: Language = Language.ENGLISH) -> List[str]:
        """Разбивает текст на токены."""
        pass

    @abstractmethod
    def filter_stopwords(self, tokens: List[str], language: Language) -> List[str]:
        """Удаляет стоп-слова выбранного языка."""
        pass


class FrequencyAnalyzerInterface(ABC):
    """Интерфейс для анализа частотности."""

    @abstractmethod
    def frequencies(self, docs: Sequence[Document],
                    remove_stopwords: bool = False) -> List[TokenFrequency]:
        """Строит частотный список по набору документов."""
        pass

    @abstractmethod
    def type_token_ratio(self, docs: Sequence[Document]) -> float:
        """Возвращает отношение числа типов к числу токенов."""
        pass


class NgramGeneratorInterface(ABC):
    """Интерфейс для построения n-грамм."""

    @abstractmethod
    def ngrams(self, tokens: Sequence[str], n: int) -> List[TokenFrequency]:
        """Считает n-граммы в последовательности токенов."""
        pass


class ConcordancerInterface(ABC):
    """Интерфейс для построения конкорданса (KWIC)."""

    @abstractmethod
    def kwic(self, docs: Sequence[Document], keyword: str,
             window_radius: int = 60) -> List[KwicResult]:
        """Находит вхождения слова с контекстом."""
        pass


class SentimentScorerInterface(ABC):
    """Интерфейс для оценки тональности."""

    @abstractmethod
    def score(self, text: str, language: Language) -> SentimentResult:
        """Оценивает тональность текста."""
        pass


class POSAggregatorInterface(ABC):
    """Интерфейс для агрегации распределений частей речи."""

    @abstractmethod
    def aggregate(self, docs: Sequence[Document]) -> Optional[PosBreakdown]:
        """Усредняет распределения по документам."""
        pass
