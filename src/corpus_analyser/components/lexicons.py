"""
Статические словари: стоп-слова и лексиконы тональности.

Все наборы неизменяемые и выбираются по Language. UNKNOWN и любые
другие языки используют английские наборы.
"""

from types import MappingProxyType
from typing import FrozenSet, Mapping

from ..interfaces.corpus import Language


ENGLISH_STOPWORDS: FrozenSet[str] = frozenset({
    'a', 'about', 'above', 'after', 'again', 'against', 'all', 'am', 'an',
    'and', 'any', 'are', 'as', 'at', 'be', 'because', 'been', 'before',
    'being', 'below', 'between', 'both', 'but', 'by', 'can', 'could', 'did',
    'do', 'does', 'doing', 'down', 'during', 'each', 'few', 'for', 'from',
    'further', 'had', 'has', 'have', 'having', 'he', 'her', 'here', 'hers',
    'herself', 'him', 'himself', 'his', 'how', 'i', 'if', 'in', 'into', 'is',
    'it', "it's", 'its', 'itself', 'just', 'me', 'more', 'most', 'my',
    'myself', 'no', 'nor', 'not', 'now', 'of', 'off', 'on', 'once', 'only',
    'or', 'other', 'our', 'ours', 'ourselves', 'out', 'over', 'own', 'same',
    'she', 'should', 'so', 'some', 'such', 'than', 'that', 'the', 'their',
    'theirs', 'them', 'themselves', 'then', 'there', 'these', 'they', 'this',
    'those', 'through', 'to', 'too', 'under', 'until', 'up', 'very', 'was',
    'we', 'were', 'what', 'when', 'where', 'which', 'while', 'who', 'whom',
    'why', 'will', 'with', 'would', 'you', 'your', 'yours', 'yourself',
    'yourselves',
})

SPANISH_STOPWORDS: FrozenSet[str] = frozenset({
    'a', 'al', 'algo', 'algunos', 'ante', 'antes', 'como', 'con', 'contra',
    'cual', 'cuando', 'de', 'del', 'desde', 'donde', 'durante', 'e', 'el',
    'él', 'ella', 'ellas', 'ellos', 'en', 'entre', 'era', 'es', 'esa',
    'esas', 'ese', 'eso', 'esos', 'esta', 'está', 'estaba', 'estas', 'este',
    'esto', 'estos', 'fue', 'ha', 'han', 'hasta', 'hay', 'la', 'las', 'le',
    'les', 'lo', 'los', 'me', 'mi', 'mis', 'mucho', 'muy', 'más', 'nada',
    'ni', 'no', 'nos', 'nosotros', 'o', 'os', 'otra', 'otro', 'para', 'pero',
    'poco', 'por', 'porque', 'que', 'qué', 'quien', 'se', 'ser', 'si', 'sí',
    'sin', 'sobre', 'son', 'su', 'sus', 'también', 'te', 'tiene', 'todo',
    'todos', 'tu', 'tus', 'tú', 'un', 'una', 'uno', 'unos', 'vosotros', 'y',
    'ya', 'yo',
})

STOPWORDS: Mapping[Language, FrozenSet[str]] = MappingProxyType({
    Language.ENGLISH: ENGLISH_STOPWORDS,
    Language.SPANISH: SPANISH_STOPWORDS,
})


ENGLISH_POSITIVE: FrozenSet[str] = frozenset({
    'good', 'great', 'excellent', 'amazing', 'wonderful', 'happy', 'joy',
    'love', 'best', 'beautiful', 'success', 'win', 'positive', 'perfect',
    'better', 'fun', 'enjoy', 'glad', 'cool', 'nice', 'brilliant',
})

ENGLISH_NEGATIVE: FrozenSet[str] = frozenset({
    'bad', 'terrible', 'awful', 'worst', 'hate', 'sad', 'angry', 'fail',
    'negative', 'wrong', 'pain', 'ugly', 'boring', 'poor', 'broken', 'error',
    'stupid', 'disaster', 'fear', 'hard', 'difficult',
})

SPANISH_POSITIVE: FrozenSet[str] = frozenset({
    'bueno', 'bien', 'excelente', 'increíble', 'maravilloso', 'feliz',
    'alegría', 'amor', 'mejor', 'hermoso', 'éxito', 'ganar', 'positivo',
    'perfecto', 'divertido', 'disfrutar', 'contento', 'genial', 'agradable',
    'bonito', 'brillante',
})

SPANISH_NEGATIVE: FrozenSet[str] = frozenset({
    'mal', 'malo', 'terrible', 'peor', 'odio', 'triste', 'enojado', 'fallar',
    'negativo', 'error', 'dolor', 'feo', 'aburrido', 'pobre', 'roto',
    'estúpido', 'desastre', 'miedo', 'difícil', 'duro', 'horrible',
})

# (позитивные, негативные) по языку
SENTIMENT_LEXICONS: Mapping[Language, tuple] = MappingProxyType({
    Language.ENGLISH: (ENGLISH_POSITIVE, ENGLISH_NEGATIVE),
    Language.SPANISH: (SPANISH_POSITIVE, SPANISH_NEGATIVE),
})


def get_stopwords(language: Language) -> FrozenSet[str]:
    """Стоп-слова языка: испанские только для SPANISH, иначе английские."""
    if language is Language.SPANISH:
        return SPANISH_STOPWORDS
    return ENGLISH_STOPWORDS


def get_sentiment_lexicon(language: Language) -> tuple:
    """Пара (позитивные, негативные) для языка, с откатом на английский."""
    if language is Language.SPANISH:
        return SENTIMENT_LEXICONS[Language.SPANISH]
    return SENTIMENT_LEXICONS[Language.ENGLISH]
