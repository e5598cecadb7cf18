import sys
from pathlib import Path
from typing import List

import pytest

# Явно добавляем путь к src, чтобы импортировать пакет без установки
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from corpus_analyser.interfaces.corpus import Document, Language, PosBreakdown  # noqa: E402


@pytest.fixture
def temp_directory(tmp_path: Path) -> Path:
    """Временная директория для тестов.

    Возвращает уникальную директорию для каждого теста.
    """
    return tmp_path


@pytest.fixture(scope="session")
def sample_texts():
    """Наборы текстов для тестирования."""
    from .fixtures.sample_texts import (
        SAMPLE_ENGLISH_TEXT,
        SAMPLE_SPANISH_TEXT,
        SAMPLE_GENERATED_TEXT,
        SAMPLE_HTML_TEXT,
    )

    return {
        "english": SAMPLE_ENGLISH_TEXT,
        "spanish": SAMPLE_SPANISH_TEXT,
        "generated": SAMPLE_GENERATED_TEXT,
        "html": SAMPLE_HTML_TEXT,
    }


def make_document(content: str, language: Language = Language.ENGLISH,
                  title: str = "doc", **kwargs) -> Document:
    """Документ без прохода через нормализатор (для проверки компонентов)."""
    from corpus_analyser.components.tokenizer import TokenProcessor

    return Document(
        id=kwargs.pop("id", title),
        title=title,
        content=content,
        language=language,
        token_count=TokenProcessor().count_tokens(content, language),
        **kwargs,
    )


@pytest.fixture
def sample_documents(sample_texts) -> List[Document]:
    """Небольшой двуязычный корпус с частично заполненными частями речи."""
    return [
        make_document(
            sample_texts["english"], Language.ENGLISH, title="en_cats",
            pos_data=PosBreakdown(nouns=40, verbs=30, determiners=30),
        ),
        make_document(
            sample_texts["spanish"], Language.SPANISH, title="es_perro",
            pos_data=PosBreakdown(nouns=31, verbs=20, adjectives=25, determiners=24),
        ),
        make_document("I love good food. Good food is great!", Language.ENGLISH, title="en_food"),
    ]


def pytest_configure(config):
    """Регистрируем маркеры для проекта."""
    config.addinivalue_line("markers", "integration: интеграционные тесты")
    config.addinivalue_line("markers", "performance: тесты производительности")


@pytest.fixture
def make_doc():
    """Фабрика документов для тестов компонентов."""
    return make_document
