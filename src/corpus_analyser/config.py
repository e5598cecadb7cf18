"""
Модуль для работы с конфигурацией проекта

Функции:
- Загрузка config.yaml (+ профили: config.prod.yaml, config.test.yaml)
- ENV-переопределения (префикс CORPUS_ANALYSER_, вложенность через __)
- Валидация значений
- Настройка логирования
"""

import os
import yaml
from pathlib import Path
from typing import Dict, Any, List, Optional
from dotenv import load_dotenv
import logging
from datetime import datetime

logger = logging.getLogger(__name__)

ENV_PREFIX = 'CORPUS_ANALYSER_'
ENV_PROFILE = 'CORPUS_ANALYSER_ENV'


class Config:
    """Класс для работы с конфигурацией проекта"""

    def __init__(self, config_path: Optional[str] = None):
        """
        Инициализация конфигурации

        Args:
            config_path: Путь к файлу конфигурации
        """
        if config_path:
            self.config_path = Path(config_path)
        else:
            # Ищем config.yaml в текущей директории и выше
            current_dir = Path.cwd()
            candidate = current_dir / "config.yaml"
            while not candidate.exists() and current_dir.parent != current_dir:
                current_dir = current_dir.parent
                candidate = current_dir / "config.yaml"
            self.config_path = candidate

        self.config_data: Dict[str, Any] = {}
        self.env_data: Dict[str, Any] = {}

        self._load_env()
        self._load_config()
        try:
            self._apply_env_overrides()
            self._validate()
        except Exception as e:
            logger.warning(f"Проблема при применении ENV/валидации: {e}")
        # Логирование настраивает точка входа (cli.main), а не импорт пакета

    def _load_env(self) -> None:
        """Загружает переменные окружения из .env файла"""
        try:
            load_dotenv()
            self.env_data = {
                ENV_PROFILE: os.getenv(ENV_PROFILE),
                'CORPUS_ANALYSER_DEBUG': os.getenv('CORPUS_ANALYSER_DEBUG'),
            }
            logger.debug("Переменные окружения загружены из .env (если есть)")
        except Exception as e:
            logger.error(f"Ошибка загрузки переменных окружения: {e}")

    def _resolve_config_path(self) -> Path:
        """Выбирает файл конфигурации с учётом профиля окружения."""
        env = (os.getenv(ENV_PROFILE) or '').lower().strip()
        root = self.config_path.parent
        if env == 'production':
            candidate = root / 'config.prod.yaml'
        elif env == 'testing':
            candidate = root / 'config.test.yaml'
        else:
            return self.config_path
        if candidate.exists():
            return candidate
        return self.config_path

    def _load_config(self) -> None:
        """Загружает конфигурацию из YAML файла поверх значений по умолчанию"""
        self.config_data = self._get_default_config()
        try:
            self.config_path = self._resolve_config_path()
            if self.config_path.exists():
                with open(self.config_path, 'r', encoding='utf-8') as f:
                    loaded = yaml.safe_load(f) or {}
                self._merge(self.config_data, loaded)
                logger.info(f"Конфигурация загружена: {self.config_path}")
            else:
                logger.warning(f"Файл конфигурации {self.config_path} не найден, используются значения по умолчанию")
        except Exception as e:
            logger.error(f"Ошибка загрузки конфигурации: {e}")
            self.config_data = self._get_default_config()

    def _merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> None:
        """Рекурсивно накладывает override на base."""
        for key, value in override.items():
            if isinstance(value, dict) and isinstance(base.get(key), dict):
                self._merge(base[key], value)
            else:
                base[key] = value

    def _set_nested(self, data: Dict[str, Any], dotted: str, value: Any) -> None:
        cur = data
        keys = dotted.split('.')
        for k in keys[:-1]:
            if k not in cur or not isinstance(cur[k], dict):
                cur[k] = {}
            cur = cur[k]
        cur[keys[-1]] = value

    def _apply_env_overrides(self) -> None:
        """Переопределяет конфиг значениями из ENV (CORPUS_ANALYSER_*)."""
        for key, val in os.environ.items():
            if not key.startswith(ENV_PREFIX):
                continue
            # Пропускаем служебные
            if key in (ENV_PROFILE, 'CORPUS_ANALYSER_DEBUG'):
                continue
            tail = key[len(ENV_PREFIX):]
            # Вложенность разделяется двойным подчёркиванием
            dotted = tail.replace('__', '.').lower()
            parsed: Any = val
            if val.lower() in ('true', 'false'):
                parsed = (val.lower() == 'true')
            else:
                try:
                    if '.' in val:
                        parsed = float(val)
                    else:
                        parsed = int(val)
                except ValueError:
                    parsed = val
            self._set_nested(self.config_data, dotted, parsed)
        if os.getenv(ENV_PROFILE):
            logger.info(f"Активирован профиль: {os.getenv(ENV_PROFILE)}")

    def _validate(self) -> None:
        """Проверяет диапазоны параметров анализа."""
        checks = (
            ('text_analysis.kwic_window', 0, 60),
            ('text_analysis.ngram_size', 2, 2),
            ('text_analysis.top_n', 1, 20),
        )
        for key, minimum, default in checks:
            try:
                value = int(self.get(key, default))
            except (TypeError, ValueError):
                logger.warning(f"{key}: некорректное значение, установлено {default}")
                self._set_nested(self.config_data, key, default)
                continue
            if value < minimum:
                logger.warning(f"{key} < {minimum}, принудительно установлено в {minimum}")
                value = minimum
            self._set_nested(self.config_data, key, value)

    def _configure_logging_if_needed(self, force: bool = False) -> None:
        """Инициализирует/переинициализирует базовое логирование по config.

        Повторная конфигурация выполняется, если:
          - ранее не конфигурировалось, или
          - изменился уровень/формат/файл логирования, или
          - явно указан force=True
        """
        root = logging.getLogger()

        console_level_name = str(self.get_console_logging_level()).upper()
        file_level_name = str(self.get_file_logging_level()).upper()
        console_level = getattr(logging, console_level_name, logging.INFO)
        file_level = getattr(logging, file_level_name, logging.DEBUG)

        desired_fmt = self.get_logging_format()
        desired_file = self.get_logging_file() if self.is_logging_to_file_enabled() else None

        if getattr(root, "_corpus_analyser_configured", False) and not force:
            if (
                getattr(root, "_corpus_analyser_console_level", None) == console_level_name and
                getattr(root, "_corpus_analyser_file_level", None) == file_level_name and
                getattr(root, "_corpus_analyser_format", None) == desired_fmt and
                getattr(root, "_corpus_analyser_file", None) == desired_file
            ):
                return

        handlers: List[logging.Handler] = []
        console = logging.StreamHandler()
        console.setLevel(console_level)
        console.setFormatter(logging.Formatter(desired_fmt))
        handlers.append(console)

        if desired_file:
            self.cleanup_old_log_files()
            log_file = Path(desired_file)
            try:
                log_file.parent.mkdir(parents=True, exist_ok=True)
                fh = logging.FileHandler(log_file, encoding='utf-8')
                fh.setLevel(file_level)
                fh.setFormatter(logging.Formatter(desired_fmt))
                handlers.append(fh)
            except OSError as e:
                logger.debug(f"Не удалось открыть файл лога: {e}")

        root_level = min(console_level, file_level) if desired_file else console_level
        logging.basicConfig(level=root_level, handlers=handlers, format=desired_fmt, force=True)
        setattr(root, "_corpus_analyser_configured", True)
        setattr(root, "_corpus_analyser_console_level", console_level_name)
        setattr(root, "_corpus_analyser_file_level", file_level_name)
        setattr(root, "_corpus_analyser_format", desired_fmt)
        setattr(root, "_corpus_analyser_file", desired_file)

    def _get_default_config(self) -> Dict[str, Any]:
        """Возвращает конфигурацию по умолчанию"""
        return {
            'text_analysis': {
                # Удалять ли стоп-слова в частотных списках и n-граммах
                'remove_stopwords': False,
                # Радиус контекста KWIC в символах
                'kwic_window': 60,
                # Размер n-грамм по умолчанию (2 или 3 в интерфейсе)
                'ngram_size': 2,
                # Сколько строк частотного списка показывать
                'top_n': 20,
                # Язык документов, если его нельзя определить по имени файла
                'default_language': 'UNK',
            },
            'files': {
                'corpus_folder': "data/corpus",
                'results_folder': "data/results",
                'results_filename_prefix': "corpus_analysis",
            },
            'excel': {
                'frequency_decimal_places': 4,
                'main_sheet_name': "Frequencies",
            },
            'logging': {
                'level': "INFO",
                'format': "%(asctime)s - %(levelname)s - %(message)s",
                'log_to_file': False,
                'max_log_files': 10,
            },
        }

    def get(self, key: str, default: Any = None) -> Any:
        """
        Получает значение конфигурации по ключу

        Args:
            key: Ключ в формате 'section.subsection.parameter'
            default: Значение по умолчанию

        Returns:
            Значение параметра или default
        """
        try:
            value = self.config_data
            for k in key.split('.'):
                value = value[k]
            return value
        except (KeyError, TypeError):
            return default

    def get_env(self, key: str, default: Any = None) -> Any:
        """Получает значение переменной окружения, загруженной при старте"""
        value = self.env_data.get(key)
        return default if value is None else value

    def get_text_analysis_config(self) -> Dict[str, Any]:
        """Получает конфигурацию анализа текста"""
        return self.config_data.get('text_analysis', {})

    def get_files_config(self) -> Dict[str, Any]:
        """Получает конфигурацию файлов"""
        return self.config_data.get('files', {})

    def get_logging_config(self) -> Dict[str, Any]:
        """Получает конфигурацию логирования"""
        return self.config_data.get('logging', {})

    def is_stopword_removal_enabled(self) -> bool:
        """Удалять ли стоп-слова по умолчанию"""
        return bool(self.get('text_analysis.remove_stopwords', False))

    def get_kwic_window(self) -> int:
        """Радиус контекста KWIC в символах"""
        return int(self.get('text_analysis.kwic_window', 60))

    def get_ngram_size(self) -> int:
        """Размер n-грамм по умолчанию"""
        return int(self.get('text_analysis.ngram_size', 2))

    def get_top_n(self) -> int:
        """Количество строк в топе частотного списка"""
        return int(self.get('text_analysis.top_n', 20))

    def get_default_language(self) -> str:
        """Код языка по умолчанию для документов без метки"""
        return str(self.get('text_analysis.default_language', 'UNK'))

    def get_corpus_folder(self) -> str:
        """Получает папку с текстами корпуса"""
        return self.get('files.corpus_folder', "data/corpus")

    def get_results_folder(self) -> str:
        """Получает папку для результатов"""
        return self.get('files.results_folder', "data/results")

    def get_results_filename_prefix(self) -> str:
        """Получает префикс для файлов результатов"""
        return self.get('files.results_filename_prefix', "corpus_analysis")

    def get_frequency_decimal_places(self) -> int:
        """Получает количество знаков после запятой для частоты"""
        return int(self.get('excel.frequency_decimal_places', 4))

    def get_main_sheet_name(self) -> str:
        """Получает название основного листа Excel"""
        return self.get('excel.main_sheet_name', "Frequencies")

    def get_console_logging_level(self) -> str:
        """Получает уровень логирования для консоли"""
        return self.get('logging.console_level', self.get('logging.level', "INFO"))

    def get_file_logging_level(self) -> str:
        """Получает уровень логирования для файла"""
        return self.get('logging.file_level', "DEBUG")

    def get_logging_level(self) -> str:
        return self.get_console_logging_level()

    def get_logging_format(self) -> str:
        """Получает формат логов"""
        return self.get('logging.format', "%(asctime)s - %(levelname)s - %(message)s")

    def is_logging_to_file_enabled(self) -> bool:
        """Проверяет, включено ли логирование в файл"""
        return bool(self.get('logging.log_to_file', False))

    def get_logging_file(self) -> str:
        """Имя файла лога для текущей сессии с временной меткой"""
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        return f"logs/corpus_analyser_{timestamp}.log"

    def get_max_log_files(self) -> int:
        """Получает максимальное количество файлов логов для хранения"""
        return int(self.get('logging.max_log_files', 10))

    def cleanup_old_log_files(self) -> None:
        """Удаляет старые файлы логов, оставляя только последние max_log_files"""
        logs_dir = Path("logs")
        if not logs_dir.exists():
            return

        log_files = list(logs_dir.glob("corpus_analyser_*.log"))
        max_files = self.get_max_log_files()
        if len(log_files) <= max_files:
            return

        # Самые новые последними
        log_files.sort(key=lambda f: f.stat().st_mtime)
        for old_file in log_files[:-max_files]:
            try:
                old_file.unlink()
                logger.debug(f"Удален старый лог файл: {old_file}")
            except OSError as e:
                logger.debug(f"Не удалось удалить лог файл {old_file}: {e}")


# Глобальный экземпляр конфигурации
config = Config()
