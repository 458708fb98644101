"""
Пакет Code128 Barcode Generator
===============================

Генерация линейных штрихкодов Code128 (наборы B и A) в PNG.

Этот пакет предоставляет:
    - Таблицы символов Code128 с порядком, совпадающим со стандартом
    - Кодирование текста с контрольным символом по модулю 103
    - Расчёт размера холста и геометрии полос
    - Растеризацию в Pillow с подписью под штрихкодом
    - Сохранение PNG и HTTP-заголовки для скачивания

Пример базового использования:
    >>> from src import get_logger
    >>> from src.barcodegen import BarcodeGenerator
    >>>
    >>> logger = get_logger(__name__)
    >>> gen = BarcodeGenerator("PJJ123C", "code128", size=40)
    >>> path = gen.save("label")
    >>> logger.info(f"Штрихкод сохранён: {path}")

Управление конфигурацией:
    >>> import os
    >>> os.environ['CODE128_LOG_LEVEL'] = 'DEBUG'
    >>>
    >>> from src import load_config
    >>> from src.barcodegen import LayoutConfig
    >>> config = load_config()
    >>> layout = LayoutConfig.from_mapping(config)

Версия: 0.1.0
Лицензия: MIT
Python: 3.11+
"""

import json
import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

# =============================================================================
# МЕТАДАННЫЕ ВЕРСИИ
# =============================================================================

__version__ = "0.1.0"
__author__ = "Code128 Barcode Generator Development Team"
__description__ = "Code128 linear barcode encoder and PNG renderer"
__license__ = "MIT"
__python_requires__ = ">=3.11"

# Компоненты семантической версии
VERSION_MAJOR = 0
VERSION_MINOR = 1
VERSION_PATCH = 0

# =============================================================================
# ПРОВЕРКА ВЕРСИИ PYTHON
# =============================================================================

if sys.version_info < (3, 11):
    raise RuntimeError(
        f"Code128 Barcode Generator требует Python 3.11 или выше. "
        f"Текущая версия: {sys.version_info.major}."
        f"{sys.version_info.minor}.{sys.version_info.micro}"
    )

# =============================================================================
# КОНФИГУРАЦИЯ ЛОГИРОВАНИЯ
# =============================================================================

_LOG_LEVELS: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def _setup_logging() -> None:
    """
    Инициализировать общепакетную конфигурацию логирования.

    Настраивает логгер пакета с:
    - Консольным обработчиком (stderr) для WARNING и выше
    - Ротирующим файловым обработчиком, если задана переменная
      окружения CODE128_LOG_FILE
    - Форматом с временной меткой, уровнем, модулем и сообщением

    Уровень логирования задаётся переменной окружения
    CODE128_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR, CRITICAL.

    Идемпотентна - повторные вызовы не имеют дополнительного эффекта.
    """
    log_level = _LOG_LEVELS.get(
        os.environ.get("CODE128_LOG_LEVEL", "INFO").upper(), logging.INFO
    )

    package_logger = logging.getLogger(__name__)
    if package_logger.handlers:
        return

    package_logger.setLevel(log_level)

    formatter = logging.Formatter(
        fmt="[%(asctime)s] %(levelname)-8s [%(name)s.%(funcName)s:%(lineno)d] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(formatter)
    package_logger.addHandler(console_handler)

    log_file = os.environ.get("CODE128_LOG_FILE")
    if log_file:
        try:
            Path(log_file).parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.handlers.RotatingFileHandler(
                filename=log_file,
                maxBytes=10 * 1024 * 1024,  # 10 МБ
                backupCount=5,
                encoding="utf-8",
            )
            file_handler.setLevel(log_level)
            file_handler.setFormatter(formatter)
            package_logger.addHandler(file_handler)
        except OSError as e:
            package_logger.warning(
                f"Не удалось инициализировать файловое логирование: {e}. "
                f"Используется только консоль."
            )

    package_logger.propagate = False


def get_logger(module_name: str) -> logging.Logger:
    """
    Получить логгер в пространстве имён пакета.

    Логгеры именуются как '<пакет>.<module_name>' и наследуют
    обработчики логгера пакета.

    Пример:
        >>> logger = get_logger(__name__)
        >>> logger.info("Кодирование начато")
    """
    if module_name == __name__ or module_name.startswith(f"{__name__}."):
        return logging.getLogger(module_name)
    if module_name == "__main__":
        return logging.getLogger(f"{__name__}.main")
    return logging.getLogger(f"{__name__}.{module_name.lstrip('.')}")


# =============================================================================
# УПРАВЛЕНИЕ КОНФИГУРАЦИЕЙ
# =============================================================================

# Значения конфигурации по умолчанию
_DEFAULT_CONFIG: Dict[str, Any] = {
    "log_level": "INFO",
    "default_variant": "code128",
    "default_size": 20,
    "default_orientation": "horizontal",
    "show_text": True,
    "margin": 20,
    "text_size": 30,
    "text_x": 31,
    "font_path": None,
    "font_size": 14,
    "foreground": "black",
    "background": "white",
}


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Загрузить конфигурацию из JSON-файла или использовать настройки по умолчанию.

    Если файл не существует или содержит недопустимый JSON,
    возвращается конфигурация по умолчанию с предупреждением в логе.

    Ключи конфигурации:
        - log_level: str - Уровень логирования
        - default_variant: str - Вариант Code128 ("code128", "code128a")
        - default_size: int - Толщина штрихкода в пикселях
        - default_orientation: str - "horizontal" или "vertical"
        - show_text: bool - Печатать текст под штрихкодом
        - margin, text_size, text_x, font_path, font_size,
          foreground, background - параметры LayoutConfig

    Аргументы:
        config_path: Путь к файлу. Если None, ищет 'barcode_config.json'
                    в текущем каталоге.

    Возвращает:
        Словарь со всеми ключами по умолчанию, переопределёнными
        пользовательскими значениями.
    """
    logger = get_logger(__name__)

    if config_path is None:
        config_path = Path("barcode_config.json")

    config = _DEFAULT_CONFIG.copy()

    if config_path.exists():
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                user_config = json.load(f)

            if not isinstance(user_config, dict):
                raise ValueError(
                    f"Файл конфигурации должен содержать JSON-объект, "
                    f"получен {type(user_config).__name__}"
                )

            config.update(user_config)

            logger.info(f"Конфигурация загружена из {config_path}")
            logger.debug(f"Конфигурация: {config}")

        except json.JSONDecodeError as e:
            logger.warning(
                f"Не удалось разобрать {config_path}: Недопустимый JSON "
                f"в строке {e.lineno}, столбце {e.colno}. "
                f"Используется конфигурация по умолчанию."
            )
        except OSError as e:
            logger.warning(
                f"Не удалось прочитать {config_path}: {e}. "
                f"Используется конфигурация по умолчанию."
            )
        except ValueError as e:
            logger.warning(
                f"Недопустимый формат конфигурации: {e}. "
                f"Используется конфигурация по умолчанию."
            )
    else:
        logger.debug(
            f"Файл конфигурации {config_path} не найден. "
            f"Используется конфигурация по умолчанию."
        )

    return config


def check_dependencies() -> Dict[str, bool]:
    """
    Проверить, установлены ли зависимости рендеринга.

    Не вызывает исключений для отсутствующих пакетов, возвращает
    словарь состояний.

    Проверяемые зависимости:
        - pillow: Растеризация и PNG
    """
    dependencies: Dict[str, bool] = {}

    try:
        import PIL  # noqa: F401

        dependencies["pillow"] = True
    except ImportError:
        dependencies["pillow"] = False

    return dependencies


# =============================================================================
# ОПРЕДЕЛЕНИЕ ПУБЛИЧНОГО API
# =============================================================================

__all__ = [
    # Метаданные версии
    "__version__",
    "__author__",
    "__description__",
    "__license__",
    "__python_requires__",
    "VERSION_MAJOR",
    "VERSION_MINOR",
    "VERSION_PATCH",
    # Утилиты
    "get_logger",
    "load_config",
    "check_dependencies",
]

# =============================================================================
# ИНИЦИАЛИЗАЦИЯ ПАКЕТА
# =============================================================================

_setup_logging()

_logger = get_logger(__name__)
_logger.debug(f"Code128 Barcode Generator v{__version__} инициализирован")

_missing = [name for name, available in check_dependencies().items() if not available]
if _missing:
    _logger.warning(f"Отсутствуют зависимости: {', '.join(_missing)}")
