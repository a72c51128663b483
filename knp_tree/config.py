# knp_tree/config.py
import copy
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger(__name__)

# Определение базовых путей относительно корня проекта
BASE_DIR = Path(__file__).resolve().parent.parent
CONFIG_PATH = BASE_DIR / "config" / "settings.yaml"

# Разметка вывода KNP -tab
DEFAULT_BREAKING_PATTERN = r"^EOS$"
EOS_MARKER = "EOS"
ERROR_MARKER = ";;"
COMMENT_MARKER = "#"
BUNSETSU_MARKER = "*"
TAG_MARKER = "+"

# Ключ признака с результатом падежного анализа
CASE_ANALYSIS_KEY = "格解析結果"

# Внешние анализаторы
JUMAN_COMMAND = ["juman"]
KNP_COMMAND = ["knp", "-tab"]
PROCESS_TIMEOUT = 60  # секунды на один вызов

DEFAULT_SETTINGS: Dict[str, Any] = {
    "parser": {
        "breaking_pattern": DEFAULT_BREAKING_PATTERN,
        "skip_invalid": False,
    },
    "engine": {
        "juman_command": JUMAN_COMMAND,
        "knp_command": KNP_COMMAND,
        "timeout": PROCESS_TIMEOUT,
    },
    "logging": {
        "level": "INFO",
    },
}


def load_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Читает YAML-настройки и накладывает их поверх DEFAULT_SETTINGS.
    Отсутствующий файл не ошибка: возвращаются значения по умолчанию.
    """
    path = Path(path) if path else CONFIG_PATH
    settings = copy.deepcopy(DEFAULT_SETTINGS)

    if not path.exists():
        logger.info(f"Config {path} not found. Using defaults.")
        return settings

    with open(path, "r", encoding="utf-8") as f:
        loaded = yaml.safe_load(f) or {}

    for section, values in loaded.items():
        if isinstance(values, dict) and isinstance(settings.get(section), dict):
            settings[section].update(values)
        else:
            settings[section] = values

    return settings
