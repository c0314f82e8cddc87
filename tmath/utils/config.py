"""
Простой загрузчик/сохранитель конфигурации в формате JSON.
Если файл не найден – используются настройки по‑умолчанию.
"""

import copy
import json
import os
from pathlib import Path
from tmath.utils.logger import logger

DEFAULT_CONFIG = {
    "log_index_misses": True,
}

ENV_VAR = "TMATH_CONFIG"
DEFAULT_PATH = "tmath.json"


class Config:
    """Singleton‑подобный объект конфигурации."""
    _instance = None

    def __new__(cls, path: str = None):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance.path = Path(path or os.environ.get(ENV_VAR, DEFAULT_PATH))
            cls._instance._load()
        return cls._instance

    @classmethod
    def reset(cls):
        """Сбросить кэшированный экземпляр (следующий вызов перечитает файл)."""
        cls._instance = None

    def _load(self):
        if self.path.is_file():
            try:
                with self.path.open("r", encoding="utf-8") as f:
                    data = json.load(f)
                if not isinstance(data, dict):
                    raise ValueError("top-level JSON value must be an object")
                self.data = data
                logger.info(f"[Config] Loaded configuration from {self.path}.")
            except (OSError, ValueError) as exc:
                logger.error(f"[Config] Failed to read config: {exc}")
                self.data = copy.deepcopy(DEFAULT_CONFIG)
        else:
            logger.info(f"[Config] No config file at {self.path} – using defaults.")
            self.data = copy.deepcopy(DEFAULT_CONFIG)

    def save(self):
        try:
            with self.path.open("w", encoding="utf-8") as f:
                json.dump(self.data, f, indent=4)
            logger.info("[Config] Configuration saved.")
        except OSError as exc:
            logger.error(f"[Config] Unable to save config: {exc}")

    def __getitem__(self, key):
        return self.data.get(key, DEFAULT_CONFIG.get(key))

    def __setitem__(self, key, value):
        self.data[key] = value
        self.save()

    def get(self, key, default=None):
        return self.data.get(key, default)
