# tmath/utils/__init__.py
"""
Пакет утилит.

Экспортируем:
    * logger – готовый объект logging.Logger (с level INFO)
    * Config – JSON‑конфигурация библиотеки
"""

from .logger import logger, report_index_miss
from .config import Config

__all__ = ["logger", "report_index_miss", "Config"]
