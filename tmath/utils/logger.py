# tmath/utils/logger.py
# ---------------------------------------------------------------
# Минимальный логгер библиотеки + отчёт о промахах индекса.
# ---------------------------------------------------------------

import logging


def init_logger():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    return logging.getLogger("TMath")

logger = init_logger()


def report_index_miss(owner: str, index, action: str = "read as 0.0"):
    """Сообщить в лог (DEBUG) об обращении за пределы вектора/матрицы."""
    # при выключенном DEBUG конфиг не читается: чтение индекса без I/O
    if not logger.isEnabledFor(logging.DEBUG):
        return

    # импорт внутри – config сам пользуется logger'ом
    from tmath.utils.config import Config

    if Config()["log_index_misses"]:
        logger.debug(f"[{owner}] index {index!r} out of range - {action}")
