import logging
import sys

from .config import get_config


def setup_logging(level=None):
    """
    Настраивает логгер пакета hash_rng.
    - Формат как в остальных наших утилитах.
    - Вывод в консоль (stdout).
    - Уровень: аргумент или RngConfig.log_level.
    """
    level = (level or get_config().log_level).upper()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s:%(lineno)d | %(message)s",
            datefmt="%H:%M:%S",
        )
    )

    root = logging.getLogger("hash_rng")
    # убираем старые хендлеры, чтобы не было дублей при повторном вызове
    for old in list(root.handlers):
        root.removeHandler(old)
    root.addHandler(handler)
    root.setLevel(level)

    # numba очень болтлив на DEBUG
    logging.getLogger("numba").setLevel(logging.WARNING)
    return root
