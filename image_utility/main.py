"""Точка входа в утилиту."""
from __future__ import annotations

import logging
import os
import sys
from typing import Optional, Sequence

from image_utility.config import DEFAULT_LOG_LEVEL, LOG_FORMAT, LOG_LEVEL_ENV
from image_utility.controllers.cli_controller import CliController


def setup_logging(level_name: Optional[str] = None) -> None:
    """Настраивает корневой логгер: один обработчик на stderr, stdout остаётся для вывода утилиты."""
    level_name = (level_name or DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.getLevelName(DEFAULT_LOG_LEVEL)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logging.basicConfig(level=level, handlers=[handler], force=True)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Разбирает аргументы и запускает конвейер; возвращает код выхода."""
    setup_logging(os.environ.get(LOG_LEVEL_ENV))
    if argv is None:
        argv = sys.argv[1:]
    return int(CliController().run(argv))


if __name__ == "__main__":
    sys.exit(main())
