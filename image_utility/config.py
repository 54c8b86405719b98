"""Константы утилиты: фильтр ресемплинга, тексты, коды выхода, логирование."""
from __future__ import annotations

from enum import IntEnum

from PIL import Image

# --- Resize ---
# Lanczos (a=3): максимальное качество ценой скорости.
RESAMPLE_FILTER = Image.Resampling.LANCZOS
MAX_DIMENSION = 2**32 - 1

# --- Console ---
USAGE = "Usage: image_utility <input_image> <img_width> <img_height> <output_path>"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

# --- Logging ---
LOG_FORMAT = "%(levelname)s: %(message)s"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVEL_ENV = "IMAGE_UTILITY_LOG_LEVEL"


class ExitCode(IntEnum):
    OK = 0
    FAILURE = 1
    USAGE = 2
    INVALID_ARGUMENT = 3
    DECODE_FAILED = 4
    METADATA_FAILED = 5
    ENCODE_FAILED = 6
