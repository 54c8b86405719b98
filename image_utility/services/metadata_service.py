"""Снимок и печать метаданных файла изображения.

Время изменения читается «мягко»: если ФС его не отдаёт, подставляется
начало эпохи. Размер файла обязателен, ошибка его чтения прерывает запуск.
"""
from __future__ import annotations

import logging
import os
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import List

from image_utility.config import TIMESTAMP_FORMAT
from image_utility.errors import MetadataError
from image_utility.models.image_model import ImageData, MetadataSnapshot

logger = logging.getLogger(__name__)

_EPOCH = datetime.fromtimestamp(0, tz=timezone.utc)

# Режим PIL -> раскладка каналов и глубина канала в битах
COLOR_TYPES = {
    "L": "L8",
    "LA": "La8",
    "La": "La8",
    "RGB": "Rgb8",
    "RGBA": "Rgba8",
    "RGBa": "Rgba8",
    "RGBX": "Rgb8",
    "I;16": "L16",
    "I;16L": "L16",
    "I;16B": "L16",
    "I;16N": "L16",
    "I": "L32",
    "F": "L32F",
    "CMYK": "Cmyk8",
    "YCbCr": "YCbCr8",
    "LAB": "Lab8",
    "HSV": "Hsv8",
}


def color_type(mode: str) -> str:
    return COLOR_TYPES.get(mode, mode)


def format_timestamp(moment: datetime) -> str:
    """Локальное время вида `2024-01-02 03:04:05.120 +01:00`.

    Дробная часть печатается только если она есть: 3 цифры для целых
    миллисекунд, иначе 6. Смещение зоны всегда в форме `+HH:MM`.
    """
    text = moment.strftime(TIMESTAMP_FORMAT)
    if moment.microsecond:
        fraction = f"{moment.microsecond:06d}"
        text += "." + (fraction[:3] if moment.microsecond % 1000 == 0 else fraction)
    offset = moment.utcoffset() or timedelta(0)
    sign = "-" if offset < timedelta(0) else "+"
    minutes = abs(int(offset.total_seconds())) // 60
    return f"{text} {sign}{minutes // 60:02d}:{minutes % 60:02d}"


class MetadataService:
    def take_snapshot(self, image_path: str, image: ImageData) -> MetadataSnapshot:
        """Собирает метаданные файла и декодированного изображения.

        Raises:
            MetadataError: если не удалось узнать размер файла.
        """
        return MetadataSnapshot(
            path=image_path,
            file_name=Path(image_path).name,
            modified=self._modified_time(image_path),
            width=image.width,
            height=image.height,
            color_type=color_type(image.mode),
            size_bytes=self._file_size(image_path),
        )

    def format_snapshot(self, snapshot: MetadataSnapshot) -> List[str]:
        return [
            "Metadata of the image:",
            f"Image Path: {snapshot.path}",
            f"File Name: {snapshot.file_name}",
            f"Last created: {format_timestamp(snapshot.modified)}",
            f"Dimensions: {snapshot.width}x{snapshot.height}",
            f"Color Type: {snapshot.color_type}",
            f"Size of the Image: {snapshot.size_bytes} bytes",
            "",
        ]

    def print_metadata(self, image_path: str, image: ImageData) -> None:
        snapshot = self.take_snapshot(image_path, image)
        for line in self.format_snapshot(snapshot):
            print(line)

    # ---- Helpers ----
    def _modified_time(self, image_path: str) -> datetime:
        try:
            mtime = os.path.getmtime(image_path)
        except OSError as exc:
            logger.debug("No modification time for %s (%s), using epoch", image_path, exc)
            return _EPOCH.astimezone()
        return datetime.fromtimestamp(mtime).astimezone()

    def _file_size(self, image_path: str) -> int:
        try:
            return os.path.getsize(image_path)
        except OSError as exc:
            raise MetadataError(f"{image_path}: {exc}") from exc
