"""Модели конвейера: декодированное изображение, снимок метаданных файла и разобранные аргументы.

`ImageData` переходит от загрузчика к ресайзу, `MetadataSnapshot` строится
заново для входного и выходного файла, `CliArguments` существует только
после успешного разбора командной строки.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional

from PIL import Image


@dataclass(frozen=True)
class ImageData:
    """Декодированное изображение и его базовые свойства.

    Fields:
        path: Путь к исходному файлу.
        pil_image: Полностью загруженное изображение PIL (файл уже закрыт).
        width: Ширина, px.
        height: Высота, px.
        mode: Режим PIL, например "RGB".
        format: Формат, определённый по содержимому ("PNG", "JPEG", ...), если известен.
    """
    path: Path
    pil_image: Image.Image
    width: int
    height: int
    mode: str
    format: Optional[str]


@dataclass(frozen=True)
class MetadataSnapshot:
    """Снимок метаданных файла на момент чтения.

    Fields:
        path: Путь в том виде, в каком его передал пользователь.
        file_name: Имя файла без каталога.
        modified: Время последнего изменения (локальная зона).
        width: Ширина, px.
        height: Высота, px.
        color_type: Тип цвета с глубиной канала, например "Rgba8".
        size_bytes: Размер файла на диске.
    """
    path: str
    file_name: str
    modified: datetime
    width: int
    height: int
    color_type: str
    size_bytes: int


@dataclass(frozen=True)
class CliArguments:
    input_path: str
    width: int
    height: int
    output_path: str
