"""Загрузка изображений с диска и запись результата.

Принципы:
- SRP: класс отвечает только за декодирование и кодирование файлов.
- LSP/ISP: возвращает `ImageData` с предсказуемыми полями; интерфейс узкий и конкретный.
"""
from __future__ import annotations

import logging
from pathlib import Path

from PIL import Image

from image_utility.errors import DecodeError, EncodeError
from image_utility.models.image_model import ImageData

logger = logging.getLogger(__name__)

# Палитровые и однобитные режимы PIL ресайзит только ближайшим соседом.
_DIRECT_MODES = {"1": "L", "PA": "RGBA"}


class ImageService:
    def load_image(self, file_path: str | Path) -> ImageData:
        """Декодирует изображение с диска, формат определяется по содержимому.

        Палитровые изображения разворачиваются в RGB/RGBA, однобитные в L,
        чтобы к ним применялся фильтр ресемплинга из конфигурации.

        Args:
            file_path: Путь до файла изображения.

        Returns:
            `ImageData` с полностью загруженным `PIL.Image.Image`.

        Raises:
            DecodeError: файл не существует, не читается или не распознан как изображение.
        """
        path = Path(file_path)
        try:
            with Image.open(path) as src:
                src.load()
                fmt = src.format
                pil_image = self._to_direct_mode(src)
        except (OSError, ValueError, Image.DecompressionBombError) as exc:
            raise DecodeError(f"{path}: {exc}") from exc

        width, height = pil_image.size
        logger.debug("Decoded %s as %s %dx%d (%s)", path, fmt, width, height, pil_image.mode)
        return ImageData(
            path=path,
            pil_image=pil_image,
            width=width,
            height=height,
            mode=pil_image.mode,
            format=fmt,
        )

    def save_image(self, image: Image.Image, output_path: str | Path) -> Path:
        """Кодирует изображение в формат по расширению пути и записывает файл.

        Raises:
            EncodeError: неизвестное расширение, ошибка кодировщика или ввода-вывода.
        """
        path = Path(output_path)
        try:
            image.save(path)
        except (OSError, ValueError) as exc:
            raise EncodeError(str(exc)) from exc
        logger.debug("Wrote %s", path)
        return path

    def _to_direct_mode(self, image: Image.Image) -> Image.Image:
        if image.mode == "P":
            return image.convert("RGBA" if "transparency" in image.info else "RGB")
        target = _DIRECT_MODES.get(image.mode)
        if target is not None:
            return image.convert(target)
        return image.copy()
