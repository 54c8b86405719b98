from __future__ import annotations

import logging

from PIL import Image

from image_utility.config import RESAMPLE_FILTER

logger = logging.getLogger(__name__)


class ProcessService:
    def __init__(self, resample: Image.Resampling = RESAMPLE_FILTER) -> None:
        self.resample = resample

    def resize_exact(self, image: Image.Image, width: int, height: int) -> Image.Image:
        """
        Ресайз ровно до width x height без сохранения пропорций.
        Исходное изображение не меняется.
        Нулевые размеры передаются в PIL как есть (PIL отвечает ValueError).
        """
        logger.debug(
            "Resizing %dx%d -> %dx%d (%s)",
            image.width, image.height, width, height, self.resample.name,
        )
        return image.resize((width, height), resample=self.resample)
