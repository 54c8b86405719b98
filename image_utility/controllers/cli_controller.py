"""Контроллер командной строки: разбор аргументов и оркестрация сервисов.

SOLID:
- SRP: класс связывает шаги конвейера, не содержит логики обработки изображений.
- DIP: сервисы передаются полями dataclass и подменяются в тестах.
Clean Code:
- Каждый шаг либо передаёт данные дальше, либо завершает запуск с кодом выхода.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

from image_utility.config import MAX_DIMENSION, USAGE, ExitCode
from image_utility.errors import (
    DecodeError,
    EncodeError,
    ImageUtilityError,
    InvalidArgumentError,
    UsageError,
)
from image_utility.models.image_model import CliArguments, ImageData
from image_utility.services.image_service import ImageService
from image_utility.services.metadata_service import MetadataService
from image_utility.services.process_service import ProcessService

logger = logging.getLogger(__name__)


def parse_dimension(text: str) -> int:
    """Разбирает беззнаковое 32-битное целое: только ASCII-цифры, допускается ведущий `+`.

    Raises:
        InvalidArgumentError: с причиной в духе разборщика целых чисел.
    """
    if not text:
        raise InvalidArgumentError("cannot parse integer from empty string")
    digits = text[1:] if text.startswith("+") else text
    if not digits or not (digits.isascii() and digits.isdigit()):
        raise InvalidArgumentError("invalid digit found in string")
    value = int(digits)
    if value > MAX_DIMENSION:
        raise InvalidArgumentError("number too large to fit in target type")
    return value


def parse_arguments(argv: Sequence[str]) -> CliArguments:
    """Разбирает `<input> <width> <height> <output>` (argv без имени программы)."""
    if len(argv) != 4:
        raise UsageError(USAGE)
    input_path, raw_width, raw_height, output_path = argv
    return CliArguments(
        input_path=input_path,
        width=parse_dimension(raw_width),
        height=parse_dimension(raw_height),
        output_path=output_path,
    )


@dataclass
class CliController:
    """Однопроходный конвейер: разбор -> загрузка -> метаданные -> ресайз -> запись -> метаданные."""
    image_service: ImageService = field(default_factory=ImageService)
    process_service: ProcessService = field(default_factory=ProcessService)
    metadata_service: MetadataService = field(default_factory=MetadataService)

    def run(self, argv: Sequence[str]) -> ExitCode:
        try:
            args = parse_arguments(argv)
        except UsageError as exc:
            print(exc)
            return exc.exit_code
        except InvalidArgumentError as exc:
            print(f"Invalid compressed size provided: {exc}")
            return exc.exit_code

        try:
            source = self._load(args.input_path)
            return self._compress_and_save(source, args)
        except ImageUtilityError as exc:
            # DecodeError и MetadataError: фатально, конвейер не продолжается
            logger.debug("Pipeline aborted", exc_info=True)
            print(self._fatal_message(exc))
            return exc.exit_code

    # ---- Steps ----
    def _load(self, input_path: str) -> ImageData:
        image = self.image_service.load_image(input_path)
        print("Image loaded successfully")
        self.metadata_service.print_metadata(input_path, image)
        return image

    def _compress_and_save(self, source: ImageData, args: CliArguments) -> ExitCode:
        try:
            try:
                resized = self.process_service.resize_exact(source.pil_image, args.width, args.height)
            except (ValueError, OverflowError, MemoryError) as exc:
                # PIL берёт размеры как signed int32, огромные размеры не влезут в память
                raise EncodeError(str(exc) or type(exc).__name__) from exc
            self.image_service.save_image(resized, args.output_path)
            try:
                written = self.image_service.load_image(args.output_path)
            except DecodeError as exc:
                raise EncodeError(str(exc)) from exc
        except EncodeError as exc:
            logger.debug("Compress step failed", exc_info=True)
            print(f"Failed to compress and save image: {exc}")
            return exc.exit_code

        self.metadata_service.print_metadata(args.output_path, written)
        print(f"Image saved at: {args.output_path}")
        logger.info("Resized %s -> %s", args.input_path, args.output_path)
        return ExitCode.OK

    def _fatal_message(self, exc: ImageUtilityError) -> str:
        if isinstance(exc, DecodeError):
            return f"Failed to open image: {exc}"
        return f"Failed to read file metadata: {exc}"
