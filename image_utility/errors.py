"""Иерархия ошибок утилиты.

Каждый класс знает свой код выхода процесса, контроллер только печатает
сообщение и возвращает `exit_code`.
"""
from __future__ import annotations

from image_utility.config import ExitCode


class ImageUtilityError(Exception):
    """Базовая ошибка утилиты."""

    exit_code: ExitCode = ExitCode.FAILURE


class UsageError(ImageUtilityError):
    """Неверное количество аргументов командной строки."""

    exit_code = ExitCode.USAGE


class InvalidArgumentError(ImageUtilityError):
    """Ширина или высота не разбирается как беззнаковое целое."""

    exit_code = ExitCode.INVALID_ARGUMENT


class DecodeError(ImageUtilityError):
    """Входной файл не открывается или не декодируется."""

    exit_code = ExitCode.DECODE_FAILED


class MetadataError(ImageUtilityError):
    """Не удалось получить размер файла на диске."""

    exit_code = ExitCode.METADATA_FAILED


class EncodeError(ImageUtilityError):
    """Ресайз, кодирование или запись результата завершились ошибкой."""

    exit_code = ExitCode.ENCODE_FAILED
