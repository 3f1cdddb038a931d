"""Domain layer: errors, constants and schemas."""

from .errors import (
    ConfigurationError,
    EmptyInputError,
    ErrorCodes,
    MorseError,
    NoEncodingError,
    UploadError,
)
from .schemas import ConversionResult, Direction

__all__ = [
    "MorseError",
    "NoEncodingError",
    "EmptyInputError",
    "ConfigurationError",
    "UploadError",
    "ErrorCodes",
    "ConversionResult",
    "Direction",
]
