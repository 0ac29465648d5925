"""Pydantic models for rastercmd."""

from rastercmd.models.config import (
    EncodeParameters,
    ImageCommandConfig,
    QuantizationConfig,
    QuantizationMethod,
)
from rastercmd.models.language import PrinterLanguage

__all__ = [
    "EncodeParameters",
    "ImageCommandConfig",
    "PrinterLanguage",
    "QuantizationConfig",
    "QuantizationMethod",
]
