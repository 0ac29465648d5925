"""Quantization and encoding configuration models."""

import logging
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from rastercmd.models.language import PrinterLanguage

logger = logging.getLogger(__name__)


class QuantizationMethod(StrEnum):
    """Ways of deciding whether a pixel prints as a black dot."""

    CHECK_BLACK = "check_black"  # only opaque pure black
    CHECK_LUMA = "check_luma"  # luma under a threshold
    CHECK_ALPHA = "check_alpha"  # opacity over a threshold


class QuantizationConfig(BaseModel):
    """Monochrome conversion settings.

    Thresholds run from 0 to 255. For CHECK_LUMA the luma threshold also
    gates opacity: pixels more transparent than it count as white.
    """

    model_config = ConfigDict(frozen=True)

    method: QuantizationMethod = QuantizationMethod.CHECK_LUMA
    luma_threshold: int = Field(default=127, ge=0, le=255)
    alpha_threshold: int = Field(default=127, ge=0, le=255)

    @field_validator("method", mode="before")
    @classmethod
    def _fallback_method(cls, value: Any) -> Any:
        """Unknown methods fall back to CHECK_BLACK."""
        if isinstance(value, QuantizationMethod):
            return value
        try:
            return QuantizationMethod(str(value).strip().lower())
        except ValueError:
            logger.warning(f"Unknown quantization method {value!r}, falling back to {QuantizationMethod.CHECK_BLACK}")
            return QuantizationMethod.CHECK_BLACK


class EncodeParameters(BaseModel):
    """Placement and text settings for the generated commands."""

    model_config = ConfigDict(frozen=True)

    x: int = 0  # EPL2, CPCL only
    y: int = 0  # EPL2, CPCL only
    # 32 = single density, 33 = double density on most ESC/P printers
    dot_density: int = Field(default=32, ge=0, le=255)
    charset: str = "ascii"


class ImageCommandConfig(BaseModel):
    """Everything needed to turn one image into printer commands."""

    model_config = ConfigDict(frozen=True)

    # Names with no matching language are kept as given and rejected at encode time
    language: PrinterLanguage | str = PrinterLanguage.ZPL
    quantization: QuantizationConfig = QuantizationConfig()
    params: EncodeParameters = EncodeParameters()

    @field_validator("language", mode="before")
    @classmethod
    def _parse_language(cls, value: Any) -> Any:
        if isinstance(value, str):
            try:
                return PrinterLanguage.parse(value)
            except ValueError:
                return value
        return value
