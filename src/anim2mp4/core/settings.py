"""Settings loader: reads the optional YAML file into Pydantic models."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field, field_validator

from anim2mp4.converters.direct.config import DirectConfig
from anim2mp4.converters.extract.config import ExtractConfig

logger = logging.getLogger(__name__)


class ToolsConfig(BaseModel):
    """External executables, looked up on PATH."""

    transcoder: str = Field("ffmpeg", description="Video transcoder executable")
    image_tool: str = Field("convert", description="ImageMagick executable (fallback extractor)")
    process_timeout: float | None = Field(None, gt=0, description="Seconds per process (None = wait)")


class EncodeConfig(BaseModel):
    """Encoder parameters shared by both conversion paths."""

    fps: int = Field(30, gt=0, description="Default output frame rate")
    bitrate: str = Field("2M", description="Default video bitrate")
    codec: str = Field("libx264", description="Video codec")
    pixel_format: str = Field("yuv420p", description="Output pixel format")
    preset: str = Field("medium", description="Encoder preset")
    movflags: str = Field("+faststart", description="MP4 muxer flags")

    def output_args(self) -> list[str]:
        """Trailing encoder flags, placed after any filter."""
        return ["-preset", self.preset, "-movflags", self.movflags, "-y"]


class AppSettings(BaseModel):
    """Top-level settings loaded from a YAML file."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    tools: ToolsConfig = Field(default_factory=ToolsConfig)
    encode: EncodeConfig = Field(default_factory=EncodeConfig)
    direct: DirectConfig = Field(default_factory=DirectConfig)
    extract: ExtractConfig = Field(default_factory=ExtractConfig)

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value):
        return value.upper() if isinstance(value, str) else value


def load_settings(config_path: Path | None = None) -> AppSettings:
    """Load and validate the settings file; defaults when no path is given."""
    if config_path is None:
        return AppSettings()
    with open(config_path, encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    logger.info(f"Loaded settings from {config_path}")
    return AppSettings.model_validate(raw)
