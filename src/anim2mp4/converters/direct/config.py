"""Configuration for the direct converter."""

from pydantic import BaseModel, Field


class DirectConfig(BaseModel):
    input_format: str | None = Field("webp_pipe", description="Forced ffmpeg demuxer (None = probe)")
    fallback_filter: str = Field(
        "scale=trunc(iw/2)*2:trunc(ih/2)*2",
        description="Filter used when source dimensions are unknown",
    )
