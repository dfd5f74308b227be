"""Configuration for the frame extraction converter."""

from pydantic import BaseModel, Field


class ExtractConfig(BaseModel):
    frame_pattern: str = Field("frame_%03d.png", description="printf-style frame filename")
    scratch_prefix: str = Field("anim2mp4_", description="Scratch directory name prefix")
    sync_args: list[str] = Field(
        default_factory=lambda: ["-vsync", "0"],
        description="ffmpeg flags keeping one output image per source frame",
    )
