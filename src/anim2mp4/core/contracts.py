"""Common models shared by the converters and the strategy selector."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from .errors import ConversionError

VIDEO_SUFFIX = ".mp4"


class ConversionMethod(str, Enum):
    """Strategy selection for a conversion."""

    AUTO = "auto"
    DIRECT = "direct"
    EXTRACT = "extract"


def make_even(n: int) -> int:
    """Round an odd value up to the next even integer."""
    if n % 2 != 0:
        return n + 1
    return n


def default_output_path(input_path: Path) -> Path:
    """Replace the input's extension with the video extension."""
    return Path(input_path).with_suffix(VIDEO_SUFFIX)


class Dimensions(BaseModel):
    """Width/height pair read from an image header."""

    model_config = ConfigDict(frozen=True)

    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)

    @property
    def is_even(self) -> bool:
        return self.width % 2 == 0 and self.height % 2 == 0

    def to_even(self) -> Dimensions:
        """Return the dimensions with each odd side rounded up by one."""
        return Dimensions(width=make_even(self.width), height=make_even(self.height))

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"


class ConversionRequest(BaseModel):
    """One conversion call: immutable once constructed."""

    model_config = ConfigDict(frozen=True)

    input_path: Path = Field(..., description="Input animated image")
    output_path: Path = Field(..., description="Output video path (overwritten)")
    fps: int = Field(30, gt=0, description="Output frame rate")
    bitrate: str = Field("2M", min_length=1, description="Video bitrate, e.g. 2M")
    verbose: bool = Field(False, description="Stream external tool output live")
    method: ConversionMethod = Field(ConversionMethod.AUTO, description="auto|direct|extract")

    @classmethod
    def for_input(cls, input_path: Path, output_path: Path | None = None, **kwargs) -> ConversionRequest:
        """Build a request, defaulting the output next to the input."""
        input_path = Path(input_path)
        if output_path is None:
            output_path = default_output_path(input_path)
        return cls(input_path=input_path, output_path=Path(output_path), **kwargs)


class ConversionOutput(BaseModel):
    """Result of a successful converter run."""

    output_path: Path
    method: ConversionMethod
    elapsed_seconds: float = 0.0
    source_dimensions: Dimensions | None = Field(None, description="Probed dimensions, if known")
    scaled_to: Dimensions | None = Field(None, description="Set when a correction filter was applied")
    frame_count: int | None = Field(None, description="Frames extracted (extraction path only)")


@dataclass(frozen=True)
class ConversionOutcome:
    """Tagged result of one converter attempt: success or failure, never both."""

    method: ConversionMethod
    output: ConversionOutput | None = None
    error: ConversionError | None = None

    @property
    def succeeded(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class StrategyOutcome:
    """Final result of the strategy selector.

    ``failures`` lists every failed attempt in the order it ran.
    """

    request: ConversionRequest
    output: ConversionOutput | None = None
    failures: list[ConversionOutcome] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return self.output is not None

    @property
    def error(self) -> ConversionError | None:
        """The error to surface: the last failure, or None on success."""
        if self.succeeded or not self.failures:
            return None
        return self.failures[-1].error
