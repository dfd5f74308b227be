"""Error hierarchy for conversion failures."""

from __future__ import annotations


class ConversionError(RuntimeError):
    """Base class for every failure a conversion can report."""

    @property
    def output(self) -> str:
        """Captured output of the external process behind this error, if any."""
        cause = self.__cause__
        if isinstance(cause, ConversionError):
            return cause.output
        return ""


class InputNotFoundError(ConversionError):
    """The input animated image does not exist."""


class DependencyNotFoundError(ConversionError):
    """An external tool could not be located on PATH."""


class ExternalProcessError(ConversionError):
    """An external tool exited non-zero (or timed out)."""

    def __init__(self, tool: str, returncode: int | None, output: str = ""):
        self.tool = tool
        self.returncode = returncode
        self._output = output
        if returncode is None:
            msg = f"{tool} timed out"
        else:
            msg = f"{tool} exited with status {returncode}"
        super().__init__(msg)

    @property
    def output(self) -> str:
        return self._output


class TranscodeFailedError(ConversionError):
    """Direct conversion process failed."""


class FrameExtractionError(ConversionError):
    """Neither extraction method could decompose the input."""


class VideoCreationError(ConversionError):
    """Reassembling extracted frames into a video failed."""


class NoFramesExtractedError(ConversionError):
    """Extraction finished but produced no frame files."""


class DimensionProbeError(ConversionError):
    """Image header could not be read for width/height."""
