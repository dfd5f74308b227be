"""Extraction conversion: split into PNG frames, then reassemble into MP4."""

from __future__ import annotations

import logging
import re
import tempfile
from pathlib import Path
from typing import ClassVar

from anim2mp4.core.contracts import ConversionMethod, ConversionOutput, ConversionRequest
from anim2mp4.core.converter_base import BaseConverter
from anim2mp4.core.errors import (
    DependencyNotFoundError,
    DimensionProbeError,
    ExternalProcessError,
    FrameExtractionError,
    NoFramesExtractedError,
    VideoCreationError,
)
from anim2mp4.utils.imaging import lanczos_scale_filter, probe_dimensions
from anim2mp4.utils.subprocess_utils import run_command
from .config import ExtractConfig

logger = logging.getLogger(__name__)

_NUMBER_SUFFIX = re.compile(r"(\d+)$")


def frame_index(path: Path) -> int:
    """Numeric suffix of a frame filename (frame_012.png -> 12)."""
    match = _NUMBER_SUFFIX.search(path.stem)
    return int(match.group(1)) if match else -1


class ExtractConverter(BaseConverter[ExtractConfig]):
    method: ClassVar = ConversionMethod.EXTRACT
    config_type: ClassVar = ExtractConfig

    def list_frames(self, scratch_dir: Path) -> list[Path]:
        """Frames in temporal order (by numeric suffix, not lexically)."""
        prefix, _, _ = self.config.frame_pattern.partition("%")
        suffix = Path(self.config.frame_pattern).suffix
        frames = [p for p in scratch_dir.glob(f"{prefix}*{suffix}") if p.is_file()]
        return sorted(frames, key=frame_index)

    def extract_command(self, request: ConversionRequest, pattern: Path) -> list[str]:
        return self.transcoder_cmd(
            "-i", str(request.input_path),
            *self.config.sync_args,
            str(pattern),
        )

    def coalesce_command(self, request: ConversionRequest, pattern: Path) -> list[str]:
        return [self.tools.image_tool, str(request.input_path), "-coalesce", str(pattern)]

    def assemble_command(self, request: ConversionRequest, pattern: Path, vf: str | None) -> list[str]:
        args = [
            "-framerate", str(request.fps),
            "-i", str(pattern),
            "-c:v", self.encode.codec,
            "-pix_fmt", self.encode.pixel_format,
            "-b:v", request.bitrate,
        ]
        if vf:
            args += ["-vf", vf]
        args += self.encode.output_args()
        args.append(str(request.output_path))
        return self.transcoder_cmd(*args)

    def extract_frames(self, request: ConversionRequest, scratch_dir: Path) -> list[Path]:
        """Split the input into numbered frames: ffmpeg first, ImageMagick coalesce second."""
        pattern = scratch_dir / self.config.frame_pattern
        timeout = self.tools.process_timeout

        try:
            run_command(self.extract_command(request, pattern), stream=request.verbose, timeout=timeout)
            frames = self.list_frames(scratch_dir)
            if not frames:
                logger.info("ffmpeg extraction produced no frames, trying ImageMagick...")
        except ExternalProcessError as err:
            logger.info(f"ffmpeg extraction failed ({err}), trying ImageMagick...")
            frames = []

        if not frames:
            try:
                run_command(self.coalesce_command(request, pattern), stream=request.verbose, timeout=timeout)
            except (ExternalProcessError, DependencyNotFoundError) as err:
                raise FrameExtractionError(f"failed to extract frames: {err}") from err
            frames = self.list_frames(scratch_dir)

        if not frames:
            raise NoFramesExtractedError(f"no frames extracted from {request.input_path}")
        logger.info(f"Extracted {len(frames)} frames")
        return frames

    def run(self, request: ConversionRequest) -> ConversionOutput:
        with tempfile.TemporaryDirectory(prefix=self.config.scratch_prefix) as tmp:
            scratch_dir = Path(tmp)
            logger.info(f"Extracting frames to: {scratch_dir}")
            frames = self.extract_frames(request, scratch_dir)

            try:
                dims = probe_dimensions(frames[0])
            except DimensionProbeError as err:
                raise DimensionProbeError(f"failed to get frame dimensions: {err}") from err

            logger.info(f"Frame dimensions: {dims}")
            scaled_to = None
            if not dims.is_even:
                scaled_to = dims.to_even()
                logger.info(f"Adjusted dimensions: {scaled_to} (made even for h264 compatibility)")

            vf = lanczos_scale_filter(scaled_to) if scaled_to else None
            cmd = self.assemble_command(request, scratch_dir / self.config.frame_pattern, vf)
            try:
                run_command(cmd, stream=request.verbose, timeout=self.tools.process_timeout)
            except ExternalProcessError as err:
                detail = f"\nOutput: {err.output}" if err.output else ""
                raise VideoCreationError(f"video creation failed: {err}{detail}") from err

        return ConversionOutput(
            output_path=request.output_path,
            method=self.method,
            source_dimensions=dims,
            scaled_to=scaled_to,
            frame_count=len(frames),
        )
