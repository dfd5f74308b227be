"""Direct conversion: one ffmpeg pass from animated image to MP4."""

from __future__ import annotations

import logging
from typing import ClassVar

from anim2mp4.core.contracts import ConversionMethod, ConversionOutput, ConversionRequest, Dimensions
from anim2mp4.core.converter_base import BaseConverter
from anim2mp4.core.errors import DimensionProbeError, ExternalProcessError, TranscodeFailedError
from anim2mp4.utils.imaging import lanczos_scale_filter, probe_dimensions
from anim2mp4.utils.subprocess_utils import run_command
from .config import DirectConfig

logger = logging.getLogger(__name__)


class DirectConverter(BaseConverter[DirectConfig]):
    method: ClassVar = ConversionMethod.DIRECT
    config_type: ClassVar = DirectConfig

    def probe(self, request: ConversionRequest) -> Dimensions | None:
        """Best-effort header probe; None when the size is unknown."""
        try:
            return probe_dimensions(request.input_path)
        except DimensionProbeError as err:
            logger.info(f"Dimensions unknown, using generic even filter: {err}")
            return None

    def scale_filter(self, dims: Dimensions | None) -> str | None:
        """Filter that makes the encoded frame size even, or None if already even."""
        if dims is None:
            return self.config.fallback_filter
        if dims.is_even:
            return None
        return lanczos_scale_filter(dims.to_even())

    def build_command(self, request: ConversionRequest, dims: Dimensions | None) -> list[str]:
        args = []
        if self.config.input_format:
            args += ["-f", self.config.input_format]
        args += [
            "-i", str(request.input_path),
            "-c:v", self.encode.codec,
            "-pix_fmt", self.encode.pixel_format,
            "-r", str(request.fps),
            "-b:v", request.bitrate,
        ]
        vf = self.scale_filter(dims)
        if vf:
            args += ["-vf", vf]
        args += self.encode.output_args()
        args.append(str(request.output_path))
        return self.transcoder_cmd(*args)

    def run(self, request: ConversionRequest) -> ConversionOutput:
        dims = self.probe(request)
        scaled_to = None
        if dims is not None:
            logger.info(f"Original dimensions: {dims}")
            if not dims.is_even:
                scaled_to = dims.to_even()
                logger.info(f"Adjusted dimensions: {scaled_to} (made even for h264 compatibility)")

        cmd = self.build_command(request, dims)
        try:
            run_command(cmd, stream=request.verbose, timeout=self.tools.process_timeout)
        except ExternalProcessError as err:
            detail = f"\nOutput: {err.output}" if err.output else ""
            raise TranscodeFailedError(f"transcode failed: {err}{detail}") from err

        return ConversionOutput(
            output_path=request.output_path,
            method=self.method,
            source_dimensions=dims,
            scaled_to=scaled_to,
        )
