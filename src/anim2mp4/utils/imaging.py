"""Image header probing and scale filter helpers."""

from __future__ import annotations

from pathlib import Path

from PIL import Image

from anim2mp4.core.contracts import Dimensions
from anim2mp4.core.errors import DimensionProbeError


def probe_dimensions(path: Path) -> Dimensions:
    """Read width/height from the image header without decoding pixels."""
    try:
        with Image.open(path) as img:
            width, height = img.size
    except (OSError, ValueError, Image.DecompressionBombError) as err:
        raise DimensionProbeError(f"cannot read dimensions of {path}: {err}") from err
    return Dimensions(width=width, height=height)


def lanczos_scale_filter(dims: Dimensions) -> str:
    """ffmpeg filter resampling to exactly ``dims``."""
    return f"scale={dims.width}:{dims.height}:flags=lanczos"
