"""Pre-flight check: locate the external tools before converting."""

from __future__ import annotations

import logging
import shutil

from pydantic import BaseModel, Field

from .settings import ToolsConfig

logger = logging.getLogger(__name__)


class PreflightReport(BaseModel):
    """Resolved tool paths. The transcoder is required, the image tool is optional."""

    transcoder: str
    image_tool: str
    transcoder_path: str | None = None
    image_tool_path: str | None = None
    warnings: list[str] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.transcoder_path is not None

    @property
    def error(self) -> str | None:
        if self.ok:
            return None
        return f"{self.transcoder} is not installed or not in PATH"


def check_dependencies(tools: ToolsConfig | None = None) -> PreflightReport:
    """Look up both tools on PATH and report what was found."""
    tools = tools or ToolsConfig()
    report = PreflightReport(
        transcoder=tools.transcoder,
        image_tool=tools.image_tool,
        transcoder_path=shutil.which(tools.transcoder),
        image_tool_path=shutil.which(tools.image_tool),
    )
    if report.image_tool_path is None:
        report.warnings.append(
            f"ImageMagick ({tools.image_tool}) not found. "
            "Some animated files might not convert properly."
        )
    for warning in report.warnings:
        logger.warning(warning)
    return report
