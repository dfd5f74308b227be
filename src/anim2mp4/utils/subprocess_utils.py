"""Subprocess runner for the external tools (ffmpeg, ImageMagick)."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from anim2mp4.core.errors import DependencyNotFoundError, ExternalProcessError

logger = logging.getLogger(__name__)


def run_command(
    cmd: list[str],
    stream: bool = False,
    timeout: float | None = None,
    check: bool = True,
) -> subprocess.CompletedProcess:
    """Run an external command once and wait for it.

    With ``stream`` the child inherits the console so its output shows live;
    otherwise stdout and stderr are captured together into ``result.stdout``.
    """
    cmd_str = " ".join(cmd)
    tool = Path(cmd[0]).name
    logger.info(f"Running: {cmd_str}")

    capture = {} if stream else {"stdout": subprocess.PIPE, "stderr": subprocess.STDOUT}
    try:
        result = subprocess.run(
            cmd,
            text=True,
            errors="replace",
            timeout=timeout,
            check=False,
            **capture,
        )
    except FileNotFoundError as err:
        raise DependencyNotFoundError(f"{tool} is not installed or not in PATH") from err
    except subprocess.TimeoutExpired as err:
        output = err.output if isinstance(err.output, str) else ""
        raise ExternalProcessError(tool, None, output) from err

    if result.stdout:
        logger.debug(f"output: {result.stdout[-500:]}")

    if check and result.returncode != 0:
        raise ExternalProcessError(tool, result.returncode, result.stdout or "")
    return result
