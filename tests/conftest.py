"""Shared pytest fixtures for anim2mp4 tests."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Callable

import pytest
from PIL import Image

from anim2mp4.core.errors import ExternalProcessError

Handler = Callable[[list[str]], subprocess.CompletedProcess]


def write_png(path: Path, width: int, height: int) -> Path:
    """Write a solid-color PNG of the given size."""
    path.parent.mkdir(parents=True, exist_ok=True)
    Image.new("RGB", (width, height), (200, 30, 30)).save(path, format="PNG")
    return path


def classify(cmd: list[str]) -> str:
    """Name the pipeline stage a recorded command belongs to."""
    if cmd[0] == "convert":
        return "coalesce"
    if "-framerate" in cmd:
        return "assemble"
    if "-vsync" in cmd:
        return "extract"
    return "direct"


def succeed(cmd: list[str]) -> subprocess.CompletedProcess:
    return subprocess.CompletedProcess(cmd, 0, "", None)


def fail(output: str = "Invalid data found when processing input") -> Handler:
    def _handler(cmd: list[str]) -> subprocess.CompletedProcess:
        raise ExternalProcessError(Path(cmd[0]).name, 1, output)

    return _handler


def write_frames(count: int, width: int = 64, height: int = 48, start: int = 1) -> Handler:
    """Handler that fills the frame pattern (last argument) with PNGs."""

    def _handler(cmd: list[str]) -> subprocess.CompletedProcess:
        pattern = cmd[-1]
        for i in range(start, start + count):
            write_png(Path(pattern % i), width, height)
        return succeed(cmd)

    return _handler


def write_output(cmd: list[str]) -> subprocess.CompletedProcess:
    """Handler that touches the output file (last argument)."""
    Path(cmd[-1]).write_bytes(b"\x00\x00\x00\x18ftypmp42")
    return succeed(cmd)


class FakeRunner:
    """Stands in for ``run_command``: records every call, dispatches by stage."""

    def __init__(self):
        self.calls: list[list[str]] = []
        self.streams: list[bool] = []
        self.handlers: dict[str, Handler] = {}

    def on(self, stage: str, handler: Handler) -> FakeRunner:
        self.handlers[stage] = handler
        return self

    def __call__(self, cmd, stream=False, timeout=None, check=True):
        self.calls.append(list(cmd))
        self.streams.append(stream)
        return self.handlers.get(classify(cmd), succeed)(list(cmd))

    def stages(self) -> list[str]:
        return [classify(c) for c in self.calls]

    def calls_for(self, stage: str) -> list[list[str]]:
        return [c for c in self.calls if classify(c) == stage]


@pytest.fixture
def fake_runner(monkeypatch) -> FakeRunner:
    """Patch both converters so no external process is started."""
    from anim2mp4.converters.direct import converter as direct_module
    from anim2mp4.converters.extract import converter as extract_module

    runner = FakeRunner()
    monkeypatch.setattr(direct_module, "run_command", runner)
    monkeypatch.setattr(extract_module, "run_command", runner)
    return runner


@pytest.fixture
def anim_input(tmp_path: Path) -> Path:
    """An input with even dimensions. Pillow sniffs content, so a PNG body is fine."""
    return write_png(tmp_path / "anim.webp", 64, 48)


@pytest.fixture
def odd_input(tmp_path: Path) -> Path:
    return write_png(tmp_path / "odd.webp", 101, 75)


@pytest.fixture
def unreadable_input(tmp_path: Path) -> Path:
    path = tmp_path / "broken.webp"
    path.write_bytes(b"RIFF\x00\x00\x00\x00WEBPgarbage")
    return path
