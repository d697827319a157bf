"""Shared fixtures: a fake encoder toolchain in place of subprocess.run."""

import subprocess
from pathlib import Path

import pytest

from webimg.models.tools import ToolAvailability

SOURCE_SIZE = 1000


class FakeEncoders:
    """
    Stand-in for subprocess.run that writes encoder outputs.

    sizes maps tool name to the byte count it writes; returncodes maps tool
    name to its exit status (non-zero statuses write nothing unless the tool
    is in partial_writes, which write a few bytes before failing).
    """

    def __init__(self):
        self.sizes = {
            "pngquant": 400,
            "convert": 300,
            "magick": 300,
            "cwebp": 200,
            "avifenc": 100,
        }
        self.returncodes: dict[str, int] = {}
        self.timeouts: set[str] = set()
        self.partial_writes: set[str] = set()
        self.calls: list[list[str]] = []

    def tools_called(self) -> list[str]:
        return [Path(cmd[0]).name for cmd in self.calls]

    def __call__(self, cmd, **kwargs):
        self.calls.append(list(cmd))
        tool = Path(cmd[0]).name

        if tool in self.timeouts:
            raise subprocess.TimeoutExpired(cmd, kwargs.get("timeout"))

        returncode = self.returncodes.get(tool, 0)
        if returncode == 0:
            _output_path(tool, cmd).write_bytes(b"x" * self.sizes[tool])
        elif tool in self.partial_writes:
            _output_path(tool, cmd).write_bytes(b"partial")

        return subprocess.CompletedProcess(
            cmd,
            returncode,
            stdout="",
            stderr=f"{tool}: error" if returncode else "",
        )


def _output_path(tool: str, cmd: list[str]) -> Path:
    if tool == "pngquant":
        return Path(cmd[cmd.index("--output") + 1])
    if tool in ("cwebp", "avifenc"):
        return Path(cmd[cmd.index("-o") + 1])
    return Path(cmd[-1])


@pytest.fixture
def fake_encoders(monkeypatch) -> FakeEncoders:
    fake = FakeEncoders()
    monkeypatch.setattr("webimg.converter.encoder.subprocess.run", fake)
    return fake


@pytest.fixture
def source_png(tmp_path) -> Path:
    path = tmp_path / "photo.png"
    path.write_bytes(b"\x89PNG" + b"\x00" * (SOURCE_SIZE - 4))
    return path


@pytest.fixture
def all_tools() -> ToolAvailability:
    return ToolAvailability(
        pngquant="/usr/bin/pngquant",
        cwebp="/usr/bin/cwebp",
        avifenc="/usr/bin/avifenc",
        magick="/usr/bin/convert",
    )


@pytest.fixture
def no_avif_tools() -> ToolAvailability:
    return ToolAvailability(
        pngquant="/usr/bin/pngquant",
        cwebp="/usr/bin/cwebp",
    )
