"""Test configuration and fixtures for mobile_assets.

This module provides:
- Source image factories (Pillow generated PNGs in tmp_path)
- A codec double that fails on chosen encode calls
"""

from collections.abc import Callable
from pathlib import Path
from typing_extensions import override

import pytest
from PIL import Image

from mobile_assets.common.codec import PillowCodec
from mobile_assets.common.errors import CodecError

MakePng = Callable[..., Path]


# ============================================================================
# Codec doubles
# ============================================================================


class FailingCodec(PillowCodec):
    """Pillow codec whose n-th encode calls raise CodecError."""

    def __init__(self, fail_on: set[int] | None = None) -> None:
        self.fail_on: set[int] = fail_on or set()
        self.encode_calls: int = 0

    @override
    def encode(self, canvas: Image.Image, path: Path) -> None:
        self.encode_calls += 1
        if self.encode_calls in self.fail_on:
            raise CodecError(f"encode call {self.encode_calls} failed for {path}")
        super().encode(canvas, path)


# ============================================================================
# Function-Scoped Fixtures (Run Per Test)
# ============================================================================


@pytest.fixture
def make_png(tmp_path: Path) -> MakePng:
    """Factory writing a solid color PNG and returning its path."""

    def _make(
        name: str = "icon.png",
        size: tuple[int, int] = (100, 100),
        color: tuple[int, int, int, int] = (255, 0, 0, 255),
        directory: Path | None = None,
    ) -> Path:
        directory = directory if directory is not None else tmp_path / "input"
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / name
        Image.new("RGBA", size, color).save(path, "PNG")
        return path

    return _make


@pytest.fixture
def sample_png(make_png: MakePng) -> Path:
    """A 100x50 opaque red PNG."""
    return make_png("sample.png", size=(100, 50))


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Provide clean temporary directory for test outputs."""
    out = tmp_path / "output"
    out.mkdir()
    return out


def image_size(path: Path) -> tuple[int, int]:
    with Image.open(path) as img:
        return img.size
