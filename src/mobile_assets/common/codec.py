"""Image codec used by the resizer: decode, render scaled onto a canvas, encode."""

from collections.abc import Iterator
from contextlib import AbstractContextManager, contextmanager
from pathlib import Path
from typing import Protocol

from PIL import Image, UnidentifiedImageError

from .errors import CodecError

Pixels = tuple[int, int]


class ImageCodec(Protocol):
    """Pixel operations the resizer delegates to."""

    def open(self, path: Path) -> AbstractContextManager[Image.Image]: ...

    def render_scaled(
        self,
        source: Image.Image,
        target_size: Pixels,
        canvas_size: Pixels,
        offset: Pixels,
    ) -> Image.Image: ...

    def encode(self, canvas: Image.Image, path: Path) -> None: ...


class PillowCodec:
    """Pillow backed codec writing lossless PNG output.

    The source is resampled with LANCZOS and pasted at ``offset`` on a
    fully transparent RGBA canvas.
    """

    resample: Image.Resampling = Image.Resampling.LANCZOS
    format: str = "PNG"

    @contextmanager
    def open(self, path: Path) -> Iterator[Image.Image]:
        try:
            img = Image.open(path)
        except (UnidentifiedImageError, OSError) as e:
            raise CodecError(f"Cannot decode {path}: {e}") from e

        with img:
            try:
                img.load()
            except OSError as e:
                raise CodecError(f"Cannot decode {path}: {e}") from e
            yield img

    def render_scaled(
        self,
        source: Image.Image,
        target_size: Pixels,
        canvas_size: Pixels,
        offset: Pixels,
    ) -> Image.Image:
        temporaries: list[Image.Image] = []
        canvas = Image.new("RGBA", canvas_size, (0, 0, 0, 0))
        try:
            rgba = source
            if source.mode != "RGBA":
                rgba = source.convert("RGBA")
                temporaries.append(rgba)
            scaled = rgba.resize(target_size, self.resample)
            temporaries.append(scaled)
            canvas.paste(scaled, offset)
        except (OSError, ValueError) as e:
            canvas.close()
            raise CodecError(f"Cannot render {target_size} onto {canvas_size}: {e}") from e
        finally:
            for img in temporaries:
                img.close()
        return canvas

    def encode(self, canvas: Image.Image, path: Path) -> None:
        try:
            canvas.save(path, format=self.format)
        except (OSError, ValueError) as e:
            raise CodecError(f"Cannot encode {path}: {e}") from e
