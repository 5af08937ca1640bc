"""Resize a single image onto a padded canvas."""

import shutil
from pathlib import Path

from loguru import logger

from ..common.codec import ImageCodec, PillowCodec
from ..common.errors import AssetIOError
from ..common.schemas import ExplicitSize, LogicalSize, ResizeTarget, ScaleFactor
from .geometry import resolve_target_size


def _to_pixels(value: float) -> int:
    return max(1, int(value + 0.5))


def _target_size(original: LogicalSize, target: ResizeTarget) -> LogicalSize:
    if isinstance(target, ScaleFactor):
        return original.scaled(target.factor)
    return resolve_target_size(original, target.size, target.policy)


def image_resize(
    *,
    input_path: str | Path,
    output_path: str | Path,
    target: ResizeTarget | None = None,
    padding: float = 0.0,
    codec: ImageCodec | None = None,
) -> bool:
    """
    Resize a single image and write it as PNG.

    When no resize is requested and there is no padding the source bytes
    are copied to ``output_path`` unchanged. Otherwise the source is scaled
    to the target size and drawn at ``(padding, padding)`` on a transparent
    canvas of ``target + 2 * padding``.

    Args:
        input_path: Path to input image
        output_path: Path to output image, overwritten if present
        target: Explicit size with fit policy, or scale factor
            (default: no resize)
        padding: Padding in pixels on every side, non-negative
        codec: Image codec (default: Pillow)

    Returns:
        True on success. Failures are logged, never raised.
    """
    input_path = Path(input_path)
    output_path = Path(output_path)
    target = target if target is not None else ExplicitSize()
    codec = codec if codec is not None else PillowCodec()

    if not input_path.is_file():
        logger.error(f"image_resize: the file {input_path} does not exist.")
        return False

    try:
        if target.is_identity and padding == 0:
            try:
                _ = shutil.copyfile(input_path, output_path)
            except OSError as e:
                raise AssetIOError(f"Cannot copy {input_path} to {output_path}: {e}") from e
            logger.debug(
                f"image_resize: no resize requested for {input_path}, copied to {output_path}."
            )
            return True

        with codec.open(input_path) as src:
            src_width, src_height = src.size
            size = _target_size(LogicalSize(width=src_width, height=src_height), target)

            target_px = (_to_pixels(size.width), _to_pixels(size.height))
            offset = int(padding + 0.5)
            # Same margin on every side.
            canvas_px = (target_px[0] + 2 * offset, target_px[1] + 2 * offset)

            canvas = codec.render_scaled(src, target_px, canvas_px, (offset, offset))
            try:
                codec.encode(canvas, output_path)
            finally:
                canvas.close()

        logger.debug(
            f"image_resize: resized {input_path}[{src_width}x{src_height}] to "
            + f"{output_path}[{canvas_px[0]}x{canvas_px[1]} (padding: {padding})]."
        )
        return True

    except Exception as e:
        logger.error(
            f"image_resize: error resizing {input_path} to {output_path}. Details: {e}"
        )
        return False
