"""Batch generation of Android and iOS assets for a directory of images."""

from collections.abc import Callable
from pathlib import Path

from loguru import logger

from .common.codec import ImageCodec
from .common.errors import EnumerationError, InputNotFoundError
from .common.schemas import FitPolicy, GenerateParams, LogicalSize
from .platforms.android import to_android
from .platforms.ios import to_ios
from .utils.profiling import timed

IMAGE_PATTERN = "*.png"
ANDROID_DIR = "Android"
IOS_DIR = "iOS"


def find_images(input_dir: str | Path, recursive: bool = False) -> list[Path]:
    """List source images in ``input_dir``, sorted by path.

    Raises:
        InputNotFoundError: If ``input_dir`` is not a directory
        EnumerationError: If listing the directory fails
    """
    input_dir = Path(input_dir)
    if not input_dir.is_dir():
        raise InputNotFoundError(f"Input directory not found: {input_dir}")

    try:
        matches = input_dir.rglob(IMAGE_PATTERN) if recursive else input_dir.glob(IMAGE_PATTERN)
        return sorted(path for path in matches if path.is_file())
    except OSError as e:
        raise EnumerationError(f"Cannot list {input_dir}: {e}") from e


def _emit_all(
    emitter: Callable[..., bool],
    files: list[Path],
    platform_dir: Path,
    **kwargs: object,
) -> bool:
    platform_dir.mkdir(parents=True, exist_ok=True)
    success = True
    for file in files:
        # Every file is processed even after a failure.
        success = emitter(file, platform_dir, **kwargs) and success
    return success


def _warn_duplicate_names(files: list[Path]) -> None:
    seen: dict[str, Path] = {}
    for file in files:
        previous = seen.setdefault(file.stem, file)
        if previous is not file:
            logger.warning(
                f"generate_mobile_images: {file} and {previous} share the name "
                + f"'{file.stem}'; the later one overwrites the earlier output."
            )


@timed
def generate_mobile_images(
    input_dir: str | Path,
    output_dir: str | Path,
    target_dp: LogicalSize | None = None,
    padding: float = 0.0,
    recursive: bool = False,
    android: bool = True,
    ios: bool = True,
    *,
    policy: FitPolicy = FitPolicy.FIT,
    codec: ImageCodec | None = None,
    legacy_android_single_bucket: bool = False,
) -> bool:
    """
    Generate Android and iOS assets for every PNG in ``input_dir``.

    Outputs go to ``<output_dir>/Android`` and ``<output_dir>/iOS``. A
    failing file marks the batch as failed but the remaining files are
    still processed; files already written stay on disk.

    Args:
        input_dir: Directory with source images
        output_dir: Output root
        target_dp: Size in dp excluding padding (default: derive from source)
        padding: Padding in dp
        recursive: Include subdirectories
        android: Emit the Android tree
        ios: Emit the iOS image sets
        policy: Fit policy for explicit sizes
        codec: Image codec passed down to the resizer
        legacy_android_single_bucket: See ``to_android``

    Returns:
        True when every file succeeded on every selected platform
    """
    output_dir = Path(output_dir)
    target_dp = target_dp if target_dp is not None else LogicalSize()

    try:
        files = find_images(input_dir, recursive)
        logger.debug(f"generate_mobile_images: found {len(files)} image(s) in {input_dir}.")
        _warn_duplicate_names(files)

        success = True
        if android:
            success = (
                _emit_all(
                    to_android,
                    files,
                    output_dir / ANDROID_DIR,
                    target_dp=target_dp,
                    padding=padding,
                    policy=policy,
                    codec=codec,
                    legacy_single_bucket=legacy_android_single_bucket,
                )
                and success
            )
        if ios:
            success = (
                _emit_all(
                    to_ios,
                    files,
                    output_dir / IOS_DIR,
                    target_dp=target_dp,
                    padding=padding,
                    policy=policy,
                    codec=codec,
                )
                and success
            )

    except Exception as e:
        logger.error(
            f"generate_mobile_images: error generating assets for {input_dir} "
            + f"into {output_dir}. Details: {e}"
        )
        return False

    if success:
        logger.info("generate_mobile_images: done. All operations completed successfully.")
    else:
        logger.warning(
            "generate_mobile_images: done. There were some errors, please look at the log."
        )
    return success


def generate(params: GenerateParams, codec: ImageCodec | None = None) -> bool:
    """Run ``generate_mobile_images`` from validated parameters."""
    return generate_mobile_images(
        params.input_dir,
        params.output_dir,
        params.target_dp,
        params.padding,
        params.recursive,
        params.android,
        params.ios,
        policy=params.policy,
        codec=codec,
        legacy_android_single_bucket=params.legacy_android_single_bucket,
    )
