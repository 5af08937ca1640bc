"""Android drawable tree emitter."""

from pathlib import Path

from loguru import logger

from ..algo.image_resize import image_resize
from ..common.codec import ImageCodec
from ..common.schemas import ExplicitSize, FitPolicy, LogicalSize, ScaleFactor
from .density import ANDROID_BUCKETS, ANDROID_REFERENCE_MULTIPLIER


def to_android(
    input_file: str | Path,
    output_dir: str | Path,
    target_dp: LogicalSize | None = None,
    padding: float = 0.0,
    *,
    policy: FitPolicy = FitPolicy.FIT,
    codec: ImageCodec | None = None,
    legacy_single_bucket: bool = False,
) -> bool:
    """
    Write one image into ``<output_dir>/<stem>/drawable-*/<name>``.

    With a target size every bucket gets ``target_dp * multiplier``.
    Without one the source is treated as the xxxhdpi rendition and each
    bucket is scaled by ``multiplier / 4``. Padding scales the same way.

    A failing bucket does not stop the others; the result is False if any
    bucket failed.

    Args:
        input_file: Source image
        output_dir: Root of the Android tree
        target_dp: Size in dp excluding padding (default: none)
        padding: Padding in dp
        policy: Fit policy for explicit sizes
        codec: Image codec passed to the resizer
        legacy_single_bucket: Without a target size, stop after the mdpi
            bucket like older releases did

    Returns:
        True when every bucket was written
    """
    input_file = Path(input_file)
    output_dir = Path(output_dir)
    target_dp = target_dp if target_dp is not None else LogicalSize()

    if not input_file.is_file():
        logger.error(f"to_android: the file {input_file} does not exist.")
        return False

    try:
        new_dir = output_dir / input_file.stem
        success = True

        for bucket in ANDROID_BUCKETS:
            bucket_dir = new_dir / bucket.location
            output_file = bucket_dir / input_file.name
            try:
                bucket_dir.mkdir(parents=True, exist_ok=True)
                output_file.unlink(missing_ok=True)
            except OSError as e:
                logger.error(f"to_android: cannot prepare {output_file}. Details: {e}")
                success = False
                if legacy_single_bucket and target_dp.is_empty:
                    return False
                continue

            if target_dp.is_empty:
                factor = bucket.multiplier / ANDROID_REFERENCE_MULTIPLIER
                ok = image_resize(
                    input_path=input_file,
                    output_path=output_file,
                    target=ScaleFactor(factor=factor),
                    padding=padding * factor,
                    codec=codec,
                )
                if legacy_single_bucket:
                    return ok
            else:
                ok = image_resize(
                    input_path=input_file,
                    output_path=output_file,
                    target=ExplicitSize(size=target_dp * bucket.multiplier, policy=policy),
                    padding=padding * bucket.multiplier,
                    codec=codec,
                )

            if not ok:
                logger.error(f"to_android: {bucket.name} bucket failed for {input_file}.")
            success = success and ok

        if success:
            logger.info(f"to_android: created Android structure for {input_file} in {new_dir}.")
        else:
            logger.warning(f"to_android: some buckets failed for {input_file} in {new_dir}.")
        return success

    except Exception as e:
        logger.error(
            f"to_android: error generating the Android structure for {input_file} "
            + f"into {output_dir}. Details: {e}"
        )
        return False
