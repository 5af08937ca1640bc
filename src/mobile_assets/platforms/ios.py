"""iOS image set emitter."""

from pathlib import Path

from loguru import logger

from ..algo.image_resize import image_resize
from ..common.codec import ImageCodec
from ..common.errors import BucketFailedError
from ..common.schemas import (
    AssetManifest,
    ExplicitSize,
    FitPolicy,
    LogicalSize,
    ManifestImage,
    ScaleFactor,
)
from .density import IOS_BUCKETS, IOS_REFERENCE_MULTIPLIER

MANIFEST_NAME = "Contents.json"


def to_ios(
    input_file: str | Path,
    output_dir: str | Path,
    target_dp: LogicalSize | None = None,
    padding: float = 0.0,
    *,
    policy: FitPolicy = FitPolicy.FIT,
    codec: ImageCodec | None = None,
) -> bool:
    """
    Write one image set into ``<output_dir>/<stem>/``.

    Produces ``<stem>.png``, ``<stem>@2x.png`` and ``<stem>@3x.png`` plus a
    ``Contents.json`` manifest. Without a target size the source is treated
    as the 3x rendition. The first failing scale stops the emitter and no
    manifest is written.

    Returns:
        True when all scales and the manifest were written
    """
    input_file = Path(input_file)
    output_dir = Path(output_dir)
    target_dp = target_dp if target_dp is not None else LogicalSize()

    if not input_file.is_file():
        logger.error(f"to_ios: the file {input_file} does not exist.")
        return False

    try:
        stem = input_file.stem
        new_dir = output_dir / stem
        new_dir.mkdir(parents=True, exist_ok=True)

        manifest = AssetManifest()
        for bucket in IOS_BUCKETS:
            output_file = new_dir / f"{stem}{bucket.location}.png"
            output_file.unlink(missing_ok=True)

            if target_dp.is_empty:
                factor = bucket.multiplier / IOS_REFERENCE_MULTIPLIER
                ok = image_resize(
                    input_path=input_file,
                    output_path=output_file,
                    target=ScaleFactor(factor=factor),
                    padding=padding * factor,
                    codec=codec,
                )
            else:
                ok = image_resize(
                    input_path=input_file,
                    output_path=output_file,
                    target=ExplicitSize(size=target_dp * bucket.multiplier, policy=policy),
                    padding=padding * bucket.multiplier,
                    codec=codec,
                )

            if not ok:
                raise BucketFailedError(f"Error resizing {input_file} into {output_file}")

            manifest.images.append(ManifestImage(filename=output_file.name, scale=bucket.name))

        manifest_file = new_dir / MANIFEST_NAME
        manifest_file.unlink(missing_ok=True)
        _ = manifest_file.write_text(manifest.model_dump_json(indent=2), encoding="utf-8")

        logger.info(f"to_ios: created iOS structure for {input_file} in {new_dir}.")
        return True

    except Exception as e:
        logger.error(
            f"to_ios: error generating the iOS structure for {input_file} "
            + f"into {output_dir}. Details: {e}"
        )
        return False
