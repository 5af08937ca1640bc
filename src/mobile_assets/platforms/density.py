"""Density buckets of the supported platforms."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DensityBucket:
    """A named scale tier.

    Attributes:
        name: Bucket label (``mdpi``, ``2x``...)
        multiplier: Pixels per dp relative to the reference density
        location: Output directory (Android) or filename suffix (iOS)
    """

    name: str
    multiplier: float
    location: str


# Order matters: buckets are emitted from lowest to highest density.
ANDROID_BUCKETS: tuple[DensityBucket, ...] = (
    DensityBucket("mdpi", 1.0, "drawable-mdpi"),
    DensityBucket("hdpi", 1.5, "drawable-hdpi"),
    # Existing asset trees use "drawable-xdpi" for this bucket.
    DensityBucket("xhdpi", 2.0, "drawable-xdpi"),
    DensityBucket("xxhdpi", 3.0, "drawable-xxhdpi"),
    DensityBucket("xxxhdpi", 4.0, "drawable-xxxhdpi"),
)

IOS_BUCKETS: tuple[DensityBucket, ...] = (
    DensityBucket("1x", 1.0, ""),
    DensityBucket("2x", 2.0, "@2x"),
    DensityBucket("3x", 3.0, "@3x"),
)

# Without a target size the source is taken to be drawn at this density.
ANDROID_REFERENCE_MULTIPLIER = 4.0
IOS_REFERENCE_MULTIPLIER = 3.0
