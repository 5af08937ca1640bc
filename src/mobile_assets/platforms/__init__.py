"""Platform asset emitters."""

from .android import to_android
from .density import ANDROID_BUCKETS, IOS_BUCKETS, DensityBucket
from .ios import MANIFEST_NAME, to_ios

__all__ = [
    "ANDROID_BUCKETS",
    "IOS_BUCKETS",
    "MANIFEST_NAME",
    "DensityBucket",
    "to_android",
    "to_ios",
]
