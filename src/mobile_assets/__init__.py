"""mobile_assets - Android drawable and iOS image set generator."""

from .algo import image_resize, resolve_target_size
from .batch import find_images, generate, generate_mobile_images
from .common.codec import ImageCodec, PillowCodec
from .common.schemas import (
    AssetManifest,
    ExplicitSize,
    FitPolicy,
    GenerateParams,
    LogicalSize,
    ScaleFactor,
)
from .platforms import to_android, to_ios

__version__ = "0.1.0"

__all__ = [
    "AssetManifest",
    "ExplicitSize",
    "FitPolicy",
    "GenerateParams",
    "ImageCodec",
    "LogicalSize",
    "PillowCodec",
    "ScaleFactor",
    "__version__",
    "find_images",
    "generate",
    "generate_mobile_images",
    "image_resize",
    "resolve_target_size",
    "to_android",
    "to_ios",
]
