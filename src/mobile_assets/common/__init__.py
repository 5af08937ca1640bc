"""Common module - schemas, errors and the image codec."""

from .codec import ImageCodec, PillowCodec
from .errors import (
    AssetGenerationError,
    AssetIOError,
    BucketFailedError,
    CodecError,
    EnumerationError,
    InputNotFoundError,
)
from .schemas import (
    AssetManifest,
    ExplicitSize,
    FitPolicy,
    GenerateParams,
    LogicalSize,
    ManifestImage,
    ManifestInfo,
    ResizeTarget,
    ScaleFactor,
)

__all__ = [
    "AssetGenerationError",
    "AssetIOError",
    "AssetManifest",
    "BucketFailedError",
    "CodecError",
    "EnumerationError",
    "ExplicitSize",
    "FitPolicy",
    "GenerateParams",
    "ImageCodec",
    "InputNotFoundError",
    "LogicalSize",
    "ManifestImage",
    "ManifestInfo",
    "PillowCodec",
    "ResizeTarget",
    "ScaleFactor",
]
