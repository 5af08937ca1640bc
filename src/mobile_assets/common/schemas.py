"""Pydantic schemas for sizes, resize targets, manifests and run parameters."""

import sys
from enum import StrEnum
from pathlib import Path
from typing import Annotated, ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field

# ─────────────────────────────────────────────────────────────
# Geometry
# ─────────────────────────────────────────────────────────────


class FitPolicy(StrEnum):
    """How a requested size is reconciled with the source aspect ratio."""

    FILL = "fill"
    FIT = "fit"
    STRETCH = "stretch"


class LogicalSize(BaseModel):
    """Width/height pair in density-independent units.

    A component that is zero or negative means "derive from the aspect
    ratio". The size is empty when both components are absent.
    """

    width: float = 0.0
    height: float = 0.0

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    @classmethod
    def of(cls, width: float, height: float) -> "LogicalSize":
        return cls(width=width, height=height)

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 and self.height <= 0

    def scaled(self, factor: float) -> "LogicalSize":
        return LogicalSize(width=self.width * factor, height=self.height * factor)

    def __mul__(self, factor: float) -> "LogicalSize":
        return self.scaled(factor)

    __rmul__ = __mul__


# ─────────────────────────────────────────────────────────────
# Resize targets
# ─────────────────────────────────────────────────────────────


class ExplicitSize(BaseModel):
    """Resize to a requested size, reconciled through a fit policy."""

    kind: Literal["size"] = "size"
    size: LogicalSize = Field(default_factory=LogicalSize)
    policy: FitPolicy = FitPolicy.FIT

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    @property
    def is_identity(self) -> bool:
        return self.size.is_empty


class ScaleFactor(BaseModel):
    """Resize by a uniform factor relative to the source pixel size."""

    kind: Literal["scale"] = "scale"
    factor: float = Field(default=1.0, gt=0)

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    @property
    def is_identity(self) -> bool:
        return abs(self.factor - 1.0) <= sys.float_info.epsilon


ResizeTarget = Annotated[ExplicitSize | ScaleFactor, Field(discriminator="kind")]


# ─────────────────────────────────────────────────────────────
# iOS asset catalog manifest (Contents.json)
# ─────────────────────────────────────────────────────────────


class ManifestImage(BaseModel):
    filename: str
    idiom: str = "universal"
    scale: str


class ManifestInfo(BaseModel):
    author: str = "xcode"
    version: int = 1


class AssetManifest(BaseModel):
    """Document listing the scale variants of one image set."""

    images: list[ManifestImage] = Field(default_factory=list)
    info: ManifestInfo = Field(default_factory=ManifestInfo)


# ─────────────────────────────────────────────────────────────
# Run parameters
# ─────────────────────────────────────────────────────────────


class GenerateParams(BaseModel):
    """Parameters for a batch run over an input directory.

    Attributes:
        input_dir: Directory scanned for source images
        output_dir: Root receiving the ``Android`` and ``iOS`` subtrees
        width: Target dp width excluding padding (0 = derive from height)
        height: Target dp height excluding padding (0 = derive from width)
        padding: Padding in dp added on every side
        recursive: Scan subdirectories as well
        android: Emit the Android drawable tree
        ios: Emit the iOS image sets
        policy: Fit policy applied when a target size is given
        verbose: Show debug messages
        legacy_android_single_bucket: Without a target size, stop the
            Android emitter after the first density bucket
    """

    input_dir: Path
    output_dir: Path
    width: float = Field(default=0.0, ge=0)
    height: float = Field(default=0.0, ge=0)
    padding: float = Field(default=0.0, ge=0)
    recursive: bool = False
    android: bool = True
    ios: bool = True
    policy: FitPolicy = FitPolicy.FIT
    verbose: bool = False
    legacy_android_single_bucket: bool = False

    @property
    def target_dp(self) -> LogicalSize:
        return LogicalSize(width=self.width, height=self.height)
