from typing_extensions import override


class AssetGenerationError(Exception):
    """Base class for failures while generating mobile assets."""

    def __init__(self, message: str = "Asset generation failed."):
        self.message: str = message
        super().__init__(self.message)

    @override
    def __str__(self):
        return f"{type(self).__name__}: {self.message}"


class InputNotFoundError(AssetGenerationError):
    """Source file or directory does not exist."""


class AssetIOError(AssetGenerationError):
    """Copy, write or delete failed."""


class CodecError(AssetGenerationError):
    """Image could not be decoded, rendered or encoded."""


class EnumerationError(AssetGenerationError):
    """Input directory could not be listed."""


class BucketFailedError(AssetGenerationError):
    """A density bucket failed and the emitter stopped."""
