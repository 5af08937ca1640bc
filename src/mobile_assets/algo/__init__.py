"""Target size computation and single image resize."""

from .geometry import resolve_target_size
from .image_resize import image_resize

__all__ = ["image_resize", "resolve_target_size"]
