"""Pure target size computation."""

from ..common.schemas import FitPolicy, LogicalSize


def resolve_target_size(
    original: LogicalSize,
    requested: LogicalSize,
    policy: FitPolicy = FitPolicy.FIT,
) -> LogicalSize:
    """
    Reconcile a requested size with the aspect ratio of the original.

    A missing component (<= 0) is derived from the other one through the
    original aspect ratio. An empty request returns ``original`` unchanged.

    The Fit and Stretch adjustments update ``width`` first and then derive
    ``height`` from the already updated width. Stretch divides by the
    requested ``height`` rather than by the ratio.

    Args:
        original: Source size, both components positive
        requested: Requested size, either component may be absent
        policy: Fit policy

    Returns:
        Resolved size
    """
    if requested.is_empty:
        return original

    r = original.width / original.height

    width = requested.width
    height = requested.height
    if width <= 0:
        width = r * height
    if height <= 0:
        height = width / r

    match policy:
        case FitPolicy.FILL:
            pass
        case FitPolicy.FIT:
            width = min(width, r * height)
            height = min(height, width / r)
        case FitPolicy.STRETCH:
            width = max(width, r * height)
            height = max(height, width / height)

    return LogicalSize(width=width, height=height)
