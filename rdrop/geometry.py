"""Window size and placement from monitor dimensions."""

__all__ = [
    "compute_geometry",
    "position",
    "size_from_percentage",
]

from .models import Anchor, ComputedGeometry, GeometrySpec, MonitorInfo


def size_from_percentage(monitor: MonitorInfo, width_percent: int, height_percent: int) -> tuple[int, int]:
    """Get the (width, height) of the window, as a percentage of the monitor size."""
    return int(monitor.width * width_percent / 100), int(monitor.height * height_percent / 100)


def position(monitor: MonitorInfo, size: tuple[int, int], anchor: Anchor, margin: int) -> tuple[int, int]:
    """Get the (x, y) of a window of `size` attached to the `anchor` edge.

    The window is centered along the edge and `margin` pixels away from it.
    Coordinates are relative to the monitor.
    """
    width, height = size
    match anchor:
        case Anchor.TOP:
            return int((monitor.width - width) / 2), margin
        case Anchor.BOTTOM:
            return int((monitor.width - width) / 2), monitor.height - (height + margin)
        case Anchor.LEFT:
            return margin, int((monitor.height - height) / 2)
        case Anchor.RIGHT:
            return monitor.width - (width + margin), int((monitor.height - height) / 2)
    msg = f"unsupported anchor {anchor!r}"
    raise ValueError(msg)


def compute_geometry(monitor: MonitorInfo, spec: GeometrySpec) -> ComputedGeometry:
    """Resolve the configured geometry on `monitor`."""
    width, height = size_from_percentage(monitor, spec.width_percent, spec.height_percent)
    x, y = position(monitor, (width, height), spec.anchor, spec.margin)
    return ComputedGeometry(width=width, height=height, x=x, y=y)
