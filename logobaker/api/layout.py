"""
Layout

Pure geometry for placing overlays relative to the canvas size. Everything
here is integer arithmetic except overlay_geometry, whose float results are
truncated by the caller when pixels are placed.
"""

from typing import List, Tuple

from logobaker.core.defs import Point


def overlay_geometry(
    canvas_w: int,
    canvas_h: int,
    width_magnification: float,
    margin_magnification: float,
) -> Tuple[float, float]:
    """
    Overlay width and margin scaled from the longer canvas side.

    Returns:
        (width, margin) as floats
    """
    reference = max(canvas_w, canvas_h)
    return reference * width_magnification, reference * margin_magnification


def bottom_right_placement(
    canvas_w: int, canvas_h: int, overlay_w: int, overlay_h: int, margin: int
) -> Point:
    """Top-left point that insets the overlay from the bottom-right corner."""
    return Point(canvas_w - (overlay_w + margin), canvas_h - (overlay_h + margin))


def center_offset(outer: int, inner: int) -> int:
    """(outer - inner) / 2, truncated toward zero."""
    diff = int(outer) - int(inner)
    if diff >= 0:
        return diff // 2
    return -(-diff // 2)


def row_layout(canvas_w: int, element_count: int, element_size: int, margin: int) -> int:
    """Start x of a centred row of equally sized elements."""
    return center_offset(canvas_w, element_size * element_count + margin)


def row_positions(
    canvas_w: int, element_count: int, element_size: int, margin: int
) -> List[int]:
    start = row_layout(canvas_w, element_count, element_size, margin)
    return [start + i * (element_size + margin) for i in range(element_count)]
