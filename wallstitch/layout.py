"""
Canvas and placement computations for Wallstitch.

The canvas is the bounding box of all monitor rectangles together with the
origin point (0,0), i.e. the top left corner of the primary display. A
monitor at a negative offset is not shifted into the positive quadrant:
its coordinate is wrapped to the far edge of the canvas, so the stitched
image tiles correctly when the desktop repeats it across the whole screen
area.

Only vertical wrapping splits an image. A monitor that would reach past the
right canvas edge is not split horizontally and its overflow is lost.
"""

from collections import namedtuple

import wallstitch.ws_logging as ws_logging
from wallstitch.exceptions import ScreenInfoError

Edges = namedtuple("Edges", ["left", "right", "top", "bottom"])
CanvasSize = namedtuple("CanvasSize", ["width", "height"])
Placement = namedtuple("Placement",
                       ["dst_x", "dst_y", "height_upper_part", "height_lower_part"])


class Layout():
    """Canvas size and per-monitor placements, computed once for a run."""

    def __init__(self, descriptors):
        self.descriptors = list(descriptors)
        self.canvas_size = compute_canvas_size(self.descriptors)
        self.placements = [compute_placement(desc, self.canvas_size)
                           for desc in self.descriptors]

    def __iter__(self):
        return iter(zip(self.descriptors, self.placements))

    def __len__(self):
        return len(self.descriptors)

    def __str__(self):
        return "Layout(canvas_size={}, placements={})".format(
            tuple(self.canvas_size), [tuple(plc) for plc in self.placements])


def compute_edges(descriptors):
    """Fold monitor rectangles into the outermost edges, seeded at the origin."""
    left = right = top = bottom = 0
    for desc in descriptors:
        x, y, width, height = desc.bounds
        left = min(left, x)
        right = max(right, x + width)
        top = min(top, y)
        bottom = max(bottom, y + height)
    return Edges(left, right, top, bottom)


def compute_canvas_size(descriptors):
    """Computes the size of the total desktop area from monitor bounds."""
    descriptors = list(descriptors)
    if not descriptors:
        raise ScreenInfoError("Cannot compute a canvas without any screens.")
    edges = compute_edges(descriptors)
    canvas_size = CanvasSize(edges.right - edges.left, edges.bottom - edges.top)
    if canvas_size.width <= 0 or canvas_size.height <= 0:
        raise ScreenInfoError("Screens span an empty area: {}".format(edges))
    if ws_logging.DEBUG:
        ws_logging.G_LOGGER.info("Edges: %s, canvas size: %s", edges, canvas_size)
    return canvas_size


def compute_placement(descriptor, canvas_size):
    """
    Destination of a monitor's image on the canvas.

    Negative coordinates wrap to the far canvas edge. The image is copied
    in two horizontal bands: 'height_upper_part' rows starting at dst_y,
    and the remaining 'height_lower_part' rows starting from the top edge.
    Without vertical wrap the lower part is zero or negative and skipped.
    """
    x, y, _, height = descriptor.bounds
    dst_x = x + canvas_size.width if x < 0 else x
    dst_y = y + canvas_size.height if y < 0 else y
    height_upper_part = canvas_size.height - dst_y
    height_lower_part = height - height_upper_part
    return Placement(dst_x, dst_y, height_upper_part, height_lower_part)


def compute_layout(descriptors):
    """Canvas size and placements of all descriptors."""
    layout = Layout(descriptors)
    if ws_logging.DEBUG:
        ws_logging.G_LOGGER.info(str(layout))
    return layout
