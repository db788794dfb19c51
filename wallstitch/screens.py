"""
Screen enumeration for Wallstitch.

Produces the ordered list of ScreenDescriptors the layout works on. Three
sources are supported: the screeninfo library (default), an external helper
program that prints the screen list as JSON, and a JSON file with the same
content.

The JSON format is a list of records like
    {"BitsPerPixel": 32,
     "Bounds": {"X": -1920, "Y": 0, "Width": 1920, "Height": 1080},
     "DeviceName": "\\\\.\\DISPLAY2",
     "Primary": false,
     "WorkingArea": {"X": -1920, "Y": 0, "Width": 1920, "Height": 1040}}
of which only Bounds and DeviceName are required.
"""

import json
import shlex
import subprocess
from collections import namedtuple

from screeninfo import get_monitors
from screeninfo.common import ScreenInfoError as MonitorQueryError

import wallstitch.ws_logging as ws_logging
from wallstitch.exceptions import ScreenInfoError

MONITOR_QUERY_RETRIES = 5

Bounds = namedtuple("Bounds", ["x", "y", "width", "height"])


class ScreenDescriptor(namedtuple("ScreenDescriptor",
                                  ["id", "device_name", "bounds", "is_primary",
                                   "bits_per_pixel", "working_area"])):
    """Geometry and identity of one monitor. Never mutated."""
    __slots__ = ()

    @property
    def resolution(self):
        return (self.bounds.width, self.bounds.height)

    @property
    def resolution_token(self):
        """Resolution as it appears in wallpaper file names, e.g. '1920x1080'."""
        return "{}x{}".format(self.bounds.width, self.bounds.height)

    def __str__(self):
        return (
            f"ScreenDescriptor("
            f"id={self.id}, "
            f"device_name={self.device_name!r}, "
            f"bounds={tuple(self.bounds)}, "
            f"is_primary={self.is_primary}"
            f")"
        )


def make_descriptor(index, device_name, x, y, width, height, is_primary=False,
                    bits_per_pixel=None, working_area=None):
    """Build a ScreenDescriptor, checking the rectangle is well formed."""
    for value in (x, y, width, height):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ScreenInfoError(
                "Screen {} ({}) has non-integer bounds.".format(index, device_name)
            )
    bounds = Bounds(x, y, width, height)
    if bounds.width <= 0 or bounds.height <= 0:
        raise ScreenInfoError(
            "Screen {} ({}) has an empty size: {}x{}.".format(
                index, device_name, bounds.width, bounds.height)
        )
    return ScreenDescriptor(index, str(device_name), bounds, bool(is_primary),
                            bits_per_pixel, working_area)


def _parse_rect(rect, what):
    if not isinstance(rect, dict):
        raise ScreenInfoError("Screen record has no {} rectangle.".format(what))
    try:
        return (rect["X"], rect["Y"], rect["Width"], rect["Height"])
    except KeyError as exc:
        raise ScreenInfoError(
            "{} rectangle is missing the key {}.".format(what, exc)
        ) from exc


def parse_screen_records(records):
    """Convert decoded screen records into ScreenDescriptors."""
    if not isinstance(records, list) or not records:
        raise ScreenInfoError("Screen data must be a non-empty list of screens.")
    descriptors = []
    for index, record in enumerate(records):
        if not isinstance(record, dict):
            raise ScreenInfoError("Screen record {} is not an object.".format(index))
        if "DeviceName" not in record:
            raise ScreenInfoError("Screen record {} has no DeviceName.".format(index))
        x, y, width, height = _parse_rect(record.get("Bounds"), "Bounds")
        working_area = None
        if record.get("WorkingArea") is not None:
            working_area = Bounds(*_parse_rect(record["WorkingArea"], "WorkingArea"))
        descriptors.append(
            make_descriptor(index, record["DeviceName"], x, y, width, height,
                            is_primary=record.get("Primary", False),
                            bits_per_pixel=record.get("BitsPerPixel"),
                            working_area=working_area)
        )
    return descriptors


def parse_screen_json(text):
    """Parse the JSON screen list printed by a screen info helper."""
    try:
        records = json.loads(text)
    except (TypeError, ValueError) as exc:
        raise ScreenInfoError("Could not decode screen data: {}".format(exc)) from exc
    return parse_screen_records(records)


def read_screen_file(path):
    """Read the screen list from a JSON file."""
    try:
        with open(path, "r", encoding="utf-8-sig") as screen_file:
            text = screen_file.read()
    except OSError as exc:
        raise ScreenInfoError("Could not read screen file {}: {}".format(path, exc)) from exc
    return parse_screen_json(text)


def run_screeninfo_command(command):
    """Run an external helper that prints the screen list as JSON."""
    if ws_logging.DEBUG:
        ws_logging.G_LOGGER.info("Running screen info command: %s", command)
    try:
        proc = subprocess.run(shlex.split(command), stdout=subprocess.PIPE,
                              check=True, universal_newlines=True)
    except (OSError, subprocess.CalledProcessError) as exc:
        raise ScreenInfoError(
            "Screen info command '{}' failed: {}".format(command, exc)
        ) from exc
    return parse_screen_json(proc.stdout)


def descriptors_from_monitors(monitors):
    """Convert screeninfo Monitor objects into ScreenDescriptors."""
    descriptors = []
    for index, monitor in enumerate(monitors):
        name = monitor.name if monitor.name else "DISPLAY{}".format(index + 1)
        descriptors.append(
            make_descriptor(index, name, monitor.x, monitor.y,
                            monitor.width, monitor.height,
                            is_primary=getattr(monitor, "is_primary", False))
        )
    return descriptors


def _query_monitors():
    try:
        return get_monitors()
    except MonitorQueryError as exc:
        raise ScreenInfoError("Could not enumerate monitors: {}".format(exc)) from exc


def get_screen_descriptors(retries=MONITOR_QUERY_RETRIES):
    """
    Query the connected monitors with screeninfo.

    The order is the one reported by the platform; offsets are kept as they
    are, negative ones included, since the layout engine wraps them.
    """
    # https://github.com/rr-/screeninfo
    monitors = _query_monitors()
    attempts = 1
    while not monitors and attempts < retries:
        monitors = _query_monitors()
        attempts += 1
        ws_logging.G_LOGGER.info("Had to re-query for display data.")
    if not monitors:
        raise ScreenInfoError("No monitors were detected.")
    descriptors = descriptors_from_monitors(monitors)
    if ws_logging.DEBUG:
        for desc in descriptors:
            ws_logging.G_LOGGER.info(str(desc))
    return descriptors


def load_screens(screen_file=None, command=None):
    """Pick the screen source requested on the command line."""
    if screen_file:
        return read_screen_file(screen_file)
    if command:
        return run_screeninfo_command(command)
    return get_screen_descriptors()
