"""Finding wallpaper files for monitors by the resolution in their name."""

import os

from wallstitch.exceptions import ConfigurationError

# File extension -> Pillow format used to encode that extension.
EXTENSION_TO_FORMAT = {
    # Windows Bitmap
    "bmp": "BMP",
    "dib": "BMP",
    # GIF
    "gif": "GIF",
    # JPEG
    "jfif": "JPEG",
    "jpe": "JPEG",
    "jpeg": "JPEG",
    "jpg": "JPEG",
    # PNG
    "png": "PNG",
}


def get_extension(file_name):
    """Part of the file name after the last dot, empty if there is none."""
    base = os.path.basename(file_name)
    if "." not in base:
        return ""
    return base.rsplit(".", 1)[1]


def format_for_extension(extension):
    """Pillow format name for an extension, None if it is not supported."""
    return EXTENSION_TO_FORMAT.get(extension.lower().lstrip("."))


def is_image_name(file_name):
    return format_for_extension(get_extension(file_name)) is not None


def list_images(directory):
    """Names of the supported image files in directory, sorted by name."""
    try:
        entries = sorted(os.listdir(directory))
    except OSError as exc:
        raise ConfigurationError(
            "Could not list folder {}: {}".format(directory, exc)
        ) from exc
    return [entry for entry in entries
            if is_image_name(entry) and os.path.isfile(os.path.join(directory, entry))]


def require_images(directory):
    """list_images that fails when the folder has nothing to stitch."""
    files = list_images(directory)
    if not files:
        raise ConfigurationError(
            "Could not find any images in folder {}. "
            "Please specify another folder with parameter -d".format(directory)
        )
    return files


def find_candidates(monitor, files):
    """
    Files whose name contains the monitor resolution, e.g. '1920x1080'.

    Matching ignores case and keeps the order of 'files'.
    """
    token = monitor.resolution_token.lower()
    return [name for name in files if token in name.lower()]
