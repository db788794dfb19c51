"""
Exceptions raised by Wallstitch.

Everything derives from WallstitchError so the CLI can catch the whole
family in one place and turn it into an exit status.
"""


class WallstitchError(Exception):
    """Base exception for all Wallstitch errors."""


class ConfigurationError(WallstitchError):
    """
    The run cannot start or continue with the given setup.

    Raised when the image directory holds no usable images, the output
    format is unknown or a source image cannot be decoded.
    """


class ScreenInfoError(ConfigurationError):
    """Screen data is missing, empty or malformed."""


class PersistenceError(WallstitchError):
    """The finished wallpaper could not be encoded or written."""


class StitchCancelled(WallstitchError):
    """The user declined to overwrite an existing output file."""
