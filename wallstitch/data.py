"""
Settings and option storage for Wallstitch.

Defaults come from the general_settings file in the config folder, the
command line overrides them.
"""

import os

import wallstitch.ws_logging as ws_logging
import wallstitch.ws_paths as ws_paths

DEFAULT_FORMAT = "jpg"
DEFAULT_OUTPUT_STEM = "merged-wallpaper"
SCALE_MODES = ("stretch", "fill")


def default_output(extension):
    return os.path.join(".", "{}.{}".format(DEFAULT_OUTPUT_STEM, extension))


class GeneralSettingsData(object):
    """Application wide defaults read from the general_settings file."""

    def __init__(self, settings_file=None):
        self.file = settings_file if settings_file else ws_paths.SETTINGS_FILE
        self.logging = False
        self.directory = ""
        self.format = ""
        self.output = ""
        self.scale_mode = "stretch"
        self.parse_settings()

    def parse_settings(self):
        """Parse general_settings file if there is one."""
        if not os.path.isfile(self.file):
            return
        with open(self.file, "r") as general_settings_file:
            for line in general_settings_file:
                if not line.strip() or line.lstrip().startswith("#"):
                    continue
                words = line.strip().split("=", 1)
                key = words[0].strip()
                value = words[1].strip() if len(words) > 1 else ""
                if key == "logging":
                    self.logging = bool(value.lower() == "true")
                elif key == "directory":
                    self.directory = value
                elif key == "format":
                    self.format = value.lower().lstrip(".")
                elif key == "output":
                    self.output = value
                elif key == "scale_mode":
                    if value.lower() in SCALE_MODES:
                        self.scale_mode = value.lower()
                    else:
                        ws_logging.G_LOGGER.info(
                            "GeneralSettings: unknown scale_mode '%s', using '%s'.",
                            value, self.scale_mode)
                else:
                    ws_logging.G_LOGGER.info(
                        "GeneralSettings parse Exception: Unknown general setting: %s", key)
        if ws_logging.DEBUG:
            ws_logging.G_LOGGER.info("Read settings from %s: %s", self.file, vars(self))

    def save_settings(self):
        """Save the current state of the general settings object."""
        os.makedirs(os.path.dirname(self.file) or ".", exist_ok=True)
        with open(self.file, "w") as general_settings_file:
            if self.logging:
                general_settings_file.write("logging=true\n")
            else:
                general_settings_file.write("logging=false\n")
            general_settings_file.write("directory={}\n".format(self.directory))
            general_settings_file.write("format={}\n".format(self.format))
            general_settings_file.write("output={}\n".format(self.output))
            general_settings_file.write("scale_mode={}\n".format(self.scale_mode))


class StitchOptions(object):
    """Resolved options of one stitching run."""

    def __init__(self, directory=None, extension=None, output=None,
                 scale_mode="stretch", screen_file=None, screeninfo_command=None):
        self.directory = directory if directory else os.getcwd()
        self.extension = (extension if extension else DEFAULT_FORMAT).lower().lstrip(".")
        self.output = output if output else default_output(self.extension)
        self.scale_mode = scale_mode
        self.screen_file = screen_file
        self.screeninfo_command = screeninfo_command

    def __str__(self):
        return (
            f"StitchOptions("
            f"directory={self.directory!r}, "
            f"extension={self.extension!r}, "
            f"output={self.output!r}, "
            f"scale_mode={self.scale_mode!r}"
            f")"
        )

    @classmethod
    def from_sources(cls, args, settings):
        """Command line arguments first, then settings, then defaults."""
        scale_mode = "fill" if getattr(args, "fill", False) else settings.scale_mode
        return cls(
            directory=args.directory or settings.directory or None,
            extension=args.format or settings.format or None,
            output=args.output or settings.output or None,
            scale_mode=scale_mode,
            screen_file=getattr(args, "screens", None),
            screeninfo_command=getattr(args, "screeninfo_command", None),
        )
