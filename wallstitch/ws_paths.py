"""Define paths used by Wallstitch."""

import os


def xdg_path(xdg_var, fallback_path):
    """Wallstitch folder inside the given XDG base directory.

    XDG_CONFIG_HOME, or fallback ~/.config/wallstitch
    XDG_CACHE_HOME, or fallback ~/.cache/wallstitch

    The folder is not created here; writers create it when needed.
    """
    xdg_home = os.environ.get(xdg_var)
    if xdg_home and os.path.isdir(xdg_home):
        return os.path.join(xdg_home, "wallstitch")
    return os.path.join(fallback_path, "wallstitch")


def setup_config_path():
    """Config path for the general_settings file and the post-save hook."""
    return xdg_path("XDG_CONFIG_HOME",
                    os.path.join(os.path.expanduser("~"), ".config"))


def setup_cache_path():
    """Cache path, used for the log file."""
    return xdg_path("XDG_CACHE_HOME",
                    os.path.join(os.path.expanduser("~"), ".cache"))


CONFIG_PATH = setup_config_path()
CACHE_PATH = setup_cache_path()
SETTINGS_FILE = os.path.join(CONFIG_PATH, "general_settings")
HOOK_SCRIPT = os.path.join(CONFIG_PATH, "run-after-stitch.py")
