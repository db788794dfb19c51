"""CLI for Wallstitch. --help switch prints usage."""
import argparse
import sys

import wallstitch.ws_logging as ws_logging
import wallstitch.ws_paths as ws_paths
from wallstitch.__version__ import __version__
from wallstitch.data import GeneralSettingsData, StitchOptions
from wallstitch.exceptions import StitchCancelled, WallstitchError
from wallstitch.wallpaper_processing import stitch_wallpaper


def build_parser():
    parser = argparse.ArgumentParser(
        prog="wallstitch",
        description="""Stitch one wallpaper per monitor into a single tiling
                       image laid out like the desktop. Images are picked by
                       the monitor resolution in their file name, e.g.
                       forest-1920x1080.jpg.""")
    parser.add_argument("-d", "--directory",
                        help="""Folder to look for wallpapers in.
                                Defaults to the current directory.""")
    parser.add_argument("-f", "--format",
                        help="""Output file format: bmp, dib, gif, jfif, jpe,
                                jpeg, jpg or png. Defaults to jpg.""")
    parser.add_argument("-o", "--output",
                        help="""Output file. Defaults to
                                ./merged-wallpaper.<format>.""")
    parser.add_argument("--fill", action="store_true",
                        help="""When scaling a mismatched image, keep its aspect
                                ratio and crop the overflow instead of
                                stretching it.""")
    parser.add_argument("--screens",
                        help="""Read the monitor layout from a JSON file instead
                                of querying the displays.""")
    parser.add_argument("--screeninfo-command",
                        help="""External program that prints the monitor layout
                                as JSON. Must be in quotes.""")
    parser.add_argument("--save-settings", action="store_true",
                        help="""Store the given -d, -f, -o and --fill values as
                                defaults in the general_settings file.""")
    parser.add_argument("--debug", action="store_true",
                        help="Print debugging information.")
    parser.add_argument("--version", action="version",
                        version="%(prog)s {}".format(__version__))
    return parser


def save_defaults(args, settings):
    """Write the command line options into the general_settings file."""
    if args.directory:
        settings.directory = args.directory
    if args.format:
        settings.format = args.format
    if args.output:
        settings.output = args.output
    if args.fill:
        settings.scale_mode = "fill"
    settings.save_settings()
    print("Saved settings to {}".format(settings.file))


def cli_logic(argv=None, input_func=input, print_func=print):
    """
    CLI command parsing and enacting.

    Returns the process exit status.
    """
    args = build_parser().parse_args(argv)
    if args.debug:
        ws_logging.enable_debug()
        # Install exception handler
        sys.excepthook = ws_logging.custom_exception_handler
    settings = GeneralSettingsData()
    if settings.logging:
        ws_logging.enable_file_logging(ws_paths.CACHE_PATH)
        ws_logging.G_LOGGER.info("Enabled logging to file.")
    if args.save_settings:
        save_defaults(args, settings)
        return 0

    options = StitchOptions.from_sources(args, settings)
    if ws_logging.DEBUG:
        ws_logging.G_LOGGER.info("Input options: %s", options)
    try:
        stitch_wallpaper(options, input_func=input_func, print_func=print_func)
    except StitchCancelled as exc:
        ws_logging.G_LOGGER.info(str(exc))
        print_func("Cancelled, nothing was saved.")
        return 0
    except WallstitchError as exc:
        ws_logging.G_LOGGER.error("ERROR: %s", exc)
        return 1
    except (EOFError, KeyboardInterrupt):
        ws_logging.G_LOGGER.error("ERROR: Input ended before all choices were made. Exiting.")
        return 1
    return 0
