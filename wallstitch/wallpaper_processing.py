"""
Wallpaper image processing back-end for Wallstitch.

Picks an image for every monitor, scales it when asked to, copies it onto
the shared canvas at the monitor's placement and saves the result.
"""

import os
import subprocess

from PIL import Image, UnidentifiedImageError

import wallstitch.ws_logging as ws_logging
import wallstitch.ws_paths as ws_paths
from wallstitch.candidates import (find_candidates, format_for_extension,
                                   get_extension, require_images)
from wallstitch.exceptions import (ConfigurationError, PersistenceError,
                                   StitchCancelled)
from wallstitch.layout import compute_layout
from wallstitch.menu import choose_from_list, choose_option
from wallstitch.screens import load_screens

# Disables PIL.Image.DecompressionBombError.
Image.MAX_IMAGE_PIXELS = None # 715827880 would be 4x default max.


def check_output_format(extension):
    """Pillow format for the output extension, ConfigurationError if unknown."""
    fmt = format_for_extension(extension)
    if fmt is None:
        raise ConfigurationError(
            "Invalid output file format (-f parameter): {}".format(extension))
    return fmt


def new_canvas(canvas_size):
    """Black RGB canvas covering all monitors."""
    canvas = Image.new("RGB", tuple(canvas_size), color=0)
    canvas.load()
    return canvas


def open_image(path):
    """Decode an image file into an RGB image."""
    if format_for_extension(get_extension(path)) is None:
        raise ConfigurationError("Invalid file format: {}".format(path))
    try:
        with Image.open(path) as image:
            image.load()
            if image.mode != "RGB":
                return image.convert("RGB")
            return image.copy()
    except (UnidentifiedImageError, OSError) as exc:
        raise ConfigurationError(
            "Opening image '{}' failed: {}".format(path, exc)) from exc


def resize_to_fill(img, res, quality=Image.LANCZOS):
    """Resize image to fill given rectangle and do a centered crop to size."""
    image_size = img.size  # returns image (width,height)
    if image_size == tuple(res):
        return img
    image_ratio = image_size[0] / image_size[1]
    target_ratio = res[0] / res[1]
    # resize along the shorter edge to get an image that is at least of the
    # target size on both edges.
    if image_ratio < target_ratio:      # img not wide enough / is too tall
        resize_multiplier = res[0] / image_size[0]
    else:                               # img not tall enough / is too wide
        resize_multiplier = res[1] / image_size[1]
    new_size = (
        max(res[0], round(resize_multiplier * image_size[0])),
        max(res[1], round(resize_multiplier * image_size[1])))
    img = img.resize(new_size, resample=quality)
    extra_width = new_size[0] - res[0]
    extra_height = new_size[1] - res[1]
    # (half of extra from left, half of extra from top,
    # left + target width, top + target height) : force correct size
    crop_tuple = (
        extra_width // 2,
        extra_height // 2,
        extra_width // 2 + res[0],
        extra_height // 2 + res[1])
    return img.crop(crop_tuple)


def scale_to_screen(image, descriptor, scale_mode="stretch"):
    """Resample image to the monitor resolution."""
    res = descriptor.resolution
    if scale_mode == "fill":
        return resize_to_fill(image, res)
    return image.resize(res, resample=Image.LANCZOS)


def resolve_size_mismatch(image, file_name, descriptor, scale_mode="stretch",
                          input_func=input, print_func=print):
    """
    Ask whether an image that does not match the monitor should be scaled.

    Returns the image to composite: scaled, or unchanged when the user
    declines.
    """
    if image.size == descriptor.resolution:
        return image
    message = ("Size of {} ({}x{}) does not fit screen {} ({}). "
               "Should the image be scaled?").format(
                   file_name, image.size[0], image.size[1],
                   descriptor.device_name, descriptor.resolution_token)
    answer = choose_option(message, ["yes", "no"],
                           input_func=input_func, print_func=print_func)
    if answer == "yes":
        if ws_logging.DEBUG:
            ws_logging.G_LOGGER.info("Scaling %s to %s (%s).", file_name,
                                     descriptor.resolution_token, scale_mode)
        return scale_to_screen(image, descriptor, scale_mode)
    return image


def composite(canvas, image, descriptor, placement):
    """
    Copy a monitor's image onto the canvas at its placement.

    The upper band goes from dst_y to the bottom canvas edge, the lower band
    continues from the top edge. Copied regions are limited to the monitor
    resolution and to the image itself, so an unscaled image of the wrong
    size is cropped or leaves part of the canvas uncovered.
    """
    width, height = descriptor.resolution
    copy_width = min(width, image.size[0])
    if copy_width <= 0:
        return canvas
    upper_rows = min(placement.height_upper_part, height, image.size[1])
    if upper_rows > 0:
        canvas.paste(image.crop((0, 0, copy_width, upper_rows)),
                     (placement.dst_x, placement.dst_y))
    if placement.height_lower_part > 0:
        top = placement.height_upper_part
        bottom = min(top + placement.height_lower_part, image.size[1])
        if bottom > top:
            canvas.paste(image.crop((0, top, copy_width, bottom)),
                         (placement.dst_x, 0))
    if ws_logging.DEBUG:
        ws_logging.G_LOGGER.info("Composited %s at %s.", descriptor.device_name,
                                 placement)
    return canvas


def choose_wallpaper(descriptor, files, input_func=input, print_func=print):
    """File name of the image to use for a monitor, asking when unclear."""
    matches = find_candidates(descriptor, files)
    if len(matches) == 1:
        return matches[0]
    if not matches:
        print_func('Could not find an image for screen "{}" ({})'.format(
            descriptor.device_name, descriptor.resolution_token))
        return choose_from_list(files, "Please choose an alternative image:",
                                input_func=input_func, print_func=print_func)
    return choose_from_list(
        matches,
        'there are multiple options for screen "{}" ({}):'.format(
            descriptor.device_name, descriptor.resolution_token),
        input_func=input_func, print_func=print_func)


def save_canvas(canvas, output, extension):
    """Encode the canvas to output in the format given by extension."""
    fmt = check_output_format(extension)
    try:
        canvas.save(output, format=fmt, quality=95) # quality only affects jpg
    except (OSError, ValueError, KeyError) as exc:
        raise PersistenceError("Could not save file to {}: {}".format(output, exc)) from exc
    return output


def confirm_overwrite(output, input_func=input, print_func=print):
    """Raise StitchCancelled unless output is free or may be overwritten."""
    if not os.path.exists(output):
        return
    answer = choose_option(
        'file "{}" does already exist. Do you want to override?'.format(output),
        ["override", "cancel"], input_func=input_func, print_func=print_func)
    if answer == "cancel":
        raise StitchCancelled("Not overwriting {}.".format(output))


def run_post_save_hook(output, source_files, script_file=None):
    """Run the user's run-after-stitch.py script if there is one."""
    script_file = script_file if script_file else ws_paths.HOOK_SCRIPT
    if not os.path.isfile(script_file):
        return None
    if ws_logging.DEBUG:
        ws_logging.G_LOGGER.info("Running post save hook %s", script_file)
    return subprocess.run(["python3", script_file, output] + list(source_files))


def stitch_wallpaper(options, descriptors=None, input_func=input, print_func=print,
                     hook_script=None):
    """
    Build the stitched wallpaper described by options and save it.

    Screens are queried unless descriptors are given. Returns the output
    path. Raises StitchCancelled if the user keeps an existing output file.
    """
    check_output_format(options.extension)
    files = require_images(options.directory)
    if descriptors is None:
        descriptors = load_screens(options.screen_file, options.screeninfo_command)
    layout = compute_layout(descriptors)
    canvas = new_canvas(layout.canvas_size)

    used_files = []
    for descriptor, placement in layout:
        file_name = choose_wallpaper(descriptor, files, input_func=input_func,
                                     print_func=print_func)
        print_func('Using {} for display "{}" ({})'.format(
            file_name, descriptor.device_name, descriptor.resolution_token))
        path = os.path.join(options.directory, file_name)
        image = open_image(path)
        image = resolve_size_mismatch(image, file_name, descriptor,
                                      options.scale_mode, input_func=input_func,
                                      print_func=print_func)
        composite(canvas, image, descriptor, placement)
        used_files.append(os.path.realpath(path))

    confirm_overwrite(options.output, input_func=input_func, print_func=print_func)
    save_canvas(canvas, options.output, options.extension)
    print_func("Saved file to {}".format(options.output))
    run_post_save_hook(os.path.realpath(options.output), used_files, hook_script)
    return options.output
