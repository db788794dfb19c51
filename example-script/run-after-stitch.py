import subprocess
import sys

# After Wallstitch has saved a stitched wallpaper, it looks for a script named
# "run-after-stitch.py" in the config folder, which by default is
# at the path ~/.config/wallstitch
# or at XDG_CONFIG_HOME/wallstitch

# The saved wallpaper path is passed to the script as sys.argv[1].
# The source images follow as arguments 2 and onwards.
wallpaper_image_name = sys.argv[1]
list_of_source_images = sys.argv[2:]

# example command that sets the result as a tiled wallpaper on GNOME:
subprocess.run(["gsettings", "set", "org.gnome.desktop.background",
                "picture-options", "wallpaper"])
subprocess.run(["gsettings", "set", "org.gnome.desktop.background",
                "picture-uri", "file://" + wallpaper_image_name])
