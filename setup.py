import os
import sys
from setuptools import setup, find_packages


def read_version():
    with open("wallstitch/__version__.py") as verfile:
        verlines = verfile.readlines()
    for line in verlines:
        if "__version__" in line:
            ver_str = line.split("=")[1].strip().replace('"',"")
            return ver_str
    print("Version not found, exitting install.")
    sys.exit(1)


if __name__ == "__main__":
    with open(os.path.join(os.path.abspath(os.path.dirname(__file__)), 'README.md'),
              encoding='utf-8') as f:
        long_description = f.read()

    setup(
        name="wallstitch",
        version=read_version(),
        description="Stitches per-monitor wallpapers into a single tiling "
                    "image that follows the real multi-monitor layout, "
                    "negative display offsets included.",
        long_description=long_description,
        long_description_content_type="text/markdown",

        classifiers=[
            "Development Status :: 5 - Production/Stable",
            "Environment :: Console",
            "Intended Audience :: End Users/Desktop",
            "License :: OSI Approved :: MIT License",
            "Natural Language :: English",
            "Operating System :: OS Independent",
            "Programming Language :: Python :: 3",
            "Topic :: Utilities",
        ],
        keywords="dual-monitor multi-monitor wallpaper background stitch tile",
        license="MIT",

        python_requires=">=3.7",
        install_requires=[
            "Pillow>=7.0.0",
            "screeninfo>=0.6.1",
        ],
        extras_require={
            "test": ["pytest>=6.0"],
        },
        packages=find_packages(exclude=["tests", "tests.*"]),
        entry_points={
            "console_scripts": ["wallstitch = wallstitch.__main__:main"]
        },
    )
