"""Test configuration and fixtures."""

import json

import pytest
from PIL import Image

import wallstitch.ws_paths as ws_paths
from wallstitch.screens import make_descriptor


class ScriptedInput:
    """Stands in for input(): answers from a list, records the prompts."""

    def __init__(self, answers=None):
        self.answers = list(answers or [])
        self.prompts = []

    def __call__(self, prompt=""):
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError("no more scripted answers")
        return self.answers.pop(0)


class Printed:
    """Stands in for print(): collects the printed lines."""

    def __init__(self):
        self.lines = []

    def __call__(self, *args):
        self.lines.append(" ".join(str(arg) for arg in args))

    @property
    def text(self):
        return "\n".join(self.lines)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep the user's general_settings and hook script out of the tests."""
    config_dir = tmp_path / "config"
    monkeypatch.setattr(ws_paths, "CONFIG_PATH", str(config_dir))
    monkeypatch.setattr(ws_paths, "CACHE_PATH", str(tmp_path / "cache"))
    monkeypatch.setattr(ws_paths, "SETTINGS_FILE", str(config_dir / "general_settings"))
    monkeypatch.setattr(ws_paths, "HOOK_SCRIPT", str(config_dir / "run-after-stitch.py"))
    return config_dir


@pytest.fixture
def printed():
    return Printed()


@pytest.fixture
def scripted():
    return ScriptedInput


@pytest.fixture
def screen():
    """Factory for ScreenDescriptors: screen(x, y, w, h, name=..., index=...)."""
    def _screen(x, y, width, height, name="DISPLAY1", index=0, primary=False):
        return make_descriptor(index, name, x, y, width, height, is_primary=primary)
    return _screen


@pytest.fixture
def make_image():
    """Write a solid color image, returns its path."""
    def _make_image(path, size, color=(255, 0, 0), mode="RGB"):
        image = Image.new(mode, size, color)
        image.save(str(path))
        return path
    return _make_image


@pytest.fixture
def wallpaper_dir(tmp_path, make_image):
    """Folder with one wallpaper for a 40x30 and one for a 20x30 monitor."""
    folder = tmp_path / "wallpapers"
    folder.mkdir()
    make_image(folder / "left-40x30.png", (40, 30), (255, 0, 0))
    make_image(folder / "right-20x30.png", (20, 30), (0, 0, 255))
    (folder / "notes.txt").write_text("not an image")
    return folder


@pytest.fixture
def screens_file(tmp_path):
    """JSON screen layout: primary 40x30 at the origin, 20x30 to its left."""
    path = tmp_path / "screens.json"
    path.write_text(json.dumps([
        {"BitsPerPixel": 32,
         "Bounds": {"X": 0, "Y": 0, "Width": 40, "Height": 30},
         "DeviceName": "\\\\.\\DISPLAY1",
         "Primary": True,
         "WorkingArea": {"X": 0, "Y": 0, "Width": 40, "Height": 28}},
        {"BitsPerPixel": 32,
         "Bounds": {"X": -20, "Y": 0, "Width": 20, "Height": 30},
         "DeviceName": "\\\\.\\DISPLAY2",
         "Primary": False,
         "WorkingArea": {"X": -20, "Y": 0, "Width": 20, "Height": 28}},
    ]))
    return path
