"""Wallstitch: stitch per-monitor wallpapers into one tiling image."""
