"""
Fixed table of icon assets written into the output directory
"""

from typing import NamedTuple


class IconAsset(NamedTuple):
    filename: str
    width: int
    height: int

    @property
    def size_label(self):
        return f"{self.width}x{self.height}"

    @property
    def src(self):
        # Paths are relative to the site root
        return f"/{self.filename}"


ICON_ASSETS = (
    IconAsset("android-chrome-192x192.png", 192, 192),
    IconAsset("android-chrome-512x512.png", 512, 512),
    IconAsset("apple-touch-icon.png", 180, 180),
    IconAsset("favicon-16x16.png", 16, 16),
    IconAsset("favicon-32x32.png", 32, 32),
    IconAsset("favicon.png", 48, 48),
    IconAsset("mstile-70x70.png", 70, 70),
    IconAsset("mstile-150x150.png", 150, 150),
    IconAsset("mstile-310x150.png", 310, 150),
    IconAsset("mstile-310x310.png", 310, 310),
)

MANIFEST_FILENAME = "site.webmanifest"
BROWSERCONFIG_FILENAME = "browserconfig.xml"
ICON_MIME_TYPE = "image/png"


def asset_by_filename(filename):
    for asset in ICON_ASSETS:
        if asset.filename == filename:
            return asset
    raise KeyError(filename)


MANIFEST_ICONS = (
    asset_by_filename("android-chrome-192x192.png"),
    asset_by_filename("android-chrome-512x512.png"),
)

TILE_ICONS = tuple(a for a in ICON_ASSETS if a.filename.startswith("mstile-"))
