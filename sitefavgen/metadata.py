"""
Web app manifest and browserconfig.xml emitters
"""

import json
import logging

from sitefavgen.assets import ICON_MIME_TYPE, MANIFEST_ICONS, TILE_ICONS
from sitefavgen.errors import GenerationError

logger = logging.getLogger(__name__)

# Characters escaped inside JSON strings so the manifest is safe to inline in HTML
HTML_SAFE_ESCAPES = (
    ("<", "\\u003c"),
    (">", "\\u003e"),
    ("&", "\\u0026"),
    ("\u2028", "\\u2028"),
    ("\u2029", "\\u2029"),
)

BROWSERCONFIG_TEMPLATE = """<?xml version="1.0" encoding="utf-8"?>
<browserconfig>
    <msapplication>
        <tile>
            <square70x70logo src="{square70}"/>
            <square150x150logo src="{square150}"/>
            <wide310x150logo src="{wide310}"/>
            <square310x310logo src="{square310}"/>
            <TileColor>{tile_color}</TileColor>
        </tile>
    </msapplication>
</browserconfig>"""


def build_web_manifest(site_name, theme_color, display_mode):
    """Build the manifest record; background color always follows the theme color"""
    icons = [
        {"src": asset.src, "sizes": asset.size_label, "type": ICON_MIME_TYPE}
        for asset in MANIFEST_ICONS
    ]
    return {
        "name": site_name,
        "short_name": site_name,
        "icons": icons,
        "theme_color": theme_color,
        "background_color": theme_color,
        "display": display_mode,
    }


def write_web_manifest(path, site_name, theme_color, display_mode):
    manifest = build_web_manifest(site_name, theme_color, display_mode)
    try:
        data = json.dumps(manifest, separators=(",", ":"), ensure_ascii=False)
        for char, escaped in HTML_SAFE_ESCAPES:
            data = data.replace(char, escaped)
    except (TypeError, ValueError) as e:
        raise GenerationError(f"Failed to json marshal: {e}") from e

    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(data)
    except OSError as e:
        raise GenerationError(f"Failed to write {path}: {e}") from e
    logger.debug("Wrote %s", path)
    return path


def render_browserconfig(tile_color):
    """Fill the tile template; the color is inserted verbatim"""
    square70, square150, wide310, square310 = (asset.src for asset in TILE_ICONS)
    return BROWSERCONFIG_TEMPLATE.format(
        square70=square70,
        square150=square150,
        wide310=wide310,
        square310=square310,
        tile_color=tile_color,
    )


def write_browserconfig(path, tile_color):
    content = render_browserconfig(tile_color)
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
    except OSError as e:
        raise GenerationError(f"Failed to write {path}: {e}") from e
    logger.debug("Wrote %s", path)
    return path
