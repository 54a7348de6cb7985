"""
Generate all favicon and web-app icon sizes from a source image
"""

import logging
import os

from PIL import Image, UnidentifiedImageError

from sitefavgen.assets import ICON_ASSETS
from sitefavgen.errors import GenerationError

logger = logging.getLogger(__name__)


def ensure_output_dir(output_dir):
    """Create the output directory if it does not exist yet"""
    if os.path.isdir(output_dir):
        return
    try:
        os.makedirs(output_dir, mode=0o777, exist_ok=True)
    except OSError as e:
        raise GenerationError(f"Failed to create dir {output_dir}: {e}") from e
    logger.debug("Created output directory %s", output_dir)


def generate_icon_sizes(source_path, output_dir, assets=ICON_ASSETS):
    """Resize the source image to every asset in the table and save as PNG.

    The image is decoded once; each asset is stretched to its exact width and
    height. Returns the written paths in table order.
    """
    try:
        img = Image.open(source_path)
    except (OSError, UnidentifiedImageError, Image.DecompressionBombError) as e:
        raise GenerationError(f"Failed to open image {source_path}: {e}") from e

    written = []
    with img:
        print(f"Source image: {img.size[0]}x{img.size[1]} pixels")

        try:
            # Force the lazy decode before any resize
            img.load()
            # Convert to RGBA if not already (for transparency support)
            if img.mode != 'RGBA':
                img = img.convert('RGBA')
        except (OSError, ValueError, Image.DecompressionBombError) as e:
            raise GenerationError(f"Failed to decode image {source_path}: {e}") from e

        for asset in assets:
            output_path = os.path.join(output_dir, asset.filename)
            try:
                resized = img.resize((asset.width, asset.height), Image.Resampling.LANCZOS)
                resized.save(output_path, "PNG", optimize=True)
            except (OSError, ValueError) as e:
                raise GenerationError(f"Failed to save image({asset.filename}): {e}") from e

            logger.debug("Wrote %s", output_path)
            print(f"Generated: {asset.filename} ({asset.size_label})")
            written.append(output_path)

    return written
