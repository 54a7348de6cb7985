import logging
import os
from dataclasses import dataclass, field
from typing import List

from sitefavgen.assets import BROWSERCONFIG_FILENAME, MANIFEST_FILENAME
from sitefavgen.generate_icons import ensure_output_dir, generate_icon_sizes
from sitefavgen.metadata import write_browserconfig, write_web_manifest

logger = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    output_dir: str
    icons: List[str] = field(default_factory=list)
    browserconfig: str = ""
    manifest: str = ""

    @property
    def files(self):
        return self.icons + [self.browserconfig, self.manifest]


def generate_favicon_set(config):
    """Run the whole pipeline for one config.

    Images first, then browserconfig.xml, then site.webmanifest. Any failure
    raises a FaviconError and stops the run; nothing here exits the process.
    """
    config.validate()
    ensure_output_dir(config.output_dir)
    logger.debug("Generating favicon set into %s", config.output_dir)

    result = GenerationResult(output_dir=config.output_dir)
    result.icons = generate_icon_sizes(config.source_image, config.output_dir)
    result.browserconfig = write_browserconfig(
        os.path.join(config.output_dir, BROWSERCONFIG_FILENAME), config.tile_color
    )
    result.manifest = write_web_manifest(
        os.path.join(config.output_dir, MANIFEST_FILENAME),
        config.site_name,
        config.theme_color,
        config.display_mode,
    )
    return result
