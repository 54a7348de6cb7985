#!/usr/bin/env python3
"""
Generate the favicon set with hard-coded settings, no flags
"""

import sys

from sitefavgen.cli import configure_logging, run_generation
from sitefavgen.config import FaviconConfig

SOURCE_IMAGE = "test.png"
OUTPUT_DIR = "public"
SITE_NAME = ""
TILE_COLOR = "#da532c"
THEME_COLOR = "#ffffff"
DISPLAY_MODE = "standalone"


def fixed_config():
    return FaviconConfig(
        source_image=SOURCE_IMAGE,
        output_dir=OUTPUT_DIR,
        site_name=SITE_NAME,
        tile_color=TILE_COLOR,
        theme_color=THEME_COLOR,
        display_mode=DISPLAY_MODE,
    )


def main():
    configure_logging()
    return run_generation(fixed_config())


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
