#!/usr/bin/env python3
"""
Command-line entry point: generate a favicon set from flags
"""

import argparse
import logging
import os
import sys

from sitefavgen import __version__
from sitefavgen.config import (
    DEFAULT_DISPLAY_MODE,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_THEME_COLOR,
    DEFAULT_TILE_COLOR,
    FaviconConfig,
)
from sitefavgen.core import generate_favicon_set
from sitefavgen.errors import ConfigError, FaviconError

logger = logging.getLogger(__name__)

BANNER = "========== sitefavgen =========="
RULE = "=" * len(BANNER)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="sitefavgen",
        description="Generate favicons, browserconfig.xml and site.webmanifest from one image.",
        allow_abbrev=False,
    )
    parser.add_argument("-i", dest="source_image", default="",
                        help="[Required] Specify target image.")
    parser.add_argument("-d", dest="output_dir", default=DEFAULT_OUTPUT_DIR,
                        help="Specify output directory. If the directory does not exist, create it.")
    parser.add_argument("-n", dest="site_name", default="",
                        help="Specify your site name.")
    parser.add_argument("-tileColor", dest="tile_color", default=DEFAULT_TILE_COLOR,
                        help="Specify tile color.")
    parser.add_argument("-themeColor", dest="theme_color", default=DEFAULT_THEME_COLOR,
                        help="Specify theme color.")
    parser.add_argument("-displayMode", dest="display_mode", default=DEFAULT_DISPLAY_MODE,
                        help="Specify display mode.")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable debug logging.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def configure_logging(verbose=False):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def run_generation(config):
    """Print the summary, run the pipeline and report. Returns the exit code."""
    print(BANNER)
    print(RULE)

    try:
        config.validate()
    except ConfigError as e:
        print(f"ERROR: {e}")
        return 1

    for line in config.summary_lines():
        print(line)
    print(RULE)
    print()

    try:
        result = generate_favicon_set(config)
    except FaviconError as e:
        logger.debug("Generation failed", exc_info=True)
        print(f"[ERROR] {e}")
        return 1

    print("\n📋 Files created:")
    for filepath in result.files:
        file_size = os.path.getsize(filepath)
        print(f"  - {os.path.basename(filepath)} ({file_size} bytes)")

    print("\nSuccessfully generated.")
    return 0


def main(argv=None):
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    config = FaviconConfig(
        source_image=args.source_image,
        output_dir=args.output_dir,
        site_name=args.site_name,
        tile_color=args.tile_color,
        theme_color=args.theme_color,
        display_mode=args.display_mode,
    )
    return run_generation(config)


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
