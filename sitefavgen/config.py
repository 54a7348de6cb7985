from dataclasses import dataclass

from sitefavgen.errors import ConfigError

DEFAULT_OUTPUT_DIR = "public"
DEFAULT_TILE_COLOR = "#da532c"
DEFAULT_THEME_COLOR = "#ffffff"
DEFAULT_DISPLAY_MODE = "standalone"


@dataclass(frozen=True)
class FaviconConfig:
    """Everything one generation run needs"""

    source_image: str
    output_dir: str = DEFAULT_OUTPUT_DIR
    site_name: str = ""
    tile_color: str = DEFAULT_TILE_COLOR
    theme_color: str = DEFAULT_THEME_COLOR
    display_mode: str = DEFAULT_DISPLAY_MODE

    def validate(self):
        if not self.source_image:
            raise ConfigError("target image is required")

    def summary_lines(self):
        return [
            f"Target image   : {self.source_image}",
            f"Output dir     : {self.output_dir}",
            f"Your site name : {self.site_name}",
            f"Tile color     : {self.tile_color}",
            f"Theme color    : {self.theme_color}",
            f"Display mode   : {self.display_mode}",
        ]
