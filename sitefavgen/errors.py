class FaviconError(Exception):
    """Base error for favicon generation"""


class ConfigError(FaviconError):
    """Required input is missing or unusable"""


class GenerationError(FaviconError):
    """An image or metadata file could not be produced"""
