"""
Generate a favicon and web-app icon set from a single source image
"""

__version__ = "1.0.0"
