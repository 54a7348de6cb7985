from pathlib import Path

import pytest
from PIL import Image


def write_source_image(path: Path, size=(640, 480), mode="RGB") -> Path:
    image = Image.new(mode, size, color=(64, 128, 192) if mode == "RGB" else (64, 128, 192, 255))
    image.save(path, format="PNG")
    return path


@pytest.fixture()
def source_image(tmp_path: Path) -> Path:
    """A non-square PNG so stretching to each asset size is exercised."""
    return write_source_image(tmp_path / "source.png")


@pytest.fixture()
def make_source_image():
    return write_source_image
