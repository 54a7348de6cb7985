import json
from pathlib import Path

import pytest
from PIL import Image

from sitefavgen import cli, fixed
from sitefavgen.config import FaviconConfig
from sitefavgen.core import generate_favicon_set
from sitefavgen.errors import ConfigError, GenerationError


def test_defaults_produce_public_dir(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, capsys, make_source_image
) -> None:
    monkeypatch.chdir(tmp_path)
    make_source_image(tmp_path / "test.png")

    assert cli.main(["-i", "test.png"]) == 0

    public = tmp_path / "public"
    with Image.open(public / "android-chrome-192x192.png") as img:
        assert img.size == (192, 192)
    assert '"display":"standalone"' in (public / "site.webmanifest").read_text(encoding="utf-8")
    assert "<TileColor>#da532c</TileColor>" in (public / "browserconfig.xml").read_text(encoding="utf-8")
    assert len(list(public.glob("*.png"))) == 10

    out = capsys.readouterr().out
    assert "Target image   : test.png" in out
    assert "Successfully generated." in out


def test_all_flags(source_image: Path, tmp_path: Path) -> None:
    out_dir = tmp_path / "site" / "static"

    code = cli.main([
        "-i", str(source_image),
        "-d", str(out_dir),
        "-n", "Example",
        "-tileColor", "#2b5797",
        "-themeColor", "#000000",
        "-displayMode", "minimal-ui",
    ])

    assert code == 0
    manifest = json.loads((out_dir / "site.webmanifest").read_text(encoding="utf-8"))
    assert manifest["short_name"] == "Example"
    assert manifest["background_color"] == "#000000"
    assert manifest["display"] == "minimal-ui"
    assert "<TileColor>#2b5797</TileColor>" in (out_dir / "browserconfig.xml").read_text(encoding="utf-8")


def test_missing_image_flag_exits_1(monkeypatch: pytest.MonkeyPatch, tmp_path: Path, capsys) -> None:
    monkeypatch.chdir(tmp_path)

    assert cli.main([]) == 1

    assert "ERROR: target image is required" in capsys.readouterr().out
    assert list(tmp_path.iterdir()) == []


def test_undecodable_image_exits_1(tmp_path: Path, capsys) -> None:
    src = tmp_path / "broken.png"
    src.write_bytes(b"garbage")
    out_dir = tmp_path / "out"

    assert cli.main(["-i", str(src), "-d", str(out_dir)]) == 1

    assert "[ERROR]" in capsys.readouterr().out
    assert list(out_dir.iterdir()) == []


def test_uncreatable_output_dir_exits_1(source_image: Path, tmp_path: Path) -> None:
    blocker = tmp_path / "file.txt"
    blocker.write_text("x")

    assert cli.main(["-i", str(source_image), "-d", str(blocker / "out")]) == 1


def test_rerun_overwrites(source_image: Path, tmp_path: Path) -> None:
    out_dir = tmp_path / "out"
    args = ["-i", str(source_image), "-d", str(out_dir)]

    assert cli.main(args) == 0
    assert cli.main(args + ["-tileColor", "#ffc40d"]) == 0

    assert "<TileColor>#ffc40d</TileColor>" in (out_dir / "browserconfig.xml").read_text(encoding="utf-8")


def test_run_exits_with_status(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("sys.argv", ["sitefavgen"])

    with pytest.raises(SystemExit) as exc_info:
        cli.run()

    assert exc_info.value.code == 1


def test_generate_favicon_set_result(source_image: Path, tmp_path: Path) -> None:
    config = FaviconConfig(source_image=str(source_image), output_dir=str(tmp_path / "out"))

    result = generate_favicon_set(config)

    assert len(result.icons) == 10
    assert Path(result.manifest).name == "site.webmanifest"
    assert Path(result.browserconfig).name == "browserconfig.xml"
    assert all(Path(p).exists() for p in result.files)


def test_generate_favicon_set_errors_do_not_exit(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        generate_favicon_set(FaviconConfig(source_image=""))
    with pytest.raises(GenerationError):
        generate_favicon_set(FaviconConfig(source_image=str(tmp_path / "nope.png"), output_dir=str(tmp_path)))


def test_fixed_entry_point(monkeypatch: pytest.MonkeyPatch, tmp_path: Path, make_source_image) -> None:
    monkeypatch.chdir(tmp_path)
    make_source_image(tmp_path / "test.png")

    assert fixed.main() == 0

    assert (tmp_path / "public" / "mstile-310x310.png").exists()
    assert fixed.fixed_config().tile_color == "#da532c"


def test_decompression_bomb_exits_1(
    monkeypatch: pytest.MonkeyPatch, source_image: Path, tmp_path: Path, capsys
) -> None:
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 100)

    assert cli.main(["-i", str(source_image), "-d", str(tmp_path / "out")]) == 1

    assert "[ERROR] Failed to open image" in capsys.readouterr().out
    with pytest.raises(GenerationError):
        generate_favicon_set(FaviconConfig(source_image=str(source_image), output_dir=str(tmp_path / "out")))


def test_abbreviated_flags_are_rejected(source_image: Path) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["-i", str(source_image), "-tile", "#000000"])

    assert exc_info.value.code == 2
