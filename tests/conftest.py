from pathlib import Path

import pytest
from PIL import Image


def _save(tmp_path: Path, name: str, size, color) -> Path:
    path = tmp_path / name
    Image.new("RGBA", size, color).save(path, format="PNG")
    return path


@pytest.fixture()
def red_logo(tmp_path: Path) -> Path:
    """512x512 opaque red square."""
    return _save(tmp_path, "red.png", (512, 512), (255, 0, 0, 255))


@pytest.fixture()
def make_logo(tmp_path: Path):
    def _make(size, color=(0, 128, 255, 255), name="logo.png") -> Path:
        return _save(tmp_path, name, size, color)
    return _make


@pytest.fixture()
def res_dir(tmp_path: Path) -> Path:
    return tmp_path / "app" / "src" / "main" / "res"
