from pathlib import Path

import pytest


@pytest.fixture
def icons_root(tmp_path: Path) -> Path:
    """An empty icon tree laid out like the default storage tiers."""
    root = tmp_path / "icons"
    for subdir in ("optimized/48", "optimized/96", "categories"):
        (root / subdir).mkdir(parents=True)
    return root


def touch(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"")
    return path
