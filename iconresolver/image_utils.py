import pathlib
from dataclasses import dataclass
from typing import Optional

from PIL import Image

# Formats Pillow cannot rasterize; these are reported without dimensions.
VECTOR_EXTENSIONS = {".svg"}


@dataclass
class AssetInfo:
    """Basic facts about a resolved raster icon."""

    format: str
    width: int
    height: int

    @property
    def size_label(self) -> str:
        return f"{self.width}x{self.height} {self.format}"


def inspect_asset(path: pathlib.Path) -> Optional[AssetInfo]:
    """Return format and dimensions for a raster asset, or ``None`` for vector files.

    Raises ``OSError`` when the file exists but is not a decodable image.
    """

    if path.suffix.lower() in VECTOR_EXTENSIONS:
        return None

    with Image.open(path) as img:
        fmt = img.format or path.suffix.lstrip(".").upper()
        width, height = img.size
        try:
            # verify() catches truncated files that open() alone accepts
            img.verify()
        except (SyntaxError, ValueError) as exc:
            raise OSError(f"Broken image data in {path.name}: {exc}") from exc

    return AssetInfo(format=fmt, width=width, height=height)
