"""Image metadata lookup for catalogue images."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from PIL import Image


@dataclass(frozen=True)
class ImageInfo:
    width: int
    height: int

    @property
    def size(self) -> str:
        return f"{self.width}x{self.height}"


class ImageProbe:
    """
    Reads image dimensions from disk.

    Calling a probe returns an ImageInfo, or None when the file does not
    exist. Anything else (corrupt or unsupported image, permissions)
    propagates to the caller. Relative paths are resolved against root.
    """

    def __init__(self, root: Optional[Path] = None):
        self.root = Path(root) if root else Path.cwd()

    def __call__(self, path: str) -> Optional[ImageInfo]:
        full_path = self.root / path
        try:
            # Image.open only reads the header, size is known without decoding
            with Image.open(full_path) as img:
                width, height = img.size
        except FileNotFoundError:
            return None
        return ImageInfo(width, height)
