"""Validate uploaded image files and decode them to RGBA pixel buffers."""

import mimetypes
from dataclasses import dataclass
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from jalchaksh.config import MAX_UPLOAD_BYTES
from jalchaksh.errors import UnsupportedImageFile


@dataclass(frozen=True)
class DecodedImage:
    """Interleaved RGBA pixels plus dimensions."""

    width: int
    height: int
    pixels: bytes


def validate_upload(path: str | Path, max_bytes: int = MAX_UPLOAD_BYTES) -> Path:
    """Check that a file looks like an image and is within the size limit.

    Args:
        path: File to check.
        max_bytes: Largest accepted file size.

    Returns:
        The path as a Path.

    Raises:
        UnsupportedImageFile: If the file is missing, not an image type, or too large.
    """
    path = Path(path)
    if not path.is_file():
        raise UnsupportedImageFile(f"File not found: {path}")

    mime_type, _ = mimetypes.guess_type(path.name)
    if not mime_type or not mime_type.startswith("image/"):
        raise UnsupportedImageFile(f"Please upload an image file: {path.name}")

    size = path.stat().st_size
    if size > max_bytes:
        raise UnsupportedImageFile(
            f"File size must be less than {max_bytes // (1024 * 1024)}MB "
            f"({path.name}: {size} bytes)"
        )
    return path


def load_image(path: str | Path, max_bytes: int = MAX_UPLOAD_BYTES) -> Image.Image:
    """Validate and open an image file, converted to RGBA."""
    path = validate_upload(path, max_bytes=max_bytes)
    try:
        with Image.open(path) as img:
            return img.convert("RGBA")
    except (UnidentifiedImageError, OSError) as e:
        raise UnsupportedImageFile(f"Failed to read file {path.name}: {e}") from e


def decode_image(image: Image.Image) -> DecodedImage:
    """Flatten a Pillow image into an RGBA byte buffer."""
    rgba = image if image.mode == "RGBA" else image.convert("RGBA")
    width, height = rgba.size
    return DecodedImage(width=width, height=height, pixels=rgba.tobytes())
