"""Heuristic statistics over raw RGBA pixel buffers."""

import logging

import numpy as np

from jalchaksh.errors import InvalidImageData
from jalchaksh.models import Depth, ImageStatistics

logger = logging.getLogger(__name__)

EDGE_THRESHOLD = 30
DARK_PIXEL_THRESHOLD = 50
METALLIC_EDGE_DENSITY = 0.05
MOVEMENT_PROBABILITY = 0.3


def classify_depth(blue_ratio: float, avg_brightness: float) -> Depth:
    """Infer a coarse depth class from colour balance and brightness."""
    if blue_ratio > 0.7 or avg_brightness < 80:
        return Depth.DEEP
    if blue_ratio > 0.5:
        return Depth.MEDIUM
    return Depth.SHALLOW


def water_clarity(avg_brightness: float, blue_ratio: float) -> float:
    clarity = (avg_brightness / 128) * (1 - blue_ratio * 0.5)
    return max(0.2, min(1.0, clarity))


def _as_flat_buffer(pixels) -> np.ndarray:
    if isinstance(pixels, (bytes, bytearray, memoryview)):
        return np.frombuffer(pixels, dtype=np.uint8)
    return np.asarray(pixels).reshape(-1)


def extract_statistics(
    pixels,
    width: int,
    height: int,
    rng: np.random.Generator,
) -> ImageStatistics:
    """Summarize an interleaved RGBA buffer.

    Args:
        pixels: RGBA buffer as bytes or a NumPy array, ``width * height * 4`` values.
        width: Image width in pixels.
        height: Image height in pixels.
        rng: Random source; consumed once for the movement flag.

    Returns:
        ImageStatistics for the image.

    Raises:
        InvalidImageData: If the dimensions are not positive or the buffer
            length does not match them.
    """
    if width <= 0 or height <= 0:
        raise InvalidImageData(f"Image dimensions must be positive, got {width}x{height}")

    flat = _as_flat_buffer(pixels)
    expected = width * height * 4
    if flat.size != expected:
        raise InvalidImageData(
            f"Pixel buffer has {flat.size} values, expected {expected} for {width}x{height} RGBA"
        )

    rgb = flat.reshape(height, width, 4)[..., :3].astype(np.float64)
    brightness = rgb.sum(axis=2) / 3
    pixel_count = width * height

    avg_brightness = float(brightness.mean())
    avg_red, avg_green, avg_blue = (float(v) for v in rgb.reshape(-1, 3).mean(axis=0))
    channel_total = avg_red + avg_green + avg_blue
    blue_ratio = avg_blue / channel_total if channel_total > 0 else 0.0

    # Vertical-neighbour contrast; first and last rows have no neighbour pair.
    edge_pixels = 0
    if height >= 3:
        middle = brightness[1:-1]
        above = np.abs(middle - brightness[:-2]) > EDGE_THRESHOLD
        below = np.abs(middle - brightness[2:]) > EDGE_THRESHOLD
        edge_pixels = int(np.count_nonzero(above | below))

    edge_density = edge_pixels / pixel_count
    dark_pixel_ratio = int(np.count_nonzero(brightness < DARK_PIXEL_THRESHOLD)) / pixel_count

    stats = ImageStatistics(
        water_clarity=water_clarity(avg_brightness, blue_ratio),
        depth=classify_depth(blue_ratio, avg_brightness),
        avg_brightness=avg_brightness,
        blue_ratio=blue_ratio,
        has_metallic_objects=edge_density > METALLIC_EDGE_DENSITY,
        # Stand-in for motion: a still frame carries no temporal signal.
        has_movement=bool(rng.random() < MOVEMENT_PROBABILITY),
        edge_density=edge_density,
        dark_pixel_ratio=dark_pixel_ratio,
    )
    logger.debug("Image statistics for %dx%d: %s", width, height, stats)
    return stats
