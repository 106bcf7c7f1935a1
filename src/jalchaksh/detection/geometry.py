"""Procedural bounding boxes for synthetic detections."""

import numpy as np

from jalchaksh.models import BoundingBox, Depth, DetectionProfile, ImageStatistics

# (start, span) of the vertical placement band per depth class.
VERTICAL_BANDS: dict[Depth, tuple[float, float]] = {
    Depth.DEEP: (0.4, 0.4),
    Depth.SHALLOW: (0.2, 0.6),
}
DEFAULT_VERTICAL_BAND = (0.3, 0.5)


def _uniform(rng: np.random.Generator, low: float, high: float) -> float:
    return low + rng.random() * (high - low)


def synthesize_bbox(
    profile: DetectionProfile,
    stats: ImageStatistics,
    rng: np.random.Generator,
) -> BoundingBox:
    """Draw a box within the profile's size and aspect bounds.

    Deeper water places objects lower in the frame. The result always lies
    inside the unit square.
    """
    width = _uniform(rng, profile.min_size.width, profile.max_size.width)
    height = _uniform(rng, profile.min_size.height, profile.max_size.height)

    min_ratio, max_ratio = profile.aspect_ratio_range
    ratio = width / height
    if ratio < min_ratio:
        width = height * min_ratio
    elif ratio > max_ratio:
        height = width / max_ratio

    width = min(width, 1.0)
    height = min(height, 1.0)

    start, span = VERTICAL_BANDS.get(stats.depth, DEFAULT_VERTICAL_BAND)
    y = start + rng.random() * span

    x = rng.random() * (1 - width)
    y = min(y, 1 - height)

    return BoundingBox(x=max(0.0, x), y=max(0.0, y), width=width, height=height)
