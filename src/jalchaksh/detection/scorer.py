"""Confidence and derived metrics for a detection."""

import math

import numpy as np

from jalchaksh.detection.catalog import base_size
from jalchaksh.models import (
    BoundingBox,
    Depth,
    DetectionMetrics,
    DetectionProfile,
    DetectionQuality,
    ImageStatistics,
    SizeClass,
    ThreatType,
)

MIN_CONFIDENCE = 0.3
MAX_CONFIDENCE = 0.95
MAX_THREAT_LEVEL = 10

_TYPE_THREAT_BONUS: dict[str, int] = {
    ThreatType.SUBMARINE: 3,
    ThreatType.TORPEDO: 3,
    ThreatType.MINE: 2,
    ThreatType.DRONE: 2,
    ThreatType.DIVER: 1,
}


def clamp_confidence(value: float) -> float:
    return max(MIN_CONFIDENCE, min(MAX_CONFIDENCE, value))


def score_confidence(
    profile: DetectionProfile,
    stats: ImageStatistics,
    rng: np.random.Generator,
) -> float:
    """Base confidence scaled by water clarity with +/-20% jitter."""
    confidence = profile.base_confidence * stats.water_clarity
    confidence *= 0.8 + rng.random() * 0.4
    return clamp_confidence(confidence)


def size_class(area: float) -> SizeClass:
    if area > 0.1:
        return SizeClass.LARGE
    if area > 0.05:
        return SizeClass.MEDIUM
    return SizeClass.SMALL


def estimate_distance(area: float, threat_type: str) -> float:
    """Rough range in meters: a type at its base size is 50 m away."""
    if area <= 0:
        return math.inf
    return math.sqrt(base_size(threat_type) / area) * 50


def threat_level(threat_type: str, area: float, stats: ImageStatistics) -> int:
    level = 1

    if area > 0.1:
        level += 2
    elif area > 0.05:
        level += 1

    level += _TYPE_THREAT_BONUS.get(threat_type, 0)

    # Shallow water puts the contact closer to the surface.
    if stats.depth == Depth.SHALLOW:
        level += 1

    return min(MAX_THREAT_LEVEL, level)


def detection_quality(water_clarity: float) -> DetectionQuality:
    if water_clarity > 0.7:
        return DetectionQuality.HIGH
    if water_clarity > 0.4:
        return DetectionQuality.MEDIUM
    return DetectionQuality.LOW


def compute_metrics(
    threat_type: str,
    bbox: BoundingBox,
    stats: ImageStatistics,
) -> DetectionMetrics:
    """Derive display metrics; unknown types fall back to default tables."""
    area = bbox.area
    return DetectionMetrics(
        size_class=size_class(area),
        aspect_ratio=bbox.aspect_ratio,
        estimated_distance_meters=estimate_distance(area, threat_type),
        threat_level=threat_level(threat_type, area, stats),
        detection_quality=detection_quality(stats.water_clarity),
    )


def score(
    profile: DetectionProfile,
    bbox: BoundingBox,
    stats: ImageStatistics,
    rng: np.random.Generator,
) -> tuple[float, DetectionMetrics]:
    """Return (confidence, metrics) for a synthesized detection."""
    confidence = score_confidence(profile, stats, rng)
    return confidence, compute_metrics(profile.type, bbox, stats)

