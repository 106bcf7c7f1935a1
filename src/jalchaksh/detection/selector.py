"""Weighted accept/reject choice of the next detection type."""

import logging
from collections.abc import Collection, Sequence

import numpy as np

from jalchaksh.detection.catalog import CATALOG
from jalchaksh.errors import EmptyCatalog
from jalchaksh.models import Depth, DetectionProfile, ImageStatistics, ThreatType

logger = logging.getLogger(__name__)

BASE_PROBABILITY = 0.3

# High-value contacts are never reported twice in one image.
NO_REPEAT_TYPES = frozenset({ThreatType.SUBMARINE, ThreatType.TORPEDO})


def _probability(profile: DetectionProfile, stats: ImageStatistics) -> float:
    probability = BASE_PROBABILITY

    if profile.preferred_depth == stats.depth or profile.preferred_depth == Depth.ANY:
        probability += 0.3
    if stats.has_metallic_objects and "metallic" in profile.characteristics:
        probability += 0.4
    if stats.has_movement and "fast-moving" in profile.characteristics:
        probability += 0.3
    if stats.water_clarity > 0.7:
        probability += 0.2

    if stats.depth == Depth.DEEP:
        if profile.type == ThreatType.SUBMARINE:
            probability += 0.4
        if profile.type == ThreatType.DIVER:
            probability -= 0.3
    if stats.depth == Depth.SHALLOW:
        if profile.type == ThreatType.DIVER:
            probability += 0.3
        if profile.type == ThreatType.DRONE:
            probability += 0.2

    return probability


def candidate_probabilities(
    stats: ImageStatistics,
    catalog: Sequence[DetectionProfile] = CATALOG,
    already_chosen: Collection[str] = (),
) -> list[tuple[ThreatType, float]]:
    """Return (type, probability) pairs in scan order, highest first.

    Ties keep catalog order. Probabilities are not normalized.
    """
    if not catalog:
        raise EmptyCatalog("Detection catalog has no profiles")

    candidates = [
        (profile.type, _probability(profile, stats))
        for profile in catalog
        if not (profile.type in already_chosen and profile.type in NO_REPEAT_TYPES)
    ]
    return sorted(candidates, key=lambda c: c[1], reverse=True)


def select_threat_type(
    stats: ImageStatistics,
    rng: np.random.Generator,
    catalog: Sequence[DetectionProfile] = CATALOG,
    already_chosen: Collection[str] = (),
) -> ThreatType | None:
    """Scan candidates in probability order and accept the first that wins its draw."""
    for threat_type, probability in candidate_probabilities(stats, catalog, already_chosen):
        if rng.random() < probability:
            return threat_type
    logger.debug("No detection type accepted (already chosen: %s)", list(already_chosen))
    return None
