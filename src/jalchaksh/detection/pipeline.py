"""Synthetic detection pipeline: plan, select, synthesize, score, rank."""

import logging
from collections.abc import Callable, Iterable, Sequence
from datetime import UTC, datetime

import numpy as np

from jalchaksh.detection.catalog import CATALOG, detection_method
from jalchaksh.detection.geometry import synthesize_bbox
from jalchaksh.detection.scorer import score
from jalchaksh.detection.selector import select_threat_type
from jalchaksh.errors import EmptyCatalog
from jalchaksh.models import (
    PRIORITY_RANK,
    Depth,
    DetectionProfile,
    DetectionRecord,
    ImageStatistics,
)

logger = logging.getLogger(__name__)

MAX_DETECTIONS = 3


def utc_now() -> datetime:
    return datetime.now(UTC)


def plan_detection_count(stats: ImageStatistics, rng: np.random.Generator) -> int:
    """Decide how many detections to attempt for an image.

    Each indicator that holds gets its own draw; indicators that do not hold
    consume no randomness.
    """
    count = 0
    if stats.water_clarity > 0.7 and rng.random() < 0.6:
        count += 1
    if stats.depth == Depth.DEEP and rng.random() < 0.4:
        count += 1
    if stats.has_metallic_objects and rng.random() < 0.8:
        count += 1
    if stats.has_movement and rng.random() < 0.5:
        count += 1
    return min(MAX_DETECTIONS, max(0, count))


def sort_detections(records: Iterable[DetectionRecord]) -> list[DetectionRecord]:
    """Order by priority rank, then confidence, both descending (stable)."""
    return sorted(
        records,
        key=lambda r: (PRIORITY_RANK.get(r.priority, 1), r.confidence),
        reverse=True,
    )


def run_pipeline(
    stats: ImageStatistics,
    rng: np.random.Generator,
    catalog: Sequence[DetectionProfile] = CATALOG,
    clock: Callable[[], datetime] = utc_now,
) -> list[DetectionRecord]:
    """Generate a ranked list of synthetic detections for one image.

    An empty list is a normal result. Planned iterations whose selection
    yields nothing are dropped rather than retried, so fewer than the planned
    number of records may come back.

    Raises:
        EmptyCatalog: If ``catalog`` has no profiles.
    """
    if not catalog:
        raise EmptyCatalog("Detection catalog has no profiles")

    profiles = {p.type: p for p in catalog}
    planned = plan_detection_count(stats, rng)
    logger.debug("Planned %d synthetic detections", planned)

    chosen: list[str] = []
    records: list[DetectionRecord] = []

    for i in range(planned):
        threat_type = select_threat_type(stats, rng, catalog=catalog, already_chosen=chosen)
        if threat_type is None:
            continue

        profile = profiles[threat_type]
        bbox = synthesize_bbox(profile, stats, rng)
        confidence, metrics = score(profile, bbox, stats, rng)

        created_at = clock()
        records.append(
            DetectionRecord(
                id=f"threat_{int(created_at.timestamp() * 1000)}_{i}",
                type=str(threat_type),
                priority=profile.priority,
                confidence=confidence,
                bbox=bbox,
                characteristics=profile.characteristics,
                metrics=metrics,
                detection_method_label=detection_method(threat_type),
                created_at=created_at,
            )
        )
        chosen.append(threat_type)

    return sort_detections(records)
