"""Shared test fixtures."""

from datetime import UTC, datetime

import numpy as np
import pytest

from jalchaksh.models import (
    BoundingBox,
    Depth,
    DetectionMetrics,
    DetectionProfile,
    DetectionQuality,
    DetectionRecord,
    ImageStatistics,
    Priority,
    Size,
    SizeClass,
    ThreatType,
)

FIXED_TIME = datetime(2024, 1, 1, tzinfo=UTC)


class ScriptedRandom:
    """Random source that replays fixed values, for exact control of draws."""

    def __init__(self, values, repeat_last: bool = False) -> None:
        self.values = list(values)
        self.repeat_last = repeat_last
        self.calls = 0

    def random(self) -> float:
        if self.calls >= len(self.values):
            if self.repeat_last and self.values:
                self.calls += 1
                return self.values[-1]
            raise AssertionError(f"Unexpected random draw #{self.calls + 1}")
        value = self.values[self.calls]
        self.calls += 1
        return value


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(42)


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_TIME


def make_stats(**overrides) -> ImageStatistics:
    """ImageStatistics with neutral defaults: medium depth, murky, no edges."""
    fields = dict(
        water_clarity=0.5,
        depth=Depth.MEDIUM,
        avg_brightness=120.0,
        blue_ratio=0.55,
        has_metallic_objects=False,
        has_movement=False,
        edge_density=0.0,
        dark_pixel_ratio=0.0,
    )
    fields.update(overrides)
    return ImageStatistics(**fields)


def make_profile(
    min_size: tuple[float, float] = (0.1, 0.1),
    max_size: tuple[float, float] = (0.1, 0.1),
    aspect_ratio_range: tuple[float, float] = (0.5, 2.0),
    **overrides,
) -> DetectionProfile:
    fields = dict(
        type=ThreatType.DEBRIS,
        priority=Priority.LOW,
        base_confidence=0.65,
        min_size=Size(*min_size),
        max_size=Size(*max_size),
        aspect_ratio_range=aspect_ratio_range,
        preferred_depth=Depth.ANY,
        characteristics=("irregular",),
    )
    fields.update(overrides)
    return DetectionProfile(**fields)


def make_record(
    record_id: str,
    priority: Priority = Priority.LOW,
    confidence: float = 0.5,
    threat_type: str = "debris",
    bbox: BoundingBox | None = None,
) -> DetectionRecord:
    return DetectionRecord(
        id=record_id,
        type=threat_type,
        priority=priority,
        confidence=confidence,
        bbox=bbox or BoundingBox(x=0.1, y=0.1, width=0.2, height=0.2),
        characteristics=("irregular",),
        metrics=DetectionMetrics(
            size_class=SizeClass.SMALL,
            aspect_ratio=1.0,
            estimated_distance_meters=43.3,
            threat_level=1,
            detection_quality=DetectionQuality.MEDIUM,
        ),
        detection_method_label="Visual pattern recognition",
        created_at=FIXED_TIME,
    )


def solid_pixels(width: int, height: int, rgba: tuple[int, int, int, int]) -> bytes:
    return bytes(rgba) * (width * height)
