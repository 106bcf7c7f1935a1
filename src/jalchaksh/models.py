"""Data models for image statistics and synthetic detections."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

from PIL import Image


class Depth(StrEnum):
    """Coarse water-depth class. ``ANY`` only appears as a profile preference."""

    SHALLOW = "shallow"
    MEDIUM = "medium"
    DEEP = "deep"
    ANY = "any"


class Priority(StrEnum):
    CRITICAL = "CRITICAL"
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


PRIORITY_RANK: dict[Priority, int] = {
    Priority.CRITICAL: 4,
    Priority.HIGH: 3,
    Priority.MEDIUM: 2,
    Priority.LOW: 1,
}


class ThreatType(StrEnum):
    SUBMARINE = "submarine"
    MINE = "mine"
    TORPEDO = "torpedo"
    DIVER = "diver"
    DRONE = "drone"
    DEBRIS = "debris"


class SizeClass(StrEnum):
    SMALL = "Small"
    MEDIUM = "Medium"
    LARGE = "Large"


class DetectionQuality(StrEnum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


@dataclass(frozen=True)
class ImageStatistics:
    """Summary statistics derived from one image's pixels."""

    water_clarity: float
    depth: Depth
    avg_brightness: float
    blue_ratio: float
    has_metallic_objects: bool
    has_movement: bool
    edge_density: float
    dark_pixel_ratio: float


@dataclass(frozen=True)
class Size:
    width: float
    height: float


@dataclass(frozen=True)
class DetectionProfile:
    """Catalog entry describing one detection type."""

    type: ThreatType
    priority: Priority
    base_confidence: float
    min_size: Size
    max_size: Size
    aspect_ratio_range: tuple[float, float]
    preferred_depth: Depth
    characteristics: tuple[str, ...]


@dataclass(frozen=True)
class BoundingBox:
    """Box normalized to the image extent, all values in [0, 1]."""

    x: float
    y: float
    width: float
    height: float

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height

    def within_unit_square(self) -> bool:
        return (
            self.x >= 0
            and self.y >= 0
            and self.width > 0
            and self.height > 0
            and self.x + self.width <= 1
            and self.y + self.height <= 1
        )


@dataclass(frozen=True)
class DetectionMetrics:
    size_class: SizeClass
    aspect_ratio: float
    estimated_distance_meters: float
    threat_level: int
    detection_quality: DetectionQuality


@dataclass(frozen=True)
class DetectionRecord:
    """A single detection, synthetic or from a real detector."""

    id: str
    type: str
    priority: Priority
    confidence: float
    bbox: BoundingBox
    characteristics: tuple[str, ...]
    metrics: DetectionMetrics
    detection_method_label: str
    created_at: datetime


@dataclass(frozen=True)
class QualityMetrics:
    """Display-only enhancement quality figures."""

    psnr: float
    ssim: float
    uiqm: float
    contrast: int
    sharpness: int
    colorfulness: int


@dataclass(frozen=True)
class ProcessingResult:
    """Everything produced for one processed image."""

    statistics: ImageStatistics
    detections: list[DetectionRecord]
    enhanced: Image.Image
    quality: QualityMetrics
    processing_time_ms: int
    source: str  # "synthetic" or "detector"
