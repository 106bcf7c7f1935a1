"""Plain-dict and JSON views of statistics and detections."""

import json
from collections.abc import Iterable

from jalchaksh.models import DetectionRecord, ImageStatistics, QualityMetrics


def record_to_dict(record: DetectionRecord) -> dict:
    """Serialize a record using the public field names."""
    metrics = record.metrics
    return {
        "id": record.id,
        "type": record.type,
        "priority": str(record.priority),
        "confidence": record.confidence,
        "bbox": {
            "x": record.bbox.x,
            "y": record.bbox.y,
            "width": record.bbox.width,
            "height": record.bbox.height,
        },
        "characteristics": list(record.characteristics),
        "metrics": {
            "sizeClass": str(metrics.size_class),
            "aspectRatio": metrics.aspect_ratio,
            "estimatedDistanceMeters": metrics.estimated_distance_meters,
            "threatLevel": metrics.threat_level,
            "detectionQuality": str(metrics.detection_quality),
        },
        "detectionMethodLabel": record.detection_method_label,
        "createdAt": record.created_at.isoformat(),
    }


def statistics_to_dict(stats: ImageStatistics) -> dict:
    return {
        "waterClarity": stats.water_clarity,
        "depth": str(stats.depth),
        "avgBrightness": stats.avg_brightness,
        "blueRatio": stats.blue_ratio,
        "hasMetallicObjects": stats.has_metallic_objects,
        "hasMovement": stats.has_movement,
        "edgeDensity": stats.edge_density,
        "darkPixelRatio": stats.dark_pixel_ratio,
    }


def quality_to_dict(quality: QualityMetrics) -> dict:
    return {
        "psnr": quality.psnr,
        "ssim": quality.ssim,
        "uiqm": quality.uiqm,
        "contrast": quality.contrast,
        "sharpness": quality.sharpness,
        "colorfulness": quality.colorfulness,
    }


def to_json(
    stats: ImageStatistics,
    records: Iterable[DetectionRecord],
    indent: int | None = 2,
) -> str:
    """Serialize statistics and detections into one JSON document."""
    payload = {
        "statistics": statistics_to_dict(stats),
        "detections": [record_to_dict(r) for r in records],
    }
    return json.dumps(payload, indent=indent, ensure_ascii=False)
