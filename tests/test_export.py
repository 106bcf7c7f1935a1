"""Tests for dictionary and JSON export."""

import json

from conftest import make_record, make_stats

from jalchaksh.detection.export import quality_to_dict, record_to_dict, statistics_to_dict, to_json
from jalchaksh.models import Priority, QualityMetrics


def test_record_field_names():
    data = record_to_dict(make_record("threat_1_0", Priority.HIGH, 0.75, threat_type="mine"))
    assert set(data) == {
        "id",
        "type",
        "priority",
        "confidence",
        "bbox",
        "characteristics",
        "metrics",
        "detectionMethodLabel",
        "createdAt",
    }
    assert set(data["bbox"]) == {"x", "y", "width", "height"}
    assert set(data["metrics"]) == {
        "sizeClass",
        "aspectRatio",
        "estimatedDistanceMeters",
        "threatLevel",
        "detectionQuality",
    }
    assert data["type"] == "mine"
    assert data["priority"] == "HIGH"
    assert data["metrics"]["sizeClass"] == "Small"
    assert data["characteristics"] == ["irregular"]
    assert data["createdAt"] == "2024-01-01T00:00:00+00:00"


def test_statistics_field_names():
    data = statistics_to_dict(make_stats())
    assert data["depth"] == "medium"
    assert set(data) == {
        "waterClarity",
        "depth",
        "avgBrightness",
        "blueRatio",
        "hasMetallicObjects",
        "hasMovement",
        "edgeDensity",
        "darkPixelRatio",
    }


def test_quality_to_dict():
    quality = QualityMetrics(
        psnr=28.5, ssim=0.892, uiqm=3.24, contrast=92, sharpness=87, colorfulness=89
    )
    assert quality_to_dict(quality)["ssim"] == 0.892


def test_to_json_round_trips_through_json():
    payload = json.loads(to_json(make_stats(), [make_record("a"), make_record("b")]))
    assert [d["id"] for d in payload["detections"]] == ["a", "b"]
    assert payload["statistics"]["waterClarity"] == 0.5
