"""Process one image: statistics, detections (real or synthetic), enhancement."""

import logging
import time
from collections.abc import Callable
from datetime import datetime
from pathlib import Path
from typing import Protocol

import numpy as np
from PIL import Image

from jalchaksh.analysis.enhancement import enhance_image, sample_quality_metrics
from jalchaksh.analysis.loader import decode_image, load_image
from jalchaksh.analysis.statistics import extract_statistics
from jalchaksh.detection.pipeline import run_pipeline, sort_detections, utc_now
from jalchaksh.models import DetectionRecord, ImageStatistics, ProcessingResult

logger = logging.getLogger(__name__)


class ThreatDetector(Protocol):
    """A real detector that can stand in for the synthetic generator."""

    def detect(self, image: Image.Image, stats: ImageStatistics) -> list[DetectionRecord]: ...


def analyze_image(
    image: Image.Image,
    rng: np.random.Generator,
    detector: ThreatDetector | None = None,
    clock: Callable[[], datetime] = utc_now,
) -> ProcessingResult:
    """Run the full processing flow for a decoded image.

    The real detector, when given, is tried first; if it raises, the synthetic
    pipeline produces the detections instead.
    """
    started = time.perf_counter()

    decoded = decode_image(image)
    stats = extract_statistics(decoded.pixels, decoded.width, decoded.height, rng)

    detections: list[DetectionRecord] | None = None
    source = "synthetic"
    if detector is not None:
        try:
            detections = sort_detections(detector.detect(image, stats))
            source = "detector"
        except Exception:
            logger.warning("Detector failed, falling back to synthetic detections", exc_info=True)

    if detections is None:
        detections = run_pipeline(stats, rng, clock=clock)

    enhanced = enhance_image(image)
    quality = sample_quality_metrics(rng)
    elapsed_ms = int((time.perf_counter() - started) * 1000)

    logger.info(
        "Processed %dx%d image: %d detection(s) from %s in %d ms",
        decoded.width,
        decoded.height,
        len(detections),
        source,
        elapsed_ms,
    )
    return ProcessingResult(
        statistics=stats,
        detections=detections,
        enhanced=enhanced,
        quality=quality,
        processing_time_ms=elapsed_ms,
        source=source,
    )


def analyze_file(
    path: str | Path,
    rng: np.random.Generator,
    detector: ThreatDetector | None = None,
) -> ProcessingResult:
    """Validate, load and process an image file."""
    return analyze_image(load_image(path), rng, detector=detector)
