"""YOLO wrapper used as the real detector ahead of the synthetic fallback."""

import uuid
from datetime import UTC, datetime
from pathlib import Path

from PIL import Image
from ultralytics import YOLO

from jalchaksh.config import YOLO_CONFIDENCE, YOLO_IMAGE_SIZE, YOLO_MODEL_NAME, YOLO_MODEL_PATH
from jalchaksh.detection.catalog import detection_method, get_profile, priority_for
from jalchaksh.detection.scorer import clamp_confidence, compute_metrics
from jalchaksh.models import BoundingBox, DetectionRecord, ImageStatistics


class YOLODetector:
    """Detect objects with an Ultralytics YOLO model.

    A model trained on the catalog classes (submarine, mine, ...) picks up
    their priorities and tags; any other label is reported as LOW priority.
    """

    def __init__(
        self,
        model_path: str | Path | None = None,
        imgsz: int = YOLO_IMAGE_SIZE,
        conf: float = YOLO_CONFIDENCE,
    ) -> None:
        path = str(model_path or YOLO_MODEL_PATH)
        self.model = YOLO(path)
        self.imgsz = imgsz
        self.conf = conf
        self.model_name = Path(path).name if model_path else YOLO_MODEL_NAME

    def detect(self, image: Image.Image, stats: ImageStatistics) -> list[DetectionRecord]:
        """Detect objects in an image and return DetectionRecord objects.

        Args:
            image: Decoded image.
            stats: Statistics of the same image, used for the derived metrics.

        Returns:
            List of DetectionRecord objects, one per non-degenerate box.
        """
        results = self.model(image.convert("RGB"), imgsz=self.imgsz, conf=self.conf, verbose=False)
        created_at = datetime.now(UTC)
        detections: list[DetectionRecord] = []

        for r in results:
            for box in r.boxes:
                x1, y1, x2, y2 = [min(1.0, max(0.0, float(v))) for v in box.xyxyn[0]]
                if x2 <= x1 or y2 <= y1:
                    continue
                bbox = BoundingBox(x=x1, y=y1, width=x2 - x1, height=y2 - y1)
                label = self.model.names[int(box.cls)]
                profile = get_profile(label)
                detections.append(
                    DetectionRecord(
                        id=f"{self.model_name}_{uuid.uuid4()}",
                        type=label,
                        priority=priority_for(label),
                        confidence=clamp_confidence(float(box.conf)),
                        bbox=bbox,
                        characteristics=profile.characteristics if profile else (),
                        metrics=compute_metrics(label, bbox, stats),
                        detection_method_label=detection_method(label),
                        created_at=created_at,
                    )
                )

        return detections
