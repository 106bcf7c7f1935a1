"""Drawing and tabulating detections for display."""

import math
from collections.abc import Iterable

from PIL import Image, ImageDraw

from jalchaksh.detection.catalog import priority_color, threat_icon
from jalchaksh.models import DetectionRecord

THREAT_TABLE_HEADERS = [
    "Type",
    "Priority",
    "Confidence",
    "Position",
    "Size",
    "Distance",
    "Threat Level",
    "Detection Method",
]


def format_distance(meters: float) -> str:
    if math.isinf(meters):
        return "n/a"
    return f"{round(meters)}m"


def threat_rows(records: Iterable[DetectionRecord]) -> list[list[str]]:
    """One display row per record, columns as in THREAT_TABLE_HEADERS."""
    rows = []
    for r in records:
        rows.append(
            [
                f"{threat_icon(r.type)} {r.type.replace('_', ' ')}",
                str(r.priority),
                f"{r.confidence * 100:.1f}%",
                f"X: {round(r.bbox.x * 100)}%, Y: {round(r.bbox.y * 100)}%",
                f"{round(r.bbox.width * 100)}×{round(r.bbox.height * 100)}%",
                format_distance(r.metrics.estimated_distance_meters),
                f"{r.metrics.threat_level}/10",
                r.detection_method_label,
            ]
        )
    return rows


def draw_detections(
    image: Image.Image,
    records: Iterable[DetectionRecord],
    line_width: int = 3,
) -> Image.Image:
    """Return a copy of ``image`` with each detection outlined in its priority colour."""
    annotated = image.convert("RGBA")
    draw = ImageDraw.Draw(annotated)
    width, height = annotated.size

    for r in records:
        color = priority_color(r.priority)
        x1 = min(width - 1, r.bbox.x * width)
        y1 = min(height - 1, r.bbox.y * height)
        x2 = max(x1, min(width - 1, (r.bbox.x + r.bbox.width) * width))
        y2 = max(y1, min(height - 1, (r.bbox.y + r.bbox.height) * height))
        draw.rectangle([x1, y1, x2, y2], outline=color, width=line_width)

        label = f"{r.type.upper()} ({r.confidence * 100:.0f}%)"
        left, top, right, bottom = draw.textbbox((x1, y1), label)
        label_top = max(0, y1 - (bottom - top) - 4)
        draw.rectangle([x1, label_top, x1 + (right - left) + 4, y1], fill=color)
        draw.text((x1 + 2, label_top + 1), label, fill="white")

        draw.text((x1 + 2, y2 - (bottom - top) - 4), f"LVL {r.metrics.threat_level}", fill=color)

    return annotated
