"""Run threat detection over every image in a directory and write JSON lines."""

import argparse
import json
from pathlib import Path

import numpy as np
from rich.progress import BarColumn, Progress, SpinnerColumn, TextColumn

from jalchaksh.analysis.service import analyze_file
from jalchaksh.config import OUTPUT_DIR, RANDOM_SEED
from jalchaksh.detection.export import quality_to_dict, record_to_dict, statistics_to_dict
from jalchaksh.errors import JalchakshError
from jalchaksh.log import setup_logging

IMAGE_SUFFIXES = {".jpg", ".jpeg", ".png", ".bmp", ".gif", ".webp", ".tif", ".tiff"}


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("directory", type=Path, help="Directory to scan (recursively)")
    parser.add_argument("--seed", type=int, default=RANDOM_SEED, help="Random seed")
    parser.add_argument(
        "--output",
        type=Path,
        default=OUTPUT_DIR / "detections.jsonl",
        help="JSON lines output file (default: output/detections.jsonl)",
    )
    args = parser.parse_args()
    setup_logging()

    paths = sorted(p for p in args.directory.rglob("*") if p.suffix.lower() in IMAGE_SUFFIXES)
    if not paths:
        print(f"No images found under {args.directory}")
        return

    rng = np.random.default_rng(args.seed)
    args.output.parent.mkdir(parents=True, exist_ok=True)
    total_detections = 0
    errors = 0

    with (
        args.output.open("w", encoding="utf-8") as out,
        Progress(
            SpinnerColumn(),
            TextColumn("[bold blue]{task.description}"),
            BarColumn(),
            TextColumn("[progress.percentage]{task.percentage:>3.0f}%"),
            TextColumn("{task.completed}/{task.total}"),
        ) as progress,
    ):
        task = progress.add_task("Detecting threats", total=len(paths))

        for path in paths:
            try:
                result = analyze_file(path, rng)
            except JalchakshError as e:
                progress.console.print(f"  -> Skipped {path}: {e}")
                errors += 1
                progress.advance(task)
                continue

            line = {
                "path": str(path),
                "source": result.source,
                "processingTimeMs": result.processing_time_ms,
                "statistics": statistics_to_dict(result.statistics),
                "quality": quality_to_dict(result.quality),
                "detections": [record_to_dict(r) for r in result.detections],
            }
            out.write(json.dumps(line, ensure_ascii=False) + "\n")
            total_detections += len(result.detections)
            progress.advance(task)

    print("\nDone.")
    print(f"  Images processed: {len(paths) - errors}")
    print(f"  Threats detected: {total_detections}")
    if errors > 0:
        print(f"  Skipped: {errors}")
    print(f"  Output: {args.output}")


if __name__ == "__main__":
    main()
