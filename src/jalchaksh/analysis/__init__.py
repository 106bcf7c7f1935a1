"""Analysis CLI: inspect images and generate threat detections."""

import argparse
import logging
import sys

logger = logging.getLogger(__name__)


def main() -> None:
    """CLI entry point for image analysis."""
    parser = argparse.ArgumentParser(description="Jalchaksh underwater threat analysis")
    subparsers = parser.add_subparsers(dest="command")

    # detect
    detect_parser = subparsers.add_parser("detect", help="Detect threats in an image")
    detect_parser.add_argument("image", help="Path to the image file")
    detect_parser.add_argument(
        "--seed", type=int, default=None, help="Random seed (default: JALCHAKSH_SEED)"
    )
    detect_parser.add_argument(
        "--json", action="store_true", help="Print statistics and detections as JSON"
    )
    detect_parser.add_argument(
        "--yolo",
        metavar="MODEL",
        default=None,
        help="Try a YOLO model first and fall back to synthetic detections",
    )

    # stats
    stats_parser = subparsers.add_parser("stats", help="Show image statistics")
    stats_parser.add_argument("image", help="Path to the image file")
    stats_parser.add_argument(
        "--seed", type=int, default=None, help="Random seed (default: JALCHAKSH_SEED)"
    )

    # enhance
    enhance_parser = subparsers.add_parser("enhance", help="Save a colour-corrected image")
    enhance_parser.add_argument("image", help="Path to the image file")
    enhance_parser.add_argument("output", help="Where to write the enhanced image")
    enhance_parser.add_argument(
        "--seed", type=int, default=None, help="Random seed (default: JALCHAKSH_SEED)"
    )
    enhance_parser.add_argument(
        "--overlay", action="store_true", help="Draw detection boxes on the output"
    )

    # catalog
    subparsers.add_parser("catalog", help="List detection profiles")

    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return

    from jalchaksh.errors import JalchakshError
    from jalchaksh.log import setup_logging

    setup_logging()

    try:
        if args.command == "detect":
            _cmd_detect(args)
        elif args.command == "stats":
            _cmd_stats(args)
        elif args.command == "enhance":
            _cmd_enhance(args)
        elif args.command == "catalog":
            _cmd_catalog()
    except JalchakshError as e:
        print(f"Error: {e}")
        sys.exit(1)


def _make_rng(seed: int | None):
    """Build the run's random generator from --seed or the configured seed."""
    import numpy as np

    from jalchaksh.config import RANDOM_SEED

    return np.random.default_rng(seed if seed is not None else RANDOM_SEED)


def _load_detector(model: str):
    """Load a YOLO detector, or return None so detection falls back to synthetic."""
    try:
        from jalchaksh.detection.yolo_detector import YOLODetector

        return YOLODetector(model_path=model)
    except Exception:
        logger.warning(
            "YOLO model %s unavailable, using synthetic detections", model, exc_info=True
        )
        return None


def _cmd_detect(args: argparse.Namespace) -> None:
    """Run detection on one image and print the ranked results."""
    from rich.console import Console
    from rich.table import Table

    from jalchaksh.analysis.service import analyze_file
    from jalchaksh.demo.render import THREAT_TABLE_HEADERS, threat_rows
    from jalchaksh.detection.export import to_json

    detector = _load_detector(args.yolo) if args.yolo else None
    result = analyze_file(args.image, _make_rng(args.seed), detector=detector)

    if args.json:
        print(to_json(result.statistics, result.detections))
        return

    print(f"Threats detected: {len(result.detections)} ({result.source})")
    if result.detections:
        table = Table()
        for header in ["#", *THREAT_TABLE_HEADERS]:
            table.add_column(header)
        for i, row in enumerate(threat_rows(result.detections), 1):
            table.add_row(str(i), *row)
        Console().print(table)

    q = result.quality
    print(
        f"PSNR: {q.psnr:.2f}dB  SSIM: {q.ssim:.3f}  UIQM: {q.uiqm:.2f}  "
        f"Contrast: {q.contrast}%  Sharpness: {q.sharpness}%  Color: {q.colorfulness}%"
    )
    print(f"Processing completed in {result.processing_time_ms}ms")


def _cmd_stats(args: argparse.Namespace) -> None:
    """Print the statistics derived from an image."""
    from jalchaksh.analysis.loader import decode_image, load_image
    from jalchaksh.analysis.statistics import extract_statistics
    from jalchaksh.detection.export import statistics_to_dict

    decoded = decode_image(load_image(args.image))
    stats = extract_statistics(decoded.pixels, decoded.width, decoded.height, _make_rng(args.seed))
    print(f"Image: {args.image} ({decoded.width}x{decoded.height})")
    for key, value in statistics_to_dict(stats).items():
        if isinstance(value, float):
            print(f"  {key}: {value:.4f}")
        else:
            print(f"  {key}: {value}")


def _cmd_enhance(args: argparse.Namespace) -> None:
    """Write the enhanced image, optionally annotated with detections."""
    from pathlib import Path

    from jalchaksh.analysis.service import analyze_file

    result = analyze_file(args.image, _make_rng(args.seed))
    image = result.enhanced
    if args.overlay:
        from jalchaksh.demo.render import draw_detections

        image = draw_detections(image, result.detections)

    output = Path(args.output)
    output.parent.mkdir(parents=True, exist_ok=True)
    if output.suffix.lower() in {".jpg", ".jpeg"}:
        image = image.convert("RGB")
    image.save(output)
    print(f"Saved enhanced image to {output} ({len(result.detections)} detection(s))")


def _cmd_catalog() -> None:
    """Print the detection profile table."""
    from rich.console import Console
    from rich.table import Table

    from jalchaksh.detection.catalog import CATALOG, detection_method

    table = Table(title="Detection profiles")
    for header in ["Type", "Priority", "Base", "Size range", "Aspect", "Depth", "Method"]:
        table.add_column(header)
    for p in CATALOG:
        table.add_row(
            str(p.type),
            str(p.priority),
            f"{p.base_confidence:.2f}",
            f"{p.min_size.width}x{p.min_size.height} – {p.max_size.width}x{p.max_size.height}",
            f"{p.aspect_ratio_range[0]}–{p.aspect_ratio_range[1]}",
            str(p.preferred_depth),
            detection_method(p.type),
        )
    Console().print(table)
