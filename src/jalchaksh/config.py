"""Project-wide configuration."""

import os
from pathlib import Path

from dotenv import load_dotenv

PROJECT_ROOT = Path(os.environ.get("JALCHAKSH_PROJECT_ROOT", Path.cwd()))

load_dotenv(PROJECT_ROOT / ".env")

OUTPUT_DIR = PROJECT_ROOT / "output"

# Uploads
MAX_UPLOAD_BYTES = 10 * 1024 * 1024

# Seed for the shared random generator (unset = fresh entropy per run)
_seed = os.environ.get("JALCHAKSH_SEED", "")
RANDOM_SEED: int | None = int(_seed) if _seed else None

LOG_LEVEL = os.environ.get("JALCHAKSH_LOG_LEVEL", "INFO")

# Optional real detector – Ultralytics YOLO
YOLO_MODEL_NAME = os.environ.get("JALCHAKSH_YOLO_MODEL", "yolo11n.pt")
YOLO_MODEL_PATH = PROJECT_ROOT / "models" / YOLO_MODEL_NAME
YOLO_IMAGE_SIZE = 640
YOLO_CONFIDENCE = 0.25
